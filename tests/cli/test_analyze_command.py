#!/usr/bin/env python3
"""Test the analyze command end to end."""

import json

import pytest

from pwcheck.cli import main

EXPORT = """name,url,username,password,note
GitHub,https://github.com,alice@mail.example,Shared!Pass1,
GitLab,https://gitlab.com,alice@mail.example,Shared!Pass1,
Bank,https://bank.example,alice,hunter2,
,https://forum.example.net,al,Un1que!Passw0rd,
Router,http://192.168.1.1,admin,admin,
Empty,https://empty.example,nobody,,
"""


@pytest.fixture
def export_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "export.csv"
    path.write_text(EXPORT, encoding="utf-8")
    return path


def run_json(capsys, *args):
    assert main(["analyze", *args, "--format", "json"]) == 0
    return json.loads(capsys.readouterr().out)


def test_json_output(export_file, capsys):
    """JSON output carries the report, live summary and sorted rows."""
    data = run_json(capsys, str(export_file))

    assert data["report"]["summary"] == {
        "total": 4,
        "weak": 1,
        "reusedGroups": 1,
        "reusedAccounts": 2,
    }
    assert data["summary"]["weak"] == 1
    assert data["policy"] == {
        "minLength": 12,
        "issueMode": "all",
        "sortMode": "risk",
        "searchQuery": "",
    }
    assert [row["domain"] for row in data["results"]][:2] == ["GitHub", "GitLab"]
    assert data["results"][2]["domain"] == "Bank"
    assert data["results"][2]["risk"] == "MEDIUM"
    assert data["results"][3]["url"] == "https://forum.example.net"


def test_passwords_never_printed(export_file, capsys):
    for fmt in ("json", "text"):
        assert main(["analyze", str(export_file), "--format", fmt, "--fixes"]) == 0
        output = capsys.readouterr()
        for secret in ("Shared!Pass1", "hunter2", "Un1que!Passw0rd"):
            assert secret not in output.out
            assert secret not in output.err


def test_include_dev_urls(export_file, capsys):
    data = run_json(capsys, str(export_file), "--include-dev-urls")
    assert data["report"]["summary"]["total"] == 5


def test_live_min_length_and_filter(export_file, capsys):
    data = run_json(capsys, str(export_file), "--issues", "weak", "--min-length", "16")

    assert data["policy"]["issueMode"] == "weakOnly"
    assert data["policy"]["minLength"] == 16
    assert [row["domain"] for row in data["results"]] == ["GitHub", "GitLab", "Bank", "forum.example.net"]
    assert data["results"][0]["weakReasons"] == ["Length < 16"]


def test_invalid_min_length_defaults(export_file, capsys):
    data = run_json(capsys, str(export_file), "--min-length", "lots")
    assert data["policy"]["minLength"] == 12


def test_search_and_sort(export_file, capsys):
    data = run_json(capsys, str(export_file), "--search", "ALICE", "--sort", "domain")
    assert [row["domain"] for row in data["results"]] == ["Bank", "GitHub", "GitLab"]


def test_demo_masks_output(export_file, capsys):
    data = run_json(capsys, str(export_file), "--demo")

    text = json.dumps(data)
    assert "alice@mail.example" not in text
    assert "user@mail.example" in text
    assert "forum.example.net" not in text


def test_demo_masks_url_paths_in_report(tmp_path, capsys, monkeypatch):
    """URL-only sites lose their path in the report section too."""
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "urls.csv"
    path.write_text(
        "name,url,username,password,note\n"
        ",https://corp.example.com/users/alice-secret,alice,Shared!Pass1,\n"
        ",https://team.example.org/team/bob-private,bob,Shared!Pass1,\n",
        encoding="utf-8",
    )

    data = run_json(capsys, str(path), "--demo")

    text = json.dumps(data)
    assert "alice-secret" not in text
    assert "bob-private" not in text
    assert data["report"]["reuseGroups"][0]["sites"] == [
        {"site": "site.com", "username": "user"},
        {"site": "site.org", "username": "user"},
    ]


def test_policy_file_and_override(export_file, capsys, tmp_path):
    policy = tmp_path / "policy.yml"
    policy.write_text("version: 1\nsort_mode: domain\nmin_length: 8\n")

    data = run_json(capsys, str(export_file), "--policy", str(policy), "--sort", "reuseCount")
    assert data["policy"]["sortMode"] == "reuseCount"
    assert data["policy"]["minLength"] == 8


def test_json_out(export_file, capsys, tmp_path):
    out = tmp_path / "out.json"
    assert main(["analyze", str(export_file), "--json-out", str(out)]) == 0

    assert "JSON output written to" in capsys.readouterr().out
    assert json.loads(out.read_text())["report"]["summary"]["total"] == 4


def test_text_output(export_file, capsys):
    assert main(["analyze", str(export_file), "--fixes"]) == 0
    out = capsys.readouterr().out

    assert "Accounts analyzed: 4" in out
    assert "shared by 2: GitHub (alice@mail.example), GitLab (alice@mail.example)" in out
    assert "Change this password so it is unique" in out


def test_bad_policy(export_file, capsys, tmp_path):
    """Bad config produces a friendly error with no traceback."""
    bad = tmp_path / "bad.yml"
    bad.write_text("sort_mode: [risk\n")

    assert main(["analyze", str(export_file), "--policy", str(bad)]) == 1
    err = capsys.readouterr().err
    assert "CONFIG ERROR:" in err
    assert str(bad.resolve()) in err
    assert "Traceback" not in err


def test_missing_columns(tmp_path, capsys):
    export = tmp_path / "export.csv"
    export.write_text("site,user,pass\na,b,c\n")

    assert main(["analyze", str(export)]) == 1
    err = capsys.readouterr().err
    assert "INPUT ERROR: Missing required columns: name, url, username, password, note" in err


def test_missing_export(tmp_path, capsys):
    assert main(["analyze", str(tmp_path / "nope.csv")]) == 1
    assert "INPUT ERROR:" in capsys.readouterr().err
