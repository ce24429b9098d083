# SPDX-License-Identifier: MIT
"""
pwcheck - Command Line Interface

This CLI provides:
- pwcheck version
- pwcheck analyze <export.csv> --format {text,json} --policy <path>
  --min-length N --issues {all,reuseOnly,weakOnly} --sort {risk,reuseCount,domain}
  --search <text>

Passwords are never printed, in any format.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .core.exceptions import PwcheckError

logger = logging.getLogger(__name__)


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    p = argparse.ArgumentParser(
        prog="pwcheck", description="Password reuse and weakness report"
    )
    p.add_argument("-v", "--version", action="store_true", help="print version and exit")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("version", help="print version")

    ap = sub.add_parser("analyze", help="analyze a password-manager CSV export")
    ap.add_argument("export", help="path to the CSV export (name,url,username,password,note)")
    ap.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="output format (default: text)"
    )
    ap.add_argument(
        "--policy",
        help="path to policy YAML file (default: .pwcheck.yml if present)"
    )
    ap.add_argument(
        "--min-length",
        dest="min_length",
        help="minimum password length (6-64, default 12)"
    )
    ap.add_argument(
        "--issues",
        dest="issue_mode",
        choices=["all", "reuseOnly", "weakOnly", "reuse", "weak"],
        help="show all accounts, only reused, or only weak ones"
    )
    ap.add_argument(
        "--sort",
        dest="sort_mode",
        choices=["risk", "reuseCount", "domain"],
        help="result order (default: risk)"
    )
    ap.add_argument(
        "--search",
        default="",
        help="only show accounts whose domain, site, username or URL contains this text"
    )
    ap.add_argument(
        "--include-dev-urls",
        dest="include_dev_urls",
        action="store_true",
        help="keep localhost and private-network entries"
    )
    ap.add_argument(
        "--demo",
        action="store_true",
        help="mask domains, usernames and URLs for screenshots"
    )
    ap.add_argument(
        "--fixes",
        action="store_true",
        help="print suggested fixes for each account (text format)"
    )
    ap.add_argument(
        "--json-out",
        dest="json_out",
        help="write JSON results to file"
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="enable debug logging"
    )

    args = p.parse_args(argv)

    if args.version or args.cmd == "version":
        print(__version__)
        return 0

    if args.cmd == "analyze":
        _configure_logging(args.verbose)
        try:
            return handle_analyze_command(args)
        except PwcheckError as e:
            print(f"{e.label}: {e}", file=sys.stderr)
            return 1

    p.print_help()
    return 0


def _configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[pwcheck] %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def handle_analyze_command(args):
    """Handle the analyze subcommand."""
    from .core.redaction import mask_report, mask_result_row
    from .ingest.csv_import import load_export
    from .policy.loader import load_policy_config
    from .project.fixes import suggest_fixes
    from .project.results import AnalysisSnapshot, ProjectionParams

    policy_config = load_policy_config(args.policy)

    if args.min_length is not None:
        policy_config["min_length"] = args.min_length
    if args.issue_mode:
        policy_config["issue_mode"] = args.issue_mode
    if args.sort_mode:
        policy_config["sort_mode"] = args.sort_mode
    if args.include_dev_urls:
        policy_config["ignore_dev_urls"] = False
    if args.demo:
        policy_config["demo_mode"] = True

    imported = load_export(args.export, ignore_dev_urls=policy_config["ignore_dev_urls"])
    params = ProjectionParams.from_policy(policy_config, search_query=args.search)
    snapshot = AnalysisSnapshot.build(imported.entries, params=params, urls=imported.urls)

    rows = snapshot.results()
    summary = snapshot.summary()
    demo = policy_config["demo_mode"]

    serialized_rows = [row.to_dict() for row in rows]
    if demo:
        serialized_rows = [mask_result_row(row) for row in serialized_rows]
    for serialized, row in zip(serialized_rows, rows):
        serialized["fixes"] = suggest_fixes(
            row.reuse_count, row.weak_reasons, params.min_length
        )

    results = {
        "report": snapshot.report.to_dict(),
        "summary": summary,
        "policy": {
            "minLength": params.min_length,
            "issueMode": params.issue_mode,
            "sortMode": params.sort_mode,
            "searchQuery": params.search_query,
        },
        "results": serialized_rows,
    }
    if demo:
        results["report"] = mask_report(results["report"])

    if args.json_out:
        Path(args.json_out).write_text(json.dumps(results, indent=2), encoding="utf-8")
        logger.info("JSON output written to %s", args.json_out)
        if args.format == "text":
            print(f"JSON output written to {args.json_out}")

    if args.format == "json":
        print(json.dumps(results, indent=2))
    else:
        print_text_summary(results, show_fixes=args.fixes)

    return 0


def print_text_summary(results, show_fixes=False):
    """Print a text summary of the projected results."""
    summary = results["summary"]
    policy = results["policy"]
    groups = results["report"]["reuseGroups"]
    rows = results["results"]

    print("\npwcheck Report")
    print("=" * 50)
    print(f"Accounts analyzed: {summary['total']}")
    print(f"Weak (min length {policy['minLength']}): {summary['weak']}")
    print(f"Reuse groups: {summary['reusedGroups']}")
    print(f"Accounts with reused passwords: {summary['reusedAccounts']}")

    if groups:
        print("\nReused passwords:")
        for number, group in enumerate(groups, start=1):
            members = ", ".join(
                f"{s['site']} ({s['username']})" if s["username"] else s["site"]
                for s in group["sites"]
            )
            print(f"  #{number} shared by {group['count']}: {members}")

    print(
        f"\nResults ({len(rows)} shown, issues={policy['issueMode']}, "
        f"sort={policy['sortMode']})"
    )
    if policy["searchQuery"].strip():
        print(f"  search: {policy['searchQuery'].strip()}")
    for row in rows:
        reasons = ", ".join(row["weakReasons"]) or "-"
        username = row["username"] or "-"
        print(
            f"  [{row['risk']:<6}] {row['domain']}  {username}  "
            f"reuse={row['reuseCount']}  {reasons}"
        )
        if show_fixes:
            for fix in row["fixes"]:
                print(f"      - {fix}")


if __name__ == "__main__":
    raise SystemExit(main())
