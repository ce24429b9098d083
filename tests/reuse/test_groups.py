# SPDX-License-Identifier: MIT
"""
Tests for password reuse grouping.
"""
from pwcheck.core.entries import AccountKey, Entry
from pwcheck.reuse.groups import find_reuse_groups


class TestFindReuseGroups:
    """Test grouping by exact password value."""

    def test_pair_forms_one_group_in_first_seen_order(self):
        entries = [
            Entry("b.com", "bob", "Shared!Pass1"),
            Entry("a.com", "alice", "Shared!Pass1"),
        ]
        groups = find_reuse_groups(entries)

        assert len(groups) == 1
        assert groups[0].count == 2
        assert groups[0].sites == (AccountKey("b.com", "bob"), AccountKey("a.com", "alice"))

    def test_unique_passwords_produce_no_groups(self):
        entries = [Entry("a.com", "u", "one"), Entry("b.com", "u", "two")]
        assert find_reuse_groups(entries) == []

    def test_matching_is_case_sensitive_and_exact(self):
        entries = [
            Entry("a.com", "u", "Secret"),
            Entry("b.com", "u", "secret"),
            Entry("c.com", "u", "Secret "),
        ]
        assert find_reuse_groups(entries) == []

    def test_groups_sorted_by_size_descending(self):
        entries = [
            Entry("a.com", "u", "pairpw"),
            Entry("b.com", "u", "pairpw"),
            Entry("c.com", "u", "triplepw"),
            Entry("d.com", "u", "triplepw"),
            Entry("e.com", "u", "triplepw"),
        ]
        groups = find_reuse_groups(entries)

        assert [g.count for g in groups] == [3, 2]
        assert groups[0].sites[0] == AccountKey("c.com", "u")

    def test_equal_sizes_keep_first_seen_password_order(self):
        entries = [
            Entry("a.com", "u1", "first"),
            Entry("b.com", "u1", "second"),
            Entry("c.com", "u2", "second"),
            Entry("d.com", "u2", "first"),
        ]
        groups = find_reuse_groups(entries)

        assert [g.sites[0].site for g in groups] == ["a.com", "b.com"]

    def test_count_matches_members(self):
        entries = [Entry(f"s{i}.com", "u", "same") for i in range(5)]
        groups = find_reuse_groups(entries)

        assert groups[0].count == len(groups[0].sites) == 5
