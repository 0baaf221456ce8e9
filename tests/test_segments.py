"""Tests for environment variable name resolution."""

from __future__ import annotations

import pytest

from envtree.segments import iter_partitions, resolve_segments, split_env_name


class TestSplitEnvName:
    """Tests for split_env_name function."""

    def test_simple_name(self) -> None:
        """Test splitting a plain prefixed name."""
        assert split_env_name("LIBRELOGIN_MAIL_HOST", "LIBRELOGIN_") == ["mail", "host"]

    def test_other_prefix_is_ignored(self) -> None:
        """Test that names without the prefix return None."""
        assert split_env_name("OTHER_MAIL_HOST", "LIBRELOGIN_") is None

    def test_prefix_is_case_sensitive(self) -> None:
        """Test that the prefix must match exactly."""
        assert split_env_name("librelogin_mail_host", "LIBRELOGIN_") is None

    def test_leading_underscores_are_stripped(self) -> None:
        """Test that separators right after the prefix are dropped."""
        assert split_env_name("LIBRELOGIN___MAIL_HOST", "LIBRELOGIN_") == [
            "mail",
            "host",
        ]

    def test_double_underscore_gives_empty_word(self) -> None:
        """Test that doubled underscores are not a level delimiter."""
        assert split_env_name("LIBRELOGIN_MAIL__HOST", "LIBRELOGIN_") == [
            "mail",
            "",
            "host",
        ]

    def test_trailing_underscores_are_ignored(self) -> None:
        """Test that trailing separators do not add empty words."""
        assert split_env_name("LIBRELOGIN_DEBUG__", "LIBRELOGIN_") == ["debug"]

    def test_prefix_only(self) -> None:
        """Test that a bare prefix gives no words."""
        assert split_env_name("LIBRELOGIN_", "LIBRELOGIN_") == []

    def test_words_are_lowercased(self) -> None:
        """Test that words are lower-cased."""
        assert split_env_name("APP_Mail_HOST", "APP_") == ["mail", "host"]

    def test_prefix_without_separator(self) -> None:
        """Test a prefix that does not end with an underscore."""
        assert split_env_name("APP_TOTP_ENABLED", "APP") == ["totp", "enabled"]


class TestIterPartitions:
    """Tests for iter_partitions function."""

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 6])
    def test_partition_count(self, count: int) -> None:
        """Test that n words have 2^(n-1) groupings."""
        words = [f"w{i}" for i in range(count)]
        assert len(list(iter_partitions(words))) == 2 ** (count - 1)

    def test_partitions_are_unique(self) -> None:
        """Test that no grouping is produced twice."""
        partitions = list(iter_partitions(["a", "b", "c", "d", "e"]))
        assert len(set(partitions)) == len(partitions)

    def test_ascending_group_count(self) -> None:
        """Test that groupings come with fewest segments first."""
        sizes = [len(p) for p in iter_partitions(["a", "b", "c", "d"])]
        assert sizes == sorted(sizes)
        assert sizes[0] == 1
        assert sizes[-1] == 4

    def test_order_within_same_group_count(self) -> None:
        """Test that shorter leading segments come first."""
        assert list(iter_partitions(["a", "b", "c"])) == [
            ("a-b-c",),
            ("a", "b-c"),
            ("a-b", "c"),
            ("a", "b", "c"),
        ]

    def test_single_word(self) -> None:
        """Test the single grouping of one word."""
        assert list(iter_partitions(["mail"])) == [("mail",)]

    def test_no_words(self) -> None:
        """Test that no words yield no groupings."""
        assert list(iter_partitions([])) == []

    def test_every_grouping_rejoins_to_words(self) -> None:
        """Test that each grouping covers all words in order."""
        words = ["allowed", "commands", "while", "unauthorized"]
        for partition in iter_partitions(words):
            assert "-".join(partition) == "-".join(words)


class TestResolveSegments:
    """Tests for resolve_segments function."""

    def test_exact_two_level_match(self) -> None:
        """Test a two-segment path that is a known key."""
        assert resolve_segments(["mail", "host"], {"mail.host"}) == ("mail", "host")

    def test_hyphen_reconstruction(self) -> None:
        """Test recovery of a single hyphenated top-level segment."""
        words = ["allowed", "commands", "while", "unauthorized"]
        known = {"allowed-commands-while-unauthorized"}
        assert resolve_segments(words, known) == (
            "allowed-commands-while-unauthorized",
        )

    def test_hyphenated_leaf_under_section(self) -> None:
        """Test recovery of a hyphenated segment below a section."""
        words = ["limbo", "max", "login", "attempts"]
        known = {"limbo.max-login-attempts", "mail.host"}
        assert resolve_segments(words, known) == ("limbo", "max-login-attempts")

    def test_hyphenated_section(self) -> None:
        """Test recovery of a hyphenated section name."""
        words = ["new", "uuid", "creator", "enabled"]
        known = {"new-uuid-creator.enabled"}
        assert resolve_segments(words, known) == ("new-uuid-creator", "enabled")

    def test_fallback_when_nothing_matches(self) -> None:
        """Test the per-word fallback with no known keys."""
        assert resolve_segments(["foo", "bar"], set()) == ("foo", "bar")

    def test_fallback_normalizes_hyphens(self) -> None:
        """Test that literal hyphens become underscores in the fallback."""
        assert resolve_segments(["foo-bar", "baz"], set()) == ("foo_bar", "baz")

    def test_fewer_segments_win(self) -> None:
        """Test that the grouping with fewer segments is preferred."""
        known = {"session-timeout", "session.timeout"}
        assert resolve_segments(["session", "timeout"], known) == ("session-timeout",)

    def test_shorter_leading_segment_wins_tie(self) -> None:
        """Test the tie-break between groupings with equal segment counts."""
        known = {"a-b.c", "a.b-c"}
        assert resolve_segments(["a", "b", "c"], known) == ("a", "b-c")

    def test_match_is_case_insensitive(self) -> None:
        """Test that candidates are lower-cased before matching."""
        assert resolve_segments(["MAIL", "HOST"], {"mail.host"}) == ("MAIL", "HOST")

    def test_no_words(self) -> None:
        """Test that no words resolve to an empty path."""
        assert resolve_segments([], {"mail.host"}) == ()

    def test_partial_prefix_is_not_a_match(self) -> None:
        """Test that a section path alone does not count as a key."""
        assert resolve_segments(["mail", "smtp", "host"], {"mail.smtp-host"}) == (
            "mail",
            "smtp-host",
        )
        assert resolve_segments(["mail", "smtp", "host"], {"mail"}) == (
            "mail",
            "smtp",
            "host",
        )

    def test_long_name_resolves(self) -> None:
        """Test a name near the practical word limit."""
        words = [f"w{i}" for i in range(12)]
        known = {"-".join(words[:6]) + "." + "-".join(words[6:])}
        assert resolve_segments(words, known) == (
            "-".join(words[:6]),
            "-".join(words[6:]),
        )
