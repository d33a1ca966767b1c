"""Tests for the sanitizer module — pure function tests, no filesystem access."""

from __future__ import annotations

import pytest

from filename_normalizer.sanitizer import (
    SUBSTITUTION_MAP,
    UNIX_FORBIDDEN_CHARS,
    WINDOWS_FORBIDDEN_CHARS,
    PlatformProfile,
    detect_platform,
    is_name_safe,
    remove_spaces,
    replace_forbidden_chars,
    sanitize,
    sanitize_name,
    split_extension,
    substitute_chars,
)

UNIX = PlatformProfile.UNIX
WINDOWS = PlatformProfile.WINDOWS
UNKNOWN = PlatformProfile.UNKNOWN

# ---------------------------------------------------------------------------
# substitute_chars
# ---------------------------------------------------------------------------


class TestSubstituteChars:
    def test_uppercase_a(self) -> None:
        result, issues = substitute_chars("Alpha")
        assert result == "alpha"
        assert len(issues) == 1

    def test_cedilla_both_cases(self) -> None:
        result, _ = substitute_chars("Çç")
        assert result == "cc"

    def test_one_becomes_zero(self) -> None:
        result, _ = substitute_chars("v1.1")
        assert result == "v0.0"

    def test_uppercase_g(self) -> None:
        result, _ = substitute_chars("GG")
        assert result == "gg"

    def test_tildes(self) -> None:
        result, _ = substitute_chars("ãõ")
        assert result == "ao"

    def test_unmapped_letters_untouched(self) -> None:
        """Only the listed characters change: this is not a transliteration."""
        result, issues = substitute_chars("BCDÃÕéü2")
        assert result == "BCDÃÕéü2"
        assert issues == []

    def test_issue_lists_characters(self) -> None:
        _, issues = substitute_chars("Gç")
        assert "G" in issues[0]
        assert "ç" in issues[0]

    def test_map_values_are_not_keys(self) -> None:
        for value in SUBSTITUTION_MAP.values():
            assert value not in SUBSTITUTION_MAP


# ---------------------------------------------------------------------------
# replace_forbidden_chars
# ---------------------------------------------------------------------------


class TestReplaceForbiddenChars:
    def test_windows_colon(self) -> None:
        result, issues = replace_forbidden_chars("file:name", WINDOWS)
        assert result == "file_name"
        assert len(issues) == 1

    def test_windows_all_forbidden(self) -> None:
        result, _ = replace_forbidden_chars('<>|:*?"', WINDOWS)
        assert result == "_______"

    def test_windows_keeps_slash_set_separate(self) -> None:
        assert "/" not in WINDOWS_FORBIDDEN_CHARS
        assert UNIX_FORBIDDEN_CHARS == frozenset("/")

    def test_unix_slash(self) -> None:
        result, _ = replace_forbidden_chars("a/b", UNIX)
        assert result == "a_b"

    def test_unix_allows_windows_chars(self) -> None:
        result, issues = replace_forbidden_chars("a:b*c?", UNIX)
        assert result == "a:b*c?"
        assert issues == []

    def test_unknown_profile_replaces_nothing(self) -> None:
        result, issues = replace_forbidden_chars('a:b/c"', UNKNOWN)
        assert result == 'a:b/c"'
        assert issues == []

    def test_custom_replace_char(self) -> None:
        result, _ = replace_forbidden_chars("a:b", WINDOWS, "-")
        assert result == "a-b"


# ---------------------------------------------------------------------------
# remove_spaces
# ---------------------------------------------------------------------------


class TestRemoveSpaces:
    def test_embedded_spaces(self) -> None:
        result, issues = remove_spaces("a b c")
        assert result == "abc"
        assert issues == ["Removed 2 space(s)"]

    def test_leading_and_trailing(self) -> None:
        result, _ = remove_spaces("  name  ")
        assert result == "name"

    def test_only_spaces(self) -> None:
        result, _ = remove_spaces("   ")
        assert result == ""

    def test_other_whitespace_kept(self) -> None:
        result, issues = remove_spaces("a\tb c")
        assert result == "a\tb c"
        assert issues == []


# ---------------------------------------------------------------------------
# split_extension
# ---------------------------------------------------------------------------


class TestSplitExtension:
    def test_simple(self) -> None:
        assert split_extension("report.txt") == ("report", ".txt")

    def test_last_dot_wins(self) -> None:
        assert split_extension("archive.tar.gz") == ("archive.tar", ".gz")

    def test_no_extension(self) -> None:
        assert split_extension("Makefile") == ("Makefile", "")

    def test_hidden_file(self) -> None:
        assert split_extension(".bashrc") == (".bashrc", "")

    def test_trailing_dot(self) -> None:
        assert split_extension("file.") == ("file", ".")


# ---------------------------------------------------------------------------
# sanitize_name / sanitize — full pipeline
# ---------------------------------------------------------------------------


class TestSanitizeName:
    def test_clean_name_unchanged(self) -> None:
        result, issues = sanitize_name("report", UNIX)
        assert result == "report"
        assert issues == []

    def test_accented_stem(self) -> None:
        assert sanitize("Ação 1", UNIX) == "acao0"

    def test_substitution_before_forbidden_check(self) -> None:
        result, issues = sanitize_name("A:G", WINDOWS)
        assert result == "a_g"
        assert len(issues) == 2

    def test_all_steps_report_issues(self) -> None:
        _, issues = sanitize_name("G 1:x", WINDOWS)
        assert len(issues) == 3

    def test_extension_is_not_special(self) -> None:
        """Whole-name sanitizing (directories) also touches what looks like an extension."""
        assert sanitize("Dir A.v1", UNIX) == "Dira.v0"

    def test_uppercase_other_letters_kept(self) -> None:
        assert sanitize("DirA", UNIX) == "Dira"

    def test_multibyte_characters_are_single_characters(self) -> None:
        assert sanitize("Canção Õ", UNIX) == "CancaoÕ"

    def test_default_profile_is_detected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.platform", "win32")
        assert sanitize("a:b") == "a_b"

    def test_empty_name(self) -> None:
        assert sanitize("", UNIX) == ""


class TestSanitizeProperties:
    NAMES = [
        "",
        "plain",
        "Ação 1",
        "  spaced   out  ",
        'A<b>|c:d*e?f"G',
        "a/b/c",
        "ÇçãõAG1",
        "já tem ç e Ç",
        "__init__",
        ".hidden file",
        "x" * 300,
    ]

    @pytest.mark.parametrize("profile", [WINDOWS, UNIX, UNKNOWN])
    @pytest.mark.parametrize("name", NAMES)
    def test_idempotent(self, name: str, profile: PlatformProfile) -> None:
        once = sanitize(name, profile)
        assert sanitize(once, profile) == once

    @pytest.mark.parametrize("profile", [WINDOWS, UNIX])
    @pytest.mark.parametrize("name", NAMES)
    def test_no_spaces_or_forbidden_chars(self, name: str, profile: PlatformProfile) -> None:
        result = sanitize(name, profile)
        assert " " not in result
        assert not set(result) & profile.forbidden_chars


# ---------------------------------------------------------------------------
# is_name_safe
# ---------------------------------------------------------------------------


class TestIsNameSafe:
    def test_safe(self) -> None:
        assert is_name_safe("readme.md", UNIX)

    def test_space_unsafe(self) -> None:
        assert not is_name_safe("read me", UNIX)

    def test_colon_safe_on_unix_only(self) -> None:
        assert is_name_safe("a:b", UNIX)
        assert not is_name_safe("a:b", WINDOWS)

    def test_mapped_char_unsafe(self) -> None:
        assert not is_name_safe("v1", UNIX)


# ---------------------------------------------------------------------------
# PlatformProfile / detect_platform
# ---------------------------------------------------------------------------


class TestPlatformProfile:
    @pytest.mark.parametrize(
        ("platform", "expected"),
        [
            ("win32", WINDOWS),
            ("cygwin", WINDOWS),
            ("linux", UNIX),
            ("darwin", UNIX),
            ("freebsd14", UNKNOWN),
            ("emscripten", UNKNOWN),
        ],
    )
    def test_detect_platform(self, platform: str, expected: PlatformProfile) -> None:
        assert detect_platform(platform) is expected

    def test_forbidden_sets(self) -> None:
        assert WINDOWS.forbidden_chars == WINDOWS_FORBIDDEN_CHARS
        assert UNIX.forbidden_chars == UNIX_FORBIDDEN_CHARS
        assert UNKNOWN.forbidden_chars == frozenset()

    def test_unix_set_smaller(self) -> None:
        assert len(UNIX_FORBIDDEN_CHARS) < len(WINDOWS_FORBIDDEN_CHARS)

    def test_labels(self) -> None:
        assert WINDOWS.label == "Windows"
        assert UNIX.label == "Unix"
        assert UNKNOWN.label == "Unknown"
