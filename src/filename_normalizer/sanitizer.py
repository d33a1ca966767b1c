"""Pure functions for normalizing file and directory names.

This module contains no filesystem access — only string transformations.

Each character of a name goes through a small, fixed substitution map and is
then checked against the forbidden-character set of the active platform
profile; forbidden characters become ``_``.  Finally every space is removed.

The sanitization pipeline:
  1. Substitute mapped characters (``A`` -> ``a``, ``ç`` -> ``c``, ``1`` -> ``0``, ...)
  2. Replace characters forbidden by the platform profile with ``_``
  3. Remove all spaces
"""

from __future__ import annotations

import enum
import sys

# ---------------------------------------------------------------------------
# Character substitution map
# ---------------------------------------------------------------------------

# Deliberately small and hard-coded; this is not a general transliteration.
SUBSTITUTION_MAP: dict[str, str] = {
    "A": "a",
    "Ç": "c",  # Ç LATIN CAPITAL LETTER C WITH CEDILLA
    "ç": "c",  # ç LATIN SMALL LETTER C WITH CEDILLA
    "1": "0",
    "G": "g",
    "ã": "a",  # ã LATIN SMALL LETTER A WITH TILDE
    "õ": "o",  # õ LATIN SMALL LETTER O WITH TILDE
}

DEFAULT_REPLACE_CHAR: str = "_"

# ---------------------------------------------------------------------------
# Forbidden character sets, one per platform profile
# ---------------------------------------------------------------------------

WINDOWS_FORBIDDEN_CHARS: frozenset[str] = frozenset('<>|:*?"')
UNIX_FORBIDDEN_CHARS: frozenset[str] = frozenset("/")


class PlatformProfile(enum.Enum):
    """Platform the names are normalized for, selected once at startup."""

    WINDOWS = "windows"
    UNIX = "unix"
    UNKNOWN = "unknown"

    @property
    def forbidden_chars(self) -> frozenset[str]:
        """Characters that cannot appear in a name on this platform."""
        if self is PlatformProfile.WINDOWS:
            return WINDOWS_FORBIDDEN_CHARS
        if self is PlatformProfile.UNIX:
            return UNIX_FORBIDDEN_CHARS
        return frozenset()

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``Windows``."""
        return self.value.capitalize()


def detect_platform(platform: str | None = None) -> PlatformProfile:
    """Map ``sys.platform`` (or *platform*) to a :class:`PlatformProfile`.

    Only Windows, Linux and macOS are recognized; anything else is
    ``UNKNOWN``.
    """
    platform = sys.platform if platform is None else platform
    if platform in ("win32", "cygwin"):
        return PlatformProfile.WINDOWS
    if platform == "darwin" or platform.startswith("linux"):
        return PlatformProfile.UNIX
    return PlatformProfile.UNKNOWN


def substitute_chars(name: str) -> tuple[str, list[str]]:
    """Apply :data:`SUBSTITUTION_MAP` to every character of *name*.

    Returns ``(substituted_name, issues)``.
    """
    result = "".join(SUBSTITUTION_MAP.get(c, c) for c in name)
    issues: list[str] = []
    if result != name:
        chars = sorted({c for c in name if c in SUBSTITUTION_MAP})
        issues.append(f"Substituted characters {chars!r}")
    return result, issues


def replace_forbidden_chars(
    name: str,
    profile: PlatformProfile,
    replace_char: str = DEFAULT_REPLACE_CHAR,
) -> tuple[str, list[str]]:
    """Replace characters forbidden by *profile* with *replace_char*.

    Returns ``(sanitized_name, issues)``.
    """
    forbidden = profile.forbidden_chars
    result = "".join(replace_char if c in forbidden else c for c in name)
    issues: list[str] = []
    if result != name:
        chars = sorted({c for c in name if c in forbidden})
        issues.append(f"Replaced forbidden characters {chars!r}")
    return result, issues


def remove_spaces(name: str) -> tuple[str, list[str]]:
    """Remove every space from *name*, not only leading or trailing ones.

    Returns ``(name_without_spaces, issues)``.
    """
    count = name.count(" ")
    if not count:
        return name, []
    return name.replace(" ", ""), [f"Removed {count} space(s)"]


def split_extension(name: str) -> tuple[str, str]:
    """Split *name* into ``(stem, extension)`` at the last dot.

    A leading dot does not start an extension (``.bashrc`` has none) and
    a trailing dot is an extension of its own (``file.`` -> ``("file", ".")``).
    """
    dot_idx = name.rfind(".")
    if dot_idx <= 0:
        return name, ""
    return name[:dot_idx], name[dot_idx:]


def sanitize_name(
    name: str,
    profile: PlatformProfile | None = None,
) -> tuple[str, list[str]]:
    """Run the full normalization pipeline on a single name.

    When *profile* is ``None`` the profile of the running platform is used.

    Pipeline order:
      1. Substitute mapped characters
      2. Replace forbidden characters with ``_``
      3. Remove all spaces

    Returns ``(sanitized_name, all_issues)``.
    """
    if profile is None:
        profile = detect_platform()
    all_issues: list[str] = []

    name, issues = substitute_chars(name)
    all_issues.extend(issues)

    name, issues = replace_forbidden_chars(name, profile)
    all_issues.extend(issues)

    name, issues = remove_spaces(name)
    all_issues.extend(issues)

    return name, all_issues


def sanitize(name: str, profile: PlatformProfile | None = None) -> str:
    """Return the normalized form of *name*, discarding the issue list."""
    sanitized, _ = sanitize_name(name, profile)
    return sanitized


def is_name_safe(name: str, profile: PlatformProfile | None = None) -> bool:
    """Return ``True`` if *name* requires no normalization."""
    return sanitize(name, profile) == name
