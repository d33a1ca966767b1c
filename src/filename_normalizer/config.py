"""Startup configuration: which root to normalize, for which platform."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .sanitizer import PlatformProfile, detect_platform

# Root used when none is given on the command line.  The unknown profile
# has no default.
DEFAULT_ROOTS: dict[PlatformProfile, str] = {
    PlatformProfile.WINDOWS: r"D:\Temp_Rename\Aline",
    PlatformProfile.UNIX: "/Users/aline",
}


@dataclass(frozen=True)
class RunConfig:
    """Configuration built once at startup and passed down explicitly."""

    root: Path | None
    profile: PlatformProfile

    @property
    def root_exists(self) -> bool:
        """Return ``True`` if a root was resolved and is an existing directory."""
        return self.root is not None and self.root.is_dir()


def resolve_default_root(profile: PlatformProfile) -> Path | None:
    """Return the hard-coded root for *profile*, or ``None`` if it has none."""
    root = DEFAULT_ROOTS.get(profile)
    return Path(root) if root is not None else None


def load_config(
    root: Path | None = None,
    platform: str | None = None,
) -> RunConfig:
    """Build a ``RunConfig`` from optional overrides.

    Args:
        root: Root directory; defaults to the profile's hard-coded root.
        platform: ``"windows"``, ``"unix"``, or ``None``/``"auto"`` to detect
            the running platform.
    """
    if platform is None or platform == "auto":
        profile = detect_platform()
    else:
        profile = PlatformProfile(platform)

    if root is None:
        root = resolve_default_root(profile)

    return RunConfig(root=root, profile=profile)
