from __future__ import annotations

import re
from dataclasses import dataclass


# Numbers accept leading zeros and the prerelease accepts any mix of
# alphanumerics, dots and hyphens. Use the input string, not to_tag(), as
# the tag name.
_VERSION_RE = re.compile(r"^v(\d+)\.(\d+)\.(\d+)(?:-([A-Za-z0-9.-]+))?$", re.ASCII)


@dataclass(frozen=True, slots=True)
class Version:
    major: int
    minor: int
    patch: int
    prerelease: str | None = None

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    def to_tag(self) -> str:
        base = f"v{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is None:
            return base
        return f"{base}-{self.prerelease}"


def parse_version(tag: str) -> Version | None:
    """Parse `v<major>.<minor>.<patch>[-<prerelease>]`; None if malformed."""
    m = _VERSION_RE.fullmatch(tag)
    if m is None:
        return None
    return Version(int(m.group(1)), int(m.group(2)), int(m.group(3)), m.group(4))


def is_valid_version(tag: str) -> bool:
    return parse_version(tag) is not None
