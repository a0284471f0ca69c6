"""Release pipeline: version checks, changelog, tag, notes, GitHub release."""

from cutrelease.release.errors import ReleaseError, ReleaseErrorKind
from cutrelease.release.semver import Version, is_valid_version, parse_version
from cutrelease.release.service import ReleaseOptions, ReleaseOutcome, run_release

__all__ = [
    "ReleaseError",
    "ReleaseErrorKind",
    "ReleaseOptions",
    "ReleaseOutcome",
    "Version",
    "is_valid_version",
    "parse_version",
    "run_release",
]
