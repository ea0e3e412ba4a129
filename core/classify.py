"""Semantic-version classification of catalog entries."""

import logging
import re

from semver import Version

from .models import OutdatedEntry

logger = logging.getLogger(__name__)

_NON_VERSION_CHARS = re.compile(r"[^\d.]")
_RANGE_OPERATORS = "^~=v<> \t"


def normalize_version(version_range: str) -> str:
    """Strip everything but digits and dots from a version range.

    Best effort: ``^1.2.3`` and ``~1.2.3`` become ``1.2.3``, while compound
    ranges such as ``>=1.2.3 <2.0.0`` collapse into an invalid version.
    """
    return _NON_VERSION_CHARS.sub("", version_range)


def parse_version(value: str) -> Version | None:
    """Parse a strict MAJOR.MINOR.PATCH version, returning None if invalid."""
    try:
        return Version.parse(value)
    except (ValueError, TypeError):
        return None


def is_prerelease(version_range: str) -> bool:
    """Check whether a version range pins a pre-release version."""
    version = parse_version(version_range.lstrip(_RANGE_OPERATORS))
    return version is not None and version.prerelease is not None


def release_diff(current: Version, latest: Version) -> str | None:
    """Release type separating two versions.

    Args:
        current: One version
        latest: The other version

    Returns:
        major, minor, patch, premajor, preminor, prepatch or prerelease,
        or None when both versions are equal
    """
    comparison = current.compare(latest)
    if comparison == 0:
        return None

    high, low = (current, latest) if comparison > 0 else (latest, current)
    high_has_pre = high.prerelease is not None
    low_has_pre = low.prerelease is not None

    if low_has_pre and not high_has_pre:
        # Going from a pre-release to its release
        if not low.patch and not low.minor:
            return "major"
        if (low.major, low.minor, low.patch) == (high.major, high.minor, high.patch):
            if low.minor and not low.patch:
                return "minor"
            return "patch"

    prefix = "pre" if high_has_pre else ""
    if current.major != latest.major:
        return prefix + "major"
    if current.minor != latest.minor:
        return prefix + "minor"
    if current.patch != latest.patch:
        return prefix + "patch"
    return "prerelease"


def is_checkable(current) -> bool:
    """Whether a catalog value can be compared against the registry at all."""
    if not isinstance(current, str) or is_prerelease(current):
        return False
    return parse_version(normalize_version(current)) is not None


def classify(name: str, current, latest: str | None) -> OutdatedEntry | None:
    """Decide whether a catalog entry is outdated.

    Args:
        name: Package name
        current: Version range from the catalog
        latest: Latest registry version, None if the lookup failed

    Returns:
        OutdatedEntry for outdated packages, None otherwise
    """
    if latest is None or not is_checkable(current):
        return None

    latest_version = parse_version(latest)
    if latest_version is None:
        logger.warning("Ignoring invalid registry version for %s: %s", name, latest)
        return None

    current_version = parse_version(normalize_version(current))
    if latest_version <= current_version:
        return None

    return OutdatedEntry(
        name=name,
        current=current,
        latest=latest,
        release_type=release_diff(current_version, latest_version),
    )
