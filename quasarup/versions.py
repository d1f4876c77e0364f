"""Pick the newest qualifying version from a registry version list."""

import re
from collections.abc import Sequence

from packaging.version import InvalidVersion, Version

from .models import UpgradePolicy

VERSION_PATTERN = re.compile(r"^(\d+)\.\d+\.\d+-?(alpha|beta|rc)?")


def build_rule(current: str, policy: UpgradePolicy) -> re.Pattern | None:
    """Build the pattern a candidate must match to replace current.

    Returns None when current is not a recognisable x.y.z version.
    """
    match = VERSION_PATTERN.match(current)
    if match is None:
        return None

    major, prerelease = match.groups()
    major_syntax = r"(\d+)" if policy.major else re.escape(major)

    # Being on a pre-release keeps the package on the pre-release track
    if prerelease or policy.prerelease:
        return re.compile(rf"^{major_syntax}\.(\d+)\.(\d+)-?(alpha|beta|rc)?")
    return re.compile(rf"^{major_syntax}\.(\d+)\.(\d+)$")


def select_latest(
    candidates: Sequence[str],
    current: str | None,
    policy: UpgradePolicy | None = None,
) -> str | None:
    """Select the newest candidate allowed by the policy.

    The registry lists versions in ascending order; the list is filtered in
    that order and the last match wins. Nothing is re-sorted.

    Args:
        candidates: Version strings as returned by the registry
        current: Installed version, or None when the package is missing
        policy: Upgrade policy (pre-release and major bumps)

    Returns:
        Chosen version string, or None when nothing qualifies
    """
    if current is None:
        return candidates[-1] if candidates else None

    rule = build_rule(current, policy or UpgradePolicy())
    if rule is None:
        return None

    matching = [version for version in candidates if rule.match(version)]
    return matching[-1] if matching else None


def semver_delta(current: str | None, latest: str | None) -> str:
    """Classify an upgrade as major, minor, patch or prerelease.

    Returns "unknown" when either side is missing or unparsable, or when
    latest is not newer than current.
    """
    if not current or not latest:
        return "unknown"

    try:
        old_ver = Version(current)
        new_ver = Version(latest)
    except InvalidVersion:
        return "unknown"

    if new_ver <= old_ver:
        return "unknown"
    if new_ver.major != old_ver.major:
        return "major"
    if new_ver.minor != old_ver.minor:
        return "minor"
    if new_ver.micro != old_ver.micro:
        return "patch"
    return "prerelease"
