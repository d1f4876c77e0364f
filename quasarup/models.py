"""Core data models for quasar-upgrade."""

import re
from dataclasses import dataclass, field

DEPENDENCY_GROUPS = ("dependencies", "devDependencies")


@dataclass
class ManifestEntry:
    """A single dependency entry in package.json."""

    name: str
    spec: str | None = None
    group: str = "dependencies"  # dependencies, devDependencies


@dataclass
class Manifest:
    """A parsed package.json."""

    entries: list[ManifestEntry]

    def group(self, group: str) -> list[ManifestEntry]:
        return [entry for entry in self.entries if entry.group == group]


@dataclass
class UpgradePolicy:
    """Which candidate versions may be proposed."""

    prerelease: bool = False
    major: bool = False


@dataclass(frozen=True)
class Migration:
    """A renamed package that replaces a legacy one at a given major."""

    legacy_name: str
    trigger_major: str
    successor_name: str


DEFAULT_MIGRATIONS = (
    Migration(
        legacy_name="@quasar/app",
        trigger_major="3",
        successor_name="@quasar/app-webpack",
    ),
)


@dataclass
class PlanEntry:
    """A package that should move to a newer version."""

    name: str
    latest_version: str
    declared_spec: str | None = None

    @property
    def pinned(self) -> bool:
        """True when package.json declares an exact version."""
        return bool(self.declared_spec) and re.match(r"^\d", self.declared_spec) is not None

    def install_spec(self) -> str:
        prefix = "" if self.pinned else "^"
        return f"{self.name}@{prefix}{self.latest_version}"


@dataclass
class UpgradePlan:
    """Upgrades grouped by dependency group, plus legacy packages to drop."""

    groups: dict[str, list[PlanEntry]] = field(
        default_factory=lambda: {group: [] for group in DEPENDENCY_GROUPS}
    )
    legacy_removals: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not any(self.groups.values())

    def add(self, group: str, entry: PlanEntry) -> None:
        self.groups.setdefault(group, []).append(entry)


@dataclass
class PackageStatus:
    """Outcome of checking one package against the registry."""

    name: str
    group: str
    current: str | None
    latest: str | None
    state: str  # update, current, skipped
    delta: str = "unknown"  # major, minor, patch, prerelease, unknown


@dataclass
class UpgradeReport:
    """Everything a single upgrade run found and did."""

    statuses: list[PackageStatus]
    plan: UpgradePlan
    outcome: str  # up-to-date, preview, upgraded
