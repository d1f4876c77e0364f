"""Upgrade the Quasar packages declared in a project."""

import logging
from collections.abc import Callable, Iterable
from typing import Protocol

from rich.console import Console

from .models import (
    DEFAULT_MIGRATIONS,
    DEPENDENCY_GROUPS,
    Manifest,
    ManifestEntry,
    Migration,
    PackageStatus,
    PlanEntry,
    UpgradePlan,
    UpgradePolicy,
    UpgradeReport,
)
from .report import render_preview, render_statuses, render_success, render_up_to_date
from .versions import select_latest, semver_delta

logger = logging.getLogger(__name__)

QUASAR_PACKAGES = ("quasar", "eslint-plugin-quasar")
QUASAR_SCOPE = "@quasar/"


class Packager(Protocol):
    """What the upgrader needs from a package manager."""

    name: str

    def query_versions(self, package_name: str) -> list[str] | None: ...

    def install_packages(self, specs: list[str], dev: bool = False) -> None: ...

    def uninstall_package(self, package_name: str) -> None: ...

    def remove_installed_files(self, package_name: str) -> None: ...


def is_quasar_package(name: str) -> bool:
    return name in QUASAR_PACKAGES or name.startswith(QUASAR_SCOPE)


def major_of(version: str) -> str:
    return version.split(".")[0]


class Upgrader:
    """Find newer Quasar packages and optionally install them.

    Args:
        manifest: Parsed package.json of the project
        installed_lookup: Returns the installed version of a package, or None
        packager: Package manager used for registry queries and installs
        policy: Which versions may be proposed
        migrations: Legacy package renames to apply while scanning
        command_name: Command shown when previewing an upgrade
    """

    def __init__(
        self,
        manifest: Manifest,
        installed_lookup: Callable[[str], str | None],
        packager: Packager,
        policy: UpgradePolicy | None = None,
        migrations: Iterable[Migration] = DEFAULT_MIGRATIONS,
        command_name: str = "quasar upgrade",
    ):
        self.manifest = manifest
        self.installed_lookup = installed_lookup
        self.packager = packager
        self.policy = policy or UpgradePolicy()
        self.migrations = tuple(migrations)
        self.command_name = command_name

    def _find_migration(self, name: str, current: str | None) -> Migration | None:
        if current is None:
            return None
        for migration in self.migrations:
            if migration.legacy_name == name and major_of(current) == migration.trigger_major:
                return migration
        return None

    def resolve_target(self, entry: ManifestEntry, plan: UpgradePlan) -> tuple[str, str | None]:
        """Return the package to upgrade and its installed version.

        A legacy package covered by a migration is swapped for its successor
        and queued for removal in the plan.
        """
        name = entry.name
        current = self.installed_lookup(name)

        migration = self._find_migration(name, current)
        if migration is None:
            return name, current

        logger.info("%s %s is replaced by %s", name, current, migration.successor_name)
        if name not in plan.legacy_removals:
            plan.legacy_removals.append(name)
        return migration.successor_name, self.installed_lookup(migration.successor_name) or current

    def check_package(
        self,
        group: str,
        entry: ManifestEntry,
        name: str,
        current: str | None,
        plan: UpgradePlan,
    ) -> PackageStatus:
        """Query the registry for one package and record it in the plan if outdated."""
        versions = self.packager.query_versions(name)
        if versions is None:
            logger.info("Could not get versions of %s from %s", name, self.packager.name)
            return PackageStatus(name=name, group=group, current=current, latest=None, state="skipped")

        latest = select_latest(versions, current, self.policy)
        if latest is None or latest == current:
            logger.debug("%s %s: no newer qualifying version", name, current)
            return PackageStatus(name=name, group=group, current=current, latest=latest, state="current")

        plan.add(
            group,
            PlanEntry(
                name=name,
                latest_version=latest,
                declared_spec=entry.spec,
            ),
        )
        return PackageStatus(
            name=name,
            group=group,
            current=current,
            latest=latest,
            state="update",
            delta=semver_delta(current, latest),
        )

    def scan(self) -> tuple[list[PackageStatus], UpgradePlan]:
        """Check every Quasar package of the manifest against the registry."""
        plan = UpgradePlan()
        statuses: list[PackageStatus] = []
        seen: set[tuple[str, str]] = set()

        for group in DEPENDENCY_GROUPS:
            for entry in self.manifest.group(group):
                if not is_quasar_package(entry.name):
                    continue
                name, current = self.resolve_target(entry, plan)
                # A migrated package may already be declared under its new name
                if (group, name) in seen:
                    continue
                seen.add((group, name))
                statuses.append(self.check_package(group, entry, name, current, plan))

        return statuses, plan

    def apply(self, plan: UpgradePlan, console: Console | None = None) -> None:
        """Carry out the plan. Completed steps are not rolled back on failure."""
        for legacy_name in plan.legacy_removals:
            if console is not None:
                console.print(f" Uninstalling legacy package {legacy_name}...")
            self.packager.remove_installed_files(legacy_name)
            self.packager.uninstall_package(legacy_name)

        for group, entries in plan.groups.items():
            if not entries:
                continue

            # Stale files can break the install on some platforms
            for entry in entries:
                self.packager.remove_installed_files(entry.name)

            if console is not None:
                console.print()
                console.print(f" Upgrading Quasar {group}...")
            self.packager.install_packages(
                [entry.install_spec() for entry in entries],
                dev=group == "devDependencies",
            )

    def run(self, execute: bool = False, console: Console | None = None) -> UpgradeReport:
        """Scan, report, and install when execute is set."""
        console = console or Console()

        console.print()
        console.print(f" Gathering information with {self.packager.name}...")
        console.print()

        statuses, plan = self.scan()
        render_statuses(console, statuses)

        if plan.is_empty:
            render_up_to_date(console)
            return UpgradeReport(statuses=statuses, plan=plan, outcome="up-to-date")

        if not execute:
            render_preview(console, self.policy, self.command_name)
            return UpgradeReport(statuses=statuses, plan=plan, outcome="preview")

        self.apply(plan, console)
        render_success(console)
        return UpgradeReport(statuses=statuses, plan=plan, outcome="upgraded")
