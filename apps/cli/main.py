"""CLI application for quasar-upgrade."""

from pathlib import Path

import typer
from rich.console import Console

from quasarup.detect import find_app_dir, identify_packager
from quasarup.errors import DependenciesNotInstalled, QuasarUpgradeError
from quasarup.installed import InstalledLookup
from quasarup.logging_config import setup_logging
from quasarup.models import UpgradePolicy
from quasarup.packager import NodePackager
from quasarup.parse_node import read_package_json
from quasarup.upgrade import Upgrader

console = Console()

HELP = """Upgrades all Quasar packages to their latest version which is compatible
with the API you are currently using (unless -m/--major is used, which may
include breaking changes).

Works only in a project folder. Covers quasar, eslint-plugin-quasar and
every @quasar/* package.

Usage
  # checks for non-breaking upgrades and displays them,
  # but will not carry out the install
  $ quasar-upgrade
  # checks for pre-releases (alpha/beta):
  $ quasar-upgrade -p
  # checks for major new releases (includes breaking changes):
  $ quasar-upgrade -m
  # to perform the actual upgrade, combine any of the
  # params above and add "-i" (or "--install"):
  $ quasar-upgrade -i
"""

app = typer.Typer(
    name="quasar-upgrade",
    add_completion=False,
)


@app.command(help=HELP, context_settings={"help_option_names": ["-h", "--help"]})
def upgrade(
    install: bool = typer.Option(False, "--install", "-i", help="Also perform package upgrades"),
    prerelease: bool = typer.Option(False, "--prerelease", "-p", help="Allow pre-release versions (alpha/beta)"),
    major: bool = typer.Option(False, "--major", "-m", help="Allow newer major versions (breaking changes)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show package manager commands and diagnostics"),
) -> None:
    """Upgrade the Quasar packages of the current project."""
    setup_logging(verbose=verbose)

    try:
        app_dir = find_app_dir(Path.cwd())

        if not (app_dir / "node_modules").is_dir():
            raise DependenciesNotInstalled(
                'Please run "npm install" / "yarn" before running this command'
            )

        manifest = read_package_json(app_dir)
        packager = NodePackager(identify_packager(app_dir), app_dir)

        upgrader = Upgrader(
            manifest,
            installed_lookup=InstalledLookup(app_dir),
            packager=packager,
            policy=UpgradePolicy(prerelease=prerelease, major=major),
            command_name="quasar-upgrade",
        )
        upgrader.run(execute=install, console=console)

    except QuasarUpgradeError as e:
        console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
