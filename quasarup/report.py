"""Human-readable output for upgrade runs."""

from rich.console import Console
from rich.markup import escape

from .models import PackageStatus, UpgradePolicy

# Parsed by the companion CLI, keep verbatim
UP_TO_DATE_MESSAGE = "Congrats! All Quasar packages are up to date."
SUCCESS_MESSAGE = "Successfully upgraded Quasar packages."
UPGRADE_GUIDE_URL = "https://quasar.dev/start/upgrade-guide"


def format_status(status: PackageStatus) -> str:
    """Format one package line as rich markup."""
    name = f"[green]{escape(status.name)}[/green]"
    current = escape(status.current) if status.current else "[red]Missing![/red]"

    if status.state == "skipped":
        return (
            f" {name}: {current} → [red]Skipping![/red]\n"
            "   (⚠️  NPM server returned an error, so we cannot detect latest version)"
        )

    line = f" {name}: {current} → {escape(status.latest or '')}"
    if status.delta in ("major", "prerelease"):
        line += f" [dim]({status.delta})[/dim]"
    return line


def rerun_command(policy: UpgradePolicy, command_name: str = "quasar upgrade") -> str:
    """Return the command that performs the previewed upgrade."""
    params = ["-i"]
    if policy.prerelease:
        params.append("-p")
    if policy.major:
        params.append("-m")
    return f"{command_name} {' '.join(params)}"


def render_statuses(console: Console, statuses: list[PackageStatus]) -> None:
    """Print packages that are skipped or have an update available."""
    for status in statuses:
        if status.state in ("update", "skipped"):
            console.print(format_status(status))
    console.print()


def render_up_to_date(console: Console) -> None:
    console.print(f"  {UP_TO_DATE_MESSAGE}", highlight=False, soft_wrap=True)
    console.print()


def render_preview(console: Console, policy: UpgradePolicy, command_name: str = "quasar upgrade") -> None:
    console.print(f" See [green]{UPGRADE_GUIDE_URL}[/green] for guiding on how to upgrade.")
    console.print(
        f' Run "{rerun_command(policy, command_name)}" to do the actual upgrade.',
        highlight=False,
        soft_wrap=True,
    )
    console.print()


def render_success(console: Console) -> None:
    console.print()
    console.print(f" {SUCCESS_MESSAGE}", highlight=False, soft_wrap=True)
    console.print()
