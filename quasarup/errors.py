"""Errors raised by quasar-upgrade."""


class QuasarUpgradeError(Exception):
    """Base class for fatal upgrade errors."""


class NotInProject(QuasarUpgradeError):
    """No Quasar project found in the working directory or its parents."""


class DependenciesNotInstalled(QuasarUpgradeError):
    """The project has no node_modules directory yet."""


class ManifestError(QuasarUpgradeError):
    """package.json is missing or cannot be parsed."""


class InstallCommandFailed(QuasarUpgradeError):
    """The package manager exited with an error while changing dependencies."""

    def __init__(self, command: list[str], returncode: int | None, reason: str | None = None):
        self.command = command
        self.returncode = returncode
        if reason is None:
            reason = f"exit code {returncode}"
        super().__init__(f"Command \"{' '.join(command)}\" failed ({reason})")
