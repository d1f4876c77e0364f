"""Talk to the node package manager (npm or yarn) through its CLI."""

import json
import logging
import os
import shutil
import subprocess
from pathlib import Path

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import InstallCommandFailed

logger = logging.getLogger(__name__)

SUPPORTED_PACKAGERS = ("npm", "yarn")


class YarnInfo(BaseModel):
    """Output of `yarn info <pkg> versions --json`."""

    type: str
    data: list[str]


# npm prints a bare string instead of a list when only one version exists
NpmVersions = TypeAdapter(list[str] | str)


class NodePackager:
    """Registry queries and dependency changes for one project."""

    def __init__(self, name: str, app_dir: Path):
        if name not in SUPPORTED_PACKAGERS:
            raise ValueError(f"Unsupported package manager: {name}")
        self.name = name
        self.app_dir = app_dir

    def _executable(self) -> str:
        # Resolves npm.cmd / yarn.cmd on Windows
        return shutil.which(self.name) or self.name

    def query_versions(self, package_name: str) -> list[str] | None:
        """List the versions the registry has for a package.

        Any failure (missing executable, registry error, malformed output)
        is reported as None.
        """
        command = [self._executable(), "info", package_name, "versions", "--json"]
        logger.debug("Running %s", " ".join(command))

        try:
            proc = subprocess.run(
                command,
                cwd=self.app_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.debug("Could not run %s: %s", self.name, e)
            return None

        return self.parse_versions(proc.stdout)

    def parse_versions(self, output: str) -> list[str] | None:
        """Normalize `info versions --json` output to a list of versions."""
        try:
            payload = json.loads(output)
        except (json.JSONDecodeError, TypeError) as e:
            logger.debug("Malformed %s output: %s", self.name, e)
            return None

        if isinstance(payload, dict) and ("error" in payload or payload.get("type") == "error"):
            logger.debug("%s returned an error: %s", self.name, payload)
            return None

        try:
            if self.name == "yarn":
                return YarnInfo.model_validate(payload).data
            versions = NpmVersions.validate_python(payload)
        except ValidationError as e:
            logger.debug("Unexpected %s output shape: %s", self.name, e)
            return None

        return [versions] if isinstance(versions, str) else versions

    def install_command(self, specs: list[str], dev: bool = False) -> list[str]:
        if self.name == "yarn":
            params = ["add", "--dev"] if dev else ["add"]
        else:
            params = ["install", "--save-dev" if dev else "--save"]
        return [self._executable(), *params, *specs]

    def uninstall_command(self, package_name: str) -> list[str]:
        verb = "remove" if self.name == "yarn" else "uninstall"
        return [self._executable(), verb, package_name]

    def install_packages(self, specs: list[str], dev: bool = False) -> None:
        """Install packages in a single package manager invocation."""
        self._run(self.install_command(specs, dev=dev))

    def uninstall_package(self, package_name: str) -> None:
        self._run(self.uninstall_command(package_name))

    def remove_installed_files(self, package_name: str) -> None:
        """Delete node_modules/<package_name> if it exists."""
        target = self.app_dir / "node_modules" / package_name
        if target.is_dir():
            logger.debug("Removing %s", target)
            shutil.rmtree(target)

    def _run(self, command: list[str]) -> None:
        logger.debug("Running %s", " ".join(command))
        env = {**os.environ, "NODE_ENV": "development"}

        try:
            proc = subprocess.run(command, cwd=self.app_dir, env=env, check=False)
        except OSError as e:
            raise InstallCommandFailed(command, None, reason=str(e)) from e

        if proc.returncode != 0:
            raise InstallCommandFailed(command, proc.returncode)
