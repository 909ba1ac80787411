"""Locate the unversioned ``python`` interpreters found on ``PATH``."""

from __future__ import annotations

import os
import sys
from enum import Enum
from logging import getLogger
from pathlib import Path

from ._locator import Locator, LocatorResult
from ._messaging import PythonEnvironment, PythonEnvironmentCategory
from ._utils import PythonEnv, as_command, get_version, split_paths

LOGGER = getLogger(__name__)


class Absence(Enum):
    """Why a search on ``PATH`` came back empty handed."""

    NO_PATH = "PATH is not set"
    NO_HOME = "user home directory is not available"
    NOT_FOUND = "no python on PATH"


def bin_name() -> str:
    return "python.exe" if sys.platform == "win32" else "python"


def get_env_path(executable: str | Path) -> Path | None:
    """
    Derive the root of the environment an interpreter belongs to.

    :param executable: the interpreter, a leading ``./`` is honored (``./python`` lives in ``.``, ``python`` nowhere)
    :return: the folder holding the executable, or its parent when that folder is ``Scripts`` (Windows layout)

    """
    parent = os.path.dirname(executable)  # noqa: PTH120
    if not os.path.basename(parent):  # noqa: PTH119 # bare file name or an executable at the filesystem root
        return None
    if os.path.basename(parent) == "Scripts":  # noqa: PTH119
        grand_parent = os.path.dirname(parent)  # noqa: PTH120
        return Path(grand_parent) if grand_parent else None
    return Path(parent)


def _windows_apps(home: Path) -> Path:
    # app execution aliases of the Microsoft Store, these are stubs the Windows Store locator reports properly
    return home / "AppData" / "Local" / "Microsoft" / "WindowsApps"


def _is_within(path: Path, folder: Path) -> bool:
    return path == folder or folder in path.parents


class PythonOnPath(Locator):
    """Report every ``python`` (``python.exe`` on Windows) found within the folders of ``PATH``."""

    def resolve(self, env: PythonEnv) -> PythonEnvironment | None:
        name = env.executable.name
        if not name or name.lower() != bin_name():
            return None
        return PythonEnvironment(
            python_executable_path=env.executable,
            version=env.version,
            category=PythonEnvironmentCategory.System,
            env_path=env.path,
            python_run_command=[as_command(env.executable)],
        )

    def find(self) -> LocatorResult | None:
        outcome = self._locate()
        if isinstance(outcome, Absence):
            LOGGER.debug("%r found nothing: %s", self, outcome.value)
            return None
        return outcome

    def _locate(self) -> LocatorResult | Absence:
        paths = self.environment.get_env_var("PATH")
        if paths is None:
            return Absence.NO_PATH
        exe_name = bin_name()
        home = self.environment.get_user_home()
        if home is None:
            return Absence.NO_HOME
        apps_path = _windows_apps(home)

        environments: list[PythonEnvironment] = []
        for pos, entry in enumerate(split_paths(paths)):
            folder = Path(entry)
            LOGGER.debug("discover PATH[%d]=%s", pos, folder)
            if _is_within(folder, apps_path):
                LOGGER.debug("skip %s as it is within %s", folder, apps_path)
                continue
            candidate = os.path.join(entry, exe_name)  # noqa: PTH118 # keeps a leading "." folder
            full_path = Path(candidate)
            if not os.path.exists(full_path):  # noqa: PTH110
                continue
            version = get_version(full_path)
            env = self.resolve(PythonEnv(full_path, get_env_path(candidate), version))
            if env is not None:
                LOGGER.info("found %s (version %s)", full_path, version)
                environments.append(env)

        if not environments:
            return Absence.NOT_FOUND
        return LocatorResult(environments=environments, managers=[])


__all__ = [
    "Absence",
    "PythonOnPath",
    "bin_name",
    "get_env_path",
]
