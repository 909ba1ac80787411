"""The records locators report back about the Python environments and managers they discover."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, NamedTuple


class PythonEnvironmentCategory(Enum):
    """How an environment came to be, the values are the names used on the wire."""

    System = "system"
    Homebrew = "homebrew"
    Conda = "conda"
    Pyenv = "pyenv"
    PyenvVirtualEnv = "pyenvVirtualEnv"
    WindowsStore = "windowsStore"
    Pipenv = "pipenv"
    VirtualEnvWrapper = "virtualEnvWrapper"
    Venv = "venv"
    VirtualEnv = "virtualEnv"


class EnvManagerType(Enum):
    Conda = "conda"
    Pyenv = "pyenv"


class EnvManager(NamedTuple):
    """A tool able to create and manage environments (e.g. the conda executable)."""

    executable_path: Path
    tool: EnvManagerType
    version: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _to_wire(self._asdict())


class PythonEnvironment(NamedTuple):
    """A discovered Python environment, fields a locator knows nothing about are left ``None``."""

    display_name: str | None = None
    name: str | None = None
    python_executable_path: Path | None = None
    category: PythonEnvironmentCategory = PythonEnvironmentCategory.System
    version: str | None = None
    env_path: Path | None = None
    env_manager: EnvManager | None = None
    python_run_command: list[str] | None = None
    project_path: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        return _to_wire(self._asdict())

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def _camel_case(key: str) -> str:
    first, *rest = key.split("_")
    return first + "".join(part.title() for part in rest)


def _to_wire(data: dict[str, Any]) -> dict[str, Any]:
    # absent values are not sent
    return {_camel_case(k): _wire_value(v) for k, v in data.items() if v is not None}


def _wire_value(value: Any) -> Any:  # noqa: ANN401
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, EnvManager):
        return value.to_dict()
    if isinstance(value, list):
        return [_wire_value(i) for i in value]
    return value


__all__ = [
    "EnvManager",
    "EnvManagerType",
    "PythonEnvironment",
    "PythonEnvironmentCategory",
]
