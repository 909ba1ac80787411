"""Locate Python environments."""

from __future__ import annotations

from ._env import Environment, OSEnvironment
from ._locator import Locator, LocatorResult
from ._messaging import EnvManager, EnvManagerType, PythonEnvironment, PythonEnvironmentCategory
from ._path import PythonOnPath, get_env_path
from ._utils import PythonEnv, get_version
from ._version import version

__version__ = version  #: version of the package

__all__ = [
    "EnvManager",
    "EnvManagerType",
    "Environment",
    "Locator",
    "LocatorResult",
    "OSEnvironment",
    "PythonEnv",
    "PythonEnvironment",
    "PythonEnvironmentCategory",
    "PythonOnPath",
    "__version__",
    "get_env_path",
    "get_version",
]
