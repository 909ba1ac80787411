"""Access to the process environment a locator runs against."""

from __future__ import annotations

import os
from abc import ABCMeta, abstractmethod
from pathlib import Path
from typing import Mapping


class Environment(metaclass=ABCMeta):
    """Provides environment variables and the user home directory to locators."""

    @abstractmethod
    def get_env_var(self, key: str) -> str | None:
        """
        Look up an environment variable.

        :param key: the name of the variable
        :return: the value, or ``None`` when the variable is not set

        """
        raise NotImplementedError

    @abstractmethod
    def get_user_home(self) -> Path | None:
        """:return: the home directory of the current user, or ``None`` if it cannot be determined"""
        raise NotImplementedError


class OSEnvironment(Environment):
    """Read variables from ``env`` (default ``os.environ``), the home is ``home`` when given else the user's home."""

    def __init__(self, env: Mapping[str, str] | None = None, home: Path | None = None) -> None:
        self._env = os.environ if env is None else env
        self._home = home

    def get_env_var(self, key: str) -> str | None:
        return self._env.get(key)

    def get_user_home(self) -> Path | None:
        if self._home is not None:
            return self._home
        try:
            return Path.home()
        except (RuntimeError, KeyError):  # no HOME/USERPROFILE and no passwd entry
            return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(home={self._home!r})"


__all__ = [
    "Environment",
    "OSEnvironment",
]
