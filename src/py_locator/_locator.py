from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING, Any, NamedTuple

if TYPE_CHECKING:
    from ._env import Environment
    from ._messaging import EnvManager, PythonEnvironment
    from ._utils import PythonEnv


class LocatorResult(NamedTuple):
    environments: list[PythonEnvironment]
    managers: list[EnvManager]

    def to_dict(self) -> dict[str, Any]:
        return {
            "environments": [env.to_dict() for env in self.environments],
            "managers": [manager.to_dict() for manager in self.managers],
        }


class Locator(metaclass=ABCMeta):
    """Discover the Python environments made available through one mechanism (PATH, conda, pyenv, ...)."""

    def __init__(self, environment: Environment) -> None:
        """
        Create a new locator.

        :param environment: access to environment variables and the user home, the locator does not modify it

        """
        self.environment = environment

    @abstractmethod
    def resolve(self, env: PythonEnv) -> PythonEnvironment | None:
        """
        Check if a candidate interpreter is one this locator is responsible for.

        :param env: the candidate
        :return: the environment describing the candidate, or ``None`` if this locator does not recognize it

        """
        raise NotImplementedError

    @abstractmethod
    def find(self) -> LocatorResult | None:
        """
        Search for all environments this locator knows about.

        :return: the environments found, ``None`` if there are none or the search could not run

        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(environment={self.environment!r})"


__all__ = [
    "Locator",
    "LocatorResult",
]
