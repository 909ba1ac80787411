from __future__ import annotations

import json
from pathlib import Path

from py_locator import (
    EnvManager,
    EnvManagerType,
    LocatorResult,
    PythonEnvironment,
    PythonEnvironmentCategory,
)


def test_environment_defaults() -> None:
    env = PythonEnvironment()
    assert env.category is PythonEnvironmentCategory.System
    assert env.python_executable_path is None
    assert env.python_run_command is None
    assert env.to_dict() == {"category": "system"}


def test_environment_to_dict() -> None:
    exe = Path("/usr/bin/python")
    env = PythonEnvironment(
        python_executable_path=exe,
        version="3.11.2",
        env_path=exe.parent,
        python_run_command=[str(exe)],
    )
    assert env.to_dict() == {
        "pythonExecutablePath": str(exe),
        "category": "system",
        "version": "3.11.2",
        "envPath": str(exe.parent),
        "pythonRunCommand": [str(exe)],
    }


def test_environment_to_json_with_manager() -> None:
    manager = EnvManager(Path("/opt/conda/bin/conda"), EnvManagerType.Conda, "23.1.0")
    env = PythonEnvironment(
        display_name="base",
        category=PythonEnvironmentCategory.Conda,
        env_manager=manager,
        project_path=Path("/src/project"),
    )
    assert json.loads(env.to_json()) == {
        "displayName": "base",
        "category": "conda",
        "envManager": {"executablePath": str(Path("/opt/conda/bin/conda")), "tool": "conda", "version": "23.1.0"},
        "projectPath": str(Path("/src/project")),
    }


def test_environment_equality_by_value() -> None:
    exe = Path("/usr/bin/python")
    assert PythonEnvironment(python_executable_path=exe) == PythonEnvironment(python_executable_path=exe)
    assert PythonEnvironment(python_executable_path=exe) != PythonEnvironment(python_executable_path=exe, version="3")


def test_category_wire_values() -> None:
    assert PythonEnvironmentCategory.PyenvVirtualEnv.value == "pyenvVirtualEnv"
    assert PythonEnvironmentCategory.WindowsStore.value == "windowsStore"


def test_locator_result_to_dict() -> None:
    env = PythonEnvironment(version="3.12.0")
    result = LocatorResult(environments=[env], managers=[])
    assert result.to_dict() == {"environments": [{"category": "system", "version": "3.12.0"}], "managers": []}
