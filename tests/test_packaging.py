"""Tests for declared package metadata."""

import tomllib
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _dependency_names() -> set[str]:
    project = tomllib.loads(PYPROJECT.read_text())["project"]
    return {
        requirement.split(">")[0].split("=")[0].strip()
        for requirement in project["dependencies"]
    }


def test_runtime_imports_are_declared() -> None:
    assert {
        "fastapi",
        "graphql-core",
        "pydantic",
        "pydantic-settings",
        "strawberry-graphql",
        "uvicorn",
    } <= _dependency_names()
