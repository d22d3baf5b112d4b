"""Shared fixtures for table of contents tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_JSON = """
{
  "intro": {"name": "Introduction"},
  "start": {
    "name": "Getting Started",
    "children": {
      "install": "Installation",
      "first_steps": {"name": "First Steps"}
    }
  },
  "runtime": {
    "name": "Runtime",
    "children": {
      "permissions": "Permissions",
      "compiler_apis": "Compiler APIs"
    }
  }
}
"""

SAMPLE_YAML = """\
intro:
  name: Introduction
start:
  name: Getting Started
  children:
    install: Installation
    first_steps:
      name: First Steps
runtime:
  name: Runtime
  children:
    permissions: Permissions
    compiler_apis: Compiler APIs
"""


@pytest.fixture
def toc_file(tmp_path: Path) -> Path:
    """Write the sample table of contents to a JSON file."""
    path = tmp_path / "toc.json"
    path.write_text(SAMPLE_JSON, encoding="utf-8")
    return path


@pytest.fixture
def yaml_toc_file(tmp_path: Path) -> Path:
    """Write the sample table of contents to a YAML file."""
    path = tmp_path / "toc.yaml"
    path.write_text(SAMPLE_YAML, encoding="utf-8")
    return path


@pytest.fixture
def sample_json() -> str:
    """Return the sample table of contents as JSON text."""
    return SAMPLE_JSON


@pytest.fixture
def sample_yaml() -> str:
    """Return the sample table of contents as YAML text."""
    return SAMPLE_YAML
