"""Installing the project must not add the flat modules to site-packages."""

import os

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = os.path.join(os.path.dirname(__file__), "..", "pyproject.toml")


def test_no_top_level_modules_installed():
    with open(PYPROJECT, "rb") as f:
        data = tomllib.load(f)
    setuptools_cfg = data["tool"]["setuptools"]
    assert setuptools_cfg["packages"] == []
    assert setuptools_cfg["py-modules"] == []
    assert "package-dir" not in setuptools_cfg
    assert "scripts" not in data["project"]
    assert "gui-scripts" not in data["project"]
