from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parent.parent


def test_package_discovery_finds_clock_in_without_init_files():
    with open(ROOT / "pyproject.toml", "rb") as f:
        find = tomllib.load(f)["tool"]["setuptools"]["packages"]["find"]
    assert find["namespaces"] is True
    assert find["where"] == ["api"]
    # the layout ships no __init__.py, so discovery must rely on namespaces
    assert not (ROOT / "api" / "clock_in" / "__init__.py").exists()
    assert (ROOT / "api" / "clock_in" / "services" / "clock_in.py").exists()
