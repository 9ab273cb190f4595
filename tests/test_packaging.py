from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


def test_installed_modules_import_without_streamlit_side_effects():
    tomllib = pytest.importorskip("tomllib")
    config = tomllib.loads((ROOT / "pyproject.toml").read_text())
    modules = config["tool"]["setuptools"]["py-modules"]
    assert "visual" not in modules
    for name in modules:
        assert (ROOT / f"{name}.py").exists()


def test_readme_is_a_real_file():
    tomllib = pytest.importorskip("tomllib")
    config = tomllib.loads((ROOT / "pyproject.toml").read_text())
    readme = config["project"]["readme"]
    assert readme == "README.md"
    assert (ROOT / readme).exists()
