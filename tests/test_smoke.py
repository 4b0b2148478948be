from __future__ import annotations

import importlib

import pytest


@pytest.mark.unit
def test_import_package() -> None:
    importlib.import_module("chronoshift")


@pytest.mark.unit
def test_import_cli_main() -> None:
    importlib.import_module("chronoshift.cli.main")


@pytest.mark.unit
def test_public_api() -> None:
    chronoshift = importlib.import_module("chronoshift")
    for name in chronoshift.__all__:
        assert hasattr(chronoshift, name), name
