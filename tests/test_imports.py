"""Tests for isospan package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_isospan() -> None:
    """Import isospan package succeeds."""
    import isospan

    assert hasattr(isospan, "__version__")
    assert isospan.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import isospan.core submodule succeeds."""
    from isospan import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import isospan.units submodule succeeds."""
    from isospan import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import isospan.format submodule succeeds."""
    from isospan import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_arithmetic_module() -> None:
    """Import isospan.arithmetic submodule succeeds."""
    from isospan import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_config_module() -> None:
    """Import isospan.config submodule succeeds."""
    from isospan import config

    assert callable(config.configure_logging)


def test_public_names_resolve() -> None:
    """Every name in isospan.__all__ is an attribute of the package."""
    import isospan

    for name in isospan.__all__:
        assert hasattr(isospan, name), name


def test_error_hierarchy() -> None:
    """The classified errors share one base."""
    from isospan import (
        FormatError,
        IsospanError,
        OffsetError,
        RangeError,
        UnsupportedError,
    )

    for error in (FormatError, RangeError, UnsupportedError, OffsetError):
        assert issubclass(error, IsospanError)
    assert issubclass(OffsetError, FormatError)
    assert issubclass(OffsetError, RangeError)
    assert not issubclass(UnsupportedError, (FormatError, RangeError))
