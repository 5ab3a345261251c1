"""Tests for the display configuration."""

from collections.abc import Iterator

import pytest

import iterx as ix


@pytest.fixture(autouse=True)
def _restore_config() -> Iterator[None]:
    previous = ix.get_config()
    yield
    ix.set_config(**{name: getattr(previous, name) for name in previous.__slots__})


def test_default_config() -> None:
    """Test the default values."""
    config = ix.get_config()
    assert config.max_items == 20  # noqa: PLR2004
    assert config.compact


def test_set_config_truncates_repr() -> None:
    """Test max_items truncates the Seq representation."""
    ix.set_config(max_items=3)
    assert repr(ix.Seq(tuple(range(5)))) == "Seq(0, 1, 2, ...)"
    assert repr(ix.Seq((0, 1, 2))) == "Seq(0, 1, 2)"


def test_set_config_unknown_field() -> None:
    """Test an unknown field name is rejected."""
    with pytest.raises(TypeError):
        ix.set_config(colour=True)
