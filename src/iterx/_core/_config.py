from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

from ._format import seq_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Display settings shared by every wrapper `repr`.

    Args:
        max_items (int): Number of elements rendered before truncating with `...`.
        depth (int): Nesting depth passed to `pprint.pformat` for each element.
        width (int): Line width passed to `pprint.pformat` for each element.
        compact (bool): Whether `pprint.pformat` packs nested elements.
    """

    max_items: int = 20
    depth: int = 3
    width: int = 80
    compact: bool = True

    def iter_repr(self, v: Sequence[Any]) -> str:
        return seq_repr(
            v,
            max_items=self.max_items,
            depth=self.depth,
            width=self.width,
            compact=self.compact,
        )


_CONFIG = Config()


def get_config() -> Config:
    """Return the current process-wide `Config`.

    Example:
    ```python
    >>> import iterx as ix
    >>> ix.get_config().max_items
    20

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace fields of the process-wide `Config` and return the new one.

    Args:
        **changes (Any): Field names and their new values.

    Returns:
        Config: The updated configuration.

    Raises:
        TypeError: If a field name is unknown.

    Example:
    ```python
    >>> import iterx as ix
    >>> _ = ix.set_config(max_items=2)
    >>> ix.Seq((1, 2, 3))
    Seq(1, 2, ...)
    >>> _ = ix.set_config(max_items=20)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
