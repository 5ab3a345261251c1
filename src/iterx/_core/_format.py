from collections.abc import Sequence
from pprint import pformat
from typing import Any


def seq_repr(
    v: Sequence[Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    truncated = v[:max_items]
    suffix = ", ..." if len(v) > max_items else ""
    return (
        ", ".join(
            pformat(item, depth=depth, width=width, compact=compact)
            for item in truncated
        )
        + suffix
    )
