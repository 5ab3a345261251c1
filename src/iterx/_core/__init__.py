from ._config import Config, get_config, set_config
from ._main import CommonBase, Pipeable
from ._protocols import (
    Compare,
    Equal,
    Ordering,
    natural_cmp,
)

__all__ = [
    "CommonBase",
    "Compare",
    "Config",
    "Equal",
    "Ordering",
    "Pipeable",
    "get_config",
    "natural_cmp",
    "set_config",
]
