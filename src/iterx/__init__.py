import logging

from . import funcs
from ._core import (
    Compare,
    Config,
    Equal,
    Ordering,
    Pipeable,
    get_config,
    natural_cmp,
    set_config,
)
from ._iter import Iter, Seq
from ._peekable import Peekable
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._types import Group, MinMax, Partitioned, Split, Unzipped

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Compare",
    "Config",
    "Equal",
    "Group",
    "Iter",
    "MinMax",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Ordering",
    "Partitioned",
    "Peekable",
    "Pipeable",
    "Seq",
    "Some",
    "Split",
    "Unzipped",
    "funcs",
    "get_config",
    "natural_cmp",
    "set_config",
]
