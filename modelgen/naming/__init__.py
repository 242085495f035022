from .base import NamingStrategy
from .legacy import LegacyNamingStrategy
from .column_based import ColumnBasedNamingStrategy
from .factory import DEFAULT_NAMING_STRATEGY, NAMING_STRATEGIES, get_naming_strategy

__all__ = [
    "NamingStrategy",
    "LegacyNamingStrategy",
    "ColumnBasedNamingStrategy",
    "DEFAULT_NAMING_STRATEGY",
    "NAMING_STRATEGIES",
    "get_naming_strategy",
]
