import importlib
import logging
from typing import Dict, Type, Union

from ..errors import NamingStrategyError
from .base import NamingStrategy
from .column_based import ColumnBasedNamingStrategy
from .legacy import LegacyNamingStrategy

logger = logging.getLogger(__name__)

DEFAULT_NAMING_STRATEGY = ColumnBasedNamingStrategy.name

NAMING_STRATEGIES: Dict[str, Type[NamingStrategy]] = {
    LegacyNamingStrategy.name: LegacyNamingStrategy,
    ColumnBasedNamingStrategy.name: ColumnBasedNamingStrategy,
}


def get_naming_strategy(strategy: Union[str, NamingStrategy, Type[NamingStrategy], None] = None) -> NamingStrategy:
    """
        Resolve a naming strategy from a registered name (``legacy``,
        ``column_based``), a dotted ``module.ClassName`` path, a NamingStrategy
        subclass or an instance.
        
        Raises NamingStrategyError for anything else, so a bad setting fails
        before any relationship is classified.
    """
    if strategy is None:
        strategy = DEFAULT_NAMING_STRATEGY
    
    if isinstance(strategy, NamingStrategy):
        return strategy
    
    if isinstance(strategy, str):
        strategy_class = NAMING_STRATEGIES.get(strategy.strip().lower()) or _import_strategy(strategy)
    else:
        strategy_class = strategy
    
    if not (isinstance(strategy_class, type) and issubclass(strategy_class, NamingStrategy)):
        raise NamingStrategyError(
            f"Naming strategy {strategy!r} must be one of {sorted(NAMING_STRATEGIES)} "
            f"or a subclass of NamingStrategy"
        )
    
    try:
        instance = strategy_class()
    except TypeError as e:
        raise NamingStrategyError(f"Cannot instantiate naming strategy {strategy_class.__name__}: {e}") from e
    
    logger.info(f"Using naming strategy: {strategy_class.__name__}")
    return instance


def _import_strategy(path: str):
    module_name, _, class_name = path.rpartition(".")
    if not module_name:
        raise NamingStrategyError(
            f"Unknown naming strategy '{path}'. Available: {', '.join(sorted(NAMING_STRATEGIES))}"
        )
    
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise NamingStrategyError(f"Cannot import naming strategy module '{module_name}': {e}") from e
    
    try:
        return getattr(module, class_name)
    except AttributeError as e:
        raise NamingStrategyError(f"Module '{module_name}' has no naming strategy '{class_name}'") from e
