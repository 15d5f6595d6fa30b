"""Indicator registry and construction dispatcher."""

import logging
from typing import Any, Dict, List, Type

from .base import Indicator
from .errors import UnknownIndicator

logger = logging.getLogger(__name__)


class IndicatorRegistry:
    """
    Central registry of indicator classes keyed by short name.

    Factory construction goes through here so that parameter validation
    happens in exactly one place: the indicator constructor.
    """

    def __init__(self):
        self._classes: Dict[str, Type[Indicator]] = {}

    def register(self, name: str, cls: Type[Indicator]):
        if name in self._classes and self._classes[name] is not cls:
            logger.warning(f"Overwriting existing indicator: {name}")

        self._classes[name] = cls
        logger.debug(f"Registered indicator: {name} -> {cls.__name__}")

    def get(self, name: str) -> Type[Indicator]:
        """
        Look up an indicator class

        Raises:
            UnknownIndicator: If the name is not registered
        """
        try:
            return self._classes[name]
        except KeyError:
            raise UnknownIndicator(
                f"Unknown indicator: {name}. Registered indicators: {self.list_all()}"
            ) from None

    def list_all(self) -> List[str]:
        return sorted(self._classes)

    def is_registered(self, name: str) -> bool:
        return name in self._classes

    def __contains__(self, name: str) -> bool:
        return name in self._classes


# Global registry instance
INDICATOR_REGISTRY = IndicatorRegistry()


def register_indicator(name: str):
    """
    Class decorator adding an indicator to the global registry.

    Usage:
        @register_indicator("ema")
        class ExponentialMovingAverage(Indicator):
            ...
    """
    def decorator(cls):
        INDICATOR_REGISTRY.register(name, cls)
        return cls
    return decorator


def create_indicator(name: str, *args: Any, **kwargs: Any) -> Indicator:
    """
    Construct a registered indicator by name

    Args:
        name: Registry name (e.g. "ema", "macd", "bb")
        *args, **kwargs: Constructor parameters (periods, multipliers)

    Returns:
        Ready-to-feed indicator

    Raises:
        UnknownIndicator: If the name is not registered
        InvalidPeriod: If a period is invalid
        InvalidParameter: If another parameter is invalid
    """
    cls = INDICATOR_REGISTRY.get(name)
    indicator = cls(*args, **kwargs)
    logger.debug(f"Created indicator {indicator}")
    return indicator


def list_indicators() -> List[str]:
    """Sorted list of registered indicator names"""
    return INDICATOR_REGISTRY.list_all()


__all__ = [
    "IndicatorRegistry",
    "INDICATOR_REGISTRY",
    "register_indicator",
    "create_indicator",
    "list_indicators",
]
