"""
Indicator Pipeline

Configuration defaults for every registered indicator and a manager that
feeds one observation to a named set of indicators, returning a flat dict of
their values. The manager itself satisfies the ``Indicator`` contract, so a
pipeline can be fed, reset and snapshotted like a single indicator.
"""

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, List, Optional

from .base import Indicator
from .errors import InvalidParameter, UnknownIndicator
from .registry import INDICATOR_REGISTRY, create_indicator


@dataclass
class IndicatorConfig:
    """Default parameters for indicators built by name"""

    # Moving averages
    ema_period: int = 9
    sma_period: int = 9
    wma_period: int = 14
    wema_period: int = 9

    # Windowed statistics
    min_period: int = 14
    max_period: int = 14
    sd_period: int = 9
    mad_period: int = 9

    # Momentum indicators
    rsi_period: int = 14

    macd_fast: int = 12
    macd_slow: int = 26
    macd_signal: int = 9

    ppo_fast: int = 12
    ppo_slow: int = 26
    ppo_signal: int = 9

    stoch_period: int = 14
    stoch_d_period: int = 3
    stoch_smooth_k: int = 3

    cci_period: int = 20
    roc_period: int = 9
    er_period: int = 14

    # Volatility indicators
    atr_period: int = 14
    bb_period: int = 9
    bb_std: float = 2.0
    keltner_period: int = 10
    keltner_multiplier: float = 2.0
    chandelier_period: int = 22
    chandelier_multiplier: float = 3.0

    # Volume indicators
    mfi_period: int = 14

    # Monitoring
    enable_timing: bool = False
    enable_logging: bool = True
    timing_window: int = 1000

    def params_for(self, name: str) -> Dict[str, Any]:
        """
        Constructor keyword arguments for a registry name

        Raises:
            UnknownIndicator: If the name is not registered
        """
        params = {
            "ema": {"period": self.ema_period},
            "sma": {"period": self.sma_period},
            "wma": {"period": self.wma_period},
            "wema": {"period": self.wema_period},
            "min": {"period": self.min_period},
            "max": {"period": self.max_period},
            "sd": {"period": self.sd_period},
            "mad": {"period": self.mad_period},
            "rsi": {"period": self.rsi_period},
            "macd": {
                "fast_period": self.macd_fast,
                "slow_period": self.macd_slow,
                "signal_period": self.macd_signal,
            },
            "ppo": {
                "fast_period": self.ppo_fast,
                "slow_period": self.ppo_slow,
                "signal_period": self.ppo_signal,
            },
            "fast_stoch": {"period": self.stoch_period, "d_period": self.stoch_d_period},
            "slow_stoch": {
                "period": self.stoch_period,
                "k_smoothing": self.stoch_smooth_k,
                "d_period": self.stoch_d_period,
            },
            "cci": {"period": self.cci_period},
            "roc": {"period": self.roc_period},
            "er": {"period": self.er_period},
            "tr": {},
            "atr": {"period": self.atr_period},
            "bb": {"period": self.bb_period, "multiplier": self.bb_std},
            "kc": {"period": self.keltner_period, "multiplier": self.keltner_multiplier},
            "ce": {"period": self.chandelier_period, "multiplier": self.chandelier_multiplier},
            "obv": {},
            "mfi": {"period": self.mfi_period},
        }
        if name not in params:
            raise UnknownIndicator(f"No configuration for indicator: {name}")
        return dict(params[name])


class StreamingIndicators(Indicator):
    """
    Feeds every observation to a named set of indicators

    Names are registry names (``"rsi"``, ``"macd"``) taking their parameters
    from the config, or ``<name>_<period>`` (``"ema_20"``) to override the
    period. Multi-line outputs are flattened as ``<name>_<field>``, e.g.
    ``macd_macd_line`` or ``bb_upper_band``.

    Example:
        stream = StreamingIndicators(["ema_12", "rsi", "bb"])
        for bar in bars:
            values = stream.feed(bar)
    """

    def __init__(self, indicators: List[str], config: Optional[IndicatorConfig] = None):
        super().__init__()
        self.config = config or IndicatorConfig()
        self.logger = logging.getLogger(__name__)

        self.indicators: Dict[str, Indicator] = {}
        for name in indicators:
            if name in self.indicators:
                self.logger.warning(f"Duplicate indicator ignored: {name}")
                continue
            self.indicators[name] = self._build(name)

        # Performance tracking
        self.calculation_times: Dict[str, Deque[float]] = {
            name: deque(maxlen=self.config.timing_window) for name in self.indicators
        }
        self._value = self._collect()

        if self.config.enable_logging:
            self.logger.info(f"StreamingIndicators initialized: {list(self.indicators)}")

    def _build(self, name: str) -> Indicator:
        if name in INDICATOR_REGISTRY:
            return create_indicator(name, **self.config.params_for(name))

        base, _, suffix = name.rpartition("_")
        if base in INDICATOR_REGISTRY and suffix.isdigit():
            params = self.config.params_for(base)
            if "period" not in params:
                raise InvalidParameter(f"Indicator {base!r} does not take a period suffix: {name}")
            params["period"] = int(suffix)
            return create_indicator(base, **params)

        raise UnknownIndicator(
            f"Unknown indicator: {name}. Registered indicators: {INDICATOR_REGISTRY.list_all()}"
        )

    @staticmethod
    def _flatten(name: str, value: Any, out: Dict[str, float]):
        fields = getattr(value, "_fields", None)
        if fields is None:
            out[name] = float(value)
        else:
            for field, component in zip(fields, value):
                out[f"{name}_{field}"] = float(component)

    def _collect(self) -> Dict[str, float]:
        out: Dict[str, float] = {}
        for name, indicator in self.indicators.items():
            self._flatten(name, indicator.current(), out)
        return out

    def _next(self, observation: Any) -> Dict[str, float]:
        out: Dict[str, float] = {}
        timing = self.config.enable_timing
        for name, indicator in self.indicators.items():
            if timing:
                start = time.perf_counter()
                value = indicator.feed(observation)
                self.calculation_times[name].append(time.perf_counter() - start)
            else:
                value = indicator.feed(observation)
            self._flatten(name, value, out)
        return out

    def _reset(self):
        for indicator in self.indicators.values():
            indicator.reset()
        for samples in self.calculation_times.values():
            samples.clear()

    def reset(self):
        super().reset()
        self._value = self._collect()

    def get_performance_stats(self) -> Dict[str, Any]:
        """Per-indicator feed timings in milliseconds (empty unless enable_timing)"""
        stats: Dict[str, Any] = {"call_count": self.count, "indicators": {}}
        for name, samples in self.calculation_times.items():
            if not samples:
                continue
            stats["indicators"][name] = {
                "samples": len(samples),
                "mean_ms": sum(samples) / len(samples) * 1000,
                "max_ms": max(samples) * 1000,
            }
        return stats

    def __getitem__(self, name: str) -> Indicator:
        return self.indicators[name]

    def __str__(self):
        return f"STREAM({', '.join(str(ind) for ind in self.indicators.values())})"


__all__ = [
    "IndicatorConfig",
    "StreamingIndicators",
]
