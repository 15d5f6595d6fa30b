"""
ta_stream - Streaming Technical Analysis Indicators

Stateful indicators that consume market observations one at a time and emit
an updated value after each one, without re-scanning history.

Key Features:
- Primitive indicators: EMA, SMA, Wilder MA, windowed EMA, rolling
  Minimum/Maximum, Standard Deviation, Mean Absolute Deviation, True Range
- Composite indicators: MACD, PPO, Bollinger Bands, ATR, Keltner Channel,
  Chandelier Exit, Fast/Slow Stochastic, RSI, CCI, MFI, ROC, OBV,
  Efficiency Ratio
- Uniform feed/current/reset contract for generic pipelines
- Construction-time validation; feeding never fails on degenerate input
- Plain-data state snapshots

Usage:
    from ta_stream import ExponentialMovingAverage, create_indicator

    ema = ExponentialMovingAverage(3)
    for price in (2.0, 5.0, 1.0, 6.25):
        ema.feed(price)            # 2.0, 3.5, 2.25, 4.25

    macd = create_indicator("macd", 12, 26, 9)
    result = macd.feed(bar)        # MACDResult(macd_line, signal_line, histogram)
"""

__version__ = "0.5.0"
__author__ = "ML-Framework Team"
__email__ = "dev@ml-framework.dev"
__license__ = "MIT"

from .errors import (
    TaStreamError,
    InvalidPeriod,
    InvalidParameter,
    UnknownIndicator,
    SnapshotError,
)

from .base import (
    Indicator,
    Bar,
    HasOpen,
    HasHigh,
    HasLow,
    HasClose,
    HasVolume,
    HasHighLowClose,
    HasCloseVolume,
    HasHighLowCloseVolume,
    CloseObservation,
    RangeObservation,
    VolumeObservation,
    MoneyFlowObservation,
)

from .data_item import DataItem

from .indicators import (
    # Moving averages
    ExponentialMovingAverage,
    SimpleMovingAverage,
    WilderMovingAverage,
    WindowedExponentialMovingAverage,

    # Windowed statistics
    Minimum,
    Maximum,
    StandardDeviation,
    MeanAbsoluteDeviation,

    # Volatility
    TrueRange,
    AverageTrueRange,
    BollingerBands,
    KeltnerChannel,
    ChandelierExit,
    BollingerBandsResult,
    KeltnerChannelResult,
    ChandelierExitResult,

    # Momentum
    MovingAverageConvergenceDivergence,
    PercentagePriceOscillator,
    RelativeStrengthIndex,
    FastStochastic,
    SlowStochastic,
    CommodityChannelIndex,
    RateOfChange,
    EfficiencyRatio,
    MACDResult,
    PPOResult,
    StochasticResult,

    # Volume
    OnBalanceVolume,
    MoneyFlowIndex,
)

from .registry import (
    INDICATOR_REGISTRY,
    register_indicator,
    create_indicator,
    list_indicators,
)

from .pipeline import (
    IndicatorConfig,
    StreamingIndicators,
)

from .snapshot import (
    to_snapshot,
    from_snapshot,
    dumps,
    loads,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",

    # Errors
    "TaStreamError",
    "InvalidPeriod",
    "InvalidParameter",
    "UnknownIndicator",
    "SnapshotError",

    # Contract and observations
    "Indicator",
    "Bar",
    "HasOpen",
    "HasHigh",
    "HasLow",
    "HasClose",
    "HasVolume",
    "HasHighLowClose",
    "HasCloseVolume",
    "HasHighLowCloseVolume",
    "CloseObservation",
    "RangeObservation",
    "VolumeObservation",
    "MoneyFlowObservation",
    "DataItem",

    # Moving averages
    "ExponentialMovingAverage",
    "SimpleMovingAverage",
    "WilderMovingAverage",
    "WindowedExponentialMovingAverage",

    # Windowed statistics
    "Minimum",
    "Maximum",
    "StandardDeviation",
    "MeanAbsoluteDeviation",

    # Volatility
    "TrueRange",
    "AverageTrueRange",
    "BollingerBands",
    "KeltnerChannel",
    "ChandelierExit",
    "BollingerBandsResult",
    "KeltnerChannelResult",
    "ChandelierExitResult",

    # Momentum
    "MovingAverageConvergenceDivergence",
    "PercentagePriceOscillator",
    "RelativeStrengthIndex",
    "FastStochastic",
    "SlowStochastic",
    "CommodityChannelIndex",
    "RateOfChange",
    "EfficiencyRatio",
    "MACDResult",
    "PPOResult",
    "StochasticResult",

    # Volume
    "OnBalanceVolume",
    "MoneyFlowIndex",

    # Factory
    "INDICATOR_REGISTRY",
    "register_indicator",
    "create_indicator",
    "list_indicators",

    # Pipeline
    "IndicatorConfig",
    "StreamingIndicators",

    # Snapshots
    "to_snapshot",
    "from_snapshot",
    "dumps",
    "loads",
]

# Setup logging
import logging
import os

logging.basicConfig(
    level=logging.INFO if os.getenv("TA_STREAM_DEBUG") else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)
logger.info(f"ta_stream v{__version__} initialized - {len(list_indicators())} indicators registered")
