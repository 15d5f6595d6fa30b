"""
Streaming Technical Indicators

Every indicator consumes one observation per ``feed`` call and updates in
constant time (or O(period) for rescanned windows) without revisiting history.

Available indicators:
- Moving averages: EMA, SMA, Wilder MA, Windowed EMA
- Windowed statistics: Minimum, Maximum, Standard Deviation, Mean Absolute Deviation
- Volatility: True Range, ATR, Bollinger Bands, Keltner Channel, Chandelier Exit
- Momentum: MACD, PPO, RSI, Fast/Slow Stochastic, CCI, ROC, Efficiency Ratio
- Volume: OBV, MFI
"""

from .moving_average import (
    ExponentialMovingAverage,
    SimpleMovingAverage,
    WilderMovingAverage,
    WindowedExponentialMovingAverage,
)

from .statistics import (
    Minimum,
    Maximum,
    StandardDeviation,
    MeanAbsoluteDeviation,
)

from .volatility import (
    TrueRange,
    AverageTrueRange,
    BollingerBands,
    KeltnerChannel,
    ChandelierExit,

    # Result types
    BollingerBandsResult,
    KeltnerChannelResult,
    ChandelierExitResult,
)

from .technical import (
    MovingAverageConvergenceDivergence,
    PercentagePriceOscillator,
    RelativeStrengthIndex,
    FastStochastic,
    SlowStochastic,
    CommodityChannelIndex,
    RateOfChange,
    EfficiencyRatio,

    # Result types
    MACDResult,
    PPOResult,
    StochasticResult,
)

from .volume import (
    OnBalanceVolume,
    MoneyFlowIndex,
)

__all__ = [
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

    # Volatility indicators
    "TrueRange",
    "AverageTrueRange",
    "BollingerBands",
    "KeltnerChannel",
    "ChandelierExit",
    "BollingerBandsResult",
    "KeltnerChannelResult",
    "ChandelierExitResult",

    # Momentum indicators
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

    # Volume indicators
    "OnBalanceVolume",
    "MoneyFlowIndex",
]
