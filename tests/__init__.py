"""
Test Suite for ta_stream

Unit tests for the rolling window store, every indicator, the factory,
pipeline and snapshot layers, plus throughput benchmarks.

Test Structure:
- Known-value regressions for each indicator
- Oracle comparisons against pandas rolling/ewm statistics
- Contract checks (period validation, reset, observation kinds)
- Edge case validation (flat windows, zero denominators)
"""

import math
from typing import Any, Iterable, List

import numpy as np
import pandas as pd

from ta_stream import DataItem


# Test data generators
def generate_price_data(n_points: int = 1000, start_price: float = 100.0, seed: int = 42) -> np.ndarray:
    """Generate realistic price data for testing"""
    rng = np.random.default_rng(seed)

    # Returns with drift and some volatility clustering
    returns = rng.normal(0.0005, 0.02, n_points)
    volatility = rng.exponential(0.01, n_points)
    returns = returns * (1 + volatility)

    return start_price * np.cumprod(1 + returns)


def generate_ohlcv_data(n_points: int = 1000, seed: int = 42) -> pd.DataFrame:
    """Generate consistent OHLCV bars (low <= open, close <= high) for testing"""
    rng = np.random.default_rng(seed)
    close_prices = generate_price_data(n_points, seed=seed)

    data = []
    for i, close in enumerate(close_prices):
        open_price = close_prices[i - 1] * (1 + rng.normal(0, 0.005)) if i else close
        spread = 0.01 + rng.exponential(0.005)
        high = max(open_price, close) * (1 + rng.uniform(0, spread))
        low = min(open_price, close) * (1 - rng.uniform(0, spread))

        data.append({
            'open': open_price,
            'high': high,
            'low': low,
            'close': close,
            'volume': rng.lognormal(10, 1)
        })

    dates = pd.date_range('2020-01-01', periods=n_points, freq='D')
    return pd.DataFrame(data, index=dates)


def generate_bars(n_points: int = 200, seed: int = 42) -> List[DataItem]:
    """Generate validated DataItem bars"""
    frame = generate_ohlcv_data(n_points, seed=seed)
    return [
        DataItem.create(row.open, row.high, row.low, row.close, row.volume)
        for row in frame.itertuples(index=False)
    ]


def bar(high: float, low: float, close: float, volume: float = 1000.0, open: float = None) -> DataItem:
    """Build a bar from the fields an indicator test cares about"""
    return DataItem(
        open=close if open is None else open,
        high=high,
        low=low,
        close=close,
        volume=volume
    )


def feed_all(indicator, observations: Iterable[Any]) -> list:
    """Feed observations one by one and collect every returned value"""
    return [indicator.feed(observation) for observation in observations]


# Test utilities
def assert_sequence_almost_equal(actual, expected, tolerance: float = 1e-9):
    """Assert two numeric sequences match element-wise"""
    actual = list(actual)
    expected = list(expected)
    assert len(actual) == len(expected), f"Length mismatch: {len(actual)} vs {len(expected)}"
    for i, (a, e) in enumerate(zip(actual, expected)):
        assert math.isclose(a, e, rel_tol=tolerance, abs_tol=tolerance), \
            f"Mismatch at {i}: {a} != {e}"


def is_finite_output(value: Any) -> bool:
    """True if a scalar or every field of a result tuple is finite"""
    if isinstance(value, tuple):
        return all(math.isfinite(v) for v in value)
    return math.isfinite(value)


# Common test data
SAMPLE_PRICES = generate_price_data(300)
SAMPLE_OHLCV = generate_ohlcv_data(300)

__all__ = [
    "generate_price_data",
    "generate_ohlcv_data",
    "generate_bars",
    "bar",
    "feed_all",
    "assert_sequence_almost_equal",
    "is_finite_output",
    "SAMPLE_PRICES",
    "SAMPLE_OHLCV",
]
