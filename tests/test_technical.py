"""
Tests for momentum indicators
"""

import numpy as np
import pytest

from ta_stream import (
    CommodityChannelIndex,
    EfficiencyRatio,
    FastStochastic,
    InvalidPeriod,
    MACDResult,
    MovingAverageConvergenceDivergence,
    PercentagePriceOscillator,
    RateOfChange,
    RelativeStrengthIndex,
    SlowStochastic,
    StochasticResult,
)
from ta_stream.indicators.technical import _SpreadOscillator

from . import SAMPLE_PRICES, assert_sequence_almost_equal, bar, feed_all, generate_bars

PRICES = [2.0, 5.0, 1.0, 6.25]


class TestMACD:
    """Test MACD line, signal and histogram"""

    def test_known_values(self):
        macd = MovingAverageConvergenceDivergence(1, 3, 3)
        result = feed_all(macd, PRICES)

        assert result == [
            MACDResult(0.0, 0.0, 0.0),
            MACDResult(1.5, 0.75, 0.75),
            MACDResult(-1.25, -0.25, -1.0),
            MACDResult(2.0, 0.875, 1.125),
        ]

    def test_histogram_identity(self):
        macd = MovingAverageConvergenceDivergence(12, 26, 9)
        for result in feed_all(macd, SAMPLE_PRICES):
            assert result.histogram == result.macd_line - result.signal_line

    def test_constant_input(self):
        macd = MovingAverageConvergenceDivergence()
        for result in feed_all(macd, [42.0] * 50):
            assert result == MACDResult(0.0, 0.0, 0.0)

    @pytest.mark.parametrize("fast,slow", [(26, 12), (12, 12)])
    def test_fast_must_be_less_than_slow(self, fast, slow):
        with pytest.raises(InvalidPeriod) as exc_info:
            MovingAverageConvergenceDivergence(fast, slow, 9)
        assert exc_info.value.name == "fast_period"

    def test_zero_periods(self):
        with pytest.raises(InvalidPeriod):
            MovingAverageConvergenceDivergence(0, 26, 9)
        with pytest.raises(InvalidPeriod):
            MovingAverageConvergenceDivergence(12, 26, 0)

    def test_display(self):
        assert str(MovingAverageConvergenceDivergence(12, 26, 9)) == "MACD(12, 26, 9)"


class TestPPO:
    """Test Percentage Price Oscillator"""

    def test_known_values(self):
        ppo = PercentagePriceOscillator(1, 3, 3)
        result = feed_all(ppo, PRICES)

        lines = [r.ppo_line for r in result]
        assert_sequence_almost_equal(
            lines,
            [0.0, 1.5 / 3.5 * 100, -1.25 / 2.25 * 100, 2.0 / 4.25 * 100],
        )
        for r in result:
            assert r.histogram == r.ppo_line - r.signal_line

    def test_zero_slow_average(self):
        ppo = PercentagePriceOscillator(2, 4, 3)
        assert feed_all(ppo, [0.0, 0.0]) == [(0.0, 0.0, 0.0), (0.0, 0.0, 0.0)]

    def test_fast_must_be_less_than_slow(self):
        with pytest.raises(InvalidPeriod):
            PercentagePriceOscillator(5, 3, 2)

    def test_display(self):
        assert str(PercentagePriceOscillator(12, 26, 9)) == "PPO(12, 26, 9)"

    def test_spread_base_is_abstract(self):
        with pytest.raises(TypeError):
            _SpreadOscillator(1, 2, 3)


class TestRSI:
    """Test Relative Strength Index"""

    def test_known_values(self):
        rsi = RelativeStrengthIndex(3)
        result = feed_all(rsi, [1.0, 2.0, 1.5])

        assert_sequence_almost_equal(result, [50.0, 100.0, 80.0])

    def test_range(self):
        rsi = RelativeStrengthIndex(14)
        for value in feed_all(rsi, SAMPLE_PRICES):
            assert 0.0 <= value <= 100.0

    def test_rising_input_is_100(self):
        rsi = RelativeStrengthIndex(14)
        result = feed_all(rsi, [1.0, 2.0, 2.0, 3.0, 5.0, 5.0, 8.0])
        assert result[1:] == [100.0] * 6

    def test_falling_input_is_0(self):
        rsi = RelativeStrengthIndex(5)
        result = feed_all(rsi, [10.0, 9.0, 8.0, 7.0])
        assert result[1:] == [0.0, 0.0, 0.0]

    def test_flat_input_is_50(self):
        rsi = RelativeStrengthIndex(5)
        assert feed_all(rsi, [3.0] * 6) == [50.0] * 6

    def test_default(self):
        assert RelativeStrengthIndex().current() == 50.0

    def test_display(self):
        assert str(RelativeStrengthIndex(14)) == "RSI(14)"


class TestStochastic:
    """Test fast and slow stochastic oscillators"""

    def test_fast_known_values(self):
        stoch = FastStochastic(3, 3)
        result = feed_all(stoch, [1.0, 2.0, 3.0, 2.0])

        assert_sequence_almost_equal([r.percent_k for r in result], [0.0, 100.0, 100.0, 0.0])
        assert_sequence_almost_equal(
            [r.percent_d for r in result], [0.0, 50.0, 200.0 / 3.0, 200.0 / 3.0]
        )

    def test_flat_window_is_zero(self):
        stoch = FastStochastic(5, 3)
        for result in feed_all(stoch, [bar(high=4.0, low=4.0, close=4.0)] * 8):
            assert result == StochasticResult(0.0, 0.0)

    def test_uses_high_low_range(self):
        stoch = FastStochastic(2, 1)
        stoch.feed(bar(high=12.0, low=8.0, close=10.0))
        result = stoch.feed(bar(high=11.0, low=9.0, close=11.0))

        assert result.percent_k == 75.0
        assert result.percent_d == 75.0

    def test_range(self):
        stoch = FastStochastic(14, 3)
        for result in feed_all(stoch, generate_bars(300)):
            assert 0.0 <= result.percent_k <= 100.0
            assert -1e-9 <= result.percent_d <= 100.0 + 1e-9

    def test_slow_known_values(self):
        stoch = SlowStochastic(3, 2, 2)
        result = feed_all(stoch, [1.0, 2.0, 3.0, 2.0])

        assert_sequence_almost_equal([r.percent_k for r in result], [0.0, 50.0, 100.0, 50.0])
        assert_sequence_almost_equal([r.percent_d for r in result], [0.0, 25.0, 75.0, 75.0])

    def test_invalid_periods(self):
        with pytest.raises(InvalidPeriod):
            FastStochastic(14, 0)
        with pytest.raises(InvalidPeriod):
            SlowStochastic(14, 0, 3)

    def test_display(self):
        assert str(FastStochastic(14, 3)) == "FAST_STOCH(14, 3)"
        assert str(SlowStochastic(14, 3, 3)) == "SLOW_STOCH(14, 3, 3)"


class TestCCI:
    """Test Commodity Channel Index"""

    def test_known_values(self):
        cci = CommodityChannelIndex(3)
        result = feed_all(cci, [1.0, 2.0, 3.0])

        assert_sequence_almost_equal(result, [0.0, 0.5 / 0.0075, 100.0])

    def test_typical_price(self):
        cci = CommodityChannelIndex(2)
        cci.feed(bar(high=3.0, low=0.0, close=0.0))
        # typical prices 1 and 3: mean 2, MAD 1
        result = cci.feed(bar(high=4.0, low=2.0, close=3.0))

        assert abs(result - 1.0 / 0.015) < 1e-9

    def test_constant_input_is_zero(self):
        cci = CommodityChannelIndex(5)
        assert feed_all(cci, [7.0] * 10) == [0.0] * 10

    def test_flat_run_after_noise_is_zero(self):
        """A flat window at a large price level reports exactly 0"""
        noisy = list(100.0 + np.random.default_rng(1).normal(0.0, 5.0, 50))
        cci = CommodityChannelIndex(20)
        feed_all(cci, noisy)

        result = feed_all(cci, [1234.567] * 25)
        assert result[19:] == [0.0] * 6

    def test_display(self):
        assert str(CommodityChannelIndex(20)) == "CCI(20)"


class TestROC:
    """Test Rate of Change"""

    def test_known_values(self):
        roc = RateOfChange(2)
        result = feed_all(roc, [10.0, 11.0, 12.0, 9.0, 0.0, 5.0])

        assert_sequence_almost_equal(
            result, [0.0, 0.0, 20.0, -2.0 / 11.0 * 100, -100.0, -4.0 / 9.0 * 100]
        )

    def test_zero_lagged_close(self):
        roc = RateOfChange(2)
        assert feed_all(roc, [0.0, 1.0, 2.0]) == [0.0, 0.0, 0.0]

    def test_display(self):
        assert str(RateOfChange(9)) == "ROC(9)"


class TestEfficiencyRatio:
    """Test Kaufman Efficiency Ratio"""

    def test_straight_line(self):
        er = EfficiencyRatio(3)
        assert feed_all(er, [1.0, 2.0, 3.0, 4.0, 5.0]) == [0.0, 1.0, 1.0, 1.0, 1.0]

    def test_noise(self):
        er = EfficiencyRatio(3)
        result = feed_all(er, [1.0, 2.0, 1.0, 2.0])

        assert_sequence_almost_equal(result, [0.0, 1.0, 0.0, 1.0 / 3.0])

    def test_flat_input_is_zero(self):
        er = EfficiencyRatio(4)
        assert feed_all(er, [5.0] * 6) == [0.0] * 6

    def test_range(self):
        er = EfficiencyRatio(10)
        for value in feed_all(er, SAMPLE_PRICES):
            assert 0.0 <= value <= 1.0 + 1e-9

    def test_display(self):
        assert str(EfficiencyRatio(14)) == "ER(14)"
