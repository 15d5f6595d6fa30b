"""
Tests for volatility indicators
"""

import math

import pytest

from ta_stream import (
    AverageTrueRange,
    BollingerBands,
    BollingerBandsResult,
    ChandelierExit,
    ChandelierExitResult,
    InvalidParameter,
    KeltnerChannel,
    KeltnerChannelResult,
    TrueRange,
)

from . import assert_sequence_almost_equal, bar, feed_all, generate_bars

BARS = [
    bar(high=10.0, low=7.5, close=9.0),
    bar(high=11.0, low=9.0, close=9.5),
    bar(high=9.0, low=5.0, close=8.0),
]


class TestTrueRange:
    """Test true range against previous close"""

    def test_known_values(self):
        tr = TrueRange()
        assert feed_all(tr, BARS) == [2.5, 2.0, 4.5]

    def test_scalar_input(self):
        """Bare numbers act as bars with high = low = close"""
        tr = TrueRange()
        assert feed_all(tr, [10.0, 12.0, 11.5]) == [0.0, 2.0, 0.5]

    def test_display(self):
        assert str(TrueRange()) == "TRUE_RANGE()"


class TestAverageTrueRange:
    """Test Wilder-smoothed ATR"""

    def test_known_values(self):
        atr = AverageTrueRange(3)
        result = feed_all(atr, BARS)

        assert_sequence_almost_equal(result, [2.5, 7.0 / 3.0, 27.5 / 9.0])

    def test_reset_starts_over(self):
        atr = AverageTrueRange(3)
        feed_all(atr, BARS)
        atr.reset()

        assert atr.current() == 0.0
        assert atr.feed(bar(high=60.0, low=15.0, close=51.0)) == 45.0

    def test_non_negative(self):
        atr = AverageTrueRange(14)
        for value in feed_all(atr, generate_bars(300)):
            assert value >= 0.0

    def test_display(self):
        assert str(AverageTrueRange(14)) == "ATR(14)"


class TestBollingerBands:
    """Test Bollinger Bands"""

    def test_known_values(self):
        bb = BollingerBands(3, 2.0)

        assert bb.feed(2.0) == BollingerBandsResult(2.0, 2.0, 2.0)

        result = bb.feed(4.0)
        assert_sequence_almost_equal(result, [5.0, 3.0, 1.0])

        result = bb.feed(6.0)
        width = 2.0 * math.sqrt(8.0 / 3.0)
        assert_sequence_almost_equal(result, [4.0 + width, 4.0, 4.0 - width])

    def test_band_ordering(self):
        """lower <= middle <= upper and the bands are symmetric"""
        bb = BollingerBands(20, 2.0)

        for result in feed_all(bb, generate_bars(300)):
            assert result.lower_band <= result.middle_band <= result.upper_band
            upper_width = result.upper_band - result.middle_band
            lower_width = result.middle_band - result.lower_band
            assert abs(upper_width - lower_width) < 1e-9

    def test_zero_multiplier_collapses_bands(self):
        bb = BollingerBands(5, 0.0)
        for result in feed_all(bb, [1.0, 5.0, 2.0, 8.0]):
            assert result.upper_band == result.middle_band == result.lower_band

    def test_default_before_feed(self):
        assert BollingerBands().current() == BollingerBandsResult(0.0, 0.0, 0.0)

    @pytest.mark.parametrize("multiplier", [-1.0, float("nan"), float("inf")])
    def test_invalid_multiplier(self, multiplier):
        with pytest.raises(InvalidParameter):
            BollingerBands(9, multiplier)

    def test_display(self):
        assert str(BollingerBands(9, 2)) == "BB(9, 2)"
        assert str(BollingerBands(20, 2.5)) == "BB(20, 2.5)"


class TestKeltnerChannel:
    """Test Keltner Channel"""

    def test_first_bar(self):
        kc = KeltnerChannel(3, 1.0)
        result = kc.feed(BARS[0])

        assert result == KeltnerChannelResult(11.5, 9.0, 6.5)

    def test_channel_ordering(self):
        kc = KeltnerChannel(20, 2.0)
        for result in feed_all(kc, generate_bars(300)):
            assert result.lower_channel <= result.middle_line <= result.upper_channel

    def test_display(self):
        assert str(KeltnerChannel(20, 2.0)) == "KC(20, 2)"


class TestChandelierExit:
    """Test Chandelier Exit"""

    def test_first_bar(self):
        ce = ChandelierExit(3, 2.0)
        result = ce.feed(BARS[0])

        assert result == ChandelierExitResult(5.0, 12.5)

    def test_known_values(self):
        ce = ChandelierExit(3, 2.0)
        result = feed_all(ce, BARS)[-1]

        atr = 27.5 / 9.0
        assert_sequence_almost_equal(result, [11.0 - 2.0 * atr, 5.0 + 2.0 * atr])

    def test_display(self):
        assert str(ChandelierExit(22, 3.0)) == "CE(22, 3)"
