"""Tests for scoring.py - han/fu to points"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahc.core.errors import NoHan, NoFu, NoYaku, InvalidScoreInput, CalculatorError
from mahc.rules.fu import Fu
from mahc.rules.scoring import (
    LimitHand, Payments, calculate_hand_score, format_payments,
    get_limit_hand, is_limit_hand, score,
)

PINFU_HAND = ["234m", "567p", "234s", "678s", "55p"]


class TestScore:
    def test_4han_30fu_3_honba(self):
        assert score(4, 30, 3) == (12500, 4200, 8600, 2300, 4200)

    def test_1han_30fu(self):
        assert score(1, 30) == (1500, 500, 1000, 300, 500)

    def test_2han_80fu(self):
        assert score(2, 80) == (7700, 2600, 5200, 1300, 2600)

    def test_mangan(self):
        assert score(5, 30, 3) == (12900, 4300, 8900, 2300, 4300)

    def test_haneman(self):
        assert score(6, 30, 3) == (18900, 6300, 12900, 3300, 6300)

    def test_baiman(self):
        assert score(8, 30, 3) == (24900, 8300, 16900, 4300, 8300)

    def test_sanbaiman(self):
        assert score(11, 30, 3) == (36900, 12300, 24900, 6300, 12300)

    def test_kazoe_yakuman(self):
        assert score(13, 30, 3) == (48900, 16300, 32900, 8300, 16300)

    def test_high_fu_mangan(self):
        assert score(4, 40) == (12000, 4000, 8000, 2000, 4000)
        assert score(3, 70) == (12000, 4000, 8000, 2000, 4000)

    def test_named_fields(self):
        p = score(1, 30)
        assert isinstance(p, Payments)
        assert p.dealer_ron == 1500
        assert p.non_dealer_tsumo_dealer == 500

    def test_no_han(self):
        with pytest.raises(NoHan) as exc:
            score(0, 30)
        assert str(exc.value) == "No Han provided!"

    def test_no_fu(self):
        with pytest.raises(NoFu) as exc:
            score(1, 0)
        assert str(exc.value) == "No Fu provided!"

    def test_negative_values(self):
        for han, fu, honba in [(-1, 30, 0), (1, -30, 0), (1, 30, -1)]:
            with pytest.raises(InvalidScoreInput):
                score(han, fu, honba)

    def test_errors_are_calculator_errors(self):
        with pytest.raises(CalculatorError):
            score(0, 0)


class TestLimitHand:
    def test_below_limit(self):
        assert not is_limit_hand(4, 30)
        assert not is_limit_hand(3, 60)
        assert get_limit_hand(4, 30) is None

    def test_tiers(self):
        assert get_limit_hand(4, 40) == LimitHand.MANGAN
        assert get_limit_hand(5, 30) == LimitHand.MANGAN
        assert get_limit_hand(7, 30) == LimitHand.HANEMAN
        assert get_limit_hand(10, 30) == LimitHand.BAIMAN
        assert get_limit_hand(12, 30) == LimitHand.SANBAIMAN
        assert get_limit_hand(26, 30) == LimitHand.KAZOE_YAKUMAN

    def test_haneman_is_one_and_a_half_mangan(self):
        assert LimitHand.HANEMAN.payments == (18000, 6000, 12000, 3000, 6000)


class TestFormatPayments:
    def test_format(self):
        assert format_payments(score(4, 30, 3)) == "Dealer: 12500 (4200)\nnon-dealer: 8600 (2300/4200)"

    def test_accepts_plain_tuple(self):
        assert format_payments((1500, 500, 1000, 300, 500)) == "Dealer: 1500 (500)\nnon-dealer: 1000 (300/500)"


class TestHandScore:
    def test_riichi_tsumo_pinfu_with_dora(self):
        result = calculate_hand_score(PINFU_HAND, "4m", dora=1,
                                      is_tsumo=True, is_riichi=True)
        assert result.han == 5
        assert result.fu == 30
        assert result.limit == LimitHand.MANGAN
        assert result.payments == (12000, 4000, 8000, 2000, 4000)
        assert result.rank_name == "満貫"

    def test_riichi_ron_pinfu(self):
        result = calculate_hand_score(PINFU_HAND, "4m", is_riichi=True)
        assert result.han == 3
        assert result.fu == 30
        assert result.fu_breakdown == [Fu.BASE_POINTS, Fu.CLOSED_RON]
        assert result.limit is None
        assert result.payments == (5800, 2000, 3900, 1000, 2000)
        assert result.rank_name == "3翻30符"

    def test_honba(self):
        result = calculate_hand_score(PINFU_HAND, "4m", honba=1, is_riichi=True)
        assert result.payments == (6100, 2100, 4200, 1100, 2100)

    def test_dora_alone_is_not_yaku(self):
        with pytest.raises(NoYaku):
            calculate_hand_score(["234mo", "567p", "234s", "678s", "11p"], "7p", dora=3)

    def test_chiitoitsu(self):
        result = calculate_hand_score(["11m", "22m", "33p", "44p", "55s", "66s", "99p"],
                                      "9p", is_riichi=True)
        assert result.yaku == [("立直", 1), ("七対子", 2)]
        assert result.fu == 40
        assert result.payments == (7700, 2600, 5200, 1300, 2600)

    def test_yakuman(self):
        result = calculate_hand_score(["rrrd", "gggd", "wwwd", "123m", "55p"], "5p")
        assert result.is_yakuman
        assert result.yaku == [("大三元", 13)]
        assert result.limit == LimitHand.KAZOE_YAKUMAN
        assert result.payments.non_dealer_ron == 32000
