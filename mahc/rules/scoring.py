"""Score calculation - convert han + fu to points."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence

from mahc.core.errors import NoHan, NoFu, NoYaku, InvalidScoreInput
from mahc.core.hand import Hand, WinConditions, build_hand
from mahc.rules.fu import Fu, calculate_fu
from mahc.rules.yaku import YakuResult, detect_all_yaku, total_han

logger = logging.getLogger(__name__)

HONBA_RON_BONUS = 300
HONBA_TSUMO_BONUS = 100


class Payments(NamedTuple):
    """Payment amounts for a win.

    Attributes:
        dealer_ron: Dealer wins by ron, paid by the discarder
        dealer_tsumo: Dealer wins by tsumo, paid by each other player
        non_dealer_ron: Non-dealer wins by ron, paid by the discarder
        non_dealer_tsumo_non_dealer: Non-dealer tsumo, paid by each non-dealer
        non_dealer_tsumo_dealer: Non-dealer tsumo, paid by the dealer
    """
    dealer_ron: int
    dealer_tsumo: int
    non_dealer_ron: int
    non_dealer_tsumo_non_dealer: int
    non_dealer_tsumo_dealer: int

    def with_honba(self, honba: int) -> "Payments":
        ron = HONBA_RON_BONUS * honba
        tsumo = HONBA_TSUMO_BONUS * honba
        return Payments(
            self.dealer_ron + ron,
            self.dealer_tsumo + tsumo,
            self.non_dealer_ron + ron,
            self.non_dealer_tsumo_non_dealer + tsumo,
            self.non_dealer_tsumo_dealer + tsumo,
        )


MANGAN_PAYMENTS = Payments(12000, 4000, 8000, 2000, 4000)


class LimitHand(Enum):
    """Limit hands (満貫 and above)."""
    MANGAN = "満貫"
    HANEMAN = "跳満"
    BAIMAN = "倍満"
    SANBAIMAN = "三倍満"
    KAZOE_YAKUMAN = "数え役満"

    @property
    def payments(self) -> Payments:
        return _LIMIT_PAYMENTS[self]


def _scaled(scale) -> Payments:
    return Payments(*(scale(p) for p in MANGAN_PAYMENTS))


_LIMIT_PAYMENTS = {
    LimitHand.MANGAN: MANGAN_PAYMENTS,
    LimitHand.HANEMAN: _scaled(lambda p: p + p // 2),
    LimitHand.BAIMAN: _scaled(lambda p: p * 2),
    LimitHand.SANBAIMAN: _scaled(lambda p: p * 3),
    LimitHand.KAZOE_YAKUMAN: _scaled(lambda p: p * 4),
}


def is_limit_hand(han: int, fu: int) -> bool:
    """Whether the hand is capped at mangan or above.

    4 han 40+ fu and 3 han 70+ fu are counted as mangan.
    """
    if han >= 5:
        return True
    if han == 4 and fu >= 40:
        return True
    if han == 3 and fu >= 70:
        return True
    return False


def get_limit_hand(han: int, fu: int) -> Optional[LimitHand]:
    """Limit tier for the han/fu, or None below mangan."""
    if not is_limit_hand(han, fu):
        return None
    if han <= 5:
        return LimitHand.MANGAN
    if han <= 7:
        return LimitHand.HANEMAN
    if han <= 10:
        return LimitHand.BAIMAN
    if han <= 12:
        return LimitHand.SANBAIMAN
    return LimitHand.KAZOE_YAKUMAN


def _round_up_100(points: int) -> int:
    return ((points + 99) // 100) * 100


def _calculate_base_points(han: int, fu: int) -> int:
    """Basic points below mangan: fu * 2^(han + 2)."""
    return fu * (2 ** (2 + han))


def score(han: int, fu: int, honba: int = 0) -> Payments:
    """Convert han and fu into payments, including honba.

    Raises:
        NoHan: han is 0
        NoFu: fu is 0
        InvalidScoreInput: a negative han, fu or honba
    """
    if han < 0 or fu < 0 or honba < 0:
        raise InvalidScoreInput()
    if han == 0:
        raise NoHan()
    if fu == 0:
        raise NoFu()

    limit = get_limit_hand(han, fu)
    if limit is not None:
        payments = limit.payments
        logger.debug("%d han %d fu is %s", han, fu, limit.name)
    else:
        base = _calculate_base_points(han, fu)
        payments = Payments(
            _round_up_100(base * 6),
            _round_up_100(base * 2),
            _round_up_100(base * 4),
            _round_up_100(base),
            _round_up_100(base * 2),
        )
        logger.debug("%d han %d fu: %d basic points", han, fu, base)
    return payments.with_honba(honba)


def format_payments(payments: Sequence[int]) -> str:
    """Render payments as the two-line dealer / non-dealer summary."""
    p = Payments(*payments)
    return (
        f"Dealer: {p.dealer_ron} ({p.dealer_tsumo})\n"
        f"non-dealer: {p.non_dealer_ron} "
        f"({p.non_dealer_tsumo_non_dealer}/{p.non_dealer_tsumo_dealer})"
    )


@dataclass
class HandScore:
    """Result of scoring a complete hand."""
    hand: Hand
    yaku: List[YakuResult]
    dora: int
    han: int
    fu: int
    fu_breakdown: List[Fu] = field(default_factory=list)
    limit: Optional[LimitHand] = None
    payments: Optional[Payments] = None

    @property
    def is_yakuman(self) -> bool:
        return self.han >= 13

    @property
    def rank_name(self) -> str:
        if self.limit is not None:
            return self.limit.value
        return f"{self.han}翻{self.fu}符"


def score_hand(hand: Hand, dora: int = 0, honba: int = 0) -> HandScore:
    """Score an already validated hand.

    Raises:
        NoYaku: the hand has no yaku (dora alone is not enough)
    """
    yaku_list = detect_all_yaku(hand)
    if not yaku_list:
        raise NoYaku()

    han = total_han(yaku_list) + dora
    fu, breakdown = calculate_fu(hand, hand.is_tsumo)
    payments = score(han, fu, honba)
    return HandScore(
        hand=hand,
        yaku=yaku_list,
        dora=dora,
        han=han,
        fu=fu,
        fu_breakdown=breakdown,
        limit=get_limit_hand(han, fu),
        payments=payments,
    )


def calculate_hand_score(
    groups: Sequence[str],
    win_tile: Optional[str],
    dora: int = 0,
    seat_wind: str = "E",
    prevalent_wind: str = "E",
    honba: int = 0,
    conditions: Optional[WinConditions] = None,
    **flags,
) -> HandScore:
    """Parse, validate and score a hand given in group notation."""
    hand = build_hand(groups, win_tile, seat_wind, prevalent_wind,
                      conditions, **flags)
    return score_hand(hand, dora, honba)
