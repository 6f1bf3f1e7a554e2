"""Fu (符) calculation with an itemized breakdown."""

import logging
from enum import Enum
from typing import List, Tuple

from mahc.core.hand import Hand
from mahc.core.tile import GroupShape, TileGroup
from mahc.rules.wait import is_single_wait, ron_completed_triplet

logger = logging.getLogger(__name__)


class Fu(Enum):
    """Itemized fu contributions as (key, value)."""
    BASE_POINTS = ("BasePoints", 20)                            # 副底
    BASE_POINTS_CHIITOI = ("BasePointsChitoi", 25)              # 七対子
    CLOSED_RON = ("ClosedRon", 10)                              # 門前加符
    TSUMO = ("Tsumo", 2)                                        # 自摸符
    NON_SIMPLE_CLOSED_TRIPLET = ("NonSimpleClosedTriplet", 8)   # 么九暗刻
    SIMPLE_CLOSED_TRIPLET = ("SimpleClosedTriplet", 4)          # 中張暗刻
    NON_SIMPLE_OPEN_TRIPLET = ("NonSimpleOpenTriplet", 4)       # 么九明刻
    SIMPLE_OPEN_TRIPLET = ("SimpleOpenTriplet", 2)              # 中張明刻
    NON_SIMPLE_CLOSED_KAN = ("NonSimpleClosedKan", 32)          # 么九暗槓
    SIMPLE_CLOSED_KAN = ("SimpleClosedKan", 16)                 # 中張暗槓
    NON_SIMPLE_OPEN_KAN = ("NonSimpleOpenKan", 16)              # 么九明槓
    SIMPLE_OPEN_KAN = ("SimpleOpenKan", 8)                      # 中張明槓
    TOITSU = ("Toitsu", 2)                                      # 役牌雀頭
    SINGLE_WAIT = ("SingleWait", 2)                             # 辺張/嵌張/単騎

    @property
    def key(self) -> str:
        return self.value[0]

    @property
    def points(self) -> int:
        return self.value[1]

    def __str__(self):
        return f"{self.key}: {self.points}"


# (is_kan, is_open, is_non_simple) -> Fu
_MELD_FU = {
    (False, False, False): Fu.SIMPLE_CLOSED_TRIPLET,
    (False, False, True): Fu.NON_SIMPLE_CLOSED_TRIPLET,
    (False, True, False): Fu.SIMPLE_OPEN_TRIPLET,
    (False, True, True): Fu.NON_SIMPLE_OPEN_TRIPLET,
    (True, False, False): Fu.SIMPLE_CLOSED_KAN,
    (True, False, True): Fu.NON_SIMPLE_CLOSED_KAN,
    (True, True, False): Fu.SIMPLE_OPEN_KAN,
    (True, True, True): Fu.NON_SIMPLE_OPEN_KAN,
}


def meld_fu(group: TileGroup, treat_as_open: bool = False) -> Fu:
    """Fu item for a triplet or kan."""
    if not group.is_triplet_like:
        raise ValueError(f"no meld fu for {group!r}")
    is_kan = group.shape == GroupShape.KAN
    is_open = group.is_open or treat_as_open
    return _MELD_FU[(is_kan, is_open, group.is_terminal)]


def calculate_total_fu_value(breakdown: List[Fu]) -> int:
    """Sum the items and round up to the nearest 10."""
    return _round_up_10(sum(f.points for f in breakdown))


def calculate_fu(hand: Hand, is_tsumo: bool) -> Tuple[int, List[Fu]]:
    """Calculate fu for a hand.

    Items are added in a fixed order: base points, win method, triplets and
    kans in input order, value-tile pair, single wait.

    Args:
        hand: A validated hand
        is_tsumo: Whether the win was by self-draw

    Returns:
        (total fu, ordered list of Fu items)
    """
    if hand.is_chiitoitsu:
        breakdown = [Fu.BASE_POINTS_CHIITOI]
    else:
        breakdown = [Fu.BASE_POINTS]

    # Win method
    if is_tsumo:
        breakdown.append(Fu.TSUMO)
    elif hand.is_closed:
        breakdown.append(Fu.CLOSED_RON)

    # Triplets and kans; a ron-completed closed triplet counts as open
    ron_triplet = ron_completed_triplet(hand, is_tsumo)
    for group in hand.groups:
        if group.is_triplet_like:
            breakdown.append(meld_fu(group, treat_as_open=group is ron_triplet))

    # Pair of value tiles
    if any(hand.is_value_rank(p.rank) for p in hand.pairs()):
        breakdown.append(Fu.TOITSU)

    if is_single_wait(hand):
        breakdown.append(Fu.SINGLE_WAIT)

    total = calculate_total_fu_value(breakdown)
    logger.debug("fu %d from %s", total, [str(f) for f in breakdown])
    return total, breakdown


def _round_up_10(fu: int) -> int:
    """Round up to nearest 10."""
    return ((fu + 9) // 10) * 10
