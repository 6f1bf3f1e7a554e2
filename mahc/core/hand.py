"""Hand assembly - parse groups, validate shape and win-condition flags."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from mahc.core.errors import (
    InvalidGroup, InvalidShape, NoHandTiles, NoWinTile,
    DuplicateRiichi, IppatsuWithoutRiichi, ChankanTsumo,
    RinshanKanWithoutKan, RinshanWithoutTsumo, RinshanIppatsu,
    DoubleRiichiHaiteiIppatsu, DoubleRiichiHaiteiChankan,
)
from mahc.core.notation import parse_group, parse_tile
from mahc.core.tile import GroupShape, TileGroup, DRAGON_RANKS, WIND_RANKS

logger = logging.getLogger(__name__)

STANDARD_GROUP_COUNT = 5   # four melds + one pair
CHIITOITSU_GROUP_COUNT = 7


@dataclass(frozen=True)
class WinConditions:
    """How the hand was won.

    Attributes:
        is_tsumo: Won by self-draw (自摸); otherwise ron (栄和)
        is_riichi: Riichi declared (立直)
        is_double_riichi: Double riichi (両立直)
        is_ippatsu: Won within one go-around of riichi (一発)
        is_haitei: Won on the last tile (海底 / 河底)
        is_chankan: Won by robbing a kan (搶槓)
        is_rinshan: Won on the replacement tile after a kan (嶺上開花)
    """
    is_tsumo: bool = False
    is_riichi: bool = False
    is_double_riichi: bool = False
    is_ippatsu: bool = False
    is_haitei: bool = False
    is_chankan: bool = False
    is_rinshan: bool = False


@dataclass(frozen=True)
class Hand:
    """A validated, immutable winning hand."""
    groups: Tuple[TileGroup, ...]
    win_tile: TileGroup
    seat_wind: str
    prevalent_wind: str
    conditions: WinConditions = WinConditions()

    def _of_shape(self, shape: GroupShape) -> List[TileGroup]:
        return [g for g in self.groups if g.shape == shape]

    def pairs(self) -> List[TileGroup]:
        return self._of_shape(GroupShape.PAIR)

    def triplets(self) -> List[TileGroup]:
        return self._of_shape(GroupShape.TRIPLET)

    def kans(self) -> List[TileGroup]:
        return self._of_shape(GroupShape.KAN)

    def sequences(self) -> List[TileGroup]:
        return self._of_shape(GroupShape.SEQUENCE)

    def melds(self) -> List[TileGroup]:
        """All non-pair groups in input order."""
        return [g for g in self.groups if g.shape != GroupShape.PAIR]

    def triplets_and_kans(self) -> List[TileGroup]:
        return [g for g in self.groups if g.is_triplet_like]

    @property
    def is_chiitoitsu(self) -> bool:
        return len(self.groups) == CHIITOITSU_GROUP_COUNT

    @property
    def is_open(self) -> bool:
        return any(g.is_open for g in self.groups)

    @property
    def is_closed(self) -> bool:
        """Whether hand is fully closed (門前)."""
        return not self.is_open

    @property
    def is_tsumo(self) -> bool:
        return self.conditions.is_tsumo

    @property
    def is_riichi(self) -> bool:
        return self.conditions.is_riichi

    def is_value_rank(self, rank: str) -> bool:
        """Dragon, seat wind or prevalent wind rank (役牌)."""
        if rank in DRAGON_RANKS:
            return True
        return rank in WIND_RANKS and rank in (self.seat_wind, self.prevalent_wind)

    @property
    def total_tiles(self) -> int:
        """Tiles held, counting a kan as four."""
        return sum(g.tile_count for g in self.groups)


def _wind_rank(wind: str) -> str:
    """'Es', 'E' and 'e' all mean East."""
    return wind[:1].upper()


def _check_shape(groups: Sequence[TileGroup]):
    if len(groups) == CHIITOITSU_GROUP_COUNT:
        if not all(g.shape == GroupShape.PAIR for g in groups):
            raise InvalidShape()
        # Seven distinct pairs
        if len({(g.rank, g.suit) for g in groups}) != CHIITOITSU_GROUP_COUNT:
            raise InvalidShape()
        return
    if len(groups) != STANDARD_GROUP_COUNT:
        raise InvalidShape()
    pair_count = sum(1 for g in groups if g.shape == GroupShape.PAIR)
    if pair_count != 1:
        raise InvalidShape()


def _check_conditions(cond: WinConditions, groups: Sequence[TileGroup]):
    if cond.is_riichi and cond.is_double_riichi:
        raise DuplicateRiichi()
    if cond.is_ippatsu and not (cond.is_riichi or cond.is_double_riichi):
        raise IppatsuWithoutRiichi()
    if cond.is_chankan and cond.is_tsumo:
        raise ChankanTsumo()
    if cond.is_rinshan:
        if not any(g.shape == GroupShape.KAN for g in groups):
            raise RinshanKanWithoutKan()
        if not cond.is_tsumo:
            raise RinshanWithoutTsumo()
        if cond.is_ippatsu:
            raise RinshanIppatsu()
    if cond.is_double_riichi and cond.is_haitei:
        if cond.is_ippatsu:
            raise DoubleRiichiHaiteiIppatsu()
        if cond.is_chankan:
            raise DoubleRiichiHaiteiChankan()


def build_hand(
    groups: Sequence[str],
    win_tile: Optional[str],
    seat_wind: str = "E",
    prevalent_wind: str = "E",
    conditions: Optional[WinConditions] = None,
    **flags,
) -> Hand:
    """Parse and validate a complete hand.

    Args:
        groups: Group strings, five (four melds + pair) or seven pairs
        win_tile: The tile that completed the hand, e.g. '7m'
        seat_wind: Seat wind, first character is the wind ('E', 'Es', ...)
        prevalent_wind: Round wind, same format as seat_wind
        conditions: Win conditions; alternatively pass the flags as keywords
            (is_tsumo=True, is_riichi=True, ...)

    Returns:
        The validated Hand.
    """
    if conditions is None:
        conditions = WinConditions(**flags)
    elif flags:
        raise TypeError("pass either conditions or keyword flags, not both")

    if not groups:
        raise NoHandTiles()
    if not win_tile:
        raise NoWinTile()

    parsed = []
    for raw in groups:
        group = parse_group(raw)
        if group.shape == GroupShape.SINGLE:
            logger.debug("rejecting single tile %r inside hand", raw)
            raise InvalidGroup()
        parsed.append(group)

    _check_shape(parsed)
    tile = parse_tile(win_tile)
    _check_conditions(conditions, parsed)

    hand = Hand(
        groups=tuple(parsed),
        win_tile=tile,
        seat_wind=_wind_rank(seat_wind),
        prevalent_wind=_wind_rank(prevalent_wind),
        conditions=conditions,
    )
    logger.debug("built hand %s win=%s seat=%s prevalent=%s",
                 list(hand.groups), tile, hand.seat_wind, hand.prevalent_wind)
    return hand
