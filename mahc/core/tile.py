"""Tile group model: suits, group shapes and the parsed TileGroup value."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Suit(Enum):
    MANZU = "m"   # 萬子
    PINZU = "p"   # 筒子
    SOUZU = "s"   # 索子
    WIND = "w"    # 風牌
    DRAGON = "d"  # 三元牌

    @property
    def is_honor(self) -> bool:
        return self in (Suit.WIND, Suit.DRAGON)


class GroupShape(Enum):
    SEQUENCE = "sequence"  # 順子
    TRIPLET = "triplet"    # 刻子
    KAN = "kan"            # 槓子
    PAIR = "pair"          # 対子
    SINGLE = "single"      # one tile, only valid as a winning tile


# Rank characters
NUMBER_RANKS = "123456789"
WIND_RANKS = "ESWN"        # East, South, West, North
DRAGON_RANKS = "rgw"       # red (中), green (發), white (白)
HONOR_RANKS = WIND_RANKS + DRAGON_RANKS
VALID_RANKS = NUMBER_RANKS + HONOR_RANKS

# Terminal (么九) ranks for non-sequence groups
TERMINAL_RANKS = ("1", "9") + tuple(HONOR_RANKS)

# The seven runs a sequence may take, and the two that touch a terminal
VALID_RUNS = ("123", "234", "345", "456", "567", "678", "789")
TERMINAL_RUN_STARTS = ("1", "7")

GREEN_TILES = {("2", Suit.SOUZU), ("3", Suit.SOUZU), ("4", Suit.SOUZU),
               ("6", Suit.SOUZU), ("8", Suit.SOUZU), ("g", Suit.DRAGON)}


@dataclass(frozen=True)
class TileGroup:
    """A parsed group of tiles.

    Attributes:
        rank: First rank character of the group ('1'-'9', 'E','S','W','N', 'r','g','w')
        suit: Suit of the group
        is_open: Whether the group was called from another player's discard
        shape: Sequence / triplet / kan / pair / single
        is_terminal: Whether the group touches a terminal or honor
    """
    rank: str
    suit: Suit
    is_open: bool
    shape: GroupShape
    is_terminal: bool

    @property
    def is_honor(self) -> bool:
        return self.suit.is_honor

    @property
    def is_triplet_like(self) -> bool:
        """Triplet or kan (刻子 / 槓子)."""
        return self.shape in (GroupShape.TRIPLET, GroupShape.KAN)

    @property
    def number(self) -> Optional[int]:
        """Integer rank for number tiles, None for honors."""
        if self.rank in NUMBER_RANKS:
            return int(self.rank)
        return None

    @property
    def tile_count(self) -> int:
        return {
            GroupShape.SEQUENCE: 3,
            GroupShape.TRIPLET: 3,
            GroupShape.KAN: 4,
            GroupShape.PAIR: 2,
            GroupShape.SINGLE: 1,
        }[self.shape]

    def ranks(self) -> str:
        """All rank characters covered by the group."""
        if self.shape == GroupShape.SEQUENCE:
            start = int(self.rank)
            return "".join(str(n) for n in range(start, start + 3))
        return self.rank

    def contains(self, tile: "TileGroup") -> bool:
        """Whether the tile (rank + suit) is part of this group."""
        return tile.suit == self.suit and tile.rank in self.ranks()

    @property
    def name(self) -> str:
        if self.shape == GroupShape.SEQUENCE:
            text = self.ranks()
        else:
            text = self.rank * self.tile_count
        return f"{text}{self.suit.value}{'o' if self.is_open else ''}"

    def __repr__(self):
        return f"TileGroup({self.name})"
