"""Group notation parser.

A group is written as ``<ranks><suit>[o]``:

    "234m"    closed 2-3-4 of manzu (sequence)
    "rrrdo"   open red dragon triplet (pon)
    "EEEEwo"  open east wind kan
    "55s"     pair of 5 souzu
    "7m"      a single tile (winning tile)

Suit letters are m/p/s (number suits), w (winds) and d (dragons). The letter
'w' is both the wind suit and the white dragon rank; position decides which.
"""

import logging
from typing import Tuple

from mahc.core.errors import InvalidGroup, InvalidSuit
from mahc.core.tile import (
    GroupShape, Suit, TileGroup, VALID_RANKS, VALID_RUNS, WIND_RANKS, DRAGON_RANKS,
    TERMINAL_RANKS, TERMINAL_RUN_STARTS,
)

logger = logging.getLogger(__name__)

OPEN_MARKER = "o"

SUIT_LETTERS = {
    "m": Suit.MANZU,
    "p": Suit.PINZU,
    "s": Suit.SOUZU,
    "w": Suit.WIND,
    "d": Suit.DRAGON,
}


def split_group(group: str) -> Tuple[str, str, bool]:
    """Split a group string into (rank_run, suit_letter, is_open)."""
    if not group:
        raise InvalidGroup()
    is_open = group[-1] == OPEN_MARKER
    body = group[:-1] if is_open else group
    if len(body) < 2:
        raise InvalidGroup()
    return body[:-1], body[-1], is_open


def suit_from_string(suit: str) -> Suit:
    """Look up a suit letter (m, p, s, w, d)."""
    try:
        return SUIT_LETTERS[suit]
    except KeyError:
        raise InvalidSuit() from None


def _shape_from_run(run: str, suit: Suit) -> GroupShape:
    if any(ch not in VALID_RANKS for ch in run):
        raise InvalidGroup()
    # Winds only in the w suit, dragons only in the d suit
    if suit == Suit.WIND and any(ch not in WIND_RANKS for ch in run):
        raise InvalidGroup()
    if suit == Suit.DRAGON and any(ch not in DRAGON_RANKS for ch in run):
        raise InvalidGroup()

    all_same = len(set(run)) == 1
    if len(run) == 1:
        return GroupShape.SINGLE
    if len(run) == 2:
        if all_same:
            return GroupShape.PAIR
        raise InvalidGroup()
    if len(run) == 3:
        if all_same:
            return GroupShape.TRIPLET
        # Honors never form sequences
        if run in VALID_RUNS and not suit.is_honor:
            return GroupShape.SEQUENCE
        raise InvalidGroup()
    if len(run) == 4:
        if all_same:
            return GroupShape.KAN
        raise InvalidGroup()
    raise InvalidGroup()


def group_shape_from_string(group: str) -> GroupShape:
    """Classify a group string into its shape.

    Raises:
        InvalidSuit: the suit letter is not one of m/p/s/w/d
        InvalidGroup: the rank run is not a single, pair, triplet, run or kan
    """
    run, suit_letter, _ = split_group(group)
    return _shape_from_run(run, suit_from_string(suit_letter))


def _is_terminal(rank: str, shape: GroupShape) -> bool:
    if shape == GroupShape.SEQUENCE:
        return rank in TERMINAL_RUN_STARTS
    return rank in TERMINAL_RANKS


def parse_group(group: str) -> TileGroup:
    """Parse one group string into a TileGroup."""
    run, suit_letter, is_open = split_group(group)
    suit = suit_from_string(suit_letter)
    shape = _shape_from_run(run, suit)
    rank = run[0]
    parsed = TileGroup(
        rank=rank,
        suit=suit,
        is_open=is_open,
        shape=shape,
        is_terminal=_is_terminal(rank, shape),
    )
    logger.debug("parsed %r as %s", group, parsed)
    return parsed


def parse_tile(tile: str) -> TileGroup:
    """Parse a single tile such as '7m' or 'Ew'."""
    parsed = parse_group(tile)
    if parsed.shape != GroupShape.SINGLE:
        raise InvalidGroup()
    return parsed
