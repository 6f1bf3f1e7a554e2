"""Wait analysis - how the winning tile completed the hand."""

from typing import List, Optional

from mahc.core.hand import Hand
from mahc.core.tile import GroupShape, TileGroup


def closed_sequences_with_win(hand: Hand) -> List[TileGroup]:
    """Closed sequences the winning tile could have completed."""
    return [g for g in hand.sequences()
            if not g.is_open and g.contains(hand.win_tile)]


def is_tanki(hand: Hand) -> bool:
    """Pair wait (単騎): the winning tile completed the pair."""
    return any(p.contains(hand.win_tile) for p in hand.pairs())


def _is_kanchan(seq: TileGroup, win: TileGroup) -> bool:
    return win.number == seq.number + 1


def _is_penchan(seq: TileGroup, win: TileGroup) -> bool:
    # 12 waiting on 3, 89 waiting on 7
    return ((seq.number == 1 and win.number == 3)
            or (seq.number == 7 and win.number == 7))


def is_single_wait(hand: Hand) -> bool:
    """Edge (辺張), closed (嵌張) or pair (単騎) wait.

    Ryanmen (両面) and shanpon (双碰) are not single waits.
    """
    if is_tanki(hand):
        return True
    win = hand.win_tile
    for seq in closed_sequences_with_win(hand):
        if _is_kanchan(seq, win) or _is_penchan(seq, win):
            return True
    return False


def is_ryanmen(hand: Hand) -> bool:
    """Two-sided wait (両面) on a closed sequence."""
    if is_tanki(hand):
        return False
    win = hand.win_tile
    for seq in closed_sequences_with_win(hand):
        if win.number == seq.number and seq.number != 7:
            return True
        if win.number == seq.number + 2 and seq.number != 1:
            return True
    return False


def ron_completed_triplet(hand: Hand, is_tsumo: bool) -> Optional[TileGroup]:
    """The closed triplet a ron winning tile completed, if any.

    On ron, a triplet finished by the discarded tile counts as open (明刻)
    unless the tile could have completed a closed sequence instead.
    """
    if is_tsumo or hand.is_chiitoitsu:
        return None
    if closed_sequences_with_win(hand):
        return None
    for g in hand.groups:
        if (g.shape == GroupShape.TRIPLET and not g.is_open
                and g.contains(hand.win_tile)):
            return g
    return None
