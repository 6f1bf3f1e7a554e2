"""Yaku (役) detection for Riichi Mahjong.

Each ``is_*`` evaluator takes a validated Hand and returns a bool (or a count
for yakuhai). Evaluators never mutate the hand and may be called in any order.
"""

import logging
from collections import Counter
from typing import Callable, List, Tuple

from mahc.core.hand import Hand
from mahc.core.tile import (
    GroupShape, Suit, TileGroup, DRAGON_RANKS, HONOR_RANKS, WIND_RANKS,
    GREEN_TILES,
)
from mahc.rules.wait import is_ryanmen, ron_completed_triplet

logger = logging.getLogger(__name__)

YakuResult = Tuple[str, int]  # (name, han)

NUMBER_SUITS = (Suit.MANZU, Suit.PINZU, Suit.SOUZU)
YAKUMAN_HAN = 13

WIND_NAMES = {"E": "東", "S": "南", "W": "西", "N": "北"}
DRAGON_NAMES = {"w": "白", "g": "發", "r": "中"}


def _is_honor_group(g: TileGroup) -> bool:
    return g.rank in HONOR_RANKS


def _sequence_keys(hand: Hand) -> List[Tuple[str, Suit]]:
    return [(g.rank, g.suit) for g in hand.sequences()]


def _triplet_keys(hand: Hand) -> List[Tuple[str, Suit]]:
    return [(g.rank, g.suit) for g in hand.triplets_and_kans()]


def _is_standard(hand: Hand) -> bool:
    return not hand.is_chiitoitsu


def _concealed_triplets(hand: Hand) -> int:
    """Closed triplets and kans, not counting one finished by ron."""
    ron_triplet = ron_completed_triplet(hand, hand.is_tsumo)
    return sum(1 for g in hand.triplets_and_kans()
               if not g.is_open and g is not ron_triplet)


# === Win conditions ===

def is_riichi(hand: Hand) -> bool:
    return hand.conditions.is_riichi


def is_double_riichi(hand: Hand) -> bool:
    return hand.conditions.is_double_riichi


def is_ippatsu(hand: Hand) -> bool:
    return hand.conditions.is_ippatsu


def is_menzen_tsumo(hand: Hand) -> bool:
    return hand.is_tsumo and hand.is_closed


def is_haitei(hand: Hand) -> bool:
    """Last tile from the wall (海底摸月)."""
    return hand.conditions.is_haitei and hand.is_tsumo


def is_houtei(hand: Hand) -> bool:
    """Last discard (河底撈魚)."""
    return hand.conditions.is_haitei and not hand.is_tsumo


def is_rinshan(hand: Hand) -> bool:
    return hand.conditions.is_rinshan


def is_chankan(hand: Hand) -> bool:
    return hand.conditions.is_chankan


# === Hand patterns ===

def is_yakuhai(hand: Hand) -> int:
    """Count value triplets and kans (役牌).

    One per dragon, seat wind or prevalent wind triplet; a double wind
    triplet counts twice.
    """
    count = 0
    for g in hand.triplets_and_kans():
        if g.rank in DRAGON_RANKS:
            count += 1
        if g.rank not in WIND_RANKS:
            continue
        if g.rank == hand.seat_wind:
            count += 1
        if g.rank == hand.prevalent_wind:
            count += 1
    return count


def is_tanyao(hand: Hand) -> bool:
    """All simples (断幺九) - no terminals or honors."""
    return not any(g.is_terminal or g.is_honor for g in hand.groups)


def is_pinfu(hand: Hand) -> bool:
    """Pinfu - all sequences, non-value pair, two-sided wait, closed."""
    if hand.is_open or hand.is_chiitoitsu:
        return False
    if any(g.shape != GroupShape.SEQUENCE for g in hand.melds()):
        return False
    if any(hand.is_value_rank(p.rank) for p in hand.pairs()):
        return False
    return is_ryanmen(hand)


def is_iipeikou(hand: Hand) -> bool:
    """One set of identical sequences (一盃口). Closed only.

    A hand with two such sets is ryanpeikou instead.
    """
    if hand.is_open:
        return False
    counts = Counter(_sequence_keys(hand))
    return sum(v // 2 for v in counts.values()) == 1


def is_ryanpeikou(hand: Hand) -> bool:
    """Two sets of identical sequences (二盃口). Closed only."""
    if hand.is_open or hand.is_chiitoitsu:
        return False
    melds = hand.melds()
    if any(g.shape != GroupShape.SEQUENCE for g in melds):
        return False
    counts = Counter(_sequence_keys(hand))
    return sum(v // 2 for v in counts.values()) == 2


def is_chiitoitsu(hand: Hand) -> bool:
    """Seven pairs (七対子)."""
    return hand.is_chiitoitsu


def is_ittsu(hand: Hand) -> bool:
    """Straight (一気通貫). 123+456+789 of one suit."""
    seqs = set(_sequence_keys(hand))
    return any(
        all((start, suit) in seqs for start in "147")
        for suit in NUMBER_SUITS
    )


def is_sanshoku_doujun(hand: Hand) -> bool:
    """Three-colored straight (三色同順)."""
    seqs = set(_sequence_keys(hand))
    return any(
        all((rank, suit) in seqs for suit in NUMBER_SUITS)
        for rank, _ in seqs
    )


def is_sanshoku_doukou(hand: Hand) -> bool:
    """Three-colored triplets (三色同刻)."""
    trips = set(_triplet_keys(hand))
    return any(
        all((rank, suit) in trips for suit in NUMBER_SUITS)
        for rank, _ in trips
    )


def is_toitoi(hand: Hand) -> bool:
    """All triplets (対々和)."""
    return _is_standard(hand) and all(g.is_triplet_like for g in hand.melds())


def is_sanankou(hand: Hand) -> bool:
    """Three concealed triplets (三暗刻)."""
    return _is_standard(hand) and _concealed_triplets(hand) == 3


def is_sankantsu(hand: Hand) -> bool:
    """Three kans (三槓子)."""
    return len(hand.kans()) == 3


def is_chanta(hand: Hand) -> bool:
    """Mixed outside hand (混全帯幺九). Every group has a terminal or honor."""
    if not _is_standard(hand):
        return False
    if not all(g.is_terminal for g in hand.groups):
        return False
    has_honor = any(_is_honor_group(g) for g in hand.groups)
    return has_honor and bool(hand.sequences())


def is_junchan(hand: Hand) -> bool:
    """Pure outside hand (純全帯幺九). Every group has a terminal, no honors."""
    if not _is_standard(hand):
        return False
    if not all(g.is_terminal for g in hand.groups):
        return False
    has_honor = any(_is_honor_group(g) for g in hand.groups)
    return not has_honor and bool(hand.sequences())


def is_honroutou(hand: Hand) -> bool:
    """All terminals and honors (混老頭)."""
    if hand.sequences():
        return False
    if not all(g.is_terminal for g in hand.groups):
        return False
    has_honor = any(_is_honor_group(g) for g in hand.groups)
    has_terminal = any(not _is_honor_group(g) for g in hand.groups)
    return has_honor and has_terminal


def is_shousangen(hand: Hand) -> bool:
    """Little three dragons (小三元). 2 dragon triplets + dragon pair."""
    dragon_trips = sum(1 for g in hand.triplets_and_kans() if g.rank in DRAGON_RANKS)
    dragon_pair = any(p.rank in DRAGON_RANKS for p in hand.pairs())
    return _is_standard(hand) and dragon_trips == 2 and dragon_pair


def _number_suits(hand: Hand):
    return {g.suit for g in hand.groups if not _is_honor_group(g)}


def is_honitsu(hand: Hand) -> bool:
    """Half flush (混一色). One suit + honors."""
    has_honor = any(_is_honor_group(g) for g in hand.groups)
    return len(_number_suits(hand)) == 1 and has_honor


def is_chinitsu(hand: Hand) -> bool:
    """Full flush (清一色). One suit only, no honors."""
    has_honor = any(_is_honor_group(g) for g in hand.groups)
    return len(_number_suits(hand)) == 1 and not has_honor


# === Yakuman ===

def is_daisangen(hand: Hand) -> bool:
    """Big three dragons (大三元)."""
    return sum(1 for g in hand.triplets_and_kans() if g.rank in DRAGON_RANKS) == 3


def is_suuankou(hand: Hand) -> bool:
    """Four concealed triplets (四暗刻)."""
    return _is_standard(hand) and _concealed_triplets(hand) == 4


def is_shousuushii(hand: Hand) -> bool:
    """Little four winds (小四喜)."""
    wind_trips = sum(1 for g in hand.triplets_and_kans() if g.rank in WIND_RANKS)
    wind_pair = any(p.rank in WIND_RANKS for p in hand.pairs())
    return _is_standard(hand) and wind_trips == 3 and wind_pair


def is_daisuushii(hand: Hand) -> bool:
    """Big four winds (大四喜)."""
    return sum(1 for g in hand.triplets_and_kans() if g.rank in WIND_RANKS) == 4


def is_tsuuiisou(hand: Hand) -> bool:
    """All honors (字一色)."""
    return all(_is_honor_group(g) for g in hand.groups)


def is_chinroutou(hand: Hand) -> bool:
    """All terminals (清老頭)."""
    return all(
        g.shape != GroupShape.SEQUENCE and g.rank in ("1", "9")
        for g in hand.groups
    )


def is_ryuuiisou(hand: Hand) -> bool:
    """All green (緑一色). Only 2s,3s,4s,6s,8s + 發."""
    return all(
        (rank, g.suit) in GREEN_TILES
        for g in hand.groups for rank in g.ranks()
    )


def is_suukantsu(hand: Hand) -> bool:
    """Four kans (四槓子)."""
    return len(hand.kans()) == 4


# (name, evaluator, closed han, open han); open han 0 means closed only
REGULAR_YAKU: List[Tuple[str, Callable[[Hand], bool], int, int]] = [
    ("立直", is_riichi, 1, 0),
    ("両立直", is_double_riichi, 2, 0),
    ("一発", is_ippatsu, 1, 0),
    ("門前清自摸和", is_menzen_tsumo, 1, 0),
    ("断幺九", is_tanyao, 1, 1),
    ("平和", is_pinfu, 1, 0),
    ("一盃口", is_iipeikou, 1, 0),
    ("二盃口", is_ryanpeikou, 3, 0),
    ("海底摸月", is_haitei, 1, 1),
    ("河底撈魚", is_houtei, 1, 1),
    ("嶺上開花", is_rinshan, 1, 1),
    ("搶槓", is_chankan, 1, 1),
    ("混全帯幺九", is_chanta, 2, 1),
    ("純全帯幺九", is_junchan, 3, 2),
    ("一気通貫", is_ittsu, 2, 1),
    ("三色同順", is_sanshoku_doujun, 2, 1),
    ("三色同刻", is_sanshoku_doukou, 2, 2),
    ("対々和", is_toitoi, 2, 2),
    ("三暗刻", is_sanankou, 2, 2),
    ("三槓子", is_sankantsu, 2, 2),
    ("混老頭", is_honroutou, 2, 2),
    ("小三元", is_shousangen, 2, 2),
    ("七対子", is_chiitoitsu, 2, 0),
    ("混一色", is_honitsu, 3, 2),
    ("清一色", is_chinitsu, 6, 5),
]

YAKUMAN: List[Tuple[str, Callable[[Hand], bool]]] = [
    ("大三元", is_daisangen),
    ("四暗刻", is_suuankou),
    ("小四喜", is_shousuushii),
    ("大四喜", is_daisuushii),
    ("字一色", is_tsuuiisou),
    ("清老頭", is_chinroutou),
    ("緑一色", is_ryuuiisou),
    ("四槓子", is_suukantsu),
]


def yakuhai_items(hand: Hand) -> List[YakuResult]:
    """Itemized yakuhai, one entry per value triplet source."""
    results = []
    for g in hand.triplets_and_kans():
        if g.rank in DRAGON_NAMES:
            results.append((f"役牌 {DRAGON_NAMES[g.rank]}", 1))
        if g.rank not in WIND_RANKS:
            continue
        if g.rank == hand.seat_wind:
            results.append((f"自風 {WIND_NAMES[g.rank]}", 1))
        if g.rank == hand.prevalent_wind:
            results.append((f"場風 {WIND_NAMES[g.rank]}", 1))
    return results


def detect_yakuman(hand: Hand) -> List[YakuResult]:
    return [(name, YAKUMAN_HAN) for name, check in YAKUMAN if check(hand)]


def detect_all_yaku(hand: Hand) -> List[YakuResult]:
    """Detect all applicable yaku for the given hand."""
    yakuman = detect_yakuman(hand)
    if yakuman:
        logger.debug("yakuman: %s", yakuman)
        return yakuman

    results = []
    for name, check, closed_han, open_han in REGULAR_YAKU:
        han = closed_han if hand.is_closed else open_han
        if han and check(hand):
            results.append((name, han))
    results.extend(yakuhai_items(hand))

    logger.debug("yaku: %s", results)
    return results


def total_han(yaku_list: List[YakuResult]) -> int:
    """Sum total han from yaku list."""
    return sum(han for _, han in yaku_list)
