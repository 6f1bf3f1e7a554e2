"""Tests for tile.py and notation.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahc.core.errors import InvalidGroup, InvalidSuit
from mahc.core.notation import (
    group_shape_from_string, parse_group, parse_tile, suit_from_string, split_group,
)
from mahc.core.tile import GroupShape, Suit, VALID_RANKS


class TestSuit:
    def test_letters(self):
        assert suit_from_string("m") == Suit.MANZU
        assert suit_from_string("p") == Suit.PINZU
        assert suit_from_string("s") == Suit.SOUZU
        assert suit_from_string("w") == Suit.WIND
        assert suit_from_string("d") == Suit.DRAGON

    def test_invalid_letter(self):
        with pytest.raises(InvalidSuit):
            suit_from_string("x")

    def test_honor(self):
        assert Suit.WIND.is_honor
        assert Suit.DRAGON.is_honor
        assert not Suit.SOUZU.is_honor


class TestGroupShape:
    def test_sequence(self):
        assert group_shape_from_string("789s") == GroupShape.SEQUENCE
        assert group_shape_from_string("234po") == GroupShape.SEQUENCE

    def test_triplet_and_kan(self):
        assert group_shape_from_string("SSSw") == GroupShape.TRIPLET
        assert group_shape_from_string("EEEEwo") == GroupShape.KAN

    def test_pair_and_single(self):
        assert group_shape_from_string("55s") == GroupShape.PAIR
        assert group_shape_from_string("7m") == GroupShape.SINGLE

    def test_deterministic(self):
        for group in ("123m", "rrrdo", "EEEEwo", "55s", "7m"):
            assert group_shape_from_string(group) == group_shape_from_string(group)

    def test_repeated_ranks(self):
        for rank in VALID_RANKS:
            assert group_shape_from_string(rank * 2 + "m") == GroupShape.PAIR
            assert group_shape_from_string(rank * 4 + "p") == GroupShape.KAN

    def test_unordered_run(self):
        with pytest.raises(InvalidGroup):
            group_shape_from_string("135m")
        with pytest.raises(InvalidGroup):
            group_shape_from_string("321m")

    def test_mismatched_pair_and_kan(self):
        with pytest.raises(InvalidGroup):
            group_shape_from_string("12m")
        with pytest.raises(InvalidGroup):
            group_shape_from_string("1112m")

    def test_too_long(self):
        with pytest.raises(InvalidGroup):
            group_shape_from_string("SSSSSw")

    def test_bad_rank_character(self):
        with pytest.raises(InvalidGroup):
            group_shape_from_string("A1m")

    def test_honor_sequence(self):
        with pytest.raises(InvalidGroup):
            group_shape_from_string("123w")

    def test_suit_checked_first(self):
        with pytest.raises(InvalidSuit):
            group_shape_from_string("hhho")

    def test_empty(self):
        with pytest.raises(InvalidGroup):
            group_shape_from_string("")
        with pytest.raises(InvalidGroup):
            group_shape_from_string("mo")


class TestHonorSuits:
    @pytest.mark.parametrize("group", [
        "555w", "11d", "999do", "EEEd", "rrrw", "wwwwo", "Sd", "5w",
    ])
    def test_rank_does_not_fit_suit(self, group):
        with pytest.raises(InvalidGroup):
            parse_group(group)

    @pytest.mark.parametrize("group, rank", [
        ("wwwd", "w"), ("gggdo", "g"), ("NNNNw", "N"), ("EEw", "E"), ("wd", "w"),
    ])
    def test_rank_fits_suit(self, group, rank):
        assert parse_group(group).rank == rank


class TestParseGroup:
    def test_split(self):
        assert split_group("rrrdo") == ("rrr", "d", True)
        assert split_group("234m") == ("234", "m", False)

    def test_closed_sequence(self):
        g = parse_group("234m")
        assert g.rank == "2"
        assert g.suit == Suit.MANZU
        assert g.shape == GroupShape.SEQUENCE
        assert not g.is_open
        assert not g.is_terminal

    def test_terminal_sequences(self):
        assert parse_group("123p").is_terminal
        assert parse_group("789s").is_terminal
        assert not parse_group("678s").is_terminal

    def test_open_dragon_triplet(self):
        g = parse_group("rrrdo")
        assert g.rank == "r"
        assert g.suit == Suit.DRAGON
        assert g.shape == GroupShape.TRIPLET
        assert g.is_open
        assert g.is_terminal
        assert g.is_honor

    def test_open_wind_kan(self):
        g = parse_group("EEEEwo")
        assert g.shape == GroupShape.KAN
        assert g.suit == Suit.WIND
        assert g.is_open
        assert g.tile_count == 4

    def test_white_dragon_vs_wind_suit(self):
        g = parse_group("wwwd")
        assert g.rank == "w"
        assert g.suit == Suit.DRAGON
        wind = parse_group("WWw")
        assert wind.rank == "W"
        assert wind.suit == Suit.WIND

    def test_terminal_pairs(self):
        assert parse_group("99p").is_terminal
        assert parse_group("11s").is_terminal
        assert not parse_group("55s").is_terminal

    def test_contains(self):
        seq = parse_group("456p")
        assert seq.contains(parse_tile("5p"))
        assert not seq.contains(parse_tile("5s"))
        assert not seq.contains(parse_tile("7p"))

    def test_name(self):
        assert parse_group("234po").name == "234po"
        assert parse_group("EEEEw").name == "EEEEw"

    def test_immutable(self):
        g = parse_group("234m")
        with pytest.raises(Exception):
            g.rank = "3"


class TestParseTile:
    def test_single(self):
        tile = parse_tile("7m")
        assert tile.shape == GroupShape.SINGLE
        assert tile.number == 7

    def test_honor_tile(self):
        tile = parse_tile("Ew")
        assert tile.rank == "E"
        assert tile.number is None

    def test_not_single(self):
        with pytest.raises(InvalidGroup):
            parse_tile("55s")
