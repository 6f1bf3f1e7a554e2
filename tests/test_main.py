"""Tests for main.py - command line handling"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from main import build_parser, main, parse_calculator, parse_hand
from mahc.core.errors import NoHan, NoHandTiles, NoWinTile, InvalidShape


def _args(*argv):
    return build_parser().parse_args(list(argv))


class TestCalculatorMode:
    def test_manual_with_honba(self):
        out = parse_calculator(_args("--manual", "4", "30", "--ba", "3"))
        assert out == "Dealer: 12500 (4200)\nnon-dealer: 8600 (2300/4200)"

    def test_manual_mangan(self):
        out = parse_calculator(_args("-m", "5", "30"))
        assert out == "Dealer: 12000 (4000)\nnon-dealer: 8000 (2000/4000)"

    def test_manual_no_han(self):
        with pytest.raises(NoHan):
            parse_calculator(_args("--manual", "0", "30"))


class TestHandMode:
    def test_tiles_as_one_string(self):
        args = _args("--tiles", "234m 567p 234s 678s 55p", "-w", "4m", "-r")
        result = parse_hand(args)
        assert result.han == 3
        assert result.fu == 30

    def test_flags(self):
        args = _args("--tiles", "234m", "567p", "234s", "678s", "55p",
                     "-w", "4m", "-t", "-r", "-d", "1", "-s", "S")
        result = parse_hand(args)
        assert result.hand.seat_wind == "S"
        assert result.hand.is_tsumo
        assert result.han == 5

    def test_missing_tiles(self):
        with pytest.raises(NoHandTiles):
            parse_hand(_args("-w", "4m"))

    def test_missing_win_tile(self):
        with pytest.raises(NoWinTile):
            parse_hand(_args("--tiles", "234m", "567p"))

    def test_bad_shape(self):
        with pytest.raises(InvalidShape):
            parse_hand(_args("--tiles", "234m", "567p", "-w", "4m"))


class TestMain:
    def test_success(self):
        assert main(["--manual", "4", "30"]) == 0
        assert main(["--tiles", "234m", "567p", "234s", "678s", "55p",
                     "-w", "4m", "-r", "--breakdown"]) == 0

    def test_error_exit_code(self):
        assert main(["--manual", "0", "30"]) == 1
        assert main(["--tiles", "234mo", "567p", "234s", "678s", "11p", "-w", "7p"]) == 1
