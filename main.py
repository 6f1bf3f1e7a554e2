#!/usr/bin/env python3
"""Riichi Mahjong hand calculator - command line entry point.

Examples:
    python main.py --tiles 123m 456p 789s EEEw 55s -w 5s -t -r
    python main.py --manual 4 30 --ba 3
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from mahc.config import CalculatorConfig
from mahc.core.errors import MahcError, NoHandTiles, NoWinTile
from mahc.core.hand import WinConditions
from mahc.rules.scoring import HandScore, calculate_hand_score, format_payments, score
from mahc.ui.i18n import SUPPORTED_LANGUAGES
from mahc.ui.render import render_error, render_hand_score

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="riichi mahjong calculator tool")
    parser.add_argument("--tiles", nargs="+", help="hand tile groups, e.g. 123m EEEwo 55s")
    parser.add_argument("-w", "--win", help="winning tile, e.g. 5s")
    parser.add_argument("-d", "--dora", type=int, default=0, help="han from dora")
    parser.add_argument("-s", "--seat", default="E", help="seat wind")
    parser.add_argument("-p", "--prev", default="E", help="prevalent wind")
    parser.add_argument("-t", "--tsumo", action="store_true", help="won by tsumo")
    parser.add_argument("-r", "--riichi", action="store_true", help="riichi declared")
    parser.add_argument("--double-riichi", action="store_true", help="double riichi declared")
    parser.add_argument("--ippatsu", action="store_true", help="ippatsu")
    parser.add_argument("--haitei", action="store_true", help="won on the last tile")
    parser.add_argument("--chankan", action="store_true", help="robbed a kan")
    parser.add_argument("--rinshan", action="store_true", help="won on a kan replacement tile")
    parser.add_argument("-b", "--ba", type=int, default=0, help="honba count")
    parser.add_argument("-m", "--manual", type=int, nargs=2, metavar=("HAN", "FU"),
                        help="calculator mode: score a han/fu pair directly")
    parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default="en",
                        help="output language")
    parser.add_argument("--breakdown", action="store_true", help="show the fu breakdown")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _split_tiles(tiles: Optional[List[str]]) -> List[str]:
    """Accept both '--tiles 123m 55s' and '--tiles "123m 55s"'."""
    groups = []
    for item in tiles or []:
        groups.extend(item.split())
    return groups


def parse_calculator(args: argparse.Namespace) -> str:
    """Manual mode: score a literal han/fu pair."""
    han, fu = args.manual
    return format_payments(score(han, fu, args.ba))


def parse_hand(args: argparse.Namespace) -> HandScore:
    """Hand mode: parse, validate and score the given tiles."""
    groups = _split_tiles(args.tiles)
    if not groups:
        raise NoHandTiles()
    if not args.win:
        raise NoWinTile()
    conditions = WinConditions(
        is_tsumo=args.tsumo,
        is_riichi=args.riichi,
        is_double_riichi=args.double_riichi,
        is_ippatsu=args.ippatsu,
        is_haitei=args.haitei,
        is_chankan=args.chankan,
        is_rinshan=args.rinshan,
    )
    return calculate_hand_score(
        groups, args.win,
        dora=args.dora,
        seat_wind=args.seat,
        prevalent_wind=args.prev,
        honba=args.ba,
        conditions=conditions,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = CalculatorConfig.from_args(args)
    config.apply()

    try:
        if args.manual is not None:
            console.print(parse_calculator(args), highlight=False)
        else:
            result = parse_hand(args)
            render_hand_score(console, result, config.show_breakdown)
    except MahcError as e:
        render_error(console, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
