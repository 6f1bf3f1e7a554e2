"""Error taxonomy shared by the parser, hand assembler and score engine."""


class MahcError(Exception):
    """Base class for every error raised by the calculator."""
    code = "error"
    message = "Unknown error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


# === Hand errors (structural / input) ===

class HandError(MahcError):
    code = "hand_error"
    message = "Invalid hand"


class InvalidGroup(HandError):
    code = "invalid_group"
    message = "Invalid Group found"


class InvalidSuit(HandError):
    code = "invalid_suit"
    message = "Invalid Suit found"


class InvalidShape(HandError):
    code = "invalid_shape"
    message = "Invalid Hand Shape found"


class NoYaku(HandError):
    code = "no_yaku"
    message = "No Yaku"


class NoHandTiles(HandError):
    code = "no_hand_tiles"
    message = "No Hand Tiles given"


class NoWinTile(HandError):
    code = "no_win_tile"
    message = "No Win Tile given"


class DuplicateRiichi(HandError):
    code = "duplicate_riichi"
    message = "Cant Riichi and Double Riichi Simultaneously"


class IppatsuWithoutRiichi(HandError):
    code = "ippatsu_without_riichi"
    message = "Cant Ippatsu without Riichi"


class DoubleRiichiHaiteiIppatsu(HandError):
    code = "double_riichi_haitei_ippatsu"
    message = "Cant Double Riichi, Ippatsu and Haitei"


class DoubleRiichiHaiteiChankan(HandError):
    code = "double_riichi_haitei_chankan"
    message = "Cant Double Riichi, Chankan and Haitei"


class ChankanTsumo(HandError):
    code = "chankan_tsumo"
    message = "Cant Tsumo and Chankan"


class RinshanKanWithoutKan(HandError):
    code = "rinshan_without_kan"
    message = "Cant Rinshan without Kan"


class RinshanWithoutTsumo(HandError):
    code = "rinshan_without_tsumo"
    message = "Cant Rinshan without Tsumo"


class RinshanIppatsu(HandError):
    code = "rinshan_ippatsu"
    message = "Cant Rinshan and Ippatsu"


# === Calculator errors (han/fu to points) ===

class CalculatorError(MahcError):
    code = "calculator_error"
    message = "Score calculation failed"


class NoHan(CalculatorError):
    code = "no_han"
    message = "No Han provided!"


class NoFu(CalculatorError):
    code = "no_fu"
    message = "No Fu provided!"


class InvalidScoreInput(CalculatorError):
    code = "invalid_score_input"
    message = "Han, fu and honba must not be negative"
