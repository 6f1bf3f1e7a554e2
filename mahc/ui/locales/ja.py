"""Japanese translations."""

TRANSLATIONS = {
    # Labels
    "label.yaku": "役",
    "label.han": "翻",
    "label.fu": "符",
    "label.dora": "ドラ",
    "label.total": "{han}翻{fu}符",
    "label.fu_breakdown": "符の内訳",
    "label.limit": "上限",
    "label.error": "エラー: {message}",

    # Limit hands
    "limit.MANGAN": "満貫",
    "limit.HANEMAN": "跳満",
    "limit.BAIMAN": "倍満",
    "limit.SANBAIMAN": "三倍満",
    "limit.KAZOE_YAKUMAN": "数え役満",

    # Errors
    "error.invalid_group": "不正な面子があります",
    "error.invalid_suit": "不正な種類があります",
    "error.invalid_shape": "手牌の形が不正です",
    "error.no_yaku": "役がありません",
    "error.no_hand_tiles": "手牌が指定されていません",
    "error.no_win_tile": "和了牌が指定されていません",
    "error.duplicate_riichi": "立直と両立直は同時に指定できません",
    "error.ippatsu_without_riichi": "立直なしで一発は付きません",
    "error.double_riichi_haitei_ippatsu": "両立直・一発・海底は同時に指定できません",
    "error.double_riichi_haitei_chankan": "両立直・搶槓・海底は同時に指定できません",
    "error.chankan_tsumo": "自摸で搶槓は付きません",
    "error.rinshan_without_kan": "槓なしで嶺上開花は付きません",
    "error.rinshan_without_tsumo": "自摸なしで嶺上開花は付きません",
    "error.rinshan_ippatsu": "嶺上開花と一発は同時に指定できません",
    "error.no_han": "翻数がありません",
    "error.no_fu": "符数がありません",
    "error.invalid_score_input": "翻・符・本場は負の値にできません",
}

# Yaku keys are already Japanese
for _name in (
    "立直", "両立直", "一発", "門前清自摸和", "断幺九", "平和", "一盃口", "二盃口",
    "役牌", "自風", "場風", "海底摸月", "河底撈魚", "嶺上開花", "搶槓",
    "混全帯幺九", "純全帯幺九", "一気通貫", "三色同順", "三色同刻", "対々和",
    "三暗刻", "三槓子", "混老頭", "小三元", "七対子", "混一色", "清一色",
    "大三元", "四暗刻", "小四喜", "大四喜", "字一色", "清老頭", "緑一色", "四槓子",
):
    TRANSLATIONS[f"yaku.{_name}"] = _name

for _tile in ("東", "南", "西", "北", "白", "發", "中"):
    TRANSLATIONS[f"tile.{_tile}"] = _tile
