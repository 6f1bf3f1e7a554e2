"""English translations."""

TRANSLATIONS = {
    # Labels
    "label.yaku": "Yaku",
    "label.han": "Han",
    "label.fu": "Fu",
    "label.dora": "Dora",
    "label.total": "{han} han {fu} fu",
    "label.fu_breakdown": "Fu breakdown",
    "label.limit": "Limit",
    "label.error": "Error: {message}",

    # Limit hands
    "limit.MANGAN": "Mangan",
    "limit.HANEMAN": "Haneman",
    "limit.BAIMAN": "Baiman",
    "limit.SANBAIMAN": "Sanbaiman",
    "limit.KAZOE_YAKUMAN": "Kazoe Yakuman",

    # Tiles used in yakuhai names
    "tile.東": "East",
    "tile.南": "South",
    "tile.西": "West",
    "tile.北": "North",
    "tile.白": "White",
    "tile.發": "Green",
    "tile.中": "Red",

    # Yaku
    "yaku.立直": "Riichi",
    "yaku.両立直": "Double Riichi",
    "yaku.一発": "Ippatsu",
    "yaku.門前清自摸和": "Menzen Tsumo",
    "yaku.断幺九": "Tanyao",
    "yaku.平和": "Pinfu",
    "yaku.一盃口": "Iipeikou",
    "yaku.二盃口": "Ryanpeikou",
    "yaku.役牌": "Yakuhai",
    "yaku.自風": "Seat Wind",
    "yaku.場風": "Prevalent Wind",
    "yaku.海底摸月": "Haitei",
    "yaku.河底撈魚": "Houtei",
    "yaku.嶺上開花": "Rinshan Kaihou",
    "yaku.搶槓": "Chankan",
    "yaku.混全帯幺九": "Chanta",
    "yaku.純全帯幺九": "Junchan",
    "yaku.一気通貫": "Ittsu",
    "yaku.三色同順": "Sanshoku Doujun",
    "yaku.三色同刻": "Sanshoku Doukou",
    "yaku.対々和": "Toitoi",
    "yaku.三暗刻": "Sanankou",
    "yaku.三槓子": "Sankantsu",
    "yaku.混老頭": "Honroutou",
    "yaku.小三元": "Shousangen",
    "yaku.七対子": "Chiitoitsu",
    "yaku.混一色": "Honitsu",
    "yaku.清一色": "Chinitsu",
    "yaku.大三元": "Daisangen",
    "yaku.四暗刻": "Suuankou",
    "yaku.小四喜": "Shousuushii",
    "yaku.大四喜": "Daisuushii",
    "yaku.字一色": "Tsuuiisou",
    "yaku.清老頭": "Chinroutou",
    "yaku.緑一色": "Ryuuiisou",
    "yaku.四槓子": "Suukantsu",
}
