from groupstage.utils.collation import collation_key, sort_names


def test_names_ignore_case_at_first_level():
    assert sort_names(["zebras", "Albion", "lions"]) == ["Albion", "lions", "zebras"]


def test_kana_sorts_by_reading_across_scripts():
    assert sort_names(["さくら", "アスリート", "ひかり", "カモメ"]) == [
        "アスリート",
        "カモメ",
        "さくら",
        "ひかり",
    ]


def test_kanji_follow_japanese_order_not_code_points():
    names = ["一宮", "大阪", "愛知"]

    assert sorted(names) == ["一宮", "大阪", "愛知"]
    assert sort_names(names) == ["愛知", "一宮", "大阪"]


def test_latin_then_kana_then_kanji():
    assert sort_names(["東京", "さくら", "Lions"]) == ["Lions", "さくら", "東京"]


def test_full_width_sorts_with_half_width():
    names = sort_names(["Ｂｅａｒｓ", "Cats", "Ants"])

    assert names == ["Ants", "Ｂｅａｒｓ", "Cats"]


def test_missing_name_sorts_first():
    assert collation_key(None) == collation_key("")
    assert sort_names(["Albion", ""])[0] == ""
