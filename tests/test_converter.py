"""
変換パイプラインのテスト
"""
import logging
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.mark.conversion
@pytest.mark.parametrize("text,expected", [
    ("三分の二", "2/3"),
    ("千二百三十四円", "1,234円"),
    ("三・五パーセント", "3.5%"),
    ("二十万人", "200,000人"),
    ("三箇月", "3か月"),
    ("箇月", "か月"),
    ("第三者", "第三者"),
    ("第十五条", "第15条"),
    ("前二条", "前2条"),
    ("第二十一条の二の三", "第21条の2の3"),
    ("十二月三十一日", "12月31日"),
    ("平成十五年", "平成15年"),
    ("十八歳以上", "18歳以上"),
    ("三分の一以上", "1/3以上"),
    ("五億円", "500,000,000円"),
    ("一万二千三百四十五", "12,345"),
    ("二親等", "2親等"),
])
def test_convert_examples(converter, text, expected):
    """代表的な表記の変換"""
    assert converter.convert(text) == expected


@pytest.mark.conversion
def test_convert_sentence(converter):
    """条文1文の変換"""
    text = "第二十一条第一項の規定により、三十日以内に十万円を支払う。"
    expected = "第21条第1項の規定により、30日以内に100,000円を支払う。"
    assert converter.convert(text) == expected


@pytest.mark.integration
def test_convert_statute(converter, sample_statute_text):
    """複数行の条文の変換"""
    result = converter.convert(sample_statute_text)
    lines = result.split("\n")

    assert lines[0] == (
        "第21条　債権者は、前2条の規定にかかわらず、30日以内に100,000円を支払わなければならない。"
    )
    assert lines[1] == (
        "２　前項の場合において、第三者の持分が1/3以上であるときは、3か月の猶予を与える。"
    )
    assert lines[2] == "第21条の2　利率は年3.5%とする。"


@pytest.mark.conversion
@pytest.mark.parametrize("text", [
    "第二十一条の二の三",
    "項の三の四方",
    "第三者に対し三箇月以内に二十万円",
    "年三・五パーセント",
    "三・五・二パーセント",
    "第十三者",
])
def test_convert_is_idempotent(converter, text):
    """変換結果を再度変換しても変わらない"""
    once = converter.convert(text)
    assert converter.convert(once) == once


@pytest.mark.conversion
def test_convert_leaves_unmatched_text(converter):
    """文脈に合わない漢数字はそのまま"""
    assert converter.convert("一般に三つの要件") == "一般に三つの要件"
    assert converter.convert("") == ""


@pytest.mark.unit
def test_convert_rejects_non_string(converter):
    """文字列以外は TypeError"""
    with pytest.raises(TypeError):
        converter.convert(None)


@pytest.mark.unit
def test_convert_lines(converter):
    """複数行の変換"""
    assert converter.convert_lines(["第一条", "十円"]) == ["第1条", "10円"]


@pytest.mark.unit
def test_rule_names(converter):
    """ルール名の一覧"""
    names = converter.rule_names
    assert names[0] == "fraction"
    assert names[-1] == "large_number"
    assert "unit:円" in names


@pytest.mark.unit
def test_convert_without_grouping(default_config):
    """3桁区切りを無効化"""
    from egov_numerals.conversion.converter import NumeralConverter

    config = default_config.model_copy(update={"group_digits": False})
    converter = NumeralConverter(config=config)

    assert converter.convert("千二百三十四円") == "1234円"
    assert converter.convert("二十万") == "200000"
    # 「第」の番号はもともと区切らない
    assert converter.convert("第千二百条") == "第1200条"


@pytest.mark.unit
def test_convert_with_custom_units(default_config):
    """単位リストの差し替え"""
    from egov_numerals.core.numeral_config import UnitRuleConfig
    from egov_numerals.conversion.converter import NumeralConverter

    config = default_config.model_copy(
        update={"units": UnitRuleConfig(unit_suffixes=["件"])}
    )
    converter = NumeralConverter(config=config)

    assert converter.convert("三件") == "3件"
    assert converter.convert("三円") == "三円"


@pytest.mark.unit
def test_convert_with_custom_rules():
    """ルールを直接渡す"""
    from egov_numerals.conversion.converter import NumeralConverter
    from egov_numerals.conversion.rules import fraction_rule

    converter = NumeralConverter(rules=[fraction_rule()])
    assert converter.rule_names == ["fraction"]
    assert converter.convert("三分の二、十円") == "2/3、十円"


@pytest.mark.unit
def test_convert_logs_rewrites(converter, caplog):
    """書き換えたルールをdebugログに出す"""
    with caplog.at_level(logging.DEBUG, logger="egov_numerals.conversion.converter"):
        converter.convert("十円")

    assert any("unit:円" in record.getMessage() for record in caplog.records)


@pytest.mark.unit
def test_module_level_convert():
    """モジュール関数からの変換"""
    from egov_numerals import convert_japanese_numerals

    assert convert_japanese_numerals("第十五条") == "第15条"
    assert convert_japanese_numerals("三分の二") == "2/3"


@pytest.mark.unit
def test_convert_very_long_digit_run(converter):
    """桁数が多すぎる数字列は例外を出さず置き換えた数字のまま残す"""
    text = "一" * 5000 + "円"
    assert converter.convert(text) == "1" * 5000 + "円"

    percent = "一" * 5000 + "・五パーセント"
    assert converter.convert(percent) == "1" * 5000 + ".5%"
