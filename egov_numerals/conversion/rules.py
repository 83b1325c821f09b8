"""
漢数字変換ルールの定義

ルールは以下の順で適用され、各ルールは前のルールの出力を入力とする
1. 分数: 三分の二 → 2/3
2. 単位付き数値: 千二百三十四円 → 1,234円
3. パーセント: 三・五パーセント → 3.5%
4. 箇月: 三箇月 → 3か月
5. 「第」: 第十五条 → 第15条（3桁区切りなし）
6. 「前」: 前二条 → 前2条
7. 枝番号: 条の二の三 → 条の2の3
8. 単位なしの大きな数: 二十万 → 200,000
"""
import logging
import math
import re
from typing import Iterable, List, Optional

from egov_numerals.core.numeral_config import ConverterConfig, load_config
from egov_numerals.utils.numeral_parser import (
    KANJI_NUMS,
    KANJI_NUMS_DOT,
    convert_string,
    format_value,
    group_number,
    parse_value,
)
from .base import ConversionRule, all_of, not_followed_by_numeral, not_followed_by_words

logger = logging.getLogger(__name__)

NUMERAL = f"[{KANJI_NUMS}]+"
NUMERAL_WITH_DOT = f"[{re.escape(KANJI_NUMS_DOT)}]+"


def fraction_rule(group_digits: bool = True) -> ConversionRule:
    """分母「分の」分子 → 分子/分母"""
    return ConversionRule(
        name="fraction",
        pattern=re.compile(f"({NUMERAL})分の({NUMERAL})"),
        replace=lambda m: (
            f"{format_value(m.group(2), group_digits)}/{format_value(m.group(1), group_digits)}"
        ),
    )


def unit_rules(unit_suffixes: Iterable[str], group_digits: bool = True) -> List[ConversionRule]:
    """単位ごとのルール（単位の並び順に適用）"""
    rules = []
    for unit in unit_suffixes:
        rules.append(ConversionRule(
            name=f"unit:{unit}",
            pattern=re.compile(f"({NUMERAL}){re.escape(unit)}"),
            replace=lambda m, unit=unit: f"{format_value(m.group(1), group_digits)}{unit}",
        ))
    return rules


def percentage_rule(group_digits: bool = True) -> ConversionRule:
    """パーセント（小数点「・」を含む）"""
    return ConversionRule(
        name="percentage",
        pattern=re.compile(f"({NUMERAL_WITH_DOT})パーセント"),
        replace=lambda m: f"{format_value(m.group(1), group_digits)}%",
    )


def month_counter_rule(group_digits: bool = True) -> ConversionRule:
    """「箇月」を「か月」に統一"""
    return ConversionRule(
        name="month_counter",
        pattern=re.compile(f"({NUMERAL})箇月"),
        replace=lambda m: f"{format_value(m.group(1), group_digits)}か月",
    )


def prefixed_ordinal_rule(name: str, prefix: str, excluded_words: Iterable[str]) -> ConversionRule:
    """「第」「前」など接頭辞付きの番号（3桁区切りなし）"""
    return ConversionRule(
        name=name,
        pattern=re.compile(f"{re.escape(prefix)}({NUMERAL})"),
        replace=lambda m: f"{prefix}{convert_string(m.group(1))}",
        guard=all_of(not_followed_by_numeral(), not_followed_by_words(excluded_words)),
        backtrack=True,
    )


_BRANCH_SEGMENT = re.compile(f"の({NUMERAL})")


def branch_rule(markers: str, excluded_words: Iterable[str]) -> ConversionRule:
    """枝番号（条の二の三 など）の各番号を変換"""
    def _replace(m: "re.Match[str]") -> str:
        branches = _BRANCH_SEGMENT.sub(lambda b: f"の{convert_string(b.group(1))}", m.group(2))
        return m.group(1) + branches

    return ConversionRule(
        name="branch",
        pattern=re.compile(f"([{re.escape(markers)}0-9])((?:の{NUMERAL})+)"),
        replace=_replace,
        guard=all_of(not_followed_by_numeral(), not_followed_by_words(excluded_words)),
        backtrack=True,
    )


def large_number_rule(group_digits: bool = True) -> ConversionRule:
    """万・億・兆を含み、単位が付かない数"""
    def _replace(m: "re.Match[str]") -> str:
        value = parse_value(m.group(0))
        if isinstance(value, float) and math.isnan(value):
            return m.group(0)
        try:
            text = group_number(value)
        except ValueError as e:
            logger.warning(f"Leaving large number unconverted: {e}")
            return m.group(0)
        return text if group_digits else text.replace(',', '')

    return ConversionRule(
        name="large_number",
        pattern=re.compile(f"[{KANJI_NUMS}]+([万億兆])[{KANJI_NUMS}]*"),
        replace=_replace,
    )


def build_rules(config: Optional[ConverterConfig] = None) -> List[ConversionRule]:
    """設定に基づいて適用順のルールリストを作成"""
    config = config or load_config()
    group_digits = config.group_digits
    ordinals = config.ordinals

    rules = [fraction_rule(group_digits)]
    rules.extend(unit_rules(config.units.unit_suffixes, group_digits))
    rules.append(percentage_rule(group_digits))
    rules.append(month_counter_rule(group_digits))
    rules.append(prefixed_ordinal_rule("ordinal", "第", ordinals.ordinal_excluded_words))
    rules.append(prefixed_ordinal_rule("preceding", "前", ordinals.preceding_excluded_words))
    rules.append(branch_rule(ordinals.branch_markers, ordinals.branch_excluded_words))
    rules.append(large_number_rule(group_digits))
    return rules
