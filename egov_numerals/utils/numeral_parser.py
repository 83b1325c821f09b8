"""
漢数字の数値解釈ユーティリティ

法令文中の漢数字を数値に変換する
- 位取り読み: 「二〇二四」→ 2024
- 命数法読み: 「二千二十四」→ 2024、「三万五千」→ 35000
- 小数点: 「三・五」→ 3.5（パーセント表記のみで使用）
"""
import math
import re
from typing import Union


# 数字（0-9）
KANJI_DIGITS = {
    '〇': 0, '一': 1, '二': 2, '三': 3, '四': 4,
    '五': 5, '六': 6, '七': 7, '八': 8, '九': 9
}

# 小さな位（4桁のブロック内で有効）
SMALL_UNITS = {
    '十': 10, '百': 100, '千': 1_000
}

# 大きな位（ブロックを確定させる）
LARGE_UNITS = {
    '万': 10_000, '億': 100_000_000, '兆': 1_000_000_000_000
}

DECIMAL_DOT = '・'

KANJI_NUMS = '〇一二三四五六七八九十百千万億兆'
KANJI_NUMS_DOT = KANJI_NUMS + DECIMAL_DOT

_UNIT_CHARS = set(SMALL_UNITS) | set(LARGE_UNITS)
_NUMBER_TEXT = re.compile(r'^(?:[0-9]+\.?[0-9]*|\.[0-9]+)$')
# これを超える桁数は数値化しない（int と str の変換上限）
MAX_NUMBER_DIGITS = 4300

Number = Union[int, float]


def is_numeral_token(char: str) -> bool:
    """数字・位を表す漢字かどうか（小数点は含まない）"""
    return len(char) == 1 and char in KANJI_NUMS


def has_unit_token(span: str) -> bool:
    """位（十百千万億兆）を含むかどうか"""
    return any(char in _UNIT_CHARS for char in span)


def parse_named_numeral(span: str) -> int:
    """
    命数法で書かれた漢数字を数値に変換

    未知の文字は読み飛ばし、不正な並びでも例外を出さずに最善の値を返す。

    Args:
        span: 漢数字表記

    Returns:
        数値

    Examples:
        二千二十四 → 2024
        三万五千 → 35000
        万 → 10000
    """
    total = 0
    current_block = 0
    current_digit = None

    for char in span:
        if char in KANJI_DIGITS:
            # 位を挟まずに数字が続いた場合は一の位として畳み込む
            if current_digit is not None:
                current_block += current_digit
            current_digit = KANJI_DIGITS[char]
        elif char in SMALL_UNITS:
            coefficient = 1 if current_digit is None else current_digit
            current_block += coefficient * SMALL_UNITS[char]
            current_digit = None
        elif char in LARGE_UNITS:
            segment = current_block
            if current_digit is not None:
                segment += current_digit
                current_digit = None
            if segment == 0:
                segment = 1
            total += segment * LARGE_UNITS[char]
            current_block = 0

    if current_digit is not None:
        current_block += current_digit
    total += current_block

    return total


def convert_string(span: str) -> str:
    """
    漢数字をアラビア数字の文字列に置き換える

    位を含まない場合は1文字ずつ置き換える（先頭の〇も保持）。
    位を含む場合は命数法で読んだ値を返す。

    Examples:
        一二三 → "123"
        〇五 → "05"
        三・五 → "3.5"
        百二十 → "120"
    """
    if not has_unit_token(span):
        return ''.join(
            '.' if char == DECIMAL_DOT else str(KANJI_DIGITS.get(char, char))
            for char in span
        )
    return str(parse_named_numeral(span))


def _to_number(text: str) -> Number:
    if len(text) > MAX_NUMBER_DIGITS or not _NUMBER_TEXT.match(text):
        return math.nan
    if '.' in text:
        return float(text)
    return int(text)


def parse_value(span: str) -> Number:
    """
    漢数字の数値を求める

    Args:
        span: 漢数字表記（小数点「・」を含んでもよい）

    Returns:
        整数、小数点を含む場合は浮動小数点数。
        認識できる文字が1つも無い場合は nan

    Examples:
        二〇二四 → 2024
        千二十四 → 1024
        三・五 → 3.5
    """
    if not any(char in KANJI_NUMS_DOT for char in span):
        return math.nan
    if has_unit_token(span):
        return parse_named_numeral(span)
    return _to_number(convert_string(span))


def group_number(value: Number) -> str:
    """
    数値を3桁区切りの文字列にする

    小数部は最大3桁に丸め、末尾の0は落とす。
    """
    if isinstance(value, float):
        if value.is_integer():
            return f"{int(value):,}"
        text = f"{value:,.3f}".rstrip('0').rstrip('.')
        return text
    return f"{value:,}"


def format_value(span: str, group_digits: bool = True) -> str:
    """
    漢数字を表示用の数値文字列に変換

    数値として解釈できれば3桁区切り、できなければ置き換えた文字列をそのまま返す。

    Examples:
        千二百三十四 → "1,234"
        三・五 → "3.5"
        ・ → "."
    """
    converted = convert_string(span)
    value = _to_number(converted)
    if isinstance(value, float) and math.isnan(value):
        return converted
    if not group_digits:
        return group_number(value).replace(',', '')
    return group_number(value)
