"""
e-Gov法令テキストの漢数字変換
"""
from egov_numerals.conversion import NumeralConverter, convert_japanese_numerals
from egov_numerals.utils.article_targets import build_article_targets, to_japanese_numeral
from egov_numerals.utils.numeral_parser import parse_value

__all__ = [
    "NumeralConverter",
    "build_article_targets",
    "convert_japanese_numerals",
    "parse_value",
    "to_japanese_numeral",
]
