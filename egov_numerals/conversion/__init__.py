"""
Conversion module
"""
from .base import ConversionRule, scan_and_replace
from .converter import NumeralConverter, convert_japanese_numerals

__all__ = [
    "ConversionRule",
    "NumeralConverter",
    "convert_japanese_numerals",
    "scan_and_replace",
]
