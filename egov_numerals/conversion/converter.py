"""
漢数字変換パイプライン: 分数 → 単位 → パーセント → 箇月 → 第/前/枝番号 → 大きな数
"""
import logging
from typing import Iterable, List, Optional

from egov_numerals.core.numeral_config import ConverterConfig, load_config
from .base import ConversionRule, scan_and_replace
from .rules import build_rules

logger = logging.getLogger(__name__)

# どのルールにも掛からなかった「箇月」の後始末
_MONTH_COUNTER = "箇月"
_MONTH_COUNTER_NORMALIZED = "か月"


class NumeralConverter:
    """法令テキスト中の漢数字をアラビア数字に変換"""

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        rules: Optional[List[ConversionRule]] = None
    ):
        """
        Args:
            config: 変換設定（省略時は環境変数から読み込み）
            rules: 適用順のルール（省略時は設定から生成）
        """
        self.config = config or load_config()
        self.rules = rules if rules is not None else build_rules(self.config)

    @property
    def rule_names(self) -> List[str]:
        return [rule.name for rule in self.rules]

    def convert(self, text: str) -> str:
        """テキスト全体にルールを順に適用"""
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        result = text
        for rule in self.rules:
            converted = scan_and_replace(result, rule)
            if converted != result:
                logger.debug(f"Rule '{rule.name}' rewrote text: {result[:50]!r} -> {converted[:50]!r}")
            result = converted

        return result.replace(_MONTH_COUNTER, _MONTH_COUNTER_NORMALIZED)

    def convert_lines(self, lines: Iterable[str]) -> List[str]:
        """複数行をそれぞれ変換"""
        return [self.convert(line) for line in lines]


_default_converter: Optional[NumeralConverter] = None


def get_default_converter() -> NumeralConverter:
    """既定設定の変換器を取得（初回のみ生成）"""
    global _default_converter
    if _default_converter is None:
        _default_converter = NumeralConverter()
    return _default_converter


def convert_japanese_numerals(text: str) -> str:
    """
    漢数字をアラビア数字に変換

    Examples:
        「三分の二」→「2/3」
        「千二百三十四円」→「1,234円」
        「第十五条」→「第15条」
    """
    return get_default_converter().convert(text)
