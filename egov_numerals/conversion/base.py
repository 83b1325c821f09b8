"""
変換ルールの基本要素

ルールは (パターン, 文脈ガード, 置換関数) の組で表し、
すべて scan_and_replace で適用する
"""
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from egov_numerals.utils.numeral_parser import is_numeral_token


# 文脈ガード: (全文, マッチ) → 置換してよいか
ContextGuard = Callable[[str, "re.Match[str]"], bool]


@dataclass(frozen=True)
class ConversionRule:
    """変換ルール"""
    name: str
    pattern: "re.Pattern[str]"
    replace: Callable[["re.Match[str]"], str]
    guard: Optional[ContextGuard] = None
    # ガードで弾かれたとき、同じ開始位置から短いマッチを試すか
    backtrack: bool = False

    def accepts(self, text: str, match: "re.Match[str]") -> bool:
        return self.guard is None or self.guard(text, match)


def not_followed_by_numeral() -> ContextGuard:
    """マッチ直後が漢数字でないこと"""
    def guard(text: str, match: "re.Match[str]") -> bool:
        return not is_numeral_token(text[match.end():match.end() + 1])
    return guard


def not_followed_by_words(words: Iterable[str]) -> ContextGuard:
    """マッチ直後が除外語で始まらないこと"""
    excluded = tuple(word for word in words if word)

    def guard(text: str, match: "re.Match[str]") -> bool:
        return not text.startswith(excluded, match.end()) if excluded else True
    return guard


def all_of(*guards: ContextGuard) -> ContextGuard:
    """すべてのガードを満たすこと"""
    def guard(text: str, match: "re.Match[str]") -> bool:
        return all(g(text, match) for g in guards)
    return guard


def _accepted_match(text: str, rule: ConversionRule, match: "re.Match[str]") -> Optional["re.Match[str]"]:
    """ガードを満たすマッチを探す（必要なら終端を縮めて再試行）"""
    if rule.accepts(text, match):
        return match
    if not rule.backtrack:
        return None

    start = match.start()
    end = match.end() - 1
    while end > start:
        shorter = rule.pattern.match(text, start, end)
        if shorter is None:
            return None
        if rule.accepts(text, shorter):
            return shorter
        end = shorter.end() - 1
    return None


def scan_and_replace(text: str, rule: ConversionRule) -> str:
    """
    テキスト全体にルールを1回適用

    左から順にマッチを探し、ガードを満たせば置換する。
    満たさなければ1文字進めて探索を続ける。
    """
    pieces = []
    cursor = 0
    position = 0

    while position <= len(text):
        match = rule.pattern.search(text, position)
        if match is None:
            break

        accepted = _accepted_match(text, rule, match)
        if accepted is None:
            position = match.start() + 1
            continue

        pieces.append(text[cursor:accepted.start()])
        pieces.append(rule.replace(accepted))
        cursor = accepted.end()
        position = accepted.end() if accepted.end() > accepted.start() else accepted.end() + 1

    pieces.append(text[cursor:])
    return ''.join(pieces)
