"""
条文見出しの検索ターゲット生成

キー入力された番号（例: "12 3"）から、法令本文で使われうる3通りの表記を作る
- 半角: 第12条の3
- 全角: 第１２条の３
- 漢数字: 第十二条の三
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from egov_numerals.utils.numeral_parser import KANJI_NUMS


logger = logging.getLogger(__name__)

# アラビア数字 → 漢数字変換テーブル（0は位取りでは書かない）
ARABIC_TO_KANJI = {
    '1': '一', '2': '二', '3': '三', '4': '四', '5': '五',
    '6': '六', '7': '七', '8': '八', '9': '九'
}

_BLOCK_UNITS = ['', '十', '百', '千']
_GROUP_UNITS = ['', '万', '億', '兆']
MAX_QUERY_DIGITS = 4 * len(_GROUP_UNITS)

# 見出しの直後にこれが続く場合は、より長い番号の一部とみなす
_CONTINUATION = re.compile(f'[0-9０-９の{KANJI_NUMS}]')
_IGNORED = re.compile(r'[\s,]')


def _block_to_kanji(block: int) -> str:
    """4桁以内の数を漢数字にする（十百千の前の「一」は省略）"""
    result = ''
    digits = str(block)
    for position, char in enumerate(reversed(digits)):
        if char == '0':
            continue
        unit = _BLOCK_UNITS[position]
        coefficient = '' if (char == '1' and unit) else ARABIC_TO_KANJI[char]
        result = coefficient + unit + result
    return result


def to_japanese_numeral(num: int) -> str:
    """
    アラビア数字を漢数字に変換

    Args:
        num: 変換する数字（0以上）

    Returns:
        漢数字表記

    Examples:
        21 → 二十一
        1234 → 千二百三十四
        10000 → 一万
    """
    if num < 0:
        raise ValueError(f"num must be non-negative, got {num}")
    if num >= 10_000 ** len(_GROUP_UNITS):
        raise ValueError(f"num must be less than 10^16, got {num}")
    if num == 0:
        return '〇'

    result = ''
    for group_unit in _GROUP_UNITS:
        num, block = divmod(num, 10_000)
        if block:
            result = _block_to_kanji(block) + group_unit + result
        if num == 0:
            break
    return result


def to_full_width(text: str) -> str:
    """半角数字を全角数字に変換"""
    return re.sub(r'[0-9]', lambda m: chr(ord(m.group(0)) + 0xFEE0), text)


@dataclass
class ArticleQuery:
    """キー入力から得た条番号（本条 + 枝番号）"""
    main: str
    branches: List[str] = field(default_factory=list)


@dataclass
class ArticleMatch:
    """見出し検索の結果"""
    line_index: int
    target: str
    score: int


def parse_article_query(query: str) -> Optional[ArticleQuery]:
    """
    "12 3" のような入力を条番号に分解

    Returns:
        ArticleQuery。数字でない部分があれば None
    """
    parts = query.split()
    if not parts:
        return None
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None
    # 漢数字にできない桁数（10^16 以上）は受け付けない
    if any(len(part.lstrip('0')) > MAX_QUERY_DIGITS for part in parts):
        return None
    return ArticleQuery(main=parts[0], branches=parts[1:])


def format_article_heading(query: str) -> str:
    """入力中の番号を見出し形式で表示する（例: 第12条の3）"""
    parts = query.split()
    if not parts:
        return ''
    heading = f"第{parts[0]}条"
    if len(parts) > 1:
        heading += 'の' + 'の'.join(parts[1:])
    return heading


def build_article_targets(query: str) -> List[str]:
    """
    検索ターゲットを優先順に生成

    Examples:
        "12 3" → ["第12条の3", "第１２条の３", "第十二条の三"]
    """
    parsed = parse_article_query(query)
    if parsed is None:
        return []

    branches = parsed.branches

    def _suffix(render) -> str:
        if not branches:
            return ''
        return 'の' + 'の'.join(render(b) for b in branches)

    main_kanji = to_japanese_numeral(int(parsed.main))
    return [
        f"第{parsed.main}条{_suffix(str)}",
        f"第{to_full_width(parsed.main)}条{_suffix(to_full_width)}",
        f"第{main_kanji}条{_suffix(lambda b: to_japanese_numeral(int(b)))}",
    ]


def find_article_heading(lines: Iterable[str], query: str) -> Optional[ArticleMatch]:
    """
    行のリストから条文見出しを探す

    ターゲットを優先順に試し、最初にヒットしたターゲットの中で
    スコアが最も高い行を返す（同点なら先に現れた行）。
    行頭でのヒットは行中より優先する。

    Args:
        lines: 検索対象の行
        query: "12 3" 形式の入力

    Returns:
        ArticleMatch。見つからなければ None
    """
    targets = build_article_targets(query)
    if not targets:
        return None

    normalized = [_IGNORED.sub('', line) for line in lines]

    for target in targets:
        best: Optional[ArticleMatch] = None
        for line_index, line in enumerate(normalized):
            index = line.find(target)
            if index == -1:
                continue
            next_char = line[index + len(target):index + len(target) + 1]
            if next_char and _CONTINUATION.match(next_char):
                continue
            score = 100 if index == 0 else 0
            if best is None or score > best.score:
                best = ArticleMatch(line_index=line_index, target=target, score=score)
        if best is not None:
            return best

    logger.info(f"Article targets {targets} not found. (Input: {query!r})")
    return None
