#!/usr/bin/env python3
"""
JSONL形式の法令データの漢数字をアラビア数字に変換するスクリプト

使用方法:
    python scripts/convert_jsonl.py --input-file data/egov_laws.jsonl --output-file data/egov_laws_arabic.jsonl
    python scripts/convert_jsonl.py --input-file data/egov_laws.jsonl --output-file out.jsonl --fields text article_title
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple
from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from egov_numerals.core.numeral_config import load_config
from egov_numerals.conversion.converter import NumeralConverter

logger = logging.getLogger(__name__)


def convert_record(
    record: Dict[str, Any],
    converter: NumeralConverter,
    fields: Iterable[str]
) -> Tuple[Dict[str, Any], int]:
    """
    レコードの指定フィールドを変換

    Returns:
        (変換後のレコード, 書き換えたフィールド数)
    """
    converted = dict(record)
    changed = 0
    for name in fields:
        value = converted.get(name)
        if not isinstance(value, str):
            continue
        new_value = converter.convert(value)
        if new_value != value:
            converted[name] = new_value
            changed += 1
    return converted, changed


def convert_jsonl_file(
    input_file: Path,
    output_file: Path,
    converter: NumeralConverter,
    fields: List[str],
    limit: int = None
) -> Dict[str, int]:
    """
    JSONLファイルを1行ずつ変換して書き出す

    Returns:
        統計情報（records, changed_fields, skipped）
    """
    stats = {"records": 0, "changed_fields": 0, "skipped": 0}

    with open(input_file, "r", encoding="utf-8") as f:
        lines = f.readlines()
    if limit:
        lines = lines[:limit]

    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w", encoding="utf-8") as out:
        for line_no, line in enumerate(tqdm(lines, desc="Converting"), 1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning(f"Skipping line {line_no}: {e}")
                stats["skipped"] += 1
                continue
            if not isinstance(record, dict):
                logger.warning(f"Skipping line {line_no}: not a JSON object")
                stats["skipped"] += 1
                continue

            converted, changed = convert_record(record, converter, fields)
            out.write(json.dumps(converted, ensure_ascii=False) + "\n")
            stats["records"] += 1
            stats["changed_fields"] += changed

    return stats


def main():
    parser = argparse.ArgumentParser(
        description="JSONL形式の法令データの漢数字をアラビア数字に変換"
    )
    parser.add_argument(
        "--input-file",
        type=str,
        required=True,
        help="入力JSONLファイルパス",
    )
    parser.add_argument(
        "--output-file",
        type=str,
        required=True,
        help="出力JSONLファイルパス",
    )
    parser.add_argument(
        "--fields",
        nargs="+",
        default=["text"],
        help="変換するフィールド名",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="処理するレコード数の上限",
    )
    args = parser.parse_args()

    config = load_config()
    logging.basicConfig(level=getattr(logging, config.log_level))

    converter = NumeralConverter(config=config)
    output_file = Path(args.output_file)

    stats = convert_jsonl_file(
        Path(args.input_file),
        output_file,
        converter,
        args.fields,
        limit=args.limit
    )

    print(f"\n完了:")
    print(f"  変換したレコード数: {stats['records']}")
    print(f"  書き換えたフィールド数: {stats['changed_fields']}")
    print(f"  スキップした行数: {stats['skipped']}")
    print(f"  出力ファイル: {output_file}")


if __name__ == "__main__":
    main()
