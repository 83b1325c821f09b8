#!/usr/bin/env python3
"""
漢数字変換CLIツール

使用方法:
    python scripts/convert_text_cli.py "第二十一条の二の規定により千二百三十四円"
    python scripts/convert_text_cli.py --input law.txt --output law_converted.txt
    python scripts/convert_text_cli.py --targets "12 3"
    python scripts/convert_text_cli.py --interactive
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from egov_numerals.core.numeral_config import load_config
from egov_numerals.conversion.converter import NumeralConverter
from egov_numerals.utils.article_targets import build_article_targets, format_article_heading

logger = logging.getLogger(__name__)


def read_source_text(args) -> str:
    """引数・ファイル・標準入力のいずれかから入力を取得"""
    if args.text is not None:
        return args.text
    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def print_targets(query: str) -> int:
    targets = build_article_targets(query)
    if not targets:
        print(f"Invalid article number: {query!r}", file=sys.stderr)
        return 1
    print(f"見出し: {format_article_heading(query)}")
    for target in targets:
        print(f"- {target}")
    return 0


def main():
    parser = argparse.ArgumentParser(description="法令テキストの漢数字をアラビア数字に変換")
    parser.add_argument("text", nargs="?", help="変換するテキスト")
    parser.add_argument("--input", type=Path, help="入力テキストファイル")
    parser.add_argument("--output", "-o", type=Path, help="結果をファイルに保存")
    parser.add_argument("--interactive", "-i", action="store_true", help="対話モード")
    parser.add_argument("--targets", metavar="NUMBER", help='条番号（例: "12 3"）の検索ターゲットを表示')

    args = parser.parse_args()

    config = load_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if args.targets is not None:
        sys.exit(print_targets(args.targets))

    converter = NumeralConverter(config=config)

    if args.interactive:
        print("Interactive mode. Type 'exit' or 'quit' to exit.\n")
        while True:
            try:
                text = input("Text: ")
                if text.lower() in ["exit", "quit"]:
                    break
                if not text.strip():
                    continue
                print(converter.convert(text))
                print()
            except (KeyboardInterrupt, EOFError):
                print("\nExiting...")
                break
        return

    if args.text is None and args.input is None and sys.stdin.isatty():
        parser.error("Please provide text, --input, stdin or use --interactive mode")

    result = converter.convert(read_source_text(args))

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(result)
        print(f"Result saved to {args.output}")
    else:
        print(result)


if __name__ == "__main__":
    main()
