"""
pytest設定とフィクスチャ
"""
import sys
from pathlib import Path
import json

import pytest

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def project_root_path():
    """プロジェクトルートのパス"""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config():
    """環境変数に依存しない既定設定"""
    from egov_numerals.core.numeral_config import ConverterConfig, UnitRuleConfig, OrdinalRuleConfig

    return ConverterConfig(
        units=UnitRuleConfig(
            unit_suffixes=["円", "年", "月", "日", "人", "割", "週", "期",
                           "親等", "個", "歳", "犯", "回", "以上"]
        ),
        ordinals=OrdinalRuleConfig(
            ordinal_excluded_words=["取得者", "債務者", "者", "方", "般"],
            preceding_excluded_words=["方", "般"],
            branch_excluded_words=["方", "般"],
            branch_markers="条項章節款目"
        ),
        group_digits=True,
        log_level="WARNING"
    )


@pytest.fixture
def converter(default_config):
    """既定設定の変換器"""
    from egov_numerals.conversion.converter import NumeralConverter

    return NumeralConverter(config=default_config)


@pytest.fixture
def sample_statute_text():
    """サンプル条文"""
    return (
        "第二十一条　債権者は、前二条の規定にかかわらず、三十日以内に十万円を支払わなければならない。\n"
        "２　前項の場合において、第三者の持分が三分の一以上であるときは、三箇月の猶予を与える。\n"
        "第二十一条の二　利率は年三・五パーセントとする。"
    )


@pytest.fixture
def sample_jsonl_data():
    """サンプルJSONLデータ"""
    return [
        {
            "law_title": "博物館法",
            "law_num": "昭和二十六年法律第二百八十五号",
            "article": "1",
            "article_title": "第一条",
            "item": None,
            "text": "この法律は、博物館の設置及び運営に関して必要な事項を定める。"
        },
        {
            "law_title": "民法",
            "law_num": "明治二十九年法律第八十九号",
            "article": "4",
            "article_title": "第四条",
            "item": None,
            "text": "年齢十八歳をもって、成年とする。"
        },
        {
            "law_title": "個人情報保護法",
            "law_num": "平成十五年法律第五十七号",
            "article": "27",
            "article_title": "第二十七条",
            "item": None,
            "text": "個人データを第三者に提供してはならない。"
        }
    ]


@pytest.fixture
def sample_jsonl_file(tmp_path, sample_jsonl_data):
    """サンプルJSONLファイル（壊れた行を1行含む）"""
    jsonl_file = tmp_path / "test_data.jsonl"
    with open(jsonl_file, "w", encoding="utf-8") as f:
        for item in sample_jsonl_data:
            f.write(json.dumps(item, ensure_ascii=False) + "\n")
        f.write("{not json\n")
    return jsonl_file
