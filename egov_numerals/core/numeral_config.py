"""
漢数字変換の設定管理
変換ルールのパラメータを環境変数またはデフォルト値で管理
"""
import os
from pathlib import Path
from typing import List, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


def get_project_root() -> Path:
    """プロジェクトルートディレクトリを取得"""
    # egov_numerals/core/numeral_config.py から見て2階層上がプロジェクトルート
    return Path(__file__).parent.parent.parent


def _load_environment_variables() -> None:
    """`.env` が存在する場合は読み込む"""
    project_root = get_project_root()
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path)
    else:
        load_dotenv()


_load_environment_variables()


def _env_list(name: str, default: str) -> List[str]:
    """カンマ区切りの環境変数をリストとして取得"""
    raw = os.getenv(name, default)
    return [part.strip() for part in raw.split(",") if part.strip()]


DEFAULT_UNIT_SUFFIXES = "円,年,月,日,人,割,週,期,親等,個,歳,犯,回,以上"


class UnitRuleConfig(BaseModel):
    """単位付き数値ルールの設定"""
    model_config = ConfigDict(validate_default=True)

    # 並び順がそのまま適用順になる
    unit_suffixes: List[str] = Field(
        default=_env_list("NUMERAL_UNIT_SUFFIXES", DEFAULT_UNIT_SUFFIXES),
        min_length=1
    )

    @field_validator("unit_suffixes")
    @classmethod
    def _reject_blank_suffix(cls, value: List[str]) -> List[str]:
        for suffix in value:
            if not suffix or suffix.isspace():
                raise ValueError("unit suffix must not be blank")
        return value


class OrdinalRuleConfig(BaseModel):
    """「第」「前」「の」ルールの除外語設定"""
    model_config = ConfigDict(validate_default=True)

    ordinal_excluded_words: List[str] = Field(
        default=_env_list("ORDINAL_EXCLUDED_WORDS", "取得者,債務者,者,方,般")
    )
    preceding_excluded_words: List[str] = Field(
        default=_env_list("PRECEDING_EXCLUDED_WORDS", "方,般")
    )
    branch_excluded_words: List[str] = Field(
        default=_env_list("BRANCH_EXCLUDED_WORDS", "方,般")
    )
    # 枝番号の直前に置ける見出し文字（半角数字は常に許可）
    branch_markers: str = Field(
        default=os.getenv("BRANCH_MARKERS", "条項章節款目"),
        min_length=1
    )


class ConverterConfig(BaseModel):
    """変換システム全体の設定"""
    model_config = ConfigDict(validate_default=True)

    units: UnitRuleConfig = Field(default_factory=UnitRuleConfig)
    ordinals: OrdinalRuleConfig = Field(default_factory=OrdinalRuleConfig)

    group_digits: bool = Field(
        default=os.getenv("NUMERAL_GROUP_DIGITS", "true").lower() == "true"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default=os.getenv("LOG_LEVEL", "WARNING").upper()
    )


def load_config() -> ConverterConfig:
    """設定をロード"""
    return ConverterConfig()
