"""Configuration module for Mini-PNG."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from minipng.renderer import DEFAULT_GLYPH

DEFAULT_CONFIG_NAME = "minipng.yml"
"""カレントディレクトリで自動的に読み込む設定ファイル名"""


class ConfigError(Exception):
    """設定ファイル読み込みエラー"""

    pass


@dataclass(frozen=True)
class RenderConfig:
    """表示設定"""

    glyph: str = DEFAULT_GLYPH


@dataclass(frozen=True)
class OutputConfig:
    """端末出力設定"""

    use_color: bool = True


@dataclass(frozen=True)
class MiniPNGConfig:
    """ルート設定"""

    render: RenderConfig = field(default_factory=RenderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(path: Path) -> MiniPNGConfig:
    """設定ファイルを読み込む

    Args:
        path: 設定ファイルパス

    Returns:
        MiniPNGConfig: 読み込んだ設定（デフォルトとマージ済み）

    Raises:
        ConfigError: ファイル読み込みまたはパースエラー
    """
    if not path.exists():
        raise ConfigError(f"設定ファイルが見つかりません: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML解析エラー: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("設定ファイルはYAMLのマッピング形式である必要があります")

    default = get_default_config()

    return MiniPNGConfig(
        render=_merge_render_config(data.get("render", {}), default.render),
        output=_merge_output_config(data.get("output", {}), default.output),
    )


def find_config(explicit: Path | None, cwd: Path | None = None) -> MiniPNGConfig:
    """CLI用の設定を解決する

    明示されたパスを優先し、なければカレントディレクトリのminipng.ymlを読む。
    どちらもなければデフォルト設定を返す。
    """
    if explicit is not None:
        return load_config(explicit)

    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        return load_config(candidate)
    return get_default_config()


def get_default_config() -> MiniPNGConfig:
    """デフォルト設定を取得する"""
    return MiniPNGConfig()


def _merge_render_config(data: dict[str, Any], default: RenderConfig) -> RenderConfig:
    """表示設定をマージする"""
    if not isinstance(data, dict):
        return default
    glyph = data.get("glyph", default.glyph)
    if not isinstance(glyph, str) or not glyph:
        raise ConfigError("render.glyph には空でない文字列を指定してください")
    return RenderConfig(glyph=glyph)


def _merge_output_config(data: dict[str, Any], default: OutputConfig) -> OutputConfig:
    """端末出力設定をマージする"""
    if not isinstance(data, dict):
        return default
    return OutputConfig(
        use_color=bool(data.get("use_color", default.use_color)),
    )
