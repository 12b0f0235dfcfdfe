"""設定ファイル（TOML/JSON）を読み込むユーティリティ。

目的:
    成長トレースの実行条件（追加回数・初期容量など）を設定ファイルとして外部化し、
    辞書（dict）としてロードする。
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping


def load_config(path: Path) -> Dict[str, Any]:
    """設定ファイルを読み込み、Python の辞書として返す。

    Args:
        path: 設定ファイルへのパス。拡張子でフォーマットを判定する。

    Returns:
        設定内容を表す辞書。

    Raises:
        FileNotFoundError: 指定パスが存在しない場合。
        ValueError: 対応していない拡張子の場合。
        json.JSONDecodeError: JSON のパースに失敗した場合。
        tomllib.TOMLDecodeError: TOML のパースに失敗した場合。
    """

    path = Path(path)

    # 設定ファイルが存在しない場合は、早期に失敗させて原因を明確化する。
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    if path.suffix == ".toml":
        # tomllib.load はバイナリファイルオブジェクトを想定する。
        with path.open("rb") as handle:
            return tomllib.load(handle)

    if path.suffix == ".json":
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    raise ValueError(f"Unsupported config format: {path.suffix}")


def config_section(config: Mapping[str, Any], name: str) -> Dict[str, Any]:
    """設定辞書からテーブル（サブ辞書）を取り出す。

    テーブルが無い場合は空の辞書を返す。テーブルが辞書でない場合は ValueError。
    """

    section = config.get(name, {})
    if not isinstance(section, Mapping):
        raise ValueError(f"Config section [{name}] must be a table")
    return dict(section)
