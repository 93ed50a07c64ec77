"""components.json 載入與基本驗證."""

import json
from pathlib import Path
from typing import Any, Optional

DEFAULT_CONFIG_PATH = "components.json"
DEFAULT_ALIAS_DIR = "src/components/atoms"

# shadcn components.json 已知頂層欄位
_KNOWN_TOP_KEYS = {
    "$schema", "style", "rsc", "tsx", "tailwind", "aliases", "iconLibrary", "registries",
}

_KNOWN_ALIAS_KEYS = {"components", "utils", "ui", "lib", "hooks"}


def _warn(msg: str) -> None:
    print(f"   ⚠️  [config] {msg}")


def validate_config(cfg: dict) -> None:
    """對 config 做基本欄位驗證，印出警告但不拋例外。"""
    if not cfg:
        return

    for key in cfg:
        if key not in _KNOWN_TOP_KEYS:
            known = ", ".join(sorted(_KNOWN_TOP_KEYS))
            _warn(f"未知頂層欄位 '{key}'（已知欄位：{known}）")

    aliases = cfg.get("aliases")
    if aliases is None:
        return
    if not isinstance(aliases, dict):
        _warn(f"aliases 應為物件，目前是 {type(aliases).__name__}")
        return
    for key in aliases:
        if key not in _KNOWN_ALIAS_KEYS:
            known = ", ".join(sorted(_KNOWN_ALIAS_KEYS))
            _warn(f"[aliases] 未知欄位 '{key}'（已知欄位：{known}）")

    ui = aliases.get("ui")
    if ui is not None and not isinstance(ui, str):
        _warn(f"aliases.ui 應為字串，目前是 {type(ui).__name__}")


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    """載入 components.json，不存在則回傳空 dict；存在則做基本驗證。"""
    path = Path(config_path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg: Any = json.load(f)
    if not isinstance(cfg, dict):
        print(f"   ⚠️  [config] '{config_path}' 格式錯誤，應為 JSON 物件，回傳空設定。")
        return {}
    validate_config(cfg)
    return cfg


def resolve_alias_dir(cfg: dict, override: Optional[str] = None) -> Path:
    """決定 shadcn 產出檔案的目錄：CLI 參數 > aliases.ui > 預設值。"""
    if override:
        return Path(override)
    aliases = cfg.get("aliases")
    ui = aliases.get("ui") if isinstance(aliases, dict) else None
    if isinstance(ui, str) and ui:
        return Path(ui)
    return Path(DEFAULT_ALIAS_DIR)
