"""
shadcn registry 讀取

從 ui.shadcn.com 的 registry index 取得目前可安裝的 UI 元件清單。
"""

from typing import Optional

import requests


class RegistryClient:
    """shadcn registry 唯讀封裝."""

    BASE_URL = "https://ui.shadcn.com/r"

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def get_index(self) -> list:
        resp = self.session.get(f"{self.base_url}/index.json", timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        if isinstance(data, dict):
            # 新版 registry 格式：{"items": [...]}
            data = data.get("items", [])
        return data

    def list_ui_components(self) -> list:
        names = {
            item["name"]
            for item in self.get_index()
            if isinstance(item, dict) and item.get("type") == "registry:ui" and item.get("name")
        }
        return sorted(names)
