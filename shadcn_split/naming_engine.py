"""
命名引擎：shadcn 元件檔名 ↔ 目錄 / 元件名稱

dropdown-menu.tsx → dropdown-menu/DropdownMenu.tsx
"""

import re
from pathlib import Path
from typing import Union

COMPONENT_EXT = ".tsx"

_SEPARATOR_RE = re.compile(r"[-_ ]+")

# 可透過 shadcn CLI 安裝的元件
COMPONENT_LIST = [
    "accordion",
    "alert-dialog",
    "avatar",
    "alert",
    "badge",
    "breadcrumb",
    "button",
    "calendar",
    "card",
    "checkbox",
    "command",
    "context-menu",
    "dialog",
    "dropdown-menu",
    "hover-card",
    "input",
    "label",
    "menubar",
    "navigation-menu",
    "pagination",
    "popover",
    "progress",
    "radio-group",
    "scroll-area",
    "select",
    "separator",
    "sheet",
    "skeleton",
    "sonner",
    "switch",
    "table",
    "tabs",
    "textarea",
    "toggle",
    "toggle-group",
    "tooltip",
]

# 產生多檔或依賴額外套件，拆檔結果需手動確認
UNAVAILABLE_COMPONENTS = [
    "calendar",
    "carousel",
    "collapsible",
    "form",
    "input-otp",
    "sidebar",
    "slider",
]


def to_pascal_case(name: str) -> str:
    """以 -、_、空白切段，每段首字大寫後串接（其餘字元保留原樣）。"""
    return "".join(part[:1].upper() + part[1:] for part in _SEPARATOR_RE.split(name))


def base_name(path: Union[str, Path]) -> str:
    name = Path(path).name
    if name.endswith(COMPONENT_EXT):
        return name[: -len(COMPONENT_EXT)]
    return name


def is_known_component(name: str) -> bool:
    return name in COMPONENT_LIST
