"""
Code Patcher：改寫抽出 variants 後的元件 import

只做字串層級的替換（每個 pattern 只換第一個），不碰檔案系統。
"""

import re
from typing import Optional

VARIANCE_IMPORT = "import { cva } from 'class-variance-authority';"

_REACT_IMPORT_RE = re.compile(r"""import\s+\*\s+as\s+React\s+from\s+['"]react['"]""")
_VARIANCE_IMPORT_RE = re.compile(
    r"""import\s+\{([^}]+)\}\s+from\s+['"]class-variance-authority['"]"""
)

REACT_TYPE_IMPORT = "import type * as React from 'react'"
VARIANCE_TYPE_IMPORT = "import type { VariantProps } from 'class-variance-authority'"


def rewrite_react_import(text: str) -> str:
    """`import * as React from "react"` → 型別 import."""
    return _REACT_IMPORT_RE.sub(lambda m: REACT_TYPE_IMPORT, text, count=1)


def rewrite_variance_import(text: str, variant_name: Optional[str]) -> str:
    """把 cva 的具名 import 換成 VariantProps 型別 + ./variants 的值 import."""
    if not variant_name:
        return text
    replacement = f"{VARIANCE_TYPE_IMPORT}\nimport {{ {variant_name} }} from './variants'"
    return _VARIANCE_IMPORT_RE.sub(lambda m: replacement, text, count=1)


def collapse_blank_lines(text: str) -> str:
    return text.replace("\n\n\n\n", "\n\n", 1)


def rewrite_imports(
    text: str,
    variant_name: Optional[str] = None,
    has_variant: bool = False,
) -> str:
    """依新的檔案配置改寫元件內容.

    React import 一律改寫；cva import 只在確實抽出且有名稱時改寫。
    """
    text = rewrite_react_import(text)
    if has_variant and variant_name:
        text = rewrite_variance_import(text, variant_name)
    return collapse_blank_lines(text)


def build_variants_source(variant_block: str) -> str:
    return f"{VARIANCE_IMPORT}\n\n{variant_block}"


def build_barrel_source(pascal_name: str, has_variants: bool) -> str:
    """index.ts：先 ./variants（若有）再元件本身。"""
    lines = []
    if has_variants:
        lines.append("export * from './variants'\n")
    lines.append(f"export * from './{pascal_name}'\n")
    return "".join(lines)
