"""
Variant Extractor：從 shadcn 產生的元件中抽出 cva(...) 宣告

以小型狀態機掃描原始碼：追蹤括號深度、字串邊界與跳脫字元，
找出 `const xxxVariants = cva(...)` 的完整範圍。
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

CALL_MARKER = "cva("
DECLARATION_KEYWORD = "const"
QUOTE_CHARS = ("'", '"', "`")

_DECLARATION_RE = re.compile(r"^const\s+")
_NAME_RE = re.compile(r"^const\s+([a-zA-Z0-9_]+)")


class ScanState(Enum):
    NORMAL = "normal"
    IN_STRING = "in_string"
    ESCAPED = "escaped"


@dataclass
class ScanCursor:
    """掃描狀態：位置、括號深度、目前字串分隔符。"""
    position: int
    depth: int = 1
    state: ScanState = ScanState.NORMAL
    delimiter: Optional[str] = None

    def step(self, char: str) -> None:
        """吃掉一個字元並更新狀態。"""
        if self.state is ScanState.ESCAPED:
            # 被跳脫的字元不會結束字串，也不影響深度
            self.state = ScanState.IN_STRING
        elif self.state is ScanState.IN_STRING:
            if char == "\\":
                self.state = ScanState.ESCAPED
            elif char == self.delimiter:
                self.state = ScanState.NORMAL
                self.delimiter = None
        elif char in QUOTE_CHARS:
            self.state = ScanState.IN_STRING
            self.delimiter = char
        elif char == "(":
            self.depth += 1
        elif char == ")":
            self.depth -= 1
        self.position += 1

    @property
    def closed(self) -> bool:
        return self.depth == 0


@dataclass(frozen=True)
class ExtractionResult:
    variant_block: str
    residual_text: str
    variant_name: Optional[str] = None
    start: int = -1
    end: int = -1

    @property
    def has_variant(self) -> bool:
        return bool(self.variant_block)


def find_call_end(text: str, open_index: int) -> Optional[int]:
    """從 open_index（左括號之後）開始掃描，回傳對應右括號之後的位置。

    文字結束前深度都沒歸零時回傳 None。
    """
    cursor = ScanCursor(position=open_index)
    while cursor.position < len(text):
        cursor.step(text[cursor.position])
        if cursor.closed:
            return cursor.position
    return None


def _skip_terminator(text: str, index: int) -> int:
    while index < len(text) and text[index].isspace():
        index += 1
    if index < len(text) and text[index] == ";":
        index += 1
    return index


def export_declaration(declaration: str) -> str:
    """`const x = ...` → `export const x = ...`"""
    return _DECLARATION_RE.sub("export const ", declaration, count=1)


def declaration_name(declaration: str) -> Optional[str]:
    match = _NAME_RE.match(declaration)
    return match.group(1) if match else None


def extract_variants(content: str) -> ExtractionResult:
    """抽出第一個 cva(...) 宣告。

    找不到 marker 或括號不平衡時，原文不變、variant_block 為空字串。
    移除時以掃描到的起點定位，不做第二次字串搜尋。
    """
    marker_index = content.find(CALL_MARKER)
    if marker_index == -1:
        return ExtractionResult(variant_block="", residual_text=content)

    start = content.rfind(DECLARATION_KEYWORD, 0, marker_index)
    if start == -1:
        start = marker_index

    call_end = find_call_end(content, marker_index + len(CALL_MARKER))
    if call_end is None:
        return ExtractionResult(variant_block="", residual_text=content)

    end = _skip_terminator(content, call_end)
    declaration = content[start:end].strip()
    span_end = start + len(declaration)
    residual = (content[:start] + content[span_end:]).strip()

    return ExtractionResult(
        variant_block=export_declaration(declaration),
        residual_text=residual,
        variant_name=declaration_name(declaration),
        start=start,
        end=span_end,
    )
