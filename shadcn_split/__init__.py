"""
shadcn-split：shadcn/ui 元件拆檔工具（Python 管線）

把 `npx shadcn add` 產生的單一 .tsx 拆成元件、variants 與 index 三個檔案。
"""

__version__ = "0.1.0"

from .variant_extractor import (
    ExtractionResult,
    ScanCursor,
    ScanState,
    declaration_name,
    export_declaration,
    extract_variants,
    find_call_end,
)
from .code_patcher import (
    build_barrel_source,
    build_variants_source,
    rewrite_imports,
)
from .naming_engine import COMPONENT_LIST, base_name, to_pascal_case
from .generator import ComponentUnit, SplitSummary, materialize_file, plan_unit, split_directory
from .installer import GeneratorError, install_components
from .registry import RegistryClient
from .config import load_config, resolve_alias_dir, validate_config

__all__ = [
    "__version__",
    "ExtractionResult",
    "ScanCursor",
    "ScanState",
    "declaration_name",
    "export_declaration",
    "extract_variants",
    "find_call_end",
    "build_barrel_source",
    "build_variants_source",
    "rewrite_imports",
    "COMPONENT_LIST",
    "base_name",
    "to_pascal_case",
    "ComponentUnit",
    "SplitSummary",
    "materialize_file",
    "plan_unit",
    "split_directory",
    "GeneratorError",
    "install_components",
    "RegistryClient",
    "load_config",
    "resolve_alias_dir",
    "validate_config",
]
