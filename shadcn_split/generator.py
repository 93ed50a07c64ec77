"""
Generator: flat shadcn output → per-component module directories.

    <alias>/alert.tsx  →  <alias>/alert/{Alert.tsx, variants.ts, index.ts}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .code_patcher import build_barrel_source, build_variants_source, rewrite_imports
from .messages import DEFAULT_LANG, SEPARATOR, say
from .naming_engine import COMPONENT_EXT, base_name, to_pascal_case
from .variant_extractor import extract_variants

VARIANTS_FILE = "variants.ts"
INDEX_FILE = "index.ts"

CREATED = "created"
SKIPPED = "skipped"
MISSING = "missing"


@dataclass
class ComponentUnit:
    base_name: str
    pascal_name: str
    folder: Path
    component_path: Path
    index_path: Path
    variants_path: Optional[Path] = None


@dataclass
class SplitSummary:
    created: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    ignored: List[str] = field(default_factory=list)

    def record(self, name: str, outcome: str) -> None:
        getattr(self, outcome).append(name)


def plan_unit(alias_dir: Path, name: str, has_variants: bool) -> ComponentUnit:
    pascal_name = to_pascal_case(name)
    folder = Path(alias_dir) / name
    return ComponentUnit(
        base_name=name,
        pascal_name=pascal_name,
        folder=folder,
        component_path=folder / f"{pascal_name}{COMPONENT_EXT}",
        index_path=folder / INDEX_FILE,
        variants_path=folder / VARIANTS_FILE if has_variants else None,
    )


def unit_exists(alias_dir: Path, name: str) -> bool:
    unit = plan_unit(alias_dir, name, has_variants=False)
    return unit.folder.exists() or unit.component_path.exists()


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _remove_if_empty(folder: Path) -> None:
    if folder.is_dir() and not any(folder.iterdir()):
        folder.rmdir()


def materialize_file(path: Path, alias_dir: Path, lang: str = DEFAULT_LANG) -> str:
    """Split one generated file into its module directory.

    Returns CREATED, SKIPPED (unit already there, duplicate removed) or
    MISSING (file vanished or could not be read). Undecodable bytes are
    replaced with U+FFFD rather than aborting the run.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        say("missing_file", lang, file=path.name)
        return MISSING

    print(SEPARATOR)
    say("processing", lang, path=path)

    name = base_name(path)
    if unit_exists(alias_dir, name):
        say("already_imported", lang, name=to_pascal_case(name))
        path.unlink()
        return SKIPPED

    result = extract_variants(content)
    unit = plan_unit(alias_dir, name, result.has_variant)

    unit.folder.mkdir(parents=True, exist_ok=True)
    say("generating", lang, name=unit.pascal_name)
    if unit.variants_path is not None:
        _write(unit.variants_path, build_variants_source(result.variant_block))

    component = rewrite_imports(
        result.residual_text,
        variant_name=result.variant_name,
        has_variant=result.has_variant,
    )
    _write(unit.component_path, component)
    _write(unit.index_path, build_barrel_source(unit.pascal_name, result.has_variant))

    say("created", lang, name=unit.pascal_name, path=unit.component_path)
    print(SEPARATOR)

    path.unlink()
    # 與原腳本相同的收尾步驟；目錄剛寫入檔案，正常流程下不會是空的
    _remove_if_empty(Path(alias_dir) / name)
    return CREATED


def split_directory(alias_dir: Path, lang: str = DEFAULT_LANG) -> SplitSummary:
    """Process every flat component file in alias_dir, in listing order."""
    alias_dir = Path(alias_dir)
    summary = SplitSummary()
    if not alias_dir.is_dir():
        say("missing_file", lang, file=str(alias_dir))
        return summary

    for entry in sorted(alias_dir.iterdir()):
        if entry.is_dir():
            continue
        if not entry.name.endswith(COMPONENT_EXT):
            summary.ignored.append(entry.name)
            continue
        outcome = materialize_file(entry, alias_dir, lang)
        summary.record(base_name(entry), outcome)
    return summary
