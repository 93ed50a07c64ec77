"""
Layout Materializer 整合測試
所有測試使用 tmp_path，模擬 shadcn 在 alias 目錄產生的平面檔案。
"""
import pytest
from pathlib import Path
from shadcn_split.generator import (
    CREATED,
    MISSING,
    SKIPPED,
    _remove_if_empty,
    materialize_file,
    plan_unit,
    split_directory,
    unit_exists,
)


def snapshot(root: Path) -> dict:
    """目錄內容 → {相對路徑: 內容}，用來比對兩次執行結果。"""
    return {
        str(p.relative_to(root)): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


# ─── plan_unit / unit_exists ─────────────────────────────────────────────────

class TestPlanUnit:
    def test_paths(self, tmp_path):
        unit = plan_unit(tmp_path, "dropdown-menu", has_variants=True)
        assert unit.folder == tmp_path / "dropdown-menu"
        assert unit.component_path == tmp_path / "dropdown-menu" / "DropdownMenu.tsx"
        assert unit.variants_path == tmp_path / "dropdown-menu" / "variants.ts"
        assert unit.index_path == tmp_path / "dropdown-menu" / "index.ts"

    def test_no_variants_path(self, tmp_path):
        assert plan_unit(tmp_path, "sonner", has_variants=False).variants_path is None

    def test_unit_exists(self, tmp_path):
        assert not unit_exists(tmp_path, "alert")
        (tmp_path / "alert").mkdir()
        assert unit_exists(tmp_path, "alert")


# ─── 端對端：有 variants ─────────────────────────────────────────────────────

class TestAlertUnit:
    def test_creates_module_folder(self, alias_dir, alert_source):
        flat = alias_dir / "alert.tsx"
        flat.write_text(alert_source, encoding="utf-8")

        assert materialize_file(flat, alias_dir) == CREATED

        folder = alias_dir / "alert"
        assert sorted(p.name for p in folder.iterdir()) == ["Alert.tsx", "index.ts", "variants.ts"]
        assert not flat.exists()

    def test_variants_file(self, alias_dir, alert_source):
        (alias_dir / "alert.tsx").write_text(alert_source, encoding="utf-8")
        split_directory(alias_dir)

        variants = (alias_dir / "alert" / "variants.ts").read_text(encoding="utf-8")
        assert variants.startswith(
            "import { cva } from 'class-variance-authority';\n\nexport const alertVariants = cva("
        )

    def test_component_file(self, alias_dir, alert_source):
        (alias_dir / "alert.tsx").write_text(alert_source, encoding="utf-8")
        split_directory(alias_dir)

        component = (alias_dir / "alert" / "Alert.tsx").read_text(encoding="utf-8")
        assert component.startswith(
            "import type * as React from 'react'\n"
            "import type { VariantProps } from 'class-variance-authority'\n"
            "import { alertVariants } from './variants'\n"
            "\n"
            'import { cn } from "@/lib/utils"\n'
            "\n"
            "const Alert = React.forwardRef<"
        )
        assert "cva(" not in component
        assert "\n\n\n\n" not in component
        assert component.endswith("export { Alert, alertVariants }")

    def test_barrel_order(self, alias_dir, alert_source):
        (alias_dir / "alert.tsx").write_text(alert_source, encoding="utf-8")
        split_directory(alias_dir)

        index = (alias_dir / "alert" / "index.ts").read_text(encoding="utf-8")
        assert index == "export * from './variants'\nexport * from './Alert'\n"

    def test_progress_narrated(self, alias_dir, alert_source, capsys):
        (alias_dir / "alert.tsx").write_text(alert_source, encoding="utf-8")
        split_directory(alias_dir)
        out = capsys.readouterr().out
        assert "Processing file" in out
        assert 'Component "Alert" created at' in out

    def test_spanish_messages(self, alias_dir, alert_source, capsys):
        (alias_dir / "alert.tsx").write_text(alert_source, encoding="utf-8")
        split_directory(alias_dir, lang="es")
        out = capsys.readouterr().out
        assert 'Componente "Alert" creado en' in out


# ─── 無 variants ─────────────────────────────────────────────────────────────

class TestNoVariantUnit:
    def test_only_component_and_barrel(self, alias_dir, skeleton_source):
        (alias_dir / "skeleton.tsx").write_text(skeleton_source, encoding="utf-8")
        summary = split_directory(alias_dir)

        folder = alias_dir / "skeleton"
        assert sorted(p.name for p in folder.iterdir()) == ["Skeleton.tsx", "index.ts"]
        assert (folder / "index.ts").read_text(encoding="utf-8") == "export * from './Skeleton'\n"
        assert summary.created == ["skeleton"]

    def test_react_import_still_rewritten(self, alias_dir, skeleton_source):
        (alias_dir / "skeleton.tsx").write_text(skeleton_source, encoding="utf-8")
        split_directory(alias_dir)
        component = (alias_dir / "skeleton" / "Skeleton.tsx").read_text(encoding="utf-8")
        assert component.startswith("import type * as React from 'react'\n")

    def test_multi_word_name(self, alias_dir, skeleton_source):
        (alias_dir / "scroll-area.tsx").write_text(skeleton_source, encoding="utf-8")
        split_directory(alias_dir)
        assert (alias_dir / "scroll-area" / "ScrollArea.tsx").exists()


# ─── 重複執行 / 衝突 ─────────────────────────────────────────────────────────

class TestCollision:
    def test_second_run_is_idempotent(self, alias_dir, alert_source):
        (alias_dir / "alert.tsx").write_text(alert_source, encoding="utf-8")
        split_directory(alias_dir)
        first = snapshot(alias_dir)

        # shadcn 再次產生相同檔案
        (alias_dir / "alert.tsx").write_text(alert_source, encoding="utf-8")
        summary = split_directory(alias_dir)

        assert summary.skipped == ["alert"]
        assert summary.created == []
        assert snapshot(alias_dir) == first

    def test_existing_unit_kept_and_duplicate_deleted(self, alias_dir, alert_source, capsys):
        folder = alias_dir / "alert"
        folder.mkdir()
        (folder / "Alert.tsx").write_text("// customized", encoding="utf-8")
        flat = alias_dir / "alert.tsx"
        flat.write_text(alert_source, encoding="utf-8")

        assert materialize_file(flat, alias_dir) == SKIPPED
        assert not flat.exists()
        assert (folder / "Alert.tsx").read_text(encoding="utf-8") == "// customized"
        assert 'Component "Alert" already imported' in capsys.readouterr().out


# ─── 目錄列舉 ────────────────────────────────────────────────────────────────

class TestSplitDirectory:
    def test_missing_file_reported(self, alias_dir, capsys):
        result = materialize_file(alias_dir / "gone.tsx", alias_dir)
        assert result == MISSING
        assert "gone.tsx" in capsys.readouterr().out
        assert not (alias_dir / "gone").exists()

    def test_non_component_files_ignored(self, alias_dir):
        (alias_dir / "README.md").write_text("docs", encoding="utf-8")
        summary = split_directory(alias_dir)
        assert summary.ignored == ["README.md"]
        assert (alias_dir / "README.md").exists()

    def test_existing_folders_not_touched(self, alias_dir):
        (alias_dir / "button").mkdir()
        (alias_dir / "button" / "Button.tsx").write_text("x", encoding="utf-8")
        summary = split_directory(alias_dir)
        assert summary.created == [] and summary.skipped == []

    def test_several_files_in_listing_order(self, alias_dir, alert_source, skeleton_source):
        (alias_dir / "skeleton.tsx").write_text(skeleton_source, encoding="utf-8")
        (alias_dir / "alert.tsx").write_text(alert_source, encoding="utf-8")
        summary = split_directory(alias_dir)
        assert summary.created == ["alert", "skeleton"]

    def test_missing_alias_dir(self, tmp_path):
        summary = split_directory(tmp_path / "nope")
        assert summary.created == []

    def test_undecodable_file_does_not_stop_run(self, alias_dir, alert_source):
        (alias_dir / "aaa.tsx").write_bytes(b"const x = 1\n\xff\xfe broken")
        (alias_dir / "alert.tsx").write_text(alert_source, encoding="utf-8")

        summary = split_directory(alias_dir)

        assert summary.created == ["aaa", "alert"]
        assert (alias_dir / "alert" / "variants.ts").exists()
        component = (alias_dir / "aaa" / "Aaa.tsx").read_text(encoding="utf-8")
        assert "\ufffd" in component

    def test_unreadable_entry_reported(self, alias_dir, capsys):
        broken = alias_dir / "broken.tsx"
        broken.mkdir()
        assert materialize_file(broken, alias_dir) == MISSING
        assert "broken.tsx" in capsys.readouterr().out
        assert not (alias_dir / "broken").exists()


# ─── 暫存目錄清理 ────────────────────────────────────────────────────────────

class TestRemoveIfEmpty:
    def test_empty_folder_removed(self, tmp_path):
        folder = tmp_path / "alert"
        folder.mkdir()
        _remove_if_empty(folder)
        assert not folder.exists()

    def test_non_empty_folder_kept(self, tmp_path):
        folder = tmp_path / "alert"
        folder.mkdir()
        (folder / "Alert.tsx").write_text("x", encoding="utf-8")
        _remove_if_empty(folder)
        assert (folder / "Alert.tsx").exists()

    def test_missing_folder_ignored(self, tmp_path):
        _remove_if_empty(tmp_path / "nope")
        assert not (tmp_path / "nope").exists()
