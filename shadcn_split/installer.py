"""
Installer：逐一呼叫 `npx shadcn@latest add <name>`，再拆檔。

shadcn CLI 失敗時整個流程中止（GeneratorError 往外拋）。
"""

import subprocess
from pathlib import Path
from typing import Callable, Iterable, List

from .generator import SplitSummary, split_directory
from .messages import DEFAULT_LANG, SEPARATOR, say
from .naming_engine import is_known_component


class GeneratorError(RuntimeError):
    """shadcn CLI 執行失敗."""


def build_add_command(name: str) -> List[str]:
    return ["npx", "shadcn@latest", "add", name]


def run_add(name: str, runner: Callable = subprocess.run, lang: str = DEFAULT_LANG) -> None:
    command = build_add_command(name)
    say("running", lang, command=" ".join(command))
    try:
        completed = runner(command, check=False)
    except OSError as e:
        raise GeneratorError(str(e)) from e
    if completed.returncode != 0:
        raise GeneratorError(
            f"Command failed: {' '.join(command)} (exit {completed.returncode})"
        )


def install_components(
    names: Iterable[str],
    alias_dir: Path,
    lang: str = DEFAULT_LANG,
    runner: Callable = subprocess.run,
) -> SplitSummary:
    """依序安裝並拆檔，回傳合併後的 summary."""
    total = SplitSummary()
    for name in names:
        print(SEPARATOR)
        if not is_known_component(name):
            say("unknown_component", lang, name=name)
        run_add(name, runner=runner, lang=lang)

        summary = split_directory(alias_dir, lang)
        total.created.extend(summary.created)
        total.skipped.extend(summary.skipped)
        total.missing.extend(summary.missing)
        total.ignored.extend(summary.ignored)

        print(SEPARATOR)
        say("all_done", lang)
        say("enjoy", lang)
        print(SEPARATOR)
    return total
