#!/usr/bin/env python3
"""
shadcn-split CLI：shadcn/ui 元件安裝後自動拆檔

  python -m shadcn_split.cli add button alert      # 安裝並拆檔
  python -m shadcn_split.cli split                 # 只拆現有的平面檔案
  python -m shadcn_split.cli list [--remote]       # 列出可安裝元件
  python -m shadcn_split.cli watch                 # 監看 alias 目錄
"""

import argparse
import sys
import time
from typing import Optional

import requests
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from . import __version__
from .config import DEFAULT_CONFIG_PATH, load_config, resolve_alias_dir
from .generator import split_directory
from .installer import GeneratorError, install_components
from .messages import DEFAULT_LANG, LANGUAGES, banner, say
from .naming_engine import COMPONENT_EXT, COMPONENT_LIST, UNAVAILABLE_COMPONENTS
from .registry import RegistryClient


class ChangeHandler(FileSystemEventHandler):
    """alias 目錄出現新的 .tsx 時標記為 pending，帶 debounce。"""

    def __init__(self, debounce: float = 1.0, lang: str = DEFAULT_LANG):
        self.debounce_seconds = debounce
        self.lang = lang
        self.last_event = 0.0
        self.pending = False

    def _touch(self, path: str) -> None:
        if not path.endswith(COMPONENT_EXT):
            return
        say("new_file", self.lang, path=path)
        self.last_event = time.time()
        self.pending = True

    def on_created(self, event):
        if event.is_directory:
            return
        self._touch(event.src_path)

    def on_moved(self, event):
        if event.is_directory:
            return
        self._touch(event.dest_path)

    def ready(self, now: Optional[float] = None) -> bool:
        """pending 且距最後一次事件已超過 debounce 視窗。"""
        if not self.pending:
            return False
        now = time.time() if now is None else now
        return now - self.last_event >= self.debounce_seconds

    def clear(self) -> None:
        self.pending = False


def _print_summary(summary, lang: str) -> None:
    say(
        "split_done",
        lang,
        created=len(summary.created),
        skipped=len(summary.skipped),
        missing=len(summary.missing),
    )


def cmd_add(args, config: dict) -> int:
    """Add: 執行 shadcn CLI 後拆檔."""
    lang = args.lang
    names = list(COMPONENT_LIST) if args.all else list(args.names)
    if not names:
        say("no_components", lang)
        return 2

    banner(lang)
    alias_dir = resolve_alias_dir(config, args.alias)
    try:
        summary = install_components(names, alias_dir, lang=lang)
    except GeneratorError as e:
        say("command_failed", lang, error=e)
        return 1
    _print_summary(summary, lang)
    return 0


def cmd_split(args, config: dict) -> int:
    """Split: 只處理 alias 目錄中既有的平面檔案."""
    alias_dir = resolve_alias_dir(config, args.alias)
    summary = split_directory(alias_dir, args.lang)
    _print_summary(summary, args.lang)
    return 0


def cmd_list(args, config: dict) -> int:
    names = COMPONENT_LIST
    if args.remote:
        try:
            names = RegistryClient().list_ui_components()
        except (requests.RequestException, ValueError) as e:
            say("registry_failed", args.lang, error=e)
    for name in names:
        marker = "  (*)" if name in UNAVAILABLE_COMPONENTS else ""
        print(f"  {name}{marker}")
    print(f"\nTotal: {len(names)}")
    return 0


def cmd_watch(args, config: dict) -> int:
    """Watch: 監看 alias 目錄，有新檔案就拆檔."""
    lang = args.lang
    alias_dir = resolve_alias_dir(config, args.alias)
    alias_dir.mkdir(parents=True, exist_ok=True)
    say("watching", lang, path=alias_dir)
    say("stop_hint", lang)

    handler = ChangeHandler(debounce=args.debounce, lang=lang)
    observer = Observer()
    # 只看最上層，拆出來的子目錄不需要再觸發
    observer.schedule(handler, path=str(alias_dir), recursive=False)
    observer.start()

    try:
        while True:
            time.sleep(0.5)
            if handler.ready():
                handler.clear()
                _print_summary(split_directory(alias_dir, lang), lang)
    except KeyboardInterrupt:
        say("stopping", lang)
    finally:
        observer.stop()
        observer.join()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="shadcn-split: split shadcn/ui components into module folders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Config path")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    add_p = sub.add_parser("add", help="Install components and split them",
        epilog="Examples:\n  shadcn-split add button\n  shadcn-split add alert dropdown-menu --lang es\n  shadcn-split add --all",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    add_p.add_argument("names", nargs="*", help="Component names (e.g. button)")
    add_p.add_argument("--all", action="store_true", help="Install every component in the built-in list")
    add_p.add_argument("--alias", help="Override aliases.ui from components.json")
    add_p.add_argument("--lang", choices=LANGUAGES, default=DEFAULT_LANG, help="Message language")

    split_p = sub.add_parser("split", help="Split flat component files already in the alias dir",
        epilog="Examples:\n  shadcn-split split\n  shadcn-split split --alias src/components/ui",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    split_p.add_argument("--alias", help="Override aliases.ui from components.json")
    split_p.add_argument("--lang", choices=LANGUAGES, default=DEFAULT_LANG, help="Message language")

    list_p = sub.add_parser("list", help="List installable components")
    list_p.add_argument("--remote", action="store_true", help="Fetch the list from the shadcn registry")
    list_p.add_argument("--lang", choices=LANGUAGES, default=DEFAULT_LANG, help="Message language")

    watch_p = sub.add_parser("watch", help="Split new components as they appear",
        epilog="Examples:\n  shadcn-split watch\n  shadcn-split watch --debounce 2",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    watch_p.add_argument("--alias", help="Override aliases.ui from components.json")
    watch_p.add_argument("--debounce", type=float, default=1.0, help="Seconds to wait after the last new file")
    watch_p.add_argument("--lang", choices=LANGUAGES, default=DEFAULT_LANG, help="Message language")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)

    if args.command == "add":
        return cmd_add(args, config)
    elif args.command == "split":
        return cmd_split(args, config)
    elif args.command == "list":
        return cmd_list(args, config)
    elif args.command == "watch":
        return cmd_watch(args, config)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
