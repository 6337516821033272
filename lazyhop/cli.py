"""Command-line front door for lazyhop.

Parses CLI options, loads the source file and hint settings, then either
prints hints once (``--render`` / ``--list``) or starts the interactive
viewer.
"""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path

from .runtime.config import CONFIG_PATH, load_hint_settings, save_hint_settings
from .runtime.logs import resolve_log_file, setup_logging
from .runtime.screen import compose_rows
from .runtime.session import HopSession
from .syntax.text import read_text


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns), max(1, term.lines - 1)


def render_hints(session: HopSession, width: int) -> str:
    """Visible rows with hints drawn, as printed by ``--render``."""
    if not session.activate_hints():
        raise SystemExit(session.message)
    rows = compose_rows(session.screen_context(width, show_cursor=False))
    return "\n".join(rows) + "\n"


def list_hints(session: HopSession) -> str:
    """One ``label  line:col  type  text`` row per hint, as printed by ``--list``."""
    if not session.activate_hints():
        raise SystemExit(session.message)
    controller = session.controller
    tree = session.tree
    out: list[str] = []
    for index, node in controller.registry.items():
        line, column = session.view.position_of(tree.start(node))
        text = tree.text(node).replace("\n", " ")
        if len(text) > 60:
            text = text[:57] + "..."
        label = controller.labels[index]
        out.append(f"{label}  {line + 1}:{column + 1}  {tree.node_type(node)}  {text}\n")
    return "".join(out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Jump to syntax-tree nodes by typing on-screen hints."
    )
    parser.add_argument("path", nargs="?", default=None, help="Source file to view.")
    parser.add_argument("--style", default="monokai", help="Pygments style for highlighting and hint colors.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--line", type=_positive_int, default=1, help="First visible line (1-based).")
    parser.add_argument(
        "--rows",
        type=_positive_int,
        default=None,
        help="Visible rows for --render/--list (default: terminal height).",
    )
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument("--render", action="store_true", help="Print the viewport with hints and exit.")
    parser.add_argument("--list", action="store_true", help="Print one line per hint target and exit.")
    parser.add_argument(
        "--write-config",
        action="store_true",
        help=f"Write effective hint settings to {CONFIG_PATH} and exit.",
    )
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the requested mode."""
    args = build_parser().parse_args(argv)
    setup_logging(resolve_log_file(args.log_file))
    settings = load_hint_settings()

    if args.write_config:
        if not save_hint_settings(settings):
            raise SystemExit(f"Could not write config: {CONFIG_PATH}")
        sys.stdout.write(f"{CONFIG_PATH}\n")
        return

    if args.path is None:
        raise SystemExit("A source file path is required.")
    path = Path(args.path)
    if not path.is_file():
        raise SystemExit(f"File not found: {path}")

    source = read_text(path)
    one_shot = args.render or args.list
    no_color = args.no_color or (one_shot and not sys.stdout.isatty())
    default_cols, default_rows = _default_render_size()
    session = HopSession(
        path,
        source,
        settings,
        style=args.style,
        no_color=no_color,
        height=args.rows or default_rows,
        top_line=args.line - 1,
    )

    if args.list:
        sys.stdout.write(list_hints(session))
        return
    if args.render:
        sys.stdout.write(render_hints(session, args.max_cols or default_cols))
        return

    if not sys.stdout.isatty() or not sys.stdin.isatty():
        raise SystemExit("Interactive mode needs a terminal; use --render or --list.")

    from .runtime.loop import run_viewer

    run_viewer(session, sys.stdin.fileno(), sys.stdout.fileno())


if __name__ == "__main__":
    main()
