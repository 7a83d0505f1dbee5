from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="projtasks")

    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings file (default: projtasks.yml/.yaml/.toml/.json if present)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log what is being run (-vv for debug output)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # run
    run = subparsers.add_parser("run", help="Run a task")
    run.add_argument("task", help="Task id")

    # shortcuts
    subparsers.add_parser("tags", help="Build the symbol index (same as 'run tags')")
    subparsers.add_parser("lines", help="Summarize line counts (same as 'run lines')")

    # list
    subparsers.add_parser("list", help="List tasks")

    # show
    show = subparsers.add_parser("show", help="Print a task's command line")
    show.add_argument("task", help="Task id")

    return parser
