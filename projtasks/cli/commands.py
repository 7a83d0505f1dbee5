from __future__ import annotations

import argparse
import logging
import shlex
import sys
from pathlib import Path

from projtasks.config import (
    ConfigError,
    ProjectConfig,
    Settings,
    build_project,
    find_settings,
    load_settings,
)
from projtasks.executor import CollaboratorFailure, Dispatcher
from projtasks.logging_setup import setup_logging

from .args import build_parser

logger = logging.getLogger(__name__)

EXIT_USAGE = 2
EXIT_INTERRUPTED = 130
EXIT_SIGNAL_BASE = 128


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = _load_settings(args)

        match args.command:
            case "run":
                return cmd_run(args.task, settings)
            case "tags" | "lines":
                return cmd_run(args.command, settings)
            case "list":
                return cmd_list(settings)
            case "show":
                return cmd_show(args.task, settings)
            case _:
                return EXIT_USAGE

    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_USAGE

    except CollaboratorFailure as exc:
        print(str(exc), file=sys.stderr)
        return exc.returncode

    except KeyboardInterrupt:
        return EXIT_INTERRUPTED


def main() -> None:
    sys.exit(run_cli())


def cmd_run(task_id: str, settings: Settings) -> int:
    dispatcher = Dispatcher(_project(settings))
    result = dispatcher.dispatch(task_id)
    if result.returncode < 0:
        # Killed by a signal: report it the way a shell does.
        signum = -result.returncode
        logger.info("%s was killed by signal %d", task_id, signum)
        return EXIT_SIGNAL_BASE + signum
    if not result.ok:
        logger.info("%s failed with exit code %d", task_id, result.returncode)
    return result.returncode


def cmd_list(settings: Settings) -> int:
    for task in _project(settings):
        print(task.id)
    return 0


def cmd_show(task_id: str, settings: Settings) -> int:
    task = _project(settings).get_task(task_id)
    print(shlex.join(task.argv()))
    return 0


def _project(settings: Settings) -> ProjectConfig:
    return build_project(settings.tools)


def _load_settings(args: argparse.Namespace) -> Settings:
    path: Path | None = Path(args.config) if args.config else find_settings(Path.cwd())
    settings = load_settings(path) if path is not None else Settings()

    match args.verbose:
        case 0:
            level = settings.log_level
        case 1:
            level = "INFO"
        case _:
            level = "DEBUG"
    setup_logging(level)

    if path is not None:
        logger.debug("Using settings from %s: %s", path, settings)
    return settings
