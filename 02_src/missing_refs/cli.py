"""CLI entrypoint for running a missing references search over a project dump."""

import argparse
import logging
from typing import List

from .commands import COMMANDS
from .config import configure_logging, load_settings
from .console import ConsoleProgress, LoggingResults
from .project import JsonProjectProvider, ProjectLoadError, SceneNotFoundError

logger = logging.getLogger(__name__)

EXIT_FINISHED = 0
EXIT_CANCELLED = 1
EXIT_PROJECT_ERROR = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find missing object references and missing components in a project dump."
    )
    try:
        settings = load_settings()
    except ValueError as error:
        parser.error(str(error))
    parser.add_argument(
        "scope",
        choices=sorted(COMMANDS),
        help="Where to search: current scene, enabled build scenes, all scenes, assets, or everywhere.",
    )
    parser.add_argument(
        "--project",
        default=settings.project_path,
        required=not settings.project_path,
        help="Path to project.json (or its directory). Defaults to MISSING_REFS_PROJECT.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for console output.",
    )
    parser.add_argument(
        "--platform",
        default=settings.platform,
        help="Platform whose path rules decide which assets belong to the project.",
    )
    parser.add_argument(
        "--keep-console",
        dest="clear_console",
        action="store_false",
        default=settings.clear_console,
        help="Do not reset earlier results before searching.",
    )
    parser.add_argument(
        "--no-progress",
        dest="show_progress",
        action="store_false",
        default=settings.show_progress,
        help="Hide the progress bar.",
    )
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    return args


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    results = LoggingResults()
    try:
        provider = JsonProjectProvider.from_path(args.project)
        with ConsoleProgress(enabled=args.show_progress) as progress:
            report = COMMANDS[args.scope](
                provider,
                progress,
                results,
                clear_console=args.clear_console,
                platform=args.platform,
            )
    except (ProjectLoadError, SceneNotFoundError) as error:
        logger.error("Project could not be loaded: %s", error)
        return EXIT_PROJECT_ERROR

    print(
        "Counts:",
        f"findings={len(report.findings)}",
        f"errors={results.error_count}",
        f"scenes={len(report.scenes_scanned)}",
        f"assets={report.assets_scanned}",
        f"components={report.components_visited}",
    )
    return EXIT_CANCELLED if report.cancelled else EXIT_FINISHED
