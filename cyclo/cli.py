"""
Command-line interface for cyclo.

Analyzes a C/C++ source tree and writes the treemap script consumed by the
visualization page, plus an optional plain-text debug listing.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from cyclo import __version__
from cyclo.core.config import CONFIG_FILE_NAMES, Config, default_config_text, find_config
from cyclo.core.engine import AnalysisEngine
from cyclo.core.errors import ConfigError, RecordSetMismatch
from cyclo.core.records import AnalysisReport
from cyclo.reporting import format_debug, format_treemap_script

logger = logging.getLogger("cyclo")

stderr = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cyclo",
        description="Visualize the cyclomatic complexity of C/C++ source trees.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cyclo analyze ./src                     # Write cyclo.js for ./src
  cyclo analyze -p ./src -d               # Also write debug.txt
  cyclo analyze ./src -o web/scripts/cyclo.js
  cyclo analyze ./src -j 8                # Analyze files on 8 threads
  cyclo init                              # Create .cyclo.yaml
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a source directory")
    analyze_parser.add_argument(
        "target",
        nargs="?",
        help="Directory to analyze (default: current directory)",
    )
    analyze_parser.add_argument(
        "-p", "--path",
        help="Directory to analyze (same as the positional argument)",
    )
    analyze_parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
    )
    analyze_parser.add_argument(
        "-o", "--output",
        help="Treemap script to write (default: cyclo.js)",
    )
    analyze_parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Also write a plain-text listing of every record",
    )
    analyze_parser.add_argument(
        "--debug-output",
        help="Debug listing to write (default: debug.txt)",
    )
    analyze_parser.add_argument(
        "-j", "--jobs",
        type=int,
        help="Number of files analyzed in parallel (default: 1)",
    )
    analyze_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every analyzed file",
    )
    analyze_parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and errors, and skip the summary",
    )

    init_parser = subparsers.add_parser("init", help="Create a configuration file")
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to create the config file in (default: current directory)",
    )
    init_parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite existing config file",
    )

    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    handler = RichHandler(console=stderr, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def load_config(args: argparse.Namespace, root: str) -> Config:
    """Load the config file and apply command-line overrides."""
    config_path = args.config or find_config(root)
    if config_path:
        logger.debug("Using config file %s", config_path)
    config = Config.load(config_path)

    overrides = {}
    if args.jobs is not None:
        overrides.setdefault("analysis", {})["jobs"] = args.jobs
    if args.output:
        overrides.setdefault("output", {})["path"] = args.output
    if args.debug:
        overrides.setdefault("debug", {})["enabled"] = True
    if args.debug_output:
        overrides.setdefault("debug", {})["path"] = args.debug_output
    return config.with_overrides(overrides)


def write_text(path: str, content: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")


def print_summary(report: AnalysisReport, output_path: str) -> None:
    table = Table(title="cyclo", show_header=False)
    table.add_column("metric", style="bold")
    table.add_column("value", justify="right")
    table.add_row("Files analyzed", str(report.files_analyzed))
    table.add_row("Directories", str(report.directories))
    table.add_row("Files skipped", str(len(report.skipped)))
    table.add_row("Lines of code", str(report.total_nloc))
    table.add_row("Mean complexity", f"{report.mean_complexity:.2f}")
    table.add_row("Output", output_path)
    stderr.print(table)


def cmd_analyze(args: argparse.Namespace) -> int:
    """Execute the analyze command."""
    configure_logging(args.verbose, args.quiet)
    root = args.path or args.target or "."

    try:
        config = load_config(args, root)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1

    engine = AnalysisEngine(config)
    try:
        report = engine.analyze(root)
    except NotADirectoryError as exc:
        logger.error("%s", exc)
        return 1

    output = config.output()
    output_path = output.get("path", "cyclo.js")
    try:
        script = format_treemap_script(
            report,
            variable=output.get("variable", "jsondata"),
            colorscale=output.get("colorscale", "Greens"),
        )
    except RecordSetMismatch as exc:
        logger.critical("Corrupted dataset: %s", exc)
        return 2

    write_text(output_path, script)
    logger.info("Wrote %s", output_path)

    debug = config.debug()
    if debug.get("enabled"):
        debug_path = debug.get("path", "debug.txt")
        write_text(debug_path, format_debug(report))
        logger.info("Wrote %s", debug_path)

    if not args.quiet:
        print_summary(report, output_path)
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Execute the init command."""
    configure_logging()
    config_path = Path(args.directory) / CONFIG_FILE_NAMES[0]

    if config_path.exists() and not args.force:
        logger.error("Config file already exists: %s (use --force to overwrite)", config_path)
        return 1

    write_text(str(config_path), default_config_text())
    logger.info("Created config file: %s", config_path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "analyze":
        return cmd_analyze(args)
    if args.command == "init":
        return cmd_init(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
