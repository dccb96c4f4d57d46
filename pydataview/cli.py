"""Command-line interface for pydataview configuration and previews."""

from __future__ import annotations

import argparse
import json
import os
import sys

from pathlib import Path
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from .config import DataViewSettings


def main(argv: list[str] | None = None) -> int:
    """Run the main CLI entry point.

    Parameters
    ----------
    argv : list[str], optional
        Arguments to parse instead of ``sys.argv``.

    Returns
    -------
    int
        Exit code.
    """
    parser = argparse.ArgumentParser(
        prog="pydataview",
        description="pydataview configuration and rendering tools",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Show or export configuration",
    )
    config_group = config_parser.add_mutually_exclusive_group()
    config_group.add_argument(
        "--show",
        action="store_true",
        help="Show current configuration",
    )
    config_group.add_argument(
        "--toml",
        action="store_true",
        help="Export configuration as TOML",
    )
    config_group.add_argument(
        "--env",
        action="store_true",
        help="Export configuration as environment variables",
    )
    config_group.add_argument(
        "--sources",
        action="store_true",
        help="Show configuration file sources",
    )
    config_parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file path (default: stdout)",
    )

    # init command
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a pydataview.toml configuration file",
    )
    init_parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Overwrite existing configuration file",
    )
    init_parser.add_argument(
        "--path",
        "-p",
        type=str,
        default="pydataview.toml",
        help="Path for configuration file (default: pydataview.toml)",
    )

    # render command
    render_parser = subparsers.add_parser(
        "render",
        help="Render a JSON array of records as an HTML grid",
    )
    render_parser.add_argument(
        "input",
        type=str,
        help="JSON file holding a list of objects, or - for stdin",
    )
    render_parser.add_argument(
        "--columns",
        "-c",
        type=str,
        default=None,
        help="Comma-separated properties to show (default: keys of the first record)",
    )
    render_parser.add_argument(
        "--sort",
        "-s",
        type=str,
        default=None,
        help="Order string, e.g. 'name,-age'",
    )
    render_parser.add_argument(
        "--serial",
        action="store_true",
        help="Prepend a row number column",
    )
    render_parser.add_argument(
        "--base-url",
        type=str,
        default="",
        help="Base URL of sort links",
    )

    args = parser.parse_args(argv)

    if args.command == "config":
        return handle_config(args)
    if args.command == "init":
        return handle_init(args)
    if args.command == "render":
        return handle_render(args)
    parser.print_help()
    return 0


def handle_config(args: argparse.Namespace) -> int:
    """Handle the config command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments.

    Returns
    -------
    int
        Exit code.
    """
    from .config import DataViewSettings

    settings = DataViewSettings()

    if args.sources:
        return show_config_sources()

    if args.toml:
        output = settings.to_toml()
    elif args.env:
        output = settings.to_env()
    else:
        output = format_config_show(settings)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"Configuration written to {args.output}")
    else:
        print(output)

    return 0


def handle_init(args: argparse.Namespace) -> int:
    """Handle the init command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments.

    Returns
    -------
    int
        Exit code.
    """
    from .config import DataViewSettings

    path = Path(args.path)

    if path.exists() and not args.force:
        print(f"Error: {path} already exists. Use --force to overwrite.", file=sys.stderr)
        return 1

    settings = DataViewSettings()
    toml_content = settings.to_toml()

    header = """# pydataview configuration file
#
# Environment variables can override any setting:
#   PYDATAVIEW_URL__SORT_PARAMETER_NAME="order"
#   PYDATAVIEW_URL__PAGE_PARAMETER_TYPE="path"
#   PYDATAVIEW_SORTABLE__MULTI_SORT=true
#   PYDATAVIEW_GRID__EMPTY_TEXT="Nothing here"
#   PYDATAVIEW_LOG__LEVEL="DEBUG"
#
# Use nested keys with __ (double underscore) delimiter.

"""
    path.write_text(header + toml_content, encoding="utf-8")
    print(f"Created {path}")

    return 0


def handle_render(args: argparse.Namespace) -> int:
    """Handle the render command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments.

    Returns
    -------
    int
        Exit code.
    """
    from .column import Column, DataColumn, SerialColumn
    from .grid import GridView
    from .reader import ArrayDataReader
    from .sort import Sort
    from .url import QueryUrlCreator

    try:
        if args.input == "-":
            records = json.load(sys.stdin)
        else:
            records = json.loads(Path(args.input).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    if not isinstance(records, list):
        print("Error: input must be a JSON array of objects", file=sys.stderr)
        return 1

    if args.columns:
        properties = [name.strip() for name in args.columns.split(",") if name.strip()]
    elif records and isinstance(records[0], dict):
        properties = list(records[0])
    else:
        properties = []

    columns: list[Column] = [DataColumn(property=name) for name in properties]
    if args.serial:
        columns.insert(0, SerialColumn())

    grid = GridView(
        data_reader=ArrayDataReader(records, sort=Sort.only(properties)),
        columns=columns,
        sort_value=args.sort,
        url_creator=QueryUrlCreator(args.base_url),
    )
    print(grid.render())
    return 0


def show_config_sources() -> int:
    """Show configuration file sources and their status.

    Returns
    -------
    int
        Exit code.
    """
    env_file = os.environ.get("PYDATAVIEW_CONFIG_FILE")
    sources = [
        ("Built-in defaults", "Always loaded", True),
        ("pyproject.toml [tool.pydataview]", "pyproject.toml", None),
        ("./pydataview.toml", "pydataview.toml", None),
        ("PYDATAVIEW_CONFIG_FILE", env_file or "", None if env_file else False),
        ("Environment variables", "PYDATAVIEW_* vars", None),
    ]

    print("Configuration Sources (in order of precedence):\n")
    print(f"{'Source':<40} {'Status':<15} {'Path'}")
    print("-" * 80)

    for name, path_str, forced_status in sources:
        if forced_status is True:
            status = "✓ Active"
            path_display = ""
        elif forced_status is False:
            status = "✗ Not set"
            path_display = path_str
        elif name == "Environment variables":
            env_vars = [k for k in os.environ if k.startswith("PYDATAVIEW_") and k != "PYDATAVIEW_CONFIG_FILE"]
            if env_vars:
                status = f"✓ {len(env_vars)} vars"
                path_display = ", ".join(env_vars[:3])
                if len(env_vars) > 3:
                    path_display += "..."
            else:
                status = "✗ No vars"
                path_display = ""
        else:
            path = Path(path_str).expanduser()
            status = "✓ Found" if path.exists() else "✗ Not found"
            path_display = str(path)

        print(f"{name:<40} {status:<15} {path_display}")

    print("\nNote: Later sources override earlier ones.")
    return 0


def format_config_show(settings: DataViewSettings) -> str:
    """Format configuration for display.

    Parameters
    ----------
    settings : DataViewSettings
        The settings object to format.

    Returns
    -------
    str
        Formatted configuration string.
    """
    return settings.show()


if __name__ == "__main__":
    sys.exit(main())
