#!/usr/bin/env python3
"""
Stacked Chart Editor CLI.

Usage:
    stackviz serve [options]
    stackviz export [options]
    stackviz write-config --out <path>
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional


def _log_level(args) -> str:
    return "DEBUG" if getattr(args, "verbose", False) else "INFO"


def _load_config(path: Optional[str]):
    from .core.config import EditorConfig, get_default_config
    from .core.logging import get_logger

    if path:
        get_logger().info(f"Loading config from {path}")
        return EditorConfig.from_file(path)
    return get_default_config()


def cmd_serve(args):
    """Start the editor web server."""
    from .core.logging import setup_logging
    from .app import main as run_app

    setup_logging(_log_level(args))
    config = _load_config(args.config)

    if args.host is not None:
        config.server.host = args.host
    if args.port is not None:
        config.server.port = args.port
    if args.debug:
        config.server.debug = True

    run_app(config)
    return 0


def cmd_export(args):
    """Write chart and legend PNGs (and optionally the data table) for the seed dataset."""
    from .core.logging import setup_logging, get_logger
    from .dataset import default_dataset
    from .figures.stacked import build_figure, chart_spec
    from .export import export_chart, export_legend
    from .export.result import slugify_title
    from .projector import to_frame

    setup_logging(_log_level(args))
    logger = get_logger()
    config = _load_config(args.config)

    title = args.title if args.title is not None else config.chart.default_title
    y_label = args.y_label if args.y_label is not None else config.chart.default_y_label
    kind = args.kind or config.chart.default_kind

    dataset = default_dataset()
    figure = build_figure(chart_spec(dataset, kind, title, y_label), config.chart)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    exit_code = 0
    for result in (
        export_chart(figure.to_dict(), title, config),
        export_legend(dataset, title, config),
    ):
        if not result.ok:
            print(f"\033[91mERROR: {result.status}\033[0m", file=sys.stderr)
            exit_code = 1
            continue
        path = outdir / result.filename
        try:
            path.write_bytes(result.content)
        except OSError as e:
            print(f"\033[91mERROR: could not write {path}: {e}\033[0m", file=sys.stderr)
            exit_code = 1
            continue
        logger.info(f"Wrote {path}")
        print(path)

    if args.csv:
        path = outdir / f"{slugify_title(title)}_data.csv"
        try:
            to_frame(dataset).to_csv(path)
        except OSError as e:
            print(f"\033[91mERROR: could not write {path}: {e}\033[0m", file=sys.stderr)
            return 1
        logger.info(f"Wrote {path}")
        print(path)

    return exit_code


def cmd_write_config(args):
    """Write the default configuration as JSON."""
    from .core.config import get_default_config

    get_default_config().save(args.out)
    print(args.out)
    return 0


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Stacked Chart Editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  stackviz serve --port 8050
  stackviz export --kind area --title "Isolates 2024" --outdir out/
  stackviz write-config --out editor.json
"""
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    serve_parser = subparsers.add_parser("serve", help="Run the editor web server")
    serve_parser.add_argument("--config", type=str, help="Path to config JSON file")
    serve_parser.add_argument("--host", type=str, help="Bind address")
    serve_parser.add_argument("--port", type=int, help="Port")
    serve_parser.add_argument("--debug", action="store_true", help="Enable Dash debug mode")

    export_parser = subparsers.add_parser("export", help="Export chart and legend PNGs of the seed dataset")
    export_parser.add_argument("--config", type=str, help="Path to config JSON file")
    export_parser.add_argument("--title", type=str, help="Chart title (also names the files)")
    export_parser.add_argument("--y-label", type=str, help="Y-axis label")
    export_parser.add_argument("--kind", type=str, choices=["bar", "area"], help="Chart type")
    export_parser.add_argument("--outdir", type=str, default=".", help="Output directory")
    export_parser.add_argument("--csv", action="store_true", help="Also write the data table as <title>_data.csv")

    config_parser = subparsers.add_parser("write-config", help="Write the default config JSON")
    config_parser.add_argument("--out", type=str, required=True, help="Destination file")

    args = parser.parse_args(argv)

    if args.command == "serve":
        return cmd_serve(args)
    elif args.command == "export":
        return cmd_export(args)
    elif args.command == "write-config":
        return cmd_write_config(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
