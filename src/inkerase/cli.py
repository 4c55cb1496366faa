"""
Command-line interface for inkerase.

Provides commands for erasing a JSON path document and writing the default
configuration.
"""

import argparse
import sys

from inkerase.config import load_config, save_default_config
from inkerase.tracer import configure_tracer, get_tracer


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="inkerase",
        description="inkerase: erase portions of vector strokes along an eraser trail",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Erase command
    erase_parser = subparsers.add_parser("erase", help="Erase paths along an eraser trail")
    erase_parser.add_argument(
        "--paths", "-p",
        required=True,
        help="JSON file with the list of paths",
    )
    erase_parser.add_argument(
        "--trail", "-t",
        required=True,
        help="JSON file with the eraser trail points",
    )
    erase_parser.add_argument(
        "--radius", "-r",
        type=float,
        default=None,
        help="Eraser radius (defaults to the configured radius)",
    )
    erase_parser.add_argument(
        "--out", "-o",
        required=True,
        help="Output JSON file for the erased paths",
    )
    erase_parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    erase_parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    erase_parser.add_argument(
        "--trace-level",
        default="INFO",
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level",
    )
    erase_parser.add_argument(
        "--trace-file",
        default=None,
        help="Path to write trace logs",
    )
    erase_parser.add_argument(
        "--trace-json",
        action="store_true",
        help="Enable JSON trace output",
    )

    # Init config command
    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="inkerase_config.yaml",
        help="Output path for config file",
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "erase":
        return handle_erase(args)
    elif args.command == "init-config":
        return handle_init_config(args)

    return 0


def handle_erase(args):
    """Handle the erase command."""
    config = load_config(args.config)

    configure_tracer(
        enabled=args.trace or config.tracing.enabled,
        level=args.trace_level if args.trace else config.tracing.level,
        file_path=args.trace_file or config.tracing.file_path,
        json_output=args.trace_json or config.tracing.json_output,
    )

    tracer = get_tracer()

    try:
        from inkerase.io.json_io import load_paths, load_trail, save_paths
        from inkerase.pipeline import erase

        with tracer.span("cli_erase", module="cli"):
            paths = load_paths(args.paths)
            trail = load_trail(args.trail)
            result = erase(paths, trail, args.radius, config=config)
            save_paths(result, args.out)

        print(f"\nErase completed successfully.")
        print(f"  Input paths: {len(paths)}")
        print(f"  Trail points: {len(trail)}")
        print(f"  Output paths: {len(result)}")
        print(f"\nOutput saved to: {args.out}")

        return 0

    except Exception as e:
        tracer.event(f"Erase failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1

    finally:
        tracer.config.close()


def handle_init_config(args):
    """Handle the init-config command."""
    save_default_config(args.out)
    print(f"Default configuration saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
