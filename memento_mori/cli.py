import argparse
from pathlib import Path

from memento_mori.cairo_surface import CairoSurface
from memento_mori.calendar_math import parse_date
from memento_mori.clock import SimulationClock
from memento_mori.config import DEFAULT_CONFIG_FILENAME, load_config
from memento_mori.errors import MementoError
from memento_mori.layouts import LAYOUTS, get_layout
from memento_mori.logger import setup_logging
from memento_mori.render import RenderSnapshot, format_summary, render
from memento_mori.surface import SUPPORTED_SUFFIXES

DEFAULT_FILENAME: str = "memento_mori.png"


def resolve_filename(filename: str) -> str:
    file_path = Path(filename)
    if not file_path.suffix:
        return f"{filename}.png"
    if file_path.suffix.lower() not in SUPPORTED_SUFFIXES:
        print(
            f"Warning: Replacing '{file_path.suffix}' extension with '.png'"
            " (only PNG and PDF output are supported)"
        )
        return str(file_path.with_suffix(".png"))
    return filename


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a memento mori life calendar: one dot per week of an expected"
        " lifespan, or the day's quote on a configured special day"
    )

    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_FILENAME,
        help=f"JSON configuration file (default is '{DEFAULT_CONFIG_FILENAME}', built-in"
        " defaults are used when it is missing)",
    )

    parser.add_argument(
        "-d",
        "--date",
        type=parse_date,
        dest="date",
        help="Simulated current date, in either YMD or DMY format (defaults to today)",
        default=None,
    )

    parser.add_argument(
        "-l",
        "--layout",
        type=str,
        dest="layout",
        choices=list(LAYOUTS),
        help="Layout to draw, overriding the config file's 'layout'",
        default=None,
    )

    parser.add_argument(
        "-f",
        "--filename",
        type=str,
        dest="filename",
        help=f"Output filename, .png or .pdf (default is '{DEFAULT_FILENAME}')",
        default=DEFAULT_FILENAME,
    )

    parser.add_argument(
        "--list-layouts",
        action="store_true",
        dest="list_layouts",
        help="List the available layouts and exit",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, dest="log_file", default=None)

    return parser


def main(argv: list[str] | None = None) -> int:
    args: argparse.Namespace = build_parser().parse_args(argv)

    if args.list_layouts:
        for name, layout in LAYOUTS.items():
            print(f"{name:<12} {layout.description}")
        return 0

    setup_logging("DEBUG" if args.verbose else "INFO", args.log_file)

    clock = SimulationClock()
    if args.date is not None:
        clock.set_date(args.date)

    filename = resolve_filename(args.filename)

    try:
        config = load_config(args.config)
        layout = get_layout(args.layout or config.layout)
        surface = CairoSurface(filename)
        result = render(surface, RenderSnapshot(config=config, current=clock.current, layout=layout))
        surface.finish()
    except MementoError as e:
        print(f"Error: {e}")
        return 1

    print(format_summary(result))
    print(f"Created {filename}")
    return 0
