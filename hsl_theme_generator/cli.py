import argparse
import logging
import sys

from .config import load_config_from_json
from .export import export_theme
from .vscode import build_theme

TRACE_LOGGER = "hsl_theme_generator.trace"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser():
    parser = _ArgumentParser(
        prog="hsl-theme",
        description="Generate a VS Code color theme from an HSL palette JSON file",
    )
    parser.add_argument("input_path", help="Path to the HSL palette JSON file")
    parser.add_argument("output_path", help="Path of the theme JSON to write")
    # Paths after the first two are ignored
    parser.add_argument("extra_paths", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject hue outside [0, 360) and saturation/lightness outside [0, 100]",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Trace every HSL to hex conversion on stderr",
    )
    return parser


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = None
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        logger = logging.getLogger(TRACE_LOGGER)

    print(f"Loading config: {args.input_path}")
    config = load_config_from_json(args.input_path, strict=args.strict)

    # Build fully before touching the output path
    theme = build_theme(config, logger=logger)
    export_theme(theme, args.output_path)

    print("Exported:")
    print(f"  - {args.output_path} ({len(theme['colors'])} colors, "
          f"{len(theme['tokenColors'])} token rules)")


if __name__ == "__main__":
    main()
