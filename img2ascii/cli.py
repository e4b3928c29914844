#!/usr/bin/env python3
"""
Image to ASCII Converter - Command Line Interface
================================================
"""

import argparse
import logging
import sys
from typing import List, Optional

from img2ascii.banner import Banner, banner_png, render_banner
from img2ascii.constants import (
    AspectMode, ConversionMode, BANNER_DEFAULT_WIDTH, BANNER_DEFAULT_HEIGHT,
)
from img2ascii.converter import Converter
from img2ascii.errors import ConversionError
from img2ascii.models import ConversionConfig, ConversionOptions


logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def setup_logging(log_level: str = "WARNING") -> None:
    """Setup logging configuration."""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='img2ascii',
        description='Convert images or short messages to ASCII art',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s image.png                          # Fit inside 65x54, print
  %(prog)s image.png -o art.txt -r            # Reversed ramp, save to file
  %(prog)s image.png -a pixel                 # One char per pixel (max 300x200)
  %(prog)s image.png -a fixed -w 40 -H 20     # Exact size, aspect ignored
  %(prog)s --banner-text "Hello" -w 50 -H 15  # Text banner
        """
    )

    # Input/Output
    parser.add_argument('input', nargs='?', help='Input image file (PNG, JPEG or GIF)')
    parser.add_argument('-o', '--output', help='Output text file (stdout if omitted)')

    # Sizing
    parser.add_argument('-a', '--aspect', choices=['scale', 'pixel', 'fixed'],
                        default='scale', help='Sizing policy')
    parser.add_argument('-w', '--width', type=int, help='Fixed width, or banner width')
    parser.add_argument('-H', '--height', type=int, help='Fixed height, or banner height')

    # Rendering
    parser.add_argument('-m', '--mode', choices=['default', 'banner'],
                        default='default', help='Glyph ramp')
    parser.add_argument('-r', '--reverse', action='store_true', help='Reverse the glyph ramp')

    # Banner
    parser.add_argument('--banner-text', help='Render this message as a banner instead of an image')
    parser.add_argument('--font', help='TrueType font file for banners')

    # Other options
    parser.add_argument('--workers', type=_positive_int, help='Luminance worker count (default: CPU count)')
    parser.add_argument('--debug-log', help='Also copy every artifact to this path')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')

    return parser


def _config_kwargs(args: argparse.Namespace) -> dict:
    return {'workers': args.workers, 'debug_log': args.debug_log}


def _run_banner(args: argparse.Namespace) -> str:
    banner = Banner(
        message=args.banner_text,
        width=args.width or BANNER_DEFAULT_WIDTH,
        height=args.height or BANNER_DEFAULT_HEIGHT,
        font_path=args.font,
    )
    if args.output:
        return render_banner(banner, args.output, **_config_kwargs(args))

    config = ConversionConfig.banner(banner.width, banner.height, **_config_kwargs(args))
    return Converter(config).render_source(banner_png(banner))


def _run_image(args: argparse.Namespace) -> str:
    options = ConversionOptions(
        aspect_mode=AspectMode.from_name(args.aspect),
        fixed_width=args.width or 0,
        fixed_height=args.height or 0,
        reverse=args.reverse,
        mode=ConversionMode[args.mode.upper()],
    )
    converter = Converter(ConversionConfig.for_options(options, **_config_kwargs(args)))
    if args.output:
        return converter.run(args.input, args.output)
    return converter.render_source(args.input)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not args.input and not args.banner_text:
        parser.print_help()
        return 2
    if args.aspect == 'fixed' and not args.banner_text and (args.width is None or args.height is None):
        parser.error('--aspect fixed requires --width and --height')

    try:
        text = _run_banner(args) if args.banner_text else _run_image(args)
    except ConversionError as e:
        logger.error("Conversion failed: %s", e)
        return 1

    if args.output:
        logger.info("Saved to %s", args.output)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
