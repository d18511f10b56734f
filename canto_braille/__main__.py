import argparse
import logging
import sys
from functools import partial
from pathlib import Path
from typing import List, Optional

from .cells import from_dot_notation, to_dot_notation
from .config import CantoBrailleConfig, CellFormat, Direction, load_config
from .decoder import decode
from .diagnostics import Diagnostic
from .encoder import encode

_FILE = Path(__file__)
_LOGGER = logging.getLogger(_FILE.stem)


def transliterate(
    text: str,
    config: CantoBrailleConfig,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> str:
    """Run *text* through the direction and cell format in *config*."""
    if config.direction == Direction.ENCODE:
        braille = encode(text, diagnostics)
        if config.cell_format == CellFormat.DOTS:
            return to_dot_notation(braille)

        return braille

    if config.cell_format == CellFormat.DOTS:
        text = from_dot_notation(text)

    return decode(text, diagnostics)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="canto-braille",
        description="Convert between Cantonese Braille and Jyutping (stdin -> stdout)",
    )
    parser.add_argument("-c", "--config", help="Path to JSON config file")
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument(
        "--decode",
        dest="direction",
        action="store_const",
        const=Direction.DECODE.value,
        help="Braille to Jyutping (default)",
    )
    direction.add_argument(
        "--encode",
        dest="direction",
        action="store_const",
        const=Direction.ENCODE.value,
        help="Jyutping to Braille",
    )
    parser.add_argument(
        "--dots",
        action="store_true",
        help="Read/write Braille as dot numbers (1234-12) instead of Unicode",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any input was not recognized",
    )
    parser.add_argument(
        "--line-by-line",
        "--line_by_line",
        action="store_true",
        help="Convert and flush each input line as it arrives",
    )
    parser.add_argument(
        "-f",
        "--output-file",
        "--output_file",
        help="Path to output file (default: stdout)",
    )
    #
    parser.add_argument(
        "--debug", action="store_true", help="Print DEBUG messages to console"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    _LOGGER.debug(args)

    if args.config:
        config = load_config(args.config)
    else:
        config = CantoBrailleConfig()

    # Command-line overrides config file
    if args.direction:
        config.direction = Direction(args.direction)

    if args.dots:
        config.cell_format = CellFormat.DOTS

    if args.strict:
        config.strict = True

    _LOGGER.debug(config)

    diagnostics: List[Diagnostic] = []
    convert = partial(transliterate, config=config, diagnostics=diagnostics)

    try:
        if args.line_by_line:
            # Read line-by-line
            for line in sys.stdin:
                print(convert(line.rstrip("\n")), flush=True)
        else:
            # Read entire input
            result = convert(sys.stdin.read().rstrip("\n"))

            if (not args.output_file) or (args.output_file == "-"):
                print(result)
            else:
                with open(args.output_file, "w", encoding="utf-8") as output_file:
                    print(result, file=output_file)
    except ValueError as err:
        _LOGGER.error("Invalid input: %s", err)
        return 1

    if config.strict and diagnostics:
        _LOGGER.error("%s unit(s) not recognized", len(diagnostics))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
