"""Command-line configuration"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union


class Direction(str, Enum):
    DECODE = "decode"
    """Braille to Jyutping"""

    ENCODE = "encode"
    """Jyutping to Braille"""


class CellFormat(str, Enum):
    UNICODE = "unicode"
    """Unicode Braille patterns (U+2800 block)"""

    DOTS = "dots"
    """Dot numbers, e.g. 1234-12"""


@dataclass
class CantoBrailleConfig:
    """canto-braille configuration"""

    direction: Direction = Direction.DECODE

    cell_format: CellFormat = CellFormat.UNICODE
    """How the Braille side is read or written"""

    strict: bool = False
    """Fail when any input is not recognized"""

    @staticmethod
    def from_dict(config: Dict[str, Any]) -> "CantoBrailleConfig":
        return CantoBrailleConfig(
            direction=get_direction(config.get("direction", "decode")),
            cell_format=get_cell_format(config.get("cell_format", "unicode")),
            strict=bool(config.get("strict", False)),
        )


def _enum_name(config_value: str) -> str:
    if "." in config_value:
        # Direction.ENCODE
        config_value = config_value.split(".")[-1]

    return config_value.upper()


def get_direction(config_value: str) -> Direction:
    try:
        return Direction[_enum_name(config_value)]
    except KeyError:
        return Direction.DECODE


def get_cell_format(config_value: str) -> CellFormat:
    try:
        return CellFormat[_enum_name(config_value)]
    except KeyError:
        return CellFormat.UNICODE


def load_config(config_path: Union[str, Path]) -> CantoBrailleConfig:
    with open(config_path, "r", encoding="utf-8") as config_file:
        return CantoBrailleConfig.from_dict(json.load(config_file))
