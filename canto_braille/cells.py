"""Braille cells and dot-number notation"""

from typing import List, Sequence

import numpy as np

CELL_BASE = 0x2800
"""Code point of the blank cell"""

NUM_CELLS = 256
NUM_SIX_DOT_CELLS = 64

BLANK = chr(CELL_BASE)

_DOT_BITS = np.array([1 << dot for dot in range(6)], dtype=np.int64)
_DOT_NUMBERS = "123456"


def is_cell(char: str) -> bool:
    """True if *char* is a single Unicode Braille pattern."""
    return len(char) == 1 and CELL_BASE <= ord(char) < CELL_BASE + NUM_CELLS


def is_six_dot(char: str) -> bool:
    return len(char) == 1 and CELL_BASE <= ord(char) < CELL_BASE + NUM_SIX_DOT_CELLS


def cell_to_dots(cell: str) -> str:
    """Raised dots of a cell in ascending order ("1245"), "0" for the blank cell."""
    if not is_cell(cell):
        raise ValueError(f"Not a Braille cell: {cell!r}")

    pattern = ord(cell) - CELL_BASE
    dots = "".join(str(dot + 1) for dot in range(8) if pattern & (1 << dot))
    return dots or "0"


def dots_to_cell(dots: str) -> str:
    """Cell for a dot-number string such as "1245" (or "0" for blank)."""
    if dots == "0":
        return BLANK

    if (not dots) or (not dots.isdigit()):
        raise ValueError(f"Invalid dot numbers: {dots!r}")

    pattern = 0
    for dot_str in dots:
        dot = int(dot_str)
        if not 1 <= dot <= 8:
            raise ValueError(f"Invalid dot number {dot} in {dots!r}")

        bit = 1 << (dot - 1)
        if pattern & bit:
            raise ValueError(f"Repeated dot {dot} in {dots!r}")

        pattern |= bit

    return chr(CELL_BASE + pattern)


def cells(notation: str) -> str:
    """Hyphen-joined dot numbers ("6-2356") to a string of cells."""
    return "".join(dots_to_cell(dots) for dots in notation.split("-"))


def to_dot_notation(text: str) -> str:
    """Rewrite every cell in *text* as dot numbers.

    Cells that follow each other are joined with "-". Anything that is not a
    cell is kept and breaks the hyphen chain.
    """
    parts: List[str] = []
    prev_cell = False
    for char in text:
        if is_cell(char):
            if prev_cell:
                parts.append("-")

            parts.append(cell_to_dots(char))
            prev_cell = True
        else:
            parts.append(char)
            prev_cell = False

    return "".join(parts)


def from_dot_notation(text: str) -> str:
    """Inverse of :func:`to_dot_notation` for whitespace-separated words."""
    lines = []
    for line in text.split("\n"):
        words = [cells(word) for word in line.split()]
        lines.append(BLANK.join(words))

    return "\n".join(lines)


def dot_matrix(text: Sequence[str]) -> np.ndarray:
    """Boolean array (num_cells, 6) of raised dots for six-dot cells."""
    for char in text:
        if not is_six_dot(char):
            raise ValueError(f"Not a six-dot Braille cell: {char!r}")

    codes = np.array([ord(char) - CELL_BASE for char in text], dtype=np.int64)
    return (codes.reshape(-1, 1) & _DOT_BITS) != 0


def from_dot_matrix(matrix: np.ndarray) -> str:
    """Inverse of :func:`dot_matrix`."""
    matrix = np.asarray(matrix, dtype=bool)
    if matrix.size == 0:
        return ""

    if (matrix.ndim != 2) or (matrix.shape[1] != len(_DOT_NUMBERS)):
        raise ValueError(f"Expected shape (n, 6), got {matrix.shape}")

    codes = (matrix.astype(np.int64) * _DOT_BITS).sum(axis=1)
    return "".join(chr(CELL_BASE + int(code)) for code in codes)
