"""Braille -> Jyutping"""

import logging
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .diagnostics import Diagnostic, DiagnosticKind, report
from .phonology import normalize_syllable
from .syllable import (
    DEFAULT_TONE,
    SPACE,
    DigitRun,
    Literal,
    PunctuationUnit,
    Syllable,
    Token,
)
from .tables import DEFAULT_TABLES, BrailleTables

_LOGGER = logging.getLogger(__name__)


class ScanMode(str, Enum):
    SCANNING = "scanning"
    IN_NUMBER = "in-number"
    """After the number prefix, until a cell that is not a digit"""


class Step(NamedTuple):
    """Result of one scanner transition"""

    token: Optional[Token]
    index: int
    mode: ScanMode
    diagnostic: Optional[Diagnostic] = None


def scan_step(
    text: str,
    index: int,
    mode: ScanMode = ScanMode.SCANNING,
    tables: BrailleTables = DEFAULT_TABLES,
    line: int = 0,
) -> Step:
    """Consume the unit starting at *index*.

    The returned index is always greater than *index*.
    """
    cell = text[index]

    if cell == tables.number_prefix:
        return Step(None, index + 1, ScanMode.IN_NUMBER)

    if mode == ScanMode.IN_NUMBER:
        digit = tables.digits.lookup(cell)
        if digit is not None:
            return Step(DigitRun(digit), index + 1, ScanMode.IN_NUMBER)

        # Anything else ends the number
        mode = ScanMode.SCANNING

    punctuation = tables.punctuation.match(text, index)
    if punctuation is not None:
        key_cells, symbol = punctuation
        return Step(PunctuationUnit(symbol), index + len(key_cells), mode)

    syllable_end = scan_syllable(text, index, tables)
    if syllable_end is not None:
        syllable, end = syllable_end
        return Step(syllable, end, mode)

    if cell in (tables.blank, " "):
        return Step(SPACE, index + 1, mode)

    return Step(
        Literal(cell),
        index + 1,
        mode,
        Diagnostic(DiagnosticKind.UNRECOGNIZED_CELL, cell, index, line),
    )


def scan_syllable(
    text: str, index: int, tables: BrailleTables = DEFAULT_TABLES
) -> Optional[Tuple[Syllable, int]]:
    """Initial + final (or a lone final) and an optional tone, with end index."""
    cell = text[index]
    next_cell = text[index + 1] if (index + 1) < len(text) else ""

    initial = tables.initials.lookup(cell)
    final = tables.finals.lookup(next_cell) if next_cell else None

    if (initial is not None) and (final is not None):
        end = index + 2
    else:
        # Same cell may be a final on its own
        initial = ""
        final = tables.finals.lookup(cell)
        if final is None:
            return None

        end = index + 1

    tone, end = scan_tone(text, end, tables)
    return Syllable(initial=initial, final=final, tone=tone), end


def scan_tone(
    text: str, index: int, tables: BrailleTables = DEFAULT_TABLES
) -> Tuple[str, int]:
    """Tone cell (or two-cell tone) at *index*, defaulting to tone 1."""
    if index >= len(text):
        return DEFAULT_TONE, index

    tone = tables.tones.lookup(text[index])
    if tone is not None:
        return tone, index + 1

    if (2 in tables.tones.key_lengths) and ((index + 2) <= len(text)):
        tone = tables.tones.lookup(text[index : index + 2])
        if tone is not None:
            return tone, index + 2

    return DEFAULT_TONE, index


def scan_tokens(
    text: str, tables: BrailleTables = DEFAULT_TABLES, line: int = 0
) -> Tuple[List[Token], List[Diagnostic]]:
    """Raw tokens of one line, before any phonological rewriting."""
    tokens: List[Token] = []
    diagnostics: List[Diagnostic] = []
    mode = ScanMode.SCANNING
    index = 0

    while index < len(text):
        step = scan_step(text, index, mode, tables, line)
        index, mode = step.index, step.mode

        if step.diagnostic is not None:
            diagnostics.append(step.diagnostic)

        token = step.token
        if token is None:
            continue

        if isinstance(token, DigitRun) and tokens and isinstance(tokens[-1], DigitRun):
            # Prefix may repeat inside a number
            tokens[-1] = DigitRun(tokens[-1].digits + token.digits)
        else:
            tokens.append(token)

    return tokens, diagnostics


def tokenize(
    text: str, tables: BrailleTables = DEFAULT_TABLES, line: int = 0
) -> Tuple[List[Token], List[Diagnostic]]:
    """Tokens of one line with syllables rewritten as Jyutping."""
    tokens, diagnostics = scan_tokens(text, tables, line)
    tokens = [
        normalize_syllable(token) if isinstance(token, Syllable) else token
        for token in tokens
    ]

    return tokens, diagnostics


def render(tokens: Sequence[Token]) -> str:
    """Space-separated text of *tokens*."""
    parts: List[str] = []
    for token in tokens:
        text = token.text
        if parts and (token != SPACE) and (not parts[-1].endswith(" ")):
            parts.append(" ")

        parts.append(text)

    return "".join(parts).strip(" ")


def decode(
    text: str,
    diagnostics: Optional[List[Diagnostic]] = None,
    tables: BrailleTables = DEFAULT_TABLES,
) -> str:
    """Decode Braille *text* into Jyutping, line by line.

    Unrecognized cells are copied to the output and reported to
    *diagnostics* (and the log).
    """
    lines: List[str] = []
    for line_idx, line in enumerate(text.split("\n")):
        tokens, line_diagnostics = tokenize(line.rstrip("\r"), tables, line_idx)
        for diagnostic in line_diagnostics:
            report(diagnostic, diagnostics)

        lines.append(render(tokens))

    _LOGGER.debug("Decoded %s line(s)", len(lines))

    return "\n".join(lines)
