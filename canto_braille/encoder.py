"""Jyutping -> Braille"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .diagnostics import Diagnostic, DiagnosticKind, report
from .phonology import jp2rom
from .syllable import (
    DEFAULT_TONE,
    SPACE,
    DigitRun,
    Literal,
    PunctuationUnit,
    Syllable,
    Token,
    parse_syllable,
)
from .tables import DEFAULT_TABLES, BrailleTables

_LOGGER = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


def _is_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def _run_end(line: str, index: int, accept: Callable[[str], bool]) -> int:
    end = index
    while (end < len(line)) and accept(line[end]):
        end += 1

    return end


def is_known_syllable(
    syllable: Syllable, tables: BrailleTables = DEFAULT_TABLES
) -> bool:
    """True if every part of *syllable* has a cell."""
    if syllable.initial and (tables.initials.reverse_lookup(syllable.initial) is None):
        return False

    return (tables.finals.reverse_lookup(syllable.final) is not None) and (
        tables.tones.reverse_lookup(syllable.tone) is not None
    )


def lex(
    line: str, tables: BrailleTables = DEFAULT_TABLES, line_idx: int = 0
) -> Tuple[List[Token], List[Diagnostic]]:
    """Split one line of romanization into tokens.

    Whitespace only separates tokens and is dropped, except for a single
    space kept between two passthrough literals.
    """
    tokens: List[Token] = []
    diagnostics: List[Diagnostic] = []

    def unrecognized(start: int, end: int) -> None:
        text = line[start:end]
        if (
            tokens
            and isinstance(tokens[-1], Literal)
            and (start > 0)
            and line[start - 1].isspace()
        ):
            tokens.append(SPACE)

        tokens.append(Literal(text))
        diagnostics.append(
            Diagnostic(DiagnosticKind.UNRECOGNIZED_TOKEN, text, start, line_idx)
        )

    def starts_token(index: int) -> bool:
        char = line[index]
        return (
            char.isspace()
            or (char in _DIGITS)
            or _is_letter(char)
            or (tables.punctuation.match_symbol(line, index) is not None)
        )

    index = 0
    while index < len(line):
        char = line[index]

        if char.isspace():
            index += 1
            continue

        if char in _DIGITS:
            end = _run_end(line, index, lambda c: c in _DIGITS)
            tokens.append(DigitRun(line[index:end]))
            index = end
            continue

        if _is_letter(char):
            end = _run_end(line, index, _is_letter)
            if (end < len(line)) and (line[end] in _DIGITS):
                # Letters + tone digit (upper case never parses)
                end += 1
                syllable = parse_syllable(line[index:end])
                if (syllable is not None) and is_known_syllable(syllable, tables):
                    tokens.append(syllable)
                else:
                    unrecognized(index, end)
            else:
                unrecognized(index, end)

            index = end
            continue

        punctuation = tables.punctuation.match_symbol(line, index)
        if punctuation is not None:
            symbol, _cells = punctuation
            tokens.append(PunctuationUnit(symbol))
            index += len(symbol)
            continue

        end = index + 1
        while (end < len(line)) and (not starts_token(end)):
            end += 1

        unrecognized(index, end)
        index = end

    return tokens, diagnostics


def tone_cells(
    syllable: Syllable, tables: BrailleTables = DEFAULT_TABLES, next_cells: str = ""
) -> str:
    """Tone mark written after the final ("" when unmarked).

    Tone 1 after an initial is unmarked unless *next_cells* would otherwise
    be read as the tone.
    """
    if syllable.tone == DEFAULT_TONE:
        if syllable.initial and (tables.tones.match(next_cells, 0) is None):
            return ""

        # Marks the end of a syllable that has no initial
        return tables.tones.reverse_lookup(DEFAULT_TONE) or ""

    if (syllable.tone == "3") and syllable.is_checked:
        return tables.checked_tone_3

    return tables.tones.reverse_lookup(syllable.tone) or ""


def encode_syllable(
    syllable: Syllable, tables: BrailleTables = DEFAULT_TABLES, next_cells: str = ""
) -> str:
    parts: List[str] = []
    if syllable.initial:
        parts.append(tables.initials.reverse[syllable.initial])

    parts.append(tables.finals.reverse[syllable.final])
    parts.append(tone_cells(syllable, tables, next_cells))

    return "".join(parts)


def encode_tokens(tokens: Sequence[Token], tables: BrailleTables = DEFAULT_TABLES) -> str:
    """Cells for one line of tokens."""
    parts: List[str] = []
    next_cells = ""

    # Right to left, so each syllable sees the cells that follow it
    for token_idx in reversed(range(len(tokens))):
        token = tokens[token_idx]
        if isinstance(token, DigitRun):
            cells = tables.number_prefix + "".join(
                tables.digits.reverse[digit] for digit in token.digits
            )

            if token_idx < (len(tokens) - 1):
                # Blank cell ends the number
                cells += tables.blank
        elif isinstance(token, Syllable):
            cells = encode_syllable(token, tables, next_cells)
        elif isinstance(token, PunctuationUnit):
            cells = tables.punctuation.reverse[token.symbol]
        else:
            cells = token.text

        parts.append(cells)
        next_cells = cells

    return "".join(reversed(parts))


def encode(
    text: str,
    diagnostics: Optional[List[Diagnostic]] = None,
    tables: BrailleTables = DEFAULT_TABLES,
) -> str:
    """Encode Jyutping *text* into Braille, line by line.

    Unrecognized tokens are copied to the output and reported to
    *diagnostics* (and the log).
    """
    lines: List[str] = []
    for line_idx, line in enumerate(text.split("\n")):
        romanization = jp2rom(line.rstrip("\r"))
        tokens, line_diagnostics = lex(romanization, tables, line_idx)
        for diagnostic in line_diagnostics:
            report(diagnostic, diagnostics)

        lines.append(encode_tokens(tokens, tables))

    _LOGGER.debug("Encoded %s line(s)", len(lines))

    return "\n".join(lines)
