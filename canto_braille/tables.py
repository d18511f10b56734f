"""Symbol tables of the Hong Kong Cantonese Braille scheme.

Each table is built once from an ordered list of (dot numbers, symbol)
entries and never changes afterwards. Reverse lookups (symbol -> cells) are
derived in the same pass. When two entries share a key, the first one wins
and the shadowed entry is kept as a :class:`Collision` note.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from .cells import BLANK, cells

_LOGGER = logging.getLogger(__name__)


class SymbolKind(str, Enum):
    INITIAL = "initial"
    FINAL = "final"
    TONE = "tone"
    DIGIT = "digit"
    PUNCTUATION = "punctuation"


class Collision(NamedTuple):
    """Two source entries competing for the same key."""

    kind: SymbolKind
    direction: str  # "forward" (same cells) or "reverse" (same symbol)
    key: str
    kept: str
    shadowed: str


@dataclass(frozen=True)
class SymbolTable:
    kind: SymbolKind

    forward: Mapping[str, str]
    """Cells -> symbol"""

    reverse: Mapping[str, str]
    """Symbol -> cells"""

    collisions: Tuple[Collision, ...]

    key_lengths: Tuple[int, ...]
    """Distinct key lengths in cells, longest first"""

    @staticmethod
    def from_entries(
        kind: SymbolKind, entries: Iterable[Tuple[str, str]]
    ) -> "SymbolTable":
        """Build a table from (cells, symbol) pairs in source order."""
        forward: Dict[str, str] = {}
        reverse: Dict[str, str] = {}
        collisions: List[Collision] = []

        for key_cells, symbol in entries:
            if key_cells in forward:
                collisions.append(
                    Collision(kind, "forward", key_cells, forward[key_cells], symbol)
                )
                continue

            forward[key_cells] = symbol

            if symbol in reverse:
                collisions.append(
                    Collision(kind, "reverse", symbol, reverse[symbol], key_cells)
                )
            else:
                reverse[symbol] = key_cells

        for collision in collisions:
            _LOGGER.debug(
                "%s table: %s key %s keeps %s, shadows %s",
                kind.value,
                collision.direction,
                collision.key,
                collision.kept,
                collision.shadowed,
            )

        return SymbolTable(
            kind=kind,
            forward=MappingProxyType(forward),
            reverse=MappingProxyType(reverse),
            collisions=tuple(collisions),
            key_lengths=tuple(sorted({len(k) for k in forward}, reverse=True)),
        )

    def lookup(self, key_cells: str) -> Optional[str]:
        return self.forward.get(key_cells)

    def reverse_lookup(self, symbol: str) -> Optional[str]:
        return self.reverse.get(symbol)

    def match(self, text: Sequence[str], index: int) -> Optional[Tuple[str, str]]:
        """Longest key starting at *index*, as (cells, symbol)."""
        for length in self.key_lengths:
            if index + length > len(text):
                continue

            window = "".join(text[index : index + length])
            symbol = self.forward.get(window)
            if symbol is not None:
                return window, symbol

        return None

    def match_symbol(self, text: str, index: int) -> Optional[Tuple[str, str]]:
        """Longest symbol starting at *index*, as (symbol, cells)."""
        for length in sorted({len(s) for s in self.reverse}, reverse=True):
            symbol = text[index : index + length]
            if (len(symbol) == length) and (symbol in self.reverse):
                return symbol, self.reverse[symbol]

        return None

    def __contains__(self, key_cells: object) -> bool:
        return key_cells in self.forward


def _build(kind: SymbolKind, entries: Sequence[Tuple[str, str]]) -> SymbolTable:
    return SymbolTable.from_entries(
        kind, ((cells(notation), symbol) for notation, symbol in entries)
    )


# -----------------------------------------------------------------------------
# Scheme data (dot numbers -> symbol), in source order
# -----------------------------------------------------------------------------

INITIAL_ENTRIES: List[Tuple[str, str]] = [
    ("1234", "b"),
    ("12346", "p"),
    ("134", "m"),
    ("124", "f"),
    ("2345", "d"),
    ("23456", "t"),
    ("1345", "n"),
    ("123", "l"),
    ("13", "g"),
    ("1235", "k"),
    ("1245", "ng"),
    ("125", "h"),
    ("12345", "gw"),
    ("12456", "kw"),
    ("2456", "w"),
    ("14", "z"),
    ("1346", "c"),
    ("234", "s"),
    ("245", "j"),
]

FINAL_ENTRIES: List[Tuple[str, str]] = [
    # aa
    ("12", "aa"),
    ("346", "aai"),
    ("34", "aau"),
    ("345", "aam"),
    ("45", "aan"),
    ("14", "aang"),
    ("1234", "aap"),
    ("2345", "aat"),
    ("13", "aak"),
    # a
    ("146", "ai"),
    ("16", "au"),
    ("456", "am"),
    ("1246", "an"),
    ("1245", "ang"),
    ("26", "ap"),
    ("35", "at"),
    ("46", "ak"),
    # e
    ("15", "e"),
    ("125", "ei"),
    ("2356", "eng"),
    ("2456", "ek"),
    # i
    ("145", "sz"),
    ("24", "i"),
    ("13456", "iu"),
    ("235", "im"),
    ("256", "in"),
    ("356", "ing"),
    ("12346", "ip"),
    ("23456", "it"),
    ("1235", "ik"),
    # o
    ("135", "o"),
    ("126", "oi"),
    ("1236", "ou"),
    ("123", "om"),
    ("1345", "on"),
    ("56", "ong"),
    ("134", "op"),
    ("124", "ot"),
    ("12456", "ok"),
    # u
    ("136", "u"),
    ("1256", "ui"),
    ("2346", "un"),
    ("236", "ung"),
    ("1356", "ut"),
    ("12345", "uk"),
    # oe
    ("156", "oe"),
    ("245", "eoi"),
    ("234", "eon"),
    ("25", "oeng"),
    ("1346", "eot"),
    ("246", "oek"),
    # yu
    ("1456", "yu"),
    ("23", "yun"),
    ("12356", "yut"),
]

TONE_ENTRIES: List[Tuple[str, str]] = [
    ("0", "1"),  # high level, usually unmarked
    ("1", "2"),  # high rising
    ("4", "3"),  # mid level
    ("3", "4"),  # low falling
    ("6", "5"),  # low rising
    ("2", "6"),  # low level
    ("5", "3"),  # mid level, checked
    # Fuller tone inventories use this cell for tone 9 as well.
    ("3", "9"),
]

DIGIT_ENTRIES: List[Tuple[str, str]] = [
    ("1", "1"),
    ("12", "2"),
    ("14", "3"),
    ("145", "4"),
    ("15", "5"),
    ("124", "6"),
    ("1245", "7"),
    ("125", "8"),
    ("24", "9"),
    ("245", "0"),
]

PUNCTUATION_ENTRIES: List[Tuple[str, str]] = [
    ("123456", "。"),
    ("36", "，"),
    ("45", "、"),
    ("56-23", "‧"),
    ("236-0", "？"),
    ("2346-0", "！"),
    ("25-0", "："),
    ("26-0", "；"),
    ("36-3", "-"),
    ("36-36", "—"),
    ("3-3-3", "⋯"),
    ("3-3-3-3-3", "……"),
    # brackets and quotes
    ("2356", "("),
    ("2356-0", ")"),
    ("6-2356", "["),
    ("2356-3-0", "]"),
    ("126", "《"),
    ("345-0", "》"),
    ("6-126", "〈"),
    ("345-3-0", "〉"),
    ("236", "「"),
    ("356-0", "」"),
    ("6-236", "『"),
    ("356-3-0", "』"),
    ("12356", "「"),
    ("12456-0", "」"),
    # emphasis open/close
    ("456", "**"),
    ("1356-0", "**"),
]

NUMBER_PREFIX = cells("3456")

# Tone cell implied by a checked final carrying mid tone 3
CHECKED_TONE_3 = cells("5")


@dataclass(frozen=True)
class BrailleTables:
    """Everything the decoder and encoder look up"""

    initials: SymbolTable
    finals: SymbolTable
    tones: SymbolTable
    digits: SymbolTable
    punctuation: SymbolTable

    number_prefix: str = NUMBER_PREFIX
    blank: str = BLANK
    checked_tone_3: str = CHECKED_TONE_3

    @staticmethod
    def from_entries(
        initials: Sequence[Tuple[str, str]] = INITIAL_ENTRIES,
        finals: Sequence[Tuple[str, str]] = FINAL_ENTRIES,
        tones: Sequence[Tuple[str, str]] = TONE_ENTRIES,
        digits: Sequence[Tuple[str, str]] = DIGIT_ENTRIES,
        punctuation: Sequence[Tuple[str, str]] = PUNCTUATION_ENTRIES,
    ) -> "BrailleTables":
        """Build tables from dot-number entries (defaults to the scheme data)."""
        return BrailleTables(
            initials=_build(SymbolKind.INITIAL, initials),
            finals=_build(SymbolKind.FINAL, finals),
            tones=_build(SymbolKind.TONE, tones),
            digits=_build(SymbolKind.DIGIT, digits),
            punctuation=_build(SymbolKind.PUNCTUATION, punctuation),
        )

    @property
    def all_tables(self) -> Tuple[SymbolTable, ...]:
        return (self.initials, self.finals, self.tones, self.digits, self.punctuation)


def known_collisions(tables: Optional[BrailleTables] = None) -> List[Collision]:
    """Every collision recorded while building *tables*."""
    if tables is None:
        tables = DEFAULT_TABLES

    return [collision for table in tables.all_tables for collision in table.collisions]


DEFAULT_TABLES = BrailleTables.from_entries()
