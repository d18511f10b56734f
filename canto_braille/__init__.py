"""Cantonese Braille <-> Jyutping transliteration"""

from .decoder import decode, tokenize
from .diagnostics import Diagnostic, DiagnosticKind
from .encoder import encode, lex
from .phonology import jp2rom, rom2jp
from .syllable import DigitRun, Literal, PunctuationUnit, Syllable, Token
from .tables import DEFAULT_TABLES, BrailleTables, SymbolTable, known_collisions

__version__ = "1.0.0"

__all__ = [
    "BrailleTables",
    "DEFAULT_TABLES",
    "Diagnostic",
    "DiagnosticKind",
    "DigitRun",
    "Literal",
    "PunctuationUnit",
    "Syllable",
    "SymbolTable",
    "Token",
    "decode",
    "encode",
    "jp2rom",
    "known_collisions",
    "lex",
    "rom2jp",
    "tokenize",
]
