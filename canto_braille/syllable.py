"""Tokens shared by the decoder and encoder, and the syllable grammar"""

from dataclasses import dataclass
from typing import Optional, Union

VOWELS = frozenset("aeiouy")
CHECKED_CODAS = frozenset("ptk")
TONES = frozenset("123456")
DEFAULT_TONE = "1"

# The one final written without a vowel
APICAL_FINAL = "sz"


@dataclass(frozen=True)
class Syllable:
    initial: str
    final: str
    tone: str = DEFAULT_TONE

    @property
    def text(self) -> str:
        return f"{self.initial}{self.final}{self.tone}"

    @property
    def is_checked(self) -> bool:
        """True if the final ends in a stop consonant."""
        return bool(self.final) and (self.final[-1] in CHECKED_CODAS)


@dataclass(frozen=True)
class DigitRun:
    digits: str

    @property
    def text(self) -> str:
        return self.digits


@dataclass(frozen=True)
class PunctuationUnit:
    symbol: str

    @property
    def text(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Literal:
    """Raw passthrough text"""

    text: str


Token = Union[Syllable, DigitRun, PunctuationUnit, Literal]

SPACE = Literal(" ")


def is_letters(text: str) -> bool:
    return bool(text) and all("a" <= c <= "z" for c in text)


def parse_syllable(unit: str) -> Optional[Syllable]:
    """Split "gwong2" into initial, final and tone.

    Grammar: a (possibly empty) run of consonants, then a final starting with
    one of "aeiouy" (or the vowel-less final "sz"), then a single tone digit
    1-6. Returns None for anything else.
    """
    if len(unit) < 2:
        return None

    body, tone = unit[:-1], unit[-1]
    if (tone not in TONES) or (not is_letters(body)):
        return None

    split = 0
    while (split < len(body)) and (body[split] not in VOWELS):
        split += 1

    if split == len(body):
        if not body.endswith(APICAL_FINAL):
            # No vowel, so no final
            return None

        split = len(body) - len(APICAL_FINAL)

    return Syllable(initial=body[:split], final=body[split:], tone=tone)
