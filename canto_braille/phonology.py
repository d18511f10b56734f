"""Phonological rewrites between the Braille romanization and Jyutping.

Braille spells some syllables differently from Jyutping:

* no written initial before finals that Jyutping writes with "j" or "w"
  (jyu -> yu, wu -> u), except for ik, ing, uk and ung
* the syllabic nasals are written as the finals "ang" (ng) and "op" (m)
* checked finals marked with tone 4 are pronounced with tone 6

The forward direction (romanization -> Jyutping) is applied by the decoder,
the inverse direction by the encoder before it splits its input.
"""

import re
from dataclasses import replace
from typing import Callable, Optional

from .syllable import TONES, Syllable, parse_syllable

# Finals without an epenthetic initial
J_EXCEPTIONS = frozenset(["ik", "ing"])
W_EXCEPTIONS = frozenset(["uk", "ung"])

# Syllabic nasal -> final used to spell it
SYLLABIC_NASALS = {"ng": "ang", "m": "op"}

# "ang" only reads as "ng" with a low tone
NG_TONES = frozenset("456")

CHECKED_TONE_MARKED = "4"
CHECKED_TONE_SPOKEN = "6"

# Candidate syllables inside free text: letters + one digit
_RE_UNIT = re.compile(r"(?<![A-Za-z])[a-z]+[0-9]")


def epenthetic_initial(final: str) -> str:
    """Initial inferred before a final with no written initial ("" if none)."""
    if final.startswith(("y", "i")) and (final not in J_EXCEPTIONS):
        return "j"

    if final.startswith("u") and (final not in W_EXCEPTIONS):
        return "w"

    return ""


def normalize_syllable(syllable: Syllable) -> Syllable:
    """Romanized syllable to Jyutping."""
    initial, final, tone = syllable.initial, syllable.final, syllable.tone

    if not initial:
        initial = epenthetic_initial(final)

        if (final == "ang") and (tone in NG_TONES):
            final = "ng"
        elif final == "op":
            final = "m"

    result = Syllable(initial=initial, final=final, tone=tone)
    if result.is_checked and (tone == CHECKED_TONE_MARKED):
        result = replace(result, tone=CHECKED_TONE_SPOKEN)

    return result


def denormalize_syllable(syllable: Syllable) -> Syllable:
    """Jyutping syllable to the romanization spelled in Braille."""
    result = syllable
    if result.is_checked and (result.tone == CHECKED_TONE_SPOKEN):
        result = replace(result, tone=CHECKED_TONE_MARKED)

    if (not result.initial) and (result.final in SYLLABIC_NASALS):
        result = replace(result, final=SYLLABIC_NASALS[result.final])

    if result.initial and (result.initial == epenthetic_initial(result.final)):
        result = replace(result, initial="")

    return result


def split_unit(unit: str) -> Optional[Syllable]:
    """Parse a syllable, including the vowel-less syllabic nasals."""
    syllable = parse_syllable(unit)
    if syllable is not None:
        return syllable

    body, tone = unit[:-1], unit[-1:]
    if (body in SYLLABIC_NASALS) and (tone in TONES):
        return Syllable(initial="", final=body, tone=tone)

    return None


def _rewrite(text: str, rewrite_syllable: Callable[[Syllable], Syllable]) -> str:
    def rewrite_unit(match: "re.Match[str]") -> str:
        unit = match.group(0)
        syllable = split_unit(unit)
        if syllable is None:
            return unit

        return rewrite_syllable(syllable).text

    return _RE_UNIT.sub(rewrite_unit, text)


def rom2jp(text: str) -> str:
    """Rewrite every romanized syllable in *text* as Jyutping."""
    return _rewrite(text, normalize_syllable)


def jp2rom(text: str) -> str:
    """Rewrite every Jyutping syllable in *text* as Braille romanization."""
    return _rewrite(text, denormalize_syllable)
