"""
Tense identifiers, person/number slots and pronoun tables.

Tense Types:
    1  - Present
    2  - Preterite
    3  - Imperfect
    4  - Future
    5  - Conditional
    6  - Present subjunctive
    7  - Imperfect subjunctive
    8  - Affirmative commands
    9  - Negative commands
    10 - Present perfect (he hablado)
    11 - Pluperfect (había hablado)
    12 - Future perfect (habré hablado)
    13 - Conditional perfect (habría hablado)
    14 - Present perfect subjunctive (haya hablado)
    15 - Pluperfect subjunctive (hubiera hablado)
    16 - Present progressive (estoy hablando)
    17 - Imperfect progressive (estaba hablando)
    18 - Preterite progressive (estuve hablando)
    19 - Future progressive (estaré hablando)
"""

import re
from enum import IntEnum
from typing import Tuple, Union

from conjugador.errors import InvalidTense


# ============================================================================
# Tense Constants
# ============================================================================

class Tense(IntEnum):
    """Tense/mood/aspect categories."""
    PRESENT = 1
    PRETERITE = 2
    IMPERFECT = 3
    FUTURE = 4
    CONDITIONAL = 5
    PRESENT_SUBJUNCTIVE = 6
    IMPERFECT_SUBJUNCTIVE = 7
    COMMANDS_AFFIRMATIVE = 8
    COMMANDS_NEGATIVE = 9
    PRESENT_PERFECT = 10
    PLUPERFECT_PERFECT = 11
    FUTURE_PERFECT = 12
    CONDITIONAL_PERFECT = 13
    SUBJUNCTIVE_PERFECT = 14
    IMPERFECT_SUBJUNCTIVE_PERFECT = 15
    PRESENT_PROGRESSIVE = 16
    IMPERFECT_PROGRESSIVE = 17
    PRETERITE_PROGRESSIVE = 18
    FUTURE_PROGRESSIVE = 19

    @classmethod
    def parse(cls, value: Union["Tense", int, str]) -> "Tense":
        """
        Resolve a tense from a member, its value or its name.

        Names are matched ignoring case, underscores, hyphens and spaces,
        so "PresentPerfect", "present_perfect" and "present-perfect" all
        resolve to Tense.PRESENT_PERFECT.

        Raises:
            InvalidTense: If nothing matches.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidTense(value) from None
        if isinstance(value, str):
            key = _normalize_tense_name(value)
            for member in cls:
                if _normalize_tense_name(member.name) == key:
                    return member
        raise InvalidTense(value)


def _normalize_tense_name(name: str) -> str:
    return re.sub(r'[^a-z]', '', name.lower())


TENSE_DESCRIPTIONS = {
    Tense.PRESENT: "Present",
    Tense.PRETERITE: "Preterite",
    Tense.IMPERFECT: "Imperfect",
    Tense.FUTURE: "Future",
    Tense.CONDITIONAL: "Conditional",
    Tense.PRESENT_SUBJUNCTIVE: "Present subjunctive",
    Tense.IMPERFECT_SUBJUNCTIVE: "Imperfect subjunctive",
    Tense.COMMANDS_AFFIRMATIVE: "Affirmative commands",
    Tense.COMMANDS_NEGATIVE: "Negative commands",
    Tense.PRESENT_PERFECT: "Present perfect",
    Tense.PLUPERFECT_PERFECT: "Pluperfect",
    Tense.FUTURE_PERFECT: "Future perfect",
    Tense.CONDITIONAL_PERFECT: "Conditional perfect",
    Tense.SUBJUNCTIVE_PERFECT: "Present perfect subjunctive",
    Tense.IMPERFECT_SUBJUNCTIVE_PERFECT: "Pluperfect subjunctive",
    Tense.PRESENT_PROGRESSIVE: "Present progressive",
    Tense.IMPERFECT_PROGRESSIVE: "Imperfect progressive",
    Tense.PRETERITE_PROGRESSIVE: "Preterite progressive",
    Tense.FUTURE_PROGRESSIVE: "Future progressive",
}


def get_tense_description(tense: int) -> str:
    """Get human-readable description of a tense."""
    return TENSE_DESCRIPTIONS.get(tense, f"Tense {tense}")


# ============================================================================
# Person / Number Slots
# ============================================================================

# Canonical slot order: yo, tú, él/usted, nosotros, vosotros, ellos/ustedes
SLOT_COUNT = 6
SLOTS = tuple(range(SLOT_COUNT))

FIRST_SINGULAR = 0
SECOND_SINGULAR = 1
THIRD_SINGULAR = 2
FIRST_PLURAL = 3
SECOND_PLURAL = 4
THIRD_PLURAL = 5

# Slots stressed on the ending; they keep the unchanged stem
UNSTRESSED_STEM_SLOTS = (FIRST_PLURAL, SECOND_PLURAL)

SUBJECT_PRONOUNS = ("yo", "tú", "él", "nosotros", "vosotros", "ellos")


def slot_index(person: int, plural: bool) -> int:
    """Map (person, plural) to the canonical slot index."""
    return person + 3 if plural else person


def person_number(slot: int) -> Tuple[int, bool]:
    """Inverse of slot_index."""
    return slot % 3, slot >= 3


# ============================================================================
# Pronoun Tables
# ============================================================================

REFLEXIVE_PRONOUNS = ("me", "te", "se", "nos", "os", "se")
NO_PRONOUNS = ("", "", "", "", "", "")

NEGATION = "no"
