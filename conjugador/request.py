"""
Conjugation requests.

A ConjugationRequest carries a normalized infinitive and the target slot
through the tense strategies. It is built once per call by build_request,
which validates the raw input before any table is consulted.
"""

import re
from dataclasses import dataclass, replace
from typing import Sequence

from conjugador.constants import (
    NO_PRONOUNS, REFLEXIVE_PRONOUNS, slot_index,
)
from conjugador.endings import ConjugationClass, classify
from conjugador.errors import InvalidInfinitive, InvalidPerson

# Lowercase Spanish letters followed by an infinitive ending
_INFINITIVE = re.compile(r'^[a-zñáéíóúü]*(ar|er|ir|ír)$')

REFLEXIVE_SUFFIX = "se"


@dataclass(frozen=True)
class ConjugationRequest:
    """
    A validated request for one conjugated form.

    Attributes:
        infinitive: Normalized infinitive (reflexive suffix stripped,
            -ír rewritten to -ir).
        person_number: Slot index 0..5.
        is_reflexive: True if the caller passed a -se infinitive.
        original_form: Infinitive with the reflexive suffix stripped and
            its accent kept (reír).
    """
    infinitive: str
    person_number: int
    is_reflexive: bool = False
    original_form: str = ""

    def __post_init__(self):
        if not self.original_form:
            object.__setattr__(self, 'original_form', self.infinitive)

    @property
    def pronoun(self) -> str:
        """Reflexive pronoun for the slot, empty for non-reflexive verbs."""
        table = REFLEXIVE_PRONOUNS if self.is_reflexive else NO_PRONOUNS
        return table[self.person_number]

    @property
    def conj_class(self) -> ConjugationClass:
        return classify(self.infinitive)

    def at_slot(self, table: Sequence[str]) -> str:
        """Pick this request's slot from a six-form table."""
        return table[self.person_number]

    def with_slot(self, slot: int) -> "ConjugationRequest":
        return replace(self, person_number=slot)

    def bare(self) -> "ConjugationRequest":
        """Same request without the reflexive pronoun."""
        return replace(self, is_reflexive=False)


def normalize_infinitive(infinitive) -> tuple:
    """
    Validate and normalize a raw infinitive.

    Args:
        infinitive: Caller input, e.g. "Levantarse", "reír".

    Returns:
        Tuple of (infinitive, original_form, is_reflexive).

    Raises:
        InvalidInfinitive: If the input is not a Spanish infinitive.
    """
    if not isinstance(infinitive, str):
        raise InvalidInfinitive(infinitive, "expected a string")

    word = infinitive.strip().lower()
    if not word:
        raise InvalidInfinitive(infinitive, "empty infinitive")

    is_reflexive = len(word) > 2 and word.endswith(REFLEXIVE_SUFFIX)
    if is_reflexive:
        word = word[:-len(REFLEXIVE_SUFFIX)]

    if not _INFINITIVE.match(word):
        raise InvalidInfinitive(infinitive, "expected an -ar, -er or -ir ending")
    if len(word) == 2 and word != "ir":
        raise InvalidInfinitive(infinitive, "ending without a root")

    original_form = word
    if word.endswith("ír"):
        word = word[:-2] + "ir"
    return word, original_form, is_reflexive


def build_request(infinitive, person, plural: bool = False) -> ConjugationRequest:
    """
    Build a ConjugationRequest from caller input.

    Args:
        infinitive: Infinitive, optionally reflexive (lavarse).
        person: 0 (first), 1 (second) or 2 (third).
        plural: Plural number.

    Raises:
        InvalidInfinitive: Malformed infinitive.
        InvalidPerson: Person is not an int in 0..2.
    """
    if not isinstance(person, int) or isinstance(person, bool) or not 0 <= person <= 2:
        raise InvalidPerson(person)

    verb, original_form, is_reflexive = normalize_infinitive(infinitive)
    slot = slot_index(person, bool(plural))
    return ConjugationRequest(
        infinitive=verb,
        person_number=slot,
        is_reflexive=is_reflexive,
        original_form=original_form,
    )
