"""
Pydantic models for conjugador results.

Usage:
    from conjugador.models import ConjugationResult, VerbResult

    result = ConjugationResult.create("hablar", Tense.PRESENT, 0)
    print(result.model_dump_json())

    verb = VerbResult.create("levantarse")
    for paradigm in verb.paradigms:
        print(paradigm.description, paradigm.forms)
"""

from typing import List

from pydantic import BaseModel, Field

from conjugador.constants import (
    SLOTS, SUBJECT_PRONOUNS, Tense, get_tense_description, slot_index,
)
from conjugador.conjugator import (
    TenseLike, conjugate, conjugate_paradigm, gerund, participle,
)
from conjugador.request import normalize_infinitive


class ConjugationResult(BaseModel):
    """A single conjugated form."""
    infinitive: str = Field(..., description="Infinitive as given by the caller")
    tense: str = Field(..., description="Tense name (e.g., 'PRESENT_SUBJUNCTIVE')")
    person: int = Field(..., description="Grammatical person: 0, 1 or 2")
    plural: bool = Field(False, description="True for plural number")
    subject: str = Field(..., description="Subject pronoun for the slot (e.g., 'nosotros')")
    form: str = Field(..., description="Conjugated form; empty when the slot has no form")

    @classmethod
    def create(cls, infinitive: str, tense: TenseLike, person: int, plural: bool = False) -> "ConjugationResult":
        """Conjugate and wrap the result."""
        tense = Tense.parse(tense)
        form = conjugate(infinitive, tense, person, plural)
        return cls(
            infinitive=infinitive,
            tense=tense.name,
            person=person,
            plural=plural,
            subject=SUBJECT_PRONOUNS[slot_index(person, plural)],
            form=form,
        )


class ParadigmResult(BaseModel):
    """
    The six forms of one tense.

    forms is in slot order: yo, tú, él, nosotros, vosotros, ellos.
    """
    tense: str = Field(..., description="Tense name")
    description: str = Field(..., description="Human-readable tense description")
    forms: List[str] = Field(..., description="Six forms in slot order")

    @classmethod
    def create(cls, infinitive: str, tense: TenseLike) -> "ParadigmResult":
        tense = Tense.parse(tense)
        return cls(
            tense=tense.name,
            description=get_tense_description(tense),
            forms=conjugate_paradigm(infinitive, tense),
        )

    def as_rows(self) -> List[tuple]:
        """(subject pronoun, form) pairs, skipping empty slots."""
        return [
            (SUBJECT_PRONOUNS[slot], self.forms[slot])
            for slot in SLOTS
            if self.forms[slot]
        ]


class VerbResult(BaseModel):
    """
    Every paradigm of a verb plus its non-finite forms.

    Example response:
        {
            "infinitive": "hablar",
            "reflexive": false,
            "participle": "hablado",
            "gerund": "hablando",
            "paradigms": [
                {"tense": "PRESENT", "description": "Present",
                 "forms": ["hablo", "hablas", "habla", "hablamos", "habláis", "hablan"]},
                ...
            ]
        }
    """
    infinitive: str = Field(..., description="Infinitive as given by the caller")
    reflexive: bool = Field(False, description="True for -se infinitives")
    participle: str = Field(..., description="Past participle")
    gerund: str = Field(..., description="Gerund")
    paradigms: List[ParadigmResult] = Field(default_factory=list, description="One entry per tense")

    @classmethod
    def create(cls, infinitive: str) -> "VerbResult":
        _, _, is_reflexive = normalize_infinitive(infinitive)
        return cls(
            infinitive=infinitive,
            reflexive=is_reflexive,
            participle=participle(infinitive),
            gerund=gerund(infinitive),
            paradigms=[ParadigmResult.create(infinitive, tense) for tense in Tense],
        )
