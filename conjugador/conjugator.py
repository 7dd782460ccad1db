"""
Conjugation facade.

    >>> from conjugador import conjugate, Tense
    >>> conjugate("hablar", Tense.PRESENT, 0)
    'hablo'
    >>> conjugate("levantarse", "commands_affirmative", 1)
    'levántate'
    >>> conjugate("pensar", 1, 0, plural=True)
    'pensamos'
"""

import logging
from typing import Dict, List, Union

from conjugador.constants import SLOTS, Tense
from conjugador.nonfinite import gerund as _gerund
from conjugador.nonfinite import participle as _participle
from conjugador.orthography import fix_orthography
from conjugador.request import ConjugationRequest, build_request, normalize_infinitive
from conjugador.tenses import STRATEGIES

logger = logging.getLogger(__name__)

TenseLike = Union[Tense, int, str]


def _run(request: ConjugationRequest, tense: Tense) -> str:
    form = STRATEGIES[tense](request)
    return fix_orthography(form)


def conjugate(infinitive: str, tense: TenseLike, person: int, plural: bool = False) -> str:
    """
    Conjugate a Spanish verb.

    Args:
        infinitive: Infinitive, optionally reflexive (levantarse) or with
            an accented -ír ending (reír).
        tense: Tense member, its integer value or its name.
        person: 0 (first), 1 (second) or 2 (third).
        plural: Plural number.

    Returns:
        The conjugated form, pronouns included ("me levanto", "no hables").
        First-person-singular commands have no form and return "".

    Raises:
        InvalidInfinitive: Malformed infinitive.
        InvalidPerson: Person outside 0..2.
        InvalidTense: Unknown tense.
    """
    tense = Tense.parse(tense)
    request = build_request(infinitive, person, plural)
    form = _run(request, tense)
    logger.debug(f"{infinitive} {tense.name} slot {request.person_number}: {form!r}")
    return form


def conjugate_paradigm(infinitive: str, tense: TenseLike) -> List[str]:
    """
    All six forms of a tense in slot order (yo, tú, él, nosotros,
    vosotros, ellos).
    """
    tense = Tense.parse(tense)
    request = build_request(infinitive, 0)
    return [_run(request.with_slot(slot), tense) for slot in SLOTS]


def conjugate_all(infinitive: str) -> Dict[Tense, List[str]]:
    """Every paradigm of a verb, keyed by tense."""
    return {tense: conjugate_paradigm(infinitive, tense) for tense in Tense}


def participle(infinitive: str) -> str:
    """Past participle of an infinitive (hablado, escrito, leído)."""
    verb, original_form, _ = normalize_infinitive(infinitive)
    return fix_orthography(_participle(verb, original_form))


def gerund(infinitive: str) -> str:
    """Gerund of an infinitive (hablando, durmiendo, yendo)."""
    verb, _, _ = normalize_infinitive(infinitive)
    return fix_orthography(_gerund(verb))
