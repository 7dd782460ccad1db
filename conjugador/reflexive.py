"""
Reflexive pronoun placement.

Pronouns precede the verb in every form except the affirmative commands,
where they are attached to the end and the stress mark moves so that the
stressed syllable stays the same:

    levanta  + te  -> levántate
    levantemos + nos -> levantémonos   (final -s dropped)
    levantad + os  -> levantaos        (final -d dropped)
"""

from conjugador.constants import FIRST_PLURAL, SECOND_PLURAL
from conjugador.orthography import mark_stress, stressed_vowel
from conjugador.request import ConjugationRequest


def proclitic(request: ConjugationRequest, form: str) -> str:
    """Place the request's pronoun (if any) before a form: me levanto."""
    pronoun = request.pronoun
    if not pronoun or not form:
        return form
    return f"{pronoun} {form}"


def enclitic(request: ConjugationRequest, form: str) -> str:
    """
    Attach the request's pronoun to an affirmative command.

    Args:
        request: The command request.
        form: Bare command form (levanta, levantemos, levantad).

    Returns:
        Form with the pronoun appended and the written accent adjusted.
    """
    pronoun = request.pronoun
    if not pronoun or not form:
        return form

    stressed = stressed_vowel(form)
    stem = form
    if request.person_number == FIRST_PLURAL and stem.endswith("s"):
        stem = stem[:-1]
    elif request.person_number == SECOND_PLURAL and stem.endswith("d"):
        stem = stem[:-1]

    attached = stem + pronoun
    if stressed is None:
        return attached
    return mark_stress(attached, stressed)
