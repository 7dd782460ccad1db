"""
Participle and gerund resolvers used by the compound tenses.
"""

from conjugador.endings import ConjugationClass, classify, root
from conjugador.lexicon import (
    GERUND_IRREGULARS, GERUND_STEMS, PARTICIPLE_IRREGULARS,
)
from conjugador.orthography import vowel_before_ending
from conjugador.stems import has_weak_stem, weak_stem_change


def participle(verb: str, original_form: str = "") -> str:
    """
    Past participle of a normalized infinitive.

    Args:
        verb: Normalized infinitive (reir, not reír).
        original_form: Infinitive as written; an -ír spelling forces -ído.

    Returns:
        hablado, comido, leído, escrito, ...
    """
    found = PARTICIPLE_IRREGULARS.search(verb)
    if found:
        prefix, entry = found
        return entry.apply(prefix)

    if classify(verb) is ConjugationClass.A:
        return root(verb) + "ado"
    if verb[-3:-2] in ('a', 'e', 'o') or (original_form or verb).endswith("ír"):
        return root(verb) + "ído"
    return root(verb) + "ido"


def gerund(verb: str) -> str:
    """
    Gerund of a normalized infinitive.

    Returns:
        hablando, durmiendo, leyendo, yendo, ...
    """
    entry = GERUND_IRREGULARS.exact(verb)
    if entry:
        return entry.value

    found = GERUND_STEMS.search(verb)
    if found:
        prefix, entry = found
        return entry.apply(prefix)

    if classify(verb) is ConjugationClass.A:
        return root(verb) + "ando"
    if has_weak_stem(verb):
        return root(weak_stem_change(verb)) + "iendo"
    if vowel_before_ending(verb):
        return root(verb) + "yendo"
    return root(verb) + "iendo"
