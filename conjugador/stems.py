"""
Stem-change resolver.

Spanish stem-changing verbs diphthongize or raise their last stem vowel
when it is stressed:

    e -> ie    pensar   -> pienso
    e -> i     pedir    -> pido
    o -> ue    dormir   -> duermo   (u -> ue in jugar)

-ir verbs of all three classes also take a "weak" change in some
unstressed forms (e -> i, o -> u): pidió, durmiendo, sintamos.

Class membership comes from the exception lists in conjugador.lexicon,
matched by suffix so that prefixed verbs inherit the change
(devolver -> devuelvo, conseguir -> consigo).
"""

from enum import Enum
from typing import Optional

from conjugador.endings import ConjugationClass, classify
from conjugador.lexicon import (
    E_TO_I, E_TO_IE, O_TO_UE, STEM_CLASS_EXACT_ONLY, suffix_search,
)
from conjugador.orthography import VOWELS, is_silent_u, u_after


class StemChange(Enum):
    """Stem-change class of a verb."""
    E_TO_I = "e>i"
    E_TO_IE = "e>ie"
    O_TO_UE = "o>ue"


# Checked in this order; the first list containing a suffix wins
_CLASS_LISTS = (
    (StemChange.E_TO_I, E_TO_I),
    (StemChange.E_TO_IE, E_TO_IE),
    (StemChange.O_TO_UE, O_TO_UE),
)


def stem_class(verb: str) -> Optional[StemChange]:
    """
    Find the stem-change class of a verb.

    Args:
        verb: Normalized infinitive.

    Returns:
        StemChange member, or None for verbs that do not change.
    """
    for change, members in _CLASS_LISTS:
        if suffix_search(verb, members.__contains__, STEM_CLASS_EXACT_ONLY) >= 0:
            return change
    return None


def has_weak_stem(verb: str) -> bool:
    """True for -ir stem-changing verbs (pedir, sentir, dormir)."""
    return classify(verb) is ConjugationClass.I and stem_class(verb) is not None


def _target_vowel(verb: str, change: StemChange) -> str:
    if change is StemChange.O_TO_UE:
        return 'u' if verb.endswith("jugar") else 'o'
    return 'e'


def _find_stem_vowel(verb: str, target: str) -> int:
    """
    Index of the stem vowel nearest the ending, or -1.

    The scan starts right before the infinitive ending and stops at the
    first vowel (skipping the mute u of gue/gui). If that vowel is not the
    target the verb has no changeable vowel.
    """
    for i in range(len(verb) - 3, -1, -1):
        char = verb[i]
        if char not in VOWELS or is_silent_u(verb, i):
            continue
        return i if char == target else -1
    return -1


def stem_change(verb: str) -> str:
    """
    Apply the strong (stressed) stem change to an infinitive.

    Returns the whole infinitive with the changed vowel
    (pensar -> piensar, jugar -> juegar, agorar -> agüerar), or the verb
    unchanged when it is not a stem changer.
    """
    change = stem_class(verb)
    if change is None:
        return verb

    i = _find_stem_vowel(verb, _target_vowel(verb, change))
    if i < 0:
        return verb

    if change is StemChange.E_TO_I:
        replacement = "i"
    elif change is StemChange.E_TO_IE:
        replacement = "ie"
    elif verb[i] == 'u':
        replacement = "ue"
    else:
        replacement = u_after(verb, i) + "e"
    return verb[:i] + replacement + verb[i + 1:]


def weak_stem_change(verb: str) -> str:
    """
    Apply the weak -ir stem change (e -> i, o -> u).

    Returns the verb unchanged for -ar/-er verbs and non-changers.
    """
    if not has_weak_stem(verb):
        return verb

    change = stem_class(verb)
    i = _find_stem_vowel(verb, _target_vowel(verb, change))
    if i < 0:
        return verb
    return verb[:i] + ("u" if verb[i] == 'o' else "i") + verb[i + 1:]
