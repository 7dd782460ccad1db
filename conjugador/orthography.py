"""
Spanish orthography handling for conjugador.

Provides vowel classification, spelling-preserving consonant substitution,
the z/zc alternation, u/ü selection, the final fix pass applied to every
conjugated form, and the syllable/stress helpers used when an enclitic
pronoun moves the stress.
"""

import re
from typing import List, Optional

# ============================================================================
# Vowel Tables
# ============================================================================

STRONG_VOWELS = "aeoáéó"
WEAK_VOWELS = "iuíúü"
VOWELS = STRONG_VOWELS + WEAK_VOWELS

# Unaccented vowel -> accented vowel
ACCENTS = {
    'a': 'á',
    'e': 'é',
    'i': 'í',
    'o': 'ó',
    'u': 'ú',
}

# Accented vowel -> unaccented vowel
UNACCENTED = {v: k for k, v in ACCENTS.items()}

ACCENTED_VOWELS = "".join(ACCENTS.values())

FRONT_VOWELS = "eiéí"


def add_accent(char: str) -> str:
    """Accent a single vowel; other characters pass through."""
    return ACCENTS.get(char, char)


def remove_accent(char: str) -> str:
    """Strip the accent from a single vowel."""
    return UNACCENTED.get(char, char)


def accent_first_vowel(text: str) -> str:
    """
    Accent the first plain vowel of a word.

    Used for prefixed short imperatives: ten -> detén, pon -> propón.
    """
    for i, char in enumerate(text):
        if char in ACCENTS:
            return text[:i] + ACCENTS[char] + text[i + 1:]
    return text


def is_silent_u(word: str, i: int) -> bool:
    """True if word[i] is the mute u of que/qui/gue/gui."""
    return (
        word[i] == 'u'
        and 0 < i < len(word) - 1
        and word[i - 1] in 'qg'
        and word[i + 1] in FRONT_VOWELS
    )


def vowel_before_ending(verb: str) -> bool:
    """
    Check whether the letter before the infinitive ending is a vowel.

    The mute u of -guir/-quir verbs does not count: distinguir keeps
    -iendo, while construir takes -yendo.
    """
    if len(verb) < 3:
        return False
    i = len(verb) - 3
    return verb[i] in VOWELS and not is_silent_u(verb, i)


# ============================================================================
# Consonant Preservation
# ============================================================================

def preserve_consonant(verb: str) -> str:
    """
    Respell an infinitive's final consonant before a front-vowel ending.

    -car -> -quar, -gar -> -guar, -zar -> -car, -guar -> -güar, so that
    root(result) + 'e' keeps the original sound (busque, pague, empiece,
    averigüe).

    Args:
        verb: Infinitive (possibly already stem-changed).

    Returns:
        Infinitive with the respelled stem and the original ending.
    """
    if len(verb) < 3:
        return verb

    if verb.endswith("guar"):
        stem = verb[:-4] + "gü"
    elif verb.endswith("car"):
        stem = verb[:-3] + "qu"
    elif verb.endswith("gar"):
        stem = verb[:-3] + "gu"
    elif verb.endswith("zar"):
        stem = verb[:-3] + "c"
    else:
        stem = verb[:-2]
    return stem + verb[-2:]


def u_after(word: str, i: int) -> str:
    """
    The u to write at position i: ü after g (agüero), plain u otherwise.
    """
    if i > 0 and word[i - 1] == 'g':
        return "ü"
    return "u"


# ============================================================================
# -cer / -cir Alternation
# ============================================================================

def ends_with_cer_cir(verb: str) -> bool:
    return verb[-3:] in ("cer", "cir")


def subst_zc(verb: str) -> str:
    """
    Stem of a -cer/-cir verb before a back vowel.

    After n or r the c becomes z (venzo, tuerzo, esparzo); otherwise zc
    is inserted (conozco, conduzco).
    """
    base = verb[:-3]
    pre = verb[-4] if len(verb) > 3 else ''
    if pre in ('n', 'r'):
        return base + "z"
    return base + "zc"


# ============================================================================
# -uar / -iar / -uir Classes
# ============================================================================

# -iar verbs whose i carries the stress in the singular (envío, confío).
# Other -iar verbs (cambiar, estudiar) keep a diphthong.
IAR_ACCENTED = frozenset([
    "enviar", "reenviar", "confiar", "desconfiar", "fiar", "variar", "guiar",
    "criar", "espiar", "resfriar", "enfriar", "desviar", "ampliar", "vaciar",
    "esquiar", "liar", "averiar", "contrariar", "desafiar", "extraviar",
    "fotografiar", "telegrafiar", "hastiar", "ansiar", "chirriar", "piar",
    "rociar", "porfiar", "expiar", "inventariar", "malcriar", "amnistiar",
])


def ends_with_uar(verb: str) -> bool:
    """-uar verbs that stress the u (continúo); -guar and -quar excluded."""
    return verb.endswith("uar") and not verb.endswith(("guar", "quar"))


def ends_with_uir(verb: str) -> bool:
    """-uir verbs with a pronounced u (construir); -guir and -quir excluded."""
    return verb.endswith("uir") and not verb.endswith(("guir", "quir"))


def is_accented_iar(verb: str) -> bool:
    return verb in IAR_ACCENTED


# ============================================================================
# Final Fix Pass
# ============================================================================

# ñ and ll already carry the palatal glide: gruñió -> gruñó, bulliendo -> bullendo
_PALATAL_GLIDE = re.compile(r'(ñ|ll)i(?=[aeoáéó])')


def fix_orthography(form: str) -> str:
    """
    Collapse letter sequences that are never valid Spanish spellings.

    Applied to every form produced by the engine.
    """
    return _PALATAL_GLIDE.sub(r'\1', form)


# ============================================================================
# Syllables and Stress
# ============================================================================

def _vowel_indices(word: str) -> List[int]:
    return [
        i for i, char in enumerate(word)
        if char in VOWELS and not is_silent_u(word, i)
    ]


def syllable_nuclei(word: str) -> List[List[int]]:
    """
    Group the vowel positions of a word into syllable nuclei.

    Adjacent vowels form a diphthong unless both are strong (le-er) or
    one of them is an accented weak vowel (rí-e).

    Returns:
        List of nuclei, each a list of character indices.
    """
    nuclei: List[List[int]] = []
    prev = None
    for i in _vowel_indices(word):
        char = word[i]
        if prev is not None and prev == i - 1:
            prev_char = word[prev]
            hiatus = (
                (prev_char in STRONG_VOWELS and char in STRONG_VOWELS)
                or char in "íú"
                or prev_char in "íú"
            )
            if not hiatus:
                nuclei[-1].append(i)
                prev = i
                continue
        nuclei.append([i])
        prev = i
    return nuclei


def _nucleus_peak(word: str, nucleus: List[int]) -> int:
    """The vowel that carries the stress inside a nucleus."""
    for i in nucleus:
        if word[i] in STRONG_VOWELS or word[i] in "íú":
            return i
    return nucleus[-1]


def stressed_vowel(word: str) -> Optional[int]:
    """
    Index of the stressed vowel of a word.

    A written accent wins; otherwise words ending in a vowel, n or s are
    stressed on the penultimate syllable and all others on the last.
    """
    for i in range(len(word) - 1, -1, -1):
        if word[i] in ACCENTED_VOWELS:
            return i

    nuclei = syllable_nuclei(word)
    if not nuclei:
        return None
    if len(nuclei) == 1:
        return _nucleus_peak(word, nuclei[0])
    if word[-1] in VOWELS or word[-1] in 'ns':
        return _nucleus_peak(word, nuclei[-2])
    return _nucleus_peak(word, nuclei[-1])


def mark_stress(word: str, index: int) -> str:
    """
    Make the vowel at index carry the stress with the fewest accents.

    Accents on strong vowels are dropped first; an accent is written on
    word[index] only if the default stress of the word falls elsewhere.
    Accented weak vowels are kept since they break a diphthong.
    """
    plain = "".join(
        UNACCENTED[char] if char in "áéó" else char for char in word
    )
    if plain[index] in "íú":
        return plain
    if stressed_vowel(plain) == index:
        return plain
    return plain[:index] + add_accent(plain[index]) + plain[index + 1:]
