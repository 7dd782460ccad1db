"""
Ending tables and the verb classifier.

Every table is a tuple of exactly six suffixes in canonical slot order
(yo, tú, él, nosotros, vosotros, ellos).
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from conjugador.constants import Tense

EndingTable = Tuple[str, str, str, str, str, str]


# ============================================================================
# Verb Classifier
# ============================================================================

class ConjugationClass(Enum):
    """Conjugation class derived from the infinitive ending."""
    A = "ar"
    E = "er"
    I = "ir"


def root(verb: str) -> str:
    """Infinitive without its two-letter ending."""
    return verb[:-2]


def theme_vowel(verb: str) -> str:
    """The vowel of the infinitive ending: a, e, i (or í)."""
    return verb[-2]


def classify(verb: str) -> ConjugationClass:
    """
    Derive the conjugation class from the infinitive.

    Args:
        verb: Infinitive ending in ar/er/ir (or the accented -ír).

    Returns:
        ConjugationClass.A, E or I.
    """
    vowel = theme_vowel(verb)
    if vowel == 'a':
        return ConjugationClass.A
    if vowel == 'e':
        return ConjugationClass.E
    return ConjugationClass.I


# ============================================================================
# Simple Tenses
# ============================================================================

PRESENT_AR: EndingTable = ("o", "as", "a", "amos", "áis", "an")
PRESENT_ER: EndingTable = ("o", "es", "e", "emos", "éis", "en")
PRESENT_IR: EndingTable = ("o", "es", "e", "imos", "ís", "en")

PRETERITE_AR: EndingTable = ("é", "aste", "ó", "amos", "asteis", "aron")
PRETERITE_ER_IR: EndingTable = ("í", "iste", "ió", "imos", "isteis", "ieron")

# Strong preterites (tuve, pude, hice)
PRETERITE_STRONG: EndingTable = ("e", "iste", "o", "imos", "isteis", "ieron")
# Strong preterites whose stem ends in j (dije, traje, conduje)
PRETERITE_STRONG_J: EndingTable = ("e", "iste", "o", "imos", "isteis", "eron")
# Vowel before the ending (leí, leyó)
PRETERITE_ADD_Y: EndingTable = ("í", "íste", "yó", "ímos", "ísteis", "yeron")
# -uir verbs (construí, construyó)
PRETERITE_UIR: EndingTable = ("í", "iste", "yó", "imos", "isteis", "yeron")

IMPERFECT_AR: EndingTable = ("aba", "abas", "aba", "ábamos", "abais", "aban")
IMPERFECT_ER_IR: EndingTable = ("ía", "ías", "ía", "íamos", "íais", "ían")

FUTURE: EndingTable = ("é", "ás", "á", "emos", "éis", "án")
CONDITIONAL: EndingTable = ("ía", "ías", "ía", "íamos", "íais", "ían")

SUBJUNCTIVE_AR: EndingTable = ("e", "es", "e", "emos", "éis", "en")
SUBJUNCTIVE_ER_IR: EndingTable = ("a", "as", "a", "amos", "áis", "an")

IMPERFECT_SUBJUNCTIVE_AR: EndingTable = ("ara", "aras", "ara", "áramos", "arais", "aran")
IMPERFECT_SUBJUNCTIVE_ER_IR: EndingTable = ("iera", "ieras", "iera", "iéramos", "ierais", "ieran")
# After y or j the i of -iera is absorbed (leyera, dijera)
IMPERFECT_SUBJUNCTIVE_ERA: EndingTable = ("era", "eras", "era", "éramos", "erais", "eran")


# Maps: tense -> (ar, er, ir) ending tables
ENDINGS: Mapping[Tense, Tuple[EndingTable, EndingTable, EndingTable]] = MappingProxyType({
    Tense.PRESENT: (PRESENT_AR, PRESENT_ER, PRESENT_IR),
    Tense.PRETERITE: (PRETERITE_AR, PRETERITE_ER_IR, PRETERITE_ER_IR),
    Tense.IMPERFECT: (IMPERFECT_AR, IMPERFECT_ER_IR, IMPERFECT_ER_IR),
    Tense.FUTURE: (FUTURE, FUTURE, FUTURE),
    Tense.CONDITIONAL: (CONDITIONAL, CONDITIONAL, CONDITIONAL),
    Tense.PRESENT_SUBJUNCTIVE: (SUBJUNCTIVE_AR, SUBJUNCTIVE_ER_IR, SUBJUNCTIVE_ER_IR),
    Tense.IMPERFECT_SUBJUNCTIVE: (
        IMPERFECT_SUBJUNCTIVE_AR, IMPERFECT_SUBJUNCTIVE_ER_IR, IMPERFECT_SUBJUNCTIVE_ER_IR
    ),
})

_CLASS_ORDER = {ConjugationClass.A: 0, ConjugationClass.E: 1, ConjugationClass.I: 2}


def endings_for(tense: Tense, verb: str) -> EndingTable:
    """
    Get the ending table of a simple tense for a verb.

    Args:
        tense: A simple (non-compound) tense.
        verb: Normalized infinitive.

    Returns:
        Six-suffix tuple.
    """
    return ENDINGS[tense][_CLASS_ORDER[classify(verb)]]


# ============================================================================
# Auxiliary Tables (compound tenses)
# ============================================================================

HABER_AUXILIARIES: Mapping[Tense, EndingTable] = MappingProxyType({
    Tense.PRESENT_PERFECT: ("he", "has", "ha", "hemos", "habéis", "han"),
    Tense.PLUPERFECT_PERFECT: ("había", "habías", "había", "habíamos", "habíais", "habían"),
    Tense.FUTURE_PERFECT: ("habré", "habrás", "habrá", "habremos", "habréis", "habrán"),
    Tense.CONDITIONAL_PERFECT: ("habría", "habrías", "habría", "habríamos", "habríais", "habrían"),
    Tense.SUBJUNCTIVE_PERFECT: ("haya", "hayas", "haya", "hayamos", "hayáis", "hayan"),
    Tense.IMPERFECT_SUBJUNCTIVE_PERFECT: (
        "hubiera", "hubieras", "hubiera", "hubiéramos", "hubierais", "hubieran"
    ),
})

ESTAR_AUXILIARIES: Mapping[Tense, EndingTable] = MappingProxyType({
    Tense.PRESENT_PROGRESSIVE: ("estoy", "estás", "está", "estamos", "estáis", "están"),
    Tense.IMPERFECT_PROGRESSIVE: ("estaba", "estabas", "estaba", "estábamos", "estabais", "estaban"),
    Tense.PRETERITE_PROGRESSIVE: (
        "estuve", "estuviste", "estuvo", "estuvimos", "estuvisteis", "estuvieron"
    ),
    Tense.FUTURE_PROGRESSIVE: ("estaré", "estarás", "estará", "estaremos", "estaréis", "estarán"),
})
