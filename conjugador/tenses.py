"""
Tense strategies for conjugador.

One function per tense, each taking a ConjugationRequest and returning the
form for its slot (reflexive pronoun included). Every strategy follows the
same precedence, first match wins:

    1. whole-verb override from the irregular lexicon
    2. suffix-matched irregular stem (detener -> detuv-)
    3. first-person-singular irregularity (hago, conozco)
    4. class-specific spelling rules (-cer/-cir, -uir, -uar, -iar, -guar)
    5. regular stem + class endings, with stem change and
       -car/-gar/-zar consonant preservation

STRATEGIES maps every Tense to its function.
"""

from functools import partial
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from conjugador import endings as E
from conjugador.constants import (
    FIRST_SINGULAR, NEGATION, SECOND_PLURAL, SECOND_SINGULAR, THIRD_PLURAL,
    THIRD_SINGULAR, UNSTRESSED_STEM_SLOTS, Tense,
)
from conjugador.endings import ConjugationClass, classify, endings_for, root
from conjugador.lexicon import (
    AFFIRMATIVE_REFLEXIVE_IRREGULARS, FUTURE_STEMS, IMPERFECT_SUBJUNCTIVE_STEMS,
    OVERRIDES, PRETERITE_STEMS, TU_IRREGULARS, YO_CHANGES, IrregularEntry,
)
from conjugador.nonfinite import gerund, participle
from conjugador.orthography import (
    accent_first_vowel, ends_with_cer_cir, ends_with_uar, ends_with_uir,
    is_accented_iar, preserve_consonant, subst_zc, vowel_before_ending,
)
from conjugador.reflexive import enclitic, proclitic
from conjugador.request import ConjugationRequest
from conjugador.stems import has_weak_stem, stem_change, weak_stem_change

Strategy = Callable[[ConjugationRequest], str]


# ============================================================================
# Shared Helpers
# ============================================================================

def _override(tense: Tense, request: ConjugationRequest) -> Optional[str]:
    entry = OVERRIDES[tense].exact(request.infinitive)
    if entry is None:
        return None
    return proclitic(request, entry.form(request.person_number))


def _yo_form(verb: str, prefix: str, entry: IrregularEntry) -> str:
    """
    First-person-singular form from a yo-change entry.

    The stem change is applied to the prefix, so a -gir or -guir family
    member keeps its own stem vowel change (elijo, consigo).
    """
    changed = stem_change(verb)
    if changed.endswith(entry.trigger):
        prefix = changed[:-len(entry.trigger)]
    return prefix + entry.form(FIRST_SINGULAR)


def _stressed_vowel_stem(verb: str, vowel: str) -> str:
    """Root with its last vowel replaced by an accented one (continú, enví)."""
    return root(verb)[:-1] + vowel


def _ducir(verb: str) -> bool:
    return verb.endswith("ducir")


def _uses_ending_stress(slot: int) -> bool:
    return slot in UNSTRESSED_STEM_SLOTS


# ============================================================================
# Present
# ============================================================================

def present(request: ConjugationRequest) -> str:
    """Present indicative: hablo, pienso, conozco, construyo."""
    form = _override(Tense.PRESENT, request)
    if form is not None:
        return form

    verb, slot = request.infinitive, request.person_number
    ending = request.at_slot(endings_for(Tense.PRESENT, verb))

    found = YO_CHANGES.search(verb)
    if found:
        prefix, entry = found
        if slot == FIRST_SINGULAR:
            form = _yo_form(verb, prefix, entry)
        elif _uses_ending_stress(slot):
            form = prefix + root(entry.trigger) + ending
        else:
            form = root(stem_change(verb)) + ending
    elif ends_with_cer_cir(verb):
        if slot == FIRST_SINGULAR:
            form = subst_zc(stem_change(verb)) + ending
        elif _uses_ending_stress(slot):
            form = root(verb) + ending
        else:
            form = root(stem_change(verb)) + ending
    elif _uses_ending_stress(slot):
        form = root(verb) + ending
    elif ends_with_uir(verb):
        form = verb[:-2] + "y" + ending
    elif ends_with_uar(verb):
        form = _stressed_vowel_stem(verb, "ú") + ending
    elif is_accented_iar(verb):
        form = _stressed_vowel_stem(verb, "í") + ending
    else:
        form = root(stem_change(verb)) + ending

    return proclitic(request, form)


# ============================================================================
# Preterite
# ============================================================================

def preterite(request: ConjugationRequest) -> str:
    """Preterite: hablé, tuve, dijeron, pidió, leyó, construyó."""
    form = _override(Tense.PRETERITE, request)
    if form is not None:
        return form

    verb, slot = request.infinitive, request.person_number
    conj_class = classify(verb)

    found = PRETERITE_STEMS.search(verb)
    if found:
        prefix, entry = found
        stem = entry.apply(prefix)
        table = E.PRETERITE_STRONG_J if stem.endswith("j") else E.PRETERITE_STRONG
        ending = request.at_slot(table)
        # hic- + o -> hizo
        if stem.endswith("c") and ending.startswith("o"):
            stem = stem[:-1] + "z"
        form = stem + ending
    elif _ducir(verb):
        form = verb[:-3] + "j" + request.at_slot(E.PRETERITE_STRONG_J)
    elif has_weak_stem(verb) and slot in (THIRD_SINGULAR, THIRD_PLURAL):
        form = root(weak_stem_change(verb)) + request.at_slot(E.PRETERITE_ER_IR)
    elif conj_class is not ConjugationClass.A and ends_with_uir(verb):
        form = root(verb) + request.at_slot(E.PRETERITE_UIR)
    elif conj_class is not ConjugationClass.A and vowel_before_ending(verb):
        form = root(verb) + request.at_slot(E.PRETERITE_ADD_Y)
    else:
        ending = request.at_slot(endings_for(Tense.PRETERITE, verb))
        if slot == FIRST_SINGULAR:
            form = root(preserve_consonant(verb)) + ending
        else:
            form = root(verb) + ending

    return proclitic(request, form)


# ============================================================================
# Imperfect
# ============================================================================

def imperfect(request: ConjugationRequest) -> str:
    """Imperfect indicative: hablaba, comía, era, iba, veía."""
    form = _override(Tense.IMPERFECT, request)
    if form is not None:
        return form

    verb = request.infinitive
    form = root(verb) + request.at_slot(endings_for(Tense.IMPERFECT, verb))
    return proclitic(request, form)


# ============================================================================
# Future / Conditional
# ============================================================================

def _future_stem(verb: str) -> str:
    found = FUTURE_STEMS.search(verb)
    if found:
        prefix, entry = found
        return entry.apply(prefix)
    return verb


def future(request: ConjugationRequest) -> str:
    """Future: hablaré, tendré, haré, dirá."""
    form = _future_stem(request.infinitive) + request.at_slot(E.FUTURE)
    return proclitic(request, form)


def conditional(request: ConjugationRequest) -> str:
    """Conditional: hablaría, tendría, haría."""
    form = _future_stem(request.infinitive) + request.at_slot(E.CONDITIONAL)
    return proclitic(request, form)


# ============================================================================
# Present Subjunctive
# ============================================================================

def present_subjunctive(request: ConjugationRequest) -> str:
    """Present subjunctive: hable, piense, tenga, conozca, averigüe."""
    form = _override(Tense.PRESENT_SUBJUNCTIVE, request)
    if form is not None:
        return form

    verb, slot = request.infinitive, request.person_number
    ending = request.at_slot(endings_for(Tense.PRESENT_SUBJUNCTIVE, verb))

    found = YO_CHANGES.search(verb)
    if found:
        prefix, entry = found
        form = _yo_form(verb, prefix, entry)[:-1] + ending
    elif ends_with_cer_cir(verb):
        form = subst_zc(verb) + ending
    elif ends_with_uir(verb):
        form = verb[:-2] + "y" + ending
    elif ends_with_uar(verb):
        if _uses_ending_stress(slot):
            form = root(verb) + ending
        else:
            form = _stressed_vowel_stem(verb, "ú") + ending
    elif is_accented_iar(verb):
        if _uses_ending_stress(slot):
            form = root(verb) + ending
        else:
            form = _stressed_vowel_stem(verb, "í") + ending
    elif verb.endswith("guar"):
        form = verb[:-3] + "ü" + ending
    elif _uses_ending_stress(slot):
        form = root(preserve_consonant(weak_stem_change(verb))) + ending
    else:
        form = root(preserve_consonant(stem_change(verb))) + ending

    return proclitic(request, form)


# ============================================================================
# Imperfect Subjunctive
# ============================================================================

def imperfect_subjunctive(request: ConjugationRequest) -> str:
    """Imperfect subjunctive (-ra form): hablara, tuviera, dijera, leyera."""
    form = _override(Tense.IMPERFECT_SUBJUNCTIVE, request)
    if form is not None:
        return form

    verb = request.infinitive
    iera = request.at_slot(E.IMPERFECT_SUBJUNCTIVE_ER_IR)
    era = request.at_slot(E.IMPERFECT_SUBJUNCTIVE_ERA)

    special = IMPERFECT_SUBJUNCTIVE_STEMS.search(verb)
    strong = PRETERITE_STEMS.search(verb)
    if special:
        prefix, entry = special
        form = entry.apply(prefix) + iera
    elif strong:
        prefix, entry = strong
        stem = entry.apply(prefix)
        form = stem + (era if stem.endswith("j") else iera)
    elif _ducir(verb):
        form = verb[:-3] + "j" + era
    elif has_weak_stem(verb):
        form = root(weak_stem_change(verb)) + iera
    elif classify(verb) is not ConjugationClass.A and vowel_before_ending(verb):
        form = root(verb) + "y" + era
    else:
        form = root(verb) + request.at_slot(endings_for(Tense.IMPERFECT_SUBJUNCTIVE, verb))

    return proclitic(request, form)


# ============================================================================
# Commands
# ============================================================================

def _tu_command(request: ConjugationRequest) -> str:
    verb = request.infinitive
    found = None
    # Compounds of decir are regular: predice, contradice
    if verb == "decir" or not verb.endswith("decir"):
        found = TU_IRREGULARS.search(verb)
    if found:
        prefix, entry = found
        short = entry.form(SECOND_SINGULAR)
        if prefix and short.endswith("n"):
            short = accent_first_vowel(short)
        return prefix + short
    return present(request.bare().with_slot(THIRD_SINGULAR))


def commands_affirmative(request: ConjugationRequest) -> str:
    """
    Affirmative imperative: habla, hable, hablemos, hablad, hablen.

    There is no first-person-singular command; slot 0 yields "".
    Reflexive pronouns are attached to the end (levántate).
    """
    slot = request.person_number
    if slot == FIRST_SINGULAR:
        return ""

    verb = request.infinitive
    if request.is_reflexive:
        entry = AFFIRMATIVE_REFLEXIVE_IRREGULARS.exact(verb)
        if entry is not None:
            return entry.form(slot - 1)

    entry = OVERRIDES[Tense.COMMANDS_AFFIRMATIVE].exact(verb)
    if entry is not None:
        form = entry.form(slot - 1)
    elif slot == SECOND_SINGULAR:
        form = _tu_command(request)
    elif slot == SECOND_PLURAL:
        form = request.original_form[:-1] + "d"
    else:
        form = present_subjunctive(request.bare())

    return enclitic(request, form)


def commands_negative(request: ConjugationRequest) -> str:
    """Negative imperative: no hables, no te levantes."""
    if request.person_number == FIRST_SINGULAR:
        return ""
    return f"{NEGATION} {present_subjunctive(request)}"


# ============================================================================
# Compound Tenses
# ============================================================================

def perfect(tense: Tense, request: ConjugationRequest) -> str:
    """haber + participle: he hablado, me había levantado."""
    auxiliary = request.at_slot(E.HABER_AUXILIARIES[tense])
    form = f"{auxiliary} {participle(request.infinitive, request.original_form)}"
    return proclitic(request, form)


def progressive(tense: Tense, request: ConjugationRequest) -> str:
    """estar + gerund: estoy hablando, me estaba levantando."""
    auxiliary = request.at_slot(E.ESTAR_AUXILIARIES[tense])
    form = f"{auxiliary} {gerund(request.infinitive)}"
    return proclitic(request, form)


# ============================================================================
# Dispatch
# ============================================================================

STRATEGIES: Mapping[Tense, Strategy] = MappingProxyType({
    Tense.PRESENT: present,
    Tense.PRETERITE: preterite,
    Tense.IMPERFECT: imperfect,
    Tense.FUTURE: future,
    Tense.CONDITIONAL: conditional,
    Tense.PRESENT_SUBJUNCTIVE: present_subjunctive,
    Tense.IMPERFECT_SUBJUNCTIVE: imperfect_subjunctive,
    Tense.COMMANDS_AFFIRMATIVE: commands_affirmative,
    Tense.COMMANDS_NEGATIVE: commands_negative,
    **{tense: partial(perfect, tense) for tense in E.HABER_AUXILIARIES},
    **{tense: partial(progressive, tense) for tense in E.ESTAR_AUXILIARIES},
})
