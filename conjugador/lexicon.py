"""
Irregular lexicon for conjugador.

Every table maps a trigger string to an IrregularEntry. A trigger is either
a whole verb (ser, ir) or a verb standing for a family of prefixed verbs
that share its irregularity (tener covers detener, mantener, obtener).
Family triggers are found by a longest-suffix search.

Tables are built once at import and exposed read-only.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple, Union

from conjugador.constants import Tense


# ============================================================================
# Entry Definition
# ============================================================================

class IrregularKind(Enum):
    """How an entry overrides the regular paradigm."""
    FORMS = "forms"   # full 6-form (or 5-form for commands) override
    STEM = "stem"     # replacement for the trigger, regular endings follow
    SLOT = "slot"     # replacement form for a single slot


@dataclass(frozen=True)
class IrregularEntry:
    """
    A single irregular lexicon entry.

    Attributes:
        trigger: Verb or family suffix the entry applies to.
        kind: Override kind.
        value: Tuple of forms for FORMS, a string for STEM and SLOT.
        slot: Slot index for SLOT entries.
    """
    trigger: str
    kind: IrregularKind
    value: Union[Tuple[str, ...], str]
    slot: Optional[int] = None

    def form(self, slot: int) -> str:
        """Form for a slot of a FORMS entry, or the form of a SLOT entry."""
        if self.kind is IrregularKind.SLOT:
            if slot != self.slot:
                raise ValueError(f"{self.trigger!r} entry only covers slot {self.slot}")
            return self.value
        return self.value[slot]

    def apply(self, prefix: str) -> str:
        """Prefix + replacement for STEM and SLOT entries (de + tuv)."""
        return prefix + self.value


def _forms(trigger: str, *forms: str) -> IrregularEntry:
    return IrregularEntry(trigger, IrregularKind.FORMS, tuple(forms))


def _stem(trigger: str, stem: str) -> IrregularEntry:
    return IrregularEntry(trigger, IrregularKind.STEM, stem)


def _slot(trigger: str, slot: int, form: str) -> IrregularEntry:
    return IrregularEntry(trigger, IrregularKind.SLOT, form, slot)


# ============================================================================
# Suffix Search
# ============================================================================

# Verbs with these endings only match a mapping table as a whole verb:
# mandar is not a dar-family verb and volver not a ver-family verb.
MAPPING_EXACT_ONLY = ("dar", "ver")

# Verbs with these endings only match a stem-class list as a whole verb:
# conjugar, deshelar, fregar and presentar would otherwise hit jugar,
# helar, regar and sentar.
STEM_CLASS_EXACT_ONLY = ("jugar", "helar", "regar", "sentar")


def suffix_search(
    verb: str,
    contains: Callable[[str], bool],
    exact_only: Tuple[str, ...] = MAPPING_EXACT_ONLY,
) -> int:
    """
    Find where the longest known trigger begins inside a verb.

    Scans candidate suffixes from the whole verb downwards. Verbs ending in
    one of the exact_only endings are only tried as a whole.

    Args:
        verb: Normalized infinitive.
        contains: Membership test for a candidate suffix.
        exact_only: Endings that cap the search depth at the whole verb.

    Returns:
        Start index of the matching suffix, or -1.
    """
    limit = 1 if verb.endswith(exact_only) else len(verb)
    for i in range(limit):
        if contains(verb[i:]):
            return i
    return -1


class IrregularTable:
    """
    Read-only trigger -> IrregularEntry mapping with suffix lookup.
    """

    def __init__(
        self,
        name: str,
        entries: Iterable[IrregularEntry],
        exact_only: Tuple[str, ...] = MAPPING_EXACT_ONLY,
    ):
        table: Dict[str, IrregularEntry] = {}
        for entry in entries:
            if entry.trigger in table:
                raise ValueError(f"Duplicate trigger {entry.trigger!r} in {name} table")
            table[entry.trigger] = entry
        self.name = name
        self.exact_only = tuple(exact_only)
        self._entries = MappingProxyType(table)

    def exact(self, verb: str) -> Optional[IrregularEntry]:
        """Whole-verb lookup."""
        return self._entries.get(verb)

    def search(self, verb: str) -> Optional[Tuple[str, IrregularEntry]]:
        """
        Longest-suffix lookup.

        Returns:
            (prefix, entry) for the first (longest) matching trigger, or None.
            prefix is the part of the verb before the trigger.
        """
        i = suffix_search(verb, self._entries.__contains__, self.exact_only)
        if i < 0:
            return None
        return verb[:i], self._entries[verb[i:]]

    def __contains__(self, verb: str) -> bool:
        return verb in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"IrregularTable({self.name!r}, {len(self)} entries)"


# ============================================================================
# Stem-Change Classes
# ============================================================================

# Front-vowel raising: pedir -> pido
E_TO_I = frozenset([
    "pedir", "decir", "seguir", "servir", "competir", "elegir", "corregir",
    "vestir", "freir", "gemir", "repetir", "derretir", "despedir", "medir",
    "regir", "reñir", "teñir", "impedir", "rendir", "expedir", "ceñir",
])

# Front-vowel diphthongization: pensar -> pienso
E_TO_IE = frozenset([
    "pensar", "empezar", "comenzar", "preferir", "acertar", "tener", "venir",
    "cerrar", "mentir", "fregar", "hervir", "confesar", "defender", "negar",
    "sentir", "querer", "advertir", "alentar", "apretar", "arrepentir",
    "atender", "atravesar", "convertir", "descender", "despertar", "divertir",
    "encender", "entender", "extender", "gobernar", "helar", "herir",
    "invertir", "merendar", "nevar", "perder", "quebrar", "recomendar",
    "regar", "requerir", "sentar", "sugerir", "tropezar",
])

# Back-vowel diphthongization: dormir -> duermo
O_TO_UE = frozenset([
    "dormir", "almorzar", "morir", "probar", "mover", "colgar", "mostrar",
    "contar", "costar", "recordar", "volver", "resolver", "solver", "jugar",
    "poder", "acordar", "agorar", "apostar", "doler", "encontrar", "llover",
    "renovar", "rogar", "soler", "sonar", "soñar", "torcer", "volar",
])


# ============================================================================
# Present
# ============================================================================

PRESENT_IRREGULARS = IrregularTable("present", [
    _forms("haber", "he", "has", "ha", "hemos", "habéis", "han"),
    _forms("estar", "estoy", "estás", "está", "estamos", "estáis", "están"),
    _forms("ser", "soy", "eres", "es", "somos", "sois", "son"),
    _forms("ir", "voy", "vas", "va", "vamos", "vais", "van"),
    _forms("dar", "doy", "das", "da", "damos", "dais", "dan"),
    _forms("ver", "veo", "ves", "ve", "vemos", "veis", "ven"),
    _forms("prever", "preveo", "prevés", "prevé", "prevemos", "prevéis", "prevén"),
    _forms("oir", "oigo", "oyes", "oye", "oímos", "oís", "oyen"),
    _forms("reir", "río", "ríes", "ríe", "reímos", "reís", "ríen"),
    _forms("sonreir", "sonrío", "sonríes", "sonríe", "sonreímos", "sonreís", "sonríen"),
    _forms("freir", "frío", "fríes", "fríe", "freímos", "freís", "fríen"),
    _forms("oler", "huelo", "hueles", "huele", "olemos", "oléis", "huelen"),
    _forms("errar", "yerro", "yerras", "yerra", "erramos", "erráis", "yerran"),
    _forms("prohibir", "prohíbo", "prohíbes", "prohíbe", "prohibimos", "prohibís", "prohíben"),
    _forms("rehusar", "rehúso", "rehúsas", "rehúsa", "rehusamos", "rehusáis", "rehúsan"),
])

# First-person-singular irregularities, shared by the Present, the Present
# Subjunctive (yo form minus -o) and the commands.
YO_CHANGES = IrregularTable("yo", [
    _slot("hacer", 0, "hago"),
    _slot("decir", 0, "digo"),
    _slot("traer", 0, "traigo"),
    _slot("salir", 0, "salgo"),
    _slot("tener", 0, "tengo"),
    _slot("caer", 0, "caigo"),
    _slot("valer", 0, "valgo"),
    _slot("venir", 0, "vengo"),
    _slot("saber", 0, "sé"),
    _slot("poner", 0, "pongo"),
    _slot("satisfacer", 0, "satisfago"),
    _slot("dar", 0, "doy"),
    _slot("caber", 0, "quepo"),
    _slot("oir", 0, "oigo"),
    _slot("gir", 0, "jo"),
    _slot("ger", 0, "jo"),
    _slot("guir", 0, "go"),
])


# ============================================================================
# Preterite
# ============================================================================

PRETERITE_IRREGULARS = IrregularTable("preterite", [
    _forms("ir", "fui", "fuiste", "fue", "fuimos", "fuisteis", "fueron"),
    _forms("ser", "fui", "fuiste", "fue", "fuimos", "fuisteis", "fueron"),
    _forms("estar", "estuve", "estuviste", "estuvo", "estuvimos", "estuvisteis", "estuvieron"),
    _forms("dar", "di", "diste", "dio", "dimos", "disteis", "dieron"),
    _forms("ver", "vi", "viste", "vio", "vimos", "visteis", "vieron"),
    _forms("reir", "reí", "reíste", "rió", "reímos", "reísteis", "rieron"),
    _forms("sonreir", "sonreí", "sonreíste", "sonrió", "sonreímos", "sonreísteis", "sonrieron"),
    _forms("freir", "freí", "freíste", "frió", "freímos", "freísteis", "frieron"),
])

# Strong preterite stems, also used by the Imperfect Subjunctive
PRETERITE_STEMS = IrregularTable("preterite stem", [
    _stem("poder", "pud"),
    _stem("querer", "quis"),
    _stem("poner", "pus"),
    _stem("hacer", "hic"),
    _stem("tener", "tuv"),
    _stem("andar", "anduv"),
    _stem("saber", "sup"),
    _stem("venir", "vin"),
    _stem("decir", "dij"),
    _stem("traer", "traj"),
    _stem("haber", "hub"),
    _stem("caber", "cup"),
    _stem("satisfacer", "satisfic"),
])


# ============================================================================
# Imperfect
# ============================================================================

IMPERFECT_IRREGULARS = IrregularTable("imperfect", [
    _forms("ver", "veía", "veías", "veía", "veíamos", "veíais", "veían"),
    _forms("prever", "preveía", "preveías", "preveía", "preveíamos", "preveíais", "preveían"),
    _forms("ser", "era", "eras", "era", "éramos", "erais", "eran"),
    _forms("ir", "iba", "ibas", "iba", "íbamos", "ibais", "iban"),
])


# ============================================================================
# Future / Conditional
# ============================================================================

FUTURE_STEMS = IrregularTable("future stem", [
    _stem("poder", "podr"),
    _stem("querer", "querr"),
    _stem("poner", "pondr"),
    _stem("hacer", "har"),
    _stem("tener", "tendr"),
    _stem("caber", "cabr"),
    _stem("saber", "sabr"),
    _stem("venir", "vendr"),
    _stem("decir", "dir"),
    _stem("haber", "habr"),
    _stem("salir", "saldr"),
    _stem("valer", "valdr"),
    _stem("satisfacer", "satisfar"),
])


# ============================================================================
# Present Subjunctive
# ============================================================================

SUBJUNCTIVE_IRREGULARS = IrregularTable("present subjunctive", [
    _forms("ser", "sea", "seas", "sea", "seamos", "seáis", "sean"),
    _forms("estar", "esté", "estés", "esté", "estemos", "estéis", "estén"),
    _forms("ir", "vaya", "vayas", "vaya", "vayamos", "vayáis", "vayan"),
    _forms("dar", "dé", "des", "dé", "demos", "deis", "den"),
    _forms("saber", "sepa", "sepas", "sepa", "sepamos", "sepáis", "sepan"),
    _forms("haber", "haya", "hayas", "haya", "hayamos", "hayáis", "hayan"),
    _forms("reir", "ría", "rías", "ría", "riamos", "riais", "rían"),
    _forms("sonreir", "sonría", "sonrías", "sonría", "sonriamos", "sonriais", "sonrían"),
    _forms("freir", "fría", "frías", "fría", "friamos", "friais", "frían"),
    _forms("errar", "yerre", "yerres", "yerre", "erremos", "erréis", "yerren"),
    _forms("prever", "prevea", "preveas", "prevea", "preveamos", "preveáis", "prevean"),
    _forms("ver", "vea", "veas", "vea", "veamos", "veáis", "vean"),
    _forms("prohibir", "prohíba", "prohíbas", "prohíba", "prohibamos", "prohibáis", "prohíban"),
    _forms("rehusar", "rehúse", "rehúses", "rehúse", "rehusemos", "rehuséis", "rehúsen"),
    _forms("oler", "huela", "huelas", "huela", "olamos", "oláis", "huelan"),
    _forms("torcer", "tuerza", "tuerzas", "tuerza", "torzamos", "torzáis", "tuerzan"),
    _forms("tropezar", "tropiece", "tropieces", "tropiece", "tropecemos", "tropecéis", "tropiecen"),
])


# ============================================================================
# Imperfect Subjunctive
# ============================================================================

IMPERFECT_SUBJUNCTIVE_IRREGULARS = IrregularTable("imperfect subjunctive", [
    _forms("ir", "fuera", "fueras", "fuera", "fuéramos", "fuerais", "fueran"),
    _forms("ser", "fuera", "fueras", "fuera", "fuéramos", "fuerais", "fueran"),
    _forms("estar", "estuviera", "estuvieras", "estuviera", "estuviéramos", "estuvierais", "estuvieran"),
])

# Stems taking -iera regardless of class (diera) or -era (riera)
IMPERFECT_SUBJUNCTIVE_STEMS = IrregularTable("imperfect subjunctive stem", [
    _stem("dar", "d"),
    _stem("reir", "r"),
])


# ============================================================================
# Commands
# ============================================================================

# Affirmative forms for slots 1..5 (tú, usted, nosotros, vosotros, ustedes)
AFFIRMATIVE_IRREGULARS = IrregularTable("affirmative command", [
    _forms("ser", "sé", "sea", "seamos", "sed", "sean"),
    _forms("estar", "está", "esté", "estemos", "estad", "estén"),
    _forms("ir", "ve", "vaya", "vamos", "id", "vayan"),
    _forms("dar", "da", "dé", "demos", "dad", "den"),
    _forms("saber", "sabe", "sepa", "sepamos", "sabed", "sepan"),
    _forms("haber", "he", "haya", "hayamos", "habed", "hayan"),
    _forms("reir", "ríe", "ría", "riamos", "reíd", "rían"),
    _forms("sonreir", "sonríe", "sonría", "sonriamos", "sonreíd", "sonrían"),
    _forms("freir", "fríe", "fría", "friamos", "freíd", "frían"),
    _forms("errar", "yerra", "yerre", "erremos", "errad", "yerren"),
    _forms("gruñir", "gruñe", "gruña", "gruñamos", "gruñid", "gruñan"),
    _forms("oler", "huele", "huela", "olamos", "oled", "huelan"),
    _forms("prever", "prevé", "prevea", "preveamos", "preved", "prevean"),
    _forms("ver", "ve", "vea", "veamos", "ved", "vean"),
    _forms("prohibir", "prohíbe", "prohíba", "prohibamos", "prohibid", "prohíban"),
    _forms("rehusar", "rehúsa", "rehúse", "rehusemos", "rehusad", "rehúsen"),
])

# Reflexive affirmative forms for slots 1..5, pronoun already attached
AFFIRMATIVE_REFLEXIVE_IRREGULARS = IrregularTable("reflexive affirmative command", [
    _forms("dar", "date", "dése", "démonos", "daos", "dense"),
    _forms("ir", "vete", "váyase", "vayámonos", "idos", "váyanse"),
    _forms("reir", "ríete", "ríase", "riámonos", "reíos", "ríanse"),
])

# Short tú imperatives
TU_IRREGULARS = IrregularTable("tú command", [
    _slot("tener", 1, "ten"),
    _slot("venir", 1, "ven"),
    _slot("poner", 1, "pon"),
    _slot("decir", 1, "di"),
    _slot("salir", 1, "sal"),
    _slot("hacer", 1, "haz"),
    _slot("satisfacer", 1, "satisfaz"),
])


# ============================================================================
# Non-finite Forms
# ============================================================================

PARTICIPLE_IRREGULARS = IrregularTable("participle", [
    _stem("abrir", "abierto"),
    _stem("cubrir", "cubierto"),
    _stem("decir", "dicho"),
    _stem("escribir", "escrito"),
    _stem("freir", "frito"),
    _stem("hacer", "hecho"),
    _stem("morir", "muerto"),
    _stem("poner", "puesto"),
    _stem("resolver", "resuelto"),
    _stem("romper", "roto"),
    _stem("ver", "visto"),
    _stem("volver", "vuelto"),
    _stem("solver", "suelto"),
    _stem("satisfacer", "satisfecho"),
])

# ir is matched as a whole verb only; every -ir verb ends in it
GERUND_IRREGULARS = IrregularTable("gerund", [
    _stem("ir", "yendo"),
])

GERUND_STEMS = IrregularTable("gerund stem", [
    _stem("reir", "riendo"),
    _stem("poder", "pudiendo"),
])


# ============================================================================
# Registry
# ============================================================================

# Whole-verb override table per tense, consulted before any rule
OVERRIDES = MappingProxyType({
    Tense.PRESENT: PRESENT_IRREGULARS,
    Tense.PRETERITE: PRETERITE_IRREGULARS,
    Tense.IMPERFECT: IMPERFECT_IRREGULARS,
    Tense.PRESENT_SUBJUNCTIVE: SUBJUNCTIVE_IRREGULARS,
    Tense.IMPERFECT_SUBJUNCTIVE: IMPERFECT_SUBJUNCTIVE_IRREGULARS,
    Tense.COMMANDS_AFFIRMATIVE: AFFIRMATIVE_IRREGULARS,
})

ALL_TABLES = (
    PRESENT_IRREGULARS, YO_CHANGES, PRETERITE_IRREGULARS, PRETERITE_STEMS,
    IMPERFECT_IRREGULARS, FUTURE_STEMS, SUBJUNCTIVE_IRREGULARS,
    IMPERFECT_SUBJUNCTIVE_IRREGULARS, IMPERFECT_SUBJUNCTIVE_STEMS,
    AFFIRMATIVE_IRREGULARS, AFFIRMATIVE_REFLEXIVE_IRREGULARS, TU_IRREGULARS,
    PARTICIPLE_IRREGULARS, GERUND_IRREGULARS, GERUND_STEMS,
)


def table_sizes() -> Dict[str, int]:
    """Number of entries per table."""
    sizes = {table.name: len(table) for table in ALL_TABLES}
    sizes["e->i"] = len(E_TO_I)
    sizes["e->ie"] = len(E_TO_IE)
    sizes["o->ue"] = len(O_TO_UE)
    return sizes
