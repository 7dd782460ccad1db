"""
Tests for the Present indicative.
"""

import pytest

from conjugador import Tense, conjugate, conjugate_paradigm


def present(verb):
    return conjugate_paradigm(verb, Tense.PRESENT)


class TestRegularPresent:
    """Regular -ar/-er/-ir paradigms."""

    def test_ar(self):
        assert present("hablar") == ["hablo", "hablas", "habla", "hablamos", "habláis", "hablan"]

    def test_er(self):
        assert present("comer") == ["como", "comes", "come", "comemos", "coméis", "comen"]

    def test_ir(self):
        assert present("vivir") == ["vivo", "vives", "vive", "vivimos", "vivís", "viven"]

    def test_input_is_normalized(self):
        assert conjugate("  HABLAR ", Tense.PRESENT, 0) == "hablo"


class TestStemChanges:
    """e->ie, e->i and o->ue verbs keep the plain stem in nosotros/vosotros."""

    def test_e_to_ie(self):
        assert present("pensar") == ["pienso", "piensas", "piensa", "pensamos", "pensáis", "piensan"]

    def test_o_to_ue(self):
        assert present("dormir") == ["duermo", "duermes", "duerme", "dormimos", "dormís", "duermen"]

    def test_e_to_i(self):
        assert present("pedir") == ["pido", "pides", "pide", "pedimos", "pedís", "piden"]

    def test_jugar(self):
        assert present("jugar") == ["juego", "juegas", "juega", "jugamos", "jugáis", "juegan"]

    def test_prefixed_verb_inherits_change(self):
        assert conjugate("devolver", Tense.PRESENT, 0) == "devuelvo"

    def test_exact_only_endings_do_not_match_family(self):
        assert conjugate("conjugar", Tense.PRESENT, 0) == "conjugo"
        assert conjugate("presentar", Tense.PRESENT, 2) == "presenta"

    def test_u_gets_diaeresis_after_g(self):
        assert conjugate("agorar", Tense.PRESENT, 0) == "agüero"


class TestYoChanges:
    """First-person-singular irregularities."""

    @pytest.mark.parametrize("verb,expected", [
        ("hacer", "hago"),
        ("deshacer", "deshago"),
        ("tener", "tengo"),
        ("detener", "detengo"),
        ("caber", "quepo"),
        ("saber", "sé"),
        ("salir", "salgo"),
        ("traer", "traigo"),
        ("poner", "pongo"),
        ("satisfacer", "satisfago"),
        ("coger", "cojo"),
        ("dirigir", "dirijo"),
        ("distinguir", "distingo"),
    ])
    def test_yo_form(self, verb, expected):
        assert conjugate(verb, Tense.PRESENT, 0) == expected

    def test_stem_change_applies_to_prefix(self):
        assert conjugate("elegir", Tense.PRESENT, 0) == "elijo"
        assert conjugate("seguir", Tense.PRESENT, 0) == "sigo"
        assert conjugate("conseguir", Tense.PRESENT, 0) == "consigo"

    def test_other_slots(self):
        assert present("tener") == ["tengo", "tienes", "tiene", "tenemos", "tenéis", "tienen"]
        assert present("decir") == ["digo", "dices", "dice", "decimos", "decís", "dicen"]
        assert conjugate("detener", Tense.PRESENT, 1) == "detienes"
        assert conjugate("elegir", Tense.PRESENT, 0, plural=True) == "elegimos"
        assert conjugate("seguir", Tense.PRESENT, 1) == "sigues"


class TestSpellingClasses:
    """-cer/-cir, -uir, -uar and accented -iar verbs."""

    def test_zc(self):
        assert present("conocer") == ["conozco", "conoces", "conoce", "conocemos", "conocéis", "conocen"]
        assert conjugate("conducir", Tense.PRESENT, 0) == "conduzco"

    def test_z_after_consonant(self):
        assert conjugate("vencer", Tense.PRESENT, 0) == "venzo"

    def test_uir(self):
        assert present("construir") == [
            "construyo", "construyes", "construye", "construimos", "construís", "construyen"
        ]

    def test_uar(self):
        assert present("continuar") == [
            "continúo", "continúas", "continúa", "continuamos", "continuáis", "continúan"
        ]

    def test_accented_iar(self):
        assert present("enviar") == ["envío", "envías", "envía", "enviamos", "enviáis", "envían"]

    def test_unaccented_iar(self):
        assert conjugate("cambiar", Tense.PRESENT, 0) == "cambio"


class TestPresentOverrides:
    """Whole-verb overrides."""

    def test_ser(self):
        assert present("ser") == ["soy", "eres", "es", "somos", "sois", "son"]

    def test_ir(self):
        assert present("ir") == ["voy", "vas", "va", "vamos", "vais", "van"]

    def test_estar(self):
        assert present("estar") == ["estoy", "estás", "está", "estamos", "estáis", "están"]

    def test_accented_infinitive(self):
        assert present("oír") == ["oigo", "oyes", "oye", "oímos", "oís", "oyen"]
        assert present("reír") == ["río", "ríes", "ríe", "reímos", "reís", "ríen"]

    def test_errar(self):
        assert conjugate("errar", Tense.PRESENT, 0) == "yerro"

    def test_prever(self):
        """prever keeps the ver stem and accents the short forms."""
        assert present("prever") == ["preveo", "prevés", "prevé", "prevemos", "prevéis", "prevén"]
        assert conjugate("prever", Tense.COMMANDS_AFFIRMATIVE, 1) == present("prever")[2]


class TestReflexivePresent:
    """Proclitic pronouns."""

    def test_levantarse(self):
        assert present("levantarse") == [
            "me levanto", "te levantas", "se levanta",
            "nos levantamos", "os levantáis", "se levantan",
        ]

    def test_irregular_reflexive(self):
        assert conjugate("irse", Tense.PRESENT, 0) == "me voy"
        assert conjugate("reírse", Tense.PRESENT, 2, plural=True) == "se ríen"
