"""
Tests for the Present and Imperfect Subjunctive.
"""

import pytest

from conjugador import Tense, conjugate, conjugate_paradigm


def subjunctive(verb):
    return conjugate_paradigm(verb, Tense.PRESENT_SUBJUNCTIVE)


def imperfect_subjunctive(verb):
    return conjugate_paradigm(verb, Tense.IMPERFECT_SUBJUNCTIVE)


class TestPresentSubjunctive:

    def test_ar(self):
        assert subjunctive("hablar") == ["hable", "hables", "hable", "hablemos", "habléis", "hablen"]

    def test_er(self):
        assert subjunctive("comer") == ["coma", "comas", "coma", "comamos", "comáis", "coman"]

    def test_overrides(self):
        assert subjunctive("ser") == ["sea", "seas", "sea", "seamos", "seáis", "sean"]
        assert subjunctive("ir") == ["vaya", "vayas", "vaya", "vayamos", "vayáis", "vayan"]
        assert conjugate("saber", Tense.PRESENT_SUBJUNCTIVE, 0) == "sepa"
        assert conjugate("tropezar", Tense.PRESENT_SUBJUNCTIVE, 1, plural=True) == "tropecéis"

    @pytest.mark.parametrize("verb,expected", [
        ("tener", "tenga"),
        ("hacer", "haga"),
        ("caber", "quepa"),
        ("oír", "oiga"),
        ("elegir", "elija"),
        ("seguir", "siga"),
        ("decir", "diga"),
    ])
    def test_yo_stems(self, verb, expected):
        assert conjugate(verb, Tense.PRESENT_SUBJUNCTIVE, 0) == expected

    def test_yo_stem_in_plural(self):
        assert conjugate("tener", Tense.PRESENT_SUBJUNCTIVE, 0, plural=True) == "tengamos"
        assert conjugate("elegir", Tense.PRESENT_SUBJUNCTIVE, 0, plural=True) == "elijamos"

    def test_stem_changes(self):
        assert subjunctive("pensar") == ["piense", "pienses", "piense", "pensemos", "penséis", "piensen"]
        assert subjunctive("dormir") == ["duerma", "duermas", "duerma", "durmamos", "durmáis", "duerman"]
        assert conjugate("sentir", Tense.PRESENT_SUBJUNCTIVE, 0, plural=True) == "sintamos"
        assert conjugate("pedir", Tense.PRESENT_SUBJUNCTIVE, 0, plural=True) == "pidamos"

    def test_consonant_preservation(self):
        assert conjugate("buscar", Tense.PRESENT_SUBJUNCTIVE, 0) == "busque"
        assert conjugate("empezar", Tense.PRESENT_SUBJUNCTIVE, 0) == "empiece"
        assert conjugate("empezar", Tense.PRESENT_SUBJUNCTIVE, 0, plural=True) == "empecemos"
        assert conjugate("jugar", Tense.PRESENT_SUBJUNCTIVE, 0) == "juegue"
        assert conjugate("jugar", Tense.PRESENT_SUBJUNCTIVE, 0, plural=True) == "juguemos"

    def test_spelling_classes(self):
        assert conjugate("conocer", Tense.PRESENT_SUBJUNCTIVE, 0) == "conozca"
        assert conjugate("vencer", Tense.PRESENT_SUBJUNCTIVE, 0) == "venza"
        assert conjugate("construir", Tense.PRESENT_SUBJUNCTIVE, 0, plural=True) == "construyamos"
        assert conjugate("continuar", Tense.PRESENT_SUBJUNCTIVE, 0) == "continúe"
        assert conjugate("continuar", Tense.PRESENT_SUBJUNCTIVE, 0, plural=True) == "continuemos"
        assert conjugate("enviar", Tense.PRESENT_SUBJUNCTIVE, 2) == "envíe"
        assert conjugate("averiguar", Tense.PRESENT_SUBJUNCTIVE, 0) == "averigüe"

    def test_reflexive(self):
        assert conjugate("levantarse", Tense.PRESENT_SUBJUNCTIVE, 1) == "te levantes"


class TestImperfectSubjunctive:

    def test_regular(self):
        assert imperfect_subjunctive("hablar") == [
            "hablara", "hablaras", "hablara", "habláramos", "hablarais", "hablaran"
        ]
        assert imperfect_subjunctive("comer")[3] == "comiéramos"

    def test_overrides(self):
        assert imperfect_subjunctive("ser") == imperfect_subjunctive("ir")
        assert conjugate("ser", Tense.IMPERFECT_SUBJUNCTIVE, 0) == "fuera"
        assert conjugate("estar", Tense.IMPERFECT_SUBJUNCTIVE, 0) == "estuviera"

    @pytest.mark.parametrize("verb,expected", [
        ("tener", "tuviera"),
        ("andar", "anduviera"),
        ("hacer", "hiciera"),
        ("decir", "dijera"),
        ("traer", "trajera"),
        ("conducir", "condujera"),
        ("pedir", "pidiera"),
        ("dormir", "durmiera"),
        ("leer", "leyera"),
        ("construir", "construyera"),
        ("oír", "oyera"),
        ("dar", "diera"),
        ("reír", "riera"),
        ("sonreír", "sonriera"),
    ])
    def test_stems(self, verb, expected):
        assert conjugate(verb, Tense.IMPERFECT_SUBJUNCTIVE, 0) == expected

    def test_palatal_collapse(self):
        assert conjugate("reñir", Tense.IMPERFECT_SUBJUNCTIVE, 0) == "riñera"
