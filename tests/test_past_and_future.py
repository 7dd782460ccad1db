"""
Tests for the Imperfect, Future and Conditional.
"""

from conjugador import Tense, conjugate, conjugate_paradigm


class TestImperfect:

    def test_ar(self):
        assert conjugate_paradigm("hablar", Tense.IMPERFECT) == [
            "hablaba", "hablabas", "hablaba", "hablábamos", "hablabais", "hablaban"
        ]

    def test_er(self):
        assert conjugate_paradigm("comer", Tense.IMPERFECT) == [
            "comía", "comías", "comía", "comíamos", "comíais", "comían"
        ]

    def test_overrides(self):
        assert conjugate_paradigm("ser", Tense.IMPERFECT) == ["era", "eras", "era", "éramos", "erais", "eran"]
        assert conjugate_paradigm("ir", Tense.IMPERFECT) == ["iba", "ibas", "iba", "íbamos", "ibais", "iban"]
        assert conjugate("ver", Tense.IMPERFECT, 0) == "veía"

    def test_reflexive(self):
        assert conjugate("levantarse", Tense.IMPERFECT, 0, plural=True) == "nos levantábamos"


class TestFuture:

    def test_regular(self):
        assert conjugate_paradigm("hablar", Tense.FUTURE) == [
            "hablaré", "hablarás", "hablará", "hablaremos", "hablaréis", "hablarán"
        ]

    def test_irregular_stems(self):
        assert conjugate("hacer", Tense.FUTURE, 0) == "haré"
        assert conjugate("tener", Tense.FUTURE, 0) == "tendré"
        assert conjugate("decir", Tense.FUTURE, 2) == "dirá"
        assert conjugate("salir", Tense.FUTURE, 0, plural=True) == "saldremos"
        assert conjugate("poder", Tense.FUTURE, 1) == "podrás"

    def test_prefixed_stem(self):
        assert conjugate("detener", Tense.FUTURE, 0) == "detendré"

    def test_accented_infinitive(self):
        assert conjugate("reír", Tense.FUTURE, 0) == "reiré"


class TestConditional:

    def test_regular(self):
        assert conjugate_paradigm("vivir", Tense.CONDITIONAL) == [
            "viviría", "vivirías", "viviría", "viviríamos", "viviríais", "vivirían"
        ]

    def test_irregular_stems(self):
        assert conjugate("hacer", Tense.CONDITIONAL, 0) == "haría"
        assert conjugate("tener", Tense.CONDITIONAL, 0, plural=True) == "tendríamos"
        assert conjugate("querer", Tense.CONDITIONAL, 2) == "querría"
