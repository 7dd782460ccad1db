"""
Tests for request.py and reflexive.py.
"""

import pytest

from conjugador.endings import ConjugationClass
from conjugador.errors import ConjugationError, InvalidInfinitive, InvalidPerson
from conjugador.reflexive import enclitic, proclitic
from conjugador.request import ConjugationRequest, build_request, normalize_infinitive


class TestNormalizeInfinitive:

    def test_plain(self):
        assert normalize_infinitive("hablar") == ("hablar", "hablar", False)

    def test_reflexive(self):
        assert normalize_infinitive("Levantarse") == ("levantar", "levantar", True)

    def test_accented_ending(self):
        assert normalize_infinitive("reírse") == ("reir", "reír", True)

    def test_ir(self):
        assert normalize_infinitive("ir") == ("ir", "ir", False)
        assert normalize_infinitive("irse") == ("ir", "ir", True)

    @pytest.mark.parametrize("bad", [
        "", "   ", "xyz", "ar", "hablar1", "habl ar", "se", "ase",
    ])
    def test_invalid(self, bad):
        with pytest.raises(InvalidInfinitive):
            normalize_infinitive(bad)

    def test_non_string(self):
        with pytest.raises(InvalidInfinitive) as exc_info:
            normalize_infinitive(42)
        assert exc_info.value.infinitive == 42


class TestBuildRequest:

    def test_slot(self):
        assert build_request("hablar", 0).person_number == 0
        assert build_request("hablar", 2, plural=True).person_number == 5

    def test_fields(self):
        request = build_request("reírse", 1)
        assert request.infinitive == "reir"
        assert request.original_form == "reír"
        assert request.is_reflexive
        assert request.pronoun == "te"
        assert request.conj_class is ConjugationClass.I

    @pytest.mark.parametrize("person", [3, -1, True, "1", None, 1.0])
    def test_invalid_person(self, person):
        with pytest.raises(InvalidPerson):
            build_request("hablar", person)

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidPerson, ConjugationError)
        assert issubclass(ConjugationError, ValueError)

    def test_request_is_immutable(self):
        request = build_request("hablar", 0)
        with pytest.raises(AttributeError):
            request.person_number = 1

    def test_helpers(self):
        request = build_request("lavarse", 0)
        assert request.with_slot(3).pronoun == "nos"
        assert request.bare().pronoun == ""
        assert request.at_slot(("a", "b", "c", "d", "e", "f")) == "a"


class TestPronounPlacement:

    def test_proclitic(self):
        request = ConjugationRequest("levantar", 0, is_reflexive=True)
        assert proclitic(request, "levanto") == "me levanto"

    def test_proclitic_without_pronoun(self):
        request = ConjugationRequest("hablar", 0)
        assert proclitic(request, "hablo") == "hablo"

    def test_enclitic(self):
        request = ConjugationRequest("levantar", 1, is_reflexive=True)
        assert enclitic(request, "levanta") == "levántate"
        assert enclitic(request.with_slot(3), "levantemos") == "levantémonos"
        assert enclitic(request.with_slot(4), "levantad") == "levantaos"

    def test_empty_form(self):
        request = ConjugationRequest("levantar", 0, is_reflexive=True)
        assert enclitic(request, "") == ""
        assert proclitic(request, "") == ""
