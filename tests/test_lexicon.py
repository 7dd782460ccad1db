"""
Tests for lexicon.py - irregular tables and suffix lookup.
"""

import dataclasses

import pytest

from conjugador import conjugate
from conjugador.constants import Tense
from conjugador.lexicon import (
    AFFIRMATIVE_IRREGULARS, AFFIRMATIVE_REFLEXIVE_IRREGULARS, ALL_TABLES,
    OVERRIDES, PARTICIPLE_IRREGULARS, PRESENT_IRREGULARS, PRETERITE_STEMS,
    TU_IRREGULARS, YO_CHANGES, IrregularEntry, IrregularKind, IrregularTable,
    suffix_search, table_sizes,
)


class TestSuffixSearch:

    def test_longest_suffix_first(self):
        members = {"tener", "ener"}
        assert suffix_search("detener", members.__contains__) == 2

    def test_no_match(self):
        assert suffix_search("hablar", {"tener"}.__contains__) == -1

    def test_exact_only_endings(self):
        assert suffix_search("mandar", {"dar"}.__contains__) == -1
        assert suffix_search("dar", {"dar"}.__contains__) == 0


class TestIrregularTable:

    def test_duplicate_trigger_rejected(self):
        entries = [
            IrregularEntry("tener", IrregularKind.STEM, "tuv"),
            IrregularEntry("tener", IrregularKind.STEM, "tuv"),
        ]
        with pytest.raises(ValueError):
            IrregularTable("broken", entries)

    def test_search_returns_prefix(self):
        prefix, entry = PRETERITE_STEMS.search("detener")
        assert prefix == "de"
        assert entry.trigger == "tener"
        assert entry.apply(prefix) == "detuv"

    def test_exact_only_tables(self):
        assert PRETERITE_STEMS.search("mandar") is None
        assert PRETERITE_STEMS.search("andar") is not None
        assert PARTICIPLE_IRREGULARS.search("ver") is not None

    def test_exact(self):
        assert PRESENT_IRREGULARS.exact("ser").form(0) == "soy"
        assert PRESENT_IRREGULARS.exact("deser") is None
        assert "ser" in PRESENT_IRREGULARS

    def test_entries_are_immutable(self):
        entry = PRESENT_IRREGULARS.exact("ser")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.value = ("x",)

    def test_slot_entries_cover_one_slot(self):
        assert YO_CHANGES.exact("hacer").form(0) == "hago"
        assert TU_IRREGULARS.exact("hacer").form(1) == "haz"
        with pytest.raises(ValueError):
            YO_CHANGES.exact("hacer").form(1)


class TestTableShapes:

    def test_override_tables_have_six_forms(self):
        for tense, table in OVERRIDES.items():
            if tense is Tense.COMMANDS_AFFIRMATIVE:
                continue
            for trigger in table:
                assert len(table.exact(trigger).value) == 6, (tense, trigger)

    def test_command_tables_have_five_forms(self):
        for table in (AFFIRMATIVE_IRREGULARS, AFFIRMATIVE_REFLEXIVE_IRREGULARS):
            for trigger in table:
                assert len(table.exact(trigger).value) == 5, trigger

    def test_table_sizes(self):
        sizes = table_sizes()
        assert sizes["present"] == len(PRESENT_IRREGULARS)
        assert len(sizes) == len(ALL_TABLES) + 3


class TestOverrideRegistry:
    """The strategies read whole-verb overrides through OVERRIDES."""

    def test_registered_override_is_used(self, monkeypatch):
        table = IrregularTable("present", [
            IrregularEntry("hablar", IrregularKind.FORMS, ("a", "b", "c", "d", "e", "f")),
        ])
        registry = dict(OVERRIDES)
        registry[Tense.PRESENT] = table
        monkeypatch.setattr("conjugador.tenses.OVERRIDES", registry)
        assert conjugate("hablar", Tense.PRESENT, 2) == "c"

    def test_every_override_tense_is_registered(self):
        assert set(OVERRIDES) == {
            Tense.PRESENT, Tense.PRETERITE, Tense.IMPERFECT,
            Tense.PRESENT_SUBJUNCTIVE, Tense.IMPERFECT_SUBJUNCTIVE,
            Tense.COMMANDS_AFFIRMATIVE,
        }
