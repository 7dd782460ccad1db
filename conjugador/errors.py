"""
Exceptions raised by conjugador.

Input is validated before any table lookup, so malformed requests fail
with one of these instead of an IndexError deep inside a strategy.
"""


class ConjugationError(ValueError):
    """Base class for invalid conjugation requests."""


class InvalidInfinitive(ConjugationError):
    """The infinitive is not a Spanish -ar/-er/-ir verb."""

    def __init__(self, infinitive, reason: str = "not a Spanish infinitive"):
        self.infinitive = infinitive
        self.reason = reason
        super().__init__(f"Invalid infinitive {infinitive!r}: {reason}")


class InvalidPerson(ConjugationError):
    """The person index is outside 0..2."""

    def __init__(self, person):
        self.person = person
        super().__init__(f"Invalid person {person!r}: expected 0, 1 or 2")


class InvalidTense(ConjugationError):
    """The tense name or value is unknown."""

    def __init__(self, tense):
        self.tense = tense
        super().__init__(f"Unknown tense {tense!r}")
