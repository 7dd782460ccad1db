"""
SQLAlchemy models for the paradigm store.
"""

from sqlalchemy import Boolean, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ConjugatedForm(Base):
    """
    One generated form.

    Forms are keyed by (infinitive, tense, person, plural). tense holds the
    integer Tense value. Slots without a form (yo commands) are not stored.
    """
    __tablename__ = 'conjugated_form'
    __table_args__ = (
        UniqueConstraint('infinitive', 'tense', 'person', 'plural', name='uq_conjugated_form'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    infinitive: Mapped[str] = mapped_column(String, index=True)
    tense: Mapped[int] = mapped_column(Integer)
    person: Mapped[int] = mapped_column(Integer)
    plural: Mapped[bool] = mapped_column(Boolean, default=False)
    text: Mapped[str] = mapped_column(String, index=True)

    def __repr__(self):
        return (
            f"<ConjugatedForm({self.infinitive!r}, tense={self.tense}, "
            f"person={self.person}, plural={self.plural}, text={self.text!r})>"
        )
