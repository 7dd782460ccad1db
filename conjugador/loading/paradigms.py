"""
Paradigm loading for conjugador.

Generates every form of a list of verbs and stores them in the
conjugated_form table, so that callers without the engine (or with a
different runtime) can look forms up by key.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.orm import Session

from conjugador import settings
from conjugador.constants import SLOTS, Tense, person_number
from conjugador.conjugator import conjugate_all
from conjugador.db.connection import PathLike, session_scope
from conjugador.db.models import ConjugatedForm
from conjugador.errors import ConjugationError

logger = logging.getLogger(__name__)


def _key(infinitive: str) -> str:
    return infinitive.strip().lower()


def generate_forms(infinitive: str) -> List[ConjugatedForm]:
    """
    Build ConjugatedForm rows for every tense and slot of a verb.

    Raises:
        ConjugationError: If the infinitive is invalid.
    """
    key = _key(infinitive)
    rows = []
    for tense, forms in conjugate_all(infinitive).items():
        for slot in SLOTS:
            if not forms[slot]:
                continue
            person, plural = person_number(slot)
            rows.append(ConjugatedForm(
                infinitive=key,
                tense=int(tense),
                person=person,
                plural=plural,
                text=forms[slot],
            ))
    return rows


@dataclass
class LoadStats:
    """Outcome of a load_paradigms run."""
    forms: int = 0
    verbs: int = 0
    skipped: List[str] = field(default_factory=list)


def _store(session: Session, verbs: Iterable[str], batch_size: int,
           progress_callback: Optional[Callable[[int], None]]) -> LoadStats:
    stats = LoadStats()
    seen = set()
    pending = 0
    for verb in verbs:
        key = _key(verb)
        if key in seen:
            logger.debug(f"Skipping repeated verb {verb!r}")
            continue
        seen.add(key)

        try:
            rows = generate_forms(verb)
        except ConjugationError as e:
            logger.warning(f"Skipping {verb!r}: {e}")
            stats.skipped.append(verb)
            continue

        session.execute(
            delete(ConjugatedForm).where(ConjugatedForm.infinitive == key)
        )
        session.add_all(rows)
        stats.forms += len(rows)
        stats.verbs += 1
        pending += len(rows)

        if pending >= batch_size:
            session.commit()
            pending = 0
        if progress_callback:
            progress_callback(stats.forms)

    session.flush()
    return stats


def load_paradigms(
    verbs: Iterable[str],
    session: Optional[Session] = None,
    db_path: Optional[PathLike] = None,
    batch_size: Optional[int] = None,
    progress_callback: Optional[Callable[[int], None]] = None,
) -> LoadStats:
    """
    Store the full paradigms of a list of verbs.

    Existing rows of a verb are replaced. Invalid verbs are logged and
    skipped, and a verb repeated under the same key (ser, Ser) is stored
    once.

    Args:
        verbs: Infinitives to store.
        session: Session to use. Rows past the last full batch are only
            flushed, the caller commits them. If None, a session on
            db_path is opened and committed.
        db_path: Database path used when no session is given.
        batch_size: Rows between intermediate commits
            (default settings.BATCH_SIZE).
        progress_callback: Called with the running row count after each verb.

    Returns:
        LoadStats with the stored form and verb counts and the skipped verbs.
    """
    if batch_size is None:
        batch_size = settings.BATCH_SIZE

    if session is not None:
        stats = _store(session, verbs, batch_size, progress_callback)
    else:
        with session_scope(db_path) as scoped:
            stats = _store(scoped, verbs, batch_size, progress_callback)

    logger.info(f"Stored {stats.forms} conjugated forms for {stats.verbs} verbs")
    return stats


def lookup_form(session: Session, infinitive: str, tense, person: int, plural: bool = False) -> Optional[str]:
    """
    Read one stored form.

    Args:
        session: Database session.
        infinitive: Infinitive as stored (case-insensitive).
        tense: Tense member, value or name.
        person: 0, 1 or 2.
        plural: Plural number.

    Returns:
        The stored form, or None if the verb or slot is not stored.
    """
    tense = Tense.parse(tense)
    return session.execute(
        select(ConjugatedForm.text).where(and_(
            ConjugatedForm.infinitive == _key(infinitive),
            ConjugatedForm.tense == int(tense),
            ConjugatedForm.person == person,
            ConjugatedForm.plural == bool(plural),
        ))
    ).scalar_one_or_none()


def stored_verbs(session: Session) -> List[str]:
    """Sorted list of stored infinitives."""
    return list(session.execute(
        select(ConjugatedForm.infinitive).distinct().order_by(ConjugatedForm.infinitive)
    ).scalars())
