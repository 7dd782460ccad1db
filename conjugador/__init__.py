"""
Conjugador: Spanish verb conjugation engine.
"""

import time
from typing import Tuple

from conjugador.constants import Tense, get_tense_description
from conjugador.conjugator import (
    conjugate, conjugate_all, conjugate_paradigm, gerund, participle,
)
from conjugador.errors import (
    ConjugationError, InvalidInfinitive, InvalidPerson, InvalidTense,
)

__version__ = "0.1.0"

__all__ = [
    "Tense",
    "get_tense_description",
    "conjugate",
    "conjugate_paradigm",
    "conjugate_all",
    "participle",
    "gerund",
    "ConjugationError",
    "InvalidInfinitive",
    "InvalidPerson",
    "InvalidTense",
    "warm_up",
]


def warm_up(verbose: bool = False) -> Tuple[float, dict]:
    """
    Load the lexicon and run one conjugation per tense.

    The irregular tables are built at import time; this forces the import
    and exercises every strategy once so the first real call is not the
    slowest one.

    Args:
        verbose: If True, print table sizes and timing.

    Returns:
        Tuple of (total_time_seconds, details_dict). details_dict maps each
        table name to its entry count and 'total' to the elapsed
        milliseconds.

    Example:
        >>> import conjugador
        >>> elapsed, details = conjugador.warm_up(verbose=True)
        Warming up conjugador tables...
          present:            14 entries
          ...
        Total warm-up:       1.2ms
    """
    from conjugador.lexicon import table_sizes

    total_start = time.perf_counter()

    if verbose:
        print("Warming up conjugador tables...")

    details = dict(table_sizes())
    if verbose:
        for name, size in details.items():
            print(f"  {name + ':':<30} {size:>4} entries")

    conjugate_all("hablar")

    total_time = time.perf_counter() - total_start
    details['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:    {details['total']:>7.1f}ms")

    return total_time, details
