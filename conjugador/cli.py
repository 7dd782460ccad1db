"""
Command line interface for conjugador.

Usage:
    conjugador hablar                        # every tense
    conjugador hablar -t preterite           # one paradigm
    conjugador hablar -t preterite -p 2      # one form
    conjugador levantarse -j                 # JSON output
    conjugador export -o forms.db ser estar  # store paradigms in SQLite
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from conjugador import __version__, settings
from conjugador.errors import ConjugationError
from conjugador.models import ConjugationResult, ParadigmResult, VerbResult


def setup_logging():
    level = logging.DEBUG if settings.DEBUG else logging.WARNING
    logging.basicConfig(level=level, format=settings.LOG_FORMAT)


def format_paradigm(paradigm: ParadigmResult) -> str:
    """Format a paradigm as an indented two-column table."""
    lines = [paradigm.description]
    for subject, form in paradigm.as_rows():
        lines.append(f"  {subject:<10} {form}")
    return '\n'.join(lines)


def format_verb(verb: VerbResult) -> str:
    """Format every paradigm of a verb."""
    lines = [
        verb.infinitive,
        f"  participle: {verb.participle}",
        f"  gerund:     {verb.gerund}",
    ]
    for paradigm in verb.paradigms:
        lines.append('')
        lines.append(format_paradigm(paradigm))
    return '\n'.join(lines)


def _print_json(model) -> None:
    print(json.dumps(model.model_dump(), ensure_ascii=False, indent=2))


def read_verb_file(path: Path) -> List[str]:
    """One infinitive per line; blank lines and # comments are ignored."""
    verbs = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.split('#', 1)[0].strip()
            if line:
                verbs.append(line)
    return verbs


def main_export(args: list) -> int:
    """CLI entry point for export subcommand."""
    parser = argparse.ArgumentParser(
        description='Store full verb paradigms in a SQLite database',
        prog='conjugador export',
    )

    parser.add_argument(
        'verbs',
        nargs='*',
        help='Infinitives to store',
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=None,
        metavar='PATH',
        help=f'Database path (default: {settings.DB_PATH})',
    )

    parser.add_argument(
        '--file', '-f',
        type=str,
        metavar='PATH',
        help='Read infinitives from a file, one per line',
    )

    parsed = parser.parse_args(args)

    verbs = list(parsed.verbs)
    if parsed.file:
        try:
            verbs.extend(read_verb_file(Path(parsed.file)))
        except OSError as e:
            print(f"Error reading verb file: {e}", file=sys.stderr)
            return 1

    if not verbs:
        print("Error: no verbs given.", file=sys.stderr)
        return 1

    from conjugador.loading.paradigms import load_paradigms

    db_path = parsed.output if parsed.output else settings.DB_PATH
    stats = load_paradigms(verbs, db_path=db_path)
    print(f"Stored {stats.forms:,} forms for {stats.verbs} verbs in {db_path}")
    if stats.skipped:
        print(f"Skipped invalid verbs: {', '.join(stats.skipped)}", file=sys.stderr)
    return 0


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    setup_logging()

    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'export':
        return main_export(args_list[1:])

    parser = argparse.ArgumentParser(
        description='Command line interface for Conjugador (Spanish verb conjugation)',
        prog='conjugador',
        epilog='Subcommands:\n  conjugador export    Store paradigms in a SQLite database',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'verb',
        nargs='?',
        help='Spanish infinitive, optionally reflexive (levantarse)',
    )

    parser.add_argument(
        '-t', '--tense',
        type=str,
        default=None,
        metavar='NAME',
        help='Tense name or number (e.g., present, present_subjunctive, 6)',
    )

    parser.add_argument(
        '-p', '--person',
        type=int,
        choices=(0, 1, 2),
        default=None,
        help='Person: 0 (first), 1 (second), 2 (third); requires --tense',
    )

    parser.add_argument(
        '--plural',
        action='store_true',
        help='Plural number (with --person)',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Output JSON',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args_list)

    if parsed.version:
        print(f'conjugador {__version__}')
        return 0

    if not parsed.verb:
        parser.print_help()
        return 1

    if parsed.person is not None and parsed.tense is None:
        print("Error: --person requires --tense", file=sys.stderr)
        return 1

    tense = parsed.tense
    if tense is not None and tense.isdigit():
        tense = int(tense)

    try:
        if parsed.person is not None:
            result = ConjugationResult.create(parsed.verb, tense, parsed.person, parsed.plural)
            if parsed.json:
                _print_json(result)
            else:
                print(result.form)
        elif tense is not None:
            paradigm = ParadigmResult.create(parsed.verb, tense)
            if parsed.json:
                _print_json(paradigm)
            else:
                print(format_paradigm(paradigm))
        else:
            verb = VerbResult.create(parsed.verb)
            if parsed.json:
                _print_json(verb)
            else:
                print(format_verb(verb))
        return 0

    except ConjugationError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
