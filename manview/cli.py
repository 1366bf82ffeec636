"""Command-line interface for manview."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Tuple

from .config import Settings
from .favorites import FavoritesManager
from .formatting import TagSpan
from .manpage import Page, PageNotFoundError, annotate_page, get_all_executables, load_page
from .notes import NotesRepository
from .search import filter_programs, matching_lines
from .typeahead import TypeAheadNavigator


def print_programs(programs: List[str], favorites: FavoritesManager, notes: NotesRepository):
    """Print a program listing with favorite and notes markers."""
    if not programs:
        print("No programs found.")
        return

    for program in programs:
        fav = "★" if favorites.is_favorite(program) else " "
        note = "✎" if notes.has_notes(program) else " "
        print(f"{fav}{note} {program}")


def print_spans(text: str, spans: List[TagSpan]):
    """Print one line per tag span: kind, offsets and covered text."""
    for span in spans:
        print(f"{span.kind.value:<13} {span.start:>7}-{span.end:<7} {span.slice(text)!r}")


def print_references(references: Dict[Tuple[int, int], str]):
    """Print the distinct pages referenced, in order of appearance."""
    seen = []
    for _, program in sorted(references.items()):
        if program not in seen:
            seen.append(program)
    for program in seen:
        print(program)


def page_to_json(page: Page, spans: List[TagSpan], references: Dict[Tuple[int, int], str]) -> str:
    """Serialize an annotated page."""
    data = {
        'program': page.program,
        'source': page.source.value,
        'text': page.text,
        'spans': [
            {'kind': s.kind.value, 'start': s.start, 'end': s.end}
            for s in page.bold_spans + spans
        ],
        'references': [
            {'start': start, 'end': end, 'program': program}
            for (start, end), program in sorted(references.items())
        ],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def jump_to(programs: List[str], prefix: str) -> Optional[str]:
    """Select a program the way list type-ahead does."""
    navigator = TypeAheadNavigator()
    for char in prefix:
        navigator.append(char)
    index = navigator.find_match(programs)
    return programs[index] if index is not None else None


def run_listing(args, favorites: FavoritesManager, notes: NotesRepository) -> int:
    """Handle --list / --favorites / --jump."""
    if args.favorites:
        programs = sorted(favorites.get_all(), key=str.lower)
    else:
        programs = get_all_executables()

    if args.search:
        programs = filter_programs(programs, args.search)

    if args.jump:
        match = jump_to(programs, args.jump)
        if match is None:
            print(f"No program starting with '{args.jump}'", file=sys.stderr)
            return 1
        print(match)
        return 0

    print_programs(programs, favorites, notes)
    print(f"Found {len(programs)} program(s)", file=sys.stderr)
    return 0


def run_page(args, settings: Settings, favorites: FavoritesManager, notes: NotesRepository) -> int:
    """Handle commands that act on a single program."""
    program = args.program

    if args.favorite:
        state = "added to" if favorites.toggle(program) else "removed from"
        print(f"{program} {state} favorites")
        return 0

    if args.note is not None:
        notes.save(program, args.note)
        print(f"Notes {'saved' if args.note.strip() else 'cleared'} for {program}")
        return 0

    if args.show_note:
        content = notes.load(program)
        if not content:
            print(f"No notes for {program}", file=sys.stderr)
            return 1
        print(content)
        return 0

    try:
        page = load_page(program, settings)
    except PageNotFoundError as e:
        print(str(e), file=sys.stderr)
        return 1

    spans, references = annotate_page(page)

    if args.json:
        print(page_to_json(page, spans, references))
    elif args.spans:
        print_spans(page.text, page.bold_spans + spans)
    elif args.refs:
        print_references(references)
    elif args.search:
        lines = matching_lines(page.text, args.search)
        for number, line in lines:
            print(f"{number:5d}: {line}")
        print(f"{len(lines)} line(s) matching '{args.search}'", file=sys.stderr)
    else:
        print(page.text, end='' if page.text.endswith('\n') else '\n')
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Browse installed programs and read their annotated man pages.",
        epilog="Example: manview ls -s color"
    )
    parser.add_argument("program", nargs='?', help="Program whose documentation to show")
    parser.add_argument("-s", "--search", help="Filter the program list, or show page lines containing a term")
    parser.add_argument("--spans", action="store_true", help="Print semantic tag spans instead of the text")
    parser.add_argument("--refs", action="store_true", help="Print man pages referenced by the page")
    parser.add_argument("--json", action="store_true", help="Print the annotated page as JSON")
    parser.add_argument("--list", action="store_true", help="List installed programs")
    parser.add_argument("--favorites", action="store_true", help="List favorite programs")
    parser.add_argument("--jump", metavar="PREFIX", help="Print the first listed program starting with PREFIX")
    parser.add_argument("--favorite", action="store_true", help="Toggle the program's favorite status")
    parser.add_argument("--note", metavar="TEXT", help="Save notes for the program (empty text deletes them)")
    parser.add_argument("--show-note", action="store_true", help="Print the program's notes")
    parser.add_argument("--help-fallback", action="store_true", help="Run '<program> --help' when no man page exists")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    settings = Settings.load()
    if args.help_fallback:
        settings.enable_help_fallback = True

    favorites = FavoritesManager()
    notes = NotesRepository()

    if args.program is None or args.list or args.favorites:
        return run_listing(args, favorites, notes)
    return run_page(args, settings, favorites, notes)
