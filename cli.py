"""cli.py

Interactive command-line interface for the named places lookup.

Program flow when you run `python main.py [places_file] [states_file]`:
  1) Read the states abbreviation list (display only).
  2) Load every place from the fixed-width places file into the custom HashTable.
  3) Answer queries until the user quits:
       N placename        - list every state that has a place with this name
       S placename state  - show the full record for one place
       Q                  - quit

Note:
- `execute_command` is the whole command language and returns the text to
  print, so it can be driven without a terminal. `run_cli` only does I/O.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Sequence

from models import Place
from hash_table import HashTable
from data_loader import load_places, read_states, state_full_name
from config import AppConfig, parse_args
from util import trim, strip_quotes, format_number

logger = logging.getLogger(__name__)

USAGE = (
    "Interactive Query System (Enter Q to quit)\n"
    "Commands:\n"
    "  N placename - Find all states with this place name\n"
    "  S placename state - Get detailed info for specific place\n"
    "  Q - Quit"
)


def format_place(place: Place, states: Dict[str, str]) -> str:
    full = state_full_name(states, place.region)
    return "\n".join([
        "Place Information:",
        f"  Name: {place.name}",
        f"  State: {place.region} ({full})",
        f"  Code: {place.identifier}",
        f"  Population: {place.population}",
        f"  Area: {format_number(place.area)} sq units",
        f"  Latitude: {format_number(place.latitude)}",
        f"  Longitude: {format_number(place.longitude)}",
        f"  Road Intersection Code: {place.road_intersection}",
        f"  Distance to Intersection: {format_number(place.distance)} units",
    ])


def _find_by_name(arg: str, table: HashTable, states: Dict[str, str]) -> str:
    placename = trim(arg)
    if not placename:
        return "Error: Please provide a place name after N"

    results = table.find_by_name(placename)
    if not results:
        return f"No places found with name: {placename}"

    lines = [f"Found {len(results)} places with name '{placename}':"]
    for p in results:
        lines.append(f"  {p.region} - {state_full_name(states, p.region)}")
    return "\n".join(lines)


def _find_by_name_and_state(arg: str, table: HashTable, states: Dict[str, str]) -> str:
    rest = trim(arg)
    if not rest:
        return "Error: Please provide place name and state after S"

    # The state is the last word; everything before it is the place name.
    last_space = rest.rfind(' ')
    if last_space <= 0 or last_space == len(rest) - 1:
        return "Error: Format should be 'S placename state'"

    placename = strip_quotes(rest[:last_space])
    state = rest[last_space + 1:]

    place = table.find_by_name_and_state(placename, state)
    if place is None:
        return f"Place not found: {placename}, {state}"
    return format_place(place, states)


def execute_command(line: str, table: HashTable, states: Dict[str, str]) -> Optional[str]:
    """Run one command line.

    Returns the text to print, '' for a blank line, or None when the user quits.
    """
    if not line:
        return ""

    cmd = line[0].upper()
    if cmd == 'Q':
        return None
    if cmd == 'N':
        return _find_by_name(line[1:], table, states)
    if cmd == 'S':
        return _find_by_name_and_state(line[1:], table, states)
    return "Unknown command. Use N, S, or Q."


def query_loop(table: HashTable, states: Dict[str, str],
               read_line: Callable[[str], str] = input) -> None:
    """Prompt for commands until Q or end of input."""
    print("\n" + USAGE)
    while True:
        try:
            line = read_line("\n> ")
        except EOFError:
            break

        out = execute_command(line, table, states)
        if out is None:
            break
        if out:
            print(out)


def run_cli(config: AppConfig, read_line: Callable[[str], str] = input) -> int:
    """CLI entry point. Returns the process exit code."""
    logging.basicConfig(level=config.log_level,
                        format='%(levelname)s %(name)s: %(message)s')

    print(f"Using {config.source_description()}")
    print(f"Using places file: {config.places_path or '(unset)'}")
    print(f"Using states file: {config.states_path or '(unset)'}")

    states = read_states(config.states_path)
    print(f"Loaded {len(states)} states")

    if not config.places_path:
        print("Error: No places file given. Usage: python main.py places_file [states_file]")
        return 1

    print("Reading places data...")
    try:
        table = load_places(config.places_path)
    except OSError as e:
        logger.error("Could not open places file %s: %s", config.places_path, e)
        print(f"Error: Could not open places file: {config.places_path}")
        return 1

    print(f"Successfully loaded {len(table)} places into hash table")

    query_loop(table, states, read_line)
    print("Goodbye!")
    table.clear()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run_cli(parse_args(argv))
