"""config.py

Run configuration for the named places program.

Both input files are optional positionals:

    python main.py [places_file] [states_file] [--log-level LEVEL]

Anything not given on the command line falls back to the caller-supplied
defaults, or stays unset.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class AppConfig:
    places_path: Optional[str] = None
    states_path: Optional[str] = None
    log_level: str = 'WARNING'

    # Which paths came from the command line (for the startup banner).
    places_given: bool = False
    states_given: bool = False

    def source_description(self) -> str:
        if self.places_given and self.states_given:
            return 'specified files'
        if self.places_given:
            return 'specified file for places'
        return 'default file(s)'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Look up named places by name, or by name and state.')
    parser.add_argument('places_file', nargs='?', default=None,
                        help='fixed-width named places file')
    parser.add_argument('states_file', nargs='?', default=None,
                        help='state abbreviations file ("AK Alaska" per line)')
    parser.add_argument('--log-level', default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='logging level (default: WARNING)')
    return parser


def parse_args(argv: Optional[Sequence[str]] = None,
               defaults: Optional[AppConfig] = None) -> AppConfig:
    """Parse argv into an AppConfig, filling gaps from `defaults`."""
    defaults = defaults or AppConfig()
    args = build_parser().parse_args(argv)

    return AppConfig(
        places_path=args.places_file if args.places_file is not None else defaults.places_path,
        states_path=args.states_file if args.states_file is not None else defaults.states_path,
        log_level=args.log_level or defaults.log_level,
        places_given=args.places_file is not None,
        states_given=args.states_file is not None,
    )
