"""data_loader.py

Loaders for:
- named-places.txt (fixed-width place records)
- states.txt ("AK Alaska" style abbreviation list)

The places file has no header and no delimiters; every field sits at a fixed
column range:

    0-7    identifier          60-67   population
    8-9    state code          68-77   area
    10-59  name                78-87   latitude
                               88-97   longitude
                               98-105  road intersection code
                               106-113 distance to intersection

Lines that fail to parse are logged and skipped so that one bad record does not
abort the whole load.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from models import Place
from hash_table import HashTable
from util import trim

logger = logging.getLogger(__name__)

UNKNOWN_STATE = 'Unknown State'

# Single-byte decoding keeps every byte readable and the columns on byte offsets.
FILE_ENCODING = 'latin-1'


def _field(line: str, start: int, width: int, label: str) -> str:
    s = trim(line[start:start + width])
    if not s:
        raise ValueError(f'missing {label} (columns {start}-{start + width - 1})')
    return s


def _int(line: str, start: int, width: int, label: str) -> int:
    s = _field(line, start, width, label)
    try:
        return int(s)
    except ValueError:
        raise ValueError(f'invalid {label}: {s!r}') from None


def _float(line: str, start: int, width: int, label: str) -> float:
    s = _field(line, start, width, label)
    try:
        return float(s)
    except ValueError:
        raise ValueError(f'invalid {label}: {s!r}') from None


def parse_place_line(line: str) -> Place:
    """Parse one fixed-width line into a Place.

    Raises ValueError if a numeric field is blank or unparseable.
    """
    line = line.rstrip('\r\n')
    return Place(
        identifier=_int(line, 0, 8, 'identifier'),
        region=line[8:10],
        name=trim(line[10:60]),
        population=_int(line, 60, 8, 'population'),
        area=_float(line, 68, 10, 'area'),
        latitude=_float(line, 78, 10, 'latitude'),
        longitude=_float(line, 88, 10, 'longitude'),
        road_intersection=_int(line, 98, 8, 'road intersection'),
        distance=_float(line, 106, 8, 'distance'),
    )


def load_places(path: str, table: Optional[HashTable] = None) -> HashTable:
    """Read every place in `path` into `table` (a new HashTable if not given).

    Raises OSError (e.g. FileNotFoundError) if the file cannot be opened.
    """
    if table is None:
        table = HashTable()

    count = 0
    skipped = 0
    with open(path, encoding=FILE_ENCODING) as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip('\r\n'):
                continue
            try:
                place = parse_place_line(line)
            except ValueError as e:
                logger.warning('%s:%d: skipping unparseable line: %s', path, lineno, e)
                skipped += 1
                continue
            table.insert(place)
            count += 1

    logger.info('Loaded %d places from %s (%d skipped, capacity %d)',
                count, path, skipped, table.capacity)
    return table


def read_states(path: Optional[str]) -> Dict[str, str]:
    """Read the states file into {abbreviation: full name}.

    A file that cannot be opened is not fatal: the states list is only used
    for display.
    """
    states: Dict[str, str] = {}
    if not path:
        logger.warning('Could not open states file: %s', path)
        return states

    try:
        f = open(path, encoding=FILE_ENCODING)
    except OSError as e:
        logger.warning('Could not open states file: %s (%s)', path, e)
        return states

    with f:
        for line in f:
            line = line.rstrip('\r\n')
            if len(line) < 4:   # minimum: "AK X"
                continue
            # First entry wins if an abbreviation is repeated.
            states.setdefault(line[:2], trim(line[2:]))

    logger.info('Loaded %d states from %s', len(states), path)
    return states


def state_full_name(states: Dict[str, str], abbr: str) -> str:
    return states.get(abbr, UNKNOWN_STATE)
