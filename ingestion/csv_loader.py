"""
People CSV loader for the Vaccination Hub Planner.

Expected layout:

    SSN,LAST,FIRST,YEAR
    RSSMRA50A01H501U,Rossi,Mario,1950

Malformed, duplicate or future-born lines are handed to a LoadErrorReporter and skipped;
the load carries on with the next line.
"""

import logging
import re
from typing import TYPE_CHECKING, Iterable, List, Optional, Protocol, Tuple

from exceptions.custom_errors import DuplicateKeyError, InvalidConfigurationError, MalformedHeaderError

if TYPE_CHECKING:
    from scheduler.state import Registry

logger = logging.getLogger(__name__)

HEADER_PATTERN = re.compile(r"^SSN,LAST,FIRST,YEAR")
LINE_PATTERN = re.compile(r"^(?P<ssn>[A-Z0-9]+),(?P<last>[^,]+),(?P<first>[^,]+),(?P<year>[0-9]+)")


class LoadErrorReporter(Protocol):
    """Receives every offending line of a load. Lines are 1-indexed, header included."""

    def on_load_error(self, line_number: int, raw_line: str) -> None:
        ...


class CollectingReporter:
    """Keeps (line_number, raw_line) pairs, handy for reports and tests."""

    def __init__(self):
        self.errors: List[Tuple[int, str]] = []

    def on_load_error(self, line_number: int, raw_line: str) -> None:
        self.errors.append((line_number, raw_line))


def load_people(
    lines: Iterable[str],
    registry: "Registry",
    reporter: Optional[LoadErrorReporter] = None
) -> int:
    """
    Registers every well-formed person line and returns how many were added.
    Raises MalformedHeaderError (after reporting line 1) if the header is wrong.
    """
    count = 0
    line_number = 0

    for raw in lines:
        line_number += 1
        line = raw.rstrip("\r\n")

        if line_number == 1:
            if not HEADER_PATTERN.match(line):
                _report(reporter, line_number, line)
                raise MalformedHeaderError(f"Invalid header: {line!r}")
            continue

        match = LINE_PATTERN.match(line)
        if not match:
            logger.debug(f"Line {line_number} malformed: {line!r}")
            _report(reporter, line_number, line)
            continue

        try:
            registry.add_person(
                first_name=match.group("first"),
                last_name=match.group("last"),
                ssn=match.group("ssn"),
                birth_year=int(match.group("year"))
            )
        except (DuplicateKeyError, InvalidConfigurationError) as e:
            logger.debug(f"Line {line_number} rejected: {e}")
            _report(reporter, line_number, line)
            continue
        count += 1

    if line_number == 0:
        _report(reporter, 1, "")
        raise MalformedHeaderError("Empty input: header missing")

    logger.info(f"Loaded {count} people from {line_number - 1} data lines")
    return count


def _report(reporter: Optional[LoadErrorReporter], line_number: int, line: str) -> None:
    if reporter is not None:
        reporter.on_load_error(line_number, line)
