"""Wildcard pattern validation and matching.

Textual identifiers are dot-separated segments. Patterns used for
registration may contain wildcards:

- ``*`` matches exactly one non-empty, dot-free substring:
  ``user.*`` matches ``user.login`` but not ``user.a.b`` nor ``user.``.
- ``**`` occupies a whole segment and matches zero or more segments:
  ``user.**`` matches ``user``, ``user.login`` and ``user.a.b.c``.

Identifiers passed to ``emit`` must be concrete (no wildcards at all).
Opaque (non-string) identifiers are never checked or pattern-matched.
"""

import re
from functools import lru_cache
from typing import Any

from event_hub.exceptions import InvalidIdentifierError
from event_hub.identifiers import (
    SEPARATOR,
    WILDCARD,
    Identifier,
    TextualIdentifier,
    parse_identifier,
)

DOUBLE_WILDCARD = WILDCARD * 2
MAX_WILDCARDS = 2

_WILDCARD_RUN = re.compile(r"\*+")
_SEGMENT = r"[^.]+"


def _check_edges(identifier: TextualIdentifier) -> None:
    name = identifier.name
    if name.startswith(SEPARATOR) or name.endswith(SEPARATOR):
        raise InvalidIdentifierError(name, "cannot start or end with '.'")


def validate_for_registration(identifier: Any) -> Identifier:
    """Check that an identifier may be used with ``on``/``once``.

    Returns the parsed identifier.

    Raises:
        InvalidIdentifierError: If a textual identifier is not a valid pattern
    """
    parsed = parse_identifier(identifier)
    if not isinstance(parsed, TextualIdentifier):
        return parsed

    name = parsed.name
    _check_edges(parsed)

    if name in (WILDCARD, DOUBLE_WILDCARD):
        raise InvalidIdentifierError(name, "identifier cannot consist of a wildcard only")

    runs = list(_WILDCARD_RUN.finditer(name))
    if any(len(run.group()) > MAX_WILDCARDS for run in runs):
        raise InvalidIdentifierError(name, "three or more consecutive '*' are not allowed")

    has_double = any(run.group() == DOUBLE_WILDCARD for run in runs)
    if has_double and len(runs) > 1:
        raise InvalidIdentifierError(name, "'**' cannot be combined with other wildcards")
    if name.count(WILDCARD) > MAX_WILDCARDS:
        raise InvalidIdentifierError(name, "at most two '*' are allowed")

    for run in runs:
        before = name[run.start() - 1] if run.start() > 0 else ""
        after = name[run.end()] if run.end() < len(name) else ""
        if SEPARATOR not in (before, after):
            raise InvalidIdentifierError(
                name,
                "'*' must have a '.' before or after it, e.g. 'user.*' or '*.end' "
                "(not 'user*' or 'eve*nt')",
            )
        whole_segment = before in ("", SEPARATOR) and after in ("", SEPARATOR)
        if run.group() == DOUBLE_WILDCARD and not whole_segment:
            raise InvalidIdentifierError(name, "'**' must be a whole segment, e.g. 'user.**'")

    return parsed


def validate_for_emission(identifier: Any) -> Identifier:
    """Check that an identifier is concrete enough to be emitted.

    Raises:
        InvalidIdentifierError: If a textual identifier contains '*' or
            starts/ends with '.'
    """
    parsed = parse_identifier(identifier)
    if not isinstance(parsed, TextualIdentifier):
        return parsed
    if WILDCARD in parsed.name:
        raise InvalidIdentifierError(parsed.name, "emitted identifiers cannot contain '*'")
    _check_edges(parsed)
    return parsed


def _translate_segment(segment: str) -> str:
    return _SEGMENT.join(re.escape(part) for part in segment.split(WILDCARD))


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a registration pattern into an anchored regex.

    Assumes the pattern already passed ``validate_for_registration``.
    """
    segments = pattern.split(SEPARATOR)
    regex = ""
    for index, segment in enumerate(segments):
        if segment == DOUBLE_WILDCARD:
            regex += r"(?:.+\.)?" if index == 0 else r"(?:\..+)?"
            continue
        leading_double = index == 1 and segments[0] == DOUBLE_WILDCARD
        if index > 0 and not leading_double:
            regex += re.escape(SEPARATOR)
        regex += _translate_segment(segment)
    return re.compile(regex, re.DOTALL)


def matches(pattern: str, concrete: str) -> bool:
    """Return True if the concrete identifier is covered by the pattern."""
    if pattern == concrete:
        return True
    if WILDCARD not in pattern:
        return False
    return compile_pattern(pattern).fullmatch(concrete) is not None
