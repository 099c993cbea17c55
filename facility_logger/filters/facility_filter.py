"""
Facility name filter using regular expressions

Compiles a filter expression such as ``"-^A,.o+,..h+"`` into rules and
decides which facility names may produce output.

Expression grammar:
    Comma-separated tokens. A token starting with ``-`` is negated; the
    rest of the token is a regular expression searched anywhere in the
    facility name (anchor it with ``^``/``$`` for whole-name matches).

Evaluation:
    A name is allowed when it matches every positive rule and none of the
    negative rules. With no positive rules every name not excluded by a
    negative rule is allowed.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Pattern, Tuple

from facility_logger.core.exceptions import FilterSyntaxError

TOKEN_SEPARATOR = ","
NEGATE_PREFIX = "-"


@dataclass(frozen=True)
class FilterRule:
    """A single compiled filter token."""

    pattern: Pattern
    negate: bool = False

    def matches(self, name: str) -> bool:
        """Check whether the pattern occurs anywhere in name."""
        return self.pattern.search(name) is not None

    def __str__(self) -> str:
        prefix = NEGATE_PREFIX if self.negate else ""
        return f"{prefix}{self.pattern.pattern}"


def parse_filters(expression: Optional[str]) -> Tuple[FilterRule, ...]:
    """
    Parse a filter expression into rules.

    Args:
        expression: Comma-separated filter tokens. None or empty allows all.

    Returns:
        Rules in the order they appear in the expression

    Raises:
        FilterSyntaxError: If any token is not a valid regular expression.
            No rules are returned in that case.

    Example:
        >>> [str(r) for r in parse_filters("name,-not")]
        ['name', '-not']
    """
    if not expression:
        return ()

    rules: List[FilterRule] = []
    for token in expression.split(TOKEN_SEPARATOR):
        if not token:
            continue

        negate = token.startswith(NEGATE_PREFIX)
        source = token[len(NEGATE_PREFIX):] if negate else token

        try:
            pattern = re.compile(source)
        except re.error as e:
            raise FilterSyntaxError(token, str(e)) from e

        rules.append(FilterRule(pattern=pattern, negate=negate))

    return tuple(rules)


def evaluate_filters(name: str, rules: Iterable[FilterRule]) -> bool:
    """
    Check whether a facility name passes the given rules.

    Args:
        name: Facility name
        rules: Compiled filter rules

    Returns:
        True if name matches all positive rules and no negative rule
    """
    for rule in rules:
        # Positive rules must match, negative rules must not
        if rule.matches(name) == rule.negate:
            return False
    return True


class FacilityFilter:
    """
    Immutable set of facility filter rules.

    The logger swaps whole instances when filters change, so readers never
    observe a partially updated rule set.

    Example:
        facility_filter = FacilityFilter("-^A,.o+,..h+")
        facility_filter.filter_names(["Adam", "John", "Jones"])  # ["John"]
    """

    __slots__ = ("_expression", "_rules")

    def __init__(self, expression: Optional[str] = ""):
        self._expression = expression or ""
        self._rules = parse_filters(self._expression)

    @property
    def expression(self) -> str:
        return self._expression

    @property
    def rules(self) -> Tuple[FilterRule, ...]:
        return self._rules

    @property
    def positives(self) -> Tuple[FilterRule, ...]:
        return tuple(rule for rule in self._rules if not rule.negate)

    @property
    def negatives(self) -> Tuple[FilterRule, ...]:
        return tuple(rule for rule in self._rules if rule.negate)

    def allows(self, name: str) -> bool:
        """Check whether a facility name passes this filter."""
        return evaluate_filters(name, self._rules)

    def filter_names(self, names: Iterable[str]) -> List[str]:
        """Keep the names this filter allows, preserving order."""
        return [name for name in names if self.allows(name)]

    def __bool__(self) -> bool:
        return bool(self._rules)

    def __repr__(self) -> str:
        """String representation."""
        return f"FacilityFilter(expression={self._expression!r})"
