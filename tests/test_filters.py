"""Tests for facility filter parsing and evaluation"""

import itertools
import re

import pytest

from facility_logger import FilterSyntaxError
from facility_logger.filters import (
    FacilityFilter,
    FilterRule,
    evaluate_filters,
    parse_filters,
)

NAMES = ["Adam", "John", "Jones"]


def allowed(expression, names=NAMES):
    return [n for n in names if evaluate_filters(n, parse_filters(expression))]


class TestParseFilters:
    """Test filter expression parsing."""

    def test_empty_expression(self):
        assert parse_filters("") == ()
        assert parse_filters(None) == ()

    def test_round_trip_order_and_negation(self):
        rules = parse_filters("name,-not,^x$,-y+")
        assert [(r.pattern.pattern, r.negate) for r in rules] == [
            ("name", False),
            ("not", True),
            ("^x$", False),
            ("y+", True),
        ]

    def test_rules_are_immutable(self):
        rule = parse_filters("a")[0]
        with pytest.raises(AttributeError):
            rule.negate = True

    def test_empty_tokens_are_skipped(self):
        rules = parse_filters("a,,-b,")
        assert [str(r) for r in rules] == ["a", "-b"]

    def test_whitespace_is_part_of_pattern(self):
        rules = parse_filters(" a")
        assert rules[0].pattern.pattern == " a"

    def test_bare_dash_excludes_everything(self):
        assert allowed("-") == []

    def test_invalid_pattern_names_token(self):
        with pytest.raises(FilterSyntaxError) as exc_info:
            parse_filters("good,-(bad")

        error = exc_info.value
        assert error.token == "-(bad"
        assert "-(bad" in str(error)
        assert isinstance(error, ValueError)
        assert isinstance(error.__cause__, re.error)

    def test_unicode_patterns(self):
        rules = parse_filters("-é,ü+")
        assert rules[0].matches("café")
        assert rules[1].matches("Müüller")
        assert not rules[1].matches("Muller")


class TestEvaluateFilters:
    """Test inclusion semantics."""

    def test_no_filter_allows_all(self):
        assert allowed("") == NAMES

    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("-^Jo*", ["Adam"]),
            ("-A+", ["John", "Jones"]),
            ("Jo+", ["John", "Jones"]),
            ("-^A,.o+,..h+", ["John"]),
            ("John", ["John"]),
            ("^J,-s$", ["John"]),
        ],
    )
    def test_name_matrix(self, expression, expected):
        assert allowed(expression) == expected

    def test_single_letter_sets(self):
        assert allowed("a", ["a", "b", "c"]) == ["a"]
        assert allowed("-b", ["a", "b", "c"]) == ["a", "c"]
        assert allowed("-é", ["á", "é", "í"]) == ["á", "í"]

    def test_positive_rules_are_all_required(self):
        # Jones matches ".o+" but not "..h+"
        assert allowed(".o+,..h+") == ["John"]

    def test_substring_search_unless_anchored(self):
        assert evaluate_filters("http.server", parse_filters("server"))
        assert not evaluate_filters("http.server", parse_filters("^server"))

    def test_case_sensitive(self):
        assert allowed("adam") == []

    def test_order_independent(self):
        tokens = ["-^A", ".o+", "..h+", "-s$"]
        results = {
            tuple(allowed(",".join(p))) for p in itertools.permutations(tokens)
        }
        assert results == {("John",)}


class TestFacilityFilter:
    """Test the FacilityFilter value object."""

    def test_partitions_rules(self):
        facility_filter = FacilityFilter("-^A,.o+,..h+")

        assert [str(r) for r in facility_filter.positives] == [".o+", "..h+"]
        assert [str(r) for r in facility_filter.negatives] == ["-^A"]
        assert facility_filter.expression == "-^A,.o+,..h+"

    def test_filter_names_preserves_order(self):
        facility_filter = FacilityFilter("-b")
        assert facility_filter.filter_names(["c", "b", "a"]) == ["c", "a"]

    def test_truthiness(self):
        assert not FacilityFilter("")
        assert not FacilityFilter(None)
        assert FacilityFilter("x")

    def test_rule_str(self):
        assert str(FilterRule(re.compile("^x"), negate=True)) == "-^x"

    def test_repr(self):
        assert "-b" in repr(FacilityFilter("-b"))
