"""Tests for array template expansion and placeholder detection."""

import pytest

from phargs.expansion import expand_array, expand_row, row_has_placeholder
from phargs.expansion.arrays import is_array_template


class TestExpandArray:
    """Bracketed templates expand once per value; everything else passes through."""

    def test_bracketed_template_expands_per_value(self):
        assert expand_array("[{}.txt]", ["a", "b"]) == ["a.txt", "b.txt"]

    def test_plain_template_is_returned_unchanged(self):
        assert expand_array("{}.txt", ["a", "b"]) == ["{}.txt"]

    def test_plain_template_ignores_empty_values(self):
        assert expand_array("plain", []) == ["plain"]

    def test_bracketed_template_with_no_values_is_empty(self):
        assert expand_array("[{}.txt]", []) == []

    def test_empty_brackets_yield_one_empty_string_per_value(self):
        assert expand_array("[]", ["a", "b", "c"]) == ["", "", ""]

    @pytest.mark.parametrize("template", ["[", "]", "", "[abc", "abc]", "x[{}]"])
    def test_malformed_brackets_pass_through(self, template):
        assert expand_array(template, ["a", "b"]) == [template]

    def test_every_occurrence_gets_the_same_value(self):
        assert expand_array("[{}-{}]", ["x", "y"]) == ["x-x", "y-y"]

    def test_inner_format_without_placeholder_is_repeated(self):
        assert expand_array("[-v]", ["a", "b"]) == ["-v", "-v"]

    def test_replacement_is_literal(self):
        """Regex metacharacters in values are inserted verbatim."""
        assert expand_array("[{}]", [r"a.*\1", "$0"]) == [r"a.*\1", "$0"]

    def test_nested_brackets_strip_only_outer_pair(self):
        assert expand_array("[[{}]]", ["a"]) == ["[a]"]

    def test_is_array_template(self):
        assert is_array_template("[]")
        assert is_array_template("[{}]")
        assert not is_array_template("[")
        assert not is_array_template("]")
        assert not is_array_template("{}")


class TestExpandRow:
    """Row expansion flattens array expansion over the template list."""

    def test_mixed_row(self):
        assert expand_row(["a", "[{}.txt]"], ["1", "2"]) == ["a", "1.txt", "2.txt"]

    def test_order_is_preserved(self):
        row = expand_row(["[{}.in]", "mid", "[{}.out]"], ["1", "2"])
        assert row == ["1.in", "2.in", "mid", "1.out", "2.out"]

    def test_placeholders_outside_brackets_are_kept(self):
        assert expand_row(["{}", "[{}.txt]"], ["a", "c"]) == ["{}", "a.txt", "c.txt"]

    def test_empty_row(self):
        assert expand_row([], ["a"]) == []

    def test_accepts_any_iterable(self):
        assert expand_row(iter(["x", "[{}]"]), ("1",)) == ["x", "1"]


class TestRowHasPlaceholder:
    """Placeholder detection is a plain substring test."""

    def test_detects_bare_placeholder(self):
        assert row_has_placeholder(["a", "{}"])

    def test_detects_embedded_placeholder(self):
        assert row_has_placeholder(["a", "{}.txt"])

    def test_no_placeholder(self):
        assert not row_has_placeholder(["a", "b", "c"])

    def test_empty_row(self):
        assert not row_has_placeholder([])

    def test_partial_braces_do_not_count(self):
        assert not row_has_placeholder(["{", "}", "{ }", "}{"])

    def test_is_repeatable_on_same_list(self):
        row = ["a", "b"]
        assert not row_has_placeholder(row)
        assert not row_has_placeholder(row)
