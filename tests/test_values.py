"""Tests for value formatting."""

import datetime

import pytest

from soqlbuilder.values import Function, Raw, format_date_literal, format_value, format_values, is_multiple


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Mikhail", "'Mikhail'"),
        ("", "''"),
        ("60", "'60'"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        (0, "0"),
        (42, "42"),
        (-3.5, "-3.5"),
        (Raw("TODAY"), "TODAY"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_string_quotes_are_not_escaped():
    assert format_value("it's") == "'it's'"


def test_format_values_joins_with_comma():
    assert format_values(["a", 1, None]) == "'a', 1, null"


def test_format_values_empty():
    assert format_values([]) == ""


class TestDateType:
    """Tests for the forced date type."""

    def test_string_passes_through(self):
        """Test strings under the date type are not quoted."""
        assert format_value("2019-10-10", "date") == "2019-10-10"

    def test_date_literal_keyword(self):
        """Test SOQL date keywords pass through unquoted."""
        assert format_value("LAST_N_DAYS:30", "date") == "LAST_N_DAYS:30"

    def test_raw_passes_through(self):
        """Test Raw values under the date type."""
        assert format_value(Raw("YESTERDAY"), "date") == "YESTERDAY"

    def test_date(self):
        """Test date rendering."""
        assert format_date_literal(datetime.date(2019, 10, 9)) == "2019-10-09"

    def test_naive_datetime_is_utc(self):
        """Test naive datetimes are taken as UTC."""
        assert format_date_literal(datetime.datetime(2019, 10, 9, 23, 59, 1)) == "2019-10-09T23:59:01Z"

    def test_aware_datetime_is_converted(self):
        """Test aware datetimes are converted to UTC."""
        tz = datetime.timezone(datetime.timedelta(hours=2))
        value = datetime.datetime(2019, 10, 10, 1, 0, 0, tzinfo=tz)
        assert format_date_literal(value) == "2019-10-09T23:00:00Z"


class TestRaw:
    """Tests for the Raw value wrapper."""

    def test_str_and_repr(self):
        """Test __str__ and __repr__ for Raw."""
        raw = Raw("THIS_MONTH")
        assert str(raw) == "THIS_MONTH"
        assert repr(raw) == "Raw('THIS_MONTH')"

    def test_equality(self):
        """Test Raw equality and hashing."""
        assert Raw("A") == Raw("A")
        assert Raw("A") != Raw("B")
        assert len({Raw("A"), Raw("A")}) == 1

    def test_non_string_expression(self):
        """Test Raw accepts non-string expressions."""
        assert format_value(Raw(5)) == "5"


class TestDateValues:
    """Tests for date objects outside where_date()."""

    def test_date_is_unquoted_literal(self):
        """A date passed to format_value renders as a bare SOQL date."""
        assert format_value(datetime.date(2024, 1, 31)) == "2024-01-31"

    def test_datetime_is_unquoted_literal(self):
        """A datetime renders as a dateTime literal with no space in it."""
        assert format_value(datetime.datetime(2024, 1, 31, 8, 5)) == "2024-01-31T08:05:00Z"

    def test_datetime_drops_microseconds(self):
        """Microseconds are not part of a SOQL dateTime literal."""
        assert format_value(datetime.datetime(2024, 1, 31, 8, 5, 0, 123456)) == "2024-01-31T08:05:00Z"

    def test_none_with_date_type_is_null(self):
        """None under the date type renders as null, not the Python name."""
        assert format_value(None, "date") == "null"

    def test_short_year_is_padded(self):
        """Years below 1000 keep four digits."""
        assert format_date_literal(datetime.date(999, 1, 2)) == "0999-01-02"

    def test_short_year_datetime_is_padded(self):
        """Padding also applies to dateTime literals."""
        assert format_date_literal(datetime.datetime(99, 1, 2, 3, 4, 5)) == "0099-01-02T03:04:05Z"


class TestFunction:
    """Tests for the Function value variant."""

    def test_single_argument(self):
        """A single argument is formatted and wrapped in the call."""
        assert format_value(Function("INCLUDES", "a")) == "INCLUDES('a')"

    def test_list_arguments(self):
        """Each list item is formatted on its own."""
        assert format_value(Function("INCLUDES", ["a", 1, None])) == "INCLUDES('a', 1, null)"

    def test_generator_arguments(self):
        """Generators are consumed once into the argument tuple."""
        func = Function("F", (x for x in ["a", "b"]))
        assert func.render() == "F('a', 'b')"
        assert func.render() == "F('a', 'b')"

    def test_set_arguments(self):
        """A set is treated as several values, not one."""
        assert Function("INCLUDES", {"a"}).render() == "INCLUDES('a')"

    def test_no_arguments(self):
        """Default arguments render an empty call."""
        assert Function("TODAY").render() == "TODAY()"

    def test_nested_function(self):
        """Function arguments may themselves be functions."""
        assert format_value(Function("OUTER", [Function("INNER", 1)])) == "OUTER(INNER(1))"

    def test_equality_and_repr(self):
        """Functions compare by name and arguments."""
        assert Function("F", ["a"]) == Function("F", ("a",))
        assert Function("F", "a") != Function("G", "a")
        assert repr(Function("F", "a")) == "Function('F', ['a'])"


@pytest.mark.parametrize(
    "value,expected",
    [("abc", False), (b"abc", False), (1, False), (None, False), (["a"], True), (("a",), True), ({"a"}, True)],
)
def test_is_multiple(value, expected):
    assert is_multiple(value) is expected
