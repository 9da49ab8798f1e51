import logging

import numpy as np
import pytest

from numpy.testing import assert_array_equal

from isbnparts.groups import Elements, RangeRule, RegistrationGroup
from isbnparts.isbn import (
    ISBN,
    check_gtins,
    hyphenate,
    is_valid,
    is_valid10,
    is_valid13,
    normalize,
    parse_isbn,
    sanitize,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("978-1-4088-5589-8", "9781408855898"),
        ("ISBN 1 5266 4665 X", "152664665X"),
        ("978 1.4088/5589_8\n", "9781408855898"),
        ("152664665x", "152664665"),
        ("", ""),
    ],
)
def test_sanitize(value, expected):
    assert expected == sanitize(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("978-1-4088-5589-8", True),
        ("978-1-4088-5589-0", False),
        ("1-4088-5589-5", True),
        ("1-4088-5589-0", False),
        ("1-5266-4665-X", True),
        (9781408855898, True),
        (np.int64(9781408855898), True),
        (9781408855890, False),
        (-9781408855898, False),
        # Neither 10 nor 13 significant characters
        ("978-1-4088-5589", False),
        ("978-1-4088-5589-8-1", False),
        ("", False),
    ],
)
def test_is_valid(value, expected):
    assert expected == is_valid(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("9781408855898", True),
        ("9781408855890", False),
        ("978140885589X", False),
        ("978140885589", False),
    ],
)
def test_is_valid13(value, expected):
    assert expected == is_valid13(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1408855895", True),
        ("152664665X", True),
        # 'X' is only allowed as the check digit
        ("X526646651", False),
        ("15266466510", False),
    ],
)
def test_is_valid10(value, expected):
    assert expected == is_valid10(value)


@pytest.mark.parametrize("value", [None, 9781408855898.0, True])
def test_is_valid_with_wrong_type(value):
    with pytest.raises(TypeError):
        is_valid(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1408855895", "9781408855898"),
        ("152664665X", "9781526646651"),
        ("0000000000", "9780000000002"),
        ("9781408855898", "9781408855898"),
    ],
)
def test_normalize(value, expected):
    assert expected == normalize(value)


def make_isbn10(number):
    body = f"{number:09d}"
    check = sum(i * int(digit) for i, digit in enumerate(body, 1)) % 11
    return f"{body}{'X' if check == 10 else check}"


# Spread over the whole range, so some start with zeros and some end with "X"
GENERATED_ISBN10S = [make_isbn10(x) for x in range(0, 10**9, 3_333_337)]


def test_generated_isbn10s():
    assert 300 == len(GENERATED_ISBN10S)
    assert any(x.endswith("X") for x in GENERATED_ISBN10S)
    assert any(x.startswith("00") for x in GENERATED_ISBN10S)


@pytest.mark.parametrize("value", GENERATED_ISBN10S)
def test_normalized_isbn10_is_valid_isbn13(value):
    assert is_valid10(value)
    normalized = normalize(value)
    assert normalized.startswith("978")
    assert value[:-1] == normalized[3:-1]
    assert is_valid13(normalized)


def test_parse_elements():
    isbn = parse_isbn("978-1-4088-5589-8")
    assert isbn is not None
    assert Elements(
        prefix=978,
        group=1,
        registrant="4088",
        publication="5589",
        check_digit=8,
    ) == isbn.elements
    assert "English language" == isbn.group_name
    assert 9781408855898 == isbn.gtin


def test_parse_isbn_element_properties():
    isbn = parse_isbn("978-1-4088-5589-8")
    assert (978, 1, "4088", "5589", 8) == (
        isbn.prefix,
        isbn.group,
        isbn.registrant,
        isbn.publication,
        isbn.check_digit,
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        ("978-1-4088-5589-8", "978-1-4088-5589-8"),
        ("1-4088-5589-5", "978-1-4088-5589-8"),
        ("1-5266-4665-X", "978-1-5266-4665-1"),
        (9781781100769, "978-1-78110-076-9"),
        (1408855895, "978-1-4088-5589-8"),
        ("9780000000002", "978-0-00-000000-2"),
        # Leading zeros of the registrant are kept
        ("9781008000001", "978-1-008-00000-1"),
    ],
)
def test_parse_isbn_string(value, expected):
    assert expected == parse_isbn(value).isbn_string


@pytest.mark.parametrize(
    "value",
    [
        # Not ISBN-10 or ISBN-13
        "978-1-4088-5589",
        "not an isbn",
        # Incorrect check digit
        "978-1-4088-5589-0",
        "1-4088-5589-0",
        # Undefined registration group
        "979-0-000000-00-1",
        # Undefined registrant range
        "979-8-000000-00-7",
        # The upper bound of a range is excluded
        "9781009000000",
    ],
)
def test_parse_isbn_not_valid(value):
    assert parse_isbn(value) is None


def test_parse_isbn_logs_rejection(caplog):
    with caplog.at_level(logging.DEBUG, logger="isbnparts.isbn"):
        assert parse_isbn("979-8-000000-00-7") is None
    assert "undefined registrant in group 979-8" in caplog.text


@pytest.mark.parametrize(
    "value",
    ["978-1-4088-5589-8", "1-5266-4665-X", "9781781100769", "9780000000002"],
)
def test_parse_hyphenated_isbn_again(value):
    isbn = parse_isbn(value)
    assert isbn == parse_isbn(isbn.isbn_string)


def test_parse_isbn_with_custom_groups():
    groups = (
        RegistrationGroup(
            prefix=978,
            group=1,
            name="Test",
            rules=(RangeRule(0, 1000, 3),),
        ),
    )
    isbn = parse_isbn("978-1-4088-5589-8", groups)
    assert "978-1-408-85589-8" == isbn.isbn_string
    assert "Test" == isbn.group_name


def test_isbn_from_string_and_gtin():
    assert ISBN.from_string("1-4088-5589-5") == ISBN.from_gtin(9781408855898)
    assert ISBN.from_string("1-4088-5589-0") is None
    assert ISBN.from_gtin(np.int64(9781408855890)) is None


@pytest.mark.parametrize("value", ["9781408855898", True, 9781408855898.0])
def test_isbn_from_gtin_with_not_integer(value):
    with pytest.raises(TypeError):
        ISBN.from_gtin(value)


def test_isbn_equality_by_string():
    isbn = parse_isbn("978-1-4088-5589-8")
    other = ISBN(
        group_name="Other",
        elements=isbn.elements,
        isbn_string=isbn.isbn_string,
        gtin=0,
    )
    assert isbn == other
    assert hash(isbn) == hash(other)
    assert isbn != parse_isbn("978-1-5266-4665-1")
    assert {isbn, other} == {isbn}


def test_isbn_str_and_repr():
    isbn = parse_isbn("9781408855898")
    assert "978-1-4088-5589-8" == str(isbn)
    assert "ISBN('978-1-4088-5589-8')" == repr(isbn)


@pytest.mark.parametrize(
    "value, expected",
    [
        (9781781100769, "978-1-78110-076-9"),
        ("1-5266-4665-X", "978-1-5266-4665-1"),
        ("978-1-4088-5589-0", None),
    ],
)
def test_hyphenate(value, expected):
    assert expected == hyphenate(value)


@pytest.mark.parametrize(
    "values, expected",
    [
        (
            [9781408855898, 9781408855890, 9781781100769],
            [True, False, True],
        ),
        # ISBN-10 numbers are not GTIN-13
        ([1408855895, 0], [False, False]),
        ([[9780000000002], [-9780000000002]], [[True], [False]]),
        ([], []),
    ],
)
def test_check_gtins(values, expected):
    assert_array_equal(check_gtins(values), expected)


def test_check_gtins_agrees_with_is_valid():
    gtins = np.arange(9781408855890, 9781408855900, dtype=np.int64)
    expected = [is_valid(int(x)) for x in gtins]
    assert_array_equal(check_gtins(gtins), expected)


def test_check_gtins_with_not_integers():
    with pytest.raises(TypeError):
        check_gtins([9781408855898.0])
