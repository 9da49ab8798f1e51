"""Classes and functions to parse ISBNs into elements."""

from __future__ import annotations

import logging
import re

from collections.abc import Sequence
from dataclasses import dataclass
from re import Pattern
from typing import Final, TypeAlias

import numpy as np
import numpy.typing as npt

from isbnparts.groups import (
    Elements,
    RegistrationGroup,
    match_elements,
    match_group,
)
from isbnparts.ranges import REGISTRATION_GROUPS


logger = logging.getLogger(__name__)

# Type aliases

#: A string that is expected to be an ISBN.
MaybeISBN: TypeAlias = str

#: An ISBN-13 as a whole number, or GTIN-13.
GTIN: TypeAlias = int | np.integer

# Constants

#: A pattern to match characters that are not significant in ISBN strings.
NON_ISBN_PATTERN: Pattern[str] = re.compile(r"[^0-9X]")

#: A pattern to match sanitized ISBN-10 strings.
ISBN10_PATTERN: Pattern[str] = re.compile(r"[0-9]{9}[0-9X]")

#: A pattern to match sanitized ISBN-13 strings.
ISBN13_PATTERN: Pattern[str] = re.compile(r"[0-9]{13}")

#: The bookland element ISBN-10 values are converted with.
ISBN10_BOOKLAND: Final = "978"

#: The length of ISBN-10 strings.
ISBN10_LENGTH: Final = 10

#: The length of ISBN-13 strings.
ISBN13_LENGTH: Final = 13

#: Weights of ISBN-13 digits.
ISBN13_WEIGHTS: Final = np.array([1, 3] * 6 + [1], dtype=np.int64)

#: Decimal places of GTIN-13 digits, from the leftmost one.
GTIN_DIGIT_PLACES: Final = 10 ** np.arange(12, -1, -1, dtype=np.int64)

#: Smallest and largest GTIN-13 numbers plus one.
GTIN_BOUNDS: Final = (10**12, 10**13)


@dataclass(frozen=True, eq=False)
class ISBN:
    """Represents a parsed ISBN.

    Two ISBNs are equal if their hyphenated strings are equal.

    Examples:
        Parse from a string or from a GTIN-13 number:

          >>> isbn = ISBN.from_string("1-4088-5589-5")
          >>> isbn
          ISBN('978-1-4088-5589-8')
          >>> isbn.group_name
          'English language'
          >>> isbn.gtin
          9781408855898
          >>> ISBN.from_gtin(9781408855898) == isbn
          True

        Not valid (or not assignable) values give `None`:

          >>> ISBN.from_string("978-1-4088-5589-0") is None
          True
    """

    #: Name of the registration group.
    group_name: str
    #: ISBN elements.
    elements: Elements
    #: Elements delimited by a hyphen.
    isbn_string: str
    #: ISBN-13 as a whole number.
    gtin: int

    @classmethod
    def from_string(
        cls,
        value: MaybeISBN,
        groups: Sequence[RegistrationGroup] = REGISTRATION_GROUPS,
    ) -> ISBN | None:
        """Creates an ISBN from a string, or returns `None` if not valid."""
        return parse_isbn(value, groups)

    @classmethod
    def from_gtin(
        cls,
        value: GTIN,
        groups: Sequence[RegistrationGroup] = REGISTRATION_GROUPS,
    ) -> ISBN | None:
        """Creates an ISBN from a GTIN number, or returns `None` if not valid."""
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"value must be integer, got {type(value)}")
        return parse_isbn(value, groups)

    @property
    def prefix(self) -> int:
        return self.elements.prefix

    @property
    def group(self) -> int:
        return self.elements.group

    @property
    def registrant(self) -> str:
        return self.elements.registrant

    @property
    def publication(self) -> str:
        return self.elements.publication

    @property
    def check_digit(self) -> int:
        return self.elements.check_digit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.isbn_string == other.isbn_string

    def __hash__(self) -> int:
        return hash(self.isbn_string)

    def __str__(self) -> str:
        return self.isbn_string

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.isbn_string!r})"


def sanitize(value: MaybeISBN) -> str:
    """Removes all characters except digits and the 'X' check digit."""
    return NON_ISBN_PATTERN.sub("", value)


def calculate_checksum13(value: str) -> int:
    """Calculates the weighted sum of ISBN-13 digits."""
    total = 0
    for i in range(len(value)):
        digit = int(value[i])
        if i % 2 == 0:
            total += digit
        else:
            total += digit * 3
    return total


def calculate_checksum10(value: str) -> int:
    """Calculates the weighted sum of ISBN-10 digits, with 'X' being 10."""
    total = 0
    for i, character in enumerate(value):
        digit = 10 if character == "X" else int(character)
        total += (i + 1) * digit
    return total


def calculate_check_digit(isbn12: str) -> int:
    """Calculates the check digit for the first 12 digits of an ISBN-13."""
    return (10 - (calculate_checksum13(isbn12) % 10)) % 10


def is_valid13(value: str) -> bool:
    """Checks the check digit of a sanitized ISBN-13 string."""
    if not ISBN13_PATTERN.fullmatch(value):
        return False
    return calculate_checksum13(value) % 10 == 0


def is_valid10(value: str) -> bool:
    """Checks the check digit of a sanitized ISBN-10 string.

    Only the last character may be 'X'.
    """
    if not ISBN10_PATTERN.fullmatch(value):
        return False
    return calculate_checksum10(value) % 11 == 0


def is_valid(value: MaybeISBN | GTIN) -> bool:
    """Checks that a value is an ISBN-10 or ISBN-13 with a correct check digit.

    Arguments:
        value: A string (hyphens, spaces and other characters except digits
            and 'X' are ignored) or a GTIN number.

    Returns:
        `True` if the value has 10 or 13 significant characters and its check
        digit is correct. The registration group and registrant are not
        checked here; see :func:`parse_isbn`.
    """
    isbn_string = _to_isbn_string(value)
    if isbn_string is None:
        return False
    return _is_valid_sanitized(sanitize(isbn_string))


def _is_valid_sanitized(value: str) -> bool:
    match len(value):
        case 13:
            return is_valid13(value)
        case 10:
            return is_valid10(value)
        case _:
            return False


def _to_isbn_string(value: MaybeISBN | GTIN) -> str | None:
    match value:
        case str():
            return value
        case bool():
            raise TypeError(f"value must be string or integer, got {type(value)}")
        case int() | np.integer():
            # A minus sign is not a separator
            if value < 0:
                return None
            return str(int(value))
        case _:
            raise TypeError(f"value must be string or integer, got {type(value)}")


def normalize(value: str) -> str:
    """Converts a sanitized ISBN-10 string to ISBN-13.

    The old check digit is replaced with the one calculated for ISBN-13.
    ISBN-13 strings are returned as they are. The input is expected to be
    already validated.

    Example:
        >>> normalize("152664665X")
        '9781526646651'
    """
    if len(value) != ISBN10_LENGTH:
        return value
    isbn12 = f"{ISBN10_BOOKLAND}{value[:-1]}"
    return f"{isbn12}{calculate_check_digit(isbn12)}"


def compose(group: RegistrationGroup, elements: Elements) -> ISBN:
    """Creates an ISBN from matched elements."""
    return ISBN(
        group_name=group.name,
        elements=elements,
        isbn_string=elements.hyphenate(),
        gtin=int("".join(elements.values())),
    )


def parse_isbn(
    value: MaybeISBN | GTIN,
    groups: Sequence[RegistrationGroup] = REGISTRATION_GROUPS,
) -> ISBN | None:
    """Parses an ISBN-10 or ISBN-13 value into elements.

    The value is sanitized, validated, normalized to ISBN-13 and then matched
    against registration groups and their registrant ranges.

    Arguments:
        value: A string or a GTIN number.
        groups: Registration groups in the declared order. Defaults to the
            groups of the bundled range message.

    Returns:
        A parsed ISBN, or `None` if the value is not a valid ISBN or its
        registration group or registrant range is undefined.

    Note:
        Ranges were generated from the RangeMessage.xml file available from
        the International ISBN Agency and may not be the most recent.
    """
    isbn_string = _to_isbn_string(value)
    if isbn_string is None:
        logger.debug("Rejected %r: negative number", value)
        return None

    candidate = sanitize(isbn_string)
    if len(candidate) not in (ISBN10_LENGTH, ISBN13_LENGTH):
        logger.debug("Rejected %r: neither ISBN-10 nor ISBN-13", value)
        return None
    if not _is_valid_sanitized(candidate):
        logger.debug("Rejected %r: incorrect check digit", value)
        return None

    candidate = normalize(candidate)

    group = match_group(groups, candidate)
    if group is None:
        logger.debug("Rejected %r: undefined registration group", value)
        return None

    elements = match_elements(group, candidate)
    if elements is None:
        logger.debug("Rejected %r: undefined registrant in group %s", value, group)
        return None

    return compose(group, elements)


def hyphenate(
    value: MaybeISBN | GTIN,
    groups: Sequence[RegistrationGroup] = REGISTRATION_GROUPS,
) -> str | None:
    """Formats an ISBN-13 string with elements delimited by a hyphen.

    Example:
        >>> hyphenate(9781781100769)
        '978-1-78110-076-9'
    """
    isbn = parse_isbn(value, groups)
    if isbn is None:
        return None
    return isbn.isbn_string


def check_gtins(values: npt.ArrayLike) -> npt.NDArray[np.bool]:
    """Checks check digits of GTIN-13 numbers at once.

    Arguments:
        values: GTIN numbers of any shape.

    Returns:
        A boolean array of the same shape. Numbers that do not have exactly
        13 digits are not valid.

    Example:
        >>> check_gtins([9781408855898, 9781408855890, 1408855895])
        array([ True, False, False])
    """
    gtins = np.asarray(values)
    if gtins.size and not np.issubdtype(gtins.dtype, np.integer):
        raise TypeError(f"values must be integers, got {gtins.dtype}")
    gtins = gtins.astype(np.int64)

    digits = gtins[..., np.newaxis] // GTIN_DIGIT_PLACES % 10
    checksums = digits @ ISBN13_WEIGHTS

    lower, upper = GTIN_BOUNDS
    return (gtins >= lower) & (gtins < upper) & (checksums % 10 == 0)
