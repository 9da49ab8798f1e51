"""Registration groups and matching of ISBNs against their ranges."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple, overload


class RangeRule(NamedTuple):
    """Represents a registrant range of a registration group.

    The bounds are cut to ``length`` digits, so the rule is checked against
    the first ``length`` digits following the registration group element.
    """

    #: The first registrant number of the range.
    start: int
    #: The registrant number following the last one in the range.
    end: int
    #: The length of a registrant element in the range.
    length: int

    def contains(self, value: int) -> bool:
        """Checks whether a registrant number falls in the half-open range."""
        return self.start <= value < self.end


@dataclass(frozen=True)
class RegistrationGroup:
    """Represents a registration group with its registrant ranges.

    Example:
        >>> group = RegistrationGroup(
        ...     prefix=978, group=1, name="English language",
        ...     rules=(RangeRule(3980, 5499, 4),),
        ... )
        >>> group.key
        '9781'
    """

    #: Bookland, or GS1 element (978 or 979).
    prefix: int
    #: Registration group element.
    group: int
    #: Name of the registration agency area.
    name: str
    #: Registrant ranges in the declared order.
    rules: tuple[RangeRule, ...]

    @property
    def key(self) -> str:
        """Returns the prefix and group elements joined without padding."""
        return f"{self.prefix}{self.group}"

    def __str__(self) -> str:
        return f"{self.prefix}-{self.group}"


@dataclass(frozen=True)
class Elements:
    """Represents the elements of an ISBN-13.

    Example:
        >>> elements = Elements(
        ...     prefix=978,
        ...     group=1,
        ...     registrant="4088",
        ...     publication="5589",
        ...     check_digit=8,
        ... )
        >>> elements.hyphenate()
        '978-1-4088-5589-8'
        >>> elements[1:3]
        '1-4088'
    """

    #: Bookland, or GS1 element.
    prefix: int
    #: Registration group element.
    group: int
    #: Registrant element. Leading zeros are significant.
    registrant: str
    #: Publication element. Leading zeros are significant.
    publication: str
    #: Check digit element.
    check_digit: int

    def values(self) -> tuple[str, str, str, str, str]:
        """Returns the elements as strings in the ISBN order."""
        return (
            str(self.prefix),
            str(self.group),
            self.registrant,
            self.publication,
            str(self.check_digit),
        )

    def hyphenate(self) -> str:
        """Formats an ISBN string with elements delimited by a hyphen."""
        return "-".join(self.values())

    @overload
    def __getitem__(self, key: int) -> str: ...

    @overload
    def __getitem__(self, key: slice) -> str: ...

    def __getitem__(self, key: int | slice) -> str:
        match key:
            case slice() as x if x.step is not None:
                raise ValueError("slice step is not supported")
            case slice() as x:
                return "-".join(self.values()[x])
            case int() as index:
                return self.values()[index]
            case _:
                raise TypeError("index must be integer or slice object")


def match_group(
    groups: Sequence[RegistrationGroup], isbn: str
) -> RegistrationGroup | None:
    """Finds the registration group of an ISBN-13 string.

    Groups are tried in the given order and the first one whose key is a
    prefix of the ISBN wins. Keys are compared as plain strings, so when keys
    of two groups share a prefix, the one declared first is matched.

    Arguments:
        groups: Registration groups in the declared order.
        isbn: A normalized ISBN-13 string.

    Returns:
        A matched group or `None`.
    """
    for group in groups:
        if isbn.startswith(group.key):
            return group
    return None


def match_elements(group: RegistrationGroup, isbn: str) -> Elements | None:
    """Splits an ISBN-13 string into elements using the group ranges.

    Rules are tried in the declared order, and the first rule whose range
    contains the next ``length`` digits defines the registrant element. Ranges
    of different lengths may overlap, so the rules must not be re-sorted.

    Arguments:
        group: A registration group matched for the ISBN.
        isbn: A normalized ISBN-13 string.

    Returns:
        Elements of the ISBN, or `None` if the digits fall into no range.
    """
    # Registrant, publication and check digit
    digits = isbn[len(group.key) :]

    for rule in group.rules:
        # Publication and check digit take at least one digit each
        if not 1 <= rule.length < len(digits) - 1:
            continue
        registrant = digits[: rule.length]
        if rule.contains(int(registrant)):
            return Elements(
                prefix=group.prefix,
                group=group.group,
                registrant=registrant,
                publication=digits[rule.length : -1],
                check_digit=int(isbn[-1]),
            )
    return None
