"""Encoding ISBNs to and decoding them from structured data.

An ISBN is represented by a single scalar: it is encoded as its hyphenated
string and decoded from either a string or a GTIN integer.
"""

from __future__ import annotations

import json

from collections.abc import Sequence
from typing import Any

from isbnparts.errors import ISBNDecodeError
from isbnparts.groups import RegistrationGroup
from isbnparts.isbn import ISBN, parse_isbn
from isbnparts.ranges import REGISTRATION_GROUPS


class ISBNEncoder(json.JSONEncoder):
    """JSON encoder that writes ISBNs as their hyphenated strings.

    Example:
        >>> json.dumps({"isbn": ISBN.from_gtin(9781408855898)}, cls=ISBNEncoder)
        '{"isbn": "978-1-4088-5589-8"}'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, ISBN):
            return encode_isbn(o)
        return super().default(o)


def encode_isbn(isbn: ISBN) -> str:
    """Encodes an ISBN to a scalar value."""
    return isbn.isbn_string


def decode_isbn(
    value: object,
    groups: Sequence[RegistrationGroup] = REGISTRATION_GROUPS,
) -> ISBN:
    """Decodes an ISBN from a scalar value.

    Arguments:
        value: A string or an integer (GTIN) value.
        groups: Registration groups in the declared order.

    Returns:
        A parsed ISBN.

    Raises:
        :class:`~isbnparts.errors.ISBNDecodeError`: If the value is neither
        string nor integer, or it is not a valid ISBN.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ISBNDecodeError(
            value, f"expected string or integer, got {type(value).__name__}"
        )
    isbn = parse_isbn(value, groups)
    if isbn is None:
        raise ISBNDecodeError(value)
    return isbn


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serializes an object containing ISBNs to a JSON string."""
    return json.dumps(obj, cls=ISBNEncoder, **kwargs)


def loads(
    text: str | bytes,
    groups: Sequence[RegistrationGroup] = REGISTRATION_GROUPS,
    **kwargs: Any,
) -> ISBN:
    """Deserializes an ISBN from a JSON document holding a single scalar.

    Documents holding objects or arrays are not decoded: load them with
    :func:`json.loads` and decode ISBN values with :func:`decode_isbn` where
    they are expected.

    Raises:
        :class:`~isbnparts.errors.ISBNDecodeError`: If the document is not a
        valid ISBN scalar.
    """
    return decode_isbn(json.loads(text, **kwargs), groups)
