import json

import pytest

from isbnparts.codec import ISBNEncoder, decode_isbn, dumps, encode_isbn, loads
from isbnparts.errors import ISBNDecodeError
from isbnparts.groups import RangeRule, RegistrationGroup
from isbnparts.isbn import parse_isbn


@pytest.fixture
def isbn():
    return parse_isbn("978-1-4088-5589-8")


def test_encode_isbn(isbn):
    assert "978-1-4088-5589-8" == encode_isbn(isbn)


def test_json_encoder(isbn):
    assert '{"isbn": "978-1-4088-5589-8"}' == json.dumps(
        {"isbn": isbn}, cls=ISBNEncoder
    )


def test_json_encoder_with_other_objects():
    with pytest.raises(TypeError):
        json.dumps({"isbn": object()}, cls=ISBNEncoder)


@pytest.mark.parametrize(
    "value",
    ["978-1-4088-5589-8", "1-4088-5589-5", 9781408855898, "9781408855898"],
)
def test_decode_isbn(isbn, value):
    assert isbn == decode_isbn(value)


def test_encode_and_decode(isbn):
    data = json.loads(dumps({"isbn": isbn}))
    assert isbn == decode_isbn(data["isbn"])


def test_loads(isbn):
    assert isbn == loads(dumps(isbn))
    assert isbn == loads("9781408855898")


def test_loads_with_custom_groups():
    groups = (
        RegistrationGroup(
            prefix=978, group=1, name="Test", rules=(RangeRule(0, 1000, 3),)
        ),
    )
    assert "978-1-408-85589-8" == loads('"9781408855898"', groups).isbn_string


def test_loads_object_document(isbn):
    text = dumps({"isbn": isbn})
    with pytest.raises(ISBNDecodeError):
        loads(text)
    # Values inside containers are decoded one by one
    assert isbn == decode_isbn(json.loads(text)["isbn"])


def test_loads_array_document(isbn):
    with pytest.raises(ISBNDecodeError):
        loads(dumps([isbn, isbn]))


@pytest.mark.parametrize(
    "value",
    ["978-1-4088-5589-0", "979-8-000000-00-7", 9781408855890, "", -1],
)
def test_decode_not_valid_isbn(value):
    with pytest.raises(ISBNDecodeError) as excinfo:
        decode_isbn(value)
    assert value == excinfo.value.value
    assert f"invalid ISBN '{value}'" == str(excinfo.value)


@pytest.mark.parametrize("value", [None, True, 9781408855898.0, ["9781408855898"]])
def test_decode_not_scalar(value):
    with pytest.raises(ISBNDecodeError) as excinfo:
        decode_isbn(value)
    assert value == excinfo.value.value


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        loads('"not an isbn"')
