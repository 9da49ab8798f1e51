import dataclasses

import pytest

from isbnparts.groups import match_group
from isbnparts.ranges import REGISTRATION_GROUPS


def test_registration_groups_are_immutable():
    assert isinstance(REGISTRATION_GROUPS, tuple)
    group = REGISTRATION_GROUPS[0]
    assert isinstance(group.rules, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        group.name = "Other"


def test_registration_groups_prefixes():
    assert {978, 979} == {group.prefix for group in REGISTRATION_GROUPS}


def test_registration_groups_rules_not_empty():
    for group in REGISTRATION_GROUPS:
        assert group.rules, group
        for rule in group.rules:
            assert 1 <= rule.length <= 7


def test_registration_groups_declared_order():
    keys = [group.key for group in REGISTRATION_GROUPS[:3]]
    assert ["9780", "9781", "9782"] == keys
    assert "9798" == REGISTRATION_GROUPS[-1].key


@pytest.mark.parametrize(
    "isbn, expected",
    [
        ("9781408855898", "English language"),
        ("9784000000003", "Japan"),
        ("9791000000000", "France"),
        ("9798000000007", "United States"),
        ("9790000000001", None),
    ],
)
def test_match_group_in_registration_groups(isbn, expected):
    group = match_group(REGISTRATION_GROUPS, isbn)
    assert expected == (group.name if group else None)
