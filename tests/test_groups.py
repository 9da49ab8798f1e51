import pytest

from isbnparts.groups import (
    Elements,
    RangeRule,
    RegistrationGroup,
    match_elements,
    match_group,
)


def make_group(group, *rules, prefix=978, name="Test"):
    return RegistrationGroup(prefix=prefix, group=group, name=name, rules=rules)


@pytest.mark.parametrize(
    "value, expected",
    [
        (9, False),
        (10, True),
        (19, True),
        (20, False),
    ],
)
def test_range_rule_contains(value, expected):
    assert expected == RangeRule(10, 20, 2).contains(value)


def test_registration_group_key():
    group = make_group(0, prefix=979)
    assert "9790" == group.key
    assert "979-0" == str(group)


@pytest.mark.parametrize(
    "groups, expected_name",
    [
        # The first declared group wins, not the longest one
        ((make_group(1, name="A"), make_group(12, name="B")), "A"),
        ((make_group(12, name="B"), make_group(1, name="A")), "B"),
        ((make_group(2, name="A"), make_group(1, prefix=979, name="B")), None),
    ],
)
def test_match_group(groups, expected_name):
    group = match_group(groups, "9781234567897")
    assert expected_name == (group.name if group else None)


@pytest.mark.parametrize(
    "rules, expected",
    [
        # The first declared rule wins even if a later one also matches
        (
            (RangeRule(0, 50, 2), RangeRule(0, 500, 3)),
            ("23", "456789"),
        ),
        (
            (RangeRule(0, 500, 3), RangeRule(0, 50, 2)),
            ("234", "56789"),
        ),
        # Not matching rules are skipped
        (
            (RangeRule(0, 10, 2), RangeRule(2000, 3000, 4)),
            ("2345", "6789"),
        ),
        # The upper bound is excluded
        ((RangeRule(0, 23, 2),), None),
    ],
)
def test_match_elements_rule_order(rules, expected):
    elements = match_elements(make_group(1, *rules), "9781234567897")
    if expected is None:
        assert elements is None
    else:
        assert expected == (elements.registrant, elements.publication)


def test_match_elements():
    group = make_group(0, RangeRule(0, 20, 2))
    expected = Elements(
        prefix=978,
        group=0,
        registrant="00",
        publication="000000",
        check_digit=2,
    )
    assert expected == match_elements(group, "9780000000002")


def test_match_elements_does_not_reach_check_digit():
    # Only 4 digits before the check digit are left after '978-99901'
    group = make_group(99901, RangeRule(0, 100000, 5), RangeRule(0, 100, 2))
    elements = match_elements(group, "9789990112345")
    assert ("12", "34", 5) == (
        elements.registrant,
        elements.publication,
        elements.check_digit,
    )


@pytest.fixture
def elements():
    return Elements(
        prefix=978,
        group=1,
        registrant="0080",
        publication="0050",
        check_digit=0,
    )


def test_elements_values(elements):
    assert ("978", "1", "0080", "0050", "0") == elements.values()
    assert "978-1-0080-0050-0" == elements.hyphenate()


@pytest.mark.parametrize(
    "key, expected",
    [
        (0, "978"),
        (2, "0080"),
        (-1, "0"),
        (slice(0, 2), "978-1"),
        (slice(2, None), "0080-0050-0"),
    ],
)
def test_elements_getitem(elements, key, expected):
    assert expected == elements[key]


def test_elements_getitem_with_step(elements):
    with pytest.raises(ValueError):
        elements[::2]


def test_elements_getitem_with_wrong_key(elements):
    with pytest.raises(TypeError):
        elements["registrant"]


@pytest.mark.parametrize(
    "rules",
    [
        # The publication element would be empty
        (RangeRule(0, 10000, 4),),
        # The registrant element would be empty
        (RangeRule(0, 1, 0),),
    ],
)
def test_match_elements_skips_rules_leaving_no_publication(rules):
    group = make_group(99901, *rules, RangeRule(0, 1000, 3))
    elements = match_elements(group, "9789990112345")
    assert "978-99901-123-4-5" == elements.hyphenate()


@pytest.mark.parametrize(
    "rules", [(RangeRule(0, 10000, 4),), (RangeRule(0, 1, 0),)]
)
def test_match_elements_with_only_rules_leaving_no_publication(rules):
    assert match_elements(make_group(99901, *rules), "9789990112345") is None
