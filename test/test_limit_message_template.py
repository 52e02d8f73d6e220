import pytest

from guardclause.const import LimitMessageTemplate


@pytest.mark.parametrize(
    "has_min,has_max,expected",
    [
        (False, False, LimitMessageTemplate.INVALID),
        (True, False, LimitMessageTemplate.BELOW_MINIMUM),
        (False, True, LimitMessageTemplate.ABOVE_MAXIMUM),
        (True, True, LimitMessageTemplate.OUT_OF_RANGE),
    ],
)
def test_select(has_min, has_max, expected):
    assert LimitMessageTemplate.select(has_min, has_max) is expected


def test_templates_only_reference_bounds_in_play():
    assert "{1}" not in LimitMessageTemplate.INVALID and "{2}" not in LimitMessageTemplate.INVALID
    assert "{1}" in LimitMessageTemplate.BELOW_MINIMUM and "{2}" not in LimitMessageTemplate.BELOW_MINIMUM
    assert "{1}" not in LimitMessageTemplate.ABOVE_MAXIMUM and "{2}" in LimitMessageTemplate.ABOVE_MAXIMUM
    assert "{1}" in LimitMessageTemplate.OUT_OF_RANGE and "{2}" in LimitMessageTemplate.OUT_OF_RANGE


def test_surplus_positional_args_ignored():
    assert LimitMessageTemplate.ABOVE_MAXIMUM.format("x (4)", "unused", 3) == "x (4) is above the maximum of 3"
