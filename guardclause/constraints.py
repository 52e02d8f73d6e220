# guardclause
#
# Copyright (C) 2025 The guardclause developers
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
"""
Guards against invalid arguments, parameters and state where the thing being
checked is an ordered value. Each guard checks for one kind of error; if the
value is in error an InvalidArgumentError is raised, otherwise the value is
returned unchanged so that guards can be nested:

    x = guard_minimum(guard_maximum(x, "x", 10), "x", 0)

All bounds are inclusive.
"""

from collections.abc import Callable
from typing import Any, override
from guardclause.structures import Comparable, LimitMessageBuilder


class InvalidArgumentError(ValueError):
    """
    Raised by every guard. Carries the name of the argument that failed
    and the offending value alongside the rendered message.
    """

    def __init__(self, argument_name: str, message: str, actual_value: Any = None):
        # all constructor args go to args, so pickle and copy can rebuild the error
        super().__init__(argument_name, message, actual_value)
        self.argument_name: str = argument_name
        self.message: str = message
        self.actual_value: Any = actual_value

    @override
    def __str__(self) -> str:
        return self.message


def less_than[T: Comparable](value: T, other: T) -> bool:
    return value < other


def greater_than[T: Comparable](value: T, other: T) -> bool:
    return value > other


def guard_minimum[T: Comparable](value: T, argument_name: str, minimum_value: T) -> T:
    """
    Guard that `value` is equal to or above `minimum_value`.

    Args:
        value: value to test
        argument_name: name of the argument/parameter/state being tested
        minimum_value: minimum acceptable value

    Returns:
        `value`, if valid

    Raises:
        InvalidArgumentError: if `value` is below `minimum_value`
    """

    def message_builder() -> str:
        return LimitMessageBuilder(value, argument_name).with_min(minimum_value).build_message()

    return guard_minimum_with_message(value, argument_name, minimum_value, message_builder)


def guard_minimum_with_message[T: Comparable](
    value: T,
    argument_name: str,
    minimum_value: T,
    message_builder: Callable[[], str],
) -> T:
    """
    As `guard_minimum`, but the failure message comes from `message_builder`,
    which is only called if the guard fails.
    """
    if less_than(value, minimum_value):
        raise InvalidArgumentError(argument_name, message_builder(), value)
    return value


def guard_maximum[T: Comparable](value: T, argument_name: str, maximum_value: T) -> T:
    """
    Guard that `value` is equal to or below `maximum_value`.

    Args:
        value: value to test
        argument_name: name of the argument/parameter/state being tested
        maximum_value: maximum acceptable value

    Returns:
        `value`, if valid

    Raises:
        InvalidArgumentError: if `value` is above `maximum_value`
    """

    def message_builder() -> str:
        return LimitMessageBuilder(value, argument_name).with_max(maximum_value).build_message()

    return guard_maximum_with_message(value, argument_name, maximum_value, message_builder)


def guard_maximum_with_message[T: Comparable](
    value: T,
    argument_name: str,
    maximum_value: T,
    message_builder: Callable[[], str],
) -> T:
    """
    As `guard_maximum`, with a lazily built message.
    """
    if greater_than(value, maximum_value):
        raise InvalidArgumentError(argument_name, message_builder(), value)
    return value


def guard_in_range[T: Comparable](value: T, argument_name: str, lower_limit: T, upper_limit: T) -> T:
    """
    Guard that `value` lies within `lower_limit` and `upper_limit`, inclusive.

    The limits are not checked against each other; if `lower_limit` exceeds
    `upper_limit` no value can pass.

    Raises:
        InvalidArgumentError: if `value` is outside the limits
    """

    def message_builder() -> str:
        return (
            LimitMessageBuilder(value, argument_name)
            .with_min(lower_limit)
            .with_max(upper_limit)
            .build_message()
        )

    return guard_in_range_with_message(value, argument_name, lower_limit, upper_limit, message_builder)


def guard_in_range_with_message[T: Comparable](
    value: T,
    argument_name: str,
    lower_limit: T,
    upper_limit: T,
    message_builder: Callable[[], str],
) -> T:
    if less_than(value, lower_limit) or greater_than(value, upper_limit):
        raise InvalidArgumentError(argument_name, message_builder(), value)
    return value


def guard_bound[T: Comparable](
    value: T,
    argument_name: str,
    min: T | None = None,
    max: T | None = None,
) -> T:
    """
    Guard `value` against whichever of `min` and `max` are given. With
    neither given the guard always passes.

    The message names only the bounds that were checked.
    """
    min_check = min is not None and less_than(value, min)
    max_check = max is not None and greater_than(value, max)
    if min_check or max_check:
        message = (
            LimitMessageBuilder(value, argument_name)
            .maybe_min(min is not None, min)  # pyright: ignore[reportArgumentType]
            .maybe_max(max is not None, max)  # pyright: ignore[reportArgumentType]
            .build_message()
        )
        raise InvalidArgumentError(argument_name, message, value)
    return value
