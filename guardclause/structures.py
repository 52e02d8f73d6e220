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
from typing import Any, Protocol, Self, runtime_checkable
from guardclause.const import UNNAMED_SUBJECT, LimitMessageTemplate


@runtime_checkable
class Comparable(Protocol):
    """
    Anything with a total ordering. Guards only ever use `<` and `>`.
    """

    def __lt__(self, other: Any, /) -> bool: ...
    def __gt__(self, other: Any, /) -> bool: ...


def format_value(value: Any) -> str:
    """
    Render a value for inclusion in a message.

    Text is shown via repr so that empty and whitespace-only strings remain
    visible in the message; everything else goes through str().
    """
    if isinstance(value, (str, bytes)):
        return repr(value)
    return str(value)


def render_subject(value: Any, name: str | None = None) -> str:
    shown = format_value(value)
    return f"{name if name is not None else UNNAMED_SUBJECT} ({shown})"


class LimitMessageBuilder[T: Comparable]:
    """
    Accumulate the context of a failed limit comparison and render it.

    The builder is bound to one subject value at construction. Bounds are
    recorded with the fluent `with_*`/`maybe_*` methods, each of which
    returns the builder itself, and `build_message()` picks a
    LimitMessageTemplate according to which bounds were recorded.

    Presence of a bound is tracked separately from its value, so a bound of
    0 or None still counts as set. Bounds are never unset; recording the same
    bound twice keeps the last value.

    >>> LimitMessageBuilder(3, "count").with_min(5).build_message()
    'count (3) is below the minimum of 5'
    """

    __slots__ = ("_value", "_name", "_min", "_max", "_has_min", "_has_max")

    def __init__(self, value: T, name: str | None = None):
        self._value: T = value
        self._name: str | None = name
        self._min: T | None = None
        self._max: T | None = None
        self._has_min: bool = False
        self._has_max: bool = False

    # NOTE: subject is fixed at construction, so only read access
    @property
    def subject_value(self) -> T:
        return self._value

    @property
    def subject_name(self) -> str | None:
        return self._name

    @property
    def min_bound(self) -> T | None:
        return self._min

    @property
    def max_bound(self) -> T | None:
        return self._max

    @property
    def has_min(self) -> bool:
        return self._has_min

    @property
    def has_max(self) -> bool:
        return self._has_max

    # fluent api
    def with_min(self, min: T) -> Self:
        self._min = min
        self._has_min = True
        return self

    def maybe_min(self, is_used: bool, min: T) -> Self:
        """
        Record `min` only if `is_used`. A false `is_used` leaves the builder
        untouched, including any minimum recorded earlier.
        """
        if is_used:
            self.with_min(min)
        return self

    def with_max(self, max: T) -> Self:
        self._max = max
        self._has_max = True
        return self

    def maybe_max(self, is_used: bool, max: T) -> Self:
        """
        Record `max` only if `is_used`. See `maybe_min`.
        """
        if is_used:
            self.with_max(max)
        return self

    @property
    def template(self) -> LimitMessageTemplate:
        return LimitMessageTemplate.select(self._has_min, self._has_max)

    def build_message(self) -> str:
        """
        Render the message for the bounds recorded so far. Does not modify
        the builder, so repeated calls give the same string.
        """
        return self.template.format(
            render_subject(self._value, self._name),
            format_value(self._min),
            format_value(self._max),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self._value!r}, name={self._name!r}, "
            f"min={self._min!r} [{'set' if self._has_min else 'unset'}], "
            f"max={self._max!r} [{'set' if self._has_max else 'unset'}])"
        )
