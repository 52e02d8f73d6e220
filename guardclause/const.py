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
from enum import StrEnum


class LimitMessageTemplate(StrEnum):
    """
    Message templates for limit checks, one per combination of bounds in play.

    Each template is a `str.format` pattern filled positionally by
    (subject, min, max). Templates do not mention the bounds they do not use,
    and `str.format` ignores the surplus positional arguments.
    """

    INVALID = "{0} is invalid"
    BELOW_MINIMUM = "{0} is below the minimum of {1}"
    ABOVE_MAXIMUM = "{0} is above the maximum of {2}"
    OUT_OF_RANGE = "{0} is outside the range {1} to {2}"

    @classmethod
    def select(cls, has_min: bool, has_max: bool) -> "LimitMessageTemplate":
        """
        Pick the template matching which bounds were recorded.
        """
        return _TEMPLATE_TABLE[(bool(has_min), bool(has_max))]


# keyed on (has_min, has_max)
_TEMPLATE_TABLE: dict[tuple[bool, bool], LimitMessageTemplate] = {
    (False, False): LimitMessageTemplate.INVALID,
    (True, False): LimitMessageTemplate.BELOW_MINIMUM,
    (False, True): LimitMessageTemplate.ABOVE_MAXIMUM,
    (True, True): LimitMessageTemplate.OUT_OF_RANGE,
}


UNNAMED_SUBJECT = "value"
