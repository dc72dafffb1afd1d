"""
The system under test: a consumer that holds one test double and reports its payload.
"""
#  value-doubles - Value vs. Reference Semantics for Test Doubles
#  Copyright (c) 2023. Andreas Kirsch
#
#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU Affero General Public License as published
#  by the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU Affero General Public License for more details.
#
#  You should have received a copy of the GNU Affero General Public License
#  along with this program.  If not, see <https://www.gnu.org/licenses/>.

import copy
import logging
import typing

from value_doubles.doubles import PDouble

logger = logging.getLogger(__name__)

DoubleT = typing.TypeVar("DoubleT", bound=PDouble)


class SystemUnderTest(typing.Generic[DoubleT]):
    """
    Holds exactly one test double, captured once at construction and never replaced.

    The double is captured with `copy.copy`. A double with reference semantics hands out itself, so later
    mutations through the caller's handle show up in `report`. A double with value semantics hands out a copy,
    so they do not. This class is the same for both; only the double decides.

    The payload is never cached: `report` reads through the held double every time.
    """

    def __init__(self, test_double: DoubleT):
        if not isinstance(test_double, PDouble):
            raise TypeError(f"{type(test_double).__name__} does not implement PDouble")

        self._test_double: DoubleT = copy.copy(test_double)
        logger.debug(
            "Captured %s (%s)",
            type(test_double).__name__,
            "shared" if self._test_double is test_double else "copied",
        )

    @property
    def test_double(self) -> DoubleT:
        """The double as held by the system under test."""
        return self._test_double

    def report(self) -> str:
        return self._test_double.description()

    # The "some method" of the setup/test pseudocode.
    baz = report
