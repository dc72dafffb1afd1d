"""
Test doubles with value and reference semantics.

A system under test captures its collaborator when it is constructed. Whether a later mutation of the
collaborator is visible to the system under test depends only on what that capture does:

    - 'TestDouble' and 'StructDouble' behave like value types: capturing them produces an independent copy.
    - 'ClassDouble' behaves like a reference type: capturing it shares the one instance.

All of them satisfy the 'PDouble' protocol and get 'update_string' and 'description' from 'DoubleDefaults'.

Capturing goes through `copy.copy`, so each realization decides for itself how it is handed off.
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
import typing
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

DEFAULT_TEST_STRING = "Original Test Double"


@typing.runtime_checkable
class PDouble(typing.Protocol):
    """
    The capability of a test double: a mutable string payload that can be updated and read back.
    """

    test_string: str

    def update_string(self, string: str) -> None:
        ...

    def description(self) -> str:
        ...


class DoubleDefaults:
    """
    Default implementation of 'PDouble' on top of a `test_string` attribute.

    Mix this into a class that declares `test_string` (as a dataclass field or a pydantic field).
    """

    def update_string(self, string: str) -> None:
        self.test_string = string

    def description(self) -> str:
        return self.test_string  # type: ignore


@dataclass
class TestDouble(DoubleDefaults):
    """A plain value double that starts out with the default payload."""

    # Not a pytest test class.
    __test__: typing.ClassVar[bool] = False

    test_string: str = DEFAULT_TEST_STRING


class PydanticDouble(DoubleDefaults, BaseModel):
    """Shared base for the pydantic doubles. Accepts the payload positionally or by keyword."""

    model_config = ConfigDict(extra="forbid")

    test_string: str = DEFAULT_TEST_STRING

    def __init__(self, test_string: str = DEFAULT_TEST_STRING, **data):
        super().__init__(test_string=test_string, **data)


class StructDouble(PydanticDouble):
    """Value semantics: `copy.copy` returns an independent model."""


class ClassDouble(PydanticDouble):
    """Reference semantics: every copy is the instance itself."""

    def __copy__(self):
        return self

    def __deepcopy__(self, memo: dict[int, typing.Any] | None = None):
        return self

    def model_copy(self, *, update: typing.Mapping[str, typing.Any] | None = None, deep: bool = False):
        """An explicit `model_copy` still returns a new, independent double."""
        return type(self)(**{**self.model_dump(), **(update or {})})


def is_shared(test_double: PDouble) -> bool:
    """
    Returns whether handing off `test_double` shares it (reference semantics) instead of copying it.
    """
    return copy.copy(test_double) is test_double
