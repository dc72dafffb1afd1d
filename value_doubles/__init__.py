"""Value vs. reference semantics for test doubles."""
from value_doubles.doubles import ClassDouble, DoubleDefaults, PDouble, StructDouble, TestDouble, is_shared
from value_doubles.sut import SystemUnderTest

__version__ = "0.1.0"
