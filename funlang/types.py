"""Type definitions and runtime values for funlang.

This module defines the `Typ` algebra used by the type checker together
with the representation of runtime values. Booleans and integers are
plain Python `bool` and `int`; the unit value and closures get their own
classes. Native functions live in `builtin_function`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from .ast import Term
    from .builtin_function import Native
    from .environment import Environment


INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class Atom:
    """A named atomic type such as `Int`, `Bool` or `Unit`."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Func:
    """A function type `from_ -> to`.

    Equality is structural: two arrows are equal when both their domains
    and their codomains are equal.
    """
    from_: 'Typ'
    to: 'Typ'

    def __str__(self) -> str:
        return f"({self.from_} -> {self.to})"


Typ = Union[Atom, Func]

INT = Atom('Int')
BOOL = Atom('Bool')
UNIT = Atom('Unit')


def func(first: Typ, *rest: Typ) -> Typ:
    """Build a right-associative arrow: `func(a, b, c)` is `a -> (b -> c)`."""
    if not rest:
        return first
    return Func(first, func(*rest))


class UnitVal:
    """Marker object for the funlang unit value."""
    def __repr__(self) -> str:
        return 'Unit'

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitVal)

    def __hash__(self) -> int:
        return hash(UnitVal)


UNIT_VALUE = UnitVal()


class Closure:
    """A user-defined function value.

    The captured environment is kept by reference. Environments are
    persistent, so sharing it between closures is safe and copying a
    closure never copies its environment.
    """
    def __init__(self, env: 'Environment', param: str, body: 'Term'):
        self.env = env
        self.param = param
        self.body = body

    def __repr__(self) -> str:
        return f"<closure {self.param}>"


Val = Union[bool, int, UnitVal, Closure, 'Native']


def wrap_i32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range (two's complement)."""
    return (value - INT32_MIN) % 2 ** 32 + INT32_MIN


def type_name(value: Any) -> str:
    """Return a short description of the runtime shape of a value."""
    from .builtin_function import Native
    if isinstance(value, bool):
        return 'Bool'
    if isinstance(value, int):
        return 'Int'
    if isinstance(value, UnitVal):
        return 'Unit'
    if isinstance(value, (Closure, Native)):
        return 'Function'
    return type(value).__name__


def check_value(value: Any, typ: Typ) -> bool:
    """Check whether a runtime value has the shape described by `typ`.

    Only the outermost shape is inspected: any closure or native function
    matches any arrow type. Atomic types other than `Int`, `Bool` and
    `Unit` never match since no value can inhabit them.
    """
    if isinstance(typ, Func):
        return type_name(value) == 'Function'
    return typ.name in ('Int', 'Bool', 'Unit') and type_name(value) == typ.name


def to_string(value: Any) -> str:
    """Convert a funlang value to its printed representation."""
    if isinstance(value, bool):
        return 'True' if value else 'False'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, UnitVal):
        return 'Unit'
    if type_name(value) == 'Function':
        return '<fun>'
    return str(value)
