from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Native:
    """A host-provided function taking exactly one funlang value.

    Natives are shared by reference; copying one never re-runs anything.
    The callable may raise `EvaluationError` to report a failure.
    """
    fn: Callable[[Any], Any]
    name: str = 'native'

    def __call__(self, arg: Any) -> Any:
        return self.fn(arg)

    def __repr__(self) -> str:
        return f"<native {self.name}>"


def op1(fn: Callable[[Any], Any], name: str = 'native') -> Native:
    return Native(fn, name)


def op2(fn: Callable[[Any, Any], Any], name: str = 'native') -> Native:
    """Curry a binary host function into a chain of natives."""
    def first(x):
        return Native(lambda y: fn(x, y), name)
    return Native(first, name)


def op3(fn: Callable[[Any, Any, Any], Any], name: str = 'native') -> Native:
    """Curry a ternary host function into a chain of natives.

    Each partial application closes over the arguments supplied so far and
    is itself a first-class `Native`.
    """
    def first(x):
        def second(y):
            return Native(lambda z: fn(x, y, z), name)
        return Native(second, name)
    return Native(first, name)
