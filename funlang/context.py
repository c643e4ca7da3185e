from typing import Any, List, Optional, Tuple

from funlang.ast import Node
from funlang.checker import type_of
from funlang.environment import TypeEnv, ValueEnv
from funlang.evaluator import evaluate
from funlang.types import Typ


class ProgramContext:
    """Type and value environments kept in lockstep.

    Every name bound in one environment is bound in the other, with a type
    matching the runtime shape of the value. Contexts are never modified:
    each insertion returns a new context and leaves this one untouched.
    """
    def __init__(self, types: Optional[TypeEnv] = None, values: Optional[ValueEnv] = None):
        self.types = types if types is not None else TypeEnv()
        self.values = values if values is not None else ValueEnv()

    @classmethod
    def empty(cls) -> 'ProgramContext':
        return cls()

    @classmethod
    def default(cls) -> 'ProgramContext':
        """An empty context seeded with the standard prelude."""
        from funlang.std.prelude import populate_prelude
        return populate_prelude(cls())

    def get_val(self, name: str) -> Optional[Tuple[Any, Typ]]:
        value = self.values.get(name)
        typ = self.types.get(name)
        if value is None or typ is None:
            return None
        return value, typ

    def names(self) -> List[str]:
        return list(self.types)

    def insert_val(self, name: str, typ: Typ, value: Any) -> 'ProgramContext':
        return ProgramContext(self.types.insert(name, typ), self.values.insert(name, value))

    def insert_term(self, name: str, term: Node) -> 'ProgramContext':
        typ, value = self.run(term)
        return self.insert_val(name, typ, value)

    def type_of(self, term: Node) -> Typ:
        return type_of(term, self.types)

    def evaluate(self, term: Node) -> Any:
        return evaluate(term, self.values)

    def run(self, term: Node) -> Tuple[Typ, Any]:
        # Typing errors propagate before any evaluation.
        typ = self.type_of(term)
        value = self.evaluate(term)
        return typ, value

    def __contains__(self, name: str) -> bool:
        return self.get_val(name) is not None

    def __repr__(self) -> str:
        return f"ProgramContext({', '.join(self.names())})"
