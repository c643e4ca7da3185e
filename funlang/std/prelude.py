"""Built-in primitives available to every funlang program.

Integers follow 32-bit two's complement arithmetic: results wrap into
the i32 range, division truncates toward zero and the remainder takes the
sign of the dividend.
"""

from funlang.builtin_function import op1, op2
from funlang.errors import EvaluationError
from funlang.types import BOOL, INT, UNIT, UNIT_VALUE, func, wrap_i32


def _div(x: int, y: int) -> int:
    if y == 0:
        raise EvaluationError('division by zero')
    q = abs(x) // abs(y)
    return wrap_i32(q if (x < 0) == (y < 0) else -q)


def _mod(x: int, y: int) -> int:
    if y == 0:
        raise EvaluationError('division by zero')
    r = abs(x) % abs(y)
    return r if x >= 0 else -r


def _shift_amount(y: int) -> int:
    if not 0 <= y < 32:
        raise EvaluationError(f'shift amount {y} out of range')
    return y


def populate_prelude(ctx):
    """Return `ctx` extended with the unit value and the bool/int primitives."""
    bool_op = func(BOOL, BOOL, BOOL)
    int_op = func(INT, INT, INT)
    int_cmp = func(INT, INT, BOOL)

    builtins = [
        # unit
        ('Unit', UNIT, UNIT_VALUE),
        # bool
        ('not', func(BOOL, BOOL), op1(lambda x: not x, 'not')),
        ('and', bool_op, op2(lambda x, y: x and y, 'and')),
        ('or', bool_op, op2(lambda x, y: x or y, 'or')),
        ('xor', bool_op, op2(lambda x, y: x != y, 'xor')),
        # int
        ('neg', func(INT, INT), op1(lambda x: wrap_i32(-x), 'neg')),
        ('add', int_op, op2(lambda x, y: wrap_i32(x + y), 'add')),
        ('sub', int_op, op2(lambda x, y: wrap_i32(x - y), 'sub')),
        ('mul', int_op, op2(lambda x, y: wrap_i32(x * y), 'mul')),
        ('div', int_op, op2(_div, 'div')),
        ('mod', int_op, op2(_mod, 'mod')),
        ('eq', int_cmp, op2(lambda x, y: x == y, 'eq')),
        ('gt', int_cmp, op2(lambda x, y: x > y, 'gt')),
        ('gte', int_cmp, op2(lambda x, y: x >= y, 'gte')),
        ('lt', int_cmp, op2(lambda x, y: x < y, 'lt')),
        ('lte', int_cmp, op2(lambda x, y: x <= y, 'lte')),
        ('shl', int_op, op2(lambda x, y: wrap_i32(x << _shift_amount(y)), 'shl')),
        ('shr', int_op, op2(lambda x, y: x >> _shift_amount(y), 'shr')),
    ]
    for name, typ, value in builtins:
        ctx = ctx.insert_val(name, typ, value)
    return ctx
