from .basic_io import BasicIO
from funlang.builtin_function import op1
from funlang.types import INT, UNIT, func


def populate_io_context(ctx, basic_io: BasicIO):
    """Return `ctx` extended with the host-effecting I/O natives."""
    return ctx.insert_val('print', func(INT, UNIT), op1(basic_io.write_line, 'print'))
