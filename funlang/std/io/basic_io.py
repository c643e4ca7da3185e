import sys
from typing import Optional, TextIO

from funlang.types import UNIT_VALUE, UnitVal, to_string


class BasicIO:
    """Output sink shared by the I/O natives.

    When no stream is given, `sys.stdout` is looked up on every write so
    that redirections made after construction are honoured.
    """
    def __init__(self, out: Optional[TextIO] = None):
        self.out = out

    @property
    def stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def write_line(self, value) -> UnitVal:
        self.stream.write(to_string(value) + '\n')
        return UNIT_VALUE
