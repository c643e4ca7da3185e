from funlang.types import Typ


class FunError(Exception):
    """Base class for every error reported to a funlang user."""
    kind = 'Fun'


class ParseError(FunError):
    """Raised when source text does not match the funlang grammar."""
    kind = 'Parse'

    def __init__(self, message: str, line: int = 0, column: int = 0):
        if line:
            message = f"{message} at {line}:{column}"
        super().__init__(message)
        self.line = line
        self.column = column


class DriverError(FunError):
    """Raised when a program breaks a top-level declaration rule."""
    kind = 'Driver'


class ProgramError(FunError):
    """Failure of the combined type-then-evaluate operation."""


class TypingError(ProgramError):
    kind = 'Type'


class Undefined(TypingError):
    def __init__(self, name: str):
        super().__init__(f'Variable "{name}" isn\'t defined')
        self.name = name


class Mismatch(TypingError):
    def __init__(self, expected: Typ, actual: Typ):
        super().__init__(f'Expected type "{expected}" but found "{actual}"')
        self.expected = expected
        self.actual = actual


class Expected(TypingError):
    def __init__(self, description: str, actual: Typ):
        super().__init__(f'Expected {description} but found "{actual}"')
        self.description = description
        self.actual = actual


class EvaluationError(ProgramError):
    """Raised by native functions that cannot produce a value."""
    kind = 'Eval'
