class SchemeError(Exception):
    """ Base class for all twinscheme errors"""
    kind = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class SchemeSyntaxError(SchemeError):
    """ Raised by the lexer or parser; carries the 1-based source position"""
    kind = "SyntaxError"

    def __init__(self, message: str, line: int, column: int):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"{self.kind}: {self.message} (line: {self.line}, column: {self.column})"


class SchemeRuntimeError(SchemeError):
    """ Raised during evaluation; aborts the current top-level execution"""
    kind = "RuntimeError"


class SchemeUnboundSymbol(SchemeRuntimeError):
    """ Raised when a symbol is evaluated before it is bound"""


class SchemeUndefinedVariable(SchemeRuntimeError):
    """ Raised when set! targets a name that no scope defines"""


class SchemeArityError(SchemeRuntimeError):
    """ Raised when the number of arguments passed to an operation is incorrect"""


class SchemeTypeError(SchemeRuntimeError):
    """ Raised when the types of arguments passed to an operation are incorrect"""
