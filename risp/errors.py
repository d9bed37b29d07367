from typing import Any


class RispError(Exception):
    """ Base class for all Risp errors"""
    pass


class RispLexError(RispError):
    """ Raised when the tokenizer meets malformed input, e.g. an unterminated string"""

    def __init__(self, message: str, source: str = "", position: int = -1):
        super().__init__(message)
        self.source = source
        self.position = position


class RispParseError(RispError):
    """ Raised when tokens do not form a balanced expression"""

    def __init__(self, reason: str):
        super().__init__(f"ParseError: {reason}")
        self.reason = reason


class RispUnboundSymbol(RispError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Cannot lookup unbound symbol {name}")
        self.name = name


class RispNotCallable(RispError):
    """ Raised when the head of an application is not a function"""

    def __init__(self, value: Any, form: Any = None):
        super().__init__(f"Cannot apply non-function {value!r}")
        self.value = value
        self.form = form


class RispArityError(RispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, name: str, expected: str, actual: int):
        super().__init__(f"{name} expected {expected} argument(s), got {actual}")
        self.name = name
        self.expected = expected
        self.actual = actual


class RispTypeError(RispError):
    """ Raised when the types of arguments passed to a function are incorrect"""

    def __init__(self, name: str, expected: str, actual: Any):
        super().__init__(f"{name} expected {expected}, got {actual!r}")
        self.name = name
        self.expected = expected
        self.actual = actual


class RispArithmeticError(RispError):
    """ Raised on division by zero"""

    def __init__(self, name: str, message: str = "division by zero"):
        super().__init__(f"{name}: {message}")
        self.name = name


class RispHttpError(RispError):
    """ Raised when httpget fails at the transport layer"""

    def __init__(self, url: str, cause: str):
        super().__init__(f"httpget {url}: {cause}")
        self.url = url
        self.cause = cause


class RispRecursionError(RispError):
    """ Raised when evaluation nests deeper than the host stack allows"""

    def __init__(self, form: str):
        super().__init__(f"maximum recursion depth exceeded while evaluating {form}")
        self.form = form
