
class McLispError(Exception):
    """ Base class for all mclisp errors"""
    pass

class McLispSyntaxError(McLispError):
    """ Raised when the reader meets malformed or unsupported input"""

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)
        self.line = line

class McLispUnboundSymbol(McLispError):
    """ Raised when a symbol is used before it is bound"""
    pass

class McLispTypeError(McLispError):
    """ Raised when a value of the wrong kind is passed to a primitive"""

class McLispMalformedCond(McLispTypeError):
    """ Raised when a cond clause is not a (predicate expression) pair"""

class McLispBadArgument(McLispError):
    """ Raised when a primitive receives a missing (None) argument"""

class McLispBadFormal(McLispError):
    """ Raised when a lambda formal parameter is not a symbol"""

class McLispNotCallable(McLispError):
    """ Raised when applying a value that is not a function"""

class McLispArityError(McLispError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

class McLispRecursionError(McLispError):
    """ Raised when evaluation nests deeper than the host stack allows"""
