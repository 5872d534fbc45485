class RustlError(Exception):
    """ Base class for all Rustl errors"""
    pass

class RustlUndefinedVariable(RustlError):
    """ Raised when a name is read before it is bound"""
    pass

class RustlTypeError(RustlError):
    """ Raised when a value has the wrong type for an operation"""

class RustlIndexError(RustlError):
    """ Raised when an index falls outside a list"""

class RustlArithmeticError(RustlError):
    """ Raised on integer overflow or integer division by zero"""

class RustlArityError(RustlError):
    """ Raised when the number of arguments or list items does not match"""

class RustlRedefinitionError(RustlError):
    """ Raised when a function name is defined twice in the same frame"""

class RustlNotIterableError(RustlError):
    """ Raised when a value or expression cannot be iterated"""

class RustlModuleNotFound(RustlError):
    """ Raised when an import path cannot be resolved to a file"""

class RustlShapeError(RustlError):
    """ Raised when an expression is not a valid assignment target"""

class RustlSyntaxError(RustlError):
    """ Raised when there is a syntax error"""

class RustlRecursionError(RustlError):
    """ Raised when calls nest deeper than the host stack allows"""
