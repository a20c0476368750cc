
class AAQZError(Exception):
    """ Base class for all AAQZ errors"""

    def __str__(self) -> str:
        return f"AAQZ {super().__str__()}"

class AAQZSyntaxError(AAQZError):
    """ Raised when surface data or source text is malformed"""

class AAQZNameError(AAQZError):
    """ Raised when an identifier is not bound in the environment"""

class AAQZTypeError(AAQZError):
    """ Raised when an operand, condition or callee has the wrong kind of value"""

class AAQZArityError(AAQZError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class AAQZDivisionByZeroError(AAQZError):
    """ Raised when the right operand of / is zero"""

class AAQZUnknownPrimitiveError(AAQZError):
    """ Raised when a primitive tag names no built-in operation"""

class AAQZUnserializableError(AAQZError):
    """ Raised when a value has no printable form"""

class AAQZUserError(AAQZError):
    """ Raised by the error primitive on behalf of the program"""
