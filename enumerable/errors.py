class EnumerableError(Exception):
    """ Base class for all enumerable errors"""
    pass

class ArityError(EnumerableError):
    """ Raised when a block is invoked with the wrong number of arguments"""
    pass

class InvalidArgument(EnumerableError):
    """ Raised when a combinator argument is out of range, before any iteration starts"""
    pass

class EmptyCollectionError(EnumerableError):
    """ Raised when a fold or extremum is requested on an empty sequence without a default"""

class UnboundVariable(EnumerableError):
    """ Raised when a frame is asked for a name it neither binds nor aliases"""

class UnknownFunction(EnumerableError):
    """ Raised when a FunctionRef names a function that was never registered"""

class EnumerableTypeError(EnumerableError):
    """ Raised when something that is not a block is passed where a block is expected"""
