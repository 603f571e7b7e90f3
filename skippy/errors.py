
class SkippyError(Exception):
    """ Base class for all Skippy faults raised outside the language"""
    pass

class SkippySyntaxError(SkippyError):
    """ Raised when source text does not match the grammar"""

class SkippyTypeError(SkippyError):
    """ Raised when a Value is read or retagged as the wrong variant"""

# Language-level failures (unbound symbols, bad arguments, division by zero)
# are never raised: they are returned as Error values.
