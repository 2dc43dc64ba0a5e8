# numfunc/errors.py
"""
Error types for numfunc.

There is exactly one domain error. It subclasses ValueError so callers that
already catch ValueError around numeric code keep working.
"""


class InvalidArgument(ValueError):
    """Raised when a numeric operation is called outside its domain."""
    pass
