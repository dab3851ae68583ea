"""
Errors raised by sklearn_drsa.

Each subclasses the builtin exception a caller would catch anyway, so
`except ValueError` keeps working for code that does not care about the
difference.
"""


class NullArgumentError(ValueError):
    """An argument was `None` where a field, table or index is required."""


class TypeMismatchError(TypeError):
    """Two fields of incompatible kinds met in a comparison or aggregation."""


class UncomparableError(ValueError):
    """There is no defined order between the two compared fields.

    Raised e.g. when a known field is reverse-compared onto an MV1.5 missing
    value. Callers have to branch on this explicitly, no default ordering is
    assumed.
    """


class InvalidValueError(ValueError):
    """A field value is invalid, or two enumeration fields do not share a
    common element list."""


class FieldParseError(ValueError):
    """Text could not be parsed into an evaluation field."""
