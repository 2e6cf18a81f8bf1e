"""Exceptions raised while computing categorical axis ticks."""


class CategoricalAxisError(ValueError):
    """Base class for all categorical axis errors."""


class InvalidInputError(CategoricalAxisError):
    """Inputs cannot produce a tick layout (mismatched series, empty categories, ...)."""


class MissingFormatPatternError(CategoricalAxisError):
    """A date axis was configured without a date pattern."""
