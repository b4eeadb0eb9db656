class BayesianError(Exception):
    """Base class for errors raised by the classifier."""


class InvalidArgumentError(BayesianError, ValueError):
    """A required argument was missing or empty."""


class InvalidStateError(BayesianError, RuntimeError):
    """The classifier lost the store it was built with."""
