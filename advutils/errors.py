"""Exceptions raised by the containers and numerical routines."""


class UtilsError(Exception):
    """Base class for every error raised by this package."""


class FullError(UtilsError):
    """A container has no room for the requested items."""


class EmptyError(UtilsError):
    """A container does not hold the requested items."""


class ConvergenceError(UtilsError):
    """An iterative method did not converge within its iteration budget."""


class SingularMatrixError(UtilsError):
    """A matrix could not be factorized because a pivot is zero."""