# linfit/utils/errors.py
class LinfitError(RuntimeError):
    """
    Base class for every failure raised by linfit.
    """


class InvalidInputError(LinfitError, ValueError):
    """
    Raised for empty, ragged or mismatched feature / target matrices,
    and for shape preconditions of the matrix kernel.
    Nothing is trained when this is raised.
    """


class SingularMatrixError(LinfitError, ArithmeticError):
    """
    Raised when Gauss-Jordan elimination meets a pivot below the
    singular threshold. No approximate inverse is produced.
    """


class NotTrainedError(LinfitError):
    """
    Raised when predict is called before a successful train.
    """
