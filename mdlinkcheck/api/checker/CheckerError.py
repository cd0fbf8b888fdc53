"""Checker failure error."""


class CheckerError(Exception):
    """Raised when the checker fails on a document as a whole.

    Fails the current target only; the batch carries on.
    """
