# app/services/errors.py
"""Errors raised by the job board services.

Routes catch these once, flash ``str(exc)`` next to the form and let the
user resubmit. Nothing is retried.
"""


class JobBoardError(Exception):
    """Base class; the message is shown to the user verbatim."""


class ValidationError(JobBoardError):
    """A required field was empty. Raised before any write."""


class DuplicateCompanyName(JobBoardError):
    def __init__(self, name: str):
        super().__init__("A company with this name already exists")
        self.name = name


class WriteFailure(JobBoardError):
    """The store rejected an insert or update."""


class NotFound(JobBoardError):
    pass
