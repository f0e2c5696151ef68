"""
Contains exception classes used by eveclient. Not all exceptions are here,
only the most commonly used ones.
"""


class Error(Exception):
    """Baseclass for all errors."""

    def __init__(self, *args, **kwargs):
        for key, value in kwargs.items():
            if getattr(self, key, object()) is not None:  # pragma: no cover
                raise TypeError(f"Invalid argument: {key}")
            setattr(self, key, value)

        super().__init__(*args)


class UserError(Error, ValueError):
    """Wrapper exception to be used to signify the traceback should not be
    shown to the user."""

    problems = None

    def __str__(self):
        msg = Error.__str__(self)
        for problem in self.problems or ():
            msg += f"\n  - {problem}"

        return msg


class UsageError(UserError):
    """A write was requested without an etag and without allowing to
    overwrite."""


class PreconditionFailed(Error):
    """
      - The item doesn't exist although it should
      - The etags don't match.
      - The server demands a precondition we didn't send.

    This error may indicate race conditions.
    """


class NotFoundError(PreconditionFailed):
    """Item not found"""


class TargetMissingError(NotFoundError):
    """The item vanished before a forced write could be done."""

    method = None
    resource = None
    id = None


class WrongEtagError(PreconditionFailed):
    """Wrong etag"""


class ReadOnlyError(Error):
    """Resource is read-only."""


class InvalidResponse(Error, ValueError):
    """The backend returned an invalid result."""
