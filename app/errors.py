"""Form submission error taxonomy

Every failure in the submission pipeline is one of these. Each carries the
HTTP status code and the message the client is allowed to see.
"""
from typing import List, Optional


class FormSubmissionError(Exception):
    """Base class for pipeline failures that end in a response"""

    status_code = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class TransportError(FormSubmissionError):
    """Request used a method other than POST"""

    status_code = 405


class ParseError(FormSubmissionError):
    """Request body is not a JSON object"""


class ConfigError(FormSubmissionError):
    """form_id is missing or not configured"""


class SpamDetected(FormSubmissionError):
    """
    Submission tripped an anti-spam heuristic.

    When ``silent`` is set the client receives a normal success response so
    automated senders can't tell they were caught.
    """

    def __init__(self, message: str, reason: str, silent: bool = False):
        super().__init__(message, status_code=200 if silent else 400)
        self.reason = reason
        self.silent = silent


class ValidationError(FormSubmissionError):
    """One or more required fields are missing or invalid"""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class ActionError(FormSubmissionError):
    """A form's success action failed. The cause is never shown to clients."""

    status_code = 500

    def __init__(self, form_id: str):
        super().__init__("Submission processing failed. Please try again.")
        self.form_id = form_id


class NotificationError(Exception):
    """An email, webhook or storage side effect failed"""
