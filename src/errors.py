"""
Error Types for Resume Checks.

Each error carries the message shown to the end user, so callers can
report decode failures, empty documents and unusable job descriptions
as three distinct outcomes.
"""


class ResumeCheckError(Exception):
    """Base class for all resume check failures."""

    default_message = "Resume check failed."

    def __init__(self, user_message: str | None = None, detail: str | None = None):
        self.user_message = user_message or self.default_message
        self.detail = detail
        super().__init__(self.user_message if not detail else f"{self.user_message} ({detail})")


class DecodeError(ResumeCheckError):
    """The uploaded document could not be converted to text at all."""

    default_message = (
        "Failed to read PDF file. Please try a different PDF or convert to simple text."
    )


class EmptyTextError(ResumeCheckError):
    """Decoding worked but produced no usable text (e.g. image-only PDF)."""

    default_message = "Could not extract text from the file. It might be an image-only PDF."


class ValidationError(ResumeCheckError):
    """The job description yields no keywords to compare against."""

    default_message = "Job description is too short or empty."
