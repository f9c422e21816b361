"""
Centralized error handling for the application.

Every failure the summarizer can report is a ``SummarizerError`` carrying the
HTTP status the API answers with, so routes and the command line can surface
a status and a message without inspecting the exception type.
"""

from fastapi import HTTPException


class SummarizerError(Exception):
    """Base class for errors reported to the caller."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(SummarizerError):
    """The caller supplied a missing or unusable value."""

    status_code = 400


class NoValidSegmentsError(InvalidInputError):
    """Filtering removed every transcript segment."""

    def __init__(self, message: str = "No valid segments found in transcript"):
        super().__init__(message)


class TranscriptNotFoundError(SummarizerError):
    """Neither a transcript nor auto-generated captions exist for the video."""

    status_code = 404

    def __init__(
        self, message: str = "No transcript or auto-generated captions found for this video"
    ):
        super().__init__(message)


class UpstreamServiceError(SummarizerError):
    """A third-party API failed or answered with something unusable."""

    status_code = 500


class TranscriptFetchError(UpstreamServiceError):
    pass


class SummaryGenerationError(UpstreamServiceError):
    pass


class MissingCredentialsError(SummarizerError):
    """A required API key is not configured."""

    status_code = 500


def to_http_exception(error: SummarizerError) -> HTTPException:
    """Convert a summarizer error into the matching FastAPI HTTPException."""
    return HTTPException(status_code=error.status_code, detail=error.message)
