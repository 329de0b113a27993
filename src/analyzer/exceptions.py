GENERIC_FAILURE = "Failed to analyze. Please try again."
DEFAULT_ERROR = "Failed to analyze"


class AnalyzerError(Exception):
    """Base error for analysis dispatch. ``str(err)`` is safe to show to users."""


class AnalysisRequestError(AnalyzerError):
    """Backend answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class AnalysisTransportError(AnalyzerError):
    """Network failure, undecodable body, or a body that does not fit the result shape."""

    def __init__(self, message: str = GENERIC_FAILURE) -> None:
        super().__init__(message)
