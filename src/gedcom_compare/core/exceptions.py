class PipelineError(Exception):
    """Base exception for comparison pipeline failures."""


class NoIndividualsFoundError(PipelineError):
    """Raised when a source file yields no individual records."""

    def __init__(self, source: str):
        super().__init__(f"No individuals found in {source}")
        self.source = source


class SessionNotFoundError(PipelineError):
    """Raised when a session id is not present in the store."""

    def __init__(self, session_id: str):
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class CompareExecutionError(PipelineError):
    """Raised when the comparison pipeline fails unexpectedly."""
