"""
Service Layer Exceptions

Custom exceptions for the TroubleshootingService. The step runner itself never
raises for navigation or fallback outcomes; these cover lookups the service
performs on behalf of its callers.
"""


class StepperServiceError(Exception):
    """Base class for service layer errors."""
    pass


class SessionNotFoundError(StepperServiceError):
    """Raised when a session id does not exist."""
    pass


class ArticleNotFoundError(StepperServiceError):
    """Raised when an article id is not in the corpus."""
    pass


class NoActiveArticleError(StepperServiceError):
    """Raised when an operation needs a selected article but the session is idle."""
    pass
