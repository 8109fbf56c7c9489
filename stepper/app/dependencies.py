"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the core Singleton services (Repositories, Service).
2. Wiring them together (e.g., injecting both repositories into the Service).
3. Managing the lifecycle of these objects using @lru_cache to ensure
   they are created only once per application process.

Tests override these with app.dependency_overrides.
"""


from functools import lru_cache
from fastapi import Depends

from ..config import settings
from ..repositories.article import ArticleRepository, StaticArticleRepository
from ..repositories.session import SessionRepository, InMemorySessionRepository
from ..services.troubleshooting import TroubleshootingService

# Article Repository (Singleton)
@lru_cache()
def get_article_repository() -> ArticleRepository:
    return StaticArticleRepository()

# Session Repository (Singleton)
# Note: In-memory storage must be a singleton so data persists across requests!
@lru_cache()
def get_session_repository() -> SessionRepository:
    return InMemorySessionRepository(similarity_threshold=settings.STEP_SIMILARITY_THRESHOLD)

# The Troubleshooting Service (Singleton Service)
@lru_cache()
def get_troubleshooting_service(
    session_repo: SessionRepository = Depends(get_session_repository),
    article_repo: ArticleRepository = Depends(get_article_repository),
) -> TroubleshootingService:
    """
    Injects all necessary components into the TroubleshootingService.
    """
    return TroubleshootingService(
        session_repository=session_repo,
        article_repository=article_repo,
        search_limit=settings.SEARCH_RESULT_LIMIT,
        low_confidence_threshold=settings.LOW_CONFIDENCE_THRESHOLD,
    )
