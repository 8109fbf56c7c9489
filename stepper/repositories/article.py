from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import TypeAdapter

from ..domain.models import Article
from ..data.articles import SAMPLE_ARTICLES
from ..retrieval.scorer import DEFAULT_RESULT_LIMIT, RetrievalResult, search_articles

_ARTICLE_LIST = TypeAdapter(List[Article])


# The Interface
class ArticleRepository(ABC):
    """
    Defines how the application accesses the article corpus.
    Lookups are synchronous: any loading must finish before the runner is used.
    """

    @abstractmethod
    def get_article(self, article_id: str) -> Optional[Article]:
        """Retrieves an article by ID, or None."""
        pass

    @abstractmethod
    def get_all_articles(self) -> List[Article]:
        """All articles, in corpus order."""
        pass

    def search(self, query: str, limit: int = DEFAULT_RESULT_LIMIT) -> List[RetrievalResult]:
        """Ranked articles for a free-text query."""
        return search_articles(query, self.get_all_articles(), limit=limit)


class StaticArticleRepository(ArticleRepository):
    """
    Serves articles held in memory.

    Raw records (dicts as found in JSON exports) are validated into Articles
    here, so malformed input is rejected before it reaches the runner.
    """

    def __init__(self, articles: Optional[Iterable[Union[Article, Mapping[str, Any]]]] = None):
        records = list(SAMPLE_ARTICLES if articles is None else articles)
        self._articles: List[Article] = _ARTICLE_LIST.validate_python(records)
        # Index for O(1) lookup
        self._index: Dict[str, Article] = {}
        for article in self._articles:
            if article.id in self._index:
                raise ValueError(f"Duplicate article id '{article.id}'")
            self._index[article.id] = article

    def get_article(self, article_id) -> Optional[Article]:
        return self._index.get(str(article_id))

    def get_all_articles(self) -> List[Article]:
        return list(self._articles)
