"""
Retrieval Scorer - Ranks articles against a free-text query.

Scoring is additive and case-insensitive:
- +3 per article tag sharing a token with the query
- +2 if the query contains the product name
- +1 if the article title contains the query
- +1 per article keyword contained in the query

Articles scoring 0 or less are excluded. Equal scores keep corpus order.
"""

from typing import List, Sequence

from pydantic import BaseModel, Field

from ..domain.models import Article
from ..matching.similarity import normalize

TAG_WEIGHT = 3
PRODUCT_WEIGHT = 2
TITLE_WEIGHT = 1
KEYWORD_WEIGHT = 1

DEFAULT_RESULT_LIMIT = 3
LOW_CONFIDENCE_THRESHOLD = 9


class MatchDetail(BaseModel):
    """Which parts of an article contributed to its score."""
    tag_matches: List[str] = Field(default_factory=list)
    product_match: bool = False
    title_match: bool = False
    keyword_matches: List[str] = Field(default_factory=list)


class RetrievalResult(BaseModel):
    article: Article
    score: int
    match_detail: MatchDetail


def score_article(query: str, article: Article) -> RetrievalResult:
    query_lower = query.lower()
    query_tokens = set(normalize(query))
    detail = MatchDetail()
    score = 0

    for tag in article.tags:
        if query_tokens.intersection(normalize(tag)):
            score += TAG_WEIGHT
            detail.tag_matches.append(tag)

    if article.product and article.product.lower() in query_lower:
        score += PRODUCT_WEIGHT
        detail.product_match = True

    if article.title and query_lower in article.title.lower():
        score += TITLE_WEIGHT
        detail.title_match = True

    for keyword in article.keywords:
        if keyword and keyword.lower() in query_lower:
            score += KEYWORD_WEIGHT
            detail.keyword_matches.append(keyword)

    return RetrievalResult(article=article, score=score, match_detail=detail)


def search_articles(
    query: str,
    articles: Sequence[Article],
    limit: int = DEFAULT_RESULT_LIMIT,
) -> List[RetrievalResult]:
    """Rank articles for query, best first, dropping non-positive scores."""
    if not query or not query.strip():
        return []
    scored = [score_article(query.strip(), article) for article in articles]
    ranked = sorted(
        (result for result in scored if result.score > 0),
        key=lambda result: result.score,
        reverse=True,
    )
    return ranked[:limit]


def is_low_confidence(
    results: Sequence[RetrievalResult],
    threshold: int = LOW_CONFIDENCE_THRESHOLD,
) -> bool:
    """Empty results, or a best score below threshold, call for disambiguation."""
    if not results:
        return True
    return results[0].score < threshold


def filter_articles(query: str, articles: Sequence[Article]) -> List[Article]:
    """Substring filter over title, summary, tags and keywords. Blank query keeps all."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(articles)

    def _matches(article: Article) -> bool:
        return (
            needle in article.title.lower()
            or needle in article.summary.lower()
            or any(needle in tag.lower() for tag in article.tags)
            or any(needle in keyword.lower() for keyword in article.keywords)
        )

    return [article for article in articles if _matches(article)]
