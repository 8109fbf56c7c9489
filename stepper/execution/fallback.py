"""
Fallback Selector - Finds an alternative path after a failed step.

Three tiers are tried in order and the first success wins:
1. SAME ARTICLE: fallbacks of the current article whose reason category
   equals the reported one. Several candidates are ranked by how many of their
   trigger keywords occur as tokens of the failure note; ties keep the
   article's declared order.
2. CROSS ARTICLE: the same rule applied to every other article, in corpus
   order. The first article with a match wins (first match, not best match).
3. ESCALATION: the current article's escalation record, returned verbatim.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..domain.models import Article, Fallback, ReasonCategory
from ..matching.similarity import keyword_overlap, normalize
from .schemas.results import (
    CrossArticleFallback,
    EscalationResult,
    FallbackSelection,
    SameArticleFallback,
)

logger = logging.getLogger(__name__)


def _category_value(reason_category) -> str:
    if isinstance(reason_category, ReasonCategory):
        return reason_category.value
    return reason_category


def find_fallback_in_article(
    article: Article,
    reason_category: str,
    query_tokens: List[str],
) -> Optional[Fallback]:
    category = _category_value(reason_category)
    candidates = [fb for fb in article.fallbacks if fb.reason_category.value == category]

    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    # Strictly greater keeps the earliest declared candidate on ties.
    best = candidates[0]
    best_score = keyword_overlap(best.trigger_keywords, query_tokens)
    for candidate in candidates[1:]:
        score = keyword_overlap(candidate.trigger_keywords, query_tokens)
        if score > best_score:
            best, best_score = candidate, score
    return best


def find_fallback_across_articles(
    articles: Sequence[Article],
    reason_category: str,
    query_tokens: List[str],
    current_article_id: str,
) -> Optional[Tuple[Article, Fallback]]:
    for article in articles:
        if article.id == current_article_id:
            continue
        fallback = find_fallback_in_article(article, reason_category, query_tokens)
        if fallback:
            return article, fallback
    return None


def select_fallback(
    current_article: Article,
    all_articles: Sequence[Article],
    reason_category: str,
    failure_note: str = "",
) -> FallbackSelection:
    query_tokens = normalize(failure_note or "")

    fallback = find_fallback_in_article(current_article, reason_category, query_tokens)
    if fallback:
        logger.info(
            f"Fallback '{fallback.id}' selected in article '{current_article.id}' "
            f"for reason '{_category_value(reason_category)}'"
        )
        return SameArticleFallback(fallback=fallback, article=current_article)

    match = find_fallback_across_articles(
        all_articles, reason_category, query_tokens, current_article.id
    )
    if match:
        article, fallback = match
        logger.info(
            f"Fallback '{fallback.id}' selected from article '{article.id}' "
            f"(current article '{current_article.id}' had none)"
        )
        return CrossArticleFallback(fallback=fallback, article=article)

    logger.warning(
        f"No fallback for reason '{_category_value(reason_category)}' in any article; "
        f"escalating to '{current_article.escalation.target}'"
    )
    return EscalationResult(escalation=current_article.escalation)
