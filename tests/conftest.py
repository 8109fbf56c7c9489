from datetime import datetime, timezone

import pytest

from stepper.domain.models import Article, Escalation, Fallback, Step
from stepper.repositories.article import StaticArticleRepository
from stepper.repositories.session import InMemorySessionRepository
from stepper.services.troubleshooting import TroubleshootingService

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_steps(prefix, *texts):
    return [Step(id=f"{prefix}{i + 1}", text=text) for i, text in enumerate(texts)]


def make_article(article_id, steps=(), fallbacks=(), **overrides):
    fields = dict(
        id=article_id,
        title=f"Article {article_id}",
        steps=list(steps),
        fallbacks=list(fallbacks),
        escalation=Escalation(when=f"When {article_id} is exhausted", target=f"Team {article_id}"),
    )
    fields.update(overrides)
    return Article(**fields)


@pytest.fixture
def mail_article():
    return make_article(
        "mail",
        steps=make_steps(
            "s",
            "Check the outbox for stuck emails",
            "Verify SMTP server and port number",
            "Send a test email to yourself",
        ),
        fallbacks=[
            Fallback(
                id="fb-smtp",
                reason_category="system-error",
                trigger_keywords=["smtp", "port"],
                steps=make_steps("a", "Reset the SMTP server", "Restart the email client"),
            ),
            Fallback(
                id="fb-quota",
                reason_category="system-error",
                trigger_keywords=["quota", "space"],
                steps=make_steps("b", "Archive old emails", "Empty deleted items"),
            ),
            Fallback(
                id="fb-repeat",
                reason_category="no-change",
                steps=make_steps(
                    "c",
                    "Check the outbox for stuck emails",
                    "Verify SMTP server and port number",
                    "Clear the local mail cache",
                ),
            ),
        ],
    )


@pytest.fixture
def empty_article():
    return make_article("empty")


@pytest.fixture
def service():
    return TroubleshootingService(
        session_repository=InMemorySessionRepository(),
        article_repository=StaticArticleRepository(),
    )
