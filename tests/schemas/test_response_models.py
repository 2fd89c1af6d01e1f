"""Response model tests — leniency and key aliases at the client boundary.

Tests cover:
    - Unknown backend fields kept as extras
    - Mongo `_id` accepted for article ids, `articles` for the page body
    - Optional fields default rather than fail
    - Required fields still enforced
"""

import pytest
from pydantic import ValidationError

from shega_client.schemas.articles import Article, ArticleListResponse
from shega_client.schemas.operations import ScrapeResponse, ScrapeTaskStatus
from shega_client.schemas.topics import TopicSpike


def test_extra_fields_are_kept():
    article = Article.model_validate({"id": "1", "title": "T", "reading_time": 4})
    assert article.model_extra == {"reading_time": 4}


def test_article_id_from_mongo_key():
    assert Article.model_validate({"_id": "abc", "title": "T"}).id == "abc"


def test_article_requires_title():
    with pytest.raises(ValidationError):
        Article.model_validate({"id": "1"})


def test_list_envelope_articles_key():
    page = ArticleListResponse.model_validate({
        "articles": [{"id": "1", "title": "T"}], "total": 1, "page": 1, "per_page": 20,
    })
    assert len(page.items) == 1
    assert page.total_pages is None


def test_list_envelope_requires_pagination():
    with pytest.raises(ValidationError):
        ArticleListResponse.model_validate({"items": []})


def test_scrape_ack_without_message():
    ack = ScrapeResponse.model_validate({"task_id": "task-123", "status": "started"})
    assert ack.message is None
    assert ack.model_dump(exclude_none=True) == {"task_id": "task-123", "status": "started"}


def test_task_status_stats_optional():
    assert ScrapeTaskStatus.model_validate({"status": "running"}).stats is None


def test_new_topic_spike_has_no_ratio():
    spike = TopicSpike.model_validate({
        "keyword": "x", "recent_count": 3, "previous_count": 0, "spike_ratio": None, "is_new": True,
    })
    assert spike.spike_ratio is None
