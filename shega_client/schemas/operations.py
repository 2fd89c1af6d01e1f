"""Operations Schemas — scraping jobs and the periodic scheduler.

Invariants:
    - Trigger acknowledgements carry a status; task_id only for scrape jobs
"""

from pydantic import Field

from shega_client.schemas.base import APIModel


class ScrapeResponse(APIModel):
    status: str  # started | completed | failed
    message: str | None = None
    task_id: str | None = None


class ScrapeStats(APIModel):
    articles_found: int = 0
    articles_new: int = 0
    articles_updated: int = 0


class ScrapeTaskStatus(APIModel):
    status: str  # running | completed | failed
    task_id: str | None = None
    site: str | None = None
    started_at: str | None = None
    completed_at: str | None = None
    progress: float | None = None
    stats: ScrapeStats | None = None


class ScrapeAllStatusResponse(APIModel):
    tasks: dict[str, ScrapeTaskStatus] = {}
    running_count: int = 0
    completed_count: int = 0
    failed_count: int = 0


class ScrapePreviewResponse(APIModel):
    site: str
    total_urls: int | None = None
    preview_urls: list[str] = Field(default_factory=list)


class SchedulerStatus(APIModel):
    enabled: bool | None = None
    running: bool | None = None
    interval_weeks: int | None = None
    is_pipeline_running: bool | None = None
    last_run: str | None = None
    next_run: str | None = None


class SchedulerTriggerResponse(APIModel):
    status: str
    message: str | None = None


class SchedulerHealth(APIModel):
    healthy: bool | None = None
    status: str | None = None
    enabled: bool | None = None
    next_run: str | None = None
    details: str | None = None
