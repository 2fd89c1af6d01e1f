"""Keywords Namespace — tag-based and NLP-extracted keyword rankings."""

from shega_client.core import endpoints
from shega_client.core.domain_types import Site
from shega_client.core.query import with_query
from shega_client.infrastructure.http_client import APIClient
from shega_client.schemas.topics import ExtractedKeyword, TopKeyword


async def get_top(
    client: APIClient, *, limit: int | None = None, site: Site | str | None = None,
) -> list[TopKeyword]:
    return await client.get(
        with_query(endpoints.TOP_KEYWORDS, {"limit": limit, "site": site}),
        response_model=list[TopKeyword],
    )


async def get_extracted(
    client: APIClient, *, limit: int | None = None, site: Site | str | None = None,
) -> list[ExtractedKeyword]:
    return await client.get(
        with_query(
            endpoints.NLP_EXTRACTED_KEYWORDS, {"limit": limit, "site": site},
        ),
        response_model=list[ExtractedKeyword],
    )
