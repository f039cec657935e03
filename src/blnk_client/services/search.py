"""Search service.

Searches are POSTed to ``search/<resource>``. The response carries raw
documents; they are resolved into typed models before being returned.
"""

import logging
from typing import Any, Mapping, Tuple, Union

import httpx
import pydantic

from ..exceptions import ValidationError
from ..models.search import ResourceType, SearchParams, SearchResponse
from .base import BaseService

logger = logging.getLogger(__name__)


class SearchService(BaseService):
    """Full-text search over ledgers, balances and transactions."""

    async def search_document(
        self,
        params: Union[SearchParams, Mapping[str, Any]],
        resource: Union[ResourceType, str],
    ) -> Tuple[SearchResponse, httpx.Response]:
        """Search one resource collection.

        :param params: Search parameters; ``q`` must be non-empty
        :param resource: Collection to search
        :return: Resolved search response and the raw HTTP response
        :raises ValidationError: If ``q`` is the empty string (no request is made)
        :raises UnsupportedResourceError: If ``resource`` is unknown
        :raises DecodeError: If the response or a hit cannot be decoded

        Examples:
            >>> results, _ = await client.search.search_document(
            ...     SearchParams(q="*", filter_by="name:World"), ResourceType.LEDGERS
            ... )
            >>> results.hits[0].document.ledger_id
        """
        if isinstance(params, Mapping):
            try:
                params = SearchParams.model_validate(params)
            except pydantic.ValidationError as e:
                raise ValidationError(f"invalid search parameters: {e}") from e
        if not params.q:
            raise ValidationError("search query is required", field="q")
        resource = ResourceType.coerce(resource)

        request = self.client.new_request(f"search/{resource.value}", "POST", params)
        search_response, response = await self.client.call_with_retry(
            request, SearchResponse
        )
        search_response.resolve(resource)
        logger.debug(
            "Search %s matched %d of %d documents",
            resource.value,
            search_response.found,
            search_response.out_of,
        )
        return search_response, response
