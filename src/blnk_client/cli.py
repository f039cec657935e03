#!/usr/bin/env python3
"""Command line search over a Blnk service.

Examples
--------
.. code-block:: bash

    blnk-search ledgers -q '*' --filter-by 'name:World' --sort-by 'created_at:desc'
    BLNK_BASE_URL=http://localhost:5001 blnk-search balances --filter-by 'balance:>1'
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

import pydantic

from .client import BlnkClient
from .config.settings import load_config
from .exceptions import APIError, BlnkError, ValidationError
from .models.search import ResourceType, SearchParams, SearchResponse
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blnk-search", description="Search ledgers, balances or transactions"
    )
    parser.add_argument(
        "resource",
        choices=[r.value for r in ResourceType],
        help="Collection to search",
    )
    parser.add_argument("-q", "--query", default="*", help="Query text (default: *)")
    parser.add_argument("--query-by", help="Comma separated fields to search")
    parser.add_argument("--filter-by", help="Filter expression")
    parser.add_argument("--sort-by", help="Sort expression")
    parser.add_argument("--page", type=int, help="Page number (1-based)")
    parser.add_argument("--per-page", type=int, help="Hits per page")
    parser.add_argument("--base-url", help="Service URL (default: $BLNK_BASE_URL)")
    parser.add_argument("--api-key", help="API key (default: $BLNK_API_KEY)")
    parser.add_argument("--retry", type=int, help="Attempts per request")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: $BLNK_LOG_LEVEL or INFO)",
    )
    parser.add_argument("--json", action="store_true", help="Print raw JSON hits")
    return parser


def format_results(results: SearchResponse, resource: ResourceType, per_page: int) -> List[str]:
    """Render a human readable summary of a search response."""
    pages = (results.out_of + per_page - 1) // per_page if per_page else 1
    lines = [f"Found {results.found} {resource.value} (Page {results.page}/{pages})"]
    for hit in results.hits:
        doc = hit.document
        if resource is ResourceType.LEDGERS:
            lines.append(f"Ledger: {doc.name} (ID: {doc.ledger_id})")
        elif resource is ResourceType.BALANCES:
            lines.append(
                f"Balance: {doc.display_balance:.2f} {doc.currency} (ID: {doc.balance_id})"
            )
        else:
            lines.append(
                f"Transaction: {doc.amount} {doc.currency} {doc.status or ''}"
                f" (ID: {doc.transaction_id})"
            )
        if doc.get_meta_data():
            lines.append(f"  Metadata: {doc.get_meta_data()}")
    return lines


async def run(args: argparse.Namespace) -> int:
    overrides = {
        key: value
        for key, value in (
            ("base_url", args.base_url),
            ("api_key", args.api_key),
            ("retry_count", args.retry),
            ("timeout", args.timeout),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    config = load_config(**overrides)
    setup_logging(config.log_level)

    resource = ResourceType(args.resource)
    try:
        params = SearchParams(
            q=args.query,
            query_by=args.query_by,
            filter_by=args.filter_by,
            sort_by=args.sort_by,
            page=args.page,
            per_page=args.per_page,
        )
    except pydantic.ValidationError as e:
        raise ValidationError(f"invalid search parameters: {e}") from e

    async with BlnkClient(config) as client:
        try:
            results, _ = await client.search.search_document(params, resource)
        except APIError as e:
            logger.error("Failed to search %s: %s", resource.value, e.message)
            if e.status_code:
                logger.error("Response status: %d", e.status_code)
            return 1

    if args.json:
        print(
            json.dumps(
                [hit.document.model_dump(mode="json") for hit in results.hits],
                indent=2,
            )
        )
    else:
        for line in format_results(results, resource, args.per_page or 10):
            print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(run(args))
    except BlnkError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
