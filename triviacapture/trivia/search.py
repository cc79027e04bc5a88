from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from .errors import BotDetectionError, QuerySoftFailure, ResponseParseError
from .methods import ScoringMethod
from .models import Question, ResultItem, SearchDocument, SearchOutcome, SearchQuery

logger = logging.getLogger("triviacapture")

DEFAULT_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"

# Substrings the provider serves instead of results once it blocks automated traffic.
BOT_MARKERS = (
    "unusual traffic from your computer network",
    "/sorry/index",
)


def _contains_bot_marker(body: str) -> bool:
    low = body.lower()
    return any(m in low for m in BOT_MARKERS)


def parse_response(body: str) -> SearchDocument:
    """
    Parse a Custom Search style JSON body: {"items": [{"title", "snippet"}, ...]}.
    A missing "items" key means zero results.
    """
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized int literals, and pathological nesting
        raise ResponseParseError(f"response is not JSON: {e}") from e
    if not isinstance(data, dict):
        raise ResponseParseError("response is not a JSON object")

    raw_items = data.get("items") or []
    if not isinstance(raw_items, list):
        raise ResponseParseError("'items' is not a list")

    items: List[ResultItem] = []
    for it in raw_items:
        if not isinstance(it, dict):
            raise ResponseParseError("result item is not an object")
        items.append(ResultItem(title=str(it.get("title") or ""), snippet=str(it.get("snippet") or "")))
    return SearchDocument(items=items)


class SearchClient:
    def __init__(
        self,
        url: str = DEFAULT_SEARCH_URL,
        *,
        api_key: str = "",
        cx: str = "",
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._url = url
        self._params: Dict[str, Any] = {}
        if api_key:
            self._params["key"] = api_key
        if cx:
            self._params["cx"] = cx
        if client is None:
            timeout = httpx.Timeout(timeout_seconds, connect=4.0)
            limits = httpx.Limits(max_keepalive_connections=10, max_connections=20)
            client = httpx.AsyncClient(timeout=timeout, limits=limits)
        self._client = client

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "SearchClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def search(self, term: str) -> SearchDocument:
        """
        Run one query.
        Raises BotDetectionError when the provider blocks us, QuerySoftFailure otherwise.
        """
        try:
            resp = await self._client.get(self._url, params={**self._params, "q": term})
        except httpx.HTTPError as e:
            raise QuerySoftFailure(f"transport error: {e}") from e

        body = resp.text
        # The block page can arrive with any status, so look before raise_for_status.
        if _contains_bot_marker(body):
            raise BotDetectionError(term)
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise QuerySoftFailure(f"HTTP {resp.status_code}") from e
        return parse_response(body)


class SearchScheduler:
    """Fans out one search per (option, method) and joins them all."""

    def __init__(self, client: SearchClient, methods: Sequence[ScoringMethod] = tuple(ScoringMethod)) -> None:
        self._client = client
        self.methods = tuple(methods)

    def build_queries(self, question: Question, filtered_question: str) -> List[SearchQuery]:
        queries: List[SearchQuery] = []
        for idx, option in enumerate(question.options):
            for method in self.methods:
                term = method.build_query(filtered_question, question.text, option)
                queries.append(SearchQuery(term=term, target_option=option, option_index=idx, method=method))
        return queries

    async def _run_one(self, query: SearchQuery, results: List[SearchOutcome], lock: asyncio.Lock) -> None:
        payload: Optional[SearchDocument] = None
        blocked = False
        try:
            payload = await self._client.search(query.term)
        except BotDetectionError:
            blocked = True
        except QuerySoftFailure as e:
            logger.warning("search %s for %r failed: %s", query.method.name, query.term, e)

        outcome = SearchOutcome(
            payload=payload,
            target_option=query.target_option,
            option_index=query.option_index,
            method=query.method,
            bot_detected=blocked,
            term=query.term,
        )
        async with lock:
            results.append(outcome)

    async def run(self, queries: Sequence[SearchQuery]) -> List[SearchOutcome]:
        """
        Execute every query concurrently and return once all of them finished.
        Raises BotDetectionError after the join if any response was a block page.
        """
        results: List[SearchOutcome] = []
        lock = asyncio.Lock()
        done = await asyncio.gather(*(self._run_one(q, results, lock) for q in queries), return_exceptions=True)
        # Unexpected errors surface only after every sibling has finished.
        for res in done:
            if isinstance(res, BaseException):
                raise res

        logger.debug("collected %d/%d search outcomes", len(results), len(queries))
        for out in results:
            if out.bot_detected:
                raise BotDetectionError(out.term)
        return results
