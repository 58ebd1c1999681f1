# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
SerpAPI Tools Module

Web search through SerpAPI's Google engine. Used by the planner agents to
research destinations, lodging, transport, activities and restaurants.

Key functions:
- search_web: Run a Google search and return normalized organic results
"""

import logging
from typing import Optional

import httpx

from config.config import SERPAPI_API_KEY, SERPAPI_BASE_URL, SERPAPI_MAX_RESULTS

logger = logging.getLogger("vacation.planner.serpapi_tools")


async def search_web(query: str, num_results: Optional[int] = None) -> dict:
    """
    Search the web using SerpAPI's Google engine.

    Args:
        query: Free-text search query
        num_results: Maximum organic results to return (default: SERPAPI_MAX_RESULTS)

    Returns:
        Dictionary containing:
        - query: The query that was run
        - answer: Direct answer snippet, if Google showed one
        - results: List of {title, link, snippet, source}

    Raises:
        ValueError: If SERPAPI_API_KEY is not configured
        Exception: If SerpAPI call fails or returns an error

    Example:
        >>> data = await search_web("quiet Airbnb St. Petersburg FL kitchen")
        >>> print(data["results"][0]["link"])
    """
    limit = num_results or SERPAPI_MAX_RESULTS
    logger.info(f"Searching web: {query!r} (max {limit} results)")

    if not SERPAPI_API_KEY:
        logger.error("SERPAPI_API_KEY is not configured")
        raise ValueError("SerpAPI key is not configured. Please set SERPAPI_API_KEY in your environment.")

    params = {
        "engine": "google",
        "api_key": SERPAPI_API_KEY,
        "q": query,
        "num": str(limit),
    }

    try:
        async with httpx.AsyncClient(timeout=30.0) as client:
            response = await client.get(SERPAPI_BASE_URL, params=params)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPError as e:
        logger.error(f"HTTP error during web search: {e}")
        raise Exception(f"Failed to search the web: {e}")

    if "error" in data:
        logger.error(f"SerpAPI error: {data['error']}")
        raise Exception(f"SerpAPI error: {data['error']}")

    results = []
    for item in data.get("organic_results", [])[:limit]:
        parsed = _parse_organic_result(item)
        if parsed:
            results.append(parsed)

    logger.info(f"Found {len(results)} web results")
    return {
        "query": query,
        "answer": _extract_answer(data),
        "results": results,
    }


def _extract_answer(data: dict) -> Optional[str]:
    """Pull a direct answer out of the answer box or knowledge graph."""
    answer_box = data.get("answer_box") or {}
    answer = answer_box.get("answer") or answer_box.get("snippet")
    if answer:
        return answer
    knowledge = data.get("knowledge_graph") or {}
    return knowledge.get("description")


def _parse_organic_result(item: dict) -> Optional[dict]:
    """
    Normalize one organic result.

    Returns None for results without a link.
    """
    link = item.get("link")
    if not link:
        return None
    return {
        "title": item.get("title", ""),
        "link": link,
        "snippet": item.get("snippet", ""),
        "source": item.get("source", ""),
    }
