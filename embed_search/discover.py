# discover.py - finds candidate TikTok links on DuckDuckGo's HTML results page
import logging
from typing import List, Optional
from urllib.parse import parse_qs, urljoin, urlparse

import requests
from bs4 import BeautifulSoup, ParserRejectedMarkup

from embed_search import client
from embed_search.config import (
    DISCOVERY_CAP,
    SEARCH_ORIGIN,
    SEARCH_URL,
    SHORT_LINK_DOMAIN,
    TARGET_DOMAIN,
)
from embed_search.errors import DiscoveryError

logger = logging.getLogger(__name__)


def is_tiktok_url(url: str) -> bool:
    try:
        host = urlparse(url).hostname or ""
    except ValueError:
        return False
    return TARGET_DOMAIN in host or SHORT_LINK_DOMAIN in host


def _unwrap_redirect(url: str) -> str:
    """DuckDuckGo wraps some results as /l/?uddg=<target>; return the target."""
    parsed = urlparse(url)
    if "duckduckgo.com" not in (parsed.hostname or "") or not parsed.path.startswith("/l/"):
        return url
    target = parse_qs(parsed.query).get("uddg", [""])[0]
    return target or url


def _candidate_from_href(href: str) -> Optional[str]:
    try:
        url = _unwrap_redirect(urljoin(SEARCH_ORIGIN, href))
    except ValueError:
        return None
    if is_tiktok_url(url):
        return url
    return None


def extract_links(html: str, max_results: int = DISCOVERY_CAP) -> List[str]:
    soup = BeautifulSoup(html, "html.parser")
    seen = set()
    out = []
    for a in soup.find_all("a"):
        if len(out) >= max_results:
            break
        href = a.get("href")
        if not href:
            continue
        url = _candidate_from_href(str(href))
        if url and url not in seen:
            seen.add(url)
            out.append(url)
    return out


def discover(query: str, max_results: int = DISCOVERY_CAP) -> List[str]:
    """Search DuckDuckGo for ``site:tiktok.com <query>`` and collect post links.

    Returns at most ``max_results`` unique URLs in the order they appear on
    the results page. Raises DiscoveryError when the search page cannot be
    fetched or parsed.
    """
    if not query or not query.strip():
        return []
    try:
        r = client.get(SEARCH_URL, params={"q": f"site:{TARGET_DOMAIN} {query}"})
    except requests.RequestException as e:
        raise DiscoveryError(f"search request failed: {e}") from e
    if not r.ok:
        logger.warning("search engine answered %s for %r", r.status_code, query)
    try:
        links = extract_links(r.text, max_results)
    except ParserRejectedMarkup as e:
        raise DiscoveryError(f"could not parse search results: {e}") from e
    logger.info("discovered %d candidate links for %r", len(links), query)
    return links
