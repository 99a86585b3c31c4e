# orchestrator.py - ties discovery, redirect resolution and oEmbed together
import logging
import time

from embed_search.config import DISCOVERY_CAP, RESULT_CAP, THROTTLE_SECONDS
from embed_search.discover import discover
from embed_search.errors import InvalidQueryError
from embed_search.models import EmbedResult, SearchResponse
from embed_search.oembed import fetch_embed
from embed_search.resolve import resolve

logger = logging.getLogger(__name__)


def search(query: str) -> SearchResponse:
    """Main routine: turn a free-text query into embeddable TikTok posts.

    Candidates are handled one at a time in discovery order with a short
    pause after each, so neither DuckDuckGo nor TikTok sees a burst. A failed
    resolve or oEmbed lookup only drops that candidate; a failed discovery
    raises DiscoveryError to the caller.
    """
    if not query or not query.strip():
        raise InvalidQueryError("Missing q parameter")

    response = SearchResponse(query=query)
    for link in discover(query, DISCOVERY_CAP):
        resolved = resolve(link)
        embed_html = fetch_embed(resolved)
        if embed_html:
            response.results.append(EmbedResult(link, resolved, embed_html))
        else:
            logger.debug("no embed for %s", resolved)
        time.sleep(THROTTLE_SECONDS)
        if len(response.results) >= RESULT_CAP:
            break

    logger.info("query %r -> %d embeds", query, response.count)
    return response
