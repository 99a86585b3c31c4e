# oembed.py - asks TikTok's oEmbed endpoint for a post's embed snippet
import logging
from typing import Optional

import requests

from embed_search import client
from embed_search.config import OEMBED_URL

logger = logging.getLogger(__name__)


def fetch_embed(resolved_url: str) -> Optional[str]:
    """Return the oEmbed ``html`` field for a post, or None when unavailable.

    A non-success status, a body that is not a JSON object, or a missing
    ``html`` field all count as "no embed"; nothing is raised.
    """
    try:
        r = client.get(OEMBED_URL, params={"url": resolved_url})
    except (requests.RequestException, ValueError) as e:
        logger.debug("oembed request failed for %s: %s", resolved_url, e)
        return None
    if not r.ok:
        logger.debug("oembed answered %s for %s", r.status_code, resolved_url)
        return None
    try:
        data = r.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    html = data.get("html")
    if not isinstance(html, str) or not html:
        return None
    return html
