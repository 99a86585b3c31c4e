# resolve.py - follows redirects so short links become canonical post URLs
import logging

import requests

from embed_search import client

logger = logging.getLogger(__name__)


def resolve(url: str) -> str:
    """Return the URL a GET on ``url`` ends up at, or ``url`` itself on failure."""
    try:
        r = client.get(url, allow_redirects=True)
    except (requests.RequestException, ValueError) as e:
        logger.debug("could not resolve %s: %s", url, e)
        return url
    return r.url or url
