# client.py - shared HTTP session for every outbound call
import requests

from embed_search.config import TIMEOUT, USER_AGENT

SESSION = requests.Session()
SESSION.headers.update({
    "User-Agent": USER_AGENT,
    "Accept-Language": "en-US,en;q=0.9"
})


def get(url: str, **kwargs) -> requests.Response:
    kwargs.setdefault("timeout", TIMEOUT)
    return SESSION.get(url, **kwargs)
