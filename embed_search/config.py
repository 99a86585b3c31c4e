# config.py - runtime settings, overridable from the environment
import os

PORT = int(os.environ.get("PORT", "3000"))
TIMEOUT = float(os.environ.get("EMBED_SEARCH_TIMEOUT", "6.0"))
USER_AGENT = os.environ.get(
    "EMBED_SEARCH_USER_AGENT",
    "tiktok-embed-search/1.0 (+https://your-domain.example)",
)
LOG_LEVEL = os.environ.get("EMBED_SEARCH_LOG_LEVEL", "INFO").upper()

SEARCH_URL = "https://html.duckduckgo.com/html/"
SEARCH_ORIGIN = "https://duckduckgo.com"
OEMBED_URL = "https://www.tiktok.com/oembed"

TARGET_DOMAIN = "tiktok.com"
SHORT_LINK_DOMAIN = "vm.tiktok.com"

DISCOVERY_CAP = 12
RESULT_CAP = 8
THROTTLE_SECONDS = 0.25
