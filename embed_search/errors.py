# errors.py - failures surfaced to the HTTP layer


class EmbedSearchError(Exception):
    pass


class InvalidQueryError(EmbedSearchError):
    """The caller sent an empty or whitespace-only query."""


class DiscoveryError(EmbedSearchError):
    """The search engine could not be queried or its page could not be read."""
