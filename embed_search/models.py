# models.py - value shapes returned to callers
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class EmbedResult:
    source_url: str
    resolved_url: str
    embed_html: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "sourceUrl": self.source_url,
            "resolvedUrl": self.resolved_url,
            "embedHtml": self.embed_html,
        }


@dataclass
class SearchResponse:
    query: str
    results: List[EmbedResult] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "count": self.count,
            "results": [r.to_dict() for r in self.results],
        }
