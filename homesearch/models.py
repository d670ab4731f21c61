"""Request and response shapes shared by the pipeline, CLI and HTTP layer."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

# Provider-defined listing record; field names are not guaranteed.
RawListing = Dict[str, Any]


@dataclass(frozen=True)
class SearchRequest:
    """A validated search: trimmed query plus optional hints."""

    query: str
    budget: Optional[int] = None
    location: Optional[str] = None


@dataclass(frozen=True)
class NormalizedResult:
    """A single caller-facing listing.  Every field is non-empty."""

    title: str
    snippet: str
    url: str


@dataclass
class PipelineResponse:
    """What the pipeline hands back to its caller."""

    summary: str
    results: List[NormalizedResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "results": [asdict(r) for r in self.results],
        }
