"""Plain value types passed between the pipeline stages."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguageEdge:
    name: str
    size: int


@dataclass(frozen=True)
class RepositoryLanguageRecord:
    is_archived: bool
    edges: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class RankedEntry:
    label: str
    percent: float
