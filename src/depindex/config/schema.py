from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class NodeSpec:
    id: str
    depends_on: list[str] = field(default_factory=list)


@dataclass(slots=True)
class GraphSpec:
    description: str | None
    nodes: list[NodeSpec]
