from __future__ import annotations

from depindex.graph.index import DependencyIndex


def build_summary(index: DependencyIndex, description: str | None = None) -> dict[str, object]:
    key_rows: list[dict[str, object]] = []
    roots: list[str] = []
    leaves: list[str] = []

    for key in index.keys():
        dependents = index.dependents_of(key)
        dependees = index.dependees_of(key)
        key_rows.append(
            {
                "key": key,
                "dependees": dependees,
                "dependents": dependents,
                "dependee_count": index.dependee_count(key),
                "dependent_count": len(dependents),
            }
        )
        if dependents and not dependees:
            roots.append(key)
        if dependees and not dependents:
            leaves.append(key)

    self_loops = [pair.source for pair in index.pairs() if pair.source == pair.target]

    return {
        "description": description,
        "totals": {
            "pairs": index.size,
            "keys": len(key_rows),
            "roots": len(roots),
            "leaves": len(leaves),
            "self_loops": len(self_loops),
        },
        "roots": roots,
        "leaves": leaves,
        "self_loops": self_loops,
        "keys": key_rows,
    }
