from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from depindex.config.schema import GraphSpec, NodeSpec
from depindex.util.errors import GraphFileError

_ALLOWED_GRAPH_KEYS = {"description", "nodes"}
_ALLOWED_NODE_KEYS = {"id", "depends_on"}


def _is_non_blank_str(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip()) and "\x00" not in value


def _ensure_list_str(name: str, value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise GraphFileError(f"{name} must be list[str]")
    if any(not _is_non_blank_str(v) for v in value):
        raise GraphFileError(f"{name} must contain non-empty strings without null bytes")
    return value


def _parse_node(raw: Any) -> NodeSpec:
    if not isinstance(raw, dict):
        raise GraphFileError("node must be mapping")
    if any(not isinstance(key, str) for key in raw):
        raise GraphFileError("node fields must use string keys")
    if "id" not in raw or not _is_non_blank_str(raw["id"]):
        raise GraphFileError("node.id is required and must be non-empty string")
    unknown = set(raw.keys()) - _ALLOWED_NODE_KEYS
    if unknown:
        raise GraphFileError(f"node '{raw['id']}' has unknown fields: {sorted(unknown)}")

    depends_on = _ensure_list_str(f"node '{raw['id']}' depends_on", raw.get("depends_on"))
    return NodeSpec(id=raw["id"], depends_on=depends_on)


def validate_graph(spec: GraphSpec) -> None:
    # Self dependencies, cycles and undeclared ids are all valid pairs for the index.
    ids = [node.id for node in spec.nodes]
    if len(set(ids)) != len(ids):
        raise GraphFileError("node.id must be unique")


def parse_graph(raw: Any) -> GraphSpec:
    if not isinstance(raw, dict):
        raise GraphFileError("graph root must be a mapping")
    if any(not isinstance(key, str) for key in raw):
        raise GraphFileError("graph root keys must be strings")
    unknown_root = set(raw.keys()) - _ALLOWED_GRAPH_KEYS
    if unknown_root:
        raise GraphFileError(f"graph contains unknown fields: {sorted(unknown_root)}")

    raw_nodes = raw.get("nodes")
    if not isinstance(raw_nodes, list):
        raise GraphFileError("graph.nodes must be a list")

    description = raw.get("description")
    if description is not None and not _is_non_blank_str(description):
        raise GraphFileError("graph.description must be non-empty string when provided")

    spec = GraphSpec(
        description=description,
        nodes=[_parse_node(node) for node in raw_nodes],
    )
    validate_graph(spec)
    return spec


def load_graph(path: Path) -> GraphSpec:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise GraphFileError(f"graph file not found: {path}") from exc
    except UnicodeError as exc:
        raise GraphFileError(f"failed to decode graph file as utf-8: {path}") from exc
    except (OSError, RuntimeError) as exc:
        raise GraphFileError(f"failed to read graph file: {path}") from exc

    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise GraphFileError(f"failed to parse yaml: {exc}") from exc

    return parse_graph(raw)
