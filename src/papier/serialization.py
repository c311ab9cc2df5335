"""Tree serialization: JSON round-trip for Papier nodes.

Converts typed nodes to/from JSON-compatible dicts for caching, inspection
and handing trees to tools written in other languages. Output is
deterministic (sorted keys).

Example:
    from papier import parse
    from papier.serialization import to_json, from_json

    doc = parse("* Intro {\\nbody\\n}\\n")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from papier.location import SourceLocation
from papier.nodes import WORD_CLASSES, Document, Line, Node, SubDocument, Text

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls for cls in (Document, Text, SubDocument, Line, *WORD_CLASSES)
}


def to_dict(node: Node, *, include_location: bool = True) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        node: Any Papier node.
        include_location: Drop ``location`` fields when False, which makes
            two trees of the same structure compare equal regardless of
            where their text sat in the source.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        if f.name == "location" and not include_location:
            continue
        value = getattr(node, f.name)
        result[f.name] = _serialize_value(value, include_location)

    return result


def _serialize_value(value: Any, include_location: bool) -> Any:
    if isinstance(value, Node):
        return to_dict(value, include_location=include_location)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            **{f.name: getattr(value, f.name) for f in fields(value)},
        }
    if isinstance(value, tuple):
        return [_serialize_value(item, include_location) for item in value]
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict produced by ``to_dict``.

    Nodes serialized without locations get ``SourceLocation.unknown()``.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])
    kwargs.setdefault("location", SourceLocation.unknown())

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "SourceLocation":
            return SourceLocation(**{k: v for k, v in value.items() if k != "_type"})
        if type_name is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(
    doc: Document, *, indent: int | None = None, include_location: bool = True
) -> str:
    """Serialize a Document to a JSON string (sorted keys)."""
    return json.dumps(
        to_dict(doc, include_location=include_location), sort_keys=True, indent=indent
    )


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
