"""JSON form of the lessonmark AST.

A parsed lesson can be shipped to a browser viewer or cached next to its
Markdown source and rebuilt later into equal nodes.

Wire format: every node and every structured value becomes a JSON object
whose ``_type`` names its class, followed by the dataclass fields. Tuples
become arrays and come back as tuples. Code tokens are stored as
``{"_type": "Token", "type": "keyword", "value": "const"}``.

    >>> doc = parse("- [x] done")
    >>> from_json(to_json(doc)) == doc
    True

Output uses sorted keys, so equal documents always serialize to the same
string.
"""

import json
from dataclasses import fields
from typing import Any

from lessonmark.errors import SerializationError
from lessonmark.location import SourceLocation
from lessonmark.nodes import (
    BlankLine,
    BlockQuote,
    Checklist,
    ChecklistItem,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    Image,
    Link,
    List,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from lessonmark.tokens import Token, TokenType

_NODE_CLASSES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Document,
        Heading,
        Paragraph,
        FencedCode,
        BlockQuote,
        List,
        Checklist,
        ChecklistItem,
        Table,
        TableRow,
        TableCell,
        ThematicBreak,
        BlankLine,
        Text,
        Strong,
        Emphasis,
        Strikethrough,
        CodeSpan,
        Link,
        Image,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Encode a node and everything below it as plain JSON-ready data."""
    encoded: dict[str, Any] = {"_type": type(node).__name__}
    encoded.update((f.name, _encode(getattr(node, f.name))) for f in fields(node))
    return encoded


def _encode(value: Any) -> Any:
    match value:
        case Node():
            return to_dict(value)
        case SourceLocation(lineno=start, end_lineno=end, source_file=path):
            return {"_type": "SourceLocation", "lineno": start, "end_lineno": end, "source_file": path}
        case Token(type=kind, value=text):
            return {"_type": "Token", "type": kind.value, "value": text}
        case tuple():
            return [_encode(item) for item in value]
        case _:
            return value


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node from the output of to_dict().

    Fields missing from ``data`` fall back to the dataclass defaults.

    Raises:
        SerializationError: ``data`` is not an object, ``_type`` is missing
            or names no node class, or a location or token lacks a field.
    """
    if not isinstance(data, dict):
        raise SerializationError("Expected a JSON object", type(data).__name__)
    if "_type" not in data:
        raise SerializationError("Missing '_type' field in serialized node")

    type_name = data["_type"]
    node_cls = _NODE_CLASSES.get(type_name) if isinstance(type_name, str) else None
    if node_cls is None:
        raise SerializationError("Unknown node type", str(type_name))

    return node_cls(**{f.name: _decode(data[f.name]) for f in fields(node_cls) if f.name in data})


def _decode(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_decode(item) for item in value)
    if not isinstance(value, dict):
        return value

    match value.get("_type"):
        case "SourceLocation":
            return _decode_location(value)
        case "Token":
            return _decode_token(value)
        case None:
            return value
        case _:
            return from_dict(value)


def _decode_location(value: dict[str, Any]) -> SourceLocation:
    try:
        return SourceLocation(value["lineno"], value["end_lineno"], value.get("source_file"))
    except KeyError as e:
        raise SerializationError(f"Missing field {e} in serialized location") from None


def _decode_token(value: dict[str, Any]) -> Token:
    try:
        kind = TokenType(value["type"])
        text = value["value"]
    except KeyError as e:
        raise SerializationError(f"Missing field {e} in serialized token") from None
    except ValueError:
        raise SerializationError("Unknown token type", value["type"]) from None
    return Token(kind, text)


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a document to a JSON string (compact unless ``indent`` is given)."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Rebuild a document from to_json() output.

    Raises:
        SerializationError: The payload's root is not a serialized Document.
    """
    root = from_dict(json.loads(data))
    if not isinstance(root, Document):
        raise SerializationError("Expected Document", type(root).__name__)
    return root
