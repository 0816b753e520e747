"""
Renders a normalized tree as the commented JSON that i3's append_layout reads.

Rendering happens in two passes: `node_fields` turns a node into sorted
`(key, value)` pairs, wrapping the generated swallow criteria in `Advisory`,
and `render_value` turns values into lines, commenting out everything below
an `Advisory` except the bracket lines.
"""

from dataclasses import dataclass
from typing import Any

import orjson

from i3_save_tree.data_types.tree.node import NormalizedNode, WindowProperties
from i3_save_tree.utilities import children, is_leaf

HEADER = "// vim:ts=4:sw=4:et"
INDENT = " " * 4
COMMENT = "// "
CHILD_KEYS = ("nodes", "floating_nodes")

# characters with a special meaning in a PCRE pattern
_pcre_escapes = str.maketrans({c: "\\" + c for c in "\\^$.|?*+()[]{}"})


@dataclass(frozen=True)
class Advisory:
    """A value that is emitted commented out, for the user to confirm or edit"""

    value: Any


def escape_pattern(value: str) -> str:
    return value.translate(_pcre_escapes)


def swallows(properties: WindowProperties) -> list[dict[str, str]]:
    """
    One swallow criterion matching exactly the current window. Properties that
    are not strings (`transient_for`) cannot be matched and are left out.
    """
    return [
        {
            prop: f"^{escape_pattern(value)}$"
            for prop, value in properties.items()
            if isinstance(value, str)
        }
    ]


def encode(value: Any) -> str:
    return orjson.dumps(value).decode()


def describe(node: NormalizedNode) -> str:
    count = len(children(node))  # pyright: ignore
    if node.get("type") == "con":
        return f"{node.get('layout')} split container with {count} children"
    return f"{node.get('type')} with {count} children"


def node_fields(node: NormalizedNode) -> list[tuple[str, Any]]:
    fields: dict[str, Any] = {
        key: value
        for key, value in node.items()
        if key not in CHILD_KEYS and key != "window_properties"
    }
    if is_leaf(node) and "window_properties" in node:  # pyright: ignore
        fields["swallows"] = Advisory(swallows(node["window_properties"]))
    return sorted(fields.items())


def render_value(value: Any, level: int, commented: bool = False) -> list[str]:
    """
    Renders `value` as lines of JSON. The first line carries no indentation,
    as it continues a `"key": ` line; every other line is indented for `level`.
    """
    if isinstance(value, Advisory):
        return render_value(value.value, level, commented=True)

    if isinstance(value, dict) and value:
        items = [
            (f"{encode(k)}: ", v) for k, v in sorted(value.items(), key=lambda i: i[0])
        ]
        return _render_items("{", "}", items, level, commented)

    if isinstance(value, list) and value:
        return _render_items("[", "]", [("", v) for v in value], level, commented)

    return [encode(value)]


def _render_items(
    opening: str,
    closing: str,
    items: list[tuple[str, Any]],
    level: int,
    commented: bool,
) -> list[str]:
    pad = INDENT * (level + 1)
    lines = [opening]
    for idx, (label, item) in enumerate(items):
        sub = render_value(item, level + 1, commented)
        bracket_only = not label and sub[0] in ("{", "[", "{}", "[]")
        prefix = COMMENT if commented and not bracket_only else ""
        sub[0] = f"{pad}{prefix}{label}{sub[0]}"
        if idx < len(items) - 1:
            sub[-1] += ","
        lines.extend(sub)
    lines.append(INDENT * level + closing)
    return lines


def emit_lines(node: NormalizedNode, level: int = 0, last: bool = True) -> list[str]:
    pad = INDENT * (level + 1)
    lines = [INDENT * level + "{"]

    if not is_leaf(node):  # pyright: ignore
        lines.append(pad + COMMENT + describe(node))

    fields = node_fields(node)
    arrays = [(key, node[key]) for key in CHILD_KEYS if node.get(key)]

    for idx, (key, value) in enumerate(fields):
        sub = render_value(value, level + 1)
        sub[0] = f"{pad}{encode(key)}: {sub[0]}"
        if idx < len(fields) - 1 or arrays:
            sub[-1] += ","
        lines.extend(sub)

    for idx, (key, nodes) in enumerate(arrays):
        lines.append(f"{pad}{encode(key)}: [")
        for i, child in enumerate(nodes):
            lines.extend(emit_lines(child, level + 2, last=i == len(nodes) - 1))
        lines.append(pad + "]" + ("," if idx < len(arrays) - 1 else ""))

    lines.append(INDENT * level + "}" + ("" if last else ","))
    return lines


def emit(node: NormalizedNode, level: int = 0, last: bool = True) -> str:
    return "\n".join(emit_lines(node, level, last))


def emit_document(subtree: NormalizedNode) -> str:
    """
    The header followed by one block per child of `subtree`, each block
    followed by an empty line. `subtree` itself is not part of the document.
    """
    parts = [HEADER + "\n"]
    for key in CHILD_KEYS:
        for child in subtree.get(key, []):
            parts.append(emit(child) + "\n\n")
    return "".join(parts)
