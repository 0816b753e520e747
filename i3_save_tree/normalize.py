from typing import Any

from i3_save_tree.data_types.common import Rectangle
from i3_save_tree.data_types.tree.node import Node, NormalizedNode
from i3_save_tree.utilities import is_leaf

ALLOWED_KEYS = frozenset(
    [
        "type",
        "fullscreen_mode",
        "layout",
        "border",
        "current_border_width",
        "floating",
        "percent",
        "nodes",
        "floating_nodes",
        "name",
        "geometry",
        "window_properties",
        "marks",
        "rect",
    ]
)


def zero_rect(rect: Rectangle | None) -> bool:
    return rect is not None and all(
        rect.get(k) == 0 for k in ("x", "y", "width", "height")
    )


def copy_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: copy_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy_value(v) for v in value]
    return value


def dropped_keys(node: Node | NormalizedNode) -> set[str]:
    """Keys of `node` that carry nothing needed to restore its layout"""
    leaf = is_leaf(node)  # pyright: ignore
    drop = {k for k in node if k not in ALLOWED_KEYS}

    if leaf:
        drop.add("layout")
    else:
        drop.add("name")
    if node.get("fullscreen_mode") == 0:
        drop.add("fullscreen_mode")
    if zero_rect(node.get("geometry")):
        drop.add("geometry")
    if node.get("type") != "floating_con":
        drop.add("rect")
    if node.get("current_border_width") == -1:
        drop.add("current_border_width")

    return drop


def normalize(node: Node | NormalizedNode) -> NormalizedNode:
    """
    Returns a trimmed copy of `node` and its descendants. The input is left
    untouched and no object is shared between the two trees.
    """
    drop = dropped_keys(node)
    result: NormalizedNode = {}

    for key, value in node.items():
        if key in drop:
            continue
        if key in ("nodes", "floating_nodes"):
            result[key] = [normalize(child) for child in value]  # pyright: ignore
        else:
            result[key] = copy_value(value)  # pyright: ignore

    return result
