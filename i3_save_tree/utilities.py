import logging
from typing import Callable

from i3_save_tree.data_types.tree.node import Node
from i3_save_tree.errors import ConflictingSelection, SelectionNotFound

Predicate = Callable[[Node], bool]

logger = logging.getLogger(__name__)


def children(node: Node) -> list[Node]:
    """Tiling children first, then floating children."""
    return [*node.get("nodes", []), *node.get("floating_nodes", [])]


def is_leaf(node: Node) -> bool:
    return (
        node.get("type") == "con"
        and not node.get("nodes")
        and not node.get("floating_nodes")
    )


def find(node: Node, predicate: Predicate) -> Node | None:
    """
    Preorder depth-first search returning the first node matching `predicate`.
    A matching node is returned without looking at its descendants.
    """
    if predicate(node):
        return node

    for child in children(node):
        if (result := find(child, predicate)) is not None:
            return result

    return None


def workspace_matcher(target: str) -> Predicate:
    number = int(target) if target.isdecimal() else None

    def matches(n: Node) -> bool:
        if n.get("type") != "workspace":
            return False
        return n.get("name") == target or (
            number is not None and n.get("num") == number
        )

    return matches


def output_matcher(target: str) -> Predicate:
    return lambda n: n.get("type") == "output" and n.get("name") == target


def output_content(output: Node) -> Node | None:
    """The output's content container, living beneath any dock areas"""
    return next((n for n in output.get("nodes", []) if n.get("type") == "con"), None)


def select_subtree(
    tree: Node, workspace: str | None = None, output: str | None = None
) -> Node:
    if workspace is not None and output is not None:
        raise ConflictingSelection(workspace, output)

    if workspace is not None:
        if (found := find(tree, workspace_matcher(workspace))) is None:
            raise SelectionNotFound("workspace", workspace)
        logger.info("selected workspace %r", found.get("name"))
        return found

    if output is not None:
        if (found := find(tree, output_matcher(output))) is None:
            raise SelectionNotFound("output", output)
        if (content := output_content(found)) is None:
            raise SelectionNotFound("content container on output", output)
        logger.info("selected content of output %r", output)
        return content

    raise ValueError("Either a workspace or an output has to be selected")
