from typing import Literal, NotRequired, TypedDict

from i3_save_tree.data_types.common import Rectangle

NodeType = (
    Literal["root"]
    | Literal["output"]
    | Literal["workspace"]
    | Literal["con"]
    | Literal["floating_con"]
    | Literal["dockarea"]
)

Floating = (
    Literal["auto_off"] | Literal["auto_on"] | Literal["user_off"] | Literal["user_on"]
)


WindowProperties = TypedDict(
    "WindowProperties",
    {
        "class": str,
        "instance": str,
        "title": str,
        "window_role": str,
        "machine": str,
        "transient_for": int | None,
    },
    total=False,
)


class Node(TypedDict):
    """A container as sent by get_tree, reduced to the keys this package reads"""

    id: int
    type: NodeType
    name: str | None
    num: NotRequired[int]
    focused: bool
    layout: str
    border: str
    current_border_width: int
    fullscreen_mode: int
    floating: NotRequired[Floating]
    percent: float | None
    rect: Rectangle
    geometry: Rectangle
    window_properties: NotRequired[WindowProperties]
    marks: list[str]
    nodes: list["Node"]
    floating_nodes: list["Node"]


class NormalizedNode(TypedDict, total=False):
    type: NodeType
    fullscreen_mode: int
    layout: str
    border: str
    current_border_width: int
    floating: Floating
    percent: float | None
    nodes: list["NormalizedNode"]
    floating_nodes: list["NormalizedNode"]
    name: str | None
    geometry: Rectangle
    window_properties: WindowProperties
    marks: list[str]
    rect: Rectangle
