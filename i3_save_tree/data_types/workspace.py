from typing import TypedDict

from i3_save_tree.data_types.common import Rectangle


class Workspace(TypedDict):
    """An entry of the get_workspaces reply"""

    id: int
    num: int
    name: str
    visible: bool
    focused: bool
    urgent: bool
    rect: Rectangle
    output: str
