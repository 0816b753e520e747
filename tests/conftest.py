import itertools

import pytest

_ids = itertools.count(94000000000000)


def rect(x=0, y=0, width=0, height=0):
    return {"x": x, "y": y, "width": width, "height": height}


def node(type="con", **fields):
    """A container carrying every key get_tree sends, overridden by `fields`"""
    n = {
        "id": next(_ids),
        "type": type,
        "orientation": "none",
        "scratchpad_state": "none",
        "percent": None,
        "urgent": False,
        "marks": [],
        "focused": False,
        "output": "eDP-1",
        "layout": "splith",
        "workspace_layout": "default",
        "last_split_layout": "splith",
        "border": "normal",
        "current_border_width": -1,
        "rect": rect(0, 0, 1920, 1080),
        "deco_rect": rect(),
        "window_rect": rect(),
        "geometry": rect(),
        "name": None,
        "window_icon_padding": -1,
        "window": None,
        "window_type": None,
        "nodes": [],
        "floating_nodes": [],
        "focus": [],
        "fullscreen_mode": 0,
        "sticky": False,
        "floating": "auto_off",
        "swallows": [],
    }
    n.update(fields)
    return n


def window(name, properties, **fields):
    return node(
        name=name,
        window=next(_ids) % 100000000,
        window_type="normal",
        window_properties=properties,
        geometry=rect(0, 0, 804, 500),
        current_border_width=2,
        percent=0.5,
        **fields,
    )


@pytest.fixture
def urxvt():
    return window(
        "vim (main)",
        {
            "class": "URxvt",
            "instance": "urxvt",
            "title": "vim (main)",
            "transient_for": None,
        },
    )


@pytest.fixture
def firefox():
    return window(
        "Mozilla Firefox",
        {"class": "firefox", "instance": "Navigator", "window_role": "browser"},
        marks=["web"],
    )


@pytest.fixture
def tree(urxvt, firefox):
    """
    root
    ├── __i3 ─ content ─ __i3_scratch
    ├── eDP-1 ─ topdock, content, bottomdock
    │                     ├── workspace 1: splith(urxvt, firefox), pavucontrol
    │                     └── workspace 2: xterm
    └── HDMI-1 ─ content
                  ├── workspace mail (named only)
                  └── workspace 3:code
    """
    pavucontrol = node(
        "floating_con",
        rect=rect(700, 300, 520, 480),
        layout="splith",
        nodes=[
            window(
                "Volume Control",
                {"class": "Pavucontrol", "instance": "pavucontrol"},
                floating="user_on",
            )
        ],
    )
    split = node(layout="splith", percent=1.0, nodes=[urxvt, firefox])
    xterm = window("xterm", {"class": "XTerm", "instance": "xterm", "title": "xterm"})
    xterm["fullscreen_mode"] = 1

    return node(
        "root",
        name="root",
        layout="splith",
        nodes=[
            node(
                "output",
                name="__i3",
                layout="output",
                nodes=[
                    node(
                        name="content",
                        nodes=[node("workspace", name="__i3_scratch", num=-1)],
                    )
                ],
            ),
            node(
                "output",
                name="eDP-1",
                layout="output",
                nodes=[
                    node("dockarea", name="topdock", layout="dockarea"),
                    node(
                        name="content",
                        nodes=[
                            node(
                                "workspace",
                                name="1",
                                num=1,
                                nodes=[split],
                                floating_nodes=[pavucontrol],
                            ),
                            node("workspace", name="2", num=2, nodes=[xterm]),
                        ],
                    ),
                    node("dockarea", name="bottomdock", layout="dockarea"),
                ],
            ),
            node(
                "output",
                name="HDMI-1",
                layout="output",
                nodes=[
                    node(
                        name="content",
                        nodes=[
                            node(
                                "workspace",
                                name="mail",
                                num=-1,
                                nodes=[window("mutt", {"class": "URxvt"})],
                            ),
                            node(
                                "workspace",
                                name="3:code",
                                num=3,
                                layout="tabbed",
                                nodes=[window("emacs", {"class": "Emacs"})],
                            ),
                        ],
                    )
                ],
            ),
        ],
    )
