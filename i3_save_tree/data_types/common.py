from typing import TypedDict


class Rectangle(TypedDict):
    x: int
    y: int
    width: int
    height: int
