import asyncio
import logging
import sys

import orjson

from i3_save_tree.data_types.tree.node import Node
from i3_save_tree.data_types.workspace import Workspace
from i3_save_tree.errors import ConnectionFailure, SelectionNotFound

JSONValue = (
    bool
    | str
    | None
    | float
    | dict[str, "JSONInnerValue"]
    | list[dict[str, "JSONInnerValue"]]
)
JSONInnerValue = JSONValue | list[dict[str, JSONValue]]
JSONDict = dict[str, JSONValue]
JSONList = list[JSONDict]

magic_string = "i3-ipc"
magic_len = len(magic_string)
magic_enc = magic_string.encode()
payload_len_len = 4  # length of payload length
payload_type_len = 4  # length of payload type
header_len = magic_len + payload_len_len + payload_type_len

GET_WORKSPACES = 1
GET_TREE = 4

logger = logging.getLogger(__name__)


def pack(payload_type: int, payload: bytes = b"") -> bytes:
    data = magic_enc
    data += len(payload).to_bytes(payload_len_len, sys.byteorder)
    data += payload_type.to_bytes(payload_type_len, sys.byteorder)
    data += payload
    return data


def unpack_header(header: bytes) -> tuple[int, int]:
    """Returns `(payload_length, payload_type)` of a reply header."""
    if header[:magic_len] != magic_enc:
        raise ConnectionFailure(f"Unexpected reply magic {header[:magic_len]!r}")

    payload_length_bytes = header[magic_len : magic_len + payload_len_len]
    payload_type_bytes = header[magic_len + payload_len_len :]
    return (
        int.from_bytes(payload_length_bytes, sys.byteorder),
        int.from_bytes(payload_type_bytes, sys.byteorder),
    )


class SwayIPCSocket:
    def __init__(self, socket_path: str):
        self.socket_path = socket_path
        self.lock = asyncio.Lock()
        self.reader: asyncio.StreamReader = None  # pyright: ignore
        self.writer: asyncio.StreamWriter = None  # pyright: ignore

    async def connect(self):
        try:
            self.reader, self.writer = await asyncio.open_unix_connection(
                path=self.socket_path
            )
        except OSError as e:
            raise ConnectionFailure(
                f"Could not connect to {self.socket_path}: {e.strerror or e}"
            ) from e
        logger.debug("connected to %s", self.socket_path)

    async def send(self, payload_type: int, command=b""):
        if not self.writer:  # first time calling, create socket
            await self.connect()

        self.writer.write(pack(payload_type, command))
        await self.writer.drain()

    async def receive(self) -> JSONDict | JSONList:
        try:
            header = await self.reader.readexactly(header_len)
            payload_length, payload_type = unpack_header(header)
            raw_response = await self.reader.readexactly(payload_length)
        except asyncio.IncompleteReadError as e:
            raise ConnectionFailure("Connection closed in the middle of a reply") from e

        logger.debug(
            "received %d bytes for message type %d", payload_length, payload_type
        )
        try:
            return orjson.loads(raw_response)
        except orjson.JSONDecodeError as e:
            raise ConnectionFailure(f"Could not decode reply: {e}") from e

    async def close(self):
        if self.writer and not self.writer.is_closing():
            self.writer.close()
            await self.writer.wait_closed()

    async def send_receive(self, payload_type: int, command=b"") -> JSONDict | JSONList:
        async with self.lock:  # ensure only one coroutine is in this block at a time
            await self.send(payload_type, command)
            return await self.receive()


class SwayIPCConnection:
    def __init__(self, socket_path: str) -> None:
        self.socket = SwayIPCSocket(socket_path)

    async def get_workspaces(self) -> list[Workspace]:
        return await self.socket.send_receive(GET_WORKSPACES)  # pyright: ignore

    async def get_tree(self) -> Node:
        return await self.socket.send_receive(GET_TREE)  # pyright: ignore

    async def get_focused_workspace(self) -> str:
        """Returns the name of the currently focused workspace."""
        for w in await self.get_workspaces():
            if w["focused"] is True:
                return w["name"]
        raise SelectionNotFound("focused workspace", "none reported")

    async def close(self):
        await self.socket.close()

    async def __aenter__(self) -> "SwayIPCConnection":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
