import logging
import os
import subprocess

from i3_save_tree.errors import ConnectionFailure

SOCKET_VARIABLES = ["SWAYSOCK", "I3SOCK"]
SOCKETPATH_COMMANDS = [["i3", "--get-socketpath"], ["sway", "--get-socketpath"]]

logger = logging.getLogger(__name__)


def ask_window_manager(command: list[str]) -> str | None:
    try:
        result = subprocess.run(
            command, capture_output=True, text=True, check=True, timeout=5
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("%s failed: %s", " ".join(command), e)
        return None
    return result.stdout.strip() or None


def find_socket_path(explicit: str | None = None) -> str:
    """
    The socket given on the command line, else the one named in the
    environment, else the one the window manager binary reports.
    """
    if explicit:
        return explicit

    for variable in SOCKET_VARIABLES:
        if socket_path := os.environ.get(variable):
            logger.debug("using socket from $%s", variable)
            return socket_path

    for command in SOCKETPATH_COMMANDS:
        if socket_path := ask_window_manager(command):
            logger.debug("using socket reported by %s", command[0])
            return socket_path

    raise ConnectionFailure(
        "Could not find the socket, set $SWAYSOCK or $I3SOCK or pass --socket"
    )
