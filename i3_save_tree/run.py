import argparse
import asyncio
import logging
import sys

from i3_save_tree import __version__
from i3_save_tree.bootstrap import find_socket_path
from i3_save_tree.core import SwayIPCConnection
from i3_save_tree.data_types.tree.node import Node
from i3_save_tree.emit import emit_document
from i3_save_tree.errors import SaveTreeError
from i3_save_tree.normalize import normalize
from i3_save_tree.utilities import select_subtree

logger = logging.getLogger(__name__)


def save_tree(
    tree: Node, workspace: str | None = None, output: str | None = None
) -> str:
    """Selects, trims and renders part of `tree`, returning the whole document."""
    subtree = select_subtree(tree, workspace=workspace, output=output)
    return emit_document(normalize(subtree))


async def dump_layout(
    ipc: SwayIPCConnection, workspace: str | None = None, output: str | None = None
) -> str:
    """
    Takes one snapshot of the layout and renders the requested workspace or
    output. Without either the focused workspace is used.
    """
    async with ipc:
        tree = await ipc.get_tree()
        if workspace is None and output is None:
            workspace = await ipc.get_focused_workspace()
            logger.info("no selection given, using focused workspace %r", workspace)

    return save_tree(tree, workspace=workspace, output=output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i3-save-tree",
        description=(
            "Dumps a workspace or output as a layout file for append_layout. "
            "Window criteria are written commented out; review them before use."
        ),
    )
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--workspace",
        metavar="NAME|NUMBER",
        help="workspace to dump (default: focused)",
    )
    selection.add_argument("--output", metavar="NAME", help="output to dump")
    parser.add_argument("--socket", metavar="PATH", help="IPC socket of i3 or sway")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log progress to stderr, twice for debug output",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="i3-save-tree: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        ipc = SwayIPCConnection(find_socket_path(args.socket))
        document = asyncio.run(dump_layout(ipc, args.workspace, args.output))
    except SaveTreeError as e:
        logger.error("%s", e)
        return e.exit_status

    sys.stdout.buffer.write(document.encode())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
