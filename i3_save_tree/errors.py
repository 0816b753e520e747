class SaveTreeError(Exception):
    exit_status = 1


class ConnectionFailure(SaveTreeError, ConnectionError):
    """The window manager socket could not be found, reached or understood."""


class ConflictingSelection(SaveTreeError, ValueError):
    exit_status = 2

    def __init__(self, workspace: str, output: str):
        self.workspace = workspace
        self.output = output
        super().__init__(
            f"Cannot select both workspace {workspace!r} and output {output!r}"
        )


class SelectionNotFound(SaveTreeError, LookupError):
    def __init__(self, kind: str, target: str):
        self.kind = kind
        self.target = target
        super().__init__(f"No {kind} {target!r} found in the layout tree")
