from pathlib import PurePath


class ClientRootNotSetError(RuntimeError):
    def __init__(self, label: str):
        super().__init__(
            f"client root of target '{label}' must be set before computing relative paths"
        )
        self.label = label


class UnrelatedRootsError(ValueError):
    def __init__(self, path: PurePath, client_root: PurePath):
        super().__init__(
            f"path '{path}' cannot be expressed relative to client root '{client_root}'"
        )
        self.path = path
        self.client_root = client_root
