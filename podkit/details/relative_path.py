import ntpath
import posixpath

from pathlib import PurePath, PureWindowsPath
from typing import Union

from podkit.details.errors import UnrelatedRootsError

# Xcode expands this to the directory holding the user project
SRCROOT = "${SRCROOT}"


def _flavour(path: PurePath):
    return ntpath if isinstance(path, PureWindowsPath) else posixpath


def relative_path_from(
    path: Union[str, PurePath], client_root: Union[str, PurePath]
) -> str:
    path = PurePath(path) if isinstance(path, str) else path
    client_root = PurePath(client_root) if isinstance(client_root, str) else client_root
    if not path.is_absolute():
        raise ValueError(f"expected an absolute path, got '{path}'")
    if not client_root.is_absolute():
        raise ValueError(f"expected an absolute client root, got '{client_root}'")
    # Different flavours, drives or UNC shares have no relative expression
    flavour = _flavour(path)
    if flavour is not _flavour(client_root):
        raise UnrelatedRootsError(path, client_root)
    if flavour.normcase(path.anchor) != flavour.normcase(client_root.anchor):
        raise UnrelatedRootsError(path, client_root)
    relative = flavour.relpath(str(path), str(client_root))
    return type(path)(relative).as_posix()


def srcroot_path(relative: str) -> str:
    return f"{SRCROOT}/{relative}"
