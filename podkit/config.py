from pathlib import Path, PurePath
from typing import Optional, Union


def _anchor(workspace_root: Path, path: Union[str, PurePath]) -> PurePath:
    if isinstance(path, PurePath) and path.is_absolute():
        return path
    return workspace_root.joinpath(path)


class Config:
    def __init__(
        self,
        sandbox_root: Union[str, PurePath],
        client_root: Optional[Union[str, PurePath]] = None,
        platform: Optional[str] = None,
        **kwargs
    ):
        self.sandbox_root = sandbox_root
        self.client_root = client_root
        self.platform = platform
        self.__dict__.update(kwargs)

    # Relative roots are anchored at the workspace, client root defaults to it
    def resolve_roots(self, workspace_root: Path) -> "Config":
        self.sandbox_root = _anchor(workspace_root, self.sandbox_root)
        if self.client_root is None:
            self.client_root = workspace_root
        else:
            self.client_root = _anchor(workspace_root, self.client_root)
        return self
