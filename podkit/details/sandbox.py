from pathlib import Path
from typing import Union


class Sandbox:
    SUPPORT_FILES_DIRNAME = "Target Support Files"

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)
        if not self.root.is_absolute():
            raise ValueError(f"sandbox root='{self.root}' must be an absolute path")

    @property
    def target_support_files_root(self) -> Path:
        return self.root / self.SUPPORT_FILES_DIRNAME

    def target_support_files_dir(self, label: str) -> Path:
        return self.target_support_files_root / label

    def pod_dir(self, name: str) -> Path:
        return self.root / name

    def __repr__(self):
        return f"Sandbox({self.root.as_posix()!r})"
