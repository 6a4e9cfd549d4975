import os
from typing import Optional, Sequence


def is_path_component(name: str) -> bool:
    separators = [sep for sep in (os.sep, os.altsep) if sep]
    return bool(name) and not any(sep in name for sep in separators)


class TargetDefinition:
    DEFAULT_NAME = "Pods"

    def __init__(
        self,
        name: str,
        *,
        platform: Optional[str] = None,
        link_with: Sequence[str] = (),
        dependencies: Sequence[str] = (),
    ):
        if not is_path_component(name):
            raise ValueError(f"target definition name='{name}' is not a valid path component")
        self.name = name
        self.platform = platform
        self.link_with = list(link_with)
        self.dependencies = list(dependencies)

    @property
    def is_default(self) -> bool:
        return self.name == self.DEFAULT_NAME

    @property
    def label(self) -> str:
        if self.is_default:
            return self.DEFAULT_NAME
        return f"{self.DEFAULT_NAME}-{self.name}"

    def __repr__(self):
        return f"TargetDefinition({self.name!r})"
