from pathlib import Path
from typing import Optional

from podkit.details.sandbox import Sandbox
from podkit.details.target_definition import TargetDefinition


# Locates the generated support files of one label inside a sandbox
class SupportFilesLocator:
    def __init__(self, sandbox: Sandbox, label: str):
        self.sandbox = sandbox
        self.label = label

    @property
    def root(self) -> Path:
        return self.sandbox.target_support_files_dir(self.label)

    def file(self, suffix: str) -> Path:
        return self.root / f"{self.label}{suffix}"


class Target:
    def __init__(self, *, target_definition: TargetDefinition, sandbox: Sandbox):
        self._target_definition = target_definition
        self._sandbox = sandbox

    @property
    def target_definition(self) -> TargetDefinition:
        return self._target_definition

    @property
    def sandbox(self) -> Sandbox:
        return self._sandbox

    @property
    def label(self) -> str:
        raise NotImplementedError(
            f"target class {self.__class__.__name__} requires implementation of label"
        )

    @property
    def name(self) -> str:
        return self.label

    @property
    def platform(self) -> Optional[str]:
        return self.target_definition.platform

    @property
    def product_name(self) -> str:
        return f"lib{self.label}.a"

    # Built on every access so the label stays the only input
    @property
    def support_files(self) -> SupportFilesLocator:
        return SupportFilesLocator(self.sandbox, self.label)

    @property
    def support_files_root(self) -> Path:
        return self.support_files.root

    @property
    def xcconfig_path(self) -> Path:
        return self.support_files.file(".xcconfig")

    @property
    def prefix_header_path(self) -> Path:
        return self.support_files.file("-prefix.pch")

    @property
    def bridge_support_path(self) -> Path:
        return self.support_files.file(".bridgesupport")

    @property
    def dummy_source_path(self) -> Path:
        return self.support_files.file("-dummy.m")

    def __str__(self):
        return self.label

    def __repr__(self):
        return f"{self.__class__.__name__}({self.label!r})"
