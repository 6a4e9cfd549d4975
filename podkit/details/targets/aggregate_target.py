from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import FrozenSet, Iterable, List, Optional, Union

from podkit.details.errors import ClientRootNotSetError
from podkit.details.relative_path import relative_path_from, srcroot_path
from podkit.details.sandbox import Sandbox
from podkit.details.target_definition import TargetDefinition
from podkit.details.targets.pod_target import PodTarget
from podkit.details.targets.target import Target
from podkit.details.xcconfig import Xcconfig


# State recorded by the installer once the client root is known
@dataclass(frozen=True)
class Installation:
    client_root: PurePath


# State recorded by the analyzer once the user project has been inspected
@dataclass(frozen=True)
class Integration:
    user_project_path: PurePath
    user_target_uuids: FrozenSet[str]


class AggregateTarget(Target):
    """
    Clusters the pod targets of one target definition. The user's targets
    link against this one, so every path handed to the user project is
    derived here.

    The installation phase sets the client root (the folder of the user
    project when integrating, the installation root otherwise), the
    integration phase records which user project and targets are affected.
    Each phase runs at most once.
    """

    def __init__(self, target_definition: TargetDefinition, sandbox: Sandbox):
        super().__init__(target_definition=target_definition, sandbox=sandbox)
        self.libraries: List[PodTarget] = []
        self._installation: Optional[Installation] = None
        self._integration: Optional[Integration] = None
        self._xcconfig: Optional[Xcconfig] = None

    @property
    def label(self) -> str:
        return str(self.target_definition.label)

    # -- phases ---------------------------------------------------------------

    def add_library(self, library: PodTarget):
        self.libraries.append(library)

    def install(self, client_root: Union[str, PurePath]) -> Installation:
        if self._installation is not None:
            raise RuntimeError(f"client root of target '{self.label}' has already been set")
        client_root = Path(client_root) if isinstance(client_root, str) else client_root
        if not client_root.is_absolute():
            raise ValueError(f"client root='{client_root}' must be an absolute path")
        self._installation = Installation(client_root=client_root)
        return self._installation

    def integrate(
        self, user_project_path: Union[str, PurePath], user_target_uuids: Iterable[str]
    ) -> Integration:
        if self._integration is not None:
            raise RuntimeError(f"target '{self.label}' has already been integrated")
        if isinstance(user_project_path, str):
            user_project_path = Path(user_project_path)
        self._integration = Integration(
            user_project_path=user_project_path,
            user_target_uuids=frozenset(user_target_uuids),
        )
        return self._integration

    def attach_xcconfig(self, xcconfig: Xcconfig):
        if self._xcconfig is not None:
            raise RuntimeError(f"xcconfig of target '{self.label}' has already been attached")
        self._xcconfig = xcconfig

    # -- accessors ------------------------------------------------------------

    @property
    def client_root(self) -> Optional[PurePath]:
        return self._installation.client_root if self._installation else None

    @property
    def user_project_path(self) -> Optional[PurePath]:
        return self._integration.user_project_path if self._integration else None

    @property
    def user_target_uuids(self) -> FrozenSet[str]:
        return self._integration.user_target_uuids if self._integration else frozenset()

    @property
    def xcconfig(self) -> Optional[Xcconfig]:
        return self._xcconfig

    # -- support files --------------------------------------------------------

    # The acknowledgements generators add the extension of their format
    @property
    def acknowledgements_basepath(self) -> Path:
        return self.support_files.file("-acknowledgements")

    @property
    def copy_resources_script_path(self) -> Path:
        return self.support_files.file("-resources.sh")

    # -- paths relative to the user project ------------------------------------

    @property
    def relative_pods_root(self) -> str:
        return srcroot_path(self._relative_to_srcroot(self.support_files_root))

    @property
    def xcconfig_relative_path(self) -> str:
        return self._relative_to_srcroot(self.xcconfig_path)

    @property
    def copy_resources_script_relative_path(self) -> str:
        return srcroot_path(self._relative_to_srcroot(self.copy_resources_script_path))

    def _relative_to_srcroot(self, path: PurePath) -> str:
        if self._installation is None:
            raise ClientRootNotSetError(self.label)
        return relative_path_from(path, self._installation.client_root)
