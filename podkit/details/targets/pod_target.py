from typing import Sequence

from podkit.details.sandbox import Sandbox
from podkit.details.target_definition import TargetDefinition, is_path_component
from podkit.details.targets.target import Target


# Build target of a single resolved pod, scoped to the definition that requested it
class PodTarget(Target):
    def __init__(
        self,
        pod_name: str,
        *,
        target_definition: TargetDefinition,
        sandbox: Sandbox,
        dependencies: Sequence[str] = (),
    ):
        super().__init__(target_definition=target_definition, sandbox=sandbox)
        if not is_path_component(pod_name):
            raise ValueError(f"pod name='{pod_name}' is not a valid path component")
        self.pod_name = pod_name
        self.dependencies = list(dependencies)

    @property
    def label(self) -> str:
        return f"{self.target_definition.label}-{self.pod_name}"

    @property
    def pod_root(self):
        return self.sandbox.pod_dir(self.pod_name)
