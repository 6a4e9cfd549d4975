from importlib.machinery import SourceFileLoader
from importlib.util import spec_from_loader, module_from_spec
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from podkit.config import Config
from podkit.details.context import ConfigContext
from podkit.details.sandbox import Sandbox
from podkit.details.target_definition import TargetDefinition
from podkit.details.targets.aggregate_target import AggregateTarget
from podkit.details.targets.pod_target import PodTarget
from podkit.details.xcconfig import Xcconfig


def load_user_module(ctx: ConfigContext):
    module_name = ".".join(["podkit", "workspace", ctx.MODULENAME])
    module_path = ctx.root.joinpath(ctx.FILENAME)
    if not module_path.is_file():
        raise RuntimeError(f"no {ctx.FILENAME} found in {ctx.root}")
    spec = spec_from_loader(
        module_name, SourceFileLoader(module_name, str(module_path))
    )
    if not spec or not spec.loader:
        raise RuntimeError(f"failed to load module spec {module_path}")
    config_module = module_from_spec(spec)
    setattr(config_module, "CTX", ctx)
    spec.loader.exec_module(config_module)


def aggregate_xcconfig(target: AggregateTarget) -> Xcconfig:
    link_flags = " ".join(f"-l{lib.label}" for lib in target.libraries)
    return Xcconfig(
        {
            "PODS_ROOT": target.relative_pods_root,
            "OTHER_LDFLAGS": f"$(inherited) -ObjC {link_flags}".rstrip(),
        }
    )


class Workspace:
    def __init__(self, workspace_root: Path = Path(".")):
        self.root = Path(workspace_root).resolve()
        config_context = ConfigContext(self.root)
        load_user_module(config_context)
        self.configs = config_context.configs
        self.target_definitions: Dict[str, TargetDefinition] = (
            config_context.target_definitions
        )
        self.aggregate_targets: List[AggregateTarget] = []

    # Build one aggregate per target definition, pods keep their requested order
    def install(self, config: Config) -> List[AggregateTarget]:
        config.resolve_roots(self.root)
        sandbox = Sandbox(config.sandbox_root)
        self.aggregate_targets = []
        for definition in self.target_definitions.values():
            if config.platform and definition.platform not in (None, config.platform):
                continue
            target = AggregateTarget(definition, sandbox)
            for pod_name in definition.dependencies:
                target.add_library(
                    PodTarget(pod_name, target_definition=definition, sandbox=sandbox)
                )
            target.install(client_root=config.client_root)
            target.attach_xcconfig(aggregate_xcconfig(target))
            self.aggregate_targets.append(target)
        return self.aggregate_targets

    def find_target(self, label: str) -> AggregateTarget:
        for target in self.aggregate_targets:
            if target.label == label:
                return target
        raise KeyError(label)

    def select_targets(self, labels: Optional[List[str]] = None) -> Iterator[AggregateTarget]:
        if not labels:
            yield from self.aggregate_targets
            return
        for label in labels:
            yield self.find_target(label)
