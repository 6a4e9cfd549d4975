import json
import sys
from typing import TextIO

from podkit.config import Config
from podkit.details.targets.aggregate_target import AggregateTarget
from podkit.details.tools.args import reject_unknown_args
from podkit.details.workspace import Workspace


def describe_target(target: AggregateTarget) -> dict:
    return {
        "label": target.label,
        "platform": target.platform,
        "client_root": target.client_root.as_posix(),
        "support_files_root": target.support_files_root.as_posix(),
        "acknowledgements_basepath": target.acknowledgements_basepath.as_posix(),
        "copy_resources_script_path": target.copy_resources_script_path.as_posix(),
        "xcconfig_path": target.xcconfig_path.as_posix(),
        "relative_pods_root": target.relative_pods_root,
        "xcconfig_relative_path": target.xcconfig_relative_path,
        "copy_resources_script_relative_path": target.copy_resources_script_relative_path,
        "libraries": [lib.label for lib in target.libraries],
    }


def write_paths(workspace: Workspace, targets: list[AggregateTarget], file: TextIO):
    summary = {
        "workspace": workspace.root.as_posix(),
        "targets": [describe_target(t) for t in targets],
    }
    json.dump(summary, file, indent=2)
    print(file=file)


def paths_main(
    workspace: Workspace,
    config: Config,
    targets: list[AggregateTarget],
    command_args: list[str],
) -> int:
    if not reject_unknown_args("paths", command_args):
        return 1
    write_paths(workspace, targets, sys.stdout)
    return 0
