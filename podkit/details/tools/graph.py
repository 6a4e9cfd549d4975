import sys

from typing import TextIO

from podkit.config import Config
from podkit.details.targets.aggregate_target import AggregateTarget
from podkit.details.tools.args import reject_unknown_args
from podkit.details.workspace import Workspace


def write_clustered_graph(targets: list[AggregateTarget], file: TextIO):
    print("digraph DependencyGraph {", file=file)
    for target_i, target in enumerate(targets):
        print(f"  subgraph cluster{target_i} {{", file=file)
        print(f'    label = "{target.label}";', file=file)
        print(f'    "{target.label}" [shape=box];', file=file)
        for lib in target.libraries:
            print(f'    "{lib.label}" [label="{lib.pod_name}", shape=oval];', file=file)
        print("  }", file=file)
    for target in targets:
        deps = ", ".join(f'"{lib.label}"' for lib in target.libraries)
        print(f'  "{target.label}" -> {{{deps}}};', file=file)
    print("}", file=file)


def graph_main(
    workspace: Workspace,
    config: Config,
    targets: list[AggregateTarget],
    command_args: list[str],
) -> int:
    if not reject_unknown_args("graph", command_args):
        return 1
    write_clustered_graph(targets, sys.stdout)
    return 0
