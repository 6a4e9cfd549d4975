from argparse import ArgumentParser
import sys
from pathlib import Path

from podkit.details.errors import UnrelatedRootsError
from podkit.details.tools.graph import graph_main
from podkit.details.tools.paths import paths_main
from podkit.details.workspace import Workspace


def main(argv=None):
    COMMANDS = {
        "graph": graph_main,
        "paths": paths_main,
    }
    parser = ArgumentParser(prog="podkit")
    parser.add_argument("command", choices=COMMANDS.keys())
    parser.add_argument("--config", type=str, required=True)
    parser.add_argument("--workspace", type=str, default=".")
    parser.add_argument("targets", default=[], nargs="*")
    # target labels may follow the options...
    args, unknown_args = parser.parse_known_intermixed_args(argv)
    # install aggregate targets for the requested config...
    workspace = Workspace(Path(args.workspace))
    if args.config not in workspace.configs:
        print(f"ERROR: unknown config {args.config}", file=sys.stderr)
        return 1
    config = workspace.configs[args.config]
    try:
        workspace.install(config)
    except UnrelatedRootsError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    try:
        targets = list(workspace.select_targets(args.targets))
    except KeyError as e:
        print(f"ERROR: unknown target {e.args[0]}", file=sys.stderr)
        return 1
    return COMMANDS[args.command](
        workspace=workspace,
        config=config,
        targets=targets,
        command_args=unknown_args,
    )


if __name__ == "__main__":
    sys.exit(main())
