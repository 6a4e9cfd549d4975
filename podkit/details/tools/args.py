import sys


# Commands take no options of their own
def reject_unknown_args(command: str, command_args: list[str]) -> bool:
    if command_args:
        print(
            f"ERROR: unrecognized arguments for {command}: {' '.join(command_args)}",
            file=sys.stderr,
        )
        return False
    return True
