from pathlib import Path
from typing import Dict

from podkit.config import Config
from podkit.details.target_definition import TargetDefinition


class ConfigContext:
    FILENAME = "CONFIG.podkit"
    MODULENAME = "config"

    def __init__(self, root: Path):
        self.root = root
        self.configs: Dict[str, Config] = {}
        self.target_definitions: Dict[str, TargetDefinition] = {}

    def add_config(self, name: str, **kwargs):
        if name in self.configs:
            raise RuntimeError(f"config {name} has already been registered")
        self.configs[name] = Config(**kwargs)

    def add_target_definition(self, name: str, **kwargs) -> TargetDefinition:
        if name in self.target_definitions:
            raise RuntimeError(f"target definition {name} has already been registered")
        self.target_definitions[name] = TargetDefinition(name, **kwargs)
        return self.target_definitions[name]
