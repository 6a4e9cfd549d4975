# Xcode build settings document.
#
# Settings are kept as lists of flag units. A unit is a single token, or a
# flag together with its argument for flags like `-framework Foo`. Merging
# appends the incoming units that are not already present, so repeated
# libraries are dropped while flag pairs survive intact.

from typing import Dict, Iterable, List, Mapping, Optional

# Flags whose argument is the following token
PAIRED_FLAGS = frozenset({"-framework", "-weak_framework", "-iframework", "-Xlinker"})


def _units(value: str) -> List[str]:
    units: List[str] = []
    tokens = iter(value.split())
    for token in tokens:
        if token in PAIRED_FLAGS:
            token = f"{token} {next(tokens, '')}".rstrip()
        if token not in units:
            units.append(token)
    return units


class Xcconfig:
    def __init__(
        self,
        attributes: Optional[Mapping[str, str]] = None,
        includes: Iterable[str] = (),
    ):
        self.attributes: Dict[str, str] = {}
        self.includes: List[str] = []
        for include in includes:
            self.include(include)
        if attributes:
            self.merge(attributes)

    def include(self, path: str):
        if path not in self.includes:
            self.includes.append(path)

    def merge(self, other) -> "Xcconfig":
        """
        Merge settings into this document.

        Repeated keys are concatenated, skipping flag units the existing
        value already holds. Accepts another Xcconfig or a plain mapping.
        """
        if isinstance(other, Xcconfig):
            for include in other.includes:
                self.include(include)
            other = other.attributes
        for key, value in other.items():
            merged = _units(self.attributes.get(key, ""))
            merged.extend(u for u in _units(value) if u not in merged)
            self.attributes[key] = " ".join(merged)
        return self

    def __getitem__(self, key: str) -> str:
        return self.attributes[key]

    def __contains__(self, key: str) -> bool:
        return key in self.attributes

    def __eq__(self, other):
        if not isinstance(other, Xcconfig):
            return NotImplemented
        return self.attributes == other.attributes and self.includes == other.includes

    def __str__(self):
        lines = [f'#include "{include}"' for include in self.includes]
        lines.extend(f"{key} = {self.attributes[key]}" for key in sorted(self.attributes))
        return "\n".join(lines) + "\n" if lines else ""
