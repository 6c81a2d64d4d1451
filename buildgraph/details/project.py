from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from buildgraph.details.scheme import Scheme
from buildgraph.details.settings import Settings
from buildgraph.details.target import DependencyKind, Target


@dataclass
class Project:
    path: Path
    name: str
    targets: List[Target] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings.default)
    schemes: List[Scheme] = field(default_factory=list)

    def target(self, name: str) -> Optional[Target]:
        return next((t for t in self.targets if t.name == name), None)

    def targets_by_name(self) -> Dict[str, List[Target]]:
        grouped: Dict[str, List[Target]] = {}
        for target in self.targets:
            grouped.setdefault(target.name, []).append(target)
        return grouped

    def local_dependencies(self, target: Target) -> Iterator[Target]:
        names = [d.name for d in target.dependencies if d.kind == DependencyKind.TARGET]
        for name in dict.fromkeys(names):
            dep = self.target(name)
            if dep is not None:
                yield dep

    @property
    def default_debug_configuration_name(self) -> str:
        return self.settings.default_debug_configuration_name()
