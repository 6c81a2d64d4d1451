from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from buildgraph.details.scheme import Scheme


@dataclass
class Workspace:
    path: Path
    name: str
    projects: List[Path] = field(default_factory=list)
    schemes: List[Scheme] = field(default_factory=list)
