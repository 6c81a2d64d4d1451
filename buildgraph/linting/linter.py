# Linter roles.
#
# The project linter only depends on these abstract roles so that each of its
# collaborators can be replaced independently.

from abc import ABC, abstractmethod
from typing import List, Optional

from buildgraph.details.graph import Graph
from buildgraph.details.project import Project
from buildgraph.details.scheme import Scheme
from buildgraph.details.settings import Settings
from buildgraph.details.target import Target
from buildgraph.linting.issue import LintingIssue


class TargetLinting(ABC):
    @abstractmethod
    def lint(self, target: Target, project: Optional[Project] = None) -> List[LintingIssue]:
        pass


class SettingsLinting(ABC):
    @abstractmethod
    def lint(self, settings: Settings) -> List[LintingIssue]:
        pass


class SchemeLinting(ABC):
    @abstractmethod
    def lint(
        self, scheme: Scheme, graph: Graph, project: Optional[Project] = None
    ) -> List[LintingIssue]:
        pass


class ProjectLinting(ABC):
    @abstractmethod
    def lint(self, project: Project, graph: Optional[Graph] = None) -> List[LintingIssue]:
        pass
