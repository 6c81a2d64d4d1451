from abc import ABC, abstractmethod
from typing import List

from buildgraph.details.project import Project


class ProjectMapper(ABC):
    # Mappers return a new project and never modify the one they receive
    @abstractmethod
    def map(self, project: Project) -> Project:
        pass


class SequentialProjectMapper(ProjectMapper):
    def __init__(self, mappers: List[ProjectMapper]):
        self.mappers = mappers

    def map(self, project: Project) -> Project:
        for mapper in self.mappers:
            project = mapper.map(project)
        return project
