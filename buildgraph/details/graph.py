from dataclasses import dataclass, field
from graphlib import TopologicalSorter
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from buildgraph.details.project import Project
from buildgraph.details.scheme import Scheme, TargetReference
from buildgraph.details.target import DependencyKind, Target
from buildgraph.details.workspace import Workspace


@dataclass(frozen=True)
class GraphTarget:
    path: Path
    target: Target
    project: Project

    @property
    def reference(self) -> TargetReference:
        return TargetReference(self.path, self.target.name)


# Graph of every project reachable from a workspace. It is built once by the
# mappers and only queried afterwards.
@dataclass
class Graph:
    name: str
    path: Path
    workspace: Workspace
    projects: Dict[Path, Project] = field(default_factory=dict)
    entry_nodes: List[TargetReference] = field(default_factory=list)
    # set when the graph only holds part of the workspace (e.g. a single project)
    partial: bool = False

    @staticmethod
    def from_project(project: Project) -> "Graph":
        return Graph(
            name=project.name,
            path=project.path,
            workspace=Workspace(
                path=project.path, name=project.name, projects=[project.path]
            ),
            projects={project.path: project},
            partial=True,
        )

    @property
    def targets(self) -> Iterator[GraphTarget]:
        for path, project in self.projects.items():
            for target in project.targets:
                yield GraphTarget(path, target, project)

    @property
    def schemes(self) -> List[Scheme]:
        project_schemes = [s for p in self.projects.values() for s in p.schemes]
        return project_schemes + list(self.workspace.schemes)

    def target(self, path: Path, name: str) -> Optional[GraphTarget]:
        project = self.projects.get(Path(path))
        if project is None:
            return None
        target = project.target(name)
        if target is None:
            return None
        return GraphTarget(Path(path), target, project)

    def entry_projects(self) -> List[Project]:
        seen: Dict[Path, Project] = {}
        for node in self.entry_nodes:
            resolved = self.target(node.project_path, node.name)
            if resolved is not None and resolved.path not in seen:
                seen[resolved.path] = resolved.project
        return list(seen.values())

    def direct_target_dependencies(self, path: Path, name: str) -> List[GraphTarget]:
        origin = self.target(path, name)
        if origin is None:
            return []
        dependencies = []
        for dep in origin.target.dependencies:
            if dep.kind == DependencyKind.TARGET:
                resolved = self.target(origin.path, dep.name)
            elif dep.kind == DependencyKind.PROJECT:
                assert dep.path is not None
                resolved = self.target(dep.path, dep.name)
            else:
                continue
            if resolved is not None:
                dependencies.append(resolved)
        return dependencies

    def all_target_dependencies(self, path: Path, name: str) -> List[GraphTarget]:
        # Collect all reachable dependencies breadth first
        nodes: Dict[Tuple[Path, str], GraphTarget] = {}
        edges: Dict[Tuple[Path, str], List[Tuple[Path, str]]] = {}
        queue = self.direct_target_dependencies(path, name)
        while queue:
            current = queue.pop(0)
            key = (current.path, current.target.name)
            if key in nodes:
                continue
            nodes[key] = current
            deps = self.direct_target_dependencies(current.path, current.target.name)
            edges[key] = [(d.path, d.target.name) for d in deps]
            queue.extend(deps)
        # Dependencies come before their dependents
        sorter: TopologicalSorter = TopologicalSorter()
        for key, deps in edges.items():
            sorter.add(key, *deps)
        return [nodes[key] for key in sorter.static_order()]
