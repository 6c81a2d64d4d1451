"""
Builders for graph model values with defaults that pass linting.
"""

from pathlib import Path
from typing import List, Optional

from buildgraph.details.graph import Graph
from buildgraph.details.platform import Platform, Product
from buildgraph.details.project import Project
from buildgraph.details.scheme import (
    BuildAction,
    Scheme,
    TargetReference,
    TestableTarget,
    TestAction,
)
from buildgraph.details.settings import Settings
from buildgraph.details.target import Target, TargetDependency
from buildgraph.details.workspace import Workspace

DEFAULT_PROJECT_PATH = Path("/workspace/App")


def make_target(
    name: str = "Target",
    platform: Platform = Platform.IOS,
    product: Product = Product.APP,
    bundle_id: str = "io.buildgraph.target",
    sources: Optional[List[Path]] = None,
    dependencies: Optional[List[TargetDependency]] = None,
    **kwargs,
) -> Target:
    return Target(
        name=name,
        platform=platform,
        product=product,
        bundle_id=bundle_id,
        sources=[Path("Sources/main.swift")] if sources is None else sources,
        dependencies=dependencies or [],
        **kwargs,
    )


def make_project(
    path: Path = DEFAULT_PROJECT_PATH,
    name: str = "App",
    targets: Optional[List[Target]] = None,
    settings: Optional[Settings] = None,
    schemes: Optional[List[Scheme]] = None,
) -> Project:
    return Project(
        path=Path(path),
        name=name,
        targets=targets or [],
        settings=settings or Settings.default(),
        schemes=schemes or [],
    )


def make_scheme(
    name: str = "Scheme",
    build: Optional[List[TargetReference]] = None,
    test: Optional[List[TargetReference]] = None,
) -> Scheme:
    return Scheme(
        name=name,
        build_action=BuildAction(targets=build) if build is not None else None,
        test_action=(
            TestAction(targets=[TestableTarget(ref) for ref in test])
            if test is not None
            else None
        ),
    )


def make_graph(
    projects: Optional[List[Project]] = None,
    workspace_schemes: Optional[List[Scheme]] = None,
    entry_nodes: Optional[List[TargetReference]] = None,
    name: str = "Workspace",
) -> Graph:
    projects = projects or []
    return Graph(
        name=name,
        path=Path("/workspace"),
        workspace=Workspace(
            path=Path("/workspace"),
            name=name,
            projects=[p.path for p in projects],
            schemes=workspace_schemes or [],
        ),
        projects={p.path: p for p in projects},
        entry_nodes=entry_nodes or [],
    )
