from pathlib import Path
from typing import List, Optional

from buildgraph.automation.build_graph_inspector import (
    BuildGraphInspecting,
    BuildGraphInspector,
)
from buildgraph.automation.xcodebuild_argument import flatten
from buildgraph.details.graph import Graph
from buildgraph.details.scheme import Scheme


def find_scheme(schemes: List[Scheme], name: str) -> Scheme:
    scheme = next((s for s in schemes if s.name == name), None)
    if scheme is None:
        names = ", ".join(s.name for s in schemes)
        raise ValueError(f"couldn't find scheme {name}. The available schemes are: {names}")
    return scheme


def xcodebuild_build_command(
    graph: Graph,
    workspace_path: Path,
    scheme_name: str,
    configuration: Optional[str] = None,
    inspector: Optional[BuildGraphInspecting] = None,
) -> List[str]:
    inspector = inspector or BuildGraphInspector()
    scheme = find_scheme(inspector.buildable_schemes(graph), scheme_name)
    resolved = inspector.buildable_target(scheme, graph)
    if resolved is None:
        raise ValueError(f"the scheme {scheme.name} has no buildable target")
    project, target = resolved
    xcode_args = ["xcodebuild", "build", "-workspace", str(workspace_path), "-scheme", scheme.name]
    xcode_args.extend(
        flatten(inspector.build_arguments(project, target, configuration, False))
    )
    return xcode_args


def xcodebuild_test_command(
    graph: Graph,
    workspace_path: Path,
    scheme_name: str,
    configuration: Optional[str] = None,
    inspector: Optional[BuildGraphInspecting] = None,
) -> List[str]:
    inspector = inspector or BuildGraphInspector()
    scheme = find_scheme(inspector.testable_schemes(graph), scheme_name)
    resolved = inspector.testable_target(scheme, graph)
    if resolved is None:
        raise ValueError(f"the scheme {scheme.name} has no testable target")
    project, target = resolved
    xcode_args = ["xcodebuild", "test", "-workspace", str(workspace_path), "-scheme", scheme.name]
    # Tests run on simulators, signing isn't needed
    xcode_args.extend(
        flatten(inspector.build_arguments(project, target, configuration, True))
    )
    return xcode_args
