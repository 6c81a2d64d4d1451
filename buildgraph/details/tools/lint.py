import sys
from typing import List, Optional, TextIO

from buildgraph.details.graph import Graph
from buildgraph.linting.issue import LintingIssue, Severity
from buildgraph.linting.linter import ProjectLinting, SchemeLinting
from buildgraph.linting.project_linter import ProjectLinter
from buildgraph.linting.scheme_linter import SchemeLinter


def lint_graph(
    graph: Graph,
    project_linter: Optional[ProjectLinting] = None,
    scheme_linter: Optional[SchemeLinting] = None,
) -> List[LintingIssue]:
    project_linter = project_linter or ProjectLinter()
    scheme_linter = scheme_linter or SchemeLinter()
    issues: List[LintingIssue] = []
    for project in graph.projects.values():
        issues.extend(project_linter.lint(project, graph))
    # Workspace schemes don't belong to any project
    for scheme in graph.workspace.schemes:
        issues.extend(scheme_linter.lint(scheme, graph))
    return issues


def lint_main(graph: Graph, file: TextIO = sys.stdout) -> int:
    issues = lint_graph(graph)
    for severity in (Severity.WARNING, Severity.ERROR):
        found = [i for i in issues if i.severity == severity]
        if found:
            print(f"The following issues have been found ({severity.value}):", file=file)
            for issue in found:
                print(f"  - {issue.reason}", file=file)
    if any(i.severity == Severity.ERROR for i in issues):
        print("Linting failed", file=file)
        return 1
    return 0
