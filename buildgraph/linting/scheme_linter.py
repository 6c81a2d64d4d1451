from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from buildgraph.details.graph import Graph
from buildgraph.details.project import Project
from buildgraph.details.scheme import ExecutionAction, Scheme, TargetReference
from buildgraph.linting.issue import LintingIssue
from buildgraph.linting.linter import SchemeLinting


def _action_targets(actions: List[ExecutionAction]) -> Iterator[TargetReference]:
    for action in actions:
        if action.target is not None:
            yield action.target


def _references(scheme: Scheme) -> Iterator[Tuple[str, TargetReference]]:
    if scheme.build_action:
        for reference in scheme.build_action.targets:
            yield "build action", reference
        build_actions = scheme.build_action.pre_actions + scheme.build_action.post_actions
        for reference in _action_targets(build_actions):
            yield "build pre/post action", reference
    if scheme.test_action:
        for testable in scheme.test_action.targets:
            yield "test action", testable.target
        for reference in scheme.test_action.code_coverage_targets:
            yield "code coverage targets", reference
        test_actions = scheme.test_action.pre_actions + scheme.test_action.post_actions
        for reference in _action_targets(test_actions):
            yield "test pre/post action", reference
    if scheme.run_action and scheme.run_action.executable:
        yield "run action", scheme.run_action.executable


class SchemeLinter(SchemeLinting):
    def lint(
        self, scheme: Scheme, graph: Graph, project: Optional[Project] = None
    ) -> List[LintingIssue]:
        issues: List[LintingIssue] = []
        if not scheme.is_buildable and not scheme.is_testable:
            issues.append(
                LintingIssue.warning(f"The scheme '{scheme.name}' doesn't build or test any target.")
            )
        for action, reference in _references(scheme):
            if graph.partial and Path(reference.project_path) not in graph.projects:
                continue
            if graph.target(reference.project_path, reference.name) is None:
                issues.append(
                    LintingIssue.error(
                        f"The target '{reference.name}' referenced by the {action} of "
                        f"scheme '{scheme.name}' doesn't exist in the project at "
                        f"{Path(reference.project_path)}."
                    )
                )
        if project is not None:
            issues.extend(self._lint_configurations(scheme, project))
        return issues

    def _lint_configurations(self, scheme: Scheme, project: Project) -> List[LintingIssue]:
        referenced = []
        if scheme.run_action:
            referenced.append(("run", scheme.run_action.configuration_name))
        if scheme.test_action:
            referenced.append(("test", scheme.test_action.configuration_name))
        return [
            LintingIssue.error(
                f"The build configuration '{name}' specified in the scheme's {action} "
                f"action isn't defined in the project."
            )
            for action, name in referenced
            if not project.settings.has_configuration(name)
        ]
