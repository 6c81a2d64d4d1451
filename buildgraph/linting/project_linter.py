from pathlib import Path
from typing import List, Optional, Tuple

from buildgraph.details.graph import Graph
from buildgraph.details.platform import Product
from buildgraph.details.project import Project
from buildgraph.details.target import DependencyKind, Target
from buildgraph.linting.issue import LintingIssue
from buildgraph.linting.linter import (
    ProjectLinting,
    SchemeLinting,
    SettingsLinting,
    TargetLinting,
)
from buildgraph.linting.scheme_linter import SchemeLinter
from buildgraph.linting.settings_linter import SettingsLinter
from buildgraph.linting.target_linter import TargetLinter, link_issues

# (parent product, embedded product, parent description, child description)
COMPANION_PRODUCTS: List[Tuple[Product, Product, str, str]] = [
    (Product.APP, Product.WATCH2_APP, "app", "Watch app"),
    (Product.WATCH2_APP, Product.WATCH2_EXTENSION, "watch app", "Watch extension"),
    (Product.APP, Product.APP_CLIP, "app", "App clip"),
]


class ProjectLinter(ProjectLinting):
    def __init__(
        self,
        target_linter: Optional[TargetLinting] = None,
        settings_linter: Optional[SettingsLinting] = None,
        scheme_linter: Optional[SchemeLinting] = None,
    ):
        self.target_linter = target_linter or TargetLinter()
        self.settings_linter = settings_linter or SettingsLinter()
        self.scheme_linter = scheme_linter or SchemeLinter()

    def lint(self, project: Project, graph: Optional[Graph] = None) -> List[LintingIssue]:
        issues: List[LintingIssue] = []
        for target in project.targets:
            issues.extend(self.target_linter.lint(target, project))
        issues.extend(self.settings_linter.lint(project.settings))
        for target in project.targets:
            if target.settings is not None:
                issues.extend(self.settings_linter.lint(target.settings))
        scheme_graph = graph if graph is not None else Graph.from_project(project)
        for scheme in project.schemes:
            issues.extend(self.scheme_linter.lint(scheme, scheme_graph, project))
        issues.extend(self._lint_duplicated_targets(project))
        issues.extend(self._lint_companion_bundle_identifiers(project))
        if graph is not None:
            issues.extend(self._lint_project_dependencies(project, graph))
        return issues

    def _lint_project_dependencies(self, project: Project, graph: Graph) -> List[LintingIssue]:
        issues = []
        for target in project.targets:
            for dependency in target.dependencies:
                if dependency.kind != DependencyKind.PROJECT:
                    continue
                resolved = graph.target(dependency.path, dependency.name)
                issues.extend(
                    link_issues(
                        target,
                        dependency.name,
                        resolved.target if resolved is not None else None,
                        Path(dependency.path),
                    )
                )
        return issues

    def _lint_duplicated_targets(self, project: Project) -> List[LintingIssue]:
        return [
            LintingIssue.error(
                f"Targets {name} from project at {project.path} have duplicates."
            )
            for name, targets in project.targets_by_name().items()
            if len(targets) > 1
        ]

    def _lint_companion_bundle_identifiers(self, project: Project) -> List[LintingIssue]:
        issues = []
        for parent in project.targets:
            for child in project.local_dependencies(parent):
                for parent_product, child_product, parent_kind, child_kind in COMPANION_PRODUCTS:
                    if parent.product != parent_product or child.product != child_product:
                        continue
                    if not self._is_prefixed(parent, child):
                        issues.append(
                            LintingIssue.error(
                                f"{child_kind} '{child.name}' bundleId: {child.bundle_id} "
                                f"isn't prefixed with its parent's {parent_kind} "
                                f"'{parent.name}' bundleId '{parent.bundle_id}'"
                            )
                        )
        return issues

    @staticmethod
    def _is_prefixed(parent: Target, child: Target) -> bool:
        return child.bundle_id.startswith(f"{parent.bundle_id}.")
