from dataclasses import replace
from typing import List

from buildgraph.details.project import Project
from buildgraph.details.scheme import (
    BuildAction,
    RunAction,
    Scheme,
    TargetReference,
    TestableTarget,
    TestAction,
)
from buildgraph.details.target import Target
from buildgraph.mappers.project_mapper import ProjectMapper


class AutogeneratedSchemesProjectMapper(ProjectMapper):
    """
    Adds a scheme per target, named after the target, unless the project
    already defines a scheme with that name.

    Test bundles get a scheme that tests only themselves, which is what test
    automation looks for when it runs a single test target.
    """

    def __init__(self, enable_code_coverage: bool = False):
        self.enable_code_coverage = enable_code_coverage

    def map(self, project: Project) -> Project:
        existing = {scheme.name for scheme in project.schemes}
        schemes = list(project.schemes)
        for target in project.targets:
            if target.name in existing:
                continue
            existing.add(target.name)
            schemes.append(self._default_scheme(target, project))
        return replace(project, schemes=schemes)

    def _default_scheme(self, target: Target, project: Project) -> Scheme:
        reference = TargetReference(project.path, target.name)
        configuration_name = project.default_debug_configuration_name
        return Scheme(
            name=target.name,
            shared=True,
            build_action=BuildAction(targets=[reference]),
            test_action=TestAction(
                targets=self._testable_targets(target, project),
                configuration_name=configuration_name,
                coverage=self.enable_code_coverage,
                code_coverage_targets=[reference] if self.enable_code_coverage else [],
            ),
            run_action=RunAction(
                configuration_name=configuration_name, executable=reference
            ),
        )

    @staticmethod
    def _testable_targets(target: Target, project: Project) -> List[TestableTarget]:
        if target.product.is_tests_bundle:
            return [TestableTarget(TargetReference(project.path, target.name))]
        return [
            TestableTarget(TargetReference(project.path, candidate.name))
            for candidate in project.targets
            if candidate.product.is_tests_bundle and candidate.depends_on(target.name)
        ]
