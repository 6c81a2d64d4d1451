"""
Tests for the per-target scheme generation and the mapper providers.
"""

import pytest

from buildgraph.config import Config, GenerationOption
from buildgraph.details.platform import Product
from buildgraph.details.scheme import TargetReference
from buildgraph.details.settings import BuildConfiguration, Settings
from buildgraph.details.target import TargetDependency
from buildgraph.automation.build_graph_inspector import BuildGraphInspector
from buildgraph.mappers.autogenerated_schemes import AutogeneratedSchemesProjectMapper
from buildgraph.mappers.provider import AutomationProjectMapperProvider, ProjectMapperProvider
from factories import make_graph, make_project, make_scheme, make_target


@pytest.fixture
def project(project_path):
    return make_project(
        path=project_path,
        targets=[
            make_target(name="App"),
            make_target(
                name="AppTests",
                product=Product.UNIT_TESTS,
                dependencies=[TargetDependency.target("App")],
            ),
        ],
        settings=Settings(
            configurations=[
                (BuildConfiguration.release(), None),
                (BuildConfiguration.debug("Development"), None),
            ]
        ),
    )


class TestAutogeneratedSchemes:
    def test_scheme_per_target(self, project, project_path):
        got = AutogeneratedSchemesProjectMapper().map(project)

        assert [s.name for s in got.schemes] == ["App", "AppTests"]
        app, tests = got.schemes
        app_ref = TargetReference(project_path, "App")
        tests_ref = TargetReference(project_path, "AppTests")
        assert app.build_action.targets == [app_ref]
        assert [t.target for t in app.test_action.targets] == [tests_ref]
        assert app.test_action.configuration_name == "Development"
        assert app.run_action.executable == app_ref
        assert [t.target for t in tests.test_action.targets] == [tests_ref]
        assert tests.test_action.code_coverage_targets == []

    def test_input_project_is_left_untouched(self, project):
        AutogeneratedSchemesProjectMapper().map(project)
        assert project.schemes == []

    def test_existing_schemes_are_kept(self, project, project_path):
        custom = make_scheme(name="App", build=[TargetReference(project_path, "App")])
        project.schemes = [custom]

        got = AutogeneratedSchemesProjectMapper().map(project)

        assert got.schemes[0] is custom
        assert [s.name for s in got.schemes] == ["App", "AppTests"]

    def test_code_coverage(self, project, project_path):
        got = AutogeneratedSchemesProjectMapper(enable_code_coverage=True).map(project)
        app = got.schemes[0]
        assert app.test_action.coverage
        assert app.test_action.code_coverage_targets == [TargetReference(project_path, "App")]

    def test_generated_test_schemes_are_found_by_the_inspector(self, project):
        mapped = AutogeneratedSchemesProjectMapper().map(project)
        graph = make_graph(projects=[mapped])

        got = BuildGraphInspector().test_schemes(graph)

        assert [s.name for s in got] == ["AppTests"]


class TestProviders:
    def test_default_provider_generates_schemes(self, project):
        mapper = ProjectMapperProvider().mapper(Config())
        assert len(mapper.map(project).schemes) == 2

    def test_default_provider_honours_disabled_schemes(self, project):
        config = Config(generation_options=[GenerationOption.DISABLE_AUTOGENERATED_SCHEMES])
        mapper = ProjectMapperProvider().mapper(config)
        assert mapper.map(project).schemes == []

    def test_automation_provider_always_generates_schemes(self, project):
        config = Config(
            generation_options=[
                GenerationOption.DISABLE_AUTOGENERATED_SCHEMES,
                GenerationOption.ENABLE_CODE_COVERAGE,
            ]
        )
        mapper = AutomationProjectMapperProvider().mapper(config)
        schemes = mapper.map(project).schemes
        assert [s.name for s in schemes] == ["App", "AppTests"]
        assert all(s.test_action.coverage for s in schemes)

    def test_automation_provider_doesnt_duplicate_schemes(self, project):
        mapper = AutomationProjectMapperProvider().mapper(Config())
        assert [s.name for s in mapper.map(project).schemes] == ["App", "AppTests"]
