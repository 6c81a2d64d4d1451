import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Tuple

from buildgraph.automation.xcodebuild_argument import (
    ConfigurationArgument,
    Sdk,
    Xcarg,
    XcodeBuildArgument,
)
from buildgraph.details.filesystem import GENERATED_FILE_NAME, FileSystem, LocalFileSystem
from buildgraph.details.graph import Graph
from buildgraph.details.platform import Platform
from buildgraph.details.project import Project
from buildgraph.details.scheme import Scheme, TargetReference
from buildgraph.details.target import Target


# Disable code signing for builds that don't need it (e.g. simulator tests)
SKIP_SIGNING_ARGUMENTS: List[XcodeBuildArgument] = [
    Xcarg("CODE_SIGN_IDENTITY", ""),
    Xcarg("CODE_SIGNING_REQUIRED", "NO"),
    Xcarg("CODE_SIGN_ENTITLEMENTS", ""),
    Xcarg("CODE_SIGNING_ALLOWED", "NO"),
]


def _by_name(schemes: List[Scheme]) -> List[Scheme]:
    return sorted(schemes, key=lambda scheme: scheme.name)


class BuildGraphInspecting(ABC):
    @abstractmethod
    def build_arguments(
        self,
        project: Project,
        target: Target,
        configuration: Optional[str],
        skip_signing: bool,
    ) -> List[XcodeBuildArgument]:
        pass

    @abstractmethod
    def workspace_path(self, directory: Path) -> Optional[Path]:
        pass

    @abstractmethod
    def buildable_target(self, scheme: Scheme, graph: Graph) -> Optional[Tuple[Project, Target]]:
        pass

    @abstractmethod
    def testable_target(self, scheme: Scheme, graph: Graph) -> Optional[Tuple[Project, Target]]:
        pass

    @abstractmethod
    def buildable_schemes(self, graph: Graph) -> List[Scheme]:
        pass

    @abstractmethod
    def buildable_entry_schemes(self, graph: Graph) -> List[Scheme]:
        pass

    @abstractmethod
    def test_schemes(self, graph: Graph) -> List[Scheme]:
        pass

    @abstractmethod
    def testable_schemes(self, graph: Graph) -> List[Scheme]:
        pass

    @abstractmethod
    def project_schemes(self, graph: Graph) -> List[Scheme]:
        pass


class BuildGraphInspector(BuildGraphInspecting):
    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        file_system: Optional[FileSystem] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.file_system = file_system or LocalFileSystem()

    def build_arguments(
        self,
        project: Project,
        target: Target,
        configuration: Optional[str] = None,
        skip_signing: bool = False,
    ) -> List[XcodeBuildArgument]:
        """
        Build arguments for the given target, in the order [sdk, configuration, signing].

        An unknown configuration isn't an error: a warning is logged and the
        scheme's default configuration applies.
        """
        arguments: List[XcodeBuildArgument] = [Sdk(self._sdk(target.platform))]
        if configuration is not None:
            settings = target.settings if target.settings is not None else project.settings
            if settings.has_configuration(configuration):
                arguments.append(ConfigurationArgument(configuration))
            else:
                self.logger.warning(
                    f"The scheme's targets don't have the given configuration "
                    f"{configuration}. Defaulting to the scheme's default."
                )
        if skip_signing:
            arguments.extend(SKIP_SIGNING_ARGUMENTS)
        return arguments

    def _sdk(self, platform: Platform) -> str:
        if platform == Platform.MACOS:
            return platform.device_sdk
        if platform.simulator_sdk is None:
            self.logger.error(f"No simulator SDK is known for platform {platform.value}")
            raise ValueError(f"platform {platform.value} has no simulator SDK")
        return platform.simulator_sdk

    def buildable_target(self, scheme: Scheme, graph: Graph) -> Optional[Tuple[Project, Target]]:
        if not scheme.is_buildable:
            return None
        assert scheme.build_action is not None
        return self._resolve(scheme.build_action.targets[0], graph)

    def testable_target(self, scheme: Scheme, graph: Graph) -> Optional[Tuple[Project, Target]]:
        if not scheme.is_testable:
            return None
        assert scheme.test_action is not None
        return self._resolve(scheme.test_action.targets[0].target, graph)

    @staticmethod
    def _resolve(reference: TargetReference, graph: Graph) -> Optional[Tuple[Project, Target]]:
        resolved = graph.target(reference.project_path, reference.name)
        if resolved is None:
            return None
        return resolved.project, resolved.target

    def buildable_schemes(self, graph: Graph) -> List[Scheme]:
        return _by_name([s for s in graph.schemes if s.is_buildable])

    def buildable_entry_schemes(self, graph: Graph) -> List[Scheme]:
        schemes = [s for project in graph.entry_projects() for s in project.schemes]
        return _by_name([s for s in schemes if s.is_buildable])

    def testable_schemes(self, graph: Graph) -> List[Scheme]:
        return _by_name([s for s in graph.schemes if s.is_testable])

    def test_schemes(self, graph: Graph) -> List[Scheme]:
        # Schemes that only reference a single test target, as generated per target.
        # The name list is compared as a list, order included.
        schemes = [
            scheme
            for graph_target in graph.targets
            if graph_target.target.product.is_tests_bundle
            for scheme in graph_target.project.schemes
            if [ref.name for ref in scheme.target_dependencies()] == [graph_target.target.name]
        ]
        return _by_name([s for s in schemes if s.is_testable])

    def project_schemes(self, graph: Graph) -> List[Scheme]:
        pattern = f"{graph.workspace.name}-Project"
        return _by_name([s for s in graph.workspace.schemes if pattern in s.name])

    def workspace_path(self, directory: Path) -> Optional[Path]:
        for workspace in self.file_system.glob(directory, "**/*.xcworkspace"):
            if not self.file_system.is_dir(workspace):
                continue
            names = [path.name for path in self.file_system.contents(workspace)]
            if GENERATED_FILE_NAME in names:
                return workspace
        return None
