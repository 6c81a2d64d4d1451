from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class TargetReference:
    project_path: Path
    name: str


@dataclass
class ExecutionAction:
    title: str
    script: str
    target: Optional[TargetReference] = None


@dataclass
class BuildAction:
    targets: List[TargetReference] = field(default_factory=list)
    pre_actions: List[ExecutionAction] = field(default_factory=list)
    post_actions: List[ExecutionAction] = field(default_factory=list)


@dataclass
class TestableTarget:
    target: TargetReference
    skipped: bool = False
    parallelizable: bool = False
    randomize: bool = False


@dataclass
class TestAction:
    targets: List[TestableTarget] = field(default_factory=list)
    configuration_name: str = "Debug"
    coverage: bool = False
    code_coverage_targets: List[TargetReference] = field(default_factory=list)
    pre_actions: List[ExecutionAction] = field(default_factory=list)
    post_actions: List[ExecutionAction] = field(default_factory=list)


@dataclass
class RunAction:
    configuration_name: str = "Debug"
    executable: Optional[TargetReference] = None


@dataclass
class Scheme:
    name: str
    shared: bool = True
    build_action: Optional[BuildAction] = None
    test_action: Optional[TestAction] = None
    run_action: Optional[RunAction] = None

    @property
    def is_buildable(self) -> bool:
        return self.build_action is not None and len(self.build_action.targets) > 0

    @property
    def is_testable(self) -> bool:
        return self.test_action is not None and len(self.test_action.targets) > 0

    def _referenced_targets(self) -> Iterator[TargetReference]:
        if self.build_action:
            yield from self.build_action.targets
            for action in self.build_action.pre_actions + self.build_action.post_actions:
                if action.target:
                    yield action.target
        if self.test_action:
            yield from (t.target for t in self.test_action.targets)
            yield from self.test_action.code_coverage_targets
            for action in self.test_action.pre_actions + self.test_action.post_actions:
                if action.target:
                    yield action.target
        if self.run_action and self.run_action.executable:
            yield self.run_action.executable

    def target_dependencies(self) -> List[TargetReference]:
        # unique by (project_path, name), then sorted by name
        unique = list(dict.fromkeys(self._referenced_targets()))
        return sorted(unique, key=lambda ref: ref.name)
