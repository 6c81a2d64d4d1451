from buildgraph.config import Config, GenerationOption
from buildgraph.details.graph import Graph, GraphTarget
from buildgraph.details.platform import Platform, Product
from buildgraph.details.project import Project
from buildgraph.details.scheme import (
    BuildAction,
    ExecutionAction,
    RunAction,
    Scheme,
    TargetReference,
    TestableTarget,
    TestAction,
)
from buildgraph.details.settings import BuildConfiguration, Configuration, Settings, Variant
from buildgraph.details.target import DeploymentTarget, Target, TargetDependency
from buildgraph.details.workspace import Workspace
from buildgraph.linting.issue import LintingError, LintingIssue, Severity
