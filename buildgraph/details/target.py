from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from buildgraph.details.platform import Platform, Product
from buildgraph.details.settings import Settings


class DependencyKind(Enum):
    TARGET = "target"
    PROJECT = "project"
    FRAMEWORK = "framework"
    SDK = "sdk"


@dataclass(frozen=True)
class TargetDependency:
    kind: DependencyKind
    name: str
    path: Optional[Path] = None

    @staticmethod
    def target(name: str) -> "TargetDependency":
        return TargetDependency(DependencyKind.TARGET, name)

    @staticmethod
    def project(target: str, path: Path) -> "TargetDependency":
        return TargetDependency(DependencyKind.PROJECT, target, Path(path))

    @staticmethod
    def framework(path: Path) -> "TargetDependency":
        return TargetDependency(DependencyKind.FRAMEWORK, Path(path).name, Path(path))

    @staticmethod
    def sdk(name: str) -> "TargetDependency":
        return TargetDependency(DependencyKind.SDK, name)

    def __str__(self) -> str:
        if self.kind == DependencyKind.PROJECT:
            return f"{self.kind.value}:{self.path}:{self.name}"
        return f"{self.kind.value}:{self.name}"


@dataclass(frozen=True)
class DeploymentTarget:
    platform: Platform
    version: str


@dataclass
class Target:
    name: str
    platform: Platform
    product: Product
    bundle_id: str
    product_name: Optional[str] = None
    deployment_target: Optional[DeploymentTarget] = None
    info_plist: Optional[Path] = None
    entitlements: Optional[Path] = None
    sources: List[Path] = field(default_factory=list)
    resources: List[Path] = field(default_factory=list)
    dependencies: List[TargetDependency] = field(default_factory=list)
    settings: Optional[Settings] = None

    def __post_init__(self) -> None:
        if self.product_name is None:
            self.product_name = self.name

    @property
    def supports_sources(self) -> bool:
        if self.platform == Platform.IOS:
            return self.product not in (Product.BUNDLE, Product.STICKER_PACK_EXTENSION)
        if self.platform == Platform.WATCHOS:
            return self.product != Product.WATCH2_APP
        return True

    def depends_on(self, name: str) -> bool:
        return TargetDependency.target(name) in self.dependencies
