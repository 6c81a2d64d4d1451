import re
from collections import Counter
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional

from buildgraph.details.platform import Platform, Product, supports_product
from buildgraph.details.project import Project
from buildgraph.details.target import DependencyKind, Target
from buildgraph.linting.issue import LintingIssue
from buildgraph.linting.linter import TargetLinting

INVALID_NAME_CHARACTERS = '/\\<>:"|?*\0'

_BUILD_VARIABLE = re.compile(r"\$\([^)]*\)|\$\{[^}]*\}")
_BUNDLE_ID_CHARACTERS = re.compile(r"^[A-Za-z0-9.\-]*$")
_PRODUCT_NAME_CHARACTERS = re.compile(r"^[A-Za-z0-9_]*$")
_VERSION = re.compile(r"^\d+\.\d+(\.\d+)?$")

_LINKABLE = frozenset(
    {
        Product.STATIC_LIBRARY,
        Product.DYNAMIC_LIBRARY,
        Product.FRAMEWORK,
        Product.STATIC_FRAMEWORK,
    }
)

# Product kinds each product kind may depend on
VALID_LINKS: Dict[Product, FrozenSet[Product]] = {
    Product.APP: _LINKABLE
    | {
        Product.BUNDLE,
        Product.APP_EXTENSION,
        Product.MESSAGES_EXTENSION,
        Product.STICKER_PACK_EXTENSION,
        Product.TV_TOP_SHELF_EXTENSION,
        Product.WATCH2_APP,
        Product.APP_CLIP,
    },
    Product.APP_CLIP: _LINKABLE | {Product.BUNDLE, Product.APP_EXTENSION},
    Product.STATIC_LIBRARY: frozenset(
        {Product.STATIC_LIBRARY, Product.STATIC_FRAMEWORK, Product.BUNDLE}
    ),
    Product.STATIC_FRAMEWORK: frozenset(
        {Product.STATIC_LIBRARY, Product.STATIC_FRAMEWORK, Product.BUNDLE}
    ),
    Product.DYNAMIC_LIBRARY: _LINKABLE | {Product.BUNDLE},
    Product.FRAMEWORK: _LINKABLE | {Product.BUNDLE},
    Product.UNIT_TESTS: _LINKABLE | {Product.APP, Product.APP_CLIP, Product.BUNDLE},
    Product.UI_TESTS: _LINKABLE | {Product.APP, Product.APP_CLIP, Product.BUNDLE},
    Product.APP_EXTENSION: _LINKABLE | {Product.BUNDLE},
    Product.MESSAGES_EXTENSION: _LINKABLE | {Product.BUNDLE},
    Product.TV_TOP_SHELF_EXTENSION: _LINKABLE | {Product.BUNDLE},
    Product.STICKER_PACK_EXTENSION: frozenset(),
    Product.BUNDLE: frozenset(),
    Product.COMMAND_LINE_TOOL: _LINKABLE,
    Product.WATCH2_APP: frozenset({Product.WATCH2_EXTENSION}),
    Product.WATCH2_EXTENSION: _LINKABLE,
}


def is_valid_link(target: Target, dependency: Target) -> bool:
    if dependency.product not in VALID_LINKS[target.product]:
        return False
    if target.platform == dependency.platform:
        return True
    # iOS applications embed their watch application
    return (
        target.product == Product.APP
        and target.platform == Platform.IOS
        and dependency.product == Product.WATCH2_APP
        and dependency.platform == Platform.WATCHOS
    )


def link_issues(
    target: Target, name: str, resolved: Optional[Target], path: Path
) -> List[LintingIssue]:
    """
    Issues for a dependency of `target` on the target `name` of the project at
    `path`. `resolved` is None when no such target exists.
    """
    if resolved is None:
        return [
            LintingIssue.error(
                f"Target {target.name} has a dependency on target {name} that doesn't "
                f"exist in the project at {path}."
            )
        ]
    if not is_valid_link(target, resolved):
        return [
            LintingIssue.error(
                f"Target {target.name} has a dependency with target "
                f"{resolved.name} of type {resolved.product.description} for "
                f"platform '{resolved.platform.value}' which is invalid or not "
                f"supported yet."
            )
        ]
    return []


class TargetLinter(TargetLinting):
    def lint(self, target: Target, project: Optional[Project] = None) -> List[LintingIssue]:
        issues: List[LintingIssue] = []
        issues.extend(self._lint_name(target))
        issues.extend(self._lint_product_name(target))
        issues.extend(self._lint_bundle_identifier(target))
        issues.extend(self._lint_platform_product(target))
        issues.extend(self._lint_deployment_target(target))
        issues.extend(self._lint_has_source_files(target))
        issues.extend(self._lint_copied_files(target))
        issues.extend(self._lint_library_resources(target))
        issues.extend(self._lint_duplicate_dependencies(target))
        if project is not None:
            issues.extend(self._lint_dependencies(target, project))
        return issues

    def _lint_name(self, target: Target) -> List[LintingIssue]:
        if not target.name:
            return [LintingIssue.error("A target has an empty name.")]
        if any(c in target.name for c in INVALID_NAME_CHARACTERS):
            return [
                LintingIssue.error(
                    f"Invalid target name '{target.name}'. Target names can't contain "
                    f"path separators or the characters <>:\"|?*"
                )
            ]
        return []

    def _lint_product_name(self, target: Target) -> List[LintingIssue]:
        if target.product_name and _PRODUCT_NAME_CHARACTERS.match(target.product_name):
            return []
        return [
            LintingIssue.warning(
                f"Invalid product name '{target.product_name}'. This string must contain "
                f"only alphanumeric (A-Z,a-z,0-9) and underscore (_) characters."
            )
        ]

    def _lint_bundle_identifier(self, target: Target) -> List[LintingIssue]:
        if not target.bundle_id:
            return [LintingIssue.error(f"The target {target.name} has an empty bundle identifier.")]
        # build variables are resolved by the build tool
        bundle_id = _BUILD_VARIABLE.sub("", target.bundle_id)
        segments = target.bundle_id.split(".")
        if _BUNDLE_ID_CHARACTERS.match(bundle_id) and all(segments):
            return []
        return [
            LintingIssue.error(
                f"Invalid bundle identifier '{target.bundle_id}'. This string must be a "
                f"uniform type identifier (UTI) that contains only alphanumeric (A-Z,a-z,0-9), "
                f"hyphen (-), and period (.) characters."
            )
        ]

    def _lint_platform_product(self, target: Target) -> List[LintingIssue]:
        if supports_product(target.platform, target.product):
            return []
        return [
            LintingIssue.error(
                f"'{target.name}' for platform '{target.platform.value}' can't have a "
                f"product type '{target.product.description}'"
            )
        ]

    def _lint_deployment_target(self, target: Target) -> List[LintingIssue]:
        deployment_target = target.deployment_target
        if deployment_target is None:
            return []
        issues = []
        if not _VERSION.match(deployment_target.version):
            issues.append(
                LintingIssue.error(
                    f"The version of deployment target {deployment_target.version} of "
                    f"target {target.name} is incorrect."
                )
            )
        if deployment_target.platform != target.platform:
            issues.append(
                LintingIssue.error(
                    f"Found an inconsistency between target platform "
                    f"'{target.platform.value}' and deployment target platform "
                    f"'{deployment_target.platform.value}' in target {target.name}."
                )
            )
        return issues

    def _lint_has_source_files(self, target: Target) -> List[LintingIssue]:
        if target.supports_sources and not target.sources and not target.dependencies:
            return [LintingIssue.warning(f"The target {target.name} doesn't contain source files.")]
        return []

    def _lint_copied_files(self, target: Target) -> List[LintingIssue]:
        issues = []
        for resource in target.resources:
            if resource.name == "Info.plist":
                issues.append(
                    LintingIssue.error(
                        f"Info.plist at path {resource} being copied into the target "
                        f"{target.name} product."
                    )
                )
            elif target.entitlements is not None and resource == target.entitlements:
                issues.append(
                    LintingIssue.error(
                        f"Entitlements file at path {resource} being copied into the "
                        f"target {target.name} product."
                    )
                )
        return issues

    def _lint_library_resources(self, target: Target) -> List[LintingIssue]:
        if target.product.is_library and target.resources:
            return [
                LintingIssue.error(
                    f"Target {target.name} cannot contain resources. Libraries don't "
                    f"support resources."
                )
            ]
        return []

    def _lint_duplicate_dependencies(self, target: Target) -> List[LintingIssue]:
        counts = Counter(target.dependencies)
        duplicated = [str(dep) for dep, count in counts.items() if count > 1]
        if not duplicated:
            return []
        return [
            LintingIssue.warning(
                f"Target '{target.name}' has duplicate dependencies specified: "
                f"{', '.join(duplicated)}"
            )
        ]

    def _lint_dependencies(self, target: Target, project: Project) -> List[LintingIssue]:
        issues = []
        for dependency in target.dependencies:
            if dependency.kind != DependencyKind.TARGET:
                continue
            issues.extend(
                link_issues(target, dependency.name, project.target(dependency.name), project.path)
            )
        return issues
