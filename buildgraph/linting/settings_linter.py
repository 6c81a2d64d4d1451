from collections import Counter
from typing import List, Tuple

from buildgraph.details.settings import Settings, Variant
from buildgraph.linting.issue import LintingIssue
from buildgraph.linting.linter import SettingsLinting

# Pairs of (setting, value) that can't hold at the same time
MUTUALLY_EXCLUSIVE_SETTINGS: List[Tuple[Tuple[str, str], Tuple[str, str]]] = [
    (("CODE_SIGNING_ALLOWED", "NO"), ("CODE_SIGNING_REQUIRED", "YES")),
    (("ENABLE_BITCODE", "NO"), ("BITCODE_GENERATION_MODE", "bitcode")),
]


class SettingsLinter(SettingsLinting):
    def lint(self, settings: Settings) -> List[LintingIssue]:
        issues: List[LintingIssue] = []
        if not settings.configurations:
            issues.append(LintingIssue.error("The settings don't define any configuration."))
        issues.extend(self._lint_duplicated_names(settings))
        issues.extend(self._lint_variants(settings))
        issues.extend(self._lint_default_configuration(settings))
        issues.extend(self._lint_exclusive_settings(settings))
        return issues

    def _lint_duplicated_names(self, settings: Settings) -> List[LintingIssue]:
        counts = Counter(settings.configuration_names())
        return [
            LintingIssue.error(f"The configuration '{name}' is defined more than once.")
            for name, count in counts.items()
            if count > 1
        ]

    def _lint_variants(self, settings: Settings) -> List[LintingIssue]:
        return [
            LintingIssue.error(
                f"The configuration '{build_config.name}' has an unknown variant "
                f"'{build_config.variant}'. Valid variants are: "
                f"{', '.join(v.value for v in Variant)}."
            )
            for build_config, _ in settings.configurations
            if not isinstance(build_config.variant, Variant)
        ]

    def _lint_default_configuration(self, settings: Settings) -> List[LintingIssue]:
        name = settings.default_configuration
        if name is None or settings.has_configuration(name):
            return []
        return [LintingIssue.error(f"The default configuration '{name}' isn't defined.")]

    def _lint_exclusive_settings(self, settings: Settings) -> List[LintingIssue]:
        issues = []
        for build_config, _ in settings.configurations:
            effective = settings.effective_settings(build_config)
            for (key, value), (other_key, other_value) in MUTUALLY_EXCLUSIVE_SETTINGS:
                if effective.get(key) == value and effective.get(other_key) == other_value:
                    issues.append(
                        LintingIssue.error(
                            f"The configuration '{build_config.name}' sets {key}={value} "
                            f"together with {other_key}={other_value}."
                        )
                    )
        return issues
