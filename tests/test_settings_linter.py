"""
Tests for build settings validation.
"""

import pytest

from buildgraph.details.settings import BuildConfiguration, Configuration, Settings
from buildgraph.linting.issue import LintingIssue
from buildgraph.linting.settings_linter import SettingsLinter


@pytest.fixture
def subject():
    return SettingsLinter()


def test_default_settings(subject):
    assert subject.lint(Settings.default()) == []


def test_no_configurations(subject):
    got = subject.lint(Settings(base={"SWIFT_VERSION": "5.0"}))
    assert got == [LintingIssue.error("The settings don't define any configuration.")]


def test_duplicated_configuration_names(subject):
    settings = Settings(
        configurations=[
            (BuildConfiguration.debug(), None),
            (BuildConfiguration("Debug", BuildConfiguration.release().variant), None),
            (BuildConfiguration.release(), None),
            (BuildConfiguration.release(), Configuration()),
        ]
    )
    got = subject.lint(settings)
    assert got == [
        LintingIssue.error("The configuration 'Debug' is defined more than once."),
        LintingIssue.error("The configuration 'Release' is defined more than once."),
    ]


def test_unknown_variant(subject):
    settings = Settings(configurations=[(BuildConfiguration("Beta", "beta"), None)])
    got = subject.lint(settings)
    assert got == [
        LintingIssue.error(
            "The configuration 'Beta' has an unknown variant 'beta'. "
            "Valid variants are: debug, release."
        )
    ]


def test_default_configuration_must_exist(subject):
    settings = Settings.default()
    settings.default_configuration = "Staging"
    got = subject.lint(settings)
    assert got == [LintingIssue.error("The default configuration 'Staging' isn't defined.")]


def test_default_configuration_exists(subject):
    settings = Settings.default()
    settings.default_configuration = "Release"
    assert subject.lint(settings) == []


def test_exclusive_settings_in_configuration(subject):
    settings = Settings(
        base={"CODE_SIGNING_ALLOWED": "NO"},
        configurations=[
            (BuildConfiguration.debug(), Configuration({"CODE_SIGNING_REQUIRED": "YES"})),
            (BuildConfiguration.release(), None),
        ],
    )
    got = subject.lint(settings)
    assert got == [
        LintingIssue.error(
            "The configuration 'Debug' sets CODE_SIGNING_ALLOWED=NO together with "
            "CODE_SIGNING_REQUIRED=YES."
        )
    ]


def test_configuration_overrides_base(subject):
    settings = Settings(
        base={"ENABLE_BITCODE": "NO", "BITCODE_GENERATION_MODE": "bitcode"},
        configurations=[
            (BuildConfiguration.debug(), Configuration({"ENABLE_BITCODE": "YES"})),
            (BuildConfiguration.release(), None),
        ],
    )
    got = subject.lint(settings)
    assert [issue.reason for issue in got] == [
        "The configuration 'Release' sets ENABLE_BITCODE=NO together with "
        "BITCODE_GENERATION_MODE=bitcode."
    ]
