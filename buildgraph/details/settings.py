from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

SettingValue = Union[str, List[str]]
SettingsDictionary = Dict[str, SettingValue]


class Variant(Enum):
    DEBUG = "debug"
    RELEASE = "release"


@dataclass(frozen=True)
class BuildConfiguration:
    name: str
    variant: Variant

    @staticmethod
    def debug(name: str = "Debug") -> "BuildConfiguration":
        return BuildConfiguration(name, Variant.DEBUG)

    @staticmethod
    def release(name: str = "Release") -> "BuildConfiguration":
        return BuildConfiguration(name, Variant.RELEASE)


@dataclass
class Configuration:
    settings: SettingsDictionary = field(default_factory=dict)
    xcconfig: Optional[str] = None


ConfigurationEntry = Tuple[BuildConfiguration, Optional[Configuration]]


# Configurations are kept as an ordered list of pairs rather than a dict so
# that duplicated names survive until the settings linter reports them.
@dataclass
class Settings:
    base: SettingsDictionary = field(default_factory=dict)
    configurations: List[ConfigurationEntry] = field(default_factory=list)
    default_configuration: Optional[str] = None

    @staticmethod
    def default(base: SettingsDictionary = {}) -> "Settings":
        return Settings(
            base=dict(base),
            configurations=[
                (BuildConfiguration.debug(), None),
                (BuildConfiguration.release(), None),
            ],
        )

    def configuration(self, name: str) -> Optional[ConfigurationEntry]:
        return next(
            (entry for entry in self.configurations if entry[0].name == name), None
        )

    def has_configuration(self, name: str) -> bool:
        return self.configuration(name) is not None

    def configuration_names(self) -> List[str]:
        return [build_config.name for build_config, _ in self.configurations]

    def effective_settings(
        self, build_config: BuildConfiguration
    ) -> SettingsDictionary:
        # configuration-level values override the base values
        merged = dict(self.base)
        entry = next(
            (e for e in self.configurations if e[0] == build_config), None
        )
        if entry is not None and entry[1] is not None:
            merged.update(entry[1].settings)
        return merged

    def default_debug_configuration_name(self) -> str:
        return self._first_name(Variant.DEBUG) or "Debug"

    def default_release_configuration_name(self) -> str:
        return self._first_name(Variant.RELEASE) or "Release"

    def _first_name(self, variant: Variant) -> Optional[str]:
        for build_config, _ in self.configurations:
            if build_config.variant == variant:
                return build_config.name
        return None
