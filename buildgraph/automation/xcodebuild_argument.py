# Arguments passed to xcodebuild.
#
# Each argument is a tagged value; `arguments` renders it the way the command
# line expects it.

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List


class XcodeBuildArgument(ABC):
    @property
    @abstractmethod
    def arguments(self) -> List[str]:
        pass


@dataclass(frozen=True)
class Sdk(XcodeBuildArgument):
    name: str

    @property
    def arguments(self) -> List[str]:
        return ["-sdk", self.name]


@dataclass(frozen=True)
class ConfigurationArgument(XcodeBuildArgument):
    name: str

    @property
    def arguments(self) -> List[str]:
        return ["-configuration", self.name]


@dataclass(frozen=True)
class Xcarg(XcodeBuildArgument):
    key: str
    value: str

    @property
    def arguments(self) -> List[str]:
        return [f"{self.key}={self.value}"]


def flatten(arguments: Iterable[XcodeBuildArgument]) -> List[str]:
    return [value for argument in arguments for value in argument.arguments]
