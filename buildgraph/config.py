from enum import Enum
from typing import List


class GenerationOption(Enum):
    DISABLE_AUTOGENERATED_SCHEMES = "disable_autogenerated_schemes"
    ENABLE_CODE_COVERAGE = "enable_code_coverage"


class Config:
    def __init__(self, generation_options: List[GenerationOption] = [], **kwargs):
        self.generation_options = list(generation_options)
        self.__dict__.update(kwargs)

    def has_option(self, option: GenerationOption) -> bool:
        return option in self.generation_options
