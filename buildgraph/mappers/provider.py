from typing import List

from buildgraph.config import Config, GenerationOption
from buildgraph.mappers.autogenerated_schemes import AutogeneratedSchemesProjectMapper
from buildgraph.mappers.project_mapper import ProjectMapper, SequentialProjectMapper


class ProjectMapperProvider:
    def mapper(self, config: Config) -> ProjectMapper:
        mappers: List[ProjectMapper] = []
        if not config.has_option(GenerationOption.DISABLE_AUTOGENERATED_SCHEMES):
            mappers.append(
                AutogeneratedSchemesProjectMapper(
                    enable_code_coverage=config.has_option(GenerationOption.ENABLE_CODE_COVERAGE)
                )
            )
        return SequentialProjectMapper(mappers)


# Test automation needs the per-target schemes even when the user disabled
# them for generated projects.
class AutomationProjectMapperProvider(ProjectMapperProvider):
    def __init__(self, project_mapper_provider: ProjectMapperProvider = ProjectMapperProvider()):
        self.project_mapper_provider = project_mapper_provider

    def mapper(self, config: Config) -> ProjectMapper:
        mappers = [self.project_mapper_provider.mapper(config)]
        if config.has_option(GenerationOption.DISABLE_AUTOGENERATED_SCHEMES):
            mappers.append(
                AutogeneratedSchemesProjectMapper(
                    enable_code_coverage=config.has_option(GenerationOption.ENABLE_CODE_COVERAGE)
                )
            )
        return SequentialProjectMapper(mappers)
