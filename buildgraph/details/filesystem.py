from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

# Marker written into workspaces produced by the generator
GENERATED_FILE_NAME = ".buildgraph-generated"


class FileSystem(ABC):
    @abstractmethod
    def exists(self, path: Path) -> bool:
        pass

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        pass

    @abstractmethod
    def contents(self, path: Path) -> List[Path]:
        pass

    @abstractmethod
    def glob(self, path: Path, pattern: str) -> List[Path]:
        pass


class LocalFileSystem(FileSystem):
    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def contents(self, path: Path) -> List[Path]:
        return sorted(Path(path).iterdir())

    def glob(self, path: Path, pattern: str) -> List[Path]:
        # sorted so that "first match" is stable across file systems
        return sorted(Path(path).glob(pattern))
