from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def default_folder() -> Path:
    return Path.cwd() / "database"


@dataclass(frozen=True)
class StoragePaths:
    """
    The three files backing one store:

    - <folder>/<file>.json         primary record
    - <folder>/<file>.backup.json  recovery copy
    - <folder>/<file>.temp.json    staging file used while saving
    """

    folder: Path
    file: str

    @property
    def main(self) -> Path:
        return self.folder / f"{self.file}.json"

    @property
    def backup(self) -> Path:
        return self.folder / f"{self.file}.backup.json"

    @property
    def temp(self) -> Path:
        return self.folder / f"{self.file}.temp.json"

    def ensure(self) -> "StoragePaths":
        ensure_dir(self.folder)
        return self
