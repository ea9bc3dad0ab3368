# ghopac Sync Target
# A single unit of work for the worker pool

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SyncTarget:
    """
    A repository location to bring up to date.

    Targets discovered through an organization listing carry the origin
    they can be cloned from. Syncpoints have no origin and must already
    exist on disk.
    """

    path: Path
    origin: Optional[str] = None

    @classmethod
    def for_repository(cls, base_path: str | Path, name: str, origin: Optional[str]) -> "SyncTarget":
        """Target for an org repository: base_path/name cloned from origin."""
        return cls(path=(Path(base_path) / name).absolute(), origin=origin)

    @classmethod
    def for_syncpoint(cls, path: str | Path) -> "SyncTarget":
        return cls(path=Path(path).absolute())

    @property
    def label(self) -> str:
        """Human-readable identification used in log lines."""
        if self.origin:
            return f"{self.origin} - {self.path}"
        return str(self.path)
