"""Build-scoped data models for the page and notes pipelines"""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath


@dataclass(frozen=True)
class Document:
    """Raw text of one source file; never modified after it is read."""
    path:     Path              # location on disk
    rel_path: PurePosixPath     # relative to its collection root (pages/ or notes/)
    raw:      str

    @classmethod
    def read(cls, path: Path, root: Path) -> "Document":
        return cls(
            path=path,
            rel_path=PurePosixPath(path.relative_to(root).as_posix()),
            raw=path.read_text(encoding='utf-8'),
        )


@dataclass(frozen=True)
class OutputArtifact:
    """One rendered file, relative to the output root."""
    path:    PurePosixPath
    content: str
    source:  Path


@dataclass(frozen=True)
class NoteMeta:
    """Listing entry collected for every emitted note."""
    title: str
    slug:  str
    date:  str = ""


@dataclass(frozen=True)
class BuildResult:
    artifacts:  list[OutputArtifact] = field(default_factory=list)
    pages:      int = 0
    notes:      int = 0
    listing:    bool = False
    elapsed_ms: float = 0.0
