"""Filesystem-backed search contexts.

:class:`DirectorySearchContext` searches an ordered list of root
directories; the first root containing the path wins.
:class:`SysPathSearchContext` takes its roots from :data:`sys.path` at
access time, which mirrors how the import system finds modules.
"""

import os
import sys
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional, Sequence, Union

from resloc.context.base import ResourceNotFoundError, SearchContext, strip_root


class DirectorySearchContext(SearchContext):
    """Resolve paths against an ordered list of root directories."""

    def __init__(self, roots: Iterable[Union[str, Path]]) -> None:
        self._roots = tuple(Path(root).expanduser() for root in roots)

    @property
    def roots(self) -> Sequence[Path]:
        return self._roots

    @property
    def description(self) -> str:
        joined = os.pathsep.join(str(root) for root in self.roots)
        return f"{self.__class__.__name__}[{joined}]"

    def _candidates(self, path: str) -> Iterator[Path]:
        relative = strip_root(path)
        for root in self.roots:
            candidate = root / relative
            # Paths climbing out of a root through ".." are not part of it.
            try:
                candidate.resolve().relative_to(root.resolve())
            except ValueError:
                continue
            yield candidate

    def locate(self, path: str) -> Optional[Path]:
        """Return the first filesystem path holding *path*, or ``None``."""
        for candidate in self._candidates(path):
            if candidate.is_file():
                return candidate
        return None

    def open(self, path: str) -> BinaryIO:
        found = self.locate(path)
        if found is None:
            raise ResourceNotFoundError(path, self)
        return found.open("rb")

    def exists(self, path: str) -> bool:
        return self.locate(path) is not None

    def iter_children(self, path: str) -> Iterator[str]:
        seen: set[str] = set()
        for candidate in self._candidates(path):
            if not candidate.is_dir():
                continue
            for entry in sorted(candidate.iterdir()):
                if entry.name not in seen:
                    seen.add(entry.name)
                    yield entry.name


class SysPathSearchContext(DirectorySearchContext):
    """Search the directories currently listed on :data:`sys.path`.

    An empty entry stands for the working directory. Archive entries
    (zip files, eggs) are skipped.
    """

    def __init__(self) -> None:
        super().__init__(())

    @property
    def roots(self) -> Sequence[Path]:
        roots = []
        for entry in sys.path:
            root = Path(entry or os.getcwd())
            if root.is_dir():
                roots.append(root)
        return tuple(roots)

    @property
    def description(self) -> str:
        return "SysPathSearchContext[sys.path]"
