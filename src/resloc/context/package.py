"""Search context over the data files shipped inside a Python package."""

from importlib import resources
from importlib.resources.abc import Traversable
from typing import BinaryIO, Iterator

from resloc.context.base import ResourceNotFoundError, SearchContext, strip_root


class PackageSearchContext(SearchContext):
    """Resolve paths inside an importable package.

    Works for packages installed as zip archives as well as plain
    directories, since lookup goes through :mod:`importlib.resources`.
    """

    def __init__(self, anchor: str) -> None:
        self.anchor = anchor

    @property
    def description(self) -> str:
        return f"PackageSearchContext[{self.anchor}]"

    def _traverse(self, path: str) -> Traversable:
        node = resources.files(self.anchor)
        for part in strip_root(path).split("/"):
            if part:
                node = node.joinpath(part)
        return node

    def open(self, path: str) -> BinaryIO:
        node = self._traverse(path)
        if not node.is_file():
            raise ResourceNotFoundError(path, self)
        return node.open("rb")

    def exists(self, path: str) -> bool:
        return self._traverse(path).is_file()

    def iter_children(self, path: str) -> Iterator[str]:
        node = self._traverse(path)
        if not node.is_dir():
            return
        yield from sorted(child.name for child in node.iterdir())
