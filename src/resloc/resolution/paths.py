"""Relative path combination for classpath-style resource paths.

Paths use ``/`` as the only separator regardless of platform. Both
functions are pure string transformations: nothing here touches the
filesystem or checks that a path exists.
"""

SEPARATOR = "/"
CURRENT = "."
PARENT = ".."


def normalize(path: str) -> str:
    """Collapse ``.`` and ``..`` segments in *path*.

    Segments are walked right to left. ``..`` cancels the nearest
    preceding regular segment; any ``..`` left over is kept at the front
    of the result. A leading ``/`` is kept as a prefix and is never
    consumed.

    Examples:
        >>> normalize("a/b/../c/./d")
        'a/c/d'
        >>> normalize("a/../../x")
        '../x'
    """
    prefix = ""
    if path.startswith(SEPARATOR):
        prefix = SEPARATOR
        path = path[1:]

    kept: list[str] = []
    tops = 0
    for segment in reversed(path.split(SEPARATOR)):
        if segment == CURRENT:
            continue
        if segment == PARENT:
            tops += 1
        elif tops > 0:
            tops -= 1
        else:
            kept.append(segment)

    kept.extend([PARENT] * tops)
    return prefix + SEPARATOR.join(reversed(kept))


def _is_self_reference(relative_path: str) -> bool:
    return all(s in (CURRENT, "") for s in relative_path.split(SEPARATOR))


def combine(base_path: str, relative_path: str) -> str:
    """Resolve *relative_path* against the resource at *base_path*.

    Args:
        base_path: Path of the resource the new path is relative to.
        relative_path: Relative expression. A leading ``/`` anchors it at
            the root, ignoring *base_path*.

    Returns:
        Normalized combined path.

    Examples:
        >>> combine("a/b/c", "../d")
        'a/d'
        >>> combine("a/b/c", "/d")
        'd'
    """
    if relative_path.startswith(SEPARATOR):
        return relative_path[1:]
    if relative_path and _is_self_reference(relative_path):
        return base_path

    cut = base_path.rfind(SEPARATOR)
    directory = base_path[: cut + 1]
    return normalize(directory + relative_path)
