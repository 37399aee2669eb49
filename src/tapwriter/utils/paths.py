import os
from typing import Callable, Iterable

InternalsPredicate = Callable[[str], bool]

DEFAULT_INTERNALS = ("node_modules", "internal")

def relative_to_root(root: str, path: str) -> str:
    return os.path.relpath(path or os.curdir, root)

def internals_predicate(segments: Iterable[str] = DEFAULT_INTERNALS) -> InternalsPredicate:
    """
    Build the check for frames living in dependency or runtime code.
    A root-relative path is internal when its first segment is one of
    `segments`, e.g. node_modules/chai/index.js.
    """
    names = frozenset(segments)

    def is_internal(relative_path: str) -> bool:
        head, sep, _ = relative_path.replace(os.sep, "/").partition("/")
        return bool(sep) and head in names

    return is_internal
