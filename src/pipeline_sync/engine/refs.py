"""Normalization of git ref names and script path prefixes."""

from __future__ import annotations

from pathlib import PurePosixPath

_REF_DECORATIONS = ("*", "/")


def strip_ref_decorations(ref: str) -> str:
    """Remove leading ``*`` and ``/`` characters from a branch spec.

    ``"*/master"`` and ``"/master"`` both become ``"master"``; a spec made
    only of decorations becomes ``""``.
    """
    while ref.startswith(_REF_DECORATIONS):
        ref = ref[1:]
    return ref


def relativize_path(path: str, prefix: str) -> str:
    """Strip a leading directory *prefix* from *path*.

    The prefix only matches whole path segments: ``"src/Jenkinsfile"`` loses
    ``"src"`` but ``"srcs/Jenkinsfile"`` is returned unchanged.
    """
    prefix = prefix.rstrip("/")
    if not prefix or not path.startswith(prefix):
        return path
    rest = path[len(prefix) :]
    if not rest:
        return rest
    if rest.startswith("/"):
        return rest[1:]
    return path


def normalize_path(path: str) -> str:
    """Collapse ``.`` segments and repeated or trailing separators.

    ``"./src/"`` becomes ``"src"`` and ``"a//b"`` becomes ``"a/b"``. An empty
    path stays empty.
    """
    if not path:
        return path
    return PurePosixPath(path).as_posix()


def join_path(prefix: str, path: str) -> str:
    """Join *path* under the directory *prefix*, collapsing redundant separators.

    A leading ``/`` on *path* does not discard the prefix:
    ``join_path("src", "/Jenkinsfile") == "src/Jenkinsfile"``.
    """
    return PurePosixPath(prefix, path.lstrip("/")).as_posix()


def strip_context_dir(path: str, context_dir: str) -> str:
    """Inverse of :func:`join_path` for paths produced from a context dir.

    Both sides are normalized first, so ``"src/Jenkinsfile"`` loses a
    context dir written as ``"./src"`` or ``"src/"``.
    """
    path = normalize_path(path)
    prefix = normalize_path(context_dir)
    if prefix == "/":
        return path.lstrip("/")
    return relativize_path(path, prefix)
