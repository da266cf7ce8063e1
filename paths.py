"""Branch path resolution.

A path is a `/`-separated list of branch names. Lookups are two-tier: the
whole trimmed path is first tried as a single branch key, and only when that
misses is it split and walked one segment at a time.
"""

from __future__ import annotations

import logging
from typing import List, Optional, TYPE_CHECKING

import config
from errors import PathNotFoundError

if TYPE_CHECKING:
    from catalog import Catalog

logger = logging.getLogger(__name__)


def clean_path(path: str) -> str:
    """Strip leading and trailing separators."""
    return path.strip(config.SEPARATOR)


def split_path(path: str) -> List[str]:
    """Split a path into its non-empty segments."""
    return [segment for segment in clean_path(path).split(config.SEPARATOR) if segment]


def resolve(root: Catalog, path: str) -> Optional[Catalog]:
    """Find the branch a path points to.

    Args:
        root: Node the path is relative to
        path: Branch name or `/`-separated branch path

    Returns:
        The branch, or None when neither the whole path nor its first step
        exists as a branch key.

    Raises:
        PathNotFoundError: A multi-segment walk hit a missing intermediate branch
    """
    cleaned = clean_path(path)

    # simple case
    if cleaned in root.branches:
        return root.branches[cleaned]

    if config.SEPARATOR not in cleaned:
        logger.debug("No branch named %r", cleaned)
        return None

    # segmented path
    node = root
    for segment in split_path(cleaned):
        child = node.branches.get(segment)
        if child is None:
            raise PathNotFoundError(path, segment)
        node = child
    return node


def resolve_strict(root: Catalog, path: str) -> Catalog:
    """Like resolve(), but a missing branch is always an error."""
    node = resolve(root, path)
    if node is None:
        raise PathNotFoundError(path)
    return node
