# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .nodes import Missing, NodeKind, node_kind
from .utils import split_path


__all__ = ["path_exists", "resolve"]


def _exists_parts(parts, tree):
    key = parts[0]
    if key not in tree:
        return False
    value = tree[key]
    if len(parts) > 1 and node_kind(value) == NodeKind.BRANCH:
        return _exists_parts(parts[1:], value)
    # Matched the last segment, or hit a leaf with segments left over.
    # The leftover segments are not checked: a leaf counts as existence
    # of everything below it.
    return True


def path_exists(path, tree):
    """Check whether path is present in tree.

    This is a shallow check: walking stops with True as soon as a
    segment matches a leaf value, even if more segments follow.
    The root path always exists.
    """
    parts = split_path(path)
    if not parts:
        return True
    return _exists_parts(parts, tree)


def resolve(path, tree):
    """Return the node at path in tree, or Missing.

    Unlike path_exists, every segment must resolve, so a path
    continuing below a leaf resolves to Missing.
    """
    node = tree
    for key in split_path(path):
        if node_kind(node) != NodeKind.BRANCH or key not in node:
            return Missing
        node = node[key]
    return node
