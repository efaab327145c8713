# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import PathStoreError, debug
from .nodes import NodeKind, node_kind, copy_node
from .patch_format import PatchOp, validate_patch
from .utils import split_path


__all__ = ["patch", "apply_patch", "PatchApplyError"]


class PatchApplyError(PathStoreError):
    pass


def _parent_branch(tree, e):
    "Find the branch holding the key targeted by patch entry e."
    parts = split_path(e.path)
    if not parts:
        raise PatchApplyError(
            "Cannot {} the document root with a patch.".format(e.op))
    node = tree
    for key in parts[:-1]:
        if key not in node:
            raise PatchApplyError(
                "Parent of '{}' does not exist (missing '{}').".format(e.path, key))
        node = node[key]
        if node_kind(node) != NodeKind.BRANCH:
            raise PatchApplyError(
                "Parent of '{}' is not a branch (at '{}').".format(e.path, key))
    return node, parts[-1]


def patch_entry(tree, e):
    "Apply a single patch entry to tree, in place."
    parent, key = _parent_branch(tree, e)
    op = e.op
    if op == PatchOp.ADD:
        parent[key] = copy_node(e.value)
    elif op == PatchOp.REPLACE:
        if key not in parent:
            raise PatchApplyError("Cannot replace missing path '{}'.".format(e.path))
        parent[key] = copy_node(e.value)
    elif op == PatchOp.REMOVE:
        if key not in parent:
            raise PatchApplyError("Cannot remove missing path '{}'.".format(e.path))
        del parent[key]
    else:
        raise PatchApplyError("Invalid op {}.".format(op))


def patch(tree, patch):
    """Produce a patched copy of tree with the given patch.

    The tree must be a branch (a dict with string keys). Entries are
    applied in order; each entry may rely on the branches added by the
    entries before it. The input tree is not modified.
    """
    validate_patch(patch)
    if node_kind(tree) != NodeKind.BRANCH:
        raise PatchApplyError("Only branches can be patched.")
    newtree = copy_node(tree)
    for e in patch:
        patch_entry(newtree, e)
    return newtree


def apply_patch(tree, patch_):
    """Apply a patch to tree in place, all or nothing.

    If any entry fails, a PatchApplyError is raised and tree is
    left exactly as it was.
    """
    newtree = patch(tree, patch_)
    tree.clear()
    tree.update(newtree)
    debug("Applied patch with %d operation(s)", len(patch_))
