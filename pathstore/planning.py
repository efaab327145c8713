# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import debug
from .patch_format import op_add, op_replace, op_remove
from .probing import path_exists
from .utils import normalize_path, ancestor_paths, ROOT_PATH


__all__ = ["plan_set", "plan_remove"]


def plan_set(path, value, tree):
    """Produce the ordered patch writing value at path in tree.

    An existing path is replaced in place. Otherwise every missing
    ancestor is first added as an empty branch, shortest first, so the
    parent of each entry exists by the time it is applied.

    The root path is not planned here; replacing the whole document
    is up to the caller.
    """
    path = normalize_path(path)
    if path == ROOT_PATH:
        raise ValueError("Cannot plan a patch for the document root.")

    if path_exists(path, tree):
        patch = [op_replace(path, value)]
    else:
        patch = []
        missing = False
        for ancestor in ancestor_paths(path):
            # Below the first missing ancestor everything is missing,
            # so probing can stop there
            if missing or not path_exists(ancestor, tree):
                missing = True
                patch.append(op_add(ancestor, {}))
        patch.append(op_add(path, value))

    debug("Planned %d operation(s) for %s", len(patch), path)
    return patch


def plan_remove(path, tree):
    """Produce the patch removing path from tree.

    The caller is expected to have checked that path exists.
    """
    path = normalize_path(path)
    return [op_remove(path)]
