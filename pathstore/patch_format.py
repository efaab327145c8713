# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import PatchFormatError
from .utils import normalize_path


class PatchEntry(dict):
    """For internal usage in pathstore library.

    Minimal class providing attribute access to patch entry keys.
    Entries stay plain dicts so a patch can be dumped as JSON directly.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REPLACE = "replace"
    REMOVE = "remove"

    ALL = (ADD, REPLACE, REMOVE)


def op_add(path, value):
    "Create a patch entry adding value at path, whose parent must exist."
    return PatchEntry(op=PatchOp.ADD, path=path, value=value)

def op_replace(path, value):
    "Create a patch entry replacing the existing value at path."
    return PatchEntry(op=PatchOp.REPLACE, path=path, value=value)

def op_remove(path):
    "Create a patch entry removing the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=path)


def to_patch_entries(patch):
    """Convert a list of plain dicts (e.g. loaded from JSON) to PatchEntries.

    Raises a PatchFormatError if the result is not well formed.
    """
    if not isinstance(patch, list):
        raise PatchFormatError("Patch must be a list.")
    entries = [PatchEntry(e) if isinstance(e, dict) else e for e in patch]
    validate_patch(entries)
    return entries


def validate_patch(patch):
    """Check whether a patch (list of patch entries) is well formed.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(patch, list):
        raise PatchFormatError("Patch must be a list.")
    for e in patch:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed patch entry.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, PatchEntry):
        raise PatchFormatError("Patch entry '{}' is not a patch type.".format(e))

    op = e.get("op")
    path = e.get("path")
    if not isinstance(path, str) or normalize_path(path) != path:
        raise PatchFormatError(
            "Patch entry path must be a canonical path, not {!r}.".format(path))

    if op == PatchOp.ADD or op == PatchOp.REPLACE:
        if "value" not in e:
            raise PatchFormatError("{} expects a value to write at '{}'.".format(op, path))
        extra = set(e) - {"op", "path", "value"}
    elif op == PatchOp.REMOVE:
        extra = set(e) - {"op", "path"}
    else:
        raise PatchFormatError("Unknown patch op '{}'.".format(op))

    if extra:
        raise PatchFormatError(
            "Unexpected fields {} in {} entry.".format(sorted(extra), op))
