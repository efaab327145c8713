# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .log import PathStoreError, PatchFormatError
from .nodes import Missing, InvalidValue
from .patch_format import PatchEntry, PatchOp, op_add, op_replace, op_remove
from .patching import patch, apply_patch, PatchApplyError
from .persistence import SlotGateway, MemorySlot, FileSlot, PersistenceCorrupt
from .planning import plan_set, plan_remove
from .probing import path_exists, resolve
from .store import PathStore, InvalidRootValue, StoreNotInitialized
from .utils import normalize_path


__all__ = [
    "__version__",
    "PathStore", "Missing",
    "SlotGateway", "MemorySlot", "FileSlot",
    "normalize_path", "path_exists", "resolve",
    "plan_set", "plan_remove",
    "patch", "apply_patch",
    "PatchEntry", "PatchOp", "op_add", "op_replace", "op_remove",
    "PathStoreError", "PatchFormatError", "PatchApplyError", "InvalidValue",
    "InvalidRootValue", "PersistenceCorrupt", "StoreNotInitialized",
    ]
