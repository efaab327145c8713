# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import PathStoreError, debug, warning
from .nodes import Missing, NodeKind, node_kind, copy_node
from .patching import apply_patch
from .persistence import (
    MemorySlot, FileSlot, load_document, save_document,
)
from .planning import plan_set, plan_remove
from .probing import path_exists, resolve
from .utils import normalize_path, ROOT_PATH


__all__ = ["PathStore", "InvalidRootValue", "StoreNotInitialized", "Missing"]


class InvalidRootValue(PathStoreError, ValueError):
    pass


class StoreNotInitialized(PathStoreError, RuntimeError):
    pass


def gateway_from_config(config):
    """Create the slot gateway described by a 'Store' config.

    config is a dict as returned by build_config, or any
    object with backend, slot_key and storage_dir attributes.
    """
    if isinstance(config, dict):
        backend = config.get('backend', 'file')
        key = config.get('slot_key', 'pathstore')
        directory = config.get('storage_dir', '.')
    else:
        backend, key, directory = config.backend, config.slot_key, config.storage_dir
    if backend == 'memory':
        return MemorySlot(key)
    elif backend == 'file':
        return FileSlot(key, directory)
    raise ValueError('Unknown store backend %r.' % (backend,))


class PathStore(object):
    """A JSON document addressed by slash separated paths.

    The document lives in memory and is mirrored to a slot gateway
    after every change. Writes never need to know whether a path
    exists already: missing intermediate branches are created.

        store = PathStore(MemorySlot('settings'))
        with store:
            store.set('/user/settings/theme', 'dark')
            store.get('/user')  # {'settings': {'theme': 'dark'}}

    Reads return deep copies; the store's document is never handed out.
    """

    def __init__(self, gateway):
        self.gateway = gateway
        self._doc = None

    @classmethod
    def from_config(cls, config=None):
        if config is None:
            from .config import build_config
            config = build_config('pathstore')
        return cls(gateway_from_config(config))

    # Lifecycle

    def initialize(self):
        """Load the document from the slot.

        Raises PersistenceCorrupt if the slot holds anything
        but a JSON object; the store then stays uninitialized.
        """
        self._doc = load_document(self.gateway)
        return self

    def dispose(self):
        "Drop the in-memory document. The slot is left as it is."
        self._doc = None

    @property
    def initialized(self):
        return self._doc is not None

    def __enter__(self):
        return self.initialize()

    def __exit__(self, *exc):
        self.dispose()

    @property
    def document(self):
        if self._doc is None:
            raise StoreNotInitialized(
                "Store for slot %r is not initialized." % (self.gateway.key,))
        return self._doc

    def _persist(self):
        save_document(self.gateway, self.document)

    # Queries

    def exists(self, path=''):
        return path_exists(normalize_path(path), self.document)

    def get(self, path=None):
        """Return a copy of the value at path, or Missing.

        Without a path the whole document is returned.
        """
        path = normalize_path(path)
        value = resolve(path, self.document)
        if value is Missing:
            debug("Get: path does not exist: %s", path)
            return Missing
        return copy_node(value)

    # Mutations

    def set(self, path, value=None):
        """Write value at path, creating missing branches on the way.

        Returns the list of patch entries applied, which is empty
        when the whole document was replaced.
        """
        path = normalize_path(path)
        value = copy_node(value)
        doc = self.document
        if path == ROOT_PATH:
            if node_kind(value) != NodeKind.BRANCH:
                raise InvalidRootValue(
                    "Document root must be an object, not %s." % (type(value).__name__,))
            doc.clear()
            doc.update(value)
            patch = []
        else:
            patch = plan_set(path, value, doc)
            apply_patch(doc, patch)
        self._persist()
        return patch

    def remove(self, path):
        """Remove the value at path.

        Returns False, with a warning, if there was nothing to remove.
        This includes paths below a leaf. Removing the root clears
        the store.
        """
        path = normalize_path(path)
        if path == ROOT_PATH:
            self.clear()
            return True
        if resolve(path, self.document) is Missing:
            warning("Remove: path does not exist: %s", path)
            return False
        apply_patch(self.document, plan_remove(path, self.document))
        self._persist()
        return True

    def clear(self):
        """Reset the document to an empty object and erase the slot.

        Also valid on an uninitialized store, which is left
        initialized with the empty document.
        """
        if self._doc is None:
            self._doc = {}
        else:
            self._doc.clear()
        self.gateway.clear()

    def plan(self, path, value=None):
        "Return the patch set() would apply, without applying it."
        path = normalize_path(path)
        if path == ROOT_PATH:
            return []
        return plan_set(path, copy_node(value), self.document)
