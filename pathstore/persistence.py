# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from .log import PathStoreError, debug
from .nodes import NodeKind, node_kind
from .utils import ensure_dir_exists


__all__ = [
    "SlotGateway", "MemorySlot", "FileSlot", "PersistenceCorrupt",
    "decode_document", "encode_document", "load_document", "save_document",
]


class PersistenceCorrupt(PathStoreError):
    pass


class SlotGateway(object):
    """A single persistent slot holding raw document bytes under a fixed key.

    Subclasses implement load/save/clear for a concrete storage.
    """

    def __init__(self, key):
        self.key = key

    def load(self):
        """Return the stored bytes, or None if nothing is stored."""
        raise NotImplementedError

    def save(self, data):
        """Store data (bytes), replacing anything stored before."""
        raise NotImplementedError

    def clear(self):
        """Erase the slot. Clearing an empty slot is not an error."""
        raise NotImplementedError


class MemorySlot(SlotGateway):
    """Slot kept in a plain dict, shaped like a browser's local storage.

    Several slots can share one `storage` dict under different keys.
    """

    def __init__(self, key, storage=None):
        super(MemorySlot, self).__init__(key)
        self.storage = {} if storage is None else storage

    def load(self):
        return self.storage.get(self.key)

    def save(self, data):
        self.storage[self.key] = bytes(data)

    def clear(self):
        self.storage.pop(self.key, None)


class FileSlot(SlotGateway):
    "Slot stored as '<key>.json' in a directory, written atomically."

    def __init__(self, key, directory):
        super(FileSlot, self).__init__(key)
        self.directory = directory

    @property
    def filename(self):
        return os.path.join(self.directory, self.key + ".json")

    def load(self):
        if not os.path.exists(self.filename):
            return None
        with io.open(self.filename, "rb") as f:
            return f.read()

    def save(self, data):
        ensure_dir_exists(self.directory)
        tmp = self.filename + ".tmp"
        try:
            with io.open(tmp, "wb") as f:
                f.write(data)
            os.replace(tmp, self.filename)
        except Exception:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise

    def clear(self):
        if os.path.exists(self.filename):
            os.remove(self.filename)


def encode_document(doc):
    "Encode a document as UTF-8 JSON bytes."
    return json.dumps(doc, ensure_ascii=False).encode("utf8")


def _reject_constant(name):
    raise ValueError("%s is not valid JSON" % (name,))


def decode_document(data, key=None):
    """Decode raw slot bytes into a document.

    Missing, empty or `null` content gives an empty document.
    Anything that is not standard JSON (NaN and Infinity included),
    or not a JSON object, raises PersistenceCorrupt with the
    underlying failure as cause.
    """
    if data is None:
        return {}
    try:
        text = data.decode("utf8") if isinstance(data, bytes) else data
        doc = json.loads(text, parse_constant=_reject_constant) if text.strip() else None
    except ValueError as e:
        raise PersistenceCorrupt(
            "Failed to read slot {!r}: {}".format(key, e)) from e
    if doc is None:
        return {}
    if not isinstance(doc, dict) or node_kind(doc) != NodeKind.BRANCH:
        raise PersistenceCorrupt(
            "Failed to read slot {!r}: stored document is a {}, not an object.".format(
                key, type(doc).__name__))
    return doc


def load_document(gateway):
    "Load and decode the document stored in a gateway's slot."
    debug("Loading slot %r", gateway.key)
    return decode_document(gateway.load(), gateway.key)


def save_document(gateway, doc):
    "Encode and store a document in a gateway's slot."
    debug("Saving slot %r", gateway.key)
    gateway.save(encode_document(doc))
