# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import math

from .log import PathStoreError


# Sentinel returned for absent nodes, to allow None as a stored value
class _MissingType(object):
    def __repr__(self):
        return "Missing"

    def __bool__(self):
        return False


Missing = _MissingType()


class InvalidValue(PathStoreError, TypeError):
    pass


class NodeKind:
    "Collection of the node variants a document can hold."
    BRANCH = "branch"
    LEAF = "leaf"


_scalar_types = (str, bool, int, type(None))


def node_kind(value):
    """Classify a JSON value as a branch or a leaf.

    Branches are dicts with string keys. Strings, numbers, booleans,
    None and lists (which are never traversed) are leaves.
    Anything else raises InvalidValue.
    """
    if isinstance(value, dict):
        for key in value:
            if not isinstance(key, str):
                raise InvalidValue(
                    "Branch keys must be strings, not {!r}.".format(key))
        return NodeKind.BRANCH
    elif isinstance(value, (list, tuple)):
        return NodeKind.LEAF
    elif isinstance(value, _scalar_types):
        return NodeKind.LEAF
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidValue("{!r} is not representable as JSON.".format(value))
        return NodeKind.LEAF
    raise InvalidValue(
        "Value of type '{}' is not representable as JSON.".format(type(value).__name__))


def is_branch(value):
    return node_kind(value) == NodeKind.BRANCH


def copy_node(value):
    """Return a deep copy of a JSON value, validating it on the way.

    Tuples are copied as lists, like a JSON round trip would.
    """
    kind = node_kind(value)
    if kind == NodeKind.BRANCH:
        return {k: copy_node(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [copy_node(v) for v in value]
    else:
        return value
