# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from pathstore import Missing
from pathstore.probing import path_exists, resolve


tree = {
    "user": {
        "name": "Alice",
        "settings": {"theme": "dark"},
        "tags": ["a", "b"],
        "nothing": None,
        "zero": 0,
        "empty": {},
    },
}


def test_root_always_exists():
    assert path_exists('/', {})
    assert path_exists('', tree)


def test_existing_paths():
    assert path_exists('/user', tree)
    assert path_exists('/user/name', tree)
    assert path_exists('/user/settings/theme', tree)
    assert path_exists('/user/empty', tree)
    assert path_exists('/user/nothing', tree)


def test_missing_paths():
    assert not path_exists('/nobody', tree)
    assert not path_exists('/user/age', tree)
    assert not path_exists('/user/settings/font', tree)
    assert not path_exists('/user/empty/x', tree)
    assert not path_exists('/a', {})


def test_existence_stops_at_leaves():
    # Segments left over below a leaf are not checked
    assert path_exists('/user/name/first', tree)
    assert path_exists('/user/tags/0', tree)
    assert path_exists('/user/tags/42/x', tree)
    assert path_exists('/user/nothing/x', tree)
    assert path_exists('/user/zero/x/y', tree)


def test_resolve():
    assert resolve('/', tree) is tree
    assert resolve('/user/name', tree) == "Alice"
    assert resolve('/user/settings', tree) == {"theme": "dark"}
    assert resolve('/user/nothing', tree) is None
    assert resolve('/user/empty', tree) == {}


def test_resolve_missing():
    assert resolve('/nobody', tree) is Missing
    assert resolve('/user/settings/font', tree) is Missing


def test_resolve_does_not_pass_through_leaves():
    assert resolve('/user/name/first', tree) is Missing
    assert resolve('/user/tags/0', tree) is Missing
    assert resolve('/user/nothing/x', tree) is Missing
