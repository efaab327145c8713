# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import logging
from unittest import mock

import pytest

from pathstore import (
    PathStore, MemorySlot, FileSlot, Missing,
    InvalidRootValue, InvalidValue, PatchApplyError, PersistenceCorrupt,
    StoreNotInitialized,
)
from pathstore.patch_format import op_add, op_replace


def test_user_name_scenario(store, stored_doc):
    ops = store.set('/user/name', 'Alice')
    assert ops == [op_add('/user', {}), op_add('/user/name', 'Alice')]
    assert store.get() == {'user': {'name': 'Alice'}}
    assert stored_doc() == {'user': {'name': 'Alice'}}

    ops = store.set('/user/name', 'Bob')
    assert ops == [op_replace('/user/name', 'Bob')]
    assert store.get() == {'user': {'name': 'Bob'}}

    assert store.remove('/user/name') is True
    assert store.get() == {'user': {}}
    assert stored_doc() == {'user': {}}

    assert store.remove('/user/name') is False
    assert store.get() == {'user': {}}


def test_set_creates_intermediate_branches(store):
    store.set('/a/b/c', 1)
    assert store.get('/') == {'a': {'b': {'c': 1}}}


def test_set_below_existing_branch(store):
    store.set('/a/x', 1)
    store.set('/a/b/c', 2)
    assert store.get() == {'a': {'x': 1, 'b': {'c': 2}}}


@pytest.mark.parametrize('path, value', [
    ('/a', 1),
    ('/a/b', 'text'),
    ('a/b/c/', None),
    ('/a/b', {'c': {'d': [1, 2]}}),
    ('/x', []),
    ('/y', False),
    ('/z', 1.5),
])
def test_set_then_get(store, path, value):
    store.set(path, value)
    assert store.exists(path)
    assert store.get(path) == value
    assert store.get(path) is not Missing


def test_ancestors_exist_after_set(store):
    store.set('/a/b/c/d', 1)
    for path in ('/', '/a', '/a/b', '/a/b/c', '/a/b/c/d'):
        assert store.exists(path)


def test_set_is_idempotent(store, stored_doc):
    store.set('/a/b', {'c': 1})
    first = store.get()
    store.set('/a/b', {'c': 1})
    assert store.get() == first
    assert stored_doc() == first


def test_set_default_value_is_null(store):
    store.set('/a')
    assert store.exists('/a')
    assert store.get('/a') is None


def test_get_returns_copies(store):
    store.set('/a', {'b': [1, 2]})
    value = store.get('/a')
    value['b'].append(3)
    value['c'] = 1
    assert store.get('/a') == {'b': [1, 2]}

    doc = store.get()
    doc.clear()
    assert store.get() == {'a': {'b': [1, 2]}}


def test_set_stores_copies(store):
    value = {'b': [1, 2]}
    store.set('/a', value)
    value['b'].append(3)
    assert store.get('/a') == {'b': [1, 2]}


def test_get_missing(store, caplog):
    store.set('/a', {'b': 1})
    with caplog.at_level(logging.DEBUG, logger='pathstore'):
        assert store.get('/nope') is Missing
        assert store.get('/a/c') is Missing
    assert 'does not exist: /nope' in caplog.text


def test_get_defaults_to_document(store):
    store.set('/a', 1)
    assert store.get() == {'a': 1}
    assert store.get('') == {'a': 1}
    assert store.get(' / ') == {'a': 1}


def test_exists_defaults_to_root(store):
    assert store.exists()
    assert not store.exists('/a')


def test_leaf_shadows_deeper_paths(store):
    store.set('/x', 5)
    assert store.exists('/x/y')
    assert store.exists('/x/y/z')
    assert store.get('/x/y') is Missing


def test_set_below_leaf_fails_without_change(store, slot):
    store.set('/x', 5)
    before = slot.load()
    with pytest.raises(PatchApplyError):
        store.set('/x/y', 1)
    assert store.get() == {'x': 5}
    assert slot.load() == before


def test_set_root(store, stored_doc):
    store.set('/a', 1)
    assert store.set('/', {'b': {'c': 2}}) == []
    assert store.get() == {'b': {'c': 2}}
    assert stored_doc() == {'b': {'c': 2}}
    assert not store.exists('/a')


@pytest.mark.parametrize('value', [None, 1, 'text', [1], True])
def test_set_root_requires_branch(store, slot, value):
    store.set('/a', 1)
    slot.save = mock.Mock(wraps=slot.save)
    with pytest.raises(InvalidRootValue):
        store.set('/', value)
    with pytest.raises(ValueError):
        store.set('', value)
    assert store.get() == {'a': 1}
    assert not slot.save.called


def test_set_invalid_value(store, slot):
    slot.save = mock.Mock(wraps=slot.save)
    with pytest.raises(InvalidValue):
        store.set('/a/b', object())
    assert store.get() == {}
    assert not slot.save.called


def test_every_write_persists(store, slot):
    slot.save = mock.Mock(wraps=slot.save)
    store.set('/a/b', 1)
    store.set('/a/b', 2)
    store.remove('/a/b')
    assert slot.save.call_count == 3
    store.remove('/nope')
    assert slot.save.call_count == 3


def test_remove_missing_warns(store, caplog):
    with caplog.at_level(logging.WARNING, logger='pathstore'):
        assert store.remove('/a/b') is False
    assert 'Remove: path does not exist: /a/b' in caplog.text


def test_remove_below_leaf_warns_without_change(store, slot, caplog):
    store.set('/x', 5)
    before = slot.load()
    with caplog.at_level(logging.WARNING, logger='pathstore'):
        assert store.remove('/x/y') is False
    assert 'Remove: path does not exist: /x/y' in caplog.text
    assert store.exists('/x/y')
    assert store.get() == {'x': 5}
    assert slot.load() == before


def test_remove_branch(store):
    store.set('/a/b/c', 1)
    store.set('/a/d', 2)
    assert store.remove('/a/b')
    assert store.get() == {'a': {'d': 2}}
    assert not store.exists('/a/b/c')


def test_remove_root_clears(store, slot):
    store.set('/a/b', 1)
    assert store.remove('/') is True
    assert not store.exists('/a/b')
    assert not store.exists('/a')
    assert store.get('/') == {}
    assert slot.load() is None


def test_remove_root_of_empty_store(store):
    assert store.remove('')
    assert store.get() == {}


def test_clear(store, slot):
    store.set('/a', 1)
    store.clear()
    assert store.get() == {}
    assert slot.load() is None
    store.set('/b', 2)
    assert json.loads(slot.load().decode('utf8')) == {'b': 2}


def test_clear_uninitialized_store(slot):
    slot.save(b'{"a": 1}')
    store = PathStore(slot)
    store.clear()
    assert store.get() == {}
    assert slot.load() is None


def test_plan_does_not_apply(store):
    store.set('/a', {})
    assert store.plan('/a/b/c', 1) == [op_add('/a/b', {}), op_add('/a/b/c', 1)]
    assert store.plan('/', {}) == []
    assert store.get() == {'a': {}}


def test_initialize_loads_slot(slot):
    slot.save(b'{"user": {"name": "Alice"}}')
    store = PathStore(slot).initialize()
    assert store.initialized
    assert store.get('/user/name') == 'Alice'


def test_initialize_empty_slot(slot):
    store = PathStore(slot).initialize()
    assert store.get() == {}


def test_initialize_corrupt_slot(slot):
    slot.save(b'{"user": ')
    store = PathStore(slot)
    with pytest.raises(PersistenceCorrupt) as excinfo:
        store.initialize()
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert not store.initialized
    # Nothing is overwritten
    assert slot.load() == b'{"user": '


@pytest.mark.parametrize('data', [b'{"a": NaN}', b'{"a": [Infinity]}', b'{"a": -Infinity}'])
def test_initialize_non_standard_constants(slot, data):
    slot.save(data)
    store = PathStore(slot)
    with pytest.raises(PersistenceCorrupt):
        store.initialize()
    assert not store.initialized


def test_uninitialized_store(slot):
    store = PathStore(slot)
    for call in (store.get, store.exists, lambda: store.set('/a', 1), lambda: store.remove('/a')):
        with pytest.raises(StoreNotInitialized):
            call()


def test_dispose(store, stored_doc):
    store.set('/a', 1)
    store.dispose()
    assert not store.initialized
    with pytest.raises(StoreNotInitialized):
        store.get()
    assert stored_doc() == {'a': 1}


def test_context_manager(slot):
    with PathStore(slot) as store:
        store.set('/a/b', True)
    assert not store.initialized
    with PathStore(slot) as store:
        assert store.get('/a/b') is True


def test_stores_share_slot_through_storage(storage):
    with PathStore(MemorySlot('doc', storage)) as store:
        store.set('/settings/theme', 'dark')
    with PathStore(MemorySlot('doc', storage)) as store:
        assert store.get('/settings') == {'theme': 'dark'}
    with PathStore(MemorySlot('other', storage)) as store:
        assert store.get() == {}


def test_file_backed_store(file_slot):
    with PathStore(file_slot) as store:
        store.set('/a/b', [1, 2])
    with PathStore(FileSlot(file_slot.key, file_slot.directory)) as store:
        assert store.get('/a') == {'b': [1, 2]}


def test_from_config(tmpdir):
    store = PathStore.from_config({'backend': 'memory', 'slot_key': 'k'})
    assert isinstance(store.gateway, MemorySlot)
    assert store.gateway.key == 'k'

    store = PathStore.from_config({'backend': 'file', 'slot_key': 'k', 'storage_dir': str(tmpdir)})
    assert isinstance(store.gateway, FileSlot)
    assert store.gateway.filename == str(tmpdir.join('k.json'))

    with pytest.raises(ValueError):
        PathStore.from_config({'backend': 'cloud'})


def test_reload_from_any_slot(any_slot):
    with PathStore(any_slot) as store:
        store.set('/a/b/c', 1)
        store.set('/a/d', 'æ')
        store.remove('/a/b/c')
    with PathStore(any_slot) as store:
        assert store.get() == {'a': {'b': {}, 'd': 'æ'}}
        store.remove('/')
    with PathStore(any_slot) as store:
        assert store.get() == {}
    assert any_slot.load() is None
