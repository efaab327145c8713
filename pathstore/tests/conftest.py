# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from pathstore import PathStore, MemorySlot, FileSlot


schema_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


@fixture
def storage():
    """A shared dict standing in for the host's key-value storage"""
    return {}


@fixture
def slot(storage):
    return MemorySlot('pathstore', storage)


@fixture
def file_slot(tmpdir):
    return FileSlot('pathstore', str(tmpdir.join('slots')))


@fixture
def store(slot):
    """An initialized store on an empty memory slot"""
    s = PathStore(slot).initialize()
    yield s
    s.dispose()


@fixture
def stored_doc(slot):
    """Read back what is currently persisted in the slot"""
    def read():
        data = slot.load()
        return None if data is None else json.loads(data.decode('utf8'))
    return read


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers


@fixture
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)


@fixture(params=['memory', 'file'])
def any_slot(request, tmpdir):
    """Each slot backend in turn, limited by the --backend option"""
    only = request.config.getoption('--backend', default=None)
    if only and only != request.param:
        skip('slot backend %r not selected' % request.param)
    if request.param == 'memory':
        return MemorySlot('pathstore')
    return FileSlot('pathstore', str(tmpdir.join('slots')))
