# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import errno
import locale
import os
import sys


ROOT_PATH = "/"


def split_path(path):
    "Split a path on the form '/foo/bar' into ['foo','bar']."
    if path is None:
        return []
    return [x for x in path.strip().split("/") if x]


def join_path(*args):
    "Join a path on the form ['foo','bar'] into '/foo/bar'."
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = args[0]
    args = [str(a) for a in args if a not in ["", "/"]]
    return "/" + "/".join(args)


def normalize_path(path=""):
    """Return the canonical form of a user supplied path.

    Whitespace around the path is trimmed, empty segments are dropped
    and the remaining segments are joined behind a single leading slash,
    so that '', '/', ' //a//b/ ' normalize to '/', '/' and '/a/b'.
    Never fails, and normalize_path(normalize_path(p)) == normalize_path(p).
    """
    return join_path(split_path(path))


def ancestor_paths(path):
    """List the proper ancestors of path, shortest first.

    Neither the root nor path itself is included:
    ancestor_paths('/a/b/c') == ['/a', '/a/b'].
    """
    parts = split_path(path)
    return [join_path(parts[:i]) for i in range(1, len(parts))]


def ensure_dir_exists(path):
    """Ensure a directory exists at a given path"""
    if not os.path.exists(path):
        try:
            os.makedirs(path)
        except OSError as e:
            if e.errno != errno.EEXIST:
                raise


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        # if error-handler is strict, switch to replace
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
