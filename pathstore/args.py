# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_pathstore_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            # Only our own options: sub-command parsers share the
            # entrypoint, and their defaults overwrite the parent's values
            dests = {action.dest for action in self._actions}
            self.set_defaults(**{k: v for k, v in defs.items() if k in dests})
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_pathstore_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_pathstore_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        entrypoint = parser.prog.split(' ')[0]
        header = entrypoint_configurables[entrypoint].__name__
        config = build_config(entrypoint, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def json_value(text):
    """Argparse type for values given as JSON text"""
    try:
        return json.loads(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            "value is not valid JSON (%s): %r" % (e, text))


def add_generic_args(parser):
    """Adds a set of arguments common to all pathstore commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_store_args(parser):
    """Adds arguments selecting the slot the store is mirrored to.
    """
    parser.add_argument(
        '--backend',
        default='file',
        choices=('file', 'memory'),
        help="where the document slot lives. Default is 'file'.")
    parser.add_argument(
        '-k', '--slot-key',
        dest='slot_key',
        default='pathstore',
        help="key of the slot holding the document.")
    parser.add_argument(
        '-d', '--storage-dir',
        dest='storage_dir',
        default='.',
        help="directory holding the slot file of the 'file' backend.")


def add_show_args(parser):
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action='store_false',
        default=True,
        help="do not colorize output.")
