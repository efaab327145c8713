# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_store_args, add_show_args,
    json_value,
)
from .log import PathStoreError, error
from .nodes import Missing
from .prettyprint import (
    PrettyPrintConfig, colorize_json, syntax_highlight,
    pretty_print_value, pretty_print_patch,
)
from .store import PathStore
from .utils import setup_std_streams


_description = """Read and write a JSON document stored in a slot,
addressing values by slash separated paths such as /user/settings/theme.
"""


# This printer is to keep the unit tests passing,
# some tests capture output with capsys which doesn't
# pick up on sys.stdout.write()
class Printer:
    def write(self, text):
        print(text, end="")


def cmd_get(store, args):
    value = store.get(args.path)
    if value is Missing:
        print("Path does not exist: {}".format(args.path), file=sys.stderr)
        return 1
    if args.format == 'html':
        print(syntax_highlight(value))
    elif args.format == 'tree':
        config = PrettyPrintConfig(out=Printer(), use_color=args.use_color)
        pretty_print_value(value, config=config)
    elif args.use_color:
        print(colorize_json(value), end="")
    else:
        print(json.dumps(value, indent=2, ensure_ascii=False))
    return 0


def cmd_set(store, args):
    store.set(args.path, args.value)
    return 0


def cmd_remove(store, args):
    return 0 if store.remove(args.path) else 1


def cmd_exists(store, args):
    found = store.exists(args.path)
    print("true" if found else "false")
    return 0 if found else 1


def cmd_clear(store, args):
    store.clear()
    return 0


def cmd_plan(store, args):
    config = PrettyPrintConfig(out=Printer(), use_color=args.use_color)
    pretty_print_patch(store.plan(args.path, args.value), config)
    return 0


def main_store(args):
    store = PathStore.from_config(args)
    try:
        with store:
            return args.func(store, args)
    except PathStoreError as e:
        error("%s", e)
        return 1


def _build_arg_parser(prog=None):
    """Creates an argument parser for the pathstore command."""
    parser = ConfigBackedParser(
        prog=prog or 'pathstore',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_store_args(parser)
    subparsers = parser.add_subparsers(dest='command', title='commands')
    subparsers.required = True

    get = subparsers.add_parser('get', help="print the value at a path")
    get.add_argument('path', nargs='?', default='/', help="path to read, default is the whole document")
    get.add_argument(
        '--html', dest='format', action='store_const', const='html', default='json',
        help="print the value marked up as HTML.")
    get.add_argument(
        '--tree', dest='format', action='store_const', const='tree',
        help="print the value as an indented key/value tree.")
    add_show_args(get)
    get.set_defaults(func=cmd_get)

    set_ = subparsers.add_parser('set', help="write a JSON value at a path")
    set_.add_argument('path')
    set_.add_argument('value', type=json_value, help="value as JSON text, e.g. '\"dark\"' or '{\"a\": 1}'")
    set_.set_defaults(func=cmd_set)

    remove = subparsers.add_parser('remove', help="remove the value at a path")
    remove.add_argument('path')
    remove.set_defaults(func=cmd_remove)

    exists = subparsers.add_parser('exists', help="check whether a path exists")
    exists.add_argument('path')
    exists.set_defaults(func=cmd_exists)

    clear = subparsers.add_parser('clear', help="erase the whole document")
    clear.set_defaults(func=cmd_clear)

    plan = subparsers.add_parser('plan', help="show the operations 'set' would apply")
    plan.add_argument('path')
    plan.add_argument('value', type=json_value)
    add_show_args(plan)
    plan.set_defaults(func=cmd_plan)

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_store(arguments)


if __name__ == "__main__":
    sys.exit(main())
