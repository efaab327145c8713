# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import json
import re
import sys

import colorama
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer

from .patch_format import PatchOp


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78


ColoredConstants = namedtuple('ColoredConstants', (
    'ADD',
    'REMOVE',
    'REPLACE',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        ADD     = '{color}+  '.format(color=colorama.Fore.GREEN),
        REMOVE  = '{color}-  '.format(color=colorama.Fore.RED),
        REPLACE = '{color}:  '.format(color=colorama.Fore.YELLOW),
        INFO    = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET   = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        ADD     = '+  ',
        REMOVE  = '-  ',
        REPLACE = ':  ',
        INFO    = '## ',
        RESET   = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def REPLACE(self):
        return col_const[self.use_color].REPLACE

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def to_json_text(value):
    "Indented JSON text for value, keeping non-ascii characters."
    return json.dumps(value, indent=2, ensure_ascii=False)


_json_token = re.compile(
    r'("(\\u[a-zA-Z0-9]{4}|\\[^u]|[^\\"])*"(\s*:)?'
    r'|\b(true|false|null)\b'
    r'|-?\d+(?:\.\d*)?(?:[eE][+-]?\d+)?)')


def _token_class(token):
    if token.startswith('"'):
        return 'key' if token.endswith(':') else 'string'
    elif token in ('true', 'false'):
        return 'boolean'
    elif token == 'null':
        return 'null'
    return 'number'


def syntax_highlight(value):
    """Render a JSON value as indented, HTML-marked-up text.

    Each string, number, boolean, null and object key is wrapped
    in <span class="..."> with the token class as class name. The
    JSON text is HTML-escaped first.
    """
    text = to_json_text(value)
    text = text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
    return _json_token.sub(
        lambda m: '<span class="%s">%s</span>' % (_token_class(m.group(0)), m.group(0)),
        text)


def colorize_json(value, use_color=True):
    "Render a JSON value as indented text, colored for a terminal."
    text = to_json_text(value)
    if not use_color:
        return text + "\n"
    return highlight(text, JsonLexer(), Terminal256Formatter())


def format_value(v):
    "Format simple value for printing. Strings are kept as is, other values use JSON."
    if isinstance(v, str):
        return v
    return json.dumps(v, ensure_ascii=False)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list):
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = json.dumps(li, ensure_ascii=False)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def pretty_print_patch_entry(e, config=DefaultConfig):
    op = e.op
    if op == PatchOp.ADD:
        marker = config.ADD
    elif op == PatchOp.REPLACE:
        marker = config.REPLACE
    elif op == PatchOp.REMOVE:
        marker = config.REMOVE
    else:
        raise ValueError("Invalid op {}.".format(op))

    config.out.write("%s%s %s%s\n" % (marker, op, e.path, config.RESET))
    if op != PatchOp.REMOVE:
        pretty_print_value(e.value, IND + "   ", config)


def pretty_print_patch(patch, config=DefaultConfig):
    "Print a patch, one entry after the other, in application order."
    if not patch:
        config.out.write("%sno operations%s\n" % (config.INFO, config.RESET))
        return
    for e in patch:
        pretty_print_patch_entry(e, config)
