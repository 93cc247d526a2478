# -*- coding: utf-8 -*-
#
# This file is part of `yamled`, a library for editing YAML documents in place
#
# Copyright © 2026 by the yamled developers
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Some utility functions to inspect and build values of the round-trip tree.
"""

import copy

from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.scalarstring import (
    DoubleQuotedScalarString, FoldedScalarString, LiteralScalarString,
    SingleQuotedScalarString,
)

from . import codec
from .errors import EncodingError, InvalidStepError
from .path import INDEX, KEY, step_type


MAPPING = "Mapping"
SEQUENCE = "Sequence"
SCALAR = "Scalar"
DOCUMENT = "Document"


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


#: Returned by :func:`find_key` when there is no matching key; None can't be
#: used because null is a valid mapping key.
MISSING = object()


def is_mapping(value):
    """Return True if the value is a mapping."""
    return isinstance(value, dict)


def is_sequence(value):
    """Return True if the value is a sequence."""
    return isinstance(value, list)


def is_null(value):
    """Return True if the value is the null scalar."""
    return value is None


def kind(value):
    """Return the kind of the value: :data:`MAPPING`, :data:`SEQUENCE`,
    :data:`SCALAR` or :data:`DOCUMENT`."""
    if isinstance(value, dict):
        return MAPPING
    elif isinstance(value, list):
        return SEQUENCE
    elif isinstance(value, codec.DocumentNode):
        return DOCUMENT
    return SCALAR


def kind_name(value):
    """Return the kind of the value for use in messages; null is "Null"."""
    return "Null" if value is None else kind(value)


def style_name(value):
    """Return a readable name for the formatting style of the value."""
    if isinstance(value, (dict, list)):
        try:
            flow = value.fa.flow_style()
        except AttributeError:
            flow = False
        return "Flow" if flow else "Block"
    elif isinstance(value, LiteralScalarString):
        return "Literal"
    elif isinstance(value, FoldedScalarString):
        return "Folded"
    elif isinstance(value, DoubleQuotedScalarString):
        return "DoubleQuoted"
    elif isinstance(value, SingleQuotedScalarString):
        return "SingleQuoted"
    return "Plain"


def compatible_kinds(a, b):
    """Return True if a value of kind ``a`` may be changed into one of kind ``b``.

    Null is compatible with everything.

    """
    return is_null(a) or is_null(b) or kind(a) == kind(b)


def fits(value, step):
    """Return True if ``step`` can be used to address a child of the value."""
    t = step_type(step)
    return (t is KEY and is_mapping(value)) or (t is INDEX and is_sequence(value))


def key_text(key):
    """Return the text of a mapping key, the way it reads in YAML."""
    if isinstance(key, str):
        return key
    elif isinstance(key, bool):
        return "true" if key else "false"
    elif key is None:
        return "null"
    return str(key)


def find_key(mapping, step):
    """Return the first key in the mapping whose text equals ``step``.

    Returns :data:`MISSING` if there is no such key.

    """
    for key in mapping:
        if key_text(key) == step:
            return key
    return MISSING


def overwrite(container, key, value):
    """Put the value in ``container[key]``.

    If the old value and the new value are collections of the same type, the
    old collection is emptied and filled with the contents of the new one,
    and it takes over the comments and formatting of the new collection. So
    everything referring to the old collection sees the new contents.

    Otherwise, the new value simply replaces the old one in the container.

    """
    old = container[key]
    if type(old) is type(value) and isinstance(old, CommentedMap):
        for k in list(old):
            del old[k]
        for k, v in value.items():
            old[k] = v
        value.copy_attributes(old)
    elif type(old) is type(value) and isinstance(old, CommentedSeq):
        old.clear()
        old.extend(value)
        value.copy_attributes(old)
    else:
        container[key] = value


def anchor_name(value):
    """Return the name of the anchor of a collection, None if it has none."""
    try:
        anchor = value.yaml_anchor()
    except AttributeError:
        return None
    return anchor.value if anchor is not None else None


def is_alias(container, key):
    """Return True if the value at ``key`` is an alias.

    ruamel.yaml puts the same collection object in every place an anchor is
    referred to. Every place but the first one in the text is an alias: the
    collection starts before the mapping key or the sequence item that holds
    it.

    """
    value = container[key]
    if not isinstance(value, (dict, list)) or anchor_name(value) is None:
        return False
    try:
        pos = (value.lc.line, value.lc.col)
        if is_mapping(container):
            return pos < tuple(container.lc.key(key))
        elif key:
            return pos <= tuple(container.lc.item(key - 1))
        return pos < (container.lc.line, container.lc.col)
    except (AttributeError, KeyError, TypeError, IndexError):
        return False


def unalias(container, key):
    """Replace the alias at ``key`` with a copy of the collection, and return it.

    The copy has no anchor, so it can be changed on its own.

    """
    value = copy.deepcopy(container[key])
    value.anchor.value = None
    container[key] = value
    return value


def plain(value):
    """Return the value converted to plain Python types.

    Mappings become :class:`dict`, sequences :class:`list`, and the
    round-trip scalar types their builtin base types.

    """
    if isinstance(value, dict):
        return {plain(k): plain(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [plain(v) for v in value]
    elif isinstance(value, bool):
        return bool(value)
    elif isinstance(value, int):
        return int(value)
    elif isinstance(value, float):
        return float(value)
    elif isinstance(value, str):
        return str(value)
    return value


def create_node(value):
    """Return a new tree value for any Python value.

    The value is encoded as YAML and decoded again, which turns it into the
    same round-trip types a parsed document consists of. Node wrappers can
    also be given, their value is copied.

    Raises :class:`~.errors.EncodingError` if the value can't be represented.

    """
    document = codec.decode(codec.dumps(value))
    if not isinstance(document, codec.DocumentNode):
        raise EncodingError(
            "expected a Document node from decoding a YAML string, but got {}".format(
                kind(document)))
    value = document.contents[0]
    # a copy must not define the anchor again
    if isinstance(value, (dict, list)) and anchor_name(value) is not None:
        value.anchor.value = None
    return value


def create_fitting_empty_node(step):
    """Return an empty value that ``step`` can be used on.

    A key step yields an empty mapping, an index step an empty sequence, and
    None yields the null value.

    """
    if step is None:
        return None
    t = step_type(step)
    if t is KEY:
        return CommentedMap()
    elif t is INDEX:
        return CommentedSeq()
    raise InvalidStepError(
        "cannot handle {} steps when traversing paths".format(type(step).__name__))


def dump(value, file=None, style=None):
    """Display a graphical representation of a tree value.

    The file object defaults to stdout, and the style to "round". You can
    choose any style that's in the ``DUMP_STYLES`` dictionary. A
    :class:`~.codec.DocumentNode` may also be given.

    """
    d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]

    def describe(label, value):
        k = kind(value)
        if k is DOCUMENT:
            text = k
        elif k is SCALAR:
            text = "{}({}): {!r}".format(k, style_name(value), plain(value))
        else:
            text = "{}({})".format(k, style_name(value))
        return text if label is None else "{} {}".format(label, text)

    def children(value):
        if isinstance(value, codec.DocumentNode):
            return [(None, value.contents[0])]
        elif is_mapping(value):
            return [(key_text(k), v) for k, v in value.items()]
        elif is_sequence(value):
            return [("[{}]".format(i), v) for i, v in enumerate(value)]
        return []

    def show(label, value, prefix, last, ancestors):
        head = prefix + (d[3] if last else d[2]) if ancestors else ''
        if id(value) in ancestors:
            print(head + "{} (recursive)".format(label), file=file)
            return
        print(head + describe(label, value), file=file)
        if ancestors:
            prefix += d[1] if last else d[0]
        items = children(value)
        for n, (l, v) in enumerate(items, 1):
            show(l, v, prefix, n == len(items), ancestors + (id(value),))

    show(None, value, '', True, ())
