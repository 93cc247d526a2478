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
This module defines the :class:`Node` class, which is used to read and
change values anywhere in a YAML tree.

A Node does not hold a value itself, it refers to a slot in the round-trip
tree: a mapping and one of its keys, or a sequence and an index. The value is
read from the slot every time it is needed, so all Nodes referring to the
same slot see every change made through one of them.

Writing is done in two flavours. The ``set`` methods refuse to change the
kind of an existing value (a mapping can't become a scalar, etc.) and raise
:class:`~.errors.IncompatibleKindError` instead, but null can always be
changed into anything. The ``replace`` methods change whatever is in the way.

Missing containers are created on the fly when writing to a deeper path::

    >>> import yamled
    >>> d = yamled.loads("foo: bar\\n")
    >>> node = d.set_at(('spec', 'ports', 0, 'name'), 'http')
    >>> print(d.dumps(), end='')
    foo: bar
    spec:
      ports:
        - name: http

"""

import logging

from . import codec
from . import comments
from . import util
from .errors import (
    DecodingError, IncompatibleKindError, InvalidStepError, NotAMappingError,
    NotASequenceError, NotFoundError, PathError, StepNotFoundError,
)
from .keynode import KeyNode
from .path import INDEX, KEY, Path, step_type, to_path


logger = logging.getLogger(__name__)


def _steps(steps):
    """Return the steps given to a method as a Path.

    A single Path may be given instead of separate steps.

    """
    if len(steps) == 1 and isinstance(steps[0], Path):
        return steps[0]
    return Path(*steps)


class Node:
    """Wraps the value at ``container[key]`` in the round-trip tree.

    The ``container`` is a mapping or a sequence, and must contain ``key``.
    A :class:`~.codec.DocumentNode` can't be wrapped directly, use a
    :class:`~.document.Document` for that.

    Use :meth:`new` to wrap a value that is not in a tree.

    """
    __slots__ = ('_parent', '_key')

    def __init__(self, container, key):
        if container is None:
            raise ValueError("cannot wrap an absent node")
        elif isinstance(container, codec.DocumentNode):
            raise ValueError("cannot wrap a document node, use a Document instead")
        try:
            container[key]
        except (KeyError, IndexError, TypeError):
            raise ValueError("{!r} is not in the container".format(key)) from None
        self._parent = container
        self._key = key

    @classmethod
    def new(cls, value=None):
        """Return a Node wrapping a value that is not part of a tree."""
        return cls([value], 0)

    def __repr__(self):
        return '<{} {} at {!r}>'.format(type(self).__name__, self.kind, self._key)

    def __str__(self):
        return self.to_string()

    @property
    def container(self):
        """The mapping or sequence our value lives in."""
        return self._parent

    @property
    def key(self):
        """The key or index of our value in the :attr:`container`."""
        return self._key

    @property
    def value(self):
        """The wrapped round-trip value."""
        return self._parent[self._key]

    @property
    def kind(self):
        """One of :data:`~.util.MAPPING`, :data:`~.util.SEQUENCE` or
        :data:`~.util.SCALAR`."""
        return util.kind(self.value)

    def style(self):
        """Return the name of the formatting style of our value."""
        return util.style_name(self.value)

    def is_null(self):
        """Return True if our value is null."""
        return util.is_null(self.value)

    def dump(self, file=None, style=None):
        """Display a graphical representation of our value, for debugging."""
        util.dump(self.value, file, style)

    ## reading

    def _child(self, step):
        """Return a Node for a direct child, raises a NotFoundError subclass."""
        value = self.value
        t = step_type(step)
        if t is KEY:
            if not util.is_mapping(value):
                raise NotAMappingError(path=(step,))
            key = util.find_key(value, step)
            if key is util.MISSING:
                raise StepNotFoundError("key not found", (step,))
            return Node(value, key)
        elif t is INDEX:
            if not util.is_sequence(value):
                raise NotASequenceError(path=(step,))
            if not 0 <= step < len(value):
                raise StepNotFoundError("index out of range", (step,))
            return Node(value, step)
        raise StepNotFoundError("cannot handle {} steps".format(type(step).__name__), (step,))

    def lookup(self, *steps):
        """Return the Node at the path given by ``steps``.

        Raises a :class:`~.errors.NotFoundError` subclass if the path can't
        be followed; its ``path`` attribute has the steps up to and including
        the one that failed.

        """
        path = _steps(steps)
        if not path:
            raise StepNotFoundError("no steps given")
        step, rest = path.consume()
        child = self._child(step)
        if not rest:
            return child
        try:
            return child.lookup(rest)
        except NotFoundError as e:
            e.prepend(step)
            raise

    def get(self, *steps):
        """Return the Node at the path, or None if it can't be found."""
        try:
            return self.lookup(*steps)
        except NotFoundError:
            return None

    def must_get(self, *steps):
        """Return the Node at the path, or a null Node if it can't be found.

        The null Node is not part of the tree, writing to it has no effect on
        our tree.

        """
        node = self.get(*steps)
        return node if node is not None else Node.new()

    def get_key(self, *steps):
        """Return a :class:`~.keynode.KeyNode` for the mapping key at the path.

        Returns None if the path can't be found or the last step is not a key
        in a mapping.

        """
        path = _steps(steps)
        if not path:
            return None
        parent = self.get(path.parent()) if len(path) > 1 else self
        if parent is None:
            return None
        mapping, step = parent.value, path.end()
        if not util.is_mapping(mapping) or step_type(step) is not KEY:
            return None
        key = util.find_key(mapping, step)
        if key is not util.MISSING:
            return KeyNode(mapping, key)

    ## writing

    def set(self, value):
        """Set our value, which must not change its kind.

        Raises :class:`~.errors.IncompatibleKindError` if a value of another
        kind is there, unless it is null. Returns self.

        """
        self._set(util.create_node(value), True)
        return self

    def replace(self, value):
        """Set our value, whatever is there. Returns self."""
        self._set(util.create_node(value), False)
        return self

    def _set(self, new, forbid):
        old = self.value
        if self._is_alias():
            if forbid and not util.is_null(new):
                raise IncompatibleKindError("cannot change an alias into {}".format(
                    util.kind_name(new)))
            logger.debug("replacing alias at %r", self._key)
            self._parent[self._key] = new
            return
        if forbid and not util.compatible_kinds(old, new):
            raise IncompatibleKindError("cannot change {} into {}".format(
                util.kind_name(old), util.kind_name(new)))
        util.overwrite(self._parent, self._key, new)

    def set_key(self, step, value):
        """Set the value of the child at ``step``, and return its Node.

        A key that does not exist is appended to the mapping. A sequence is
        padded with nulls up to the index. An existing child can't change its
        kind, and our own value must be a fitting container or null.

        """
        return self._set_key(step, value, True)

    def replace_key(self, step, value):
        """Set the value of the child at ``step``, and return its Node.

        Other than :meth:`set_key`, kinds may change, and if our value is not
        a container ``step`` can be used on, it is replaced with one.

        """
        return self._set_key(step, value, False)

    def _set_key(self, step, value, forbid):
        Path(step).validate()
        return self._put(step, util.create_node(value), forbid)

    def set_at(self, path, value):
        """Set the value at the path, and return its Node.

        The path may be a :class:`~.path.Path`, a tuple of steps or a single
        step. Missing containers are created on the way, a mapping if the
        next step is a key, a sequence if it is an index.

        """
        return self._set_at(path, value, True)

    def replace_at(self, path, value):
        """Like :meth:`set_at`, but replaces everything that is in the way."""
        return self._set_at(path, value, False)

    def _set_at(self, path, value, forbid):
        path = to_path(path)
        if not path:
            raise ValueError("path must not be empty")
        path.validate()
        return self._put_at(path, util.create_node(value), forbid)

    def _coerce(self, step, forbid):
        """Make sure ``step`` can be used on our value.

        A null value is changed into a fitting empty container, any other
        value only when not ``forbid``.

        """
        if self._is_alias():
            if forbid:
                raise IncompatibleKindError("cannot write through an alias", (step,))
            logger.debug("copying alias at %r before changing it", self._key)
            util.unalias(self._parent, self._key)
        value = self.value
        if util.fits(value, step):
            return
        elif forbid and not util.is_null(value):
            raise IncompatibleKindError("cannot use a {} step on a {}".format(
                step_type(step), util.kind_name(value)), (step,))
        logger.debug("changing %s at %r into a container for %r",
            util.kind_name(value), self._key, step)
        util.overwrite(self._parent, self._key, util.create_fitting_empty_node(step))

    def _put(self, step, new, forbid):
        """Put the new tree value at ``step`` and return its Node."""
        self._coerce(step, forbid)
        container = self.value
        if util.is_mapping(container):
            key = util.find_key(container, step)
            if key is util.MISSING:
                container[step] = new
                return Node(container, step)
        else:
            key = step
            if len(container) <= key:
                container.extend([None] * (key + 1 - len(container)))
        node = Node(container, key)
        try:
            node._set(new, forbid)
        except PathError as e:
            e.prepend(step)
            raise
        return node

    def _put_at(self, path, new, forbid):
        step, rest = path.consume()
        if not rest:
            return self._put(step, new, forbid)
        self._coerce(step, forbid)
        child = self.get(step)
        if child is None:
            logger.debug("creating missing container at %r", step)
            child = self._put(step, util.create_fitting_empty_node(rest.start()), forbid)
        try:
            return child._put_at(rest, new, forbid)
        except PathError as e:
            e.prepend(step)
            raise

    def delete_key(self, *steps):
        """Delete the mapping entry or sequence item at the path.

        Deleting something that is not there does nothing. Items following a
        deleted sequence item move up one place.

        """
        path = _steps(steps)
        if not path:
            raise ValueError("no steps given")
        parent, nodes = self, [self]
        for step in path.parent():
            parent = parent.get(step)
            if parent is None:
                logger.debug("not deleting %s, parent not found", path)
                return
            nodes.append(parent)
        container, step = parent.value, path.end()
        t = step_type(step)
        if t is None:
            raise InvalidStepError("cannot handle {} steps".format(type(step).__name__), path)
        elif any(node._is_alias() for node in nodes):
            logger.debug("not deleting %s, it is behind an alias", path)
            return
        elif t is KEY and util.is_mapping(container):
            key = util.find_key(container, step)
            if key is not util.MISSING:
                comments.detach(container, key)
                del container[key]
                return
        elif t is INDEX and util.is_sequence(container):
            if 0 <= step < len(container):
                comments.detach(container, step)
                del container[step]
                return
        logger.debug("not deleting %s, nothing there", path)

    ## comments

    def _can_comment(self):
        """Raise ValueError if our scalar value has no place to store comments."""
        if not comments.has_comments(self._parent) and not self._is_collection():
            raise ValueError("a scalar outside a collection can't have comments")

    def _is_alias(self):
        return util.is_alias(self._parent, self._key)

    def _is_collection(self):
        return isinstance(self.value, (dict, list))

    def head_comment(self):
        """Return the comment above our value."""
        value = self.value
        if self._is_collection():
            if util.is_mapping(self._parent):
                text = comments.value_start(self._parent, self._key)
                if text:
                    return text
            return comments.start(value)
        elif comments.has_comments(self._parent):
            return comments.before(self._parent, self._key)
        return ''

    def set_head_comment(self, text):
        """Set the comment above our value. Returns self.

        A scalar value has no line of its own, so for a scalar in a mapping
        this is the same comment as the head comment of its
        :class:`~.keynode.KeyNode`, and setting one replaces the other. Only
        a collection value has a head comment between its key and itself.

        """
        self._can_comment()
        if not self._is_collection():
            comments.set_before(self._parent, self._key, text)
        elif util.is_mapping(self._parent):
            comments.set_value_start(self._parent, self._key, text)
        else:
            comments.set_start(self.value, text)
        return self

    def line_comment(self):
        """Return the comment at the end of our value's line."""
        if comments.has_comments(self._parent):
            return comments.eol(self._parent, self._key)
        elif self._is_collection():
            return comments.start_eol(self.value)
        return ''

    def set_line_comment(self, text):
        """Set the comment at the end of our value's line. Returns self."""
        self._can_comment()
        if comments.has_comments(self._parent):
            comments.set_eol(self._parent, self._key, text)
        else:
            comments.set_start_eol(self.value, text)
        return self

    def foot_comment(self):
        """Return the comment below our value."""
        if self._is_collection():
            return comments.end(self.value)
        elif comments.has_comments(self._parent):
            return comments.after(self._parent, self._key)
        return ''

    def set_foot_comment(self, text):
        """Set the comment below our value. Returns self."""
        self._can_comment()
        if self._is_collection():
            comments.set_end(self.value, text)
        else:
            comments.set_after(self._parent, self._key, text)
        return self

    ## conversions

    def to_string(self):
        """Return the text of a scalar value, and an empty string otherwise.

        Booleans are returned as ``"true"`` or ``"false"``, and null as an
        empty string.

        """
        value = self.value
        if isinstance(value, bool):
            return "true" if value else "false"
        elif value is None or self._is_collection():
            return ""
        return str(value)

    def to_int(self):
        """Return the value if it is an integer, and 0 otherwise."""
        value = self.value
        if isinstance(value, int) and not isinstance(value, bool):
            return int(value)
        return 0

    def to_list(self):
        """Return a sequence as a plain :class:`list`, None for other kinds."""
        value = self.value
        if util.is_sequence(value):
            return util.plain(value)

    def to_dict(self):
        """Return a mapping as a plain :class:`dict`, None for other kinds."""
        value = self.value
        if util.is_mapping(value):
            return util.plain(value)

    def to(self, cls):
        """Convert our value to an instance of ``cls``.

        A mapping is given as keyword arguments, unless ``cls`` is a mapping
        type itself. Other values are given as the single argument. Raises
        :class:`~.errors.DecodingError` if the conversion fails.

        """
        data = util.plain(self.value)
        try:
            if isinstance(data, dict) and not (isinstance(cls, type) and issubclass(cls, dict)):
                return cls(**data)
            return cls(data)
        except (TypeError, ValueError) as e:
            raise DecodingError("cannot convert {} to {}: {}".format(
                util.kind_name(self.value), getattr(cls, '__name__', cls), e)) from e

    ## encoding

    def dumps(self, indent=None):
        """Return our value as YAML text."""
        return codec.dumps(self.value, indent)

    def to_bytes(self, indent=None):
        """Return our value as UTF-8 encoded YAML."""
        return self.dumps(indent).encode('utf-8')

    def encode(self, encoder):
        """Write our value as a document using a :class:`~.codec.Encoder`."""
        encoder.encode(self.value)


def _represent_node(representer, node):
    return representer.represent_data(node.value)


codec.Representer.add_multi_representer(Node, _represent_node)
