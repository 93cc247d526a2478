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
The :class:`Document` wraps a decoded YAML document.

A Document has the same methods as a :class:`~.node.Node`, they operate on the
top-level value of the document. The comment setters return the Document, so
they can be chained.

A Document must be written using :meth:`Document.dumps` or
:meth:`Document.encode`. Handing it to another serializer is an error.

"""

from . import codec
from . import util
from .node import Node


class Document:
    """Wraps a :class:`~.codec.DocumentNode`."""

    __slots__ = ('_document',)

    def __init__(self, document):
        if not isinstance(document, codec.DocumentNode):
            raise ValueError("can only wrap a DocumentNode, not {}".format(
                type(document).__name__))
        self._document = document

    @classmethod
    def load(cls, stream, indent=None):
        """Decode a Document from a file-like object or a string."""
        return cls(codec.decode(stream, indent))

    @classmethod
    def loads(cls, text, indent=None):
        """Decode a Document from a string."""
        return cls(codec.decode(text, indent))

    def __repr__(self):
        return '<{} {}>'.format(type(self).__name__, self.node().kind)

    def __str__(self):
        return self.node().to_string()

    def __reduce_ex__(self, protocol):
        raise RuntimeError("a Document can't be pickled or copied, use dumps() or encode()")

    @property
    def document_node(self):
        """The wrapped :class:`~.codec.DocumentNode`."""
        return self._document

    def node(self):
        """Return a new Node for the top-level value of the document."""
        return Node(self._document.contents, 0)

    @property
    def value(self):
        """The top-level value of the document."""
        return self._document.contents[0]

    @property
    def kind(self):
        return self.node().kind

    def is_null(self):
        return self.node().is_null()

    def dump(self, file=None, style=None):
        """Display a graphical representation of the document, for debugging."""
        util.dump(self._document, file, style)

    def lookup(self, *steps):
        return self.node().lookup(*steps)

    def get(self, *steps):
        return self.node().get(*steps)

    def must_get(self, *steps):
        return self.node().must_get(*steps)

    def get_key(self, *steps):
        return self.node().get_key(*steps)

    def set(self, value):
        """Set the top-level value, which must not change its kind. Returns self."""
        self.node().set(value)
        return self

    def replace(self, value):
        """Set the top-level value. Returns self."""
        self.node().replace(value)
        return self

    def set_key(self, step, value):
        return self.node().set_key(step, value)

    def replace_key(self, step, value):
        return self.node().replace_key(step, value)

    def set_at(self, path, value):
        return self.node().set_at(path, value)

    def replace_at(self, path, value):
        return self.node().replace_at(path, value)

    def delete_key(self, *steps):
        self.node().delete_key(*steps)

    def head_comment(self):
        return self.node().head_comment()

    def set_head_comment(self, text):
        self.node().set_head_comment(text)
        return self

    def line_comment(self):
        return self.node().line_comment()

    def set_line_comment(self, text):
        self.node().set_line_comment(text)
        return self

    def foot_comment(self):
        return self.node().foot_comment()

    def set_foot_comment(self, text):
        self.node().set_foot_comment(text)
        return self

    def to_string(self):
        return self.node().to_string()

    def to_int(self):
        return self.node().to_int()

    def to_list(self):
        return self.node().to_list()

    def to_dict(self):
        return self.node().to_dict()

    def to(self, cls):
        return self.node().to(cls)

    def dumps(self, indent=None):
        """Return the document as YAML text."""
        return codec.dumps(self._document, indent)

    def to_bytes(self, indent=None):
        """Return the document as UTF-8 encoded YAML."""
        return self.dumps(indent).encode('utf-8')

    def encode(self, encoder):
        """Write the document using a :class:`~.codec.Encoder`."""
        encoder.encode(self._document)


def _refuse_document(representer, document):
    raise RuntimeError("a Document can't be represented directly, use its dumps() or encode() method")


codec.Representer.add_multi_representer(Document, _refuse_document)
