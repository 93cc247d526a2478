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
Decoding and encoding YAML text, using the round-trip mode of
:mod:`ruamel.yaml`.

The tree yamled edits is the round-trip data ruamel.yaml builds: mappings are
:class:`~ruamel.yaml.comments.CommentedMap`, sequences
:class:`~ruamel.yaml.comments.CommentedSeq` instances, and they keep the
comments and the formatting of the text they were read from.

A decoded document is returned as a :class:`DocumentNode`, which holds the
single top-level value of the document.

"""

import io

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.representer import RoundTripRepresenter

from .errors import EncodingError


class Codec:
    """Settings used to decode and encode YAML.

    Change the class attributes (or those of a subclass or instance) to
    alter the output.

    """
    #: The indent of mapping values. Sequences get two more spaces, with
    #: the dash at this indent, which is the layout most YAML files use.
    #: A sequence at the top of a document keeps its dashes in the first
    #: column, the sequences inside it then use the mapping indent.
    indent = 2

    #: The line width; kept high so that long lines are not re-folded.
    width = 4096

    #: If True, quoted strings keep their quotes when written back.
    preserve_quotes = True

    def __init__(self, indent=None):
        if indent is not None:
            self.indent = indent

    def yaml(self, value=None):
        """Return a new, configured :class:`ruamel.yaml.YAML` instance.

        If ``value`` is given, the indent is set up for writing it.

        """
        yaml = YAML()
        yaml.Representer = Representer
        yaml.preserve_quotes = self.preserve_quotes
        yaml.width = self.width
        self.layout(yaml, value)
        return yaml

    def layout(self, yaml, value=None):
        """Set the indent of the YAML instance for writing ``value``."""
        if isinstance(value, DocumentNode):
            value = value.contents[0]
        if isinstance(value, list):
            yaml.indent(mapping=self.indent, sequence=self.indent, offset=0)
        else:
            yaml.indent(mapping=self.indent, sequence=self.indent + 2, offset=self.indent)


class Representer(RoundTripRepresenter):
    """A RoundTripRepresenter that also knows the yamled types.

    The node wrappers register themselves here, see the bottom of
    :mod:`.node` and :mod:`.document`.

    """
    def represent_document_node(self, data):
        return self.represent_data(data.contents[0])


class DocumentNode:
    """The top-level node of a YAML document.

    The single value of the document (usually a mapping) is the only item in
    the :attr:`contents` list. Wrap a DocumentNode in a
    :class:`~.document.Document` to edit it.

    """
    __slots__ = ('contents',)

    def __init__(self, value=None):
        self.contents = [value]

    def __repr__(self):
        return '<{} {}>'.format(type(self).__name__, type(self.contents[0]).__name__)


Representer.add_representer(DocumentNode, Representer.represent_document_node)


def decode(stream, indent=None):
    """Decode one YAML document from a string or a file-like object.

    Returns a :class:`DocumentNode`. Raises :class:`~.errors.EncodingError`
    if the text is not valid YAML or contains more than one document.

    """
    yaml = Codec(indent).yaml()
    try:
        data = yaml.load(stream)
    except YAMLError as e:
        raise EncodingError("invalid YAML: {}".format(e)) from e
    return DocumentNode(data)


def decode_all(stream, indent=None):
    """Decode all YAML documents in a string or file-like object.

    Returns a list of :class:`DocumentNode` instances.

    """
    yaml = Codec(indent).yaml()
    try:
        return [DocumentNode(data) for data in yaml.load_all(stream)]
    except YAMLError as e:
        raise EncodingError("invalid YAML: {}".format(e)) from e


def dump(value, stream, indent=None):
    """Encode the value as a YAML document to the file-like object."""
    yaml = Codec(indent).yaml(value)
    try:
        yaml.dump(value, stream)
    except YAMLError as e:
        raise EncodingError("could not encode value as YAML: {}".format(e)) from e


def dumps(value, indent=None):
    """Return the value encoded as YAML text."""
    buf = io.StringIO()
    dump(value, buf, indent)
    return buf.getvalue()


class Encoder:
    """Writes one or more YAML documents to a stream.

    The stream is owned by the caller. The first document is written as is,
    all following ones are preceded by a ``---`` line, so that several
    documents can be combined in one output::

        >>> out = io.StringIO()
        >>> enc = Encoder(out)
        >>> enc.encode({'a': 1})
        >>> enc.encode({'b': 2})
        >>> out.getvalue()
        'a: 1\\n---\\nb: 2\\n'

    Nodes and documents can be written using their ``encode()`` method.

    """
    def __init__(self, stream, indent=None):
        self.stream = stream
        self._codec = Codec(indent)
        self._yaml = self._codec.yaml()
        self._count = 0

    def count(self):
        """Return the number of documents written so far."""
        return self._count

    def encode(self, value):
        """Write the value as a YAML document."""
        if self._count:
            self._yaml.explicit_start = True
        self._codec.layout(self._yaml, value)
        try:
            self._yaml.dump(value, self.stream)
        except YAMLError as e:
            raise EncodingError("could not encode value as YAML: {}".format(e)) from e
        self._count += 1
