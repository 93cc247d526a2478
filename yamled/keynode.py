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
The :class:`KeyNode` gives access to the comments of a mapping entry.

Comments on a key are written above the key, while the head comment of a
collection value is written between the key and the collection::

    # key comment
    spec:
      # value comment
      replicas: 3

For scalar values both are the same, the value has no line of its own.

"""

from . import comments
from . import util


class KeyNode:
    """Refers to the key ``key`` in ``mapping``.

    Use :meth:`.node.Node.get_key` to get one.

    """
    __slots__ = ('_mapping', '_key')

    def __init__(self, mapping, key):
        if not util.is_mapping(mapping):
            raise ValueError("a KeyNode needs a mapping")
        elif key not in mapping:
            raise ValueError("{!r} is not in the mapping".format(key))
        self._mapping = mapping
        self._key = key

    def __repr__(self):
        return '<{} {!r}>'.format(type(self).__name__, str(self))

    def __str__(self):
        return util.key_text(self._key)

    @property
    def key(self):
        """The key itself."""
        return self._key

    def head_comment(self):
        """Return the comment above the key."""
        return comments.before(self._mapping, self._key)

    def set_head_comment(self, text):
        """Set the comment above the key. Returns self."""
        comments.set_before(self._mapping, self._key, text)
        return self

    def line_comment(self):
        """Return the comment at the end of the key's line."""
        return comments.eol(self._mapping, self._key)

    def set_line_comment(self, text):
        """Set the comment at the end of the key's line. Returns self."""
        comments.set_eol(self._mapping, self._key, text)
        return self

    def foot_comment(self):
        """Return the comment below the entry."""
        value = self._mapping[self._key]
        if isinstance(value, (dict, list)):
            return comments.end(value)
        return comments.after(self._mapping, self._key)

    def set_foot_comment(self, text):
        """Set the comment below the entry. Returns self."""
        value = self._mapping[self._key]
        if isinstance(value, (dict, list)):
            comments.set_end(value, text)
        else:
            comments.set_after(self._mapping, self._key, text)
        return self
