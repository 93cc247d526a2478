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
Reading and writing comments in the round-trip tree.

ruamel.yaml does not store comments on the values themselves, but in the
comment attribute (``ca``) of the collection that contains them:

* ``ca.items[key]`` holds the comments of one entry. For a mapping this is
  a list ``[key_eol, before, value_eol, after]``, for a sequence
  ``[eol, before, ...]``. ``before`` is a list of comment tokens, written
  above the entry; the eol token is written at the end of the entry's line.
  All comment lines following an entry are stored in its eol token as well,
  on the lines after the first.

* ``ca.comment`` holds the comments of the collection itself: the second
  item is a list of tokens written before the collection.

* ``ca.end`` is a list of tokens written after the collection.

The functions in this module map the head/line/foot comments of a node on
this storage. Comment text is given and returned without the leading ``#``,
multiple lines separated by newlines. Setting an empty text removes the
comment.

"""

from ruamel.yaml.error import CommentMark
from ruamel.yaml.tokens import CommentToken


def has_comments(container):
    """Return True if the container can store comments for its entries."""
    return hasattr(container, 'ca')


def forget(mapping, key):
    """Remove the comments of an entry that was deleted from a mapping."""
    if has_comments(mapping):
        mapping.ca.items.pop(key, None)


def detach(container, key):
    """Take the comments of an entry that is about to be deleted off it.

    The comment lines following the entry are read as the head of the next
    entry, so they are moved above that one. After the last entry they are
    added to the lines following the previous entry.

    """
    if not has_comments(container):
        return
    text = after(container, key)
    if text:
        following, found = _next_key(container, key)
        if found:
            entry = _entry(container, following)
            own = _text(entry[1]) if entry is not None and len(entry) > 1 else ''
            set_before(container, following, _join(text, own))
        else:
            prev, found = _previous_key(container, key)
            if found:
                set_after(container, prev, _join(after(container, prev), text))
    if isinstance(container, dict):
        forget(container, key)


def _lines(raw):
    """Yield the text lines of a raw comment string, without the ``#``."""
    for line in raw.splitlines():
        line = line.strip()
        if line:
            line = line[1:] if line.startswith('#') else line
            yield line[1:] if line.startswith(' ') else line


def _text(tokens):
    """Return the text of a comment token, or a list of tokens."""
    if tokens is None:
        return ''
    elif isinstance(tokens, CommentToken):
        tokens = [tokens]
    return '\n'.join(line
        for token in tokens if token is not None
            for line in _lines(token.value))


def _raw(text, column=0):
    """Return the raw comment string for the text, one ``#`` line per line."""
    indent = ' ' * column
    return ''.join('{}#{}\n'.format(indent, ' ' + line if line else '')
        for line in text.splitlines())


def _tokens(text, column=0):
    """Return a list of comment tokens for the text, one token per line."""
    return [CommentToken('# {}\n'.format(line) if line else '#\n', CommentMark(column), None)
        for line in text.splitlines()]


def _split(token):
    """Split the value of an eol token in the first line and the rest."""
    if token is None:
        return '', ''
    first, newline, rest = token.value.partition('\n')
    return first, rest


def _eol_index(container):
    return 2 if isinstance(container, dict) else 0


def _entry(container, key, create=False):
    """Return the comment list of the entry, or None if there is none.

    If ``create`` is True, the list is created when needed, and always has
    four items.

    """
    try:
        items = container.ca.items
    except AttributeError:
        if create:
            raise ValueError("{} can't store comments".format(type(container).__name__))
        return None
    entry = items.get(key)
    if create:
        if entry is None:
            entry = items[key] = [None, None, None, None]
        elif len(entry) < 4:
            entry.extend([None] * (4 - len(entry)))
    return entry


def column(container, key):
    """Return the column the entry starts at, 0 if unknown."""
    try:
        if isinstance(container, dict):
            return container.lc.key(key)[1]
        return container.lc.col
    except (AttributeError, KeyError, TypeError, IndexError):
        return 0


def _previous_key(container, key):
    """Return a tuple (key, found) for the entry before the one at ``key``."""
    if isinstance(container, dict):
        keys = list(container)
        i = keys.index(key)
        if i:
            return keys[i - 1], True
    elif key:
        return key - 1, True
    return None, False


def _next_key(container, key):
    """Return a tuple (key, found) for the entry after the one at ``key``."""
    if isinstance(container, dict):
        keys = list(container)
        i = keys.index(key)
        if i + 1 < len(keys):
            return keys[i + 1], True
    elif key + 1 < len(container):
        return key + 1, True
    return None, False


def _join(*texts):
    return '\n'.join(text for text in texts if text)


def _eol_token(container, key):
    entry = _entry(container, key)
    if entry is not None and len(entry) > _eol_index(container):
        return entry[_eol_index(container)]


def _set_eol_token(container, key, token):
    if token is None and _entry(container, key) is None:
        return
    _entry(container, key, True)[_eol_index(container)] = token


def eol(container, key):
    """Return the comment at the end of the entry's line."""
    first, rest = _split(_eol_token(container, key))
    return '\n'.join(_lines(first))


def set_eol(container, key, text):
    """Set the comment at the end of the entry's line.

    The comment lines following the entry are kept.

    """
    token = _eol_token(container, key)
    first, rest = _split(token)
    col = token.start_mark.column if token is not None else 0
    if text:
        value = '# {}\n{}'.format(' '.join(text.splitlines()), rest)
    elif rest:
        value = '\n' + rest
    else:
        value = None
    _set_eol_token(container, key,
        CommentToken(value, CommentMark(col), None) if value else None)


def after(container, key):
    """Return the comment lines following the entry."""
    first, rest = _split(_eol_token(container, key))
    return '\n'.join(_lines(rest))


def set_after(container, key, text):
    """Set the comment lines following the entry.

    The comment at the end of the entry's line is kept.

    """
    token = _eol_token(container, key)
    first, rest = _split(token)
    col = token.start_mark.column if token is not None else 0
    rest = _raw(text, column(container, key)) if text else ''
    if first or rest:
        value = '{}\n{}'.format(first, rest)
        _set_eol_token(container, key, CommentToken(value, CommentMark(col), None))
    else:
        _set_eol_token(container, key, None)


def before(container, key):
    """Return the comment lines above the entry.

    If the entry has no comments of its own above it, the comment lines
    following the previous entry are returned, because that is where
    ruamel.yaml puts the comments it reads between two entries.

    """
    entry = _entry(container, key)
    if entry is not None and len(entry) > 1 and entry[1]:
        return _text(entry[1])
    prev, found = _previous_key(container, key)
    if found:
        return after(container, prev)
    return ''


def set_before(container, key, text):
    """Set the comment lines above the entry.

    Comments read between the previous entry and this one are removed.

    """
    prev, found = _previous_key(container, key)
    if found and after(container, prev):
        set_after(container, prev, '')
    if text:
        _entry(container, key, True)[1] = _tokens(text, column(container, key))
    else:
        entry = _entry(container, key)
        if entry is not None and len(entry) > 1:
            entry[1] = None


def value_start(mapping, key):
    """Return the comment lines between a key and its collection value."""
    entry = _entry(mapping, key)
    if entry is not None and len(entry) > 3:
        return _text(entry[3])
    return ''


def set_value_start(mapping, key, text):
    """Set the comment lines between a key and its collection value.

    ruamel.yaml writes these in place of the collection's own start comment
    as soon as the entry has comments, so the latter is cleared.

    """
    value = mapping[key]
    if start(value):
        set_start(value, '')
    if text:
        col = column(mapping, key) + 2
        _entry(mapping, key, True)[3] = _tokens(text, col)
    else:
        entry = _entry(mapping, key)
        if entry is not None and len(entry) > 3:
            entry[3] = None


def start(collection):
    """Return the comment lines above a collection."""
    c = collection.ca.comment
    return _text(c[1]) if c and len(c) > 1 else ''


def set_start(collection, text):
    """Set the comment lines above a collection."""
    ca = collection.ca
    if ca.comment is None:
        ca.comment = [None, []]
    ca.comment[1] = _tokens(text) if text else []


def start_eol(collection):
    """Return the comment on the line a collection starts on."""
    c = collection.ca.comment
    return _text(c[0]) if c else ''


def set_start_eol(collection, text):
    """Set the comment on the line a collection starts on."""
    ca = collection.ca
    if ca.comment is None:
        ca.comment = [None, []]
    ca.comment[0] = CommentToken('# {}\n'.format(' '.join(text.splitlines())),
        CommentMark(0), None) if text else None


def end(collection):
    """Return the comment lines after a collection."""
    return _text(collection.ca.end)


def set_end(collection, text):
    """Set the comment lines after a collection."""
    ca = collection.ca
    # the end comments are only written when there is a comment list;
    # writing appends the end list to it, drop what earlier writes left
    if ca.comment is None:
        ca.comment = [None, []]
    del ca.comment[2:]
    tokens = _tokens(text) if text else []
    if ca.end is None:
        ca.end = tokens
    else:
        ca.end[:] = tokens
