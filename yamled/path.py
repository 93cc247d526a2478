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
This module defines the :class:`Path` class, an immutable sequence of steps
that point to a location in a YAML tree.

A step is either a :class:`str`, a key in a mapping, or a non-negative
:class:`int`, an index in a sequence. A :class:`bool` is never an index, even
though Python considers it an :class:`int`.

"""

import re

from .errors import InvalidPathError


KEY = "key"
INDEX = "index"


def step_type(step):
    """Return :data:`KEY` for a mapping key, :data:`INDEX` for a sequence
    index, and None for anything that can't be used as a step.

    Negative integers are still an :data:`INDEX`; :meth:`Path.validate`
    rejects them.

    """
    if isinstance(step, str):
        return KEY
    elif isinstance(step, int) and not isinstance(step, bool):
        return INDEX


def is_key(step):
    """Return True if the step addresses a mapping entry."""
    return step_type(step) is KEY


def is_index(step):
    """Return True if the step addresses a sequence item."""
    return step_type(step) is INDEX


_index_re = re.compile(r'\[(-?\d+)\]$')


class Path(tuple):
    """A sequence of steps, based on Python :class:`tuple`.

    Create a Path by giving the steps as arguments::

        >>> p = Path('spec', 'containers', 0, 'image')
        >>> str(p)
        'spec.containers.[0].image'
        >>> p.parent()
        Path('spec', 'containers', 0)

    All methods return new Path instances, a Path is never modified.

    """
    __slots__ = ()

    def __new__(cls, *steps):
        return tuple.__new__(cls, steps)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, ', '.join(map(repr, self)))

    def __str__(self):
        def parts():
            for step in self:
                if is_index(step):
                    yield '[{}]'.format(step)
                else:
                    yield str(step)
        return '.'.join(parts())

    def __add__(self, other):
        return type(self)(*self, *other)

    @classmethod
    def from_string(cls, text):
        """Parse the output of :func:`str` back into a Path.

        Parts that look like ``[3]`` become integer steps, all others keys.
        An empty string yields the empty Path.

        """
        steps = []
        if text:
            for part in text.split('.'):
                m = _index_re.match(part)
                steps.append(int(m.group(1)) if m else part)
        return cls(*steps)

    def append(self, *steps):
        """Return a new Path with the steps added at the end."""
        return type(self)(*self, *steps)

    def prepend(self, *steps):
        """Return a new Path with the steps inserted before our own steps."""
        return type(self)(*steps, *self)

    def parent(self):
        """Return the path except for the last step.

        The parent of an empty path is empty.

        """
        return type(self)(*self[:-1])

    def start(self):
        """The first step, or None if the path is empty."""
        if self:
            return self[0]

    def end(self):
        """The last step, or None if the path is empty."""
        if self:
            return self[-1]

    def consume(self):
        """Return a two-tuple (``first``, ``rest``).

        ``first`` is the first step and ``rest`` a Path with the remaining
        steps. For an empty path, (None, Path()) is returned.

        """
        if not self:
            return None, type(self)()
        return self[0], type(self)(*self[1:])

    def validate(self):
        """Raise :class:`~.errors.InvalidPathError` if a step is not usable.

        All offending steps are mentioned in the message, not only the first
        one.

        """
        errors = []
        for step in self:
            t = step_type(step)
            if t is INDEX:
                if step < 0:
                    errors.append("{} is invalid, steps must be >= 0".format(step))
            elif t is None:
                errors.append("cannot handle {} steps".format(type(step).__name__))
        if errors:
            raise InvalidPathError("invalid path: {}".format("; ".join(errors)))


def to_path(path):
    """Return ``path`` as a :class:`Path`.

    A single step is turned into a one-step Path, other iterables are
    converted step by step.

    """
    if isinstance(path, Path):
        return path
    elif step_type(path) is not None:
        return Path(path)
    try:
        return Path(*path)
    except TypeError:
        return Path(path)   # not iterable, let validate() complain
