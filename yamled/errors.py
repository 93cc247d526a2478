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
The exceptions raised by yamled.

All exceptions also inherit from a builtin exception type, so callers can
catch e.g. :class:`LookupError` or :class:`TypeError` without importing this
module.

Errors that happen somewhere below a node record the :attr:`~PathError.path`
from the node the operation was called on down to the step that failed.

"""


class PathError(Exception):
    """Mixin for errors that occurred at a certain path.

    The :attr:`path` is built up while the error travels back up through
    the tree: every level prepends its own step using :meth:`prepend`.

    """
    message = "error"

    def __init__(self, message=None, path=()):
        from .path import to_path
        if message is not None:
            self.message = message
        self.path = to_path(path)
        super().__init__(self.message)

    def __str__(self):
        if self.path:
            return "{} (at {})".format(self.message, self.path)
        return self.message

    def prepend(self, *steps):
        """Prepend steps to our path and return self, for use in a raise statement."""
        self.path = self.path.prepend(*steps)
        return self


class InvalidPathError(ValueError):
    """Raised by :meth:`.path.Path.validate` for malformed steps."""


class InvalidStepError(PathError, TypeError):
    """Raised when a step of an unsupported type is used to write or delete."""
    message = "invalid step"


class NotFoundError(PathError, LookupError):
    """Base class for the errors raised when a path can't be followed.

    Use :func:`is_not_found` to check for any of them.

    """
    message = "not found"


class StepNotFoundError(NotFoundError):
    """The key or index does not exist."""
    message = "step not found"


class NotAMappingError(NotFoundError):
    """A key step was used on a node that is not a mapping."""
    message = "node is not a mapping"


class NotASequenceError(NotFoundError):
    """An index step was used on a node that is not a sequence."""
    message = "node is not a sequence"


class IncompatibleKindError(PathError, TypeError):
    """A write would change the kind of a node without using ``replace``."""
    message = "cannot change the node's kind without replacing the node"


class EncodingError(ValueError):
    """Encoding or decoding YAML failed."""


class DecodingError(EncodingError):
    """Converting a node to a Python type failed."""


def is_not_found(error):
    """Return True if the exception means a path could not be followed."""
    return isinstance(error, NotFoundError)
