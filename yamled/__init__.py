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
The yamled module.

Edit YAML documents in place, keeping comments and formatting::

    >>> import yamled
    >>> d = yamled.loads("# settings\\nname: demo\\nreplicas: 1\\n")
    >>> d.set_key('replicas', 3).set_line_comment('scaled')
    <Node Scalar at 'replicas'>
    >>> print(d.dumps(), end='')
    # settings
    name: demo
    replicas: 3 # scaled

"""

import os.path

from .codec import Encoder
from .document import Document
from .errors import (
    DecodingError, EncodingError, IncompatibleKindError, InvalidPathError,
    InvalidStepError, NotAMappingError, NotASequenceError, NotFoundError,
    PathError, StepNotFoundError, is_not_found,
)
from .keynode import KeyNode
from .node import Node
from .path import Path
from .pkginfo import version, version_string


__all__ = (
    'Document', 'Encoder', 'KeyNode', 'Node', 'Path',
    'load', 'loads', 'is_not_found', 'version', 'version_string',
)


def load(filename, encoding='utf-8'):
    """Convenience function to read YAML from ``filename`` and return a
    :class:`Document`.

    Raises :class:`OSError` if the file can't be read, and
    :class:`~.errors.EncodingError` if it does not contain valid YAML.

    """
    with open(os.path.abspath(filename), encoding=encoding) as f:
        return Document.load(f)


def loads(text):
    """Return a :class:`Document` for the YAML ``text``."""
    return Document.loads(text)
