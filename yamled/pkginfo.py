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
Meta-information about the yamled package.

This information is used by the installer and the documentation.

"""

#: name of the package
name = "yamled"

#: the current version
version = (0, 1, 0)
version_suffix = ""

#: the current version as a string
version_string = "{}.{}.{}".format(*version) + version_suffix

#: short description
description = "Edit YAML documents in place, keeping comments and formatting"

#: long description
long_description = \
    "yamled reads and writes values at any path in a YAML document, " \
    "creating missing containers on the way, while keeping the comments " \
    "and formatting of everything it does not touch."

#: maintainer name
maintainer = "The yamled developers"

#: license
license = "GPL v3"
