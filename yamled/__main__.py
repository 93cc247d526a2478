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
Command line interface to read and edit a YAML file.

Usage::

    python -m yamled FILE [--get PATH] [--set PATH=VALUE] [--replace PATH=VALUE]
                          [--delete PATH] [--indent N] [--tree] [--in-place] [-v]

A PATH is written like ``spec.containers.[0].image``, a VALUE is read as
YAML, so ``--set spec.replicas=3`` sets an integer and ``--set 'tags=[a, b]'``
a sequence. The options ``--set``, ``--replace`` and ``--delete`` may be
given more than once; all sets are done first, then the replaces, then the
deletes.

"""

import argparse
import logging
import sys

from . import codec
from .document import Document
from .errors import PathError
from .path import Path
from .pkginfo import version_string


logger = logging.getLogger(__name__)


def assignment(text):
    """Parse a ``PATH=VALUE`` argument into a (Path, value) tuple."""
    path, sep, value = text.partition('=')
    if not sep:
        raise argparse.ArgumentTypeError("expected PATH=VALUE, got {!r}".format(text))
    try:
        data = codec.decode(value).contents[0]
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    return Path.from_string(path), data


def get_parser():
    parser = argparse.ArgumentParser(
        prog="yamled",
        description="Read and edit YAML files, keeping comments and formatting",
    )
    parser.add_argument("file", metavar="FILE",
        help="the YAML file to read, '-' for standard input")
    parser.add_argument("--get", metavar="PATH", type=Path.from_string,
        help="print the value at PATH instead of the whole document")
    parser.add_argument("--set", metavar="PATH=VALUE", type=assignment,
        action="append", default=[], dest="sets",
        help="set the value at PATH, which must not change its kind")
    parser.add_argument("--replace", metavar="PATH=VALUE", type=assignment,
        action="append", default=[], dest="replaces",
        help="set the value at PATH, replacing whatever is there")
    parser.add_argument("--delete", metavar="PATH", type=Path.from_string,
        action="append", default=[], dest="deletes",
        help="delete the mapping entry or sequence item at PATH")
    parser.add_argument("--indent", metavar="N", type=int,
        default=codec.Codec.indent,
        help="the indent of the output (default: %(default)s)")
    parser.add_argument("--tree", action="store_true",
        help="print a tree view of the (edited) document")
    parser.add_argument("-i", "--in-place", action="store_true",
        help="write the edited document back to FILE")
    parser.add_argument("-v", "--verbose", action="store_true",
        help="show debug messages")
    parser.add_argument("--version", action="version",
        version="%(prog)s " + version_string)
    return parser


def read(filename):
    """Return a Document read from the file, or from stdin for '-'."""
    if filename == '-':
        return Document.load(sys.stdin)
    with open(filename, encoding='utf-8') as f:
        return Document.load(f)


def edit(document, args):
    """Apply the edits given on the command line to the document."""
    for path, value in args.sets:
        logger.debug("setting %s", path)
        document.set_at(path, value)
    for path, value in args.replaces:
        logger.debug("replacing %s", path)
        document.replace_at(path, value)
    for path in args.deletes:
        logger.debug("deleting %s", path)
        document.delete_key(path)


def main(argv=None):
    """Main CLI entrypoint, returns the exit code."""
    parser = get_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    if args.in_place and args.file == '-':
        parser.error("can't edit standard input in place")

    try:
        document = read(args.file)
        edit(document, args)
        if args.get:
            node = document.lookup(args.get)
        if args.in_place:
            with open(args.file, 'w', encoding='utf-8') as f:
                f.write(document.dumps(args.indent))
    except (OSError, ValueError, PathError) as e:
        logger.error("%s", e)
        return 1

    if args.get:
        if args.tree:
            node.dump()
        else:
            sys.stdout.write(node.dumps(args.indent))
    elif args.tree:
        document.dump()
    elif not args.in_place:
        sys.stdout.write(document.dumps(args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
