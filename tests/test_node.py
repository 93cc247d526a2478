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
Test the node module.
"""

### find yamled
import sys
sys.path.insert(0, '.')

import logging

import pytest

from yamled import codec, loads
from yamled.errors import (
    DecodingError, IncompatibleKindError, InvalidPathError, InvalidStepError,
    NotAMappingError, NotASequenceError, NotFoundError, StepNotFoundError,
    is_not_found,
)
from yamled.node import Node
from yamled.path import Path
from yamled.util import MAPPING, SCALAR, SEQUENCE


class Settings:
    def __init__(self, key):
        self.key = key


def test_main():
    doc = loads("string: bar\nnumber: 12\nlist: [1, 2, 3]\nobject:\n  key: value\n")

    node = doc.get("string")
    assert node is not None
    assert node.to_string() == "bar"
    assert str(node) == "bar"
    assert node.kind == SCALAR

    assert doc.get("number").to_int() == 12
    assert doc.get("number").to_string() == "12"

    obj = doc.get("object")
    assert obj.kind == MAPPING
    assert obj.to_dict() == {'key': 'value'}
    assert obj.to(Settings).key == 'value'
    assert obj.to(dict) == {'key': 'value'}

    assert doc.must_get("nonexisting").to_string() == ""
    assert doc.must_get("nonexisting").is_null()
    assert doc.must_get("list").to_list() == [1, 2, 3]
    assert doc.get("list").kind == SEQUENCE


def test_node_construction():
    data = codec.decode("foo: bar\n").contents[0]
    assert Node(data, 'foo').value == 'bar'
    with pytest.raises(ValueError):
        Node(None, 'foo')
    with pytest.raises(ValueError):
        Node(codec.DocumentNode(data), 0)
    with pytest.raises(ValueError):
        Node(data, 'bar')
    assert Node.new().is_null()
    assert Node.new(12).to_int() == 12


def test_get_sequence_item():
    doc = loads("list: [1, foo, 2]\n")
    lst = doc.get("list")
    assert lst.get(0).to_int() == 1
    assert lst.must_get(1).to_string() == "foo"
    assert lst.must_get(3).to_string() == ""
    assert lst.get(3) is None
    assert lst.get(-1) is None


def test_get_deep():
    doc = loads(
        "foo:\n"
        "  bar:\n"
        "    - hello\n"
        "    - key: value\n"
        "      anotherkey:\n"
        "        - first\n"
        "        - second\n"
        "        - hello: world\n")
    item = doc.get("foo", "bar", 1, "anotherkey", 1)
    assert item.to_string() == "second"
    assert doc.get(Path("foo", "bar", 0)).to_string() == "hello"
    assert doc.lookup("foo", "bar", 1, "anotherkey", 2, "hello").to_string() == "world"


def test_lookup_errors():
    doc = loads("foo:\n  bar: [1, 2]\nscalar: x\n")

    with pytest.raises(StepNotFoundError) as e:
        doc.lookup("foo", "baz")
    assert e.value.path == Path("foo", "baz")
    assert is_not_found(e.value)

    with pytest.raises(StepNotFoundError) as e:
        doc.lookup("foo", "bar", 2)
    assert e.value.path == Path("foo", "bar", 2)
    assert "foo.bar.[2]" in str(e.value)

    with pytest.raises(NotASequenceError) as e:
        doc.lookup("foo", 0)
    assert e.value.path == Path("foo", 0)

    with pytest.raises(NotAMappingError) as e:
        doc.lookup("foo", "bar", "x")
    assert e.value.path == Path("foo", "bar", "x")

    with pytest.raises(NotAMappingError):
        doc.lookup("scalar", "sub")

    with pytest.raises(StepNotFoundError):
        doc.lookup("foo", 1.5)

    with pytest.raises(NotFoundError):
        doc.lookup()

    # all are LookupErrors
    with pytest.raises(LookupError):
        doc.lookup("nope")


def test_scalar_cannot_get_keys():
    doc = loads('"hello world"\n')
    assert doc.get("list") is None
    assert doc.must_get("list") is not None
    assert doc.to_string() == "hello world"

    doc = loads('foo: "bar"\n')
    assert doc.get("foo", "sub", "bar") is None


def test_set():
    doc = loads("foo:\n  hello: world\n")
    doc.set_at(("foo", "hello"), 12)
    assert doc.dumps() == "foo:\n  hello: 12\n"

    node = doc.set_at(Path("foo", "newhello"), "new")
    assert node.to_string() == "new"
    assert doc.dumps() == "foo:\n  hello: 12\n  newhello: new\n"


def test_set_flow_sequence_item():
    doc = loads("list: [1, 2, 3]\n")
    doc.get("list").set_key(1, 7)
    assert doc.dumps() == "list: [1, 7, 3]\n"


def test_set_key_appends():
    doc = loads("foo: 1\n")
    node = doc.set_key("bar", "two")
    assert node.key == "bar"
    assert doc.dumps() == "foo: 1\nbar: two\n"


def test_set_key_pads_sequence():
    doc = loads("list: [a]\n")
    doc.get("list").set_key(3, "d")
    assert doc.to_dict() == {'list': ['a', None, None, 'd']}


def test_set_creates_containers():
    doc = loads("foo: bar\n")
    doc.set_at(("spec", "ports", 1, "name"), "http")
    assert doc.to_dict() == {
        'foo': 'bar',
        'spec': {'ports': [None, {'name': 'http'}]},
    }


def test_set_any_node_to_null():
    doc = loads("foo: bar\nhello: world\nlist: [1, 2, 3]\nobj: {key: value}\n")
    doc.set_key("foo", None)
    doc.set_key("list", None)
    doc.set_key("obj", None)
    assert doc.to_dict() == {'foo': None, 'hello': 'world', 'list': None, 'obj': None}


def test_set_null_nodes_to_anything():
    doc = loads("str: null\nlist: null\nobj: null\n")
    doc.set_key("str", "foo")
    doc.set_key("list", [1, 2, 3])
    doc.set_key("obj", {'foo': 1})
    assert doc.dumps() == (
        "str: foo\n"
        "list:\n"
        "  - 1\n"
        "  - 2\n"
        "  - 3\n"
        "obj:\n"
        "  foo: 1\n")


def test_forbid_kind_change():
    doc = loads("foo: bar\nhello: world\nlist: [1, 2, 3]\nobj: {key: value}\n")

    with pytest.raises(IncompatibleKindError) as e:
        doc.set_key("foo", ["foo", "bar"])
    assert e.value.path == Path("foo")
    with pytest.raises(IncompatibleKindError):
        doc.set_key("list", "foo")
    with pytest.raises(IncompatibleKindError):
        doc.set_key("obj", "foo")
    with pytest.raises(IncompatibleKindError):
        doc.get("obj").set([1])
    # also a TypeError
    with pytest.raises(TypeError):
        doc.set_at(("foo", "sub"), 1)

    doc.set_key("list", ["foo", "bar"])
    assert doc.dumps() == (
        "foo: bar\n"
        "hello: world\n"
        "list:\n"
        "  - foo\n"
        "  - bar\n"
        "obj: {key: value}\n")


def test_forbid_stepping_into_scalar():
    doc = loads("foo: bar\n")
    with pytest.raises(IncompatibleKindError) as e:
        doc.set_at(("foo", "sub", "deeper"), 1)
    assert e.value.path == Path("foo", "sub")
    assert doc.dumps() == "foo: bar\n"


def test_replace_kinds():
    doc = loads("str: foo\nlist: [1, 2, 3]\nobj: {key: value}\n")
    doc.replace_key("str", ["foo", "bar"])
    doc.replace_key("list", "foo")
    doc.replace_key("obj", "foo")
    doc.must_get("obj").replace([1, 2])
    assert doc.dumps() == (
        "str:\n"
        "  - foo\n"
        "  - bar\n"
        "list: foo\n"
        "obj:\n"
        "  - 1\n"
        "  - 2\n")


def test_replace_at_coerces_parents():
    doc = loads("foo: bar\nlist: [1]\n")
    doc.replace_at(("foo", "sub", 0), "x")
    doc.replace_at(("list", "key"), "y")
    assert doc.to_dict() == {'foo': {'sub': ['x']}, 'list': {'key': 'y'}}


def test_replace_keeps_identity():
    doc = loads("obj:\n  a: 1\n")
    node = doc.get("obj")
    old = node.value
    node.replace({'b': 2})
    assert node.value is old
    assert doc.to_dict() == {'obj': {'b': 2}}


def test_wrappers_share_slot():
    doc = loads("foo: bar\n")
    a = doc.get("foo")
    b = doc.get("foo")
    a.set("baz")
    assert b.to_string() == "baz"


def test_set_node_value():
    doc = loads("a: [1, 2]\nb: x\n")
    doc.replace_key("b", doc.get("a"))
    assert doc.to_dict() == {'a': [1, 2], 'b': [1, 2]}
    assert doc.get("b").value is not doc.get("a").value


def test_write_errors():
    doc = loads("foo: bar\n")
    with pytest.raises(ValueError):
        doc.set_at((), 1)
    with pytest.raises(InvalidPathError):
        doc.set_at(("foo", -1), 1)
    with pytest.raises(InvalidPathError):
        doc.set_key(1.5, 1)
    with pytest.raises(ValueError):
        doc.set_key("new", object())
    # nothing was changed
    assert doc.dumps() == "foo: bar\n"


def test_delete_key():
    doc = loads(
        "foo:\n"
        "  bar:\n"
        "    - hello\n"
        "    - key: value\n"
        "      anotherkey:\n"
        "        - first\n"
        "        - second\n"
        "        - hello: world\n")
    doc.delete_key("foo", "bar", 1, "anotherkey", 1)
    assert doc.get("foo", "bar", 1, "anotherkey").to_list() == ['first', {'hello': 'world'}]

    doc.delete_key("foo", "bar", 1, "key")
    assert doc.get("foo", "bar", 1).to_dict() == {'anotherkey': ['first', {'hello': 'world'}]}

    doc = loads("list: [first, second, third]\n")
    doc.delete_key("list", 1)
    assert doc.dumps() == "list: [first, third]\n"


def test_delete_key_noop():
    text = "foo: bar\nlist: [1]\n"
    doc = loads(text)
    doc.delete_key("nope")
    doc.delete_key("nope", "deeper")
    doc.delete_key("foo", "sub")
    doc.delete_key("list", 5)
    doc.delete_key("list", "key")
    assert doc.dumps() == text

    with pytest.raises(ValueError):
        doc.delete_key()
    with pytest.raises(InvalidStepError):
        doc.delete_key("list", 1.5)


def test_delete_keeps_following_comments():
    doc = loads("a: 1\n# about b\nb: 2\n")
    assert doc.get_key("b").head_comment() == "about b"
    doc.delete_key("a")
    assert doc.get_key("b").head_comment() == "about b"
    text = doc.dumps()
    assert "a: 1" not in text
    assert text.index("# about b") < text.index("b: 2")

    # the comment after the last entry moves to the one before
    doc = loads("a: 1\nb: 2\n# the end\n")
    doc.delete_key("b")
    assert doc.to_dict() == {'a': 1}
    assert "# the end" in doc.dumps()

    doc = loads("list:\n  - a\n  # about b\n  - b\n")
    doc.delete_key("list", 0)
    assert doc.get("list").to_list() == ['b']
    assert doc.get("list", 0).head_comment() == "about b"
    assert "# about b" in doc.dumps()


def test_aliases():
    text = "base: &a\n  x: 1\ncopy: *a\n"
    doc = loads(text)
    # reading goes through the alias
    assert doc.get("copy", "x").to_int() == 1

    with pytest.raises(IncompatibleKindError) as e:
        doc.set_at(("copy", "x"), 2)
    assert e.value.path == Path("copy", "x")
    with pytest.raises(IncompatibleKindError):
        doc.set_key("copy", {'x': 3})
    doc.delete_key("copy", "x")
    assert doc.to_dict() == {'base': {'x': 1}, 'copy': {'x': 1}}
    assert doc.dumps() == text

    # replacing copies the collection first
    doc.replace_at(("copy", "x"), 2)
    assert doc.get("base", "x").to_int() == 1
    assert doc.get("copy", "x").to_int() == 2
    doc.set_at(("copy", "y"), 3)
    assert doc.to_dict() == {'base': {'x': 1}, 'copy': {'x': 2, 'y': 3}}

    doc = loads("base: &a\n  x: 1\ncopy: *a\n")
    doc.replace_key("copy", {'z': 1})
    assert doc.to_dict() == {'base': {'x': 1}, 'copy': {'z': 1}}

    doc = loads("defaults: &d [a, b]\nlist:\n  - *d\n")
    doc.replace_at(("list", 0, 0), "z")
    assert doc.get("defaults").to_list() == ['a', 'b']
    assert doc.get("list").to_list() == [['z', 'b']]


def test_delete_readd_forgets_comments():
    doc = loads("a: 1  # one\nb: 2\n")
    doc.delete_key("a")
    doc.set_key("a", 1)
    assert doc.get("a").line_comment() == ""
    assert doc.dumps() == "b: 2\na: 1\n"


def test_conversions():
    doc = loads("t: true\nf: false\nn: null\nfl: 1.5\nlist: [1]\nobj: {a: 1}\ns: '12'\n")
    assert doc.get("t").to_string() == "true"
    assert doc.get("f").to_string() == "false"
    assert doc.get("n").to_string() == ""
    assert doc.get("fl").to_string() == "1.5"
    assert doc.get("list").to_string() == ""
    assert doc.get("obj").to_string() == ""

    assert doc.get("t").to_int() == 0
    assert doc.get("s").to_int() == 0
    assert doc.get("fl").to_int() == 0

    assert doc.get("obj").to_list() is None
    assert doc.get("list").to_dict() is None
    assert doc.get("s").to_list() is None

    assert doc.get("s").to(int) == 12
    with pytest.raises(DecodingError):
        doc.get("obj").to(Settings)
    with pytest.raises(DecodingError):
        doc.get("list").to(int)


def test_comments():
    doc = loads("foo:\n  # this is a comment\n  hello: world\n")
    node = doc.must_get("foo", "hello")
    assert node.set_head_comment("new head comment") is node
    node.set_line_comment("new line comment").set_foot_comment("new foot comment")

    assert node.head_comment() == "new head comment"
    assert node.line_comment() == "new line comment"
    assert node.foot_comment() == "new foot comment"

    text = doc.dumps()
    assert "hello: world # new line comment\n" in text
    assert "# new head comment" in text
    assert "# new foot comment" in text
    assert text.index("# new head comment") < text.index("hello: world")
    assert text.index("hello: world") < text.index("# new foot comment")

    node.set_line_comment("")
    assert node.line_comment() == ""
    assert node.foot_comment() == "new foot comment"
    assert "hello: world\n" in doc.dumps()


def test_read_comments():
    doc = loads(
        "# header\n"
        "foo: bar # line\n"
        "list:\n"
        "  - a # first\n"
        "  - b\n")
    assert doc.head_comment() == "header"
    assert doc.get("foo").line_comment() == "line"
    assert doc.get("list", 0).line_comment() == "first"
    assert doc.get("list", 1).line_comment() == ""


def test_scalar_root_comments():
    doc = loads("hello\n")
    assert doc.head_comment() == ""
    with pytest.raises(ValueError):
        doc.set_head_comment("no room")


def test_logging(caplog):
    doc = loads("foo: ~\n")
    with caplog.at_level(logging.DEBUG, logger="yamled.node"):
        doc.set_at(("foo", "bar", "baz"), 1)
        doc.delete_key("nope")
    assert "changing Null" in caplog.text
    assert "creating missing container" in caplog.text
    assert "not deleting nope" in caplog.text


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
