# -*- coding: utf-8 -*-

import pytest

from py_dgschema._string_utils import dedent, highlight_location, index_to_loc


def test_highlight_location_middle_of_document():
    assert (
        highlight_location(
            """type Person {
    id: ID!
    name: String! @hasInverse(field: "Pet")
    age: Int
    email: String
}
""",
            40,
        )
        == """(3:15):
  1:type Person {
  2:    id: ID!
  3:    name: String! @hasInverse(field: "Pet")
                  ^
  4:    age: Int
  5:    email: String
"""
    )


def test_highlight_location_pads_line_numbers():
    assert (
        highlight_location(
            """enum Mood {
  HAPPY
  GRUMPY
  SAD
  ANGRY
  CALM
  BORED
  TIRED
  }
}
""",
            72,
        )
        == """(11:1):
  09:  }
  10:}
  11:
     ^
"""
    )


def test_highlight_location_first_line():
    assert (
        highlight_location("type {}", 5)
        == "(1:6):\n  1:type {}\n         ^\n"
    )


@pytest.mark.parametrize(
    "body, position, expected",
    [
        ("", 0, (1, 1)),
        ("type Foo", 5, (1, 6)),
        ("type Foo {\n  id: ID\n}", 13, (2, 3)),
        ("a\nb\n", 4, (3, 1)),
    ],
)
def test_index_to_loc(body, position, expected):
    assert index_to_loc(body, position) == expected


def test_index_to_loc_out_of_bounds():
    with pytest.raises(IndexError):
        index_to_loc("type Foo", 42)


def test_dedent():
    assert dedent(
        """
        type Foo {
            id: ID!
        }
        """
    ) == ("type Foo {\n    id: ID!\n}\n")
