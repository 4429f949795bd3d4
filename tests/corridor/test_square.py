"""Unit tests for /src/corridor/square.py"""

from string import ascii_uppercase

import pytest

from src.core.exceptions import ParseError
from src.corridor.square import BOARD_DIMENSIONS, Square, direction


@pytest.mark.parametrize(
    "x, y, label",
    [
        (x, y, f"{ascii_uppercase[x]}{y + 1}")
        for x in range(BOARD_DIMENSIONS[0])
        for y in range(BOARD_DIMENSIONS[1])
    ],
)
def test_creating_from_label(x: int, y: int, label: str) -> None:
    """Simply checks if the notation for 'A1' indeed maps to (0, 0), and back"""
    square = Square.from_label(label)
    assert square == Square(x, y)
    assert square.to_label() == label


@pytest.mark.parametrize(
    "label, expected",
    [
        ("A1", Square(0, 0)),
        ("A9", Square(0, 8)),
        ("I1", Square(8, 0)),
        ("I9", Square(8, 8)),
        ("F1", Square(5, 0)),
        ("C3", Square(2, 2)),
    ],
)
def test_corner_and_edge_labels(label: str, expected: Square) -> None:
    assert Square.from_label(label) == expected


@pytest.mark.parametrize(
    "label",
    [
        "",  # nothing to parse
        "E",  # no row
        "A0",  # rows start at 1
        "A10",  # only 9 rows
        "J1",  # only 9 columns
        "e1",  # columns are capital letters
        "A01",  # leading zero
        "E-1",  # signs are not part of the notation
        " E1",
        "E1 ",
        "11",  # First character is not a letter
        "EE",  # second character is not a number
    ],
)
def test_invalid_labels(label: str) -> None:
    with pytest.raises(ParseError):
        Square.from_label(label)


def test_square_within_bounds() -> None:
    for x in range(BOARD_DIMENSIONS[0]):
        for y in range(BOARD_DIMENSIONS[1]):
            assert Square(x, y).is_within_bounds()


def test_square_out_of_bounds() -> None:
    assert not Square(BOARD_DIMENSIONS[0], 0).is_within_bounds()
    assert not Square(0, BOARD_DIMENSIONS[1]).is_within_bounds()
    assert not Square(-1, -1).is_within_bounds()


def test_no_label_outside_the_board() -> None:
    with pytest.raises(ParseError):
        Square(9, 0).to_label()


# --- ADJACENCY ---
@pytest.mark.parametrize(
    "label, expected_count",
    [
        ("A1", 2),
        ("I1", 2),
        ("A9", 2),
        ("I9", 2),
        ("E1", 3),
        ("A5", 3),
        ("I5", 3),
        ("E9", 3),
        ("E5", 4),
        ("B2", 4),
    ],
)
def test_number_of_neighbours(label: str, expected_count: int) -> None:
    """corner: 2, edge: 3, anywhere else: 4"""
    neighbours = Square.from_label(label).neighbours()
    assert len(neighbours) == expected_count
    assert all(neighbour.is_within_bounds() for neighbour in neighbours)


def test_every_square_has_2_to_4_neighbours_on_the_board() -> None:
    for x in range(BOARD_DIMENSIONS[0]):
        for y in range(BOARD_DIMENSIONS[1]):
            neighbours = Square(x, y).neighbours()
            assert 2 <= len(neighbours) <= 4
            assert all(neighbour.is_within_bounds() for neighbour in neighbours)
            assert all(Square(x, y).is_adjacent(neighbour) for neighbour in neighbours)


def test_neighbours_come_in_a_fixed_order() -> None:
    """up, down, left, right"""
    neighbours = [sq.to_label() for sq in Square.from_label("E5").neighbours()]
    assert neighbours == ["E6", "E4", "D5", "F5"]


def test_adjacency() -> None:
    e5 = Square.from_label("E5")
    assert e5.is_adjacent(Square.from_label("E6"))
    assert e5.is_adjacent(Square.from_label("D5"))
    assert not e5.is_adjacent(Square.from_label("F6"))  # diagonal
    assert not e5.is_adjacent(Square.from_label("E7"))
    assert not e5.is_adjacent(e5)


def test_direction_between_adjacent_squares() -> None:
    e5 = Square.from_label("E5")
    assert direction(e5, Square.from_label("E6")) == (0, 1)
    assert direction(e5, Square.from_label("D5")) == (-1, 0)
