"""Unit tests for grid addressing."""

import pytest
from chess_sudoku.core.grid import (
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    Point,
    all_points,
    box_cells,
    box_origin,
    from_index,
    index,
    is_on_board,
    king_cells,
    knight_cells,
)
from chess_sudoku.exceptions import InvalidPointError


class TestAddressing:
    """Tests for index <-> point conversion."""

    def test_index_is_row_major(self):
        assert index(0, 0) == 0
        assert index(8, 0) == 8
        assert index(0, 1) == 9
        assert index(8, 8) == 80

    def test_round_trip(self):
        """from_index inverts index over the whole board."""
        for row in range(9):
            for column in range(9):
                assert from_index(index(column, row)) == (column, row)

    def test_from_index_components(self):
        p = from_index(40)
        assert p.column == 4
        assert p.row == 4

    def test_all_points_in_index_order(self):
        points = all_points()
        assert len(points) == 81
        assert points[10] == Point(1, 1)

    def test_index_rejects_off_board(self):
        with pytest.raises(InvalidPointError):
            index(9, 0)
        with pytest.raises(InvalidPointError):
            index(0, -1)

    def test_from_index_rejects_off_board(self):
        with pytest.raises(InvalidPointError):
            from_index(81)


class TestBounds:
    """The playable range is [0, 8] in both directions."""

    def test_corners_on_board(self):
        assert is_on_board(Point(0, 0))
        assert is_on_board(Point(8, 8))

    def test_coordinate_nine_rejected(self):
        assert not is_on_board(Point(9, 0))
        assert not is_on_board(Point(0, 9))
        assert not is_on_board(Point(9, 9))

    def test_negative_rejected(self):
        assert not is_on_board(Point(-1, 4))
        assert not is_on_board(Point(4, -2))


class TestBoxes:
    """Tests for box geometry."""

    def test_box_origin_anchors(self):
        anchors = {box_origin(p) for p in all_points()}
        assert anchors == {Point(c, r) for c in (0, 3, 6) for r in (0, 3, 6)}

    def test_box_origin(self):
        assert box_origin(Point(4, 7)) == Point(3, 6)
        assert box_origin(Point(2, 2)) == Point(0, 0)

    def test_box_cells(self):
        cells = box_cells(Point(7, 1))
        assert len(cells) == 9
        assert cells[0] == Point(6, 0)
        assert cells[-1] == Point(8, 2)


class TestOffsets:
    """Tests for the chess move tables."""

    def test_king_offsets(self):
        assert len(KING_OFFSETS) == 8
        assert Point(0, 0) not in KING_OFFSETS
        assert all(max(abs(d.column), abs(d.row)) == 1 for d in KING_OFFSETS)

    def test_knight_offsets(self):
        assert len(set(KNIGHT_OFFSETS)) == 8
        assert all(sorted((abs(d.column), abs(d.row))) == [1, 2] for d in KNIGHT_OFFSETS)

    def test_point_addition(self):
        assert Point(3, 4) + Point(-2, 1) == Point(1, 5)

    def test_offsets_clipped_at_corner(self):
        assert set(king_cells(Point(0, 0))) == {Point(1, 0), Point(0, 1), Point(1, 1)}
        assert set(knight_cells(Point(0, 0))) == {Point(2, 1), Point(1, 2)}
        assert set(knight_cells(Point(8, 8))) == {Point(6, 7), Point(7, 6)}

    def test_offsets_in_centre(self):
        assert len(king_cells(Point(4, 4))) == 8
        assert len(knight_cells(Point(4, 4))) == 8

    def test_no_offset_reaches_column_nine(self):
        for p in all_points():
            for q in king_cells(p) + knight_cells(p):
                assert is_on_board(q)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
