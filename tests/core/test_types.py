"""Tests for Coordinate, Side and PieceKind."""

import pytest

from chesslet.core.enums import PieceKind, Side
from chesslet.core.types import A1, ALL_COORDINATES, E2, E4, H8, Coordinate


class TestCoordinate:
    def test_out_of_range_rejected(self) -> None:
        for rank, file in ((-1, 0), (0, -1), (8, 0), (0, 8)):
            with pytest.raises(ValueError, match="out of range"):
                Coordinate(rank, file)

    def test_offset_inside(self) -> None:
        assert E2.offset(2, 0) == E4

    def test_offset_off_board(self) -> None:
        assert A1.offset(-1, 0) is None
        assert H8.offset(0, 1) is None

    def test_names(self) -> None:
        assert A1.name == "a1"
        assert E4.name == "e4"
        assert str(H8) == "h8"

    def test_parse(self) -> None:
        assert Coordinate.parse("e4") == Coordinate(3, 4)
        assert Coordinate.parse(" E2 ") == E2

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e44"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            Coordinate.parse(name)

    def test_index_matches_order(self) -> None:
        assert [c.index for c in ALL_COORDINATES] == list(range(64))

    def test_hashable(self) -> None:
        assert len({Coordinate(1, 1), Coordinate(1, 1), Coordinate(1, 2)}) == 2


class TestSide:
    def test_pawn_geometry_mirrors(self) -> None:
        assert Side.FIRST.forward == 1
        assert Side.SECOND.forward == -1
        assert Side.FIRST.pawn_rank == 1
        assert Side.SECOND.pawn_rank == 6
        assert Side.FIRST.home_rank == 0
        assert Side.SECOND.home_rank == 7


class TestPieceKind:
    def test_material_values(self) -> None:
        assert PieceKind.PAWN.material_value == 1
        assert PieceKind.KNIGHT.material_value == 3
        assert PieceKind.BISHOP.material_value == 3
        assert PieceKind.ROOK.material_value == 5
        assert PieceKind.QUEEN.material_value == 9
        assert PieceKind.KING.material_value == 0

    def test_sliders(self) -> None:
        sliders = {k for k in PieceKind if k.is_slider}
        assert sliders == {PieceKind.BISHOP, PieceKind.ROOK, PieceKind.QUEEN}
