"""Tests for Piece letters and figurines."""

import pytest

from chesslet.core.enums import PieceKind, Side
from chesslet.core.piece import Piece


class TestPieceLetters:
    @pytest.mark.parametrize("char", list("PNBRQKpnbrqk"))
    def test_from_char_round_trip(self, char: str) -> None:
        assert str(Piece.from_char(char)) == char

    def test_case_selects_side(self) -> None:
        assert Piece.from_char("N") == Piece(PieceKind.KNIGHT, Side.FIRST)
        assert Piece.from_char("n") == Piece(PieceKind.KNIGHT, Side.SECOND)

    @pytest.mark.parametrize("char", ["", " ", "x", "1", "NN"])
    def test_invalid(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)


class TestPieceSymbols:
    def test_first_side(self) -> None:
        symbols = [Piece(kind, Side.FIRST).symbol for kind in PieceKind]
        assert symbols == ["♙", "♘", "♗", "♖", "♕", "♔"]

    def test_second_side(self) -> None:
        symbols = [Piece(kind, Side.SECOND).symbol for kind in PieceKind]
        assert symbols == ["♟", "♞", "♝", "♜", "♛", "♚"]

    def test_material_value(self) -> None:
        assert Piece(PieceKind.QUEEN, Side.SECOND).material_value == 9
