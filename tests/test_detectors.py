"""Trap geometry, contested positions and setup potential."""
import pytest

from glyph_ai.board import Board, HexCoord
from glyph_ai.detectors import enemy_cast_reach, evaluate_position, evaluate_setup, is_contested
from glyph_ai.detectors.setup import extension_paths, leyline_crossings, productive_gaps, spacing_bonus
from glyph_ai.detectors.trap import adjacency, leyline_blocks, triangle_bonus, wall_synergy
from glyph_ai.game_models import Player

Y, B = Player.YELLOW, Player.BLUE
O = HexCoord(0, 0)


class TestTrapGeometry:
    def test_leyline_blocks(self):
        assert leyline_blocks(O, HexCoord(2, 0), HexCoord(0, 3)) == 2
        assert leyline_blocks(O, HexCoord(2, 0), HexCoord(1, 1)) == 1
        assert leyline_blocks(O, HexCoord(2, 1), HexCoord(1, 1)) == 0

    def test_wall_synergy(self):
        board = Board(4)
        assert wall_synergy(board, O) == 0.0
        assert wall_synergy(board, HexCoord(4, -2)) == 1.0
        assert wall_synergy(board, HexCoord(4, 0)) == 2.0

    def test_triangle(self):
        # adjacent leylines (E and NE) are tighter than E and NW
        assert triangle_bonus(O, HexCoord(2, 0), HexCoord(1, -1)) == 2.0
        assert triangle_bonus(O, HexCoord(2, 0), HexCoord(0, -2)) == 1.5
        assert triangle_bonus(O, HexCoord(2, 0), HexCoord(3, 0)) == 0.0
        assert triangle_bonus(O, HexCoord(2, 0), HexCoord(1, 1)) == 0.0

    def test_adjacency_counts_tiles_and_glyphlings(self, state_factory):
        state = state_factory(
            tiles=[(1, 0, "A", Y), (0, 1, "B", B)],
            glyphlings=[(Y, 0, (-1, 0)), (B, 0, (0, 0))],
        )
        assert adjacency(state, O, Y) == 2
        assert adjacency(state, O, B) == 1


class TestContest:
    def test_enemy_reach(self, state_factory):
        state = state_factory(glyphlings=[(B, 0, (0, 0)), (Y, 0, (3, -3))])
        reach = enemy_cast_reach(state, Y)
        assert HexCoord(1, 0) in reach
        assert is_contested(state, HexCoord(-4, 4), Y)

    def test_tangled_enemy_reaches_nothing(self, state_factory):
        ring = [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]
        state = state_factory(tiles=[(q, r, "E", Y) for q, r in ring], glyphlings=[(B, 0, (0, 0))])
        assert enemy_cast_reach(state, Y) == set()

    def test_evaluate_position(self, state_factory, lexicon):
        state = state_factory(tiles=[(0, 0, "C", Y), (2, 0, "T", B)])
        cp = evaluate_position(state, lexicon, HexCoord(1, 0))
        assert cp.potential_word_count == 1
        assert cp.best_word_length == 3
        assert cp.adjacent_tiles == 2
        assert cp.denial_value == pytest.approx(2.0)

    def test_isolated_or_occupied_positions_are_worthless(self, state_factory, lexicon):
        state = state_factory(tiles=[(0, 0, "C", Y)])
        assert evaluate_position(state, lexicon, HexCoord(3, 0)).denial_value == 0.0
        assert evaluate_position(state, lexicon, O).denial_value == 0.0


class TestSetup:
    def test_shape_signals(self, state_factory, lexicon):
        state = state_factory(tiles=[(0, 0, "E", Y), (1, 0, "A", Y), (0, 1, "T", Y)])
        assert extension_paths(state, O) == 2
        assert leyline_crossings(state, O) == 2
        assert spacing_bonus(state, O) == 3.0

    def test_spacing_rules(self, state_factory):
        lone = state_factory(tiles=[(0, 0, "E", Y)])
        assert spacing_bonus(lone, O) == 0.0
        one = state_factory(tiles=[(0, 0, "E", Y), (1, 0, "A", Y)])
        assert spacing_bonus(one, O) == 4.0
        clump = state_factory(tiles=[(0, 0, "E", Y), (1, 0, "A", Y), (0, 1, "T", Y), (-1, 0, "S", Y)])
        assert spacing_bonus(clump, O) == -2.0

    def test_productive_gap(self, state_factory, lexicon):
        state = state_factory(tiles=[(0, 0, "C", Y), (2, 0, "T", B)])
        assert productive_gaps(state, lexicon, O) == 1
        setup = evaluate_setup(state, lexicon, O)
        assert setup.gaps == 1
        assert setup.total == pytest.approx(3.0 + setup.extension_value + setup.crossing_value + setup.spacing_bonus)
