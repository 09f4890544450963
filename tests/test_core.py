"""
Tests for the game state: traversal, write-back, moves and end conditions.
"""

import pytest

from pearls.game import (
    LEVELS,
    Direction,
    GameConfig,
    IndexOutOfRangeError,
    MoveResolver,
    NoReachableBoundaryError,
    PearlsGame,
    RigidResolver,
    State,
    format_grid,
    parse_grid,
)


def player_cells(game: PearlsGame) -> int:
    return int(game.player_mask().sum())


class TestIntrospection:

    def test_new_game_counters(self, first_steps):
        assert first_steps.moves == 0
        assert first_steps.score == 0
        assert first_steps.dimensions() == (5, 7)
        assert first_steps.pearl_count() == 3
        assert first_steps.player_position() == (1, 1)

    @pytest.mark.parametrize("row,col", [(5, 0), (0, 7), (-1, 0)])
    def test_cell_at_out_of_range(self, first_steps, row, col):
        with pytest.raises(IndexOutOfRangeError):
            first_steps.cell_at(row, col)

    def test_cell_at(self, first_steps):
        cell = first_steps.cell_at(1, 4)
        assert cell.state == State.PEARL
        assert not cell.player_present

    def test_player_position_defaults_to_origin(self):
        game = PearlsGame(["...", ".@."])
        assert game.player_position() == (0, 0)

    def test_no_pearls_means_over_and_won(self, boxed_in):
        assert boxed_in.is_over()
        assert boxed_in.won()


class TestTraversal:

    def test_adjacent_boundary_gives_two_states(self, first_steps):
        assert first_steps.trace_sequence(Direction.UP) == [State.EMPTY, State.WALL]

    def test_walks_to_first_wall(self, first_steps):
        assert first_steps.trace_sequence(Direction.RIGHT) == [
            State.EMPTY, State.EMPTY, State.EMPTY, State.PEARL, State.EMPTY, State.WALL,
        ]

    def test_portal_jump(self, portal_row):
        assert portal_row.trace_sequence(Direction.RIGHT) == [
            State.EMPTY, State.PORTAL, State.PORTAL, State.WALL,
        ]

    def test_wraparound_steps(self):
        game = PearlsGame(["p.#", "...", "#.."])
        assert game.next_position(0, 0, Direction.LEFT) == (0, 2)
        assert game.next_position(0, 0, Direction.UP) == (2, 0)
        assert game.next_position(2, 2, Direction.DOWN) == (0, 2)
        assert game.next_position(2, 2, Direction.RIGHT) == (2, 0)

    def test_diagonal_portal_jump(self):
        game = PearlsGame(LEVELS["portals"])
        assert game.trace_sequence(Direction.RIGHT) == [
            State.EMPTY, State.EMPTY, State.PORTAL, State.PORTAL, State.EMPTY, State.WALL,
        ]
        # Both offsets apply to the cell the jump starts from
        assert game.next_position(1, 3, Direction.RIGHT, portal_jump=True) == (3, 6)
        game.move(Direction.RIGHT)
        assert game.player_position() == (3, 7)
        assert game.cell_at(1, 1).state == State.EMPTY
        assert not game.cell_at(1, 1).player_present

    def test_portal_jump_position(self, portal_row):
        assert portal_row.next_position(0, 1, Direction.RIGHT, portal_jump=True) == (0, 3)
        assert portal_row.next_position(0, 3, Direction.RIGHT, portal_jump=True) == (0, 1)

    def test_traversal_wraps_around_edge(self, portal_row):
        assert portal_row.trace_sequence(Direction.LEFT) == [State.EMPTY, State.WALL]

    def test_no_reachable_boundary(self):
        game = PearlsGame(["p.@"])
        with pytest.raises(NoReachableBoundaryError):
            game.trace_sequence(Direction.RIGHT)

    def test_portal_loop(self):
        # Player steps into portal 1, lands on its twin, walks back into the first one
        game = PearlsGame(["#1p.1"])
        with pytest.raises(NoReachableBoundaryError):
            game.trace_sequence(Direction.RIGHT)

    def test_limit_counts_every_step(self):
        game = PearlsGame(["p......#"], config=GameConfig(traversal_limit_factor=1))
        assert len(game.trace_sequence(Direction.RIGHT)) == 8


class TestWriteBack:

    def test_places_player_and_states(self, first_steps):
        states = [State.EMPTY, State.EMPTY, State.MOVABLE, State.EMPTY, State.EMPTY, State.WALL]
        first_steps.write_back(states, Direction.RIGHT, 1)
        assert first_steps.player_position() == (1, 2)
        assert first_steps.cell_at(1, 3).state == State.MOVABLE
        assert first_steps.cell_at(1, 4).state == State.EMPTY
        assert player_cells(first_steps) == 1

    def test_length_mismatch(self, first_steps):
        with pytest.raises(ValueError):
            first_steps.write_back([State.EMPTY], Direction.RIGHT, 0)

    def test_player_index_out_of_range(self, first_steps):
        with pytest.raises(IndexOutOfRangeError):
            first_steps.write_back([State.EMPTY, State.WALL], Direction.UP, 2)


class TestMove:

    def test_moves_counted_even_when_blocked(self, boxed_in):
        for direction in Direction:
            boxed_in.move(direction)
        assert boxed_in.moves == 4
        assert boxed_in.player_position() == (1, 1)

    def test_collects_pearl_and_wins(self):
        game = PearlsGame(["#p.@#"])
        records = game.move(Direction.RIGHT)
        assert [r.state for r in records] == [State.EMPTY, State.EMPTY, State.PEARL, State.WALL]
        assert records[2].disappeared
        assert game.player_position() == (0, 3)
        assert game.score == 1
        assert game.pearl_count() == 0
        assert game.is_over()
        assert game.won()

    def test_score_counts_pearls_that_stay(self):
        game = PearlsGame(["#p+.@#"])
        records = game.move(Direction.RIGHT)
        assert game.score == 1
        assert game.pearl_count() == 1
        assert not records[3].disappeared
        assert records[1].moved_to == 2
        assert game.to_strings() == ["#.p+@#"]

    def test_blocks_stack(self):
        game = PearlsGame(["#p.++..#"])
        records = game.move(Direction.RIGHT)
        assert records[3].moved_to == 5
        assert records[2].moved_to == 4
        assert game.to_strings() == ["#...p++#"]

    def test_portal_move_lands_past_jump(self, portal_row):
        portal_row.move(Direction.RIGHT)
        assert portal_row.player_position() == (0, 3)
        assert portal_row.cell_at(0, 1).state == State.PORTAL
        assert portal_row.cell_at(0, 3).state == State.PORTAL

    def test_player_on_portal_reparses(self, portal_row):
        portal_row.move(Direction.RIGHT)
        lines = portal_row.to_strings()
        assert lines == [".0.p#"]
        grid = parse_grid(lines)
        assert grid.cell(0, 3).state == State.PORTAL
        assert grid.cell(0, 3).player_present
        assert grid.offset(0, 1) == (0, 2)
        assert format_grid(grid) == lines

    def test_gate_closes_behind_player(self):
        game = PearlsGame(["#po.@#", "#@####"])
        game.move(Direction.RIGHT)
        assert game.to_strings()[0] == "#.x.p#"
        game.move(Direction.LEFT)
        assert game.player_position() == (0, 2)

    def test_lethal_spikes_lose(self):
        game = PearlsGame(["#p.<#", "#@###"])
        game.move(Direction.RIGHT)
        assert game.player_position() == (0, 3)
        assert game.cell_at(0, 3).player_present
        assert game.is_over()
        assert not game.won()

    def test_harmless_spikes_stop_player(self):
        game = PearlsGame(["#p.>#", "#@###"])
        game.move(Direction.RIGHT)
        assert game.player_position() == (0, 2)
        assert not game.is_over()

    def test_reset(self, first_steps):
        first_steps.move(Direction.RIGHT)
        first_steps.reset()
        assert first_steps.moves == 0
        assert first_steps.score == 0
        assert first_steps.to_strings() == LEVELS["first_steps"]

    def test_first_steps_walkthrough(self, first_steps):
        for direction in (Direction.RIGHT, Direction.DOWN, Direction.LEFT):
            first_steps.move(direction)
        assert first_steps.won()
        assert first_steps.score == 3
        assert first_steps.moves == 3


class TestResolverInjection:

    def test_custom_resolver_is_used(self, first_steps):
        calls = []

        class StayPut(MoveResolver):
            name = "stay_put"

            def resolve_blocks(self, sequence, records):
                calls.append("blocks")

            def resolve_player(self, sequence, records, direction):
                calls.append(direction)
                return 0

        game = PearlsGame(first_steps.description, StayPut())
        game.move(Direction.RIGHT)
        assert calls == ["blocks", Direction.RIGHT]
        assert game.player_position() == (1, 1)
        assert game.score == 1
        assert game.pearl_count() == 3

    def test_rigid_blocks_stop_player(self):
        game = PearlsGame(["#p.+.#"], RigidResolver())
        records = game.move(Direction.RIGHT)
        assert not records[2].moved
        assert game.to_strings() == ["#.p+.#"]

    def test_resolver_from_config(self):
        game = PearlsGame(["#p+.#"], config=GameConfig(resolver="rigid"))
        assert isinstance(game.resolver, RigidResolver)


class TestInvariants:

    @pytest.mark.parametrize("name", sorted(LEVELS))
    def test_level_invariants(self, name):
        game = PearlsGame(LEVELS[name])
        rows, cols = game.dimensions()
        pattern = [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP, Direction.DOWN,
                   Direction.RIGHT, Direction.UP, Direction.LEFT]
        for step in range(40):
            before = game.pearl_count()
            game.move(pattern[step % len(pattern)])
            assert game.pearl_count() <= before
            assert game.dimensions() == (rows, cols)
            if game.won():
                assert game.is_over()
            if game.is_over():
                break
            assert player_cells(game) == 1
        assert game.moves == step + 1
