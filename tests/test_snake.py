"""
Tests for Snake movement, direction buffering, collisions and growth.
"""

import pytest


def make_snake(x=5, y=5):
    from gridsnake.game.snake import Snake
    from gridsnake.game.types import Position

    return Snake(Position(x, y))


class TestSnakeReset:
    """Tests for the initial body."""

    def test_initial_body_faces_right(self):
        """Test the snake starts as three cells trailing left of the head."""
        from gridsnake.game.types import Direction, Position

        snake = make_snake()

        assert snake.get_positions() == [Position(5, 5), Position(4, 5), Position(3, 5)]
        assert snake.current_direction == Direction.RIGHT
        assert snake.next_direction == Direction.RIGHT
        assert snake.just_ate is False

    def test_reset_restores_state_and_emits(self, recorder):
        """Test reset() rebuilds the body and emits reset."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import Direction, Position

        snake = make_snake()
        snake.set_direction("down")
        snake.move(Board(10))
        snake.grow()
        recorder.listen(snake, "reset")

        snake.reset(Position(2, 2))

        assert snake.get_positions() == [Position(2, 2), Position(1, 2), Position(0, 2)]
        assert snake.current_direction == Direction.RIGHT
        assert snake.just_ate is False
        assert recorder.payloads("reset") == [snake.get_positions()]

    def test_get_positions_is_a_copy(self):
        """Test mutating the returned list leaves the snake intact."""
        snake = make_snake()
        positions = snake.get_positions()
        positions.clear()

        assert snake.get_length() == 3


class TestSnakeMovement:
    """Tests for move()."""

    def test_move_shifts_body(self, recorder):
        """Test a plain move keeps the length and emits move."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import Direction, Position

        snake = make_snake()
        recorder.listen(snake, "move", "tail_removed")

        result = snake.move(Board(10))

        assert result.success is True
        assert result.collision is None
        assert result.new_head == Position(6, 5)
        assert snake.get_positions() == [Position(6, 5), Position(5, 5), Position(4, 5)]
        assert recorder.payloads("tail_removed") == [Position(3, 5)]
        assert recorder.payloads("move") == [{
            "head": Position(6, 5),
            "tail": Position(4, 5),
            "direction": Direction.RIGHT,
            "length": 3,
        }]

    def test_length_constant_over_non_eating_moves(self):
        """Test k plain moves leave the length unchanged."""
        from gridsnake.game.board import Board

        snake = make_snake(2, 5)
        board = Board(20)

        for _ in range(10):
            assert snake.move(board).success

        assert snake.get_length() == 3

    def test_growth_is_deferred_to_next_move(self):
        """Test grow() adds exactly one cell on the next move and it persists."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import Position

        snake = make_snake()
        board = Board(20)

        snake.grow()
        assert snake.get_length() == 3

        snake.move(board)
        assert snake.get_length() == 4
        assert snake.get_tail() == Position(3, 5)
        assert snake.just_ate is False

        snake.move(board)
        assert snake.get_length() == 4

    def test_grow_emits_new_length(self, recorder):
        """Test grow() announces the upcoming length."""
        snake = make_snake()
        recorder.listen(snake, "grow")

        snake.grow()

        assert recorder.payloads("grow")[0]["new_length"] == 4


class TestDirection:
    """Tests for buffered direction changes."""

    def test_direction_applies_on_next_move(self):
        """Test set_direction() only writes the pending direction."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import Direction, Position

        snake = make_snake()

        assert snake.set_direction("up") is True
        assert snake.current_direction == Direction.RIGHT
        assert snake.next_direction == Direction.UP

        snake.move(Board(10))

        assert snake.current_direction == Direction.UP
        assert snake.get_head() == Position(5, 4)

    def test_opposite_direction_ignored(self):
        """Test reversing is a silent no-op."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import Direction, Position

        snake = make_snake()

        assert snake.set_direction("left") is False
        snake.move(Board(10))

        assert snake.current_direction == Direction.RIGHT
        assert snake.get_head() == Position(6, 5)

    def test_reversal_checked_against_current_not_pending(self):
        """Test two quick turns cannot fold the snake onto its neck."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import Direction

        snake = make_snake()

        snake.set_direction("up")
        # Still travelling right, so "left" is a reversal and is refused
        assert snake.set_direction("left") is False
        assert snake.next_direction == Direction.UP

        result = snake.move(Board(10))
        assert result.success is True

    def test_invalid_direction_logged_and_ignored(self, caplog):
        """Test unknown direction names are logged, not raised."""
        from gridsnake.game.types import Direction

        snake = make_snake()

        with caplog.at_level("WARNING"):
            assert snake.set_direction("sideways") is False
            assert snake.set_direction(None) is False

        assert snake.next_direction == Direction.RIGHT
        assert "Ignoring invalid direction" in caplog.text

    def test_accepts_enum_and_mixed_case(self, recorder):
        """Test Direction members and case-insensitive names both work."""
        from gridsnake.game.types import Direction

        snake = make_snake()
        recorder.listen(snake, "direction_change")

        assert snake.set_direction(Direction.DOWN)
        assert snake.set_direction(" Up ")

        assert recorder.payloads("direction_change") == [
            {"direction": Direction.DOWN}, {"direction": Direction.UP},
        ]

    def test_valid_directions(self):
        """Test every direction except the reversal is valid."""
        from gridsnake.game.types import Direction

        snake = make_snake()

        assert snake.get_valid_directions() == [Direction.RIGHT, Direction.DOWN, Direction.UP]
        assert snake.can_move_in_direction("left") is False
        assert snake.can_move_in_direction("nope") is False


class TestCollisions:
    """Tests for wall and self collisions."""

    def test_wall_collision(self, recorder):
        """Test leaving the board is a wall collision with no mutation."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import CollisionType, Position

        snake = make_snake(9, 5)
        before = snake.get_positions()
        recorder.listen(snake, "collision", "move")

        result = snake.move(Board(10))

        assert result.success is False
        assert result.collision == CollisionType.WALL
        assert result.collision == "wall"
        assert result.new_head == Position(10, 5)
        assert snake.get_positions() == before
        assert recorder.names() == ["collision"]

    @pytest.mark.parametrize("direction,start", [
        ("up", (5, 0)),
        ("down", (5, 9)),
    ])
    def test_wall_collision_vertical(self, direction, start):
        """Test top and bottom walls."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import CollisionType

        snake = make_snake(*start)
        snake.set_direction(direction)

        assert snake.move(Board(10)).collision == CollisionType.WALL

    def _coiled_state(self, just_ate):
        from gridsnake.game.types import Position

        # Head at (2,2) heading left; tail at (1,2) sits directly ahead
        return {
            "positions": [
                Position(2, 2), Position(2, 1), Position(1, 1),
                Position(0, 1), Position(0, 2), Position(1, 2),
            ],
            "current_direction": "left",
            "next_direction": "left",
            "just_ate": just_ate,
        }

    def test_moving_into_vacating_tail_is_allowed(self):
        """Test the tail cell is free when it moves away this tick."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import Position

        snake = make_snake()
        snake.deserialize(self._coiled_state(just_ate=False))

        result = snake.move(Board(5))

        assert result.success is True
        assert snake.get_head() == Position(1, 2)
        assert snake.get_length() == 6

    def test_moving_into_tail_after_eating_collides(self):
        """Test the tail is not exempt while growth is pending."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import CollisionType

        snake = make_snake()
        snake.deserialize(self._coiled_state(just_ate=True))
        before = snake.get_positions()

        result = snake.move(Board(5))

        assert result.success is False
        assert result.collision == CollisionType.SELF
        assert snake.get_positions() == before
        assert snake.just_ate is True

    def test_self_collision_with_body(self):
        """Test running into a body segment is a self collision."""
        from gridsnake.game.board import Board
        from gridsnake.game.types import CollisionType, Position

        snake = make_snake()
        snake.deserialize({
            "positions": [
                Position(2, 2), Position(3, 2), Position(3, 3),
                Position(2, 3), Position(1, 3),
            ],
            "current_direction": "left",
            "next_direction": "down",
            "just_ate": False,
        })

        assert snake.move(Board(6)).collision == CollisionType.SELF


class TestSerialization:
    """Tests for serialize/deserialize and queries."""

    def test_round_trip(self, recorder):
        """Test a serialized snake restores into another instance."""
        from gridsnake.game.board import Board

        source = make_snake()
        source.set_direction("down")
        source.move(Board(10))
        source.grow()

        target = make_snake(1, 1)
        recorder.listen(target, "state_restored")
        target.deserialize(source.serialize())

        assert target.get_positions() == source.get_positions()
        assert target.current_direction == source.current_direction
        assert target.just_ate is True
        assert len(recorder.payloads("state_restored")) == 1

    def test_deserialize_rejects_bad_state(self):
        """Test malformed snapshots raise ValueError."""
        snake = make_snake()

        with pytest.raises(ValueError):
            snake.deserialize({"positions": [], "current_direction": "up"})
        with pytest.raises(ValueError):
            snake.deserialize({"positions": [{"x": 1, "y": 1}], "current_direction": "north"})

    def test_info_and_occupancy(self):
        """Test query helpers."""
        from gridsnake.game.types import Position

        snake = make_snake()
        info = snake.get_info()

        assert info["head"] == Position(5, 5)
        assert info["tail"] == Position(3, 5)
        assert info["body"] == [Position(4, 5), Position(3, 5)]
        assert snake.occupies_position(Position(4, 5))
        assert not snake.occupies_position(Position(6, 5))

    def test_destroy(self):
        """Test destroy drops listeners and body."""
        snake = make_snake()
        snake.on("move", print)

        snake.destroy()

        assert snake.get_length() == 0
        assert snake.event_names() == []
