"""Tests for the World: ticking, fruit and multi-snake rules."""

import pytest

from snake_sim.components.body.position import Position
from snake_sim.components.movement.direction import Direction
from snake_sim.game_logic.world import World
from snake_sim.schemas.game import PlayerCommand, WorldSnapshot
from snake_sim.schemas.settings import GameSettings


def make_world(**settings) -> World:
    settings.setdefault("move_interval", 1.0)
    settings.setdefault("seed", 7)
    return World.from_settings(GameSettings(**settings))


class TestWorldCreation:
    """Tests for World construction."""

    def test_default_snake(self):
        """A new world holds one snake at (5, 5) heading right."""
        world = World(40, 30, 20, seed=3)
        assert len(world.actors) == 1
        snake = world.actors[0]
        assert snake.get_head() == Position(5, 5)
        assert snake.current_direction == Direction.RIGHT
        assert snake.move_interval == pytest.approx(0.05)

    def test_grid_properties(self):
        """Grid bounds and cell size come from the constructor."""
        world = World(12, 8, 16, seed=3)
        assert (world.grid_width, world.grid_height, world.cell_size) == (12, 8, 16)

    def test_fruit_not_on_snake(self):
        """The initial fruit is inside the grid and off the snake."""
        for seed in range(20):
            world = World(10, 10, 20, seed=seed)
            fruit = world.fruit_position
            assert 0 <= fruit.x < 10 and 0 <= fruit.y < 10
            assert fruit not in world.occupied_cells()

    def test_seeded_fruit_is_deterministic(self):
        """The same seed places the fruit on the same cell."""
        assert World(20, 20, 20, seed=99).fruit_position == World(20, 20, 20, seed=99).fruit_position

    def test_start_clamped_into_small_grid(self):
        """The default start cell is pulled inside grids smaller than it."""
        world = World(4, 4, 20, seed=3)
        snake = world.actors[0]
        assert snake.get_head() == Position(3, 3)
        assert snake.tail_to_points() == [Position(2, 3), Position(1, 3), Position(0, 3)]
        assert world.fruit_position not in world.occupied_cells()

    def test_settings_used_when_no_arguments(self):
        """A world built from settings alone takes its grid from them."""
        world = World(settings=GameSettings(width=10, height=10, cell_size=8, seed=1))
        assert (world.grid_width, world.grid_height, world.cell_size) == (10, 10, 8)
        assert world.settings.seed == 1

    def test_arguments_override_settings(self):
        """Explicit arguments win over the settings they are passed with."""
        world = World(12, settings=GameSettings(width=10, height=10, cell_size=8, move_interval=1.0))
        assert (world.grid_width, world.grid_height, world.cell_size) == (12, 10, 8)
        assert world.actors[0].move_interval == 1.0


class TestWorldUpdate:
    """Tests for World.update."""

    def test_end_to_end_wall_death(self, small_world):
        """A snake running right on a 10x10 grid dies at x = 10."""
        snake = small_world.actors[0]

        small_world.update(1.0)
        assert snake.get_head() == Position(6, 5)
        assert snake.alive

        for _ in range(3):
            small_world.update(1.0)
        assert snake.get_head() == Position(9, 5)
        assert snake.alive

        small_world.update(1.0)
        assert snake.get_head() == Position(10, 5)
        assert snake.dead

        for _ in range(5):
            small_world.update(1.0)
        assert snake.dead

    def test_dead_snakes_keep_ticking_by_default(self, small_world):
        """Dead snakes still move unless configured otherwise."""
        snake = small_world.actors[0]
        snake.dead = True
        small_world.update(1.0)
        assert snake.get_head() == Position(6, 5)

    def test_dead_snakes_frozen(self):
        """With tick_dead_actors off a dead snake stays put."""
        world = make_world(width=10, height=10, tick_dead_actors=False)
        snake = world.actors[0]
        snake.dead = True
        world.update(1.0)
        assert snake.get_head() == Position(5, 5)

    def test_eating_fruit(self, small_world):
        """Eating scores 10, grows by one and moves the fruit."""
        snake = small_world.actors[0]
        small_world.fruit.position = Position(6, 5)

        small_world.update(1.0)

        assert snake.score == 20
        assert len(snake.body) == 4
        assert small_world.fruit_position not in small_world.occupied_cells()

    def test_no_fruit_no_growth(self, small_world):
        """Moving past empty cells keeps the length and score."""
        snake = small_world.actors[0]
        small_world.fruit.position = Position(0, 0)
        small_world.update(1.0)
        assert snake.score == 10
        assert len(snake.body) == 3

    def test_reverse_input_ignored(self, small_world):
        """handle_input drops a reversal."""
        assert small_world.handle_input(Direction.LEFT) is False
        small_world.update(1.0)
        assert small_world.actors[0].get_head() == Position(6, 5)

    def test_input_turns_snake(self, small_world):
        """handle_input steers the first snake."""
        assert small_world.handle_input(Direction.DOWN) is True
        small_world.update(1.0)
        assert small_world.actors[0].get_head() == Position(5, 6)

    def test_negative_elapsed_rejected(self, small_world):
        """Time never goes backwards."""
        with pytest.raises(ValueError):
            small_world.update(-1.0)


class TestFruitRelocation:
    """Tests for relocate_fruit."""

    def test_never_on_snake(self):
        """Every relocation lands on a free cell inside the grid."""
        world = make_world(width=7, height=6)
        world.actors[0].add_segment()
        occupied = world.occupied_cells()
        for _ in range(200):
            fruit = world.relocate_fruit()
            assert fruit == world.fruit_position
            assert fruit not in occupied
            assert 0 <= fruit.x < 7 and 0 <= fruit.y < 6

    def test_single_free_cell(self):
        """With one free cell left the fruit always lands there."""
        world = make_world(width=5, height=1, start_x=4, start_y=0)
        assert world.fruit_position == Position(0, 0)
        assert world.relocate_fruit() == Position(0, 0)

    def test_eating_last_free_cell(self):
        """Filling the grid by eating takes the fruit off it."""
        world = make_world(width=5, height=1, start_x=3, start_y=0)
        snake = world.actors[0]
        assert world.fruit_position == Position(4, 0)

        world.update(1.0)

        assert snake.alive
        assert snake.score == 20
        assert len(snake.body) == 4
        assert world.fruit_position is None
        assert world.grid_full
        assert world.snapshot().fruit is None

    def test_full_grid_keeps_ticking(self):
        """Without a fruit the snakes still move and collide."""
        world = make_world(width=5, height=1, start_x=3, start_y=0)
        world.update(1.0)
        world.update(1.0)
        assert world.actors[0].get_head() == Position(5, 0)
        assert world.actors[0].dead
        assert world.fruit_position is None

    def test_full_grid_rejected(self):
        """A grid without free cells cannot hold a fruit."""
        with pytest.raises(ValueError):
            make_world(width=4, height=1, start_x=3, start_y=0)

    def test_covering_new_snake_moves_fruit(self):
        """Adding a snake on top of the fruit relocates it."""
        world = make_world(width=30, height=30)
        world.fruit.position = Position(20, 20)
        world.add_actor(Position(20, 20), Direction.UP)
        assert world.fruit_position not in world.occupied_cells()


class TestMultipleSnakes:
    """Tests for worlds with more than one snake."""

    def test_actors_keep_insertion_order(self):
        """Snakes are listed in the order they were added."""
        world = make_world()
        second = world.add_actor(Position(20, 20), Direction.LEFT, player_name="second")
        assert [snake.player_name for snake in world.actors] == ["player", "second"]
        assert world.actors[1] is second

    def test_default_names_and_colors_differ(self):
        """Added snakes get distinct names and colors."""
        world = make_world()
        second = world.add_actor(Position(20, 20))
        assert second.player_name != world.actors[0].player_name
        assert second.color != world.actors[0].color

    def test_duplicate_player_rejected(self):
        """Player names identify snakes."""
        world = make_world()
        with pytest.raises(ValueError):
            world.add_actor(Position(20, 20), player_name="player")

    def test_running_into_other_body(self):
        """A snake dies when its head enters another snake's tail."""
        world = make_world()
        first = world.actors[0]
        second = world.add_actor(Position(8, 4), Direction.DOWN, player_name="second")
        world.fruit.position = Position(30, 20)

        for _ in range(3):
            world.update(1.0)

        assert first.get_head() == Position(8, 5)
        assert first.dead
        assert second.alive

    def test_head_on_collision(self):
        """Heads meeting on the same cell kill both snakes."""
        world = make_world()
        first = world.actors[0]
        second = world.add_actor(Position(7, 5), Direction.LEFT, player_name="second")
        world.fruit.position = Position(30, 20)

        world.update(1.0)
        assert first.get_head() == second.get_head() == Position(6, 5)
        assert first.alive
        assert second.dead

        # The first snake sees the second one's head on the next check
        world.update(0.0)
        assert first.dead

    def test_single_snake_ignores_own_head(self):
        """Alone on the grid a snake only checks its tail."""
        world = make_world()
        obstacles = world.game_logic_system.obstacles_for(world.actors[0], world.actors)
        assert obstacles == world.actors[0].tail_to_points()

    def test_command_routing(self):
        """Player commands steer the named snake only."""
        world = make_world()
        second = world.add_actor(Position(20, 20), Direction.LEFT, player_name="second")
        world.handle_command(PlayerCommand(player_name="second", direction=Direction.UP))
        assert second.pending_direction == Direction.UP
        assert world.actors[0].pending_direction == Direction.RIGHT

    def test_command_for_unknown_player(self):
        """Commands naming no snake are rejected."""
        world = make_world()
        with pytest.raises(ValueError):
            world.handle_command(PlayerCommand(player_name="ghost", direction=Direction.UP))


class TestSnapshot:
    """Tests for World.snapshot."""

    def test_snapshot_contents(self, small_world):
        """The snapshot mirrors grid, fruit and snakes."""
        snapshot = small_world.snapshot()
        assert isinstance(snapshot, WorldSnapshot)
        assert (snapshot.width, snapshot.height, snapshot.cell_size) == (10, 10, 20)
        assert snapshot.fruit == small_world.fruit_position

        (actor,) = snapshot.actors
        assert actor.player_name == "player"
        assert actor.head == Position(5, 5)
        assert actor.tail == [Position(4, 5), Position(3, 5), Position(2, 5)]
        assert actor.score == 10
        assert actor.alive is True

    def test_snapshot_serializes(self, small_world):
        """Snapshots round trip through JSON for external renderers."""
        snapshot = small_world.snapshot()
        assert WorldSnapshot.model_validate_json(snapshot.model_dump_json()) == snapshot
