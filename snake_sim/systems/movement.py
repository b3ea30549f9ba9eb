from typing import Iterator

from snake_sim.entities.type import Snake
from snake_sim.schemas.game import PlayerCommand
from snake_sim.systems.system import System


class MovementSystem(System):
    def setup(self):
        pass

    def run(self, snake: Snake, elapsed: float) -> Iterator[Snake]:
        """Advance the snake's clock and step it once per due interval.

        Yields the snake after every single step so the caller can resolve
        collisions before the next one.
        """
        steps = snake.advance_clock(elapsed)
        for _ in range(steps):
            snake.step()
            yield snake

    def apply_commands(self, snakes: list[Snake], move_commands: list[PlayerCommand]):
        if not move_commands:
            return

        # Later commands for the same player overwrite earlier ones
        commanded_players = {command.player_name: command for command in move_commands}

        known_players = {snake.player_name for snake in snakes}
        unknown_players = sorted(set(commanded_players) - known_players)
        if unknown_players:
            raise ValueError(f"No snake for players: {', '.join(unknown_players)}")

        for snake in snakes:
            player_command = commanded_players.get(snake.player_name)
            if player_command is not None:
                snake.set_move(player_command.direction)
