import logging
import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"
import pygame  # noqa: E402

from snake_sim.game_logic.world import World  # noqa: E402
from snake_sim.schemas.settings import GameSettings  # noqa: E402
from snake_sim.systems.player_input import InputSystem  # noqa: E402
from snake_sim.systems.render import RenderSystem  # noqa: E402
from snake_sim.utils.timer import Timer  # noqa: E402

logger = logging.getLogger(__name__)

TARGET_TIME_STEP = 1 / 60  # Seconds of game time per World.update


class LocalLoop:
    def __init__(self, settings: GameSettings):
        self.settings = settings
        self.world = World.from_settings(settings)

        self.input_system = InputSystem()
        self.rendering_system = RenderSystem(settings.width, settings.height, settings.cell_size)

        self._timer = Timer()
        self._frame_time = 0.0
        self._running = False

    def setup(self):
        pygame.init()

        self.input_system.setup()
        self.rendering_system.setup()

        self._clock = pygame.time.Clock()
        self._timer.reset()
        self._running = True

    def close(self):
        pygame.quit()

    def run(self) -> int:
        self.setup()
        logger.info(
            "Starting a %dx%d game for '%s'",
            self.settings.width,
            self.settings.height,
            self.settings.player_name,
        )

        try:
            while self._running:
                snake_direction, quit_game = self.input_system.run()
                if quit_game:
                    self._running = False
                    break

                if snake_direction is not None:
                    self.world.handle_input(snake_direction)

                self.rendering_system.run(self.world.snapshot())
                self.rendering_system.present()

                self.advance(self._timer.lap_sec())

                self._clock.tick(self.settings.tick_rate)
        finally:
            self.close()

        score = self.world.actors[0].score
        logger.info("Game over, final score %d", score)
        return score

    def advance(self, frame_time: float):
        """Feed wall-clock time to the world in fixed steps."""
        self._frame_time += frame_time
        while self._frame_time >= TARGET_TIME_STEP:
            self._frame_time -= TARGET_TIME_STEP
            self.world.update(TARGET_TIME_STEP)
            if self.world.actors[0].dead or self.world.grid_full:
                self._running = False
                break
