import argparse
import logging

from snake_sim.components.movement.direction import Direction
from snake_sim.game_instances.local_loop import LocalLoop
from snake_sim.schemas.settings import GameSettings

logger = logging.getLogger(__name__)


def build_settings(args: argparse.Namespace) -> GameSettings:
    settings = GameSettings.from_file(args.config) if args.config else GameSettings()

    overrides = {
        "width": args.width,
        "height": args.height,
        "cell_size": args.cell_size,
        "move_interval": args.move_interval,
        "seed": args.seed,
        "tick_rate": args.tick_rate,
        "player_name": args.player_name,
        "start_direction": Direction(args.direction) if args.direction else None,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if args.freeze_dead:
        overrides["tick_dead_actors"] = False

    return GameSettings.model_validate({**settings.model_dump(), **overrides})


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a grid based snake game.")
    parser.add_argument("--config", type=str, help="JSON file with game settings")
    parser.add_argument("--width", type=int, help="Grid width in cells")
    parser.add_argument("--height", type=int, help="Grid height in cells")
    parser.add_argument("--cell-size", type=int, help="Cell size in pixels")
    parser.add_argument("--move-interval", type=float, help="Seconds between snake steps")
    parser.add_argument("--seed", type=int, help="Seed for fruit placement")
    parser.add_argument("--tick-rate", type=int, help="Frames per second of the game loop")
    parser.add_argument("--player-name", type=str, help="Name of the player snake")
    parser.add_argument(
        "--direction",
        choices=[direction.value for direction in Direction],
        help="Starting direction of the player snake",
    )
    parser.add_argument(
        "--freeze-dead",
        action="store_true",
        help="Stop updating snakes once they are dead",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = build_settings(args)
    logger.debug("Running with settings %s", settings.model_dump_json())

    LocalLoop(settings).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
