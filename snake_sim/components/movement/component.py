from snake_sim.components.movement.direction import Direction


class MovementComponent:
    def __init__(self, direction: Direction, move_interval: float):
        if move_interval <= 0:
            raise ValueError(f"Move interval must be positive, got {move_interval}")
        self.direction = direction
        self.move_interval = move_interval  # Seconds between grid steps
        self.elapsed_since_move = 0.0

    def advance_clock(self, elapsed: float) -> int:
        """Accumulate elapsed seconds and return how many steps are now due.

        Leftover time below one interval is carried over to the next call.
        """
        if elapsed < 0:
            raise ValueError(f"Elapsed time cannot be negative, got {elapsed}")

        self.elapsed_since_move += elapsed
        steps = 0
        while self.elapsed_since_move >= self.move_interval:
            self.elapsed_since_move -= self.move_interval
            steps += 1
        return steps

    def move(self):
        raise NotImplementedError(f"Child component MUST implement {self.move.__name__}")
