import time


class Timer:
    def __init__(self):
        self.reset()

    def reset(self):
        self._time = time.perf_counter_ns()

    def lap_sec(self) -> float:
        """Return the seconds since the last reset and start a new lap."""
        now = time.perf_counter_ns()
        elapsed = (now - self._time) / 1e9
        self._time = now
        return elapsed
