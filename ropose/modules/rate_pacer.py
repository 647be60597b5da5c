import time


def remaining_wait(period, iteration_start, now):
    """Time left in the period that began at iteration_start, never negative."""
    return max(0.0, iteration_start + period - now)


class FixedRatePacer:
    """
    Fixed-rate pacing: each iteration is scheduled one period after the
    previous scheduled start, not after the previous iteration finished.

    clock and sleep are injectable so a cooperative runtime (or a test) can
    supply its own notion of time.
    """

    def __init__(self, period, clock=time.monotonic, sleep=time.sleep):
        if period <= 0.0:
            raise ValueError(f"Pacing period must be positive, got {period}")
        self.period = period
        self.clock = clock
        self._sleep = sleep
        self.iteration_start = clock()

    @classmethod
    def from_rate(cls, rate_hz, **kwargs):
        if rate_hz <= 0.0:
            raise ValueError(f"Rate must be positive, got {rate_hz}")
        return cls(1.0 / rate_hz, **kwargs)

    def reset(self):
        self.iteration_start = self.clock()

    def sleep(self):
        """
        Wait out the rest of the current period.
        Returns False when the iteration overran its period.
        """
        now = self.clock()
        expected_end = self.iteration_start + self.period
        wait = remaining_wait(self.period, self.iteration_start, now)

        if wait > 0.0:
            self._sleep(wait)
            self.iteration_start = expected_end
            return True

        # Overran: start the next iteration now. More than a full period
        # behind restarts the schedule so missed ticks are not replayed.
        if now > expected_end + self.period:
            self.iteration_start = now
        else:
            self.iteration_start = expected_end
        return False
