"""Deterministic stand-ins for the Tk scheduler and the clock."""


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


class FakeScheduler:
    """Implements after/after_cancel against a FakeClock."""

    def __init__(self, clock):
        self.clock = clock
        self.jobs = {}
        self._next_id = 0

    def after(self, ms, func):
        self._next_id += 1
        job = f"after#{self._next_id}"
        self.jobs[job] = (self.clock.now + ms / 1000.0, self._next_id, func)
        return job

    def after_cancel(self, job):
        self.jobs.pop(job, None)

    def advance(self, seconds):
        """Move time forward, running every job that falls due on the way."""
        end = self.clock.now + seconds
        while True:
            due = [(d, seq, job) for job, (d, seq, _) in self.jobs.items() if d <= end + 1e-9]
            if not due:
                break
            d, _, job = min(due)
            _, _, func = self.jobs.pop(job)
            self.clock.now = max(self.clock.now, d)
            func()
        self.clock.now = end
