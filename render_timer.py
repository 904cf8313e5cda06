#render_timer.py

import time
import constants as C

class RenderTimer:
    """Wall-clock stopwatch for a render pass, used to timestamp log lines."""
    def __init__(self, clock=time.perf_counter):
        self.clock = clock
        self.started_at = None
        self.stopped_at = None

    def start(self):
        self.started_at = self.clock()
        self.stopped_at = None

    def stop(self):
        if self.started_at is not None:
            self.stopped_at = self.clock()

    @property
    def elapsed_seconds(self):
        """Seconds since start(); frozen once stop() has been called."""
        if self.started_at is None:
            return 0.0
        end = self.stopped_at if self.stopped_at is not None else self.clock()
        return end - self.started_at

    def get_display_string(self):
        elapsed = self.elapsed_seconds
        minutes = int(elapsed // C.SECONDS_PER_MINUTE)
        seconds = elapsed % C.SECONDS_PER_MINUTE
        return f"{minutes:02d}:{seconds:05.2f}"
