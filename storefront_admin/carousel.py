"""
CAROUSEL SCHEDULER

{index, running} state machine driven by a repeating tick. Only the slide
count is read; persistence is never touched.
"""
import logging
import threading

from django.conf import settings

logger = logging.getLogger(__name__)


def _daemon_timer(interval, function):
    timer = threading.Timer(interval, function)
    timer.daemon = True
    return timer


class CarouselScheduler:
    def __init__(self, interval=None, timer_factory=None):
        self.interval = interval if interval is not None else settings.STOREFRONT["CAROUSEL_INTERVAL"]
        self.timer_factory = timer_factory or _daemon_timer
        self.index = 0
        self.slide_count = 0
        self._timer = None
        # Bumped on every start/stop so ticks from a cancelled timer are dropped.
        self._generation = 0
        self._lock = threading.RLock()

    @property
    def running(self):
        return self._timer is not None

    def snapshot(self):
        return {
            "index": self.index,
            "running": self.running,
            "slide_count": self.slide_count,
            "interval": self.interval,
        }

    # ---- transitions ----

    def start(self):
        with self._lock:
            self._cancel()
            if self.slide_count > 1:
                self._schedule()

    def stop(self):
        with self._lock:
            self._cancel()

    def select(self, i):
        with self._lock:
            if not self.slide_count:
                return
            self.index = i % self.slide_count

    def advance(self):
        self.select(self.index + 1)

    def reload(self, slide_count):
        """Structural slide change: re-derive the count, go back to the first slide, restart."""
        with self._lock:
            self.slide_count = max(0, int(slide_count))
            self.index = 0
            self.start()

    # ---- triggers ----

    def pointer_enter(self):
        self.stop()

    def pointer_leave(self):
        self.start()

    def visibility_changed(self, hidden):
        if hidden:
            self.stop()
        else:
            self.start()

    # ---- timer plumbing ----

    def _cancel(self):
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _schedule(self):
        generation = self._generation
        self._timer = self.timer_factory(self.interval, lambda: self._tick(generation))
        self._timer.start()

    def _tick(self, generation):
        with self._lock:
            if generation != self._generation:
                return
            self.advance()
            self._schedule()


_scheduler = None
_scheduler_lock = threading.Lock()


def get_scheduler():
    """Process-wide scheduler shared by every request."""
    global _scheduler
    with _scheduler_lock:
        if _scheduler is None:
            _scheduler = CarouselScheduler()
            logger.debug("Carousel scheduler created (interval %.1fs)", _scheduler.interval)
        return _scheduler
