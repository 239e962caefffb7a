"""
Fixed-rate game loop driving the Classic Pong simulation
"""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

from classic_pong.core.interfaces.renderer import RendererProtocol
from classic_pong.core.physics import Simulation
from classic_pong.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class GameLoop:
    """Invokes the simulation tick at a fixed cadence

    Deadlines advance by exactly one interval per tick. When a tick runs
    late the next one starts immediately, so the average rate is kept.
    """

    def __init__(
        self,
        simulation: Simulation,
        renderer: RendererProtocol | None = None,
        interval: float = 0.016,
        poll_input: Callable[[], Any] | None = None,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], Any] | None = None,
    ):
        """
        Args:
            simulation: State advanced on every tick
            renderer: Receives a snapshot after every tick, optional
            interval: Tick period in seconds
            poll_input: Called at the start of every tick, before the simulation update
            clock: Monotonic time source in seconds
            sleep: Waits for the given number of seconds. Defaults to a wait
                that returns early when the loop is stopped.
        """
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")

        self.simulation = simulation
        self.renderer = renderer
        self.interval = interval
        self.poll_input = poll_input
        self.error: BaseException | None = None
        self.ticks = 0

        self._clock = clock
        self._stop_event = threading.Event()
        self._sleep = sleep or self._stop_event.wait
        self._thread: threading.Thread | None = None

    @classmethod
    def from_config(
        cls,
        simulation: Simulation,
        renderer: RendererProtocol | None = None,
        config: GameConfig | None = None,
        **kwargs: Any,
    ) -> "GameLoop":
        config = config or game_config
        return cls(simulation, renderer, interval=config.tick_interval, **kwargs)

    def step(self) -> dict[str, list[Any]]:
        """Runs one tick immediately: input, simulation update, render request"""
        if self.poll_input is not None:
            self.poll_input()

        events = self.simulation.tick()
        self.ticks += 1

        if self.renderer is not None:
            self.renderer.render_frame(self.simulation.get_snapshot())

        return events

    def run(self, max_ticks: int | None = None) -> int:
        """Runs the loop on the calling thread until stopped, returns the number of ticks"""
        self._stop_event.clear()
        return self._loop(max_ticks)

    def _loop(self, max_ticks: int | None = None) -> int:
        ticks = 0
        next_deadline = self._clock()
        logger.debug("Game loop started, interval %.3fs", self.interval)

        try:
            while not self._stop_event.is_set():
                self.step()
                ticks += 1
                if max_ticks is not None and ticks >= max_ticks:
                    break

                next_deadline += self.interval
                delay = next_deadline - self._clock()
                if delay > 0:
                    self._sleep(delay)
        finally:
            logger.debug("Game loop stopped after %d ticks", ticks)

        return ticks

    def start(self) -> None:
        """Runs the loop on a background daemon thread"""
        if self.is_running():
            raise RuntimeError("Game loop is already running")

        self.error = None
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_in_thread, name="game-loop", daemon=True)
        self._thread.start()

    def _run_in_thread(self) -> None:
        try:
            self._loop()
        except Exception as e:
            self.error = e
            logger.exception("Game loop stopped by an error")

    def stop(self) -> None:
        """Asks the loop to stop after the current tick"""
        self._stop_event.set()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
