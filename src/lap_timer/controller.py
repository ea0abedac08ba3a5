from __future__ import annotations

import asyncio
import logging
import time
import typing as tp

from .shared import (
    Millis, TimerState, PauseLabel, LapLabel, Lap, ControlsEnabled,
    formatTime, ZERO_TEXT,
)
from .view_interface import TimerViewInterface

log = logging.getLogger(__name__)

REFRESH_INTERVAL_MS = 10

def monotonicMillis() -> Millis:
    return time.monotonic_ns() // 1_000_000

class TimerController:
    def __init__(
        self,
        view: TimerViewInterface,
        clock: tp.Callable[[], Millis] = monotonicMillis,
        refresh_interval_ms: int | None = REFRESH_INTERVAL_MS,
    ) -> None:
        '''
        `clock` returns milliseconds from any fixed origin.
        `refresh_interval_ms=None` disables the refresh loop,
        so the controller can be driven without an event loop.
        Otherwise start() and resume() must run inside one.
        '''
        self.view = view
        self.clock = clock
        self.refresh_interval_ms = refresh_interval_ms

        self.state = TimerState.Stopped
        self.elapsed_ms: Millis = 0
        self.start_instant: Millis = 0
        self.last_lap_mark_ms: Millis = 0
        self.laps: list[Lap] = []
        # Label of the lap/clear control whenever it acts as clear.
        self.lap_mode = LapLabel.Lap

        self.generation = 0
        self.refreshTask: asyncio.Task | None = None

    def ignored(self, operation: str) -> None:
        log.debug(f'{operation}() ignored while {self.state.value}.')

    def start(self) -> None:
        if self.state is not TimerState.Stopped:
            self.ignored('start')
            return
        self.start_instant = self.clock()
        self.state = TimerState.Running
        self.startRefresh()
        self.renderControls()

    def pause(self) -> None:
        if self.state is not TimerState.Running:
            self.ignored('pause')
            return
        self.elapsed_ms += self.runningSegment()
        self.state = TimerState.Paused
        self.cancelRefresh()
        self.lap_mode = LapLabel.Clear
        self.tick()
        self.renderControls()

    def resume(self) -> None:
        if self.state is not TimerState.Paused:
            self.ignored('resume')
            return
        self.start_instant = self.clock()
        self.state = TimerState.Running
        self.startRefresh()
        self.renderControls()

    def togglePause(self) -> None:
        match self.state:
            case TimerState.Running:
                self.pause()
            case TimerState.Paused:
                self.resume()
            case _:
                self.ignored('togglePause')

    def stop(self) -> None:
        # Also accepted while Stopped, as a reset.
        self.cancelRefresh()
        self.state = TimerState.Stopped
        self.elapsed_ms = 0
        self.last_lap_mark_ms = 0
        self.lap_mode = LapLabel.Clear
        self.view.setDisplayText(ZERO_TEXT)
        self.renderControls()

    def recordLap(self) -> Lap | None:
        if self.state is not TimerState.Running:
            self.ignored('recordLap')
            return None
        current = max(self.currentDisplayTime(), self.last_lap_mark_ms)
        lap = Lap(
            index=len(self.laps) + 1,
            split_ms=current - self.last_lap_mark_ms,
        )
        self.laps.append(lap)
        self.last_lap_mark_ms = current
        self.renderLaps()
        return lap

    def clearLaps(self) -> None:
        if self.state is TimerState.Running:
            self.ignored('clearLaps')
            return
        self.laps.clear()
        self.lap_mode = LapLabel.Lap
        self.view.setDisplayText(ZERO_TEXT)
        self.renderLaps()
        self.renderControls()

    def lapOrClear(self) -> None:
        match self.state:
            case TimerState.Running:
                self.recordLap()
            case _:
                self.clearLaps()

    def runningSegment(self) -> Millis:
        return max(0, self.clock() - self.start_instant)

    def currentDisplayTime(self) -> Millis:
        if self.state is TimerState.Running:
            return self.elapsed_ms + self.runningSegment()
        return self.elapsed_ms

    @property
    def pauseLabel(self) -> PauseLabel:
        if self.state is TimerState.Paused:
            return PauseLabel.Continue
        return PauseLabel.Pause

    @property
    def lapLabel(self) -> LapLabel:
        if self.state is TimerState.Running:
            return LapLabel.Lap
        return self.lap_mode

    def lapLines(self) -> list[str]:
        return [lap.render() for lap in self.laps]

    def tick(self) -> None:
        self.view.setDisplayText(formatTime(self.currentDisplayTime()))

    def renderControls(self) -> None:
        self.view.setControls(
            self.pauseLabel, self.lapLabel,
            ControlsEnabled.forState(self.state),
        )

    def renderLaps(self) -> None:
        self.view.setLapLines(self.lapLines())

    def render(self) -> None:
        self.tick()
        self.renderControls()
        self.renderLaps()

    def startRefresh(self) -> None:
        self.cancelRefresh()
        if self.refresh_interval_ms is None:
            return
        self.refreshTask = asyncio.create_task(
            self.refreshLoop(self.generation),
        )

    def cancelRefresh(self) -> None:
        '''
        Synchronous. Once this returns, no tick of the cancelled
        loop renders, even one whose sleep has already completed.
        '''
        self.generation += 1
        if self.refreshTask is not None:
            self.refreshTask.cancel()
            self.refreshTask = None

    def isCurrent(self, generation: int) -> bool:
        return (
            generation == self.generation and
            self.state is TimerState.Running
        )

    async def refreshLoop(self, generation: int) -> None:
        assert self.refresh_interval_ms is not None
        interval = self.refresh_interval_ms / 1000
        try:
            while True:
                await asyncio.sleep(interval)
                if not self.isCurrent(generation):
                    return
                self.tick()
        except asyncio.CancelledError:
            return

    def close(self) -> None:
        self.cancelRefresh()
