import typing as tp

from .shared import PauseLabel, LapLabel, ControlsEnabled, TimerState, ZERO_TEXT
from .view_interface import TimerViewInterface

class TimerViewDummy(TimerViewInterface):
    def __init__(self) -> None:
        self.display_text = ZERO_TEXT
        self.pause_label = PauseLabel.Pause
        self.lap_label = LapLabel.Lap
        self.enabled = ControlsEnabled.forState(TimerState.Stopped)
        self.lap_lines: list[str] = []
        self.n_display_updates = 0

    def setDisplayText(self, text: str) -> None:
        self.display_text = text
        self.n_display_updates += 1

    def setControls(
        self, pause_label: PauseLabel, lap_label: LapLabel,
        enabled: ControlsEnabled,
    ) -> None:
        self.pause_label = pause_label
        self.lap_label = lap_label
        self.enabled = enabled

    def setLapLines(self, lines: tp.Sequence[str]) -> None:
        self.lap_lines = list(lines)
