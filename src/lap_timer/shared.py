from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from textual.widget import Widget

Millis = int

class TimerState(Enum):
    Stopped = 'Stopped'
    Running = 'Running'
    Paused  = 'Paused'

class PauseLabel(str, Enum):
    Pause    = 'Pause'
    Continue = 'Continue'

class LapLabel(str, Enum):
    Lap   = 'Lap'
    Clear = 'Clear'

def formatTime(ms: Millis) -> str:
    '''
    `MM:SS:CC`. Minutes are not wrapped, so they grow past 99.
    CC is hundredths of a second, truncated.
    '''
    if ms < 0:
        ms = 0
    total_seconds, ms_in_second = divmod(ms, 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f'{minutes:02d}:{seconds:02d}:{ms_in_second // 10:02d}'

ZERO_TEXT = formatTime(0)

class Lap(BaseModel):
    index: int = Field(ge=1)   # 1-based
    split_ms: Millis = Field(ge=0)

    model_config = ConfigDict(
        frozen=True,
    )

    def render(self) -> str:
        return f'Lap {self.index} - {formatTime(self.split_ms)}'

class ControlsEnabled(BaseModel):
    start: bool
    pause: bool
    stop: bool
    lap: bool

    model_config = ConfigDict(
        frozen=True,
    )

    @classmethod
    def forState(cls, state: TimerState) -> ControlsEnabled:
        match state:
            case TimerState.Stopped:
                return cls(start=True,  pause=False, stop=False, lap=True)
            case TimerState.Running:
                return cls(start=False, pause=True,  stop=True,  lap=True)
            case TimerState.Paused:
                return cls(start=False, pause=True,  stop=True,  lap=True)
        raise ValueError(f'Unknown TimerState: {state}')

def titled(w: Widget, /, title: str) -> Widget:
    w.styles.border = ('round', '#999')
    w.border_title = title
    w.styles.padding = (0, 1)
    return w
