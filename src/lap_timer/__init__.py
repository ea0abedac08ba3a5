from .UI import UI as LapTimerUI
from .controller import TimerController
from .view_interface import TimerViewInterface
from .view_dummy import TimerViewDummy
from .config import Settings
from .shared import TimerState, Lap, formatTime

__all__ = [
    "LapTimerUI", "TimerController", "TimerViewInterface", "TimerViewDummy",
    "Settings", "TimerState", "Lap", "formatTime",
]
