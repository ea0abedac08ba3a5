import typing as tp
from abc import ABC, abstractmethod

from .shared import PauseLabel, LapLabel, ControlsEnabled

class TimerViewInterface(ABC):
    @abstractmethod
    def setDisplayText(self, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def setControls(
        self, pause_label: PauseLabel, lap_label: LapLabel,
        enabled: ControlsEnabled,
    ) -> None:
        '''
        The pause/continue and lap/clear buttons are dual-purpose.
        Their labels are dictated here, never toggled by the view.
        '''
        raise NotImplementedError

    @abstractmethod
    def setLapLines(self, lines: tp.Sequence[str]) -> None:
        '''
        Called after every mutation of the lap list, with all of it, in order.
        '''
        raise NotImplementedError
