from __future__ import annotations

import typing as tp

from textual import on
from textual.app import App, ComposeResult, ScreenStackError
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import (
    Button, Footer, Header, Label, ListItem, ListView, Static,
)

from .shared import (
    Millis, PauseLabel, LapLabel, ControlsEnabled, ZERO_TEXT, titled,
)
from .view_interface import TimerViewInterface
from .controller import TimerController, monotonicMillis
from .config import Settings

class TextualTimerView(TimerViewInterface):
    def __init__(self, ui: UI) -> None:
        self.ui = ui
        self.n_lap_items = 0

    def setDisplayText(self, text: str) -> None:
        try:
            self.ui.screen
        except ScreenStackError:
            return
        self.ui.query_one('#display', Static).update(text)

    def setControls(
        self, pause_label: PauseLabel, lap_label: LapLabel,
        enabled: ControlsEnabled,
    ) -> None:
        bStart: Button = self.ui.query_one('#start-btn', Button)
        bPause: Button = self.ui.query_one('#pause-btn', Button)
        bStop:  Button = self.ui.query_one('#stop-btn',  Button)
        bLap:   Button = self.ui.query_one('#lap-btn',   Button)
        bPause.label = pause_label.value
        bLap  .label = lap_label.value
        bStart.disabled = not enabled.start
        bPause.disabled = not enabled.pause
        bStop .disabled = not enabled.stop
        bLap  .disabled = not enabled.lap

    def setLapLines(self, lines: tp.Sequence[str]) -> None:
        listView: ListView = self.ui.query_one('#laps', ListView)
        if len(lines) < self.n_lap_items:
            listView.clear()
            self.n_lap_items = 0
        new_lines = lines[self.n_lap_items:]
        if new_lines:
            listView.extend(ListItem(Label(line)) for line in new_lines)
            listView.scroll_end(animate=False)
        self.n_lap_items = len(lines)

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("s", "start_timer", "Start"),
        Binding("p", "toggle_pause", "Pause/Continue"),
        Binding("x", "stop_timer", "Stop"),
        Binding("l", "lap_or_clear", "Lap/Clear"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        timer_settings: Settings | None = None,
        clock: tp.Callable[[], Millis] = monotonicMillis,
    ) -> None:
        '''
        `clock` is injectable so that tests can control time.
        '''
        super().__init__()

        self.timer_settings = timer_settings or Settings()
        self.controller = TimerController(
            TextualTimerView(self),
            clock=clock,
            refresh_interval_ms=self.timer_settings.refresh_ms,
        )

        self.title = self.timer_settings.title

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield titled(Static(ZERO_TEXT, id="display"), 'Elapsed')
        with Horizontal(id="controls"):
            yield Button("Start", id="start-btn", variant="success")
            yield Button(PauseLabel.Pause.value, id="pause-btn", disabled=True)
            yield Button("Stop", id="stop-btn", variant="error", disabled=True)
            yield Button(LapLabel.Lap.value, id="lap-btn", variant="primary")
        yield titled(ListView(id="laps"), 'Laps')
        yield Footer()

    def on_mount(self) -> None:
        self.controller.render()

    def on_unmount(self) -> None:
        self.controller.close()

    @on(Button.Pressed, '#start-btn')
    def action_start_timer(self) -> None:
        self.controller.start()

    @on(Button.Pressed, '#pause-btn')
    def action_toggle_pause(self) -> None:
        self.controller.togglePause()

    @on(Button.Pressed, '#stop-btn')
    def action_stop_timer(self) -> None:
        self.controller.stop()

    @on(Button.Pressed, '#lap-btn')
    def action_lap_or_clear(self) -> None:
        self.controller.lapOrClear()

    def exit(self, result=None, return_code: int = 0, message=None) -> None:
        self.controller.close()
        return super().exit(result, return_code, message)
