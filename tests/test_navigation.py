import unittest
from pathlib import Path

from vibrosense.core.navigation import (
    AppState,
    BackToMenu,
    Begin,
    CancelConnect,
    CaptureNew,
    ConnectTimeout,
    Effect,
    EndAndSave,
    ExportFinished,
    ExportLogs,
    Screen,
    ViewLogs,
    update,
)


class NavigationTest(unittest.TestCase):
    def test_initial_state_is_welcome(self):
        self.assertIs(AppState().screen, Screen.WELCOME)

    def test_happy_path_through_capture(self):
        state, effects = update(AppState(), Begin())
        self.assertIs(state.screen, Screen.MENU)
        self.assertEqual(effects, ())

        state, effects = update(state, CaptureNew())
        self.assertIs(state.screen, Screen.CONNECTING)
        self.assertTrue(state.connect_pending)
        self.assertEqual(effects, (Effect.PLAY_HAPTIC, Effect.SCHEDULE_CONNECT))

        state, effects = update(state, ConnectTimeout())
        self.assertIs(state.screen, Screen.WAVEFORM)
        self.assertFalse(state.connect_pending)
        self.assertEqual(effects, (Effect.START_GENERATOR,))

        state, effects = update(state, EndAndSave())
        self.assertIs(state.screen, Screen.MENU)
        # Generator must stop before the snapshot is taken.
        self.assertEqual(effects, (Effect.STOP_GENERATOR, Effect.SAVE_RECORDING))

    def test_logs_round_trip_has_no_effects(self):
        menu = AppState(screen=Screen.MENU)
        state, effects = update(menu, ViewLogs())
        self.assertIs(state.screen, Screen.LOGS)
        self.assertEqual(effects, ())
        state, effects = update(state, BackToMenu())
        self.assertEqual(state, menu)
        self.assertEqual(effects, ())

    def test_cancel_connect_returns_to_menu(self):
        connecting = AppState(screen=Screen.CONNECTING, connect_pending=True)
        state, effects = update(connecting, CancelConnect())
        self.assertIs(state.screen, Screen.MENU)
        self.assertFalse(state.connect_pending)
        self.assertEqual(effects, (Effect.CANCEL_CONNECT,))

    def test_export_stays_on_menu(self):
        menu = AppState(screen=Screen.MENU)
        state, effects = update(menu, ExportLogs())
        self.assertEqual(state, menu)
        self.assertEqual(effects, (Effect.EXPORT_LOGS,))

    def test_export_finished_records_outcome_only(self):
        menu = AppState(screen=Screen.MENU, last_export_error="boom")
        state, effects = update(menu, ExportFinished(path=Path("out.csv")))
        self.assertIs(state.screen, Screen.MENU)
        self.assertEqual(state.last_export, Path("out.csv"))
        self.assertIsNone(state.last_export_error)
        self.assertEqual(effects, ())

    def test_unlisted_actions_are_ignored(self):
        cases = [
            (Screen.WELCOME, CaptureNew()),
            (Screen.MENU, Begin()),
            (Screen.MENU, ConnectTimeout()),
            (Screen.MENU, EndAndSave()),
            (Screen.CONNECTING, CaptureNew()),
            (Screen.CONNECTING, ViewLogs()),
            (Screen.WAVEFORM, BackToMenu()),
            (Screen.WAVEFORM, ConnectTimeout()),
            (Screen.LOGS, CaptureNew()),
            (Screen.LOGS, ExportLogs()),
        ]
        for screen, action in cases:
            with self.subTest(screen=screen, action=type(action).__name__):
                state = AppState(screen=screen)
                self.assertEqual(update(state, action), (state, ()))


if __name__ == "__main__":
    unittest.main()
