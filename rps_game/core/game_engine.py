import logging

import cv2

from ..game.game_logic import Move
from ..game.round_controller import Phase, RoundController
from ..ui.screens import HomeScreen, GameScreen, ResultScreen
from ..utils.constants import (
    WINDOW_NAME, FRAME_DELAY_MS, KEY_ESC, ENTER_KEYS, KEY_SPACE, KEY_QUIT, MOVE_KEYS,
)

logger = logging.getLogger(__name__)


class GameEngine:
    """OpenCV window that shows the current round and forwards input to the controller."""

    def __init__(self, controller=None):
        self.controller = controller or RoundController()
        self.screens = {
            Phase.IDLE: HomeScreen(),
            Phase.CHOOSING: GameScreen(),
            Phase.RESOLVED: ResultScreen(),
        }
        self.frame = None
        self.needs_redraw = True
        self._unsubscribe = self.controller.subscribe(self._on_round_changed)

    def _on_round_changed(self, round_state):
        self.needs_redraw = True

    @property
    def current_screen(self):
        return self.screens[self.controller.phase]

    def render(self):
        round_state = self.controller.round
        self.frame = self.screens[round_state.phase].render(round_state)
        self.needs_redraw = False
        return self.frame

    def handle_key(self, key):
        """Apply a key press. Returns False when the game should quit."""
        if key in (KEY_ESC, KEY_QUIT):
            return False

        phase = self.controller.phase
        confirm = key == KEY_SPACE or key in ENTER_KEYS
        if phase is Phase.IDLE and confirm:
            self.controller.enter_game()
        elif phase is Phase.CHOOSING and key in MOVE_KEYS:
            self.controller.submit_move(Move(MOVE_KEYS[key]))
        elif phase is Phase.RESOLVED and confirm:
            self.controller.reset()
        return True

    def handle_click(self, x, y):
        """Trigger the button under (x, y), if any. Returns the button pressed."""
        round_state = self.controller.round
        for button in self.screens[round_state.phase].buttons(round_state):
            if button.contains(x, y):
                self._dispatch(button)
                return button
        return None

    def _dispatch(self, button):
        if button.action == "enter_game":
            self.controller.enter_game()
        elif button.action == "submit_move":
            self.controller.submit_move(button.move)
        elif button.action == "reset":
            self.controller.reset()
        else:
            raise ValueError(f"unknown button action: {button.action}")

    def run(self):
        cv2.namedWindow(WINDOW_NAME)

        # Errors raised in the mouse callback surface here after waitKey returns
        callback_errors = []

        def mouse_callback(event, x, y, flags, param):
            if event == cv2.EVENT_LBUTTONUP:
                try:
                    self.handle_click(x, y)
                except Exception as exc:
                    callback_errors.append(exc)

        cv2.setMouseCallback(WINDOW_NAME, mouse_callback)
        logger.info("Game window opened")

        try:
            while True:
                if self.needs_redraw or self.frame is None:
                    self.render()
                cv2.imshow(WINDOW_NAME, self.frame)

                key = cv2.waitKey(FRAME_DELAY_MS) & 0xFF
                if callback_errors:
                    raise callback_errors.pop(0)
                if not self.handle_key(key):
                    break

                # Window closed with the title bar button
                if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
                    break
        except Exception:
            logger.exception("Game loop stopped on an unexpected error")
            raise
        finally:
            self._unsubscribe()
            cv2.destroyAllWindows()
            logger.info("Game window closed")
