from dataclasses import dataclass
from typing import Optional

import cv2

from ..game.game_logic import Move
from ..game.round_controller import Accent, outcome_accent, outcome_icon, outcome_label
from ..utils.constants import (
    WINDOW_WIDTH, WINDOW_HEIGHT, TITLE_SCALE, HEADING_SCALE, TEXT_SCALE,
    BUTTON_HEIGHT, BUTTON_PADDING, ICON_SIZE,
    COLOR_SUCCESS, COLOR_FAILURE, COLOR_WARNING, COLOR_TEXT, COLOR_PANEL,
    ICON_HOME, ICON_GAME, ICON_PLAY_AGAIN,
)
from ..utils.image_utils import blank_frame, draw_centered_text, draw_glass_panel, draw_icon

ACCENT_COLORS = {
    Accent.SUCCESS: COLOR_SUCCESS,
    Accent.FAILURE: COLOR_FAILURE,
    Accent.WARNING: COLOR_WARNING,
}


@dataclass(frozen=True)
class Button:
    label: str
    rect: tuple
    action: str
    icon: Optional[str] = None
    move: Optional[Move] = None

    def contains(self, x, y):
        bx, by, bw, bh = self.rect
        return bx <= x < bx + bw and by <= y < by + bh


def background_for(round_state):
    return ACCENT_COLORS[outcome_accent(round_state.outcome)]


def draw_button(frame, button):
    x, y, w, h = button.rect
    draw_glass_panel(frame, button.rect)
    if button.icon:
        icon_x = x + BUTTON_PADDING + ICON_SIZE // 2
        draw_icon(frame, button.icon, (icon_x, y + h // 2), ICON_SIZE)
        text_x = icon_x + ICON_SIZE // 2 + (w - BUTTON_PADDING - ICON_SIZE) // 2
    else:
        text_x = x + w // 2
    draw_centered_text(frame, button.label, y + h // 2, TEXT_SCALE, center_x=text_x)
    return frame


class Screen:
    def new_frame(self, round_state):
        return blank_frame(WINDOW_WIDTH, WINDOW_HEIGHT, background_for(round_state))

    def buttons(self, round_state):
        return []

    def draw(self, frame, round_state):
        for button in self.buttons(round_state):
            draw_button(frame, button)
        return frame

    def render(self, round_state):
        return self.draw(self.new_frame(round_state), round_state)


class HomeScreen(Screen):
    def buttons(self, round_state):
        w = 200
        return [Button("Click Me", ((WINDOW_WIDTH - w) // 2, WINDOW_HEIGHT - 140, w, BUTTON_HEIGHT), "enter_game")]

    def draw(self, frame, round_state):
        draw_centered_text(frame, "Rock, Paper, Scissors!", 80, TITLE_SCALE)
        draw_icon(frame, ICON_HOME, (WINDOW_WIDTH // 2, 280), 200)
        return super().draw(frame, round_state)


class GameScreen(Screen):
    def buttons(self, round_state):
        moves = list(Move)
        gap = 8
        w = (WINDOW_WIDTH - 2 * BUTTON_PADDING - gap * (len(moves) - 1)) // len(moves)
        y = WINDOW_HEIGHT - 200 - BUTTON_HEIGHT
        return [
            Button(move.display_name, (BUTTON_PADDING + i * (w + gap), y, w, BUTTON_HEIGHT),
                   "submit_move", icon=move.icon_key, move=move)
            for i, move in enumerate(moves)
        ]

    def draw(self, frame, round_state):
        draw_icon(frame, ICON_GAME, (WINDOW_WIDTH // 2, 60), 48)
        draw_centered_text(frame, "Choose", WINDOW_HEIGHT - 320, HEADING_SCALE, thickness=3)
        return super().draw(frame, round_state)


class ResultScreen(Screen):
    def buttons(self, round_state):
        w = 220
        return [Button("Play Again", ((WINDOW_WIDTH - w) // 2, WINDOW_HEIGHT - 140, w, BUTTON_HEIGHT),
                       "reset", icon=ICON_PLAY_AGAIN)]

    def draw(self, frame, round_state):
        draw_icon(frame, outcome_icon(round_state.outcome), (WINDOW_WIDTH // 2, 140), 80)
        draw_centered_text(frame, outcome_label(round_state.outcome), 240, TITLE_SCALE)

        # Picks panel
        panel = (BUTTON_PADDING, 300, WINDOW_WIDTH - 2 * BUTTON_PADDING, 140)
        x, y, w, h = panel
        cv2.rectangle(frame, (x, y), (x + w, y + h), COLOR_PANEL, -1)
        half = (w - 3 * BUTTON_PADDING) // 2
        for i, (prefix, move) in enumerate((("You Picked", round_state.player_move),
                                           ("Opp Picked", round_state.opponent_move))):
            rect = (x + BUTTON_PADDING + i * (half + BUTTON_PADDING), y + BUTTON_PADDING,
                    half, h - 2 * BUTTON_PADDING)
            draw_glass_panel(frame, rect)
            name = move.display_name if move is not None else "None"
            center_x = rect[0] + rect[2] // 2
            draw_centered_text(frame, f"{prefix}:", rect[1] + rect[3] // 3, TEXT_SCALE, COLOR_TEXT, center_x=center_x)
            draw_centered_text(frame, name, rect[1] + rect[3] * 2 // 3, TEXT_SCALE, COLOR_TEXT, center_x=center_x)

        return super().draw(frame, round_state)
