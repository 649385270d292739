import cv2
import numpy as np

from .constants import (
    TEXT_THICKNESS, COLOR_TEXT, COLOR_BORDER,
    ICON_WIN, ICON_LOSS, ICON_TIE, ICON_HOME, ICON_GAME, ICON_PLAY_AGAIN,
)


def blank_frame(width, height, color):
    """Create a frame filled with a single BGR color"""
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    frame[:] = color
    return frame


def draw_centered_text(frame, text, center_y, scale, color=COLOR_TEXT, thickness=TEXT_THICKNESS, center_x=None):
    if not text:
        return frame
    (text_w, text_h), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, thickness)
    if center_x is None:
        center_x = frame.shape[1] // 2
    origin = (int(center_x - text_w / 2), int(center_y + text_h / 2))
    cv2.putText(frame, text, origin, cv2.FONT_HERSHEY_SIMPLEX, scale, color, thickness, cv2.LINE_AA)
    return frame


def draw_glass_panel(frame, rect, opacity=0.55, radius=16):
    """Blend a translucent white rounded rectangle over the frame"""
    x, y, w, h = rect
    bg_h, bg_w = frame.shape[:2]
    if x < 0 or y < 0 or x + w > bg_w or y + h > bg_h:
        return frame

    # Rounded mask
    mask = np.zeros((h, w), dtype=np.uint8)
    r = min(radius, w // 2, h // 2)
    cv2.rectangle(mask, (r, 0), (w - r, h), 255, -1)
    cv2.rectangle(mask, (0, r), (w, h - r), 255, -1)
    for cx, cy in ((r, r), (w - r - 1, r), (r, h - r - 1), (w - r - 1, h - r - 1)):
        cv2.circle(mask, (cx, cy), r, 255, -1)

    alpha = (mask / 255.0) * opacity
    region = frame[y:y+h, x:x+w].astype(np.float64)
    for c in range(3):
        region[:, :, c] = region[:, :, c] * (1 - alpha) + 255 * alpha
    frame[y:y+h, x:x+w] = region.astype(np.uint8)

    # Subtle border
    contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    cv2.drawContours(frame, contours, -1, COLOR_BORDER, 1, offset=(x, y))
    return frame


def draw_icon(frame, icon_key, center, size, color=COLOR_TEXT):
    """Draw a simple vector icon for the given icon key"""
    cx, cy = center
    half = size // 2

    if icon_key == "mountain.2.fill":
        pts = np.array([[cx - half, cy + half], [cx - half // 3, cy - half],
                        [cx + half // 6, cy], [cx + half // 2, cy - half // 2],
                        [cx + half, cy + half]], np.int32)
        cv2.fillPoly(frame, [pts.reshape((-1, 1, 2))], color)
    elif icon_key == "document.fill":
        cv2.rectangle(frame, (cx - half * 3 // 4, cy - half), (cx + half * 3 // 4, cy + half), color, -1)
    elif icon_key == "scissors":
        cv2.line(frame, (cx - half, cy - half), (cx + half, cy + half), color, 2)
        cv2.line(frame, (cx + half, cy - half), (cx - half, cy + half), color, 2)
        cv2.circle(frame, (cx - half, cy + half), max(half // 3, 2), color, 2)
        cv2.circle(frame, (cx + half, cy + half), max(half // 3, 2), color, 2)
    elif icon_key in (ICON_HOME, ICON_GAME):
        thickness = -1 if icon_key == ICON_GAME else max(size // 20, 2)
        cv2.ellipse(frame, (cx, cy), (half, half * 2 // 3), 0, 0, 360, color, thickness)
        pad_color = COLOR_BORDER if icon_key == ICON_GAME else color
        cv2.line(frame, (cx - half // 2, cy - half // 6), (cx - half // 2, cy + half // 6), pad_color, 2)
        cv2.line(frame, (cx - half * 2 // 3, cy), (cx - half // 3, cy), pad_color, 2)
        cv2.circle(frame, (cx + half // 2, cy), max(half // 8, 2), pad_color, -1)
    elif icon_key == ICON_PLAY_AGAIN:
        pts = np.array([[cx - half, cy], [cx, cy - half], [cx + half, cy]], np.int32)
        cv2.fillPoly(frame, [pts.reshape((-1, 1, 2))], color)
        cv2.rectangle(frame, (cx - half * 2 // 3, cy), (cx + half * 2 // 3, cy + half), color, -1)
    elif icon_key in (ICON_WIN, ICON_LOSS, ICON_TIE):
        _draw_crossed_flags(frame, icon_key, center, half, color)
    else:
        # ICON_DEFAULT and anything unknown
        cv2.circle(frame, (cx, cy), half, color, 2)
        draw_centered_text(frame, "?", cy, size / 40.0, color, 2, center_x=cx)

    return frame


def _draw_crossed_flags(frame, icon_key, center, half, color):
    cx, cy = center
    # Two crossed poles
    left_top, right_top = (cx - half, cy - half), (cx + half, cy - half)
    cv2.line(frame, left_top, (cx + half // 2, cy + half), color, 3)
    cv2.line(frame, right_top, (cx - half // 2, cy + half), color, 3)

    flag_w, flag_h = half * 2 // 3, half // 2
    left_flag = np.array([left_top, (left_top[0] - flag_w, left_top[1]),
                          (left_top[0] - flag_w, left_top[1] + flag_h),
                          (left_top[0], left_top[1] + flag_h)], np.int32)
    right_flag = np.array([right_top, (right_top[0] + flag_w, right_top[1]),
                           (right_top[0] + flag_w, right_top[1] + flag_h),
                           (right_top[0], right_top[1] + flag_h)], np.int32)

    # Filled flag marks the side that won
    if icon_key == ICON_WIN:
        fills = (True, False)
    elif icon_key == ICON_LOSS:
        fills = (False, True)
    else:
        fills = (True, True)

    for pts, filled in zip((left_flag, right_flag), fills):
        pts = pts.reshape((-1, 1, 2))
        if filled:
            cv2.fillPoly(frame, [pts], color)
        else:
            cv2.polylines(frame, [pts], True, color, 2)
