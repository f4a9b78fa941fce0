# view.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import (
    CELL_SIZE, CELL_GAP, BOARD_PAD, HUD_HEIGHT, FOOTER_HEIGHT,
    BG, BOARD_BG, EMPTY, HEAD, BODY, FOOD,
    TEXT, BEST_TEXT, HINT_TEXT, CHIP_BG, OVERLAY,
    INSTRUCTIONS,
)
from .game import GameStatus, Snapshot

STATUS_LABELS = {
    GameStatus.READY:     ("Ready", (147, 197, 253)),
    GameStatus.RUNNING:   ("Running", (52, 211, 153)),
    GameStatus.PAUSED:    ("Paused", (251, 191, 36)),
    GameStatus.GAME_OVER: ("Game Over", (248, 113, 113)),
}

OVERLAY_MESSAGES = {
    GameStatus.READY:     "Press Enter to start",
    GameStatus.PAUSED:    "Paused",
    GameStatus.GAME_OVER: "Game Over - press Enter",
}


# ---------- Layout ----------
def board_size_px(width: int, height: int) -> Tuple[int, int]:
    step = CELL_SIZE + CELL_GAP
    return (width * step - CELL_GAP + 2 * BOARD_PAD,
            height * step - CELL_GAP + 2 * BOARD_PAD)

def window_size(width: int, height: int) -> Tuple[int, int]:
    bw, bh = board_size_px(width, height)
    return bw + 2 * BOARD_PAD, bh + HUD_HEIGHT + FOOTER_HEIGHT

def overlay_message(status: GameStatus) -> Optional[str]:
    return OVERLAY_MESSAGES.get(status)

def hud_text(snap: Snapshot) -> Tuple[str, str, str, str]:
    """Score, best, status label and tick delay as shown in the HUD."""
    label, _ = STATUS_LABELS[snap.status]
    return (
        f"Score: {snap.score}",
        f"Best: {snap.high_score}",
        label,
        f"Tick: {snap.tick_delay_ms}ms",
    )


# ---------- Draw ----------
def draw_cell(surface: pygame.Surface, gx: int, gy: int, color) -> None:
    step = CELL_SIZE + CELL_GAP
    rect = pygame.Rect(BOARD_PAD + gx * step, BOARD_PAD + gy * step, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(surface, color, rect, border_radius=4)

def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    score, best, label, tick = hud_text(snap)
    _, status_color = STATUS_LABELS[snap.status]
    x = BOARD_PAD
    for text, color in ((score, TEXT), (best, BEST_TEXT), (label, status_color), (tick, TEXT)):
        img = font.render(text, True, color)
        screen.blit(img, img.get_rect(midleft=(x, HUD_HEIGHT // 2)))
        x += img.get_width() + 24

def draw_board(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    board = pygame.Surface(board_size_px(snap.width, snap.height), pygame.SRCALPHA)
    board.fill(BOARD_BG)

    body = set(snap.snake[1:])
    for gy in range(snap.height):
        for gx in range(snap.width):
            cell = (gx, gy)
            if cell == snap.head:
                color = HEAD
            elif cell == snap.food:
                color = FOOD
            elif cell in body:
                color = BODY
            else:
                color = EMPTY
            draw_cell(board, gx, gy, color)

    # Dim with translucent overlay
    message = overlay_message(snap.status)
    if message is not None:
        shade = pygame.Surface(board.get_size(), pygame.SRCALPHA)
        shade.fill(OVERLAY)
        board.blit(shade, (0, 0))
        img = font.render(message, True, TEXT)
        board.blit(img, img.get_rect(center=board.get_rect().center))

    screen.blit(board, (BOARD_PAD, HUD_HEIGHT))

def draw_instructions(screen: pygame.Surface, font: pygame.font.Font) -> None:
    x = BOARD_PAD
    y = screen.get_height() - FOOTER_HEIGHT // 2
    for text in INSTRUCTIONS:
        img = font.render(text, True, HINT_TEXT)
        chip = img.get_rect(midleft=(x + 12, y)).inflate(24, 12)
        pygame.draw.rect(screen, CHIP_BG, chip, border_radius=6)
        screen.blit(img, img.get_rect(center=chip.center))
        x = chip.right + 12

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    screen.fill(BG)
    draw_hud(screen, font, snap)
    draw_board(screen, font, snap)
    draw_instructions(screen, font)
