from dataclasses import dataclass
from typing import Optional

# ----- Window & grid -----
CELL_SIZE = 26
CELL_GAP = 4
BOARD_PAD = 16
HUD_HEIGHT = 56
FOOTER_HEIGHT = 48
FPS = 60

# ----- Colors -----
BG        = (2, 6, 23)
BOARD_BG  = (17, 24, 39)
EMPTY     = (15, 23, 42)
HEAD      = (52, 211, 153)
BODY      = (16, 185, 129)
FOOD      = (249, 115, 22)
TEXT      = (248, 250, 252)
BEST_TEXT = (165, 243, 252)
HINT_TEXT = (203, 213, 245)
CHIP_BG   = (30, 41, 59)
OVERLAY   = (2, 6, 23, 166)  # RGBA

INSTRUCTIONS = (
    "Enter to start or restart",
    "Arrows / WASD to steer",
    "Space to pause or resume",
    "Esc to quit",
)

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    board_width: int = 24
    board_height: int = 20
    base_tick_ms: int = 150
    min_tick_ms: int = 70
    speed_step_ms: int = 4
    foods_per_speedup: int = 4
    initial_length: int = 4
    seed: Optional[int] = None

    def __post_init__(self):
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1")
        if self.board_height < 1 or self.board_width // 2 + 1 < self.initial_length:
            raise ValueError(
                f"A {self.board_width}x{self.board_height} board cannot hold "
                f"a snake of length {self.initial_length}"
            )
        if self.board_width * self.board_height <= self.initial_length:
            raise ValueError("Board leaves no room for food")
        if self.min_tick_ms < 1 or self.speed_step_ms < 0:
            raise ValueError("Tick timings must be positive")
        if self.min_tick_ms > self.base_tick_ms:
            raise ValueError("min_tick_ms must not exceed base_tick_ms")
        if self.foods_per_speedup < 1:
            raise ValueError("foods_per_speedup must be at least 1")


CFG = Config()
