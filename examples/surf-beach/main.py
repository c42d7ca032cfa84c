"""
Surf Beach
Playable pygame host for the surf simulation: ride waves, grind crests, land tricks.
"""

import logging
import math
import sys

import pygame

from surf import Key, SurfConfig
from surf.clock import monotonic_ms
from surf_game import PlayerView, SceneSnapshot, SurfEngine, WaveView
from surf_tricks import TRICKS
from surf_tricks.components import ANIMATION_FRAMES

# --- Configuration ---
WIDTH, HEIGHT = 800, 500
FPS = 60
TITLE = "Surf Beach"
WAVE_SEGMENTS = 24

# Colors
SKY_COLOR = (135, 206, 235)
WATER_COLOR = (0, 105, 148)
HUD_COLOR = (20, 20, 40)
PLAYER_COLOR = (240, 90, 60)
GRIND_COLOR = (255, 215, 0)
BOARD_COLOR = (250, 240, 200)
BAR_BG_COLOR = (60, 60, 80)
TRICK_BAR_COLOR = (180, 100, 255)
TIER_COLORS = {
    "slow": (0, 200, 100),
    "medium": (255, 200, 0),
    "fast": (255, 60, 60),
}

KEY_BINDINGS = {
    pygame.K_LEFT: Key.MOVE_LEFT,
    pygame.K_RIGHT: Key.MOVE_RIGHT,
    pygame.K_UP: Key.MOVE_UP,
    pygame.K_DOWN: Key.MOVE_DOWN,
    pygame.K_SPACE: Key.JUMP,
    pygame.K_z: Key.TRICK_A,
    pygame.K_x: Key.TRICK_B,
}

logger = logging.getLogger("surf_beach")


def wave_outline(wave: WaveView) -> list[tuple[float, float]]:
    points = [(wave.x, wave.y)]
    for i in range(WAVE_SEGMENTS + 1):
        t = i / WAVE_SEGMENTS
        points.append((wave.x + t * wave.width, wave.y - wave.height * math.sin(t * math.pi)))
    points.append((wave.x + wave.width, wave.y))
    return points


def draw_wave(screen: pygame.Surface, wave: WaveView) -> None:
    if wave.width <= 0:
        return
    layer = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    r, g, b, a = wave.color
    pygame.draw.polygon(layer, (r, g, b, int(a * 255)), wave_outline(wave))
    screen.blit(layer, (0, 0))


def draw_player(screen: pygame.Surface, player: PlayerView) -> None:
    body = pygame.Surface((int(player.width), int(player.height)), pygame.SRCALPHA)
    color = GRIND_COLOR if player.grinding else PLAYER_COLOR
    body.fill(color)
    pygame.draw.rect(body, BOARD_COLOR, (0, int(player.height) - 4, int(player.width), 4))

    # Only the flip spins; the grab just holds the pose.
    if player.trick_name == TRICKS[Key.TRICK_A].name:
        angle = -360.0 * player.trick_frame / ANIMATION_FRAMES
        body = pygame.transform.rotate(body, angle)

    cx = player.x + player.width / 2
    cy = player.y + player.height / 2
    screen.blit(body, body.get_rect(center=(int(cx), int(cy))))


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: SceneSnapshot) -> None:
    lines = [
        f"Score: {snap.score}   Tick: {snap.tick}",
        "Arrows=Move  Space=Jump  Z/X=Tricks  R=Reset  Esc=Quit",
    ]
    if snap.player.trick_name is not None:
        lines.insert(1, f"Trick: {snap.player.trick_name}")
    for i, line in enumerate(lines):
        screen.blit(font.render(line, True, HUD_COLOR), (10, 8 + i * 20))

    # Speed bar
    bar_x, bar_y, bar_w, bar_h = WIDTH - 170, 10, 150, 12
    pygame.draw.rect(screen, BAR_BG_COLOR, (bar_x, bar_y, bar_w, bar_h))
    pygame.draw.rect(
        screen, TIER_COLORS[snap.speed.tier],
        (bar_x, bar_y, int(bar_w * snap.speed.ratio), bar_h),
    )
    screen.blit(font.render("Speed", True, HUD_COLOR), (bar_x - 55, bar_y - 2))

    # Trick progress bar
    if snap.player.trick_name is not None:
        pygame.draw.rect(screen, BAR_BG_COLOR, (bar_x, bar_y + 20, bar_w, bar_h))
        pygame.draw.rect(
            screen, TRICK_BAR_COLOR,
            (bar_x, bar_y + 20, int(bar_w * snap.player.trick_progress), bar_h),
        )

    if not snap.started:
        prompt = font.render("Press any key to start", True, HUD_COLOR)
        screen.blit(prompt, prompt.get_rect(center=(WIDTH // 2, HEIGHT // 2)))


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    # --- Engine setup ---
    engine = SurfEngine(SurfConfig(canvas_width=WIDTH, canvas_height=HEIGHT, tps=FPS))
    logger.info("Surf Beach running with seed %d", engine.seed)
    snap = engine.snapshot()

    running = True
    while running:
        pg_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    snap = engine.reset()
                elif event.key in KEY_BINDINGS:
                    engine.set_input(KEY_BINDINGS[event.key], True)
                else:
                    engine.start()
            elif event.type == pygame.KEYUP:
                if event.key in KEY_BINDINGS:
                    engine.set_input(KEY_BINDINGS[event.key], False)

        # --- Update ---
        snap = engine.tick(monotonic_ms())

        # --- Draw ---
        screen.fill(SKY_COLOR)
        pygame.draw.rect(
            screen, WATER_COLOR,
            (0, int(snap.water_line), WIDTH, HEIGHT - int(snap.water_line)),
        )
        for wave in snap.waves:
            draw_wave(screen, wave)
        draw_player(screen, snap.player)
        draw_hud(screen, font, snap)

        pygame.display.flip()

    logger.info("Final score: %d", snap.score)
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
