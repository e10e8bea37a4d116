#!/usr/bin/env python3
"""
crabout_client.py

pygame window, input polling and rendering around the GameEngine.
The engine is stepped once per rendered frame; this module only reads
GameSnapshot objects back from it.
"""

import argparse
import os
import random
from typing import Collection, Dict, List, Optional

import pygame

from .constants import (
    TARGET_FPS, MAX_FRAME_ELAPSED, WINDOW_TITLE, ASSET_FILES,
    BACKGROUND_SCROLL_SPEED, WAVE_FRAMES, WAVE_FRAME_SPEED,
)
from .data_models import FrameInput, GameConfig, GameSnapshot, Phase
from .game_engine import GameEngine

WHITE = (255, 255, 255)
YELLOW = (253, 249, 0)
DARKGRAY = (80, 80, 80)
BRICK_RED = (190, 33, 55)
METAL = (170, 170, 180)
SEA = (0, 82, 172)
BACKGROUND = (18, 18, 28)


def build_frame_input(held: Collection[int], pressed: Collection[int],
                      quit_requested: bool = False) -> FrameInput:
    """Maps pygame key codes for one frame onto a FrameInput."""
    return FrameInput(
        left=pygame.K_LEFT in held,
        right=pygame.K_RIGHT in held,
        confirm=pygame.K_SPACE in pressed,
        quit=quit_requested or pygame.K_ESCAPE in pressed,
    )


def normalized_elapsed(frame_ms: float) -> float:
    """
    Frame time scaled so one frame at TARGET_FPS is 1.0. Long frames (the
    first tick, a dragged window) are capped at MAX_FRAME_ELAPSED.
    """
    return min(frame_ms / 1000.0 * TARGET_FPS, MAX_FRAME_ELAPSED)


def _tinted(surface: pygame.Surface, color) -> pygame.Surface:
    tinted = surface.copy()
    tinted.fill(color, special_flags=pygame.BLEND_RGBA_MULT)
    return tinted


def load_assets(assets_dir: str) -> Dict[str, pygame.Surface]:
    """
    Loads every texture in ASSET_FILES. Must run after the display is set up.
    A missing or unreadable file ends the program with a message naming it.
    """
    textures = {}
    for name, filename in ASSET_FILES.items():
        path = os.path.join(assets_dir, filename)
        try:
            textures[name] = pygame.image.load(path).convert_alpha()
        except (pygame.error, FileNotFoundError) as e:
            raise SystemExit(f"Could not load {name} texture from {path}: {e}") from e

    textures["background"] = _tinted(textures["background"], DARKGRAY)
    textures["ball"] = _tinted(textures["ball"], YELLOW)
    return textures


class CraboutClient:
    def __init__(self, config: Optional[GameConfig] = None,
                 assets_dir: Optional[str] = None, seed: Optional[int] = None):
        self.engine = GameEngine(config=config or GameConfig(), rng=random.Random(seed))
        self.config = self.engine.config

        pygame.init()
        self.screen = pygame.display.set_mode(
            (int(self.config.field_width), int(self.config.field_height)))
        pygame.display.set_caption(WINDOW_TITLE)

        self.textures: Dict[str, pygame.Surface] = {}
        if assets_dir:
            try:
                self.textures = load_assets(assets_dir)
            except SystemExit:
                pygame.quit()
                raise
            print(f"Loaded {len(self.textures)} textures from {assets_dir}")

        self.font = pygame.font.Font(None, 24)
        self.large_font = pygame.font.Font(None, 56)

        # Time Management
        self.clock = pygame.time.Clock()
        self.elapsed = 1.0

        # Animation state (presentation only)
        self.bg_offset = 0.0
        self.wave_timer = 0.0
        self.wave_frame = 0

    def run(self):
        """The main client execution loop."""
        print(f"{WINDOW_TITLE} started: {int(self.config.field_width)}x"
              f"{int(self.config.field_height)} @ {TARGET_FPS} FPS, "
              f"{self.config.starting_lives} lives")

        running = True
        try:
            while running:
                self.elapsed = normalized_elapsed(self.clock.tick(TARGET_FPS))

                frame_input = self._poll_input()
                if frame_input.quit:
                    running = False
                    continue

                before = self.engine.phase
                after = self.engine.step(frame_input, self.elapsed)
                if after is not before:
                    self._report_transition(before, after)

                self._animate()
                self._draw_game(self.engine.snapshot())
        finally:
            print(f"Shutting down. Final score: {self.engine.score}")
            pygame.quit()

    def _poll_input(self) -> FrameInput:
        pressed: List[int] = []
        quit_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            if event.type == pygame.KEYDOWN:
                pressed.append(event.key)

        keys = pygame.key.get_pressed()
        held = [key for key in (pygame.K_LEFT, pygame.K_RIGHT) if keys[key]]
        return build_frame_input(held, pressed, quit_requested)

    def _report_transition(self, before: Phase, after: Phase):
        if after is Phase.GAME_OVER:
            print(f"Game over. Final score: {self.engine.score}")
        elif after is Phase.WON:
            print(f"Field cleared! Final score: {self.engine.score}")
        elif before in (Phase.GAME_OVER, Phase.WON):
            print("Restarting with a fresh obstacle field.")

    def _animate(self):
        width = self.config.field_width
        self.bg_offset = (self.bg_offset + BACKGROUND_SCROLL_SPEED * self.elapsed) % width

        self.wave_timer += self.elapsed
        if self.wave_timer >= TARGET_FPS / WAVE_FRAME_SPEED:
            self.wave_timer = 0.0
            self.wave_frame = (self.wave_frame + 1) % WAVE_FRAMES

    # ----------------- Rendering -----------------

    def _blit_scaled(self, name: str, rect, area=None):
        texture = self.textures[name]
        if area is not None:
            texture = texture.subsurface(area)
        self.screen.blit(pygame.transform.scale(texture, (int(rect[2]), int(rect[3]))),
                         (rect[0], rect[1]))

    def _draw_background(self):
        w, h = int(self.config.field_width), int(self.config.field_height)
        x = -int(self.bg_offset)
        if "background" in self.textures:
            self._blit_scaled("background", (x, 0, w, h))
            self._blit_scaled("background", (x + w, 0, w, h))
            return

        self.screen.fill(BACKGROUND)
        for stripe in range(x, w, 40):
            pygame.draw.line(self.screen, (28, 28, 42), (stripe, 0), (stripe, h))

    def _draw_wave(self):
        w = self.config.field_width
        top = self.config.field_height - self.config.ground_offset
        rect = (0, top, w, self.config.ground_offset)
        if "wave" in self.textures:
            texture = self.textures["wave"]
            frame_h = texture.get_height() // WAVE_FRAMES
            area = pygame.Rect(0, self.wave_frame * frame_h, texture.get_width(), frame_h)
            self._blit_scaled("wave", rect, area)
            return

        pygame.draw.rect(self.screen, SEA, rect)
        crest = 6 * (1 + self.wave_frame % 2)
        for x in range(0, int(w), 32):
            pygame.draw.circle(self.screen, WHITE, (x + 8 * self.wave_frame, int(top)), crest, 1)

    def _draw_entities(self, snap: GameSnapshot):
        for x, y, w, h, hit in snap.obstacles:
            if hit:
                continue
            if "brick" in self.textures:
                self._blit_scaled("brick", (x, y, w, h))
            else:
                pygame.draw.rect(self.screen, BRICK_RED, (x, y, w, h))

        px, py, pw, ph = snap.paddle
        if "paddle" in self.textures:
            texture = self.textures["paddle"]
            area = pygame.Rect(0, 0, min(int(pw), texture.get_width()), texture.get_height())
            self._blit_scaled("paddle", snap.paddle, area)
        else:
            pygame.draw.rect(self.screen, METAL, (px, py, pw, ph))

        bx, by, r = snap.ball
        if "ball" in self.textures:
            self._blit_scaled("ball", (bx - r, by - r, 2 * r, 2 * r))
        else:
            pygame.draw.circle(self.screen, YELLOW, (int(bx), int(by)), int(r))

    def _draw_centered(self, text: str, y_offset: int, font=None):
        surf = (font or self.large_font).render(text, True, WHITE)
        x = self.config.field_width // 2 - surf.get_width() // 2
        y = self.config.field_height // 2 - surf.get_height() // 2 + y_offset
        self.screen.blit(surf, (x, y))

    def _draw_game(self, snap: GameSnapshot):
        """Renders one snapshot."""
        self._draw_background()

        fps = self.font.render(f"{self.clock.get_fps():.0f} FPS", True, (0, 228, 48))
        self.screen.blit(fps, (10, 10))

        if snap.phase is Phase.GAME_OVER:
            self._draw_centered("GAME OVER", -25)
            self._draw_centered("Press SPACE to play again", 30, self.font)
        elif snap.phase is Phase.WON:
            self._draw_centered("WINNER", -40)
            self._draw_centered(f"SCORE: {snap.score}", 20)
        else:
            score = self.font.render(str(snap.score), True, WHITE)
            self.screen.blit(score, (10, 30))
            lives = self.font.render(f"Lives: {snap.lives}", True, WHITE)
            self.screen.blit(lives, (self.config.field_width - 100, 10))

            self._draw_entities(snap)
            self._draw_wave()
            if snap.phase is Phase.PAUSED:
                self._draw_centered("PAUSED", 0)

        pygame.display.flip()


def main(argv=None):
    parser = argparse.ArgumentParser(prog="crabout", description="Single-screen brick breaker.")
    parser.add_argument("--assets", help="directory holding the textures; shapes are drawn when omitted")
    parser.add_argument("--seed", type=int, help="seed for the obstacle layout")
    args = parser.parse_args(argv)

    client = CraboutClient(assets_dir=args.assets, seed=args.seed)
    client.run()


if __name__ == "__main__":
    main()
