"""Renderer, HUD, start screen and quit confirmation overlay"""

from __future__ import annotations

import math
import random

import pygame

from asterclick import __version__
from asterclick.constants import (
    HUD_PADDING, TEXT_COLOR, BG_COLOR, ACCENT_COLOR, HAZARD_COLOR, PARTICLE_COLOR, RING_COLOR,
    FONT_NAME, FONT_SIZE_SMALL, STAR_COUNT, MIN_SPEED_LEVEL, MAX_SPEED_LEVEL
)
from asterclick.models import Hazard, Particle, Ring, RunResult, Snapshot, format_time
from asterclick.settings import Settings, SettingsPatch

SLIDER_WIDTH = 200
SLIDER_HEIGHT = 20
OPACITY_STEPS = (20, 40, 60, 80, 100)   # percent


def hazard_polygon(hazard: Hazard) -> list[tuple[float, float]]:
    """Outline vertices rotated by the hazard angle, in screen space."""
    cos_a = math.cos(hazard.angle)
    sin_a = math.sin(hazard.angle)
    points = []
    for point in hazard.outline:
        px = math.cos(point.angle) * point.radius
        py = math.sin(point.angle) * point.radius
        points.append((hazard.x + px * cos_a - py * sin_a,
                       hazard.y + px * sin_a + py * cos_a))
    return points


class Renderer:
    """Draws the starfield, the asteroid, explosion particles and miss rings."""

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)
        self.stars: list[tuple[int, int, int, int]] = []
        self.size = (0, 0)

    def generate_starfield(self, width: int, height: int) -> None:
        """Scatter dim stars across the window; purely cosmetic."""
        self.size = (width, height)
        self.stars = []
        for _ in range(STAR_COUNT):
            x = self.rng.randrange(max(1, width))
            y = self.rng.randrange(max(1, height))
            brightness = self.rng.randint(35, 120)
            size = 1 if self.rng.random() < 0.9 else 2
            self.stars.append((x, y, brightness, size))

    def draw_background(self, surf: pygame.Surface) -> None:
        if surf.get_size() != self.size:
            self.generate_starfield(*surf.get_size())
        surf.fill(BG_COLOR)
        for x, y, brightness, size in self.stars:
            surf.fill((brightness, brightness, brightness), (x, y, size, size))

    def draw_hazard(self, layer: pygame.Surface, hazard: Hazard | None, opacity: float) -> None:
        if hazard is None or len(hazard.outline) < 3:
            return
        alpha = int(255 * opacity)
        points = hazard_polygon(hazard)
        # Soft glow first, then the crisp outline on top
        pygame.draw.polygon(layer, (255, 255, 255, alpha // 8), points, 6)
        pygame.draw.polygon(layer, (*HAZARD_COLOR, alpha), points, 2)

    def draw_particles(self, layer: pygame.Surface, particles: tuple[Particle, ...], opacity: float) -> None:
        for p in particles:
            alpha = int(255 * (1 - p.progress) * opacity)
            if alpha <= 0:
                continue
            radius = max(1, int(round(p.size)))
            pygame.draw.circle(layer, (*PARTICLE_COLOR, alpha), (int(p.x), int(p.y)), radius)

    def draw_rings(self, layer: pygame.Surface, rings: tuple[Ring, ...], opacity: float) -> None:
        for r in rings:
            alpha = int(255 * (1 - r.progress) * opacity)
            if alpha <= 0:
                continue
            pygame.draw.circle(layer, (*RING_COLOR, alpha), (int(r.x), int(r.y)), int(r.radius), 2)

    def draw(self, surf: pygame.Surface, snapshot: Snapshot, opacity: float) -> None:
        """
        Compose the playfield: stars → asteroid → particles → rings.

        Entities go through a per-frame alpha layer so the UI opacity setting
        applies to them uniformly.
        """
        self.draw_background(surf)
        layer = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        self.draw_hazard(layer, snapshot.hazard, opacity)
        self.draw_particles(layer, snapshot.particles, opacity)
        self.draw_rings(layer, snapshot.rings, opacity)
        surf.blit(layer, (0, 0))


class HUD:
    """Run counters in the top-left corner, pause banner in the middle."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def update_fonts(self, new_font: pygame.font.Font) -> None:
        """Update fonts for responsive scaling."""
        self.font = new_font

    def draw(self, surf: pygame.Surface, snapshot: Snapshot,
             show_fps: bool = False, fps: float = 0.0) -> None:
        current_width = surf.get_width()
        current_height = surf.get_height()
        responsive_padding = max(8, int(HUD_PADDING * (min(current_width, current_height) / 540)))

        lines = [
            f"Destroyed: {snapshot.destroyed}",
            f"Escaped: {snapshot.misses}",
            f"Time: {format_time(snapshot.time_sec)}",
        ]
        y = responsive_padding
        for line in lines:
            text_surf = self.font.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, (responsive_padding, y))
            y += text_surf.get_height() + 4

        if snapshot.speed_multiplier != 1.0:
            speed_surf = self.small_font.render(f"Speed x{snapshot.speed_multiplier:.1f}", True, (180, 180, 180))
            surf.blit(speed_surf, (responsive_padding, y + 4))

        if show_fps:
            fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
            fps_text = self.small_font.render(f"FPS: {fps:.1f}", True, fps_color)
            surf.blit(fps_text, (current_width - fps_text.get_width() - responsive_padding, responsive_padding))

        hint = self.small_font.render("[LMB] shoot | [ESC/P] pause | [X] quit | [F11] fullscreen", True, (150, 150, 150))
        surf.blit(hint, hint.get_rect(midbottom=(current_width // 2, current_height - responsive_padding)))

        if snapshot.paused and not snapshot.confirm_pending:
            pause_text = self.font.render("PAUSED", True, ACCENT_COLOR)
            pause_y = max(80, int(current_height * 0.15))
            text_rect = pause_text.get_rect(center=(current_width // 2, pause_y))
            # Semi-transparent background
            bg_rect = text_rect.inflate(20, 10)
            bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
            bg_surf.fill((0, 0, 0, 128))
            surf.blit(bg_surf, bg_rect)
            surf.blit(pause_text, text_rect)


class StartScreen:
    """
    Title, settings sliders, last run summary and the start button.

    Slider changes go into a draft; nothing reaches the game until APPLY is
    clicked, which hands back a ``SettingsPatch``.
    """

    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font, settings: Settings) -> None:
        self.font_big = font_big
        self.font_small = font_small
        self.draft = settings

    def update_fonts(self, new_font_big: pygame.font.Font, new_font_small: pygame.font.Font) -> None:
        self.font_big = new_font_big
        self.font_small = new_font_small

    def sync(self, settings: Settings) -> None:
        """Discard draft edits and mirror the live settings."""
        self.draft = settings

    # --------------------------------- Layout -----------------------------------------

    def opacity_rect(self, width: int, height: int) -> pygame.Rect:
        return pygame.Rect(width // 2 - 100, height // 2 - 110, SLIDER_WIDTH, SLIDER_HEIGHT)

    def speed_rect(self, width: int, height: int) -> pygame.Rect:
        return pygame.Rect(width // 2 - 100, height // 2 - 60, SLIDER_WIDTH, SLIDER_HEIGHT)

    def toggle_rect(self, width: int, height: int) -> pygame.Rect:
        return pygame.Rect(width // 2 - 100, height // 2 - 20, 20, 20)

    def apply_rect(self, width: int, height: int) -> pygame.Rect:
        return pygame.Rect(width // 2 + 110, height // 2 - 20, 90, 24)

    def start_rect(self, width: int, height: int) -> pygame.Rect:
        return pygame.Rect(width // 2 - 100, height // 2 + 20, 200, 50)

    # --------------------------------- Input ------------------------------------------

    def handle_slider_drag(self, mouse_pos: tuple[int, int], mouse_pressed: bool, width: int, height: int) -> bool:
        """Handle slider interactions - both clicks and drags. Returns True if a slider moved."""
        if not mouse_pressed:
            return False

        opacity_rect = self.opacity_rect(width, height)
        if opacity_rect.collidepoint(mouse_pos):
            relative_x = (mouse_pos[0] - opacity_rect.x) / opacity_rect.width
            index = min(len(OPACITY_STEPS) - 1, int(relative_x * len(OPACITY_STEPS)))
            self.draft = self.draft.merged(SettingsPatch(ui_opacity=OPACITY_STEPS[index] / 100))
            return True

        speed_rect = self.speed_rect(width, height)
        if speed_rect.collidepoint(mouse_pos):
            relative_x = (mouse_pos[0] - speed_rect.x) / speed_rect.width
            span = MAX_SPEED_LEVEL - MIN_SPEED_LEVEL + 1
            level = MIN_SPEED_LEVEL + min(span - 1, int(relative_x * span))
            self.draft = self.draft.merged(SettingsPatch(speed_level=level))
            return True

        return False

    def handle_click(self, mouse_pos: tuple[int, int], width: int, height: int) -> str | SettingsPatch | None:
        """
        Resolve a left click on the start screen.

        Returns
        -------
        str | SettingsPatch | None
            ``"start"`` for the start button, a patch for APPLY, else None
        """
        if self.start_rect(width, height).collidepoint(mouse_pos):
            return "start"
        if self.toggle_rect(width, height).collidepoint(mouse_pos):
            self.draft = self.draft.merged(
                SettingsPatch(difficulty_progression=not self.draft.difficulty_progression))
            return None
        if self.apply_rect(width, height).collidepoint(mouse_pos):
            return SettingsPatch(
                ui_opacity=self.draft.ui_opacity,
                speed_level=self.draft.speed_level,
                difficulty_progression=self.draft.difficulty_progression,
            )
        return None

    # --------------------------------- Rendering --------------------------------------

    def draw_slider(self, surf: pygame.Surface, rect: pygame.Rect, fraction: float,
                    label: str, handle_color: tuple[int, int, int]) -> None:
        pygame.draw.rect(surf, (100, 100, 100), rect)
        pygame.draw.rect(surf, TEXT_COLOR, rect, 2)

        handle_x = rect.x + int(fraction * rect.width) - 8
        handle_rect = pygame.Rect(handle_x, rect.y - 7, 16, 34)
        pygame.draw.rect(surf, handle_color, handle_rect)
        pygame.draw.rect(surf, TEXT_COLOR, handle_rect, 2)

        label_surf = self.font_small.render(label, True, TEXT_COLOR)
        label_pos = (rect.right + 15, rect.y + rect.height // 2 - label_surf.get_height() // 2)
        surf.blit(label_surf, label_pos)

    def draw_last_result(self, surf: pygame.Surface, result: RunResult | None, y: int) -> None:
        if result is None:
            lines = ["Last run: (not played yet)"]
        else:
            lines = [
                "Last run",
                f"Destroyed: {result.destroyed}",
                f"Escaped: {result.misses}",
                f"Clicks: {result.clicks}",
                f"Accuracy: {result.accuracy}%",
                f"Time: {format_time(result.time_sec)}",
            ]
        for i, line in enumerate(lines):
            color = ACCENT_COLOR if i == 0 else (180, 180, 180)
            text = self.font_small.render(line, True, color)
            surf.blit(text, text.get_rect(center=(surf.get_width() // 2, y + i * 22)))

    def draw(self, surf: pygame.Surface, mouse_pos: tuple[int, int], last_result: RunResult | None) -> None:
        width, height = surf.get_size()

        title_text = self.font_big.render("ASTER CLICK", True, ACCENT_COLOR)
        surf.blit(title_text, title_text.get_rect(center=(width // 2, height // 2 - 180)))

        opacity_pct = round(self.draft.ui_opacity * 100)
        self.draw_slider(surf, self.opacity_rect(width, height), (opacity_pct - 20) / 80,
                         f"Opacity: {opacity_pct}%", (255, 100, 100))
        level_span = MAX_SPEED_LEVEL - MIN_SPEED_LEVEL
        self.draw_slider(surf, self.speed_rect(width, height),
                         (self.draft.speed_level - MIN_SPEED_LEVEL) / level_span,
                         f"Speed: level {self.draft.speed_level}", (100, 255, 100))

        toggle_rect = self.toggle_rect(width, height)
        pygame.draw.rect(surf, TEXT_COLOR, toggle_rect, 2)
        if self.draft.difficulty_progression:
            pygame.draw.rect(surf, (100, 200, 255), toggle_rect.inflate(-8, -8))
        toggle_label = self.font_small.render("Difficulty progression", True, TEXT_COLOR)
        surf.blit(toggle_label, (toggle_rect.right + 10, toggle_rect.y + 2))

        apply_rect = self.apply_rect(width, height)
        apply_color = (90, 110, 150) if apply_rect.collidepoint(mouse_pos) else (60, 70, 90)
        pygame.draw.rect(surf, apply_color, apply_rect)
        pygame.draw.rect(surf, TEXT_COLOR, apply_rect, 2)
        apply_text = self.font_small.render("APPLY", True, TEXT_COLOR)
        surf.blit(apply_text, apply_text.get_rect(center=apply_rect.center))

        button_rect = self.start_rect(width, height)
        button_color = (100, 150, 100) if button_rect.collidepoint(mouse_pos) else (60, 80, 60)
        pygame.draw.rect(surf, button_color, button_rect)
        pygame.draw.rect(surf, TEXT_COLOR, button_rect, 2)
        start_text = self.font_small.render("START", True, TEXT_COLOR)
        surf.blit(start_text, start_text.get_rect(center=button_rect.center))

        self.draw_last_result(surf, last_result, button_rect.bottom + 30)

        version = self.font_small.render(f"Version {__version__}", True, (120, 120, 120))
        surf.blit(version, version.get_rect(bottomright=(width - HUD_PADDING, height - HUD_PADDING)))


class ConfirmOverlay:
    """Modal asking whether to end the current run."""

    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font) -> None:
        self.font_big = font_big
        self.font_small = font_small

    def update_fonts(self, new_font_big: pygame.font.Font, new_font_small: pygame.font.Font) -> None:
        self.font_big = new_font_big
        self.font_small = new_font_small

    def end_rect(self, width: int, height: int) -> pygame.Rect:
        return pygame.Rect(width // 2 - 170, height // 2 + 20, 160, 44)

    def cancel_rect(self, width: int, height: int) -> pygame.Rect:
        return pygame.Rect(width // 2 + 10, height // 2 + 20, 160, 44)

    def handle_click(self, mouse_pos: tuple[int, int], width: int, height: int) -> bool | None:
        """True to end the run, False to cancel, None if no button was hit."""
        if self.end_rect(width, height).collidepoint(mouse_pos):
            return True
        if self.cancel_rect(width, height).collidepoint(mouse_pos):
            return False
        return None

    def draw(self, surf: pygame.Surface, mouse_pos: tuple[int, int]) -> None:
        width, height = surf.get_size()

        # Semi-transparent overlay
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))

        title = self.font_big.render("End this run?", True, (255, 140, 140))
        surf.blit(title, title.get_rect(center=(width // 2, height // 2 - 40)))

        for rect, label in ((self.end_rect(width, height), "END RUN [Y]"),
                            (self.cancel_rect(width, height), "CANCEL [N]")):
            color = (110, 80, 80) if rect.collidepoint(mouse_pos) else (70, 60, 60)
            pygame.draw.rect(surf, color, rect)
            pygame.draw.rect(surf, TEXT_COLOR, rect, 2)
            text = self.font_small.render(label, True, TEXT_COLOR)
            surf.blit(text, text.get_rect(center=rect.center))
