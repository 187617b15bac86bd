"""Game entry point"""

from __future__ import annotations

import random

import pygame

from asterclick.constants import (
    WIDTH, HEIGHT, FPS, FONT_NAME, FONT_SIZE_MEDIUM, FONT_SIZE_LARGE,
    LOG_FILE, SETTINGS_PATH, LAST_RESULT_PATH
)
from asterclick.game import Simulation
from asterclick.logger import GameLogger
from asterclick.models import RunState, Viewport
from asterclick.settings import SettingsPatch
from asterclick import storage
from ui import Renderer, HUD, StartScreen, ConfirmOverlay


class Game:
    """
    Window and frame driver: pumps pygame events into the simulation's input
    buffer, ticks it once per frame with ``pygame.time.get_ticks()``, and draws
    the snapshot it returns.
    """

    def __init__(self) -> None:
        """Initialize pygame, load persisted state, and build the simulation."""
        pygame.init()
        pygame.display.set_caption("Aster Click")

        # Make window resizable
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
        self.current_width = WIDTH
        self.current_height = HEIGHT
        self.fullscreen = False
        self.show_fps = False
        self.fps_samples: list[float] = []

        self.logger = GameLogger(LOG_FILE)
        self.sim = Simulation(
            self.get_viewport,
            clock=pygame.time.get_ticks,
            rng=random.Random(),
            settings=storage.load_settings(SETTINGS_PATH),
            logger=self.logger,
            last_result=storage.load_last_result(LAST_RESULT_PATH),
        )

        self.renderer = Renderer()
        self.hud = HUD(self.font_small)
        self.start_screen = StartScreen(self.font_big, self.font_small, self.sim.settings)
        self.confirm_overlay = ConfirmOverlay(self.font_big, self.font_small)

    def get_viewport(self) -> Viewport:
        return Viewport(self.current_width, self.current_height)

    # --------------------------------- Setup ----------------------------------------

    def handle_resize(self, new_width: int, new_height: int) -> None:
        """Handle window resize events; the simulation reads the new size on its next spawn."""
        if new_width != self.current_width or new_height != self.current_height:
            self.current_width = max(1, new_width)
            self.current_height = max(1, new_height)
            scale_factor = min(self.current_width / WIDTH, self.current_height / HEIGHT)
            self.update_font_scaling(scale_factor)
            print(f"Window resized to {self.current_width}x{self.current_height} with scale factor {scale_factor:.2f}")

    def update_font_scaling(self, scale_factor: float) -> None:
        """Update font sizes for responsive text scaling."""
        new_small_size = max(12, int(FONT_SIZE_MEDIUM * scale_factor))
        new_large_size = max(18, int(FONT_SIZE_LARGE * scale_factor))

        self.font_small = pygame.font.Font(FONT_NAME, new_small_size)
        self.font_big = pygame.font.Font(FONT_NAME, new_large_size)

        self.hud.update_fonts(self.font_small)
        self.start_screen.update_fonts(self.font_big, self.font_small)
        self.confirm_overlay.update_fonts(self.font_big, self.font_small)

    def toggle_fullscreen(self) -> None:
        try:
            pygame.display.toggle_fullscreen()
        except pygame.error as e:
            print(f"Failed to toggle fullscreen: {e}")
            return
        self.fullscreen = not self.fullscreen
        self.handle_resize(*self.screen.get_size())

    # --------------------------------- Run boundaries -------------------------------

    def start_run(self) -> None:
        self.start_screen.sync(self.sim.settings)
        self.sim.start()

    def end_run(self) -> None:
        """End the run and save its result; the game continues if saving fails."""
        result = self.sim.end()
        if result is not None:
            storage.save_last_result(result, LAST_RESULT_PATH)

    def apply_settings(self, patch: SettingsPatch) -> None:
        settings = self.sim.apply_settings(patch)
        self.start_screen.sync(settings)
        storage.save_settings(settings, SETTINGS_PATH)

    # --------------------------------- Input ----------------------------------------

    def handle_keydown(self, key: int) -> bool:
        """
        Route a key press by state.

        Returns
        -------
        bool
            False if the player asked to close the game
        """
        if key == pygame.K_F11:
            self.toggle_fullscreen()
        elif key == pygame.K_f:
            self.show_fps = not self.show_fps
        elif self.sim.state is RunState.START:
            if key == pygame.K_ESCAPE:
                return False
            if key in (pygame.K_SPACE, pygame.K_RETURN):
                self.start_run()
        elif self.sim.confirm_pending:
            if key in (pygame.K_y, pygame.K_RETURN):
                self.end_run()
            elif key in (pygame.K_n, pygame.K_ESCAPE):
                self.sim.close_confirm_end()
        elif key in (pygame.K_ESCAPE, pygame.K_p):
            self.sim.input.request_pause_toggle()
        elif key == pygame.K_x:
            self.sim.input.request_quit()
        return True

    def handle_click(self, pos: tuple[int, int]) -> None:
        """Left click: start screen buttons, confirmation buttons, or a shot."""
        width, height = self.current_width, self.current_height
        if self.sim.state is RunState.START:
            action = self.start_screen.handle_click(pos, width, height)
            if action == "start":
                self.start_run()
            elif isinstance(action, SettingsPatch):
                self.apply_settings(action)
        elif self.sim.confirm_pending:
            choice = self.confirm_overlay.handle_click(pos, width, height)
            if choice is True:
                self.end_run()
            elif choice is False:
                self.sim.close_confirm_end()
        else:
            self.sim.input.push_click(*pos)

    def process_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                self.handle_resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                running = self.handle_keydown(event.key) and running
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(event.pos)

        if self.sim.state is RunState.START:
            self.start_screen.handle_slider_drag(pygame.mouse.get_pos(), pygame.mouse.get_pressed()[0],
                                                 self.current_width, self.current_height)
        return running

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, tick the simulation, render; exits on quit request."""
        running = True
        while running:
            current_fps = self.clock.get_fps()

            # Update FPS samples for smoothing
            self.fps_samples.append(current_fps)
            if len(self.fps_samples) > 10:
                self.fps_samples.pop(0)
            avg_fps = sum(self.fps_samples) / len(self.fps_samples)

            running = self.process_events()

            snapshot = self.sim.tick(pygame.time.get_ticks())
            self.draw(snapshot, avg_fps)

            # Cap frame rate
            self.clock.tick(FPS)

        if self.sim.state is RunState.PLAYING:
            self.end_run()
        pygame.quit()

    # --------------------------------- Rendering ------------------------------------

    def draw(self, snapshot, fps: float) -> None:
        """Compose the frame: playfield → HUD or start screen → confirmation overlay."""
        mouse_pos = pygame.mouse.get_pos()
        self.renderer.draw(self.screen, snapshot, self.sim.settings.ui_opacity)

        if snapshot.state is RunState.START:
            self.start_screen.draw(self.screen, mouse_pos, self.sim.stats.last_result)
        else:
            self.hud.draw(self.screen, snapshot, self.show_fps, fps)
            if snapshot.confirm_pending:
                self.confirm_overlay.draw(self.screen, mouse_pos)

        pygame.display.flip()


def main() -> None:
    Game().run()


if __name__ == "__main__":
    main()
