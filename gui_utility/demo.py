import logging
import math
import os

import pygame
from pygame.math import Vector2

from .assets import AssetResolver, corner_assets_present, generate_corner_assets
from .auto_scale import AutoScaler
from .constants import *
from .easing import EasingDirection, EasingStyle
from .round_corners import round_many, round_one
from .scene import Color3, Stage, Viewport, absolute_rect, draw, instances
from .settings.settings_manager import SettingsManager
from .utility import format_number, interpolate, scale_color

log = logging.getLogger(__name__)

PULSE_LOW = Color3.from_rgb(*COLOR_ACCENT)
PULSE_HIGH = Color3.from_rgb(240, 180, 80)


class Demo:
    def __init__(self):
        pygame.init()
        self.settings = SettingsManager()
        logging.basicConfig(level=self.settings.get("logging", "level") or "INFO")

        self._init_display()
        pygame.display.set_caption("Rounded UI")
        self.clock = pygame.time.Clock()
        self.running = True
        self.elapsed = 0.0
        self.clicks = 0

        assets_dir = self.settings.get("assets", "directory")
        if not corner_assets_present(assets_dir):
            generate_corner_assets(assets_dir)
        self.resolver = AssetResolver(assets_dir)

        self.stage = Stage(Viewport.from_surface(self.screen))
        self.scaler = AutoScaler.from_settings(self.stage, self.settings)
        self._create_ui()

    def _init_display(self):
        video = self.settings.get("video")
        os.environ['SDL_VIDEO_CENTERED'] = '1'
        self.screen = pygame.display.set_mode(
            (video["resolution"][0], video["resolution"][1]),
            pygame.RESIZABLE
        )
        self.fps_cap = video["fps_cap"] if video["fps_cap"] != 0 else 9999

    def _create_ui(self):
        self.root = instances.new("ScreenGui")

        panel = instances.new("Frame", self.root)
        panel.name = "Panel"
        panel.size = Vector2(480, 320)
        panel.position = Vector2(BASE_SCREEN_SIZE_X / 2, BASE_SCREEN_SIZE_Y / 2)
        panel.anchor_point = Vector2(0.5, 0.5)
        panel.background_color = Color3.from_rgb(*COLOR_DARK_GRAY)

        header = instances.new("Frame", panel)
        header.name = "Header"
        header.size = Vector2(440, 48)
        header.position = Vector2(20, 20)
        header.background_color = Color3.from_rgb(*COLOR_GRAY)

        self.button = instances.new("ImageButton", panel)
        self.button.name = "Button"
        self.button.size = Vector2(160, 48)
        self.button.position = Vector2(160, 240)
        self.button.image_color = PULSE_LOW
        self.button.activated.connect(self._on_button_activated)

        self.panel = round_one(panel, 10)
        self.header = round_one(header, 6)
        # ImageButtons are rounded in place, so the reference stays valid
        round_many([self.button], 8)

        self.scaler.add_element(self.root)

    def _on_button_activated(self, button):
        self.clicks += 1
        log.info("Button clicked %d times", self.clicks)

    def run(self):
        while self.running:
            dt = self.clock.tick(self.fps_cap) / 1000.0
            self.elapsed += dt

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if self._button_rect().collidepoint(event.pos):
                        self.button.click()
                else:
                    self.stage.handle_event(event)

            self.stage.step(dt)
            self.update(dt)
            self.draw()
            pygame.display.flip()

        pygame.quit()

    def _button_rect(self):
        return absolute_rect(self.button)

    def update(self, dt):
        alpha = (math.sin(self.elapsed * 2) + 1) / 2
        self.button.image_color = interpolate(PULSE_LOW, PULSE_HIGH, alpha,
                                              EasingStyle.SINE, EasingDirection.IN_OUT)
        self.header.image_color = scale_color(Color3.from_rgb(*COLOR_LIGHT_GRAY), 0.6 + 0.4 * alpha)

    def draw(self):
        self.screen.fill(COLOR_BG)
        draw(self.root, self.screen, self.resolver)

        font = pygame.font.Font(None, 22)
        fps = self.clock.get_fps()
        self._text(font, f"FPS: {format_number(fps, 1)}", 8, 8, COLOR_LIGHT_GRAY)
        self._text(font, f"Scale: {format_number(self.scaler.scale_objects[0].scale, 2)}", 8, 26, COLOR_LIGHT_GRAY)
        self._text(font, f"Clicks: {format_number(self.clicks)}", 8, 44, COLOR_LIGHT_GRAY)

    def _text(self, font, text, x, y, color):
        surf = font.render(text, True, color)
        self.screen.blit(surf, (x, y))


def main():
    demo = Demo()
    demo.run()


if __name__ == "__main__":
    main()
