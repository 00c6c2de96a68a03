"""
Desktop host window using pygame.

Wires keyboard and mouse to the simulation, drives the fixed-step loop
from the pygame clock and shows rendered frames with a text HUD.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from ..core.events import Event, EventType
from ..core.state import Phase
from ..game.difficulty import DifficultyLevel, get_difficulty
from ..game.loop import FixedStepLoop
from ..game.simulation import GameSimulation
from ..game.snapshot import GameSnapshot, format_time
from ..graphics.renderer import GameRenderer
from ..settings import Settings, get_settings
from .input import ArrowKeys

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}

SHORTCUT_KEYS = {
    pygame.K_1: DifficultyLevel.EASY,
    pygame.K_2: DifficultyLevel.MEDIUM,
    pygame.K_3: DifficultyLevel.HARD,
}

# Frames the border flashes after a pickup
FLASH_FRAMES = 8


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    title: str = "Henry's Fruit Rush"
    scale: float = 1.0
    refresh_rate: int = 120

    # Colors
    text_color: tuple[int, int, int] = (255, 255, 255)
    title_color: tuple[int, int, int] = (255, 217, 61)
    warning_color: tuple[int, int, int] = (255, 107, 107)
    hint_color: tuple[int, int, int] = (170, 170, 170)
    flash_color: tuple[int, int, int] = (107, 207, 127)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WindowConfig":
        return cls(
            title=settings.window_title,
            scale=settings.window_scale,
            refresh_rate=settings.loop.refresh_rate,
        )


class GameWindow:
    """
    Pygame host for a GameSimulation.

    Keyboard Mapping:
        ARROWS: Move Henry
        1/2/3: Pick Easy/Medium/Hard
        R: Play again (after a run ends)
        D: Toggle debug overlay
        ESC/Q: Exit
    Mouse: click difficulty and "Play Again" buttons.
    """

    def __init__(
        self,
        simulation: Optional[GameSimulation] = None,
        settings: Optional[Settings] = None,
        config: Optional[WindowConfig] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.config = config or WindowConfig.from_settings(self.settings)
        self.simulation = simulation or GameSimulation(self.settings)

        arena = self.settings.arena
        self.renderer = GameRenderer(arena.width, arena.height)
        self.keys = ArrowKeys()
        self.loop = FixedStepLoop(
            step=self._step,
            render=self._render,
            frame_ms=self.settings.loop.frame_ms,
            max_delta_ms=self.settings.loop.max_frame_delta_ms,
        )

        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None
        self._running = False
        self._show_debug = self.settings.debug
        self._flash_frames = 0
        self._snapshot: GameSnapshot = self.simulation.snapshot()

        self.simulation.event_bus.subscribe(EventType.FRUIT_COLLECTED, self._on_fruit_collected)

        logger.info("GameWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        arena = self.settings.arena
        size = (int(arena.width * self.config.scale), int(arena.height * self.config.scale))
        self._screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont("Courier New", 20, bold=True)
        self._big_font = pygame.font.SysFont("Courier New", 44, bold=True)
        self._small_font = pygame.font.SysFont("Courier New", 16, bold=True)

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    # ----------------------------
    # Input
    # ----------------------------

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)
            elif event.type == pygame.KEYUP:
                if event.key in ARROW_KEYS:
                    self.keys.release(ARROW_KEYS[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos)
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.keys.release_all()

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key in ARROW_KEYS:
            self.keys.press(ARROW_KEYS[key])
        elif key in SHORTCUT_KEYS:
            self._select(SHORTCUT_KEYS[key])
        elif key == pygame.K_r:
            self._restart()
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug

    def _handle_click(self, pos: tuple[int, int]) -> None:
        px = pos[0] / self.config.scale
        py = pos[1] / self.config.scale
        layout = self.renderer.layout
        phase = self.simulation.phase

        if phase == Phase.SELECTING_DIFFICULTY:
            level = layout.hit_difficulty(px, py)
            if level is not None:
                self._select(level)
        elif phase.is_terminal and layout.hit_restart(px, py):
            self._restart()

    def _select(self, level: DifficultyLevel) -> None:
        if self.simulation.select_difficulty(level):
            self.keys.release_all()
            self._snapshot = self.simulation.snapshot()

    def _restart(self) -> None:
        if self.simulation.restart():
            self._snapshot = self.simulation.snapshot()

    def _on_fruit_collected(self, event: Event) -> None:
        self._flash_frames = FLASH_FRAMES
        logger.debug(f"Fruit collected: {event.data}")

    # ----------------------------
    # Loop callbacks
    # ----------------------------

    def _step(self, delta_ms: float) -> None:
        self.simulation.step(self.keys.sample(), delta_ms)
        self._snapshot = self.simulation.snapshot()

    def _render(self) -> None:
        if not self._screen:
            return

        frame = self.renderer.render(self._snapshot)
        surface = pygame.surfarray.make_surface(frame.swapaxes(0, 1))
        if self.config.scale != 1.0:
            surface = pygame.transform.scale(surface, self._screen.get_size())
        self._screen.blit(surface, (0, 0))

        phase = self._snapshot.phase
        if phase == Phase.SELECTING_DIFFICULTY:
            self._draw_select_text()
        else:
            self._draw_hud()
            if phase.is_terminal:
                self._draw_game_over_text()

        if self._flash_frames > 0:
            self._flash_frames -= 1
            pygame.draw.rect(self._screen, self.config.flash_color, self._screen.get_rect(), 6)

        if self._show_debug:
            self._draw_debug()

        pygame.display.flip()

    # ----------------------------
    # Text overlay
    # ----------------------------

    def _blit_text(self, text: str, font: pygame.font.Font, color, center: tuple[float, float]) -> None:
        s = self.config.scale
        surface = font.render(text, True, color)
        rect = surface.get_rect(center=(int(center[0] * s), int(center[1] * s)))
        self._screen.blit(surface, rect)

    def _draw_select_text(self) -> None:
        cx = self.settings.arena.width / 2
        self._blit_text("HENRY'S FRUIT RUSH", self._big_font, self.config.title_color, (cx, 100))
        self._blit_text("SELECT YOUR DIFFICULTY", self._font, self.config.text_color, (cx, 180))

        for button in self.renderer.layout.difficulty_buttons():
            r = button.rect
            label = f"{button.label} - {get_difficulty(button.level).description}"
            self._blit_text(label, self._font, (0, 0, 0), (r.x + r.width / 2, r.y + r.height / 2))

        self._blit_text("Click a difficulty (or press 1/2/3) to start!", self._small_font, self.config.hint_color, (cx, 530))

    def _draw_hud(self) -> None:
        snap = self._snapshot
        s = self.config.scale

        health = self._font.render(f"{snap.health}%", True, self.config.text_color)
        self._screen.blit(health, (int(25 * s), int(25 * s)))

        color = self.config.warning_color if snap.time_warning else self.config.text_color
        timer = self._font.render(snap.timer_text, True, color)
        self._screen.blit(timer, timer.get_rect(topright=(int((snap.arena_width - 20) * s), int(20 * s))))

    def _draw_game_over_text(self) -> None:
        snap = self._snapshot
        cx = snap.arena_width / 2
        cy = snap.arena_height / 2

        if snap.phase == Phase.WON:
            self._blit_text("HENRY IS FULL!", self._big_font, self.config.title_color, (cx, cy - 60))
            self._blit_text(
                f"Completed in {format_time(snap.completion_time or 0)}",
                self._font, self.config.text_color, (cx, cy),
            )
        else:
            self._blit_text("TIME'S UP!", self._big_font, self.config.warning_color, (cx, cy - 60))
            self._blit_text(f"Health Reached: {snap.health}%", self._font, self.config.title_color, (cx, cy - 10))
            self._blit_text(
                f"({snap.fruits_collected} out of {snap.fruits_to_win} fruits)",
                self._font, self.config.title_color, (cx, cy + 20),
            )

        button = self.renderer.layout.restart_button()
        r = button.rect
        self._blit_text(button.label, self._font, (0, 0, 0), (r.x + r.width / 2, r.y + r.height / 2))

    def _draw_debug(self) -> None:
        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Tick: {self._snapshot.tick}",
            f"Phase: {self._snapshot.phase.name}",
            f"Obstacles: {len(self._snapshot.obstacles)}",
        ]

        recent = [
            e for e in self.simulation.event_bus.get_history(limit=30)
            if e.type != EventType.TICK
        ]
        if recent:
            lines.append(f"Last event: {recent[-1].type.name}")

        y = self.settings.arena.height - 20 * len(lines) - 10
        for line in lines:
            surface = self._small_font.render(line, True, self.config.hint_color)
            self._screen.blit(surface, (int(10 * self.config.scale), int(y * self.config.scale)))
            y += 20

    # ----------------------------
    # Main loop
    # ----------------------------

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True

        logger.info("Game window started")

        while self._running:
            self._handle_events()

            # Outside PLAYING the loop still renders, it just has nothing to step
            self.loop.on_frame(pygame.time.get_ticks())

            if self._clock:
                self._clock.tick(self.config.refresh_rate)

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Game window stopped")
