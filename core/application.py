"""Window, frame clock and rendering around the flocking engine."""

import time

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import flocking as config
from flocking import BirdStore, FlockingStepEngine, PerfStats
from rendering import BirdRenderer, DomainBox
from .camera import Camera
from .input_handler import InputHandler


class Application:
    """Runs one engine step per rendered frame and draws the result."""

    def __init__(self, store: BirdStore, engine: FlockingStepEngine, stats: PerfStats):
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])

        self.store = store
        self.engine = engine
        self.stats = stats

        self.camera = Camera()
        self.input_handler = InputHandler(self.camera)
        params = engine.params
        self.birds = BirdRenderer(len(store), params.space_min, params.space_max)
        self.box = DomainBox(params.space_min, params.space_max)

        self.clock = pygame.time.Clock()
        self.running = True

        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)
        self.camera.setup_projection(config.WINDOW["width"] / config.WINDOW["height"])

    def _handle_events(self):
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

    def _render(self):
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self.camera.apply()
        self.box.draw()
        self.birds.draw(self.store.view().positions)
        pygame.display.flip()

    def run(self):
        """Main loop; exits on quit or once the stats summary is reached (if configured)."""
        while self.running:
            dt = self.clock.tick() / 1000.0
            frame_start = time.perf_counter()
            self._handle_events()
            self.input_handler.handle_continuous_input(dt)

            if self.input_handler.paused:
                self._render()
                continue

            self.stats.begin_step()
            report = self.engine.step(self.store)
            self._render()

            pygame.display.set_caption(
                f"{config.WINDOW['title']}  |  Birds: {len(self.store)}  |  "
                f"FPS: {self.clock.get_fps():.0f}"
            )

            if not report.ok or not config.STATS["show_times"]:
                continue
            overhead = time.perf_counter() - frame_start - report.calc_time
            if self.stats.record(report.calc_time, overhead) and config.STATS["exit_after_summary"]:
                print("\n[App] Simulation complete. Exiting.")
                self.running = False

        pygame.quit()
