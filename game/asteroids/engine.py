"""
AsteroidsGame - dodge drifting asteroids for as long as possible
-----------------------------------------------------------------
- One player square steered by four direction flags, wrapping at the edges
- Asteroids spawn on a fixed interval up to a capacity and drift outwards
- Touching an asteroid ends the session; survival time feeds the best time
- Ticks and the spawn timer run on an injected cooperative Scheduler, so a
  ManualScheduler can drive the whole game in virtual time

Per tick: clock -> player -> asteroids -> collision (early exit) ->
cleanup -> render -> restart/halt or reschedule.
"""

import logging
import random
from typing import List, Optional

from .config import GameConfig, OnGameOver, check_capacity, check_positive
from .entities import Controls, Obstacle, Player
from .scheduler import Scheduler, SimulationClock
from .scores import ScoreStore, MemoryScoreStore, commit_best_time
from .spawner import Spawner
from .starfield import StarField
from .surface import Surface, BACKGROUND_COLOUR, TEXT_COLOUR
from .utils import format_time, overlaps

logger = logging.getLogger(__name__)


class AsteroidsGame:
    """Owns the world and the Running/Stopped state machine"""

    def __init__(
        self,
        scheduler: Scheduler,
        surface: Optional[Surface] = None,
        score_store: Optional[ScoreStore] = None,
        controls: Optional[Controls] = None,
        config: Optional[GameConfig] = None,
        spawner: Optional[Spawner] = None,
        starfield: Optional[StarField] = None,
    ):
        self.config = config if config is not None else GameConfig()
        self.scheduler = scheduler
        self.surface = surface
        self.score_store = score_store if score_store is not None else MemoryScoreStore()
        self.controls = controls if controls is not None else Controls()
        self.spawner = spawner if spawner is not None else Spawner()
        self.starfield = starfield

        self.max_obstacles = self.config.max_obstacles
        self.spawn_interval = self.config.spawn_interval

        # World state
        self.player: Optional[Player] = None
        self.obstacles: List[Obstacle] = []
        self.clock = SimulationClock()
        self.done = False

        # Scheduler handles
        self._tick_handle = None
        self._spawn_handle = None
        self._running = False
        self.sessions = 0

    # ----------------------------
    # Host API
    # ----------------------------

    @property
    def running(self) -> bool:
        return self._running

    @property
    def timer(self) -> float:
        """Survival time of the current session in milliseconds"""
        return self.clock.timer

    @property
    def width(self) -> float:
        """Viewport width; follows the surface when one is attached"""
        if self.surface is not None and self.surface.width() > 0:
            return self.surface.width()
        return self.config.width

    @property
    def height(self) -> float:
        # Minimised windows report a zero size
        if self.surface is not None and self.surface.height() > 0:
            return self.surface.height()
        return self.config.height

    def start(self):
        if self._running:
            return
        if self.player is None or self.done:
            self.initialise_session()
        else:
            self._arm_spawn_timer()
        self.done = False
        self.clock.restart(self.scheduler.now())
        self._running = True
        self._tick_handle = self.scheduler.schedule_once(self.config.frame_interval, self._tick)
        logger.info("Game started")

    def stop(self):
        if not self._running:
            return
        self.scheduler.cancel(self._tick_handle)
        self._tick_handle = None
        self._cancel_spawn_timer()
        self._running = False
        logger.info("Game stopped at %s", format_time(self.timer))

    def set_max_obstacles(self, n: int):
        check_capacity(n)
        self.max_obstacles = n
        logger.info("Max obstacles set to %d", n)
        if self._running:
            self._arm_spawn_timer()

    def set_spawn_interval(self, seconds: float):
        check_positive("spawn_interval", seconds)
        self.spawn_interval = seconds
        logger.info("Spawn interval set to %.2fs", seconds)
        if self._running:
            self._arm_spawn_timer()

    # ----------------------------
    # Session lifecycle
    # ----------------------------

    def initialise_session(self):
        """Fresh player at the center, a full set of asteroids, timer at zero"""
        self.player = Player(
            x=self.width / 2, y=self.height / 2,
            size=self.config.player_size, speed=self.config.player_speed,
        )
        self.obstacles = []
        for _ in range(self.max_obstacles):
            self.spawn_obstacle()
        self.clock.reset_timer()
        self.sessions += 1
        self._arm_spawn_timer()
        logger.info("Session %d started with %d asteroids", self.sessions, len(self.obstacles))

    def spawn_obstacle(self) -> Obstacle:
        obstacle = self.spawner.spawn(self.width, self.height)
        self.obstacles.append(obstacle)
        return obstacle

    def request_spawn(self) -> Optional[Obstacle]:
        """Spawn one asteroid unless the capacity is already reached"""
        if len(self.obstacles) >= self.max_obstacles:
            return None
        return self.spawn_obstacle()

    def _arm_spawn_timer(self):
        self._cancel_spawn_timer()
        self._spawn_handle = self.scheduler.schedule_once(self.spawn_interval, self._spawn_tick)

    def _cancel_spawn_timer(self):
        if self._spawn_handle is not None:
            self.scheduler.cancel(self._spawn_handle)
            self._spawn_handle = None

    def _spawn_tick(self):
        self._spawn_handle = None
        self.request_spawn()
        self._arm_spawn_timer()

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def _tick(self):
        self._tick_handle = None
        if not self._running:
            return
        self.step()

        if self.done:
            if self.config.on_game_over is OnGameOver.RESTART:
                self.initialise_session()
                self.done = False
            else:
                self._cancel_spawn_timer()
                self._running = False
                logger.info("Game halted after game over")
                return
        self._tick_handle = self.scheduler.schedule_once(self.config.frame_interval, self._tick)

    def step(self):
        """One simulation frame: advance, resolve collisions, clean up, render"""
        self.clock.tick(self.scheduler.now())
        self.update()
        if self.starfield is not None:
            self.starfield.resize(self.width, self.height)
            self.starfield.update()
        if self.surface is not None:
            self.render(self.surface)

    def update(self) -> bool:
        """Move everything; returns True if the player was hit this frame"""
        self.player.update(self.controls)
        self.player.ensure_in_bounds(self.width, self.height)

        for obstacle in self.obstacles:
            obstacle.update()

        for obstacle in self.obstacles:
            if overlaps(self.player, obstacle):
                self._game_over()
                return True

        self._remove_out_of_bounds()
        return False

    def _game_over(self):
        self.done = True
        best = commit_best_time(self.score_store, self.timer)
        logger.info("Game over at %s (best %s)", format_time(self.timer), format_time(best))

    def _remove_out_of_bounds(self):
        center_x = self.width / 2
        center_y = self.height / 2
        max_distance = center_x + center_y
        kept = []
        for obstacle in self.obstacles:
            if obstacle.is_out_of_bounds(max_distance, center_x, center_y):
                logger.debug("Despawned obstacle at (%.1f, %.1f)", obstacle.x, obstacle.y)
            else:
                kept.append(obstacle)
        self.obstacles = kept

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self, surface: Surface):
        surface.clear(BACKGROUND_COLOUR)
        if self.starfield is not None:
            self.starfield.render(surface)

        self.player.render(surface)
        for obstacle in self.obstacles:
            obstacle.render(surface)

        best = self.score_store.get_best_time()
        best_text = format_time(best) if best is not None else "N/A"
        right = surface.width() - 32
        surface.draw_text(f"Asteroids: {len(self.obstacles)}", 32, 32, 32, TEXT_COLOUR)
        surface.draw_text(f"Best time: {best_text}", right, 32, 32, TEXT_COLOUR, align="right")
        surface.draw_text(f"Time: {format_time(self.timer)}", right, 80, 32, TEXT_COLOUR, align="right")


def create_game(scheduler: Scheduler, surface: Optional[Surface] = None,
                score_store: Optional[ScoreStore] = None, config: Optional[GameConfig] = None,
                seed: Optional[int] = None) -> AsteroidsGame:
    """Wire a game with a seeded spawner and a star field sized to the config"""
    config = config if config is not None else GameConfig()
    rng = random.Random(seed)
    starfield = None
    if config.star_count > 0:
        starfield = StarField(config.width, config.height, config.star_count,
                              config.star_speed, rng=random.Random(rng.random()))
    return AsteroidsGame(
        scheduler,
        surface=surface,
        score_store=score_store,
        config=config,
        spawner=Spawner(rng=rng),
        starfield=starfield,
    )
