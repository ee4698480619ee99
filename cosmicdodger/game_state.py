"""Score, lives and difficulty of the current run."""

from __future__ import annotations

from typing import Any, Optional

from cosmicdodger.hud import HUD, HudState
from cosmicdodger.sound import Sound
from cosmicdodger.vector import Vector2
from cosmicdodger.window import Window


class GameState:
    """Tracks score, lives and difficulty and keeps the HUD in step.

    ``world`` supplies ``player``, ``meteor_spawner`` and ``pickup_spawner``.
    Every ``score_per_level`` points raise the difficulty by one.
    """

    max_lives = 3
    score_per_level = 20

    def __init__(self, world: Any, resources: Any) -> None:
        self.world = world
        dims = resources.player_texture.dimensions
        self._start_position = Vector2(
            Window.width / 2.0 - dims.x / 2.0,
            Window.height / 2.0 - dims.y / 2.0,
        )
        self._current_lives = self.max_lives
        self._current_score = 0
        self._high_score = 0
        self._difficulty_level = 1
        self.is_paused = False
        self._hud: Optional[HUD] = None
        self._player_hit = Sound(resources.explosion_sound, 0.5)

    @property
    def score(self) -> int:
        return self._current_score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def current_lives(self) -> int:
        return self._current_lives

    @property
    def difficulty_level(self) -> int:
        return self._difficulty_level

    @property
    def player_start_position(self) -> Vector2:
        return self._start_position

    @property
    def hud(self) -> Optional[HUD]:
        return self._hud

    def _require_hud(self) -> HUD:
        if self._hud is None:
            raise RuntimeError("no HUD has been set for the game state")
        return self._hud

    def on_try_again(self) -> None:
        """Resume play after a game over."""
        self.is_paused = False
        self._require_hud().set_state(HudState.PLAYING)

    def set_target_hud(self, hud: HUD) -> None:
        """Attach the HUD and show the current values on it."""
        if hud is None:
            raise ValueError("hud must not be None")
        self._hud = hud
        hud.update_score(self._current_score)
        hud.update_high_score(self._high_score)
        hud.update_lives(self._current_lives)
        hud.update_difficulty_level(self._difficulty_level)

    def add_score(self, increment: int) -> None:
        hud = self._require_hud()
        self._current_score += increment
        hud.update_score(self._current_score)
        if self._current_score % self.score_per_level == 0:
            self._increase_difficulty()

    def on_player_hit(self) -> None:
        """Lose a life; the game is over when none are left."""
        hud = self._require_hud()
        self._current_lives = min(max(self._current_lives - 1, 0), self.max_lives)
        self._player_hit.play()
        hud.update_lives(self._current_lives)
        if self._current_lives == 0:
            self._game_over()

    def _increase_difficulty(self) -> None:
        self._difficulty_level += 1
        self.world.meteor_spawner.increase_difficulty()
        self._require_hud().update_difficulty_level(self._difficulty_level)

    def _game_over(self) -> None:
        hud = self._require_hud()
        self.is_paused = True
        hud.update_death_menu(self._current_score, self._difficulty_level)
        hud.set_state(HudState.DEAD)
        player = self.world.player
        self._reset(player)
        self._update_hud(player)

    def _update_hud(self, player: Any) -> None:
        hud = self._require_hud()
        hud.update_high_score(self._high_score)
        hud.update_score(self._current_score)
        hud.update_lives(self._current_lives)
        hud.update_ammo(player.shooting_component.current_ammo)
        hud.update_difficulty_level(self._difficulty_level)

    def _reset(self, player: Any) -> None:
        self.world.meteor_spawner.reset()
        self.world.pickup_spawner.reset()
        player.shooting_component.reset()
        self._difficulty_level = 1
        self._current_lives = self.max_lives
        self._high_score = max(self._high_score, self._current_score)
        self._current_score = 0
        player.transform.position = self._start_position