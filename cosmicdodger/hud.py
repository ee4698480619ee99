"""The in-game heads-up display and the menu shown after losing."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

import pygame

from cosmicdodger.color import Color
from cosmicdodger.transform import Transform
from cosmicdodger.ui import (
    UIButton,
    UIElement,
    UIProgressTextures,
    UIStaticText,
    UITextureRect,
)
from cosmicdodger.vector import Vector2
from cosmicdodger.window import Window

_PINK = Color(255, 0, 160)
_LIME = Color(176, 228, 16)


class DeathMenu(UIElement):
    """Panel with the final score, level and a button to play again.

    Child positions are relative to the menu's centre.
    """

    def __init__(
        self,
        transform: Transform,
        resources: Any,
        name: str = "NA_DeathMenu",
        *,
        on_try_again: Optional[Callable[[], None]] = None,
        world: Optional[Any] = None,
    ) -> None:
        super().__init__(transform, name)
        font = resources.main_font
        background = resources.ui_background_texture
        button_texture = resources.ui_button

        self.background = UITextureRect(
            background,
            Transform(
                Vector2(-background.dimensions.x / 2.0, -background.dimensions.y / 2.0)
            ),
        )
        self.title = UIStaticText(
            "YOU LOST!",
            _PINK,
            Transform(Vector2(-120.0, -175.0)),
            Vector2(240.0, 60.0),
            font=font,
        )
        self.score_text = UIStaticText(
            "SCORE: 0",
            Color.black,
            Transform(Vector2(-100.0, -50.0)),
            Vector2(200.0, 50.0),
            font=font,
        )
        self.level_text = UIStaticText(
            "LEVEL: 1",
            Color.black,
            Transform(Vector2(-90.0, 0.0)),
            Vector2(180.0, 50.0),
            font=font,
        )
        self.button = UIButton(
            "TRY AGAIN",
            button_texture,
            Transform(Vector2(-button_texture.dimensions.x / 2.0, 100.0)),
            world=world,
            font=font,
        )

        for child in (
            self.background,
            self.title,
            self.score_text,
            self.level_text,
            self.button,
        ):
            self.add_child(child)

        self.button.on_pressed = on_try_again
        self.button.transform.rotation = 90.0
        self.button.hover_texture = resources.ui_button_hover

        self.can_update = True

    def update_values(self, score: int, difficulty: int) -> None:
        """Show the score and level reached."""
        self.score_text.set_text(f"SCORE: {score}")
        self.level_text.set_text(f"LEVEL: {difficulty}")

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)


class HudState(Enum):
    PLAYING = "playing"
    DEAD = "dead"


class HUD(UIElement):
    """Lives, ammo, score, high score and level, plus the death menu."""

    def __init__(
        self,
        resources: Any,
        *,
        world: Optional[Any] = None,
        on_try_again: Optional[Callable[[], None]] = None,
        max_lives: int = 3,
        max_ammo: int = 20,
    ) -> None:
        super().__init__(Transform())
        font = resources.main_font
        life_texture = resources.player_life_texture
        ammo_texture = resources.ammo_texture

        self.lives_progress = UIProgressTextures(
            Transform(Vector2(Window.width - life_texture.dimensions.x - 30.0, 30.0)),
            life_texture,
            max_lives,
        )
        self.ammo_progress = UIProgressTextures(
            Transform(Vector2(Window.width - ammo_texture.dimensions.x - 30.0, 90.0)),
            ammo_texture,
            max_ammo,
        )
        self.score_text = UIStaticText(
            "SCORE: #",
            _LIME,
            Transform(Vector2(20.0, 20.0)),
            Vector2(200.0, 50.0),
            font=font,
        )
        self.high_score_text = UIStaticText(
            "HI SCORE: #",
            _PINK,
            Transform(Vector2(20.0, 80.0)),
            Vector2(100.0, 25.0),
            font=font,
        )
        self.difficulty_text = UIStaticText(
            "LEVEL: #",
            _LIME,
            Transform(Vector2(20.0, Window.height - 70.0)),
            Vector2(160.0, 40.0),
            font=font,
        )
        self.death_menu = DeathMenu(
            Transform(Vector2(Window.width / 2.0, Window.height / 2.0)),
            resources,
            on_try_again=on_try_again,
            world=world,
        )

        for child in (
            self.lives_progress,
            self.ammo_progress,
            self.score_text,
            self.high_score_text,
            self.difficulty_text,
            self.death_menu,
        ):
            self.add_child(child)
        self.construct()

        self.can_update = True
        self.state = HudState.PLAYING
        self.set_state(HudState.PLAYING)

    def set_state(self, state: HudState) -> None:
        """Show the playing widgets or the death menu."""
        playing_widgets = (
            self.lives_progress,
            self.ammo_progress,
            self.score_text,
            self.high_score_text,
            self.difficulty_text,
        )
        if state is HudState.PLAYING:
            self.death_menu.disable()
            for widget in playing_widgets:
                widget.enable()
        elif state is HudState.DEAD:
            self.death_menu.enable()
            for widget in playing_widgets:
                widget.disable()
        else:
            return
        self.state = state

    def update_death_menu(self, score: int, difficulty: int) -> None:
        self.death_menu.update_values(score, difficulty)

    def update_lives(self, lives: int) -> None:
        self.lives_progress.update_value(lives)

    def update_score(self, score: int) -> None:
        self.score_text.set_text(f"SCORE: {score}")

    def update_high_score(self, high_score: int) -> None:
        self.high_score_text.set_text(f"HI SCORE: {high_score}")

    def update_ammo(self, ammo: int) -> None:
        self.ammo_progress.update_value(ammo)

    def update_difficulty_level(self, level: int) -> None:
        self.difficulty_text.set_text(f"LEVEL: {level}")

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)