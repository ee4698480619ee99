"""Loading and ownership of textures, animation frames, fonts and sounds."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import pygame

from cosmicdodger.vector import Vector2


class ResourceError(RuntimeError):
    """Raised when an asset cannot be loaded."""


@dataclass(eq=False)
class TextureResource:
    """An image together with the size it is drawn at."""

    name: str
    dimensions: Vector2
    image: Optional[pygame.Surface] = None


@dataclass(eq=False)
class AnimationFrames:
    """An ordered list of textures making up an animation."""

    name: str
    frames: List[TextureResource] = field(default_factory=list)

    def add_frame(self, frame: TextureResource) -> AnimationFrames:
        """Append a frame and return this object so calls can be chained."""
        self.frames.append(frame)
        return self


class ResourceManager:
    """Loads the game's assets and keeps track of everything it loaded.

    With ``load_assets`` set, every texture, sound, the font and the cursor
    the game uses are loaded from ``asset_root`` on construction.
    """

    def __init__(
        self, asset_root: Union[str, Path] = "assets", load_assets: bool = True
    ) -> None:
        self.asset_root = Path(asset_root)
        self.textures: List[TextureResource] = []
        self.animation_frames: List[AnimationFrames] = []
        self.fonts: List[pygame.font.Font] = []
        self.sounds: List[pygame.mixer.Sound] = []

        self.game_background_texture: Optional[TextureResource] = None
        self.player_texture: Optional[TextureResource] = None
        self.player_life_texture: Optional[TextureResource] = None
        self.meteor_texture: Optional[TextureResource] = None
        self.projectile_texture: Optional[TextureResource] = None
        self.pickup_texture: Optional[TextureResource] = None
        self.ammo_texture: Optional[TextureResource] = None
        self.ui_background_texture: Optional[TextureResource] = None
        self.ui_button: Optional[TextureResource] = None
        self.ui_button_hover: Optional[TextureResource] = None
        self.meteor_destroy_frames: Optional[AnimationFrames] = None
        self.shooting_sound: Optional[pygame.mixer.Sound] = None
        self.projectile_hit_sound: Optional[pygame.mixer.Sound] = None
        self.explosion_sound: Optional[pygame.mixer.Sound] = None
        self.pick_up_sound: Optional[pygame.mixer.Sound] = None
        self.main_font: Optional[pygame.font.Font] = None
        self.cursor: Optional[pygame.cursors.Cursor] = None

        if load_assets:
            self._load_game_assets()

    def _load_game_assets(self) -> None:
        ui_button_dimensions = Vector2(200.0, 60.0)
        self.game_background_texture = self.load_texture(
            "Background", Vector2(1280.0, 720.0), "background.png"
        )
        self.player_texture = self.load_texture(
            "Player", Vector2(112.0, 75.0), "player_ship.png"
        )
        self.player_life_texture = self.load_texture(
            "Player Life", Vector2(37.0, 26.0), "player_life.png"
        )
        self.meteor_texture = self.load_texture(
            "Meteor", Vector2(89.0, 82.0), "meteors/meteor3.png"
        )
        self.projectile_texture = self.load_texture(
            "Projectile", Vector2(9.0, 54.0), "laser_g.png"
        )
        self.pickup_texture = self.load_texture(
            "Pickup", Vector2(30.0, 31.0), "star_gold.png"
        )
        self.ammo_texture = self.load_texture(
            "Ammo", Vector2(12.0, 20.0), "ammo_green.png"
        )
        self.ui_background_texture = self.load_texture(
            "UI Background", Vector2(450.0, 450.0), "ui_bg.png"
        )
        self.ui_button = self.load_texture(
            "UI Button", ui_button_dimensions, "ui_button.png"
        )
        self.ui_button_hover = self.load_texture(
            "UI Button Hover", ui_button_dimensions, "ui_button_hover.png"
        )

        frame_dimensions = Vector2(100.0, 100.0)
        self.meteor_destroy_frames = self.create_animation_frames("Meteor Destruction")
        for number in range(7):
            self.meteor_destroy_frames.add_frame(
                self.load_texture(
                    f"Meteor Frame {number + 1}",
                    frame_dimensions,
                    f"meteors/animations/destroy_{number}.png",
                )
            )

        cursor_image = self._load_image(self.asset_root / "crossair_red.png")
        self.cursor = pygame.cursors.Cursor((0, 0), cursor_image)

        self.shooting_sound = self.load_sound("shoot1.wav")
        self.projectile_hit_sound = self.load_sound("hit.wav")
        self.explosion_sound = self.load_sound("explosion.wav")
        self.pick_up_sound = self.load_sound("pickup.wav")

        self.main_font = self.load_font("LilitaOne-Regular.ttf", 50)

    @staticmethod
    def _load_image(path: Path) -> pygame.Surface:
        try:
            return pygame.image.load(str(path))
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"Failed to load texture {path}: {exc}") from exc

    def load_texture(
        self, name: str, dimensions: Vector2, path: Union[str, Path]
    ) -> TextureResource:
        """Load an image and register it as a texture of the given size."""
        image = self._load_image(self.asset_root / path)
        texture = TextureResource(name, dimensions, image)
        self.textures.append(texture)
        return texture

    def create_animation_frames(self, name: str) -> AnimationFrames:
        """Create and register an empty set of animation frames."""
        frames = AnimationFrames(name)
        self.animation_frames.append(frames)
        return frames

    def load_font(self, path: Union[str, Path], size: int) -> pygame.font.Font:
        """Load a TrueType font at the given point size."""
        if not pygame.font.get_init():
            pygame.font.init()
        full_path = self.asset_root / path
        try:
            font = pygame.font.Font(str(full_path), size)
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"Failed to load font {full_path}: {exc}") from exc
        self.fonts.append(font)
        return font

    def load_sound(self, path: Union[str, Path]) -> pygame.mixer.Sound:
        """Load a sound effect; the mixer must already be initialised."""
        full_path = self.asset_root / path
        try:
            sound = pygame.mixer.Sound(str(full_path))
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"Failed to load audio {full_path}: {exc}") from exc
        self.sounds.append(sound)
        return sound

    def close(self) -> None:
        """Release every loaded resource."""
        self.textures.clear()
        self.animation_frames.clear()
        self.fonts.clear()
        self.sounds.clear()
        self.cursor = None