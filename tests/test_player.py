from types import SimpleNamespace

import pygame
import pytest

from cosmicdodger.entity import GameObject
from cosmicdodger.meteor import Meteor
from cosmicdodger.player import Player, PlayerInputComponent, ShootingComponent
from cosmicdodger.projectile import Projectile
from cosmicdodger.resources import AnimationFrames, TextureResource
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2, direction_from_angle
from cosmicdodger.window_bounds import WindowBounds
from cosmicdodger.world import World


class _FakeAudio:
    def __init__(self):
        self.plays = 0

    def set_volume(self, volume):
        self.volume = volume

    def play(self, loops=0):
        self.plays += 1
        return None


class _FakeHud:
    def __init__(self):
        self.ammo = []

    def update_ammo(self, ammo):
        self.ammo.append(ammo)


def _resources():
    frames = AnimationFrames("Meteor Destruction")
    for number in range(7):
        frames.add_frame(TextureResource(f"Frame {number}", Vector2(100.0, 100.0)))
    return SimpleNamespace(
        player_texture=TextureResource("Player", Vector2(112.0, 75.0)),
        projectile_texture=TextureResource("Projectile", Vector2(9.0, 54.0)),
        meteor_texture=TextureResource("Meteor", Vector2(89.0, 82.0)),
        meteor_destroy_frames=frames,
        shooting_sound=_FakeAudio(),
        projectile_hit_sound=_FakeAudio(),
    )


def _player(start=Vector2(100.0, 100.0)):
    world = World()
    hud = _FakeHud()
    resources = _resources()
    player = Player(hud, "Player", world=world, resources=resources, start_position=start)
    world.player = player
    return player, world, hud, resources


def _armed_player():
    player, world, hud, resources = _player(Vector2.ZERO)
    bounds = WindowBounds("Window Bounds")
    player.set_window_bounds(bounds)
    world.begin_frame([], {}, (1000.0, 600.0))
    player.update(0.2)
    return player, world, hud, resources, bounds


def test_player_starts_at_start_position_facing_up():
    player, _, hud, _ = _player()
    assert player.transform.position == Vector2(100.0, 100.0)
    assert player.transform.rotation == 90.0
    assert player.movement_component.max_speed == 600.0
    assert hud.ammo == [ShootingComponent.max_ammo]
    assert player.is_mouse_on_player is True


def test_start_position_taken_from_game_state():
    state = SimpleNamespace(player_start_position=Vector2(584.0, 322.5))
    player = Player(_FakeHud(), world=World(), resources=_resources(), game_state=state)
    assert player.transform.position == Vector2(584.0, 322.5)


def test_player_requires_hud():
    with pytest.raises(ValueError):
        Player(None, world=World(), resources=_resources())


def test_window_bounds_must_be_set_before_use():
    player, _, _, _ = _player()
    with pytest.raises(RuntimeError) as excinfo:
        _ = player.window_bounds
    assert isinstance(excinfo.value, RuntimeError)
    bounds = WindowBounds("Window Bounds")
    player.set_window_bounds(bounds)
    assert player.window_bounds is bounds


def test_set_window_bounds_listens_to_walls():
    player, _, _, _ = _player()
    bounds = WindowBounds("Window Bounds")
    player.set_window_bounds(bounds)
    assert player.window_bounds is bounds
    assert player.collider.candidates == tuple(bounds.collision_component.colliders)


def test_components_require_a_player_parent():
    other = GameObject(Transform(), TextureResource("Other", Vector2(10.0, 10.0)))
    with pytest.raises(TypeError):
        PlayerInputComponent(other)
    with pytest.raises(TypeError):
        ShootingComponent(other)


def test_holding_w_with_far_mouse_accelerates_towards_mouse():
    player, world, _, _ = _player()
    world.begin_frame([], {pygame.K_w: True}, (1000.0, 137.5))
    player.update(0.016)
    assert player.can_move is True
    assert player.is_mouse_on_player is False
    assert player.movement_component.speed > 0.0
    assert player.movement_component.velocity == player.look_at_direction
    assert 0.0 < player.transform.rotation < 90.0


def test_releasing_w_slows_down_to_rest():
    player, world, _, _ = _player()
    world.begin_frame([], {pygame.K_w: True}, (1000.0, 137.5))
    player.update(0.016)
    world.begin_frame([], {}, (1000.0, 137.5))
    player.update(0.016)
    assert player.can_move is False
    assert player.movement_component.speed == 0.0


def test_mouse_over_player_stops_turning():
    player, world, _, _ = _player()
    center = player.transform.position + player.center_point
    world.begin_frame([], {}, (center.x, center.y))
    player.update(0.016)
    assert player.is_mouse_on_player is True
    assert player.transform.rotation == 90.0


def test_shoot_spawns_projectile_and_uses_ammo():
    player, world, hud, resources, bounds = _armed_player()
    player.shooting_component.shoot()
    projectiles = [e for e in world.entities if isinstance(e, Projectile)]
    assert len(projectiles) == 1
    projectile = projectiles[0]
    assert projectile.id_name == "Projectile_0"
    assert projectile.movement_component.velocity == direction_from_angle(
        player.transform.rotation
    )
    assert set(bounds.collision_component.colliders) <= set(projectile.collider.candidates)
    assert player.shooting_component.current_ammo == ShootingComponent.max_ammo - 1
    assert hud.ammo[-1] == player.shooting_component.current_ammo
    assert resources.shooting_sound.plays == 1


def test_shoot_respects_reload_time():
    player, world, _, _, _ = _armed_player()
    player.shooting_component.shoot()
    player.shooting_component.shoot()
    assert len(world.entities) == 1
    assert player.shooting_component.current_ammo == ShootingComponent.max_ammo - 1


def test_shoot_without_ammo_does_nothing():
    player, world, _, _, _ = _armed_player()
    shooting = player.shooting_component
    for _ in range(ShootingComponent.max_ammo):
        shooting.shoot()
        shooting._time_since_last_shot = 1.0
    assert shooting.current_ammo == 0
    count = len(world.entities)
    shooting.shoot()
    assert len(world.entities) == count


def test_shot_listens_for_active_meteors():
    player, world, _, resources, _ = _armed_player()
    meteor = Meteor(Transform(), Vector2(1.0, 0.0), 100.0, world=world, resources=resources)
    world.meteor_spawner = SimpleNamespace(active_meteors=[meteor])
    player.shooting_component.shoot()
    projectile = world.entities[-1]
    assert meteor.collider in projectile.collider.candidates


def test_ammo_refills_but_never_exceeds_max():
    player, _, _, _, _ = _armed_player()
    shooting = player.shooting_component
    shooting.shoot()
    assert shooting.current_ammo == ShootingComponent.max_ammo - 1
    shooting.update(ShootingComponent.replenish_time)
    assert shooting.current_ammo == ShootingComponent.max_ammo
    shooting.update(ShootingComponent.replenish_time)
    assert shooting.current_ammo == ShootingComponent.max_ammo


def test_reset_refills_magazine():
    player, _, _, _, _ = _armed_player()
    shooting = player.shooting_component
    shooting.shoot()
    shooting.reset()
    assert shooting.current_ammo == ShootingComponent.max_ammo


def test_left_click_makes_input_shoot():
    player, world, _, _, _ = _armed_player()
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1)
    world.begin_frame([click], {}, (1000.0, 600.0))
    player.update(0.2)
    assert player.input_component.is_shooting is True
    assert any(isinstance(e, Projectile) for e in world.entities)
    release = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1)
    world.begin_frame([release], {}, (1000.0, 600.0))
    player.update(0.2)
    assert player.input_component.is_shooting is False


def test_right_click_does_not_shoot():
    player, world, _, _, _ = _armed_player()
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3)
    world.begin_frame([click], {}, (1000.0, 600.0))
    player.update(0.2)
    assert player.input_component.is_shooting is False
    assert world.entities == ()