from types import SimpleNamespace

import pytest

from cosmicdodger.meteor import Meteor
from cosmicdodger.projectile import Projectile
from cosmicdodger.resources import AnimationFrames, TextureResource
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2
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


class _FakeGameState:
    def __init__(self):
        self.scores = []
        self.hits = 0

    def add_score(self, increment):
        self.scores.append(increment)

    def on_player_hit(self):
        self.hits += 1


def _resources():
    frames = AnimationFrames("Meteor Destruction")
    for number in range(7):
        frames.add_frame(TextureResource(f"Frame {number}", Vector2(100.0, 100.0)))
    return SimpleNamespace(
        projectile_texture=TextureResource("Projectile", Vector2(9.0, 54.0)),
        projectile_hit_sound=_FakeAudio(),
        meteor_texture=TextureResource("Meteor", Vector2(89.0, 82.0)),
        meteor_destroy_frames=frames,
    )


def test_projectile_movement_settings():
    projectile = Projectile(Transform(), world=World(), resources=_resources())
    movement = projectile.movement_component
    assert movement.max_speed == 2000.0
    assert movement.speed == 1500.0
    assert movement.rotation_follows_velocity is True
    assert projectile.collider.display_name == "Basic Collision"


def test_update_moves_along_velocity():
    start = Vector2(300.0, 300.0)
    projectile = Projectile(Transform(start), world=World(), resources=_resources())
    projectile.movement_component.velocity = Vector2(1.0, 0.0)
    projectile.update(0.01)
    assert projectile.transform.position.x - start.x == pytest.approx(15.0)
    assert projectile.transform.position.y == start.y
    assert projectile.start_position == start


def test_hitting_meteor_scores_and_breaks_meteor():
    world = World()
    resources = _resources()
    state = _FakeGameState()
    meteor = Meteor(
        Transform(Vector2(270.0, 270.0)),
        Vector2(1.0, 0.0),
        100.0,
        world=world,
        resources=resources,
        game_state=state,
    )
    meteor.collision_component.update(0.0)
    projectile = Projectile(
        Transform(Vector2(300.0, 300.0)), world=world, resources=resources, game_state=state
    )
    world.spawn_entity(projectile)
    projectile.collider.listen_for_collisions(meteor)
    projectile.update(0.0)
    assert world.destroy_queue == (projectile,)
    assert state.scores == [1]
    assert state.hits == 0
    assert resources.projectile_hit_sound.plays == 1
    assert meteor.rotation_rate == 0
    assert meteor.collider.can_update is False


def test_hitting_window_bounds_destroys_projectile():
    world = World()
    state = _FakeGameState()
    bounds = WindowBounds("Window Bounds")
    bounds.collision_component.update(0.0)
    resources = _resources()
    projectile = Projectile(
        Transform(Vector2(0.0, 300.0)), world=world, resources=resources, game_state=state
    )
    projectile.set_window_collisions(bounds)
    projectile.update(0.0)
    assert projectile.bounces == 1
    assert world.destroy_queue == (projectile,)
    assert state.scores == []
    assert resources.projectile_hit_sound.plays == 0


def test_set_window_collisions_listens_to_every_wall():
    bounds = WindowBounds("Window Bounds")
    projectile = Projectile(Transform(), world=World(), resources=_resources())
    projectile.set_window_collisions(bounds)
    names = [collider.display_name for collider in projectile.collider.candidates]
    assert names == ["LEFT", "RIGHT", "UP", "DOWN"]


def test_projectile_in_open_space_is_not_destroyed():
    world = World()
    bounds = WindowBounds("Window Bounds")
    bounds.collision_component.update(0.0)
    projectile = Projectile(Transform(Vector2(600.0, 300.0)), world=world, resources=_resources())
    projectile.set_window_collisions(bounds)
    projectile.update(0.0)
    assert world.destroy_queue == ()
    assert projectile.bounces == 0