from types import SimpleNamespace

from cosmicdodger.collision import CollisionComponent
from cosmicdodger.entity import GameObject
from cosmicdodger.pickup import Pickup
from cosmicdodger.resources import TextureResource
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2
from cosmicdodger.world import World


class _FakeAudio:
    def __init__(self):
        self.plays = 0
        self.volume = None

    def set_volume(self, volume):
        self.volume = volume

    def play(self, loops=0):
        self.plays += 1
        return None


class _FakeGameState:
    def __init__(self):
        self.scores = []

    def add_score(self, increment):
        self.scores.append(increment)


class _FakeSpawner:
    def __init__(self):
        self.deleted = []

    def delete_pickup(self, pickup):
        self.deleted.append(pickup)


def _resources():
    return SimpleNamespace(
        pickup_texture=TextureResource("Pickup", Vector2(30.0, 31.0)),
        meteor_texture=TextureResource("Meteor", Vector2(89.0, 82.0)),
        pick_up_sound=_FakeAudio(),
    )


def _player_at(position):
    player = GameObject(
        Transform(position), TextureResource("Player", Vector2(112.0, 75.0)), "Player"
    )
    component = player.add_component(CollisionComponent(player, "Collision Component"))
    component.add_collider(Vector2(50.0, 50.0))
    return player


def test_pickup_faces_up_and_listens_to_player():
    world = World()
    world.player = _player_at(Vector2(500.0, 500.0))
    pickup = Pickup(Transform(Vector2(100.0, 100.0)), world=world, resources=_resources())
    assert pickup.transform.rotation == 90.0
    assert pickup.collider.candidates == tuple(
        world.player.get_component(CollisionComponent).colliders
    )


def test_bounce_stays_near_start_and_changes_direction():
    start = Vector2(100.0, 100.0)
    pickup = Pickup(Transform(start), world=World(), resources=_resources())
    ys = []
    for _ in range(200):
        pickup.update(0.05)
        ys.append(pickup.transform.position.y)
        assert pickup.transform.position.x == start.x
    assert all(abs(y - start.y) <= 13.0 for y in ys)
    assert min(ys) < start.y
    assert any(later > earlier for earlier, later in zip(ys, ys[1:]))


def test_bounce_does_not_move_the_caller_transform():
    transform = Transform(Vector2(100.0, 100.0))
    pickup = Pickup(transform, world=World(), resources=_resources())
    pickup.update(0.1)
    assert transform.position == Vector2(100.0, 100.0)
    assert pickup.transform.position.y < 100.0


def test_touching_player_scores_and_removes_pickup():
    world = World()
    spawner = _FakeSpawner()
    world.pickup_spawner = spawner
    world.player = _player_at(Vector2(200.0, 200.0))
    world.player.update(0.0)
    resources = _resources()
    state = _FakeGameState()
    pickup = Pickup(
        Transform(Vector2(200.0, 200.0)), world=world, resources=resources, game_state=state
    )
    pickup.update(0.0)
    assert spawner.deleted == [pickup]
    assert state.scores == [1]
    assert resources.pick_up_sound.plays == 1


def test_without_spawner_pickup_is_queued_for_destruction():
    world = World()
    world.player = _player_at(Vector2(200.0, 200.0))
    world.player.update(0.0)
    pickup = Pickup(Transform(Vector2(200.0, 200.0)), world=world, resources=_resources())
    world.spawn_entity(pickup)
    pickup.update(0.0)
    assert world.destroy_queue == (pickup,)


def test_far_player_is_not_touched():
    world = World()
    spawner = _FakeSpawner()
    world.pickup_spawner = spawner
    world.player = _player_at(Vector2(900.0, 600.0))
    world.player.update(0.0)
    pickup = Pickup(Transform(Vector2(100.0, 100.0)), world=world, resources=_resources())
    pickup.update(0.0)
    assert spawner.deleted == []