import pytest

from cosmicdodger.collision import CollisionComponent
from cosmicdodger.entity import GameObject
from cosmicdodger.resources import TextureResource
from cosmicdodger.transform import Transform
from cosmicdodger.vector import Vector2
from cosmicdodger.window import Window
from cosmicdodger.window_bounds import WindowBounds


def _probe(x, y):
    probe = GameObject(Transform(Vector2(x, y)), TextureResource("Probe", Vector2(4.0, 4.0)), "Probe")
    component = probe.add_component(CollisionComponent(probe))
    collider = component.add_collider(Vector2(4.0, 4.0))
    probe.update(0.0)
    return collider


def _walls():
    bounds = WindowBounds("Window Bounds")
    bounds.update(0.0)
    return {c.display_name: c for c in bounds.collision_component.colliders}


def test_four_named_colliders():
    bounds = WindowBounds()
    names = [c.display_name for c in bounds.collision_component.colliders]
    assert names == ["LEFT", "RIGHT", "UP", "DOWN"]
    assert bounds.display_name == "NA_WindowBounds"


def test_colliders_visible_but_component_hidden():
    bounds = WindowBounds()
    assert bounds.collision_component.can_render is False
    assert all(c.can_render for c in bounds.collision_component.colliders)


def test_texture_has_no_size():
    bounds = WindowBounds()
    assert bounds.texture.name == "Window"
    assert bounds.texture.dimensions == Vector2.ZERO
    assert bounds.center_point == Vector2.ZERO


def test_walls_span_window():
    walls = _walls()
    assert walls["LEFT"].rect.h == Window.height
    assert walls["RIGHT"].rect.h == Window.height
    assert walls["UP"].rect.w == Window.width
    assert walls["DOWN"].rect.w == Window.width


@pytest.mark.parametrize(
    "name,position",
    [
        ("LEFT", (2.0, Window.height / 2.0)),
        ("RIGHT", (Window.width - 6.0, Window.height / 2.0)),
        ("UP", (Window.width / 2.0, 2.0)),
        ("DOWN", (Window.width / 2.0, Window.height - 6.0)),
    ],
)
def test_probe_near_edge_hits_wall(name, position):
    walls = _walls()
    probe = _probe(*position)
    hit = walls[name].is_colliding(probe)
    assert hit is not None and hit.has_hit is True
    assert hit.hit_collider is probe


def test_probe_in_middle_hits_nothing():
    walls = _walls()
    probe = _probe(Window.width / 2.0, Window.height / 2.0)
    assert all(wall.is_colliding(probe) is None for wall in walls.values())


def test_probe_hitting_wall_reports_bounds_object():
    bounds = WindowBounds("Window Bounds")
    bounds.update(0.0)
    probe = _probe(2.0, Window.height / 2.0)
    hit = probe.is_colliding(bounds.collision_component.colliders[0])
    assert hit.hit_game_object is bounds
    assert hit.hit_collider.display_name == "LEFT"