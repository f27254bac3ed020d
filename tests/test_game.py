import math

import pytest
from PIL import Image as PILImage

from eso.assets import AssetError
from eso.controls import Buttons
from eso.game import (
    CAMERA_ROTATION_SPEED,
    PLAYER_SPEED,
    Controller,
    Entity,
    Time,
    Transform,
    World,
    setup_world,
    update_player,
)
from eso.geometry import Material, Mesh


def _write_png(path, size=(8, 8)):
    PILImage.new("RGBA", size, (10, 20, 30, 255)).save(path, format="PNG")


@pytest.fixture
def asset_root(tmp_path):
    _write_png(tmp_path / "default_font.png")
    _write_png(tmp_path / "cell_brick.png", (16, 8))
    return tmp_path


def test_transform_default_is_origin():
    t = Transform()
    assert t.translation == (0.0, 0.0, 0.0)
    assert t.rotation == (0.0, 0.0, 0.0)


def test_transform_from_xyz_and_with_rotation_keeps_translation():
    t = Transform.from_xyz(3.0, 0.5, -2.0).with_rotation(0.0, 1.0, 0.0)
    assert t.translation == (3.0, 0.5, -2.0)
    assert t.rotation == (0.0, 1.0, 0.0)


def test_with_translation_keeps_rotation_and_leaves_original():
    original = Transform(rotation=(1.0, 2.0, 3.0))
    moved = original.with_translation(4.0, 5.0, 6.0)
    assert moved.rotation == (1.0, 2.0, 3.0)
    assert moved.translation == (4.0, 5.0, 6.0)
    assert original.translation == (0.0, 0.0, 0.0)


def test_time_tick_accumulates():
    t = Time(time=1000)
    t.tick(1500)
    assert (t.delta, t.total, t.time) == (500, 500, 1500)
    t.tick(2500)
    assert (t.delta, t.total, t.time) == (1000, 1500, 2500)
    assert t.delta_seconds() == pytest.approx(1000 * 1.0e-6)


def test_controller_default_is_idle():
    c = Controller()
    assert c.buttons == Buttons.NONE
    assert c.analog == (0.0, 0.0)


def _one_second():
    return Time(delta=1_000_000, total=1_000_000, time=0)


def test_update_player_without_input_stays_put():
    t = Transform.from_xyz(1.0, 2.0, 3.0)
    update_player(t, _one_second(), Controller())
    assert t.translation == (1.0, 2.0, 3.0)
    assert t.rotation == (0.0, 0.0, 0.0)


def test_update_player_moves_along_stick():
    t = Transform()
    update_player(t, _one_second(), Controller(analog=(0.0, 1.0)))
    x, y, z = t.translation
    assert x == pytest.approx(0.0)
    assert y == 0.0
    assert z == pytest.approx(PLAYER_SPEED)


def test_update_player_movement_follows_camera_rotation():
    t = Transform(rotation=(0.0, math.pi / 2, 0.0))
    update_player(t, _one_second(), Controller(analog=(1.0, 0.0)))
    x, _, z = t.translation
    assert x == pytest.approx(0.0, abs=1e-9)
    assert z == pytest.approx(PLAYER_SPEED)


def test_update_player_square_turns_left():
    t = Transform()
    time = Time(delta=500_000, total=500_000, time=0)
    update_player(t, time, Controller(buttons=Buttons.SQUARE))
    assert t.rotation[1] == pytest.approx(-CAMERA_ROTATION_SPEED * 0.5)


def test_update_player_square_and_circle_cancel():
    t = Transform()
    update_player(t, _one_second(), Controller(buttons=Buttons.SQUARE | Buttons.CIRCLE))
    assert t.rotation[1] == pytest.approx(0.0)


def test_update_player_wraps_rotation_into_range():
    t = Transform(rotation=(0.0, 3.0, 0.0))
    time = Time(delta=500_000, total=500_000, time=0)
    update_player(t, time, Controller(buttons=Buttons.CIRCLE))
    ry = t.rotation[1]
    assert -math.pi <= ry <= math.pi
    assert math.sin(ry) == pytest.approx(math.sin(3.0 + math.pi / 2))


def test_world_renderables_skip_incomplete_entities():
    world = World()
    world.spawn(Entity(player=True))
    world.spawn(Entity(mesh=Mesh.plane(1.0, 1.0)))
    drawn = world.spawn(Entity(mesh=Mesh.cube(1.0), material=Material()))
    items = list(world.renderables())
    assert len(items) == 1
    assert items[0][0] is drawn.mesh
    assert items[0][1] is drawn.transform


def test_setup_world_spawns_scene(asset_root):
    world = World()
    setup_world(world, asset_root)
    assert len(world.entities) == 5
    assert sum(e.player for e in world.entities) == 1
    items = list(world.renderables())
    assert len(items) == 4
    assert items[0][0] == Mesh.cube_indexed(1.0)
    assert items[0][1].translation == (0.0, 0.0, -2.0)
    assert items[3][0] == Mesh.plane(3.0, 3.0)


def test_setup_world_materials_reference_loaded_textures(asset_root):
    world = World()
    setup_world(world, asset_root)
    materials = [m for _, _, m in world.renderables()]
    brick = world.assets.get("cell_brick.png")
    font = world.assets.get("default_font.png")
    assert all(m.texture() is brick for m in materials[:3])
    assert all(m.swizzle and not m.blend for m in materials[:3])
    assert materials[3].texture() is font
    assert materials[3].blend and not materials[3].swizzle
    assert world.assets.size() == 2


def test_setup_world_textures_survive_drop_unused(asset_root):
    world = World()
    setup_world(world, asset_root)
    world.assets.drop_unused()
    assert world.assets.size() == 2
    counts = world.assets.check_references("cell_brick.png")
    assert counts[1] > 0


def test_setup_world_missing_assets_raise(tmp_path):
    with pytest.raises(AssetError, match="Could not add image"):
        setup_world(World(), tmp_path)