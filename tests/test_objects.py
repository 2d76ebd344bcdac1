from gameball.logic.objects import GameObject, Obstacle, Unit
from gameball.logic.world import World


def test_object_registration():
    world = World()
    obj = GameObject(world)
    assert world.get_object(obj.object_id) is obj
    assert obj.actor_initialize is True


def test_object_destroy():
    world = World()
    obj = GameObject(world)
    obj.destroy()
    assert world.get_object(obj.object_id) is None


def test_unit_registers_in_both_maps():
    world = World()
    unit = Unit(world, 3)
    assert unit.player_id == 3
    assert world.get_unit(unit.unit_id) is unit
    assert world.get_object(unit.object_id) is unit


def test_unit_destroy_removes_both():
    world = World()
    unit = Unit(world, 1)
    unit.destroy()
    assert world.get_unit(unit.unit_id) is None
    assert world.get_object(unit.object_id) is None


def test_obstacle_registers_and_destroys():
    world = World()
    obstacle = Obstacle(world)
    assert world.get_obstacle(obstacle.obstacle_id) is obstacle
    assert world.get_object(obstacle.object_id) is obstacle
    obstacle.destroy()
    assert world.get_obstacle(obstacle.obstacle_id) is None
    assert world.get_object(obstacle.object_id) is None


def test_object_ids_shared_unit_ids_separate():
    world = World()
    unit = Unit(world, 1)
    obstacle = Obstacle(world)
    assert obstacle.object_id == unit.object_id + 1
    assert unit.unit_id == obstacle.obstacle_id