"""Helpers that queue deferred world changes as events."""

from __future__ import annotations

from gameball.logic.world import World


def event_remove_player(world: World, player_id: int) -> None:
    world.push_event(lambda: world.remove_player(player_id))


def event_remove_unit(world: World, unit_id: int) -> None:
    world.push_event(lambda: world.remove_unit(unit_id))


def event_remove_obstacle(world: World, obstacle_id: int) -> None:
    world.push_event(lambda: world.remove_obstacle(obstacle_id))


def event_create_player(world: World) -> None:
    world.push_event(world.create_player)


def event_create_unit(world: World, unit_type, player_id: int, *args) -> None:
    world.push_event(lambda: world.create_unit(unit_type, player_id, *args))


def event_create_obstacle(world: World, obstacle_type, *args) -> None:
    world.push_event(lambda: world.create_obstacle(obstacle_type, *args))