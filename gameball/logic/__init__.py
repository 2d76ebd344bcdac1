"""Game world, players, units, obstacles, the block obstacle and deferred events."""