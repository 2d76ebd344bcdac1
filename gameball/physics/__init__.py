"""Rigid bodies, collision detection and response, and the physics world."""