"""A third-person orbit camera that eases towards its target state."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

_NEAR = 0.1
_FAR = 100.0


@dataclass(eq=False)
class CameraData:
    """View and projection matrices, row-major in the usual math layout."""

    view: np.ndarray
    projection: np.ndarray


def _perspective(fov_y_radians: float, aspect: float, near: float, far: float) -> np.ndarray:
    tan_half = math.tan(fov_y_radians / 2.0)
    projection = np.zeros((4, 4))
    projection[0, 0] = 1.0 / (aspect * tan_half)
    projection[1, 1] = 1.0 / tan_half
    projection[2, 2] = far / (near - far)
    projection[2, 3] = -(far * near) / (far - near)
    projection[3, 2] = -1.0
    return projection


def _wrap_degrees(angle: float) -> float:
    return (angle + 180.0) % 360.0 - 180.0


class ThirdPersonCamera:
    """Orbits a centre point; changes are interpolated from a stored state."""

    def __init__(self, aspect: float = 1.0) -> None:
        self.aspect = aspect
        self.interpolation_factor = 0.0
        self.camera_data: CameraData | None = None
        self._dst_distance = 10.0
        self._dst_center = np.zeros(3)
        self._dst_pitch = 0.0
        self._dst_yaw = 0.0
        self._dst_fov_y = 30.0
        self._src_distance = 10.0
        self._src_center = np.zeros(3)
        self._src_pitch = 0.0
        self._src_yaw = 0.0
        self._src_fov_y = 30.0

    def set_center(self, center) -> None:
        self._dst_center = np.array(center, dtype=float)

    def set_pitch_yaw(self, pitch: float, yaw: float) -> None:
        self._dst_pitch = pitch
        self._dst_yaw = yaw

    def set_distance(self, distance: float) -> None:
        self._dst_distance = distance

    def set_fov_y(self, fov_y: float) -> None:
        self._dst_fov_y = fov_y

    def current_pitch_yaw(self) -> tuple[float, float]:
        """Interpolated pitch and yaw in degrees, taking the short way round."""
        diff_pitch = _wrap_degrees(self._dst_pitch - self._src_pitch)
        diff_yaw = _wrap_degrees(self._dst_yaw - self._src_yaw)
        t = self.interpolation_factor
        return self._src_pitch + diff_pitch * t, self._src_yaw + diff_yaw * t

    def current_center(self) -> np.ndarray:
        return self._src_center + (self._dst_center - self._src_center) * self.interpolation_factor

    def current_distance(self) -> float:
        return self._src_distance + (self._dst_distance - self._src_distance) * self.interpolation_factor

    def current_fov_y(self) -> float:
        return self._src_fov_y + (self._dst_fov_y - self._src_fov_y) * self.interpolation_factor

    def store_current_state(self) -> None:
        """Make the current interpolated state the new starting state."""
        self._src_center = self.current_center()
        self._src_pitch, self._src_yaw = self.current_pitch_yaw()
        self._src_distance = self.current_distance()
        self._src_fov_y = self.current_fov_y()

    def update(self, delta_time: float) -> CameraData:
        """Advance the interpolation and compute the camera matrices."""
        self.interpolation_factor = min(max(self.interpolation_factor + delta_time * 2.0, 0.0), 1.0)
        pitch, yaw = (math.radians(a) for a in self.current_pitch_yaw())
        center = self.current_center()
        distance = self.current_distance()

        back = np.array([math.cos(pitch) * -math.sin(yaw), math.sin(pitch), math.cos(pitch) * math.cos(yaw)])
        right = np.array([math.cos(yaw), 0.0, math.sin(yaw)])
        up = np.cross(back, right)
        eye = center + back * distance

        view = np.eye(4)
        for row, axis in enumerate((right, up, back)):
            view[row, :3] = axis
            view[row, 3] = -float(np.dot(axis, eye))

        projection = _perspective(math.radians(self.current_fov_y()), self.aspect, _NEAR, _FAR)
        self.camera_data = CameraData(view, projection)
        return self.camera_data

    def cursor_move(self, x: float, y: float) -> None:
        """Turn the target orientation by a cursor offset; pitch stays within ±89°."""
        self._dst_yaw += x * 0.1
        self._dst_pitch = min(max(self._dst_pitch + y * 0.1, -89.0), 89.0)