"""Camera and pointer mapping shared by the viewer and the input handler.

The renderer and the click-to-target mapping must use the same transform,
so both read it from one ViewConfig.
"""

from dataclasses import dataclass

import numpy as np
import transformations

from snake_ik.utils import as_point, axis_rot


@dataclass
class ViewConfig:
    """Orthographic camera looking at the z = 0 plane.

    Attributes:
        left, right, bottom, top: Orthographic extents in world units.
        near, far: Depth range of the clip volume.
        yaw: Camera rotation about Y in degrees.
        pitch: Camera rotation about X in degrees.
    """
    left: float = -10.0
    right: float = 10.0
    bottom: float = -10.0
    top: float = 10.0
    near: float = -10.0
    far: float = 10.0
    yaw: float = 30.0
    pitch: float = -20.0

    @classmethod
    def from_config(cls, cfg) -> "ViewConfig":
        fields = cls.__dataclass_fields__
        return cls(**{k: float(v) for k, v in dict(cfg).items() if k in fields})

    def model_view(self) -> np.ndarray:
        return np.dot(axis_rot(self.yaw, [0, 1, 0]), axis_rot(self.pitch, [1, 0, 0]))

    def projection(self) -> np.ndarray:
        return transformations.clip_matrix(
            self.left, self.right, self.bottom, self.top, self.near, self.far, perspective=False
        )

    def mvp(self) -> np.ndarray:
        return np.dot(self.projection(), self.model_view())

    def canvas_to_world(self, x: float, y: float, width: float, height: float) -> np.ndarray:
        """Map a pixel (origin top-left, y down) onto the z = 0 world plane.

        The pixel's camera ray is intersected with z = 0; when the ray runs
        parallel to the plane the near point is used with z dropped.
        """
        ndc_x = 2.0 * x / width - 1.0
        ndc_y = 1.0 - 2.0 * y / height
        inv = transformations.inverse_matrix(self.mvp())

        near = np.dot(inv, [ndc_x, ndc_y, -1.0, 1.0])
        far = np.dot(inv, [ndc_x, ndc_y, 1.0, 1.0])
        near = near[:3] / near[3]
        far = far[:3] / far[3]

        ray = far - near
        if abs(ray[2]) < 1e-6:
            return np.array([near[0], near[1], 0.0])
        point = near + ray * (-near[2] / ray[2])
        point[2] = 0.0
        return point

    def world_to_canvas(self, point, width: float, height: float) -> tuple[float, float]:
        clip = np.dot(self.mvp(), np.append(as_point(point), 1.0))
        ndc = clip[:3] / clip[3]
        return (ndc[0] + 1.0) * 0.5 * width, (1.0 - ndc[1]) * 0.5 * height
