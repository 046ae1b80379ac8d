import math

import numpy as np
import transformations

EPS = 1e-9


def as_point(p) -> np.ndarray:
    point = np.asarray(p, dtype=np.float64).reshape(-1)
    if point.shape[0] == 2:
        point = np.append(point, 0.0)
    if point.shape[0] != 3:
        raise ValueError(f"expected a 2D or 3D point, got shape {np.shape(p)}")
    return point


def vector_norm(vector: np.ndarray):
    return vector / (np.linalg.norm(vector) + 1e-7)


def distance(a, b) -> float:
    return float(np.linalg.norm(np.asarray(a) - np.asarray(b)))


def lerp(a, b, t: float) -> np.ndarray:
    """
    同 glsl 的 mix, t 可以大于 1
    """
    return a + t * (b - a)


mix = lerp


def axis_rot(angle_deg: float, axis) -> np.ndarray:
    return transformations.rotation_matrix(math.radians(angle_deg), axis)


def perpendicular(vector: np.ndarray) -> np.ndarray:
    """
    固定取法的单位垂线: 优先在 z=0 平面内, 与 z 轴平行时改用 x 轴
    """
    normal = np.cross(vector, [0.0, 0.0, 1.0])
    if np.linalg.norm(normal) < EPS:
        normal = np.cross(vector, [1.0, 0.0, 0.0])
    return vector_norm(normal)
