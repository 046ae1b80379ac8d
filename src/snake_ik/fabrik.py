import math

import numpy as np

from snake_ik.ik_chain import IKChain
from snake_ik.ik_solver import IKSolver, SolveReport
from snake_ik.logger import get_logger
from snake_ik.utils import EPS, as_point, distance, mix, perpendicular, vector_norm

logger = get_logger("fabrik")

BEND_ANGLE = math.radians(30)


class FABRIK(IKSolver):
    def __init__(self, chain: IKChain, tolerance: float = 0.05, max_iter: int = 20):
        super(FABRIK, self).__init__(chain, tolerance, max_iter)
        self.chain_length = self.chain.total_length
        self.chain_size = len(self.chain)
        logger.info(f"FABRIK ready: tolerance={self.tolerance}, max_iter={self.max_iter}")

    def solve(self, target) -> SolveReport:
        """

        :param target: position
        :return: SolveReport, 调用方可以忽略
        """
        target = as_point(target)
        joints = self.chain.joints
        base = joints[0].copy()
        if distance(base, target) > self.chain_length:
            self.stretch(base, target)
            error = distance(joints[-1], target)
            logger.debug(f"target out of reach, stretched; error={error:.4f}")
            return SolveReport(reachable=False, converged=error < self.tolerance, iterations=0, error=error)

        if distance(joints[-1], target) >= self.tolerance:
            axis = self.line_axis(target)
            if axis is not None:
                # 关节和目标共线时前后推都不会离开这条线
                self.bend(base, axis)
                logger.debug("chain and target on one line, bent off it")

        iterations = 0
        while iterations < self.max_iter:
            self.forward(target)
            self.backward(base)
            iterations += 1
            error = distance(joints[-1], target)
            if error < self.tolerance:
                break
        converged = error < self.tolerance
        if not converged:
            logger.debug(f"iteration cap hit after {iterations}, error={error:.4f}")
        else:
            logger.debug(f"converged in {iterations} iterations, error={error:.4f}")
        return SolveReport(reachable=True, converged=converged, iterations=iterations, error=error)

    def stretch(self, base: np.ndarray, target: np.ndarray):
        joints = self.chain.joints
        direction = vector_norm(target - base)
        for i in range(1, self.chain_size):
            joints[i] = base + direction * (i * self.chain.segment_length)

    def line_axis(self, target: np.ndarray):
        """
        所有关节和目标都在一条直线上时返回该直线的单位方向, 否则 None.
        关节全部重合时退回链的初始方向
        """
        offsets = np.vstack([self.chain.joints, target]) - self.chain.joints[0]
        lengths = np.linalg.norm(offsets, axis=1)
        far = int(np.argmax(lengths))
        if lengths[far] < EPS:
            return self.chain.init_direction
        axis = offsets[far] / lengths[far]
        off_line = np.linalg.norm(np.cross(offsets, axis), axis=1)
        if np.all(off_line < EPS * max(1.0, lengths[far])):
            return axis
        return None

    def bend(self, base: np.ndarray, axis: np.ndarray):
        direction = math.cos(BEND_ANGLE) * axis + math.sin(BEND_ANGLE) * perpendicular(axis)
        steps = np.arange(1, self.chain_size)[:, None] * self.chain.segment_length
        self.chain.joints[1:] = base + steps * direction

    def forward(self, target: np.ndarray):
        # 末端钉在目标上, 往锚点方向推
        joints = self.chain.joints
        length = self.chain.segment_length
        joints[-1] = target
        for i in range(self.chain_size - 2, -1, -1):
            r = distance(joints[i + 1], joints[i])
            if r < EPS:
                hint = joints[i + 1] - joints[i + 2] if i + 2 < self.chain_size else -self.chain.init_direction
                joints[i] = joints[i + 1] + perpendicular(hint) * length
            else:
                joints[i] = mix(joints[i + 1], joints[i], length / r)

    def backward(self, base: np.ndarray):
        joints = self.chain.joints
        length = self.chain.segment_length
        joints[0] = base
        for i in range(self.chain_size - 1):
            r = distance(joints[i + 1], joints[i])
            if r < EPS:
                hint = joints[i] - joints[i - 1] if i > 0 else self.chain.init_direction
                joints[i + 1] = joints[i] + perpendicular(hint) * length
            else:
                joints[i + 1] = mix(joints[i], joints[i + 1], length / r)
