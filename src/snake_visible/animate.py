import math

import numpy as np
from tqdm import tqdm

from snake_ik.ik_solver import IKSolver, SolveReport
from snake_ik.logger import get_logger
from snake_ik.utils import as_point

logger = get_logger("animate")


def orbit_targets(center, radius: float, frames: int):
    """
    目标点沿 z=0 平面上的圆周运动
    """
    center = as_point(center)
    for i in range(frames):
        theta = 2 * math.pi * i / frames
        yield center + radius * np.array([math.cos(theta), math.sin(theta), 0.0])


def follow(solver: IKSolver, targets, progress: bool = True) -> list[SolveReport]:
    reports = []
    with tqdm(targets, ncols=80, disable=not progress) as it:
        for frame, target in enumerate(it):
            report = solver.solve(target)
            reports.append(report)
            it.set_postfix(frame=frame, error=report.error)
    missed = sum(1 for r in reports if not r.converged)
    logger.info(f"{len(reports)} frames solved, {missed} not within tolerance")
    return reports
