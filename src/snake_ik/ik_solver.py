from dataclasses import dataclass

from snake_ik.ik_chain import IKChain


@dataclass
class SolveReport:
    """Diagnostics from one solve call.

    Attributes:
        reachable: Whether the target was within the chain's reach.
        converged: Whether the tip ended within tolerance of the target, in
            either branch (a target just out of reach can still be met).
        iterations: Forward/backward iterations performed (0 when unreachable).
        error: Tip-to-target distance after the call.
    """
    reachable: bool
    converged: bool
    iterations: int
    error: float


class IKSolver:
    def __init__(self, chain: IKChain, tolerance: float = 0.05, max_iter: int = 20):
        if tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {tolerance}")
        if max_iter <= 0:
            raise ValueError(f"max_iter must be positive, got {max_iter}")
        self.chain = chain  # ik链
        self.tolerance = tolerance  # 容忍度  距离接近范围内就认为到达目标
        self.max_iter = int(max_iter)  # 最大迭代次数

    def solve(self, target) -> SolveReport:
        raise NotImplementedError
