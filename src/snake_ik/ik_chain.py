import numpy as np

from snake_ik.logger import get_logger
from snake_ik.utils import as_point, vector_norm

logger = get_logger("ik_chain")


class IKChain:
    """
    等长关节链, joints[0] 是锚点(base), joints[-1] 是末端(tip)
    """

    def __init__(self, num_joints: int, segment_length: float, anchor=(0, 0, 0), direction=(1, 0, 0)):
        if num_joints < 2:
            raise ValueError(f"a chain needs at least 2 joints, got {num_joints}")
        if segment_length <= 0:
            raise ValueError(f"segment_length must be positive, got {segment_length}")
        direction = as_point(direction)
        if np.linalg.norm(direction) == 0:
            raise ValueError("direction must be a non-zero vector")
        self.num_joints = int(num_joints)
        self.segment_length = float(segment_length)
        self.init_anchor = as_point(anchor)
        self.init_direction = vector_norm(direction)
        self.joints = np.zeros((self.num_joints, 3))
        self.reset()
        logger.info(
            f"chain: {self.num_joints} joints, segment {self.segment_length}, "
            f"reach {self.total_length:.3f}"
        )

    def reset(self):
        """
        关节沿直线从锚点等距排开
        """
        steps = np.arange(self.num_joints)[:, None] * self.segment_length
        self.joints[:] = self.init_anchor + steps * self.init_direction

    @property
    def anchor(self) -> np.ndarray:
        return self.joints[0]

    @anchor.setter
    def anchor(self, position):
        self.joints[0] = as_point(position)

    @property
    def tip(self) -> np.ndarray:
        return self.joints[-1]

    @property
    def total_length(self) -> float:
        return self.segment_length * (self.num_joints - 1)

    def segment_lengths(self) -> np.ndarray:
        return np.linalg.norm(np.diff(self.joints, axis=0), axis=1)

    def is_valid(self, eps: float = 1e-6) -> bool:
        return bool(np.all(np.abs(self.segment_lengths() - self.segment_length) <= eps))

    def __len__(self):
        return self.num_joints
