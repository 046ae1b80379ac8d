import argparse

import numpy as np
import pyvista as pv

from snake_ik.config_loader import build_solver, load_chain_config, load_config
from snake_ik.fabrik import FABRIK
from snake_ik.logger import get_logger, set_global_level
from snake_ik.utils import as_point
from snake_visible.view import ViewConfig

logger = get_logger("visible")


class BoneVisible:
    def __init__(self, ik_solver: FABRIK, view: ViewConfig, target=(5, 5, 0), window_size=(800, 800),
                 frame_ms: int = 16, joint_radius: float = 0.2, target_radius: float = 0.15, key_step: float = 0.25):
        self.chain = ik_solver.chain
        self.ik_solver = ik_solver
        self.view = view
        self.target = as_point(target)
        self.window_size = list(window_size)
        self.frame_ms = frame_ms
        self.joint_radius = joint_radius
        self.target_radius = target_radius
        self.key_step = key_step
        self.joint_cloud = None
        self.links = None
        self.target_cloud = None
        self.plotter = None
        self.init_vista()

    def init_vista(self):
        plotter = pv.Plotter(window_size=self.window_size)
        self.plotter = plotter
        plotter.set_background("white")
        joints = self.chain.joints.copy()
        self.joint_cloud = pv.PolyData(joints)
        self.links = pv.lines_from_points(joints)
        self.target_cloud = pv.PolyData(self.target[None, :].copy())
        plotter.add_mesh(self.links, color="darkgreen", line_width=3)
        plotter.add_mesh(self.joint_cloud, color=[0.1, 0.7, 0.2], render_points_as_spheres=True,
                         point_size=self.point_size(self.joint_radius))
        plotter.add_mesh(self.target_cloud, color=[1.0, 0.2, 0.2], render_points_as_spheres=True,
                         point_size=self.point_size(self.target_radius))
        self.set_camera()
        self.set_shortcuts()
        plotter.track_click_position(self.on_click, side="left", viewport=True)
        plotter.add_timer_event(max_steps=2 ** 31 - 1, duration=self.frame_ms, callback=self.update)

    def point_size(self, radius):
        # 世界尺寸换算成像素
        return max(2.0, 2 * radius * self.window_size[1] / (self.view.top - self.view.bottom))

    def set_camera(self):
        # 与 canvas_to_world 用同一个 model_view
        view = self.view
        inv_rot = view.model_view()[:3, :3].T
        center = np.array([(view.left + view.right) / 2, (view.bottom + view.top) / 2, 0.0])
        depth = view.far - view.near
        camera = self.plotter.camera
        self.plotter.enable_parallel_projection()
        camera.focal_point = np.dot(inv_rot, center)
        camera.position = np.dot(inv_rot, center + np.array([0.0, 0.0, depth]))
        camera.up = np.dot(inv_rot, [0.0, 1.0, 0.0])
        camera.parallel_scale = (view.top - view.bottom) / 2
        camera.clipping_range = (0.01, 2 * depth)

    def set_shortcuts(self):
        self.plotter.add_key_event("1", self.move_target("z"))
        self.plotter.add_key_event("2", self.move_target("z", reverse=True))
        self.plotter.add_key_event("4", self.move_target("x"))
        self.plotter.add_key_event("5", self.move_target("x", reverse=True))
        self.plotter.add_key_event("7", self.move_target("y"))
        self.plotter.add_key_event("8", self.move_target("y", reverse=True))

    def on_click(self, position):
        # viewport 坐标 [0, 1], 原点在左下
        nx, ny = position[0], position[1]
        world = self.view.canvas_to_world(nx, 1.0 - ny, 1.0, 1.0)
        logger.info(f"world pos: {np.round(world, 3).tolist()}")
        self.target[:] = world

    def update(self, step=None):
        self.ik_solver.solve(self.target)
        joints = self.chain.joints.copy()
        self.joint_cloud.points = joints
        self.links.points = joints
        self.target_cloud.points = self.target[None, :].copy()
        self.plotter.render()

    def move_target(self, axis="x", reverse=False):
        xyz = ["x", "y", "z"]
        step = self.key_step * -1 if reverse else self.key_step

        def handle():
            self.target[xyz.index(axis)] += step

        return handle

    def visible(self):
        self.plotter.show(auto_close=True)


def main(argv=None):
    parser = argparse.ArgumentParser(description="FABRIK snake arm following a clicked target")
    parser.add_argument("chain", nargs="?", default="snake", help="chain variant from the config (snake, arm)")
    args = parser.parse_args(argv)

    cfg = load_config()
    set_global_level(cfg.logging.level)
    solver = build_solver(load_chain_config(args.chain))
    viewer_cfg = cfg.viewer
    BoneVisible(
        solver,
        ViewConfig.from_config(cfg.view),
        target=list(cfg.target),
        window_size=list(viewer_cfg.window_size),
        frame_ms=viewer_cfg.frame_ms,
        joint_radius=viewer_cfg.joint_radius,
        target_radius=viewer_cfg.target_radius,
        key_step=viewer_cfg.key_step,
    ).visible()


if __name__ == "__main__":
    main()
