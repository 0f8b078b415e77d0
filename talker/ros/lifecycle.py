"""
ROS lifecycle management - init, background executor thread, shutdown.
"""
import threading

import rclpy
from rclpy.executors import ExternalShutdownException, SingleThreadedExecutor

from .node import TalkerNode


def init_ros(args=None):
    """rclpy.init() that tolerates being called twice."""
    try:
        rclpy.init(args=args)
    except RuntimeError as e:
        if "already been called" not in str(e):
            raise


def start_ros_in_thread(node: TalkerNode, stop: threading.Event) -> threading.Thread:
    """
    Spin `node` on a daemon thread so service requests are handled while the
    main thread runs the emit loop. `stop` is set when the ROS context shuts
    down (e.g. Ctrl-C), which wakes the emit loop immediately.
    """
    rclpy.get_default_context().on_shutdown(stop.set)

    ex = SingleThreadedExecutor()
    ex.add_node(node)
    node.get_logger().info(f"[{node.get_name()}] ROS thread started.")

    def spin():
        try:
            ex.spin()
        except ExternalShutdownException:
            pass
        finally:
            ex.shutdown()
            node.get_logger().info(f"[{node.get_name()}] Executor shutdown.")
            stop.set()

    th = threading.Thread(target=spin, daemon=True)
    th.start()
    return th


def shutdown_ros(node: TalkerNode, spin_thread: threading.Thread = None, timeout: float = 2.0):
    """Shut the context down, let the executor thread exit, then drop the node."""
    if rclpy.ok():
        rclpy.shutdown()
    if spin_thread is not None:
        spin_thread.join(timeout)
    node.destroy_node()
