"""
talker [frequency]

Publishes "<count> <text>" on chatter and the world -> talk transform at
`frequency` Hz (default 10) until shut down. The text can be changed through
the modifyTalkerMessage service (ROS) or POST /api/v1/modifyTalkerMessage.
"""
import logging
import sys
import threading
from typing import List, Optional

import rclpy
from rclpy.utilities import remove_ros_args

from .app import create_app, start_api_in_thread
from .core import SharedState, resolve_rate
from .emitter import Emitter
from .ros import TalkerNode, init_ros, shutdown_ros, start_ros_in_thread
from . import config as C


def frequency_token(argv: List[str]) -> Optional[str]:
    """First positional argument after ROS args are stripped, if any."""
    args = remove_ros_args(args=argv)[1:]
    return args[0] if args else None


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] [%(name)s]: %(message)s")

    init_ros(argv)
    shared = SharedState()
    node = TalkerNode(shared)
    rate = resolve_rate(frequency_token(argv), logger=node.get_logger())

    stop = threading.Event()
    emitter = Emitter(shared, node, rate, logger=node.get_logger(), clock=node.now_s)

    spin_thread = start_ros_in_thread(node, stop)
    if C.API_ENABLED:
        start_api_in_thread(create_app(shared, emitter))

    try:
        emitter.run(stop, ok=rclpy.ok)
    except KeyboardInterrupt:
        pass
    finally:
        stop.set()
        shutdown_ros(node, spin_thread)
    return 0


if __name__ == "__main__":
    sys.exit(main())
