# talker/ros/__init__.py
from .node import TalkerNode
from .lifecycle import init_ros, start_ros_in_thread, shutdown_ros
