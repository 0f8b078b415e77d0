"""
CLI argument handling. ROS-argument stripping is rclpy's, so this needs a
sourced ROS 2 install and is skipped without one.
"""
import pytest

pytest.importorskip("rclpy")
pytest.importorskip("tf2_ros")
pytest.importorskip("talker_interfaces")

from talker.main import frequency_token  # noqa: E402


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["talker"], None),
        (["talker", "25"], "25"),
        (["talker", "-5"], "-5"),
        (["talker", "--ros-args", "--log-level", "debug", "--", "7"], "7"),
        (["talker", "15", "--ros-args", "-r", "__node:=other"], "15"),
        (["talker", "--ros-args", "-r", "__node:=other"], None),
    ],
)
def test_frequency_token(argv, expected):
    assert frequency_token(argv) == expected
