"""
ROS-side adapter for the talker.

- Advertises `chatter` (std_msgs/String) and broadcasts world -> talk on /tf.
- Serves `modifyTalkerMessage` and forwards each request to the modify service.
- Acts as the Emitter's transport: publish() / broadcast_transform().

Keep this thin: messages in/out are converted to the pydantic models and the
actual behaviour lives in talker.services / talker.emitter.
"""
from functools import partial

from rclpy.node import Node

from builtin_interfaces.msg import Time as RosTime
from geometry_msgs.msg import TransformStamped
from std_msgs.msg import String as StringMsg
from tf2_ros import TransformBroadcaster
from talker_interfaces.srv import ModifyTalkerString

from ..core import SharedState
from ..models import ModifyTalkerRequest, StatusRecord, TransformSnapshot
from ..services.talker_service import modify_talker_message_service
from .. import config as C


def _time_to_msg(t: float) -> RosTime:
    """Convert float seconds to ROS Time message."""
    msg = RosTime()
    msg.sec = int(t)
    msg.nanosec = int((t - int(t)) * 1e9)
    return msg


class TalkerNode(Node):
    """
    One ROS2 node that:
    - publishes chatter strings,
    - broadcasts the constant world -> talk transform,
    - serves modifyTalkerMessage against the shared text.

    It holds a reference to the SharedState, never a copy.
    """

    def __init__(self, shared: SharedState):
        super().__init__(C.NODE_NAME)
        self.shared = shared

        self.pub = self.create_publisher(StringMsg, C.CHATTER_TOPIC, C.CHATTER_QUEUE_DEPTH)
        self.tf_broadcaster = TransformBroadcaster(self)

        self._modify = partial(modify_talker_message_service, shared, logger=self.get_logger())
        self.srv = self.create_service(ModifyTalkerString, C.SERVICE_NAME, self.on_modify)

        self.get_logger().info(
            f"[{C.NODE_NAME}] chatter -> {C.CHATTER_TOPIC}, service {C.SERVICE_NAME}"
        )

    def now_s(self) -> float:
        return self.get_clock().now().nanoseconds * 1e-9

    # ======================================================================
    # SERVICE
    # ======================================================================

    def on_modify(self, request, response):
        res = self._modify(ModifyTalkerRequest(inputStr=request.input_str))
        response.modified_str = res.modifiedStr
        return response

    # ======================================================================
    # TRANSPORT (called from the emit loop)
    # ======================================================================

    def publish(self, record: StatusRecord):
        msg = StringMsg()
        msg.data = record.data
        self.pub.publish(msg)

    def broadcast_transform(self, snap: TransformSnapshot):
        t = TransformStamped()
        t.header.stamp = _time_to_msg(snap.stamp)
        t.header.frame_id = snap.parent_frame
        t.child_frame_id = snap.child_frame
        t.transform.translation.x, t.transform.translation.y, t.transform.translation.z = snap.translation
        (
            t.transform.rotation.x,
            t.transform.rotation.y,
            t.transform.rotation.z,
            t.transform.rotation.w,
        ) = snap.rotation
        self.tf_broadcaster.sendTransform(t)
