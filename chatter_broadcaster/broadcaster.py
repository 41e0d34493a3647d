import logging
from collections import namedtuple

from scipy.spatial.transform import Rotation

# logger behind rospy.loginfo/logwarn/..., forwarded to /rosout once init_node has run
logger = logging.getLogger("rosout")

TRANSLATION = (1.0, 2.0, 3.0)
PI = 3.14
# roll, pitch, yaw in radians
ORIENTATION_RPY = (PI, PI / 2, 2.0)

PARENT_FRAME = "world"
CHILD_FRAME = "talk"

TransformSample = namedtuple("TransformSample",
                             ["translation", "rotation", "stamp", "frame_id", "child_frame_id"])


def compute_transform(stamp, frame_id=PARENT_FRAME, child_frame_id=CHILD_FRAME,
                      translation=TRANSLATION, rpy=ORIENTATION_RPY):
    """
    Build the fixed transform sent on every tick
    :param stamp: time of the sample in seconds
    :param frame_id: parent frame
    :param child_frame_id: child frame
    :param translation: x, y, z offset of the child frame
    :param rpy: roll, pitch, yaw about the static x, y, z axes
    :return: TransformSample with the rotation as an (x, y, z, w) quaternion
    """

    x, y, z, w = Rotation.from_euler('xyz', rpy).as_quat()
    return TransformSample(tuple(float(v) for v in translation),
                           (float(x), float(y), float(z), float(w)),
                           stamp, frame_id, child_frame_id)


class BroadcastLoop:
    """
    Publishes `<base text><count>` on chatter and the world -> talk transform once per tick.

    The transport provides is_alive(), publish(text), send_transform(sample), now(),
    spin_once() and sleep(). It owns the rate limiter, so sleep() returns at the next
    period boundary of the configured rate.
    """

    def __init__(self, state, transport, rate, frame_id=PARENT_FRAME, child_frame_id=CHILD_FRAME):

        # Parameters
        self.rate = rate
        self.frame_id = frame_id
        self.child_frame_id = child_frame_id

        # Internal variables
        self.state = state
        self.transport = transport
        self.count = 0
        self.running = False

    def tick(self):
        text = self.state.get() + str(self.count)

        logger.info(text)
        logger.debug("Input rate is: %d", self.rate)

        self.transport.publish(text)

        sample = compute_transform(self.transport.now(), self.frame_id, self.child_frame_id)
        self.transport.send_transform(sample)

        # pending modify_string calls become visible from the next tick on
        self.transport.spin_once()

        self.transport.sleep()
        self.count += 1

    def run(self):
        self.running = True
        ticks = 0
        while self.transport.is_alive():
            self.tick()
            ticks += 1

        self.running = False
        logger.critical("ROS node is not running")
        return ticks
