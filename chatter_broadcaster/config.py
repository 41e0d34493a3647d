import re
import logging
from dataclasses import dataclass

from chatter_broadcaster.state import DEFAULT_BASE_STRING
from chatter_broadcaster.broadcaster import PARENT_FRAME, CHILD_FRAME

# logger behind rospy.loginfo/logwarn/..., forwarded to /rosout once init_node has run
logger = logging.getLogger("rosout")

DEFAULT_RATE = 10
MIN_RATE = 1
DEFAULT_QUEUE_SIZE = 1000

# leading integer, read the way atoi does
LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def parse_rate(args):
    """
    Publishing rate from the positional command line arguments
    :param args: arguments left after the program name and ROS remappings
    :return: rate in Hz, always > 0
    """

    if len(args) != 1:
        logger.warning("Using default publishing rate")
        return DEFAULT_RATE

    match = LEADING_INT.match(args[0])
    # no leading digits counts as 0
    rate = int(match.group(1)) if match else 0
    logger.debug("Input rate is: %d", rate)

    if rate <= 0:
        logger.error("Invalid rate value")
        return MIN_RATE

    return rate


@dataclass(frozen=True)
class TalkerConfig:
    rate: int = DEFAULT_RATE
    message: str = DEFAULT_BASE_STRING
    queue_size: int = DEFAULT_QUEUE_SIZE
    frame_id: str = PARENT_FRAME
    child_frame_id: str = CHILD_FRAME
    topic: str = "chatter"
    service: str = "modify_string"


def load_config(args, get_param):
    """
    :param args: positional command line arguments, see parse_rate
    :param get_param: callable(name, default), rospy.get_param in the node
    """

    return TalkerConfig(
        rate=parse_rate(args),
        message=get_param("~message", DEFAULT_BASE_STRING),
        queue_size=int(get_param("~queue_size", DEFAULT_QUEUE_SIZE)),
        frame_id=get_param("~frame_id", PARENT_FRAME),
        child_frame_id=get_param("~child_frame_id", CHILD_FRAME),
    )
