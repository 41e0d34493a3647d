import logging
from dataclasses import dataclass

# logger behind rospy.loginfo/logwarn/..., forwarded to /rosout once init_node has run
logger = logging.getLogger("rosout")


@dataclass
class ModifyStringRequest:
    input: str = ""


@dataclass
class ModifyStringResponse:
    output: str = ""


class ModifyStringHandler:
    def __init__(self, state):
        self.state = state

    def handle(self, req):
        """
        Replace the base text and echo it back to the caller.
        :param req: request with an `input` field, any string is accepted
        :return: ModifyStringResponse with `output` equal to the request input
        """
        self.state.set(req.input)
        resp = ModifyStringResponse(output=req.input)

        # Display warning when string is updated using the service
        logger.warning("The base output string has been updated")
        return resp

    __call__ = handle
