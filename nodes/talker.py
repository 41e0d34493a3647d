#!/usr/bin/env python3
import sys
import rospy

from chatter_broadcaster import SharedTextState, ModifyStringHandler, BroadcastLoop, load_config
from chatter_broadcaster.ros_transport import RosTransport


class Talker:
    def __init__(self):

        # Parameters
        self.config = load_config(rospy.myargv(argv=sys.argv)[1:], rospy.get_param)

        # Internal variables
        self.state = SharedTextState(self.config.message)
        self.transport = RosTransport(self.config)

        # Services
        self.transport.register_service(ModifyStringHandler(self.state))

        self.loop = BroadcastLoop(self.state, self.transport, self.config.rate,
                                  self.config.frame_id, self.config.child_frame_id)
        rospy.loginfo("Setting publishing rate")

    def run(self):
        self.loop.run()
        return 0


if __name__ == '__main__':
    rospy.init_node('talker')
    node = Talker()
    sys.exit(node.run())
