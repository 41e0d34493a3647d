import queue
import threading

import rospy
import tf2_ros

from std_msgs.msg import String
from geometry_msgs.msg import TransformStamped
from beginner_tutorials.srv import ModifyString, ModifyStringResponse


class PendingCall:
    def __init__(self, request):
        self.request = request
        self.response = None
        self.done = threading.Event()


class RosTransport:
    """
    rospy side of the talker: chatter publisher, tf broadcaster, modify_string service and loop rate.

    rospy serves every service call on its own thread. Calls are queued here and only
    handled when the loop thread reaches spin_once(), the caller blocks until then.
    """

    def __init__(self, config):

        # Parameters
        self.service_name = config.service

        # Internal variables
        self.rate = rospy.Rate(config.rate)
        self.handler = None
        self.server = None
        self.pending = queue.Queue()

        # Publishers
        self.chatter_pub = rospy.Publisher(config.topic, String, queue_size=config.queue_size)
        self.br = tf2_ros.TransformBroadcaster()

    def register_service(self, handler):
        self.handler = handler
        self.server = rospy.Service(self.service_name, ModifyString, self.modify_string_callback)

    def modify_string_callback(self, req):
        call = PendingCall(req)
        self.pending.put(call)

        while not call.done.wait(0.1):
            if rospy.is_shutdown():
                raise rospy.ServiceException("%s - node shut down before the call was handled" % self.service_name)

        return ModifyStringResponse(call.response.output)

    def spin_once(self):
        # only the calls that arrived before this point
        for _ in range(self.pending.qsize()):
            call = self.pending.get_nowait()
            call.response = self.handler.handle(call.request)
            call.done.set()

    def is_alive(self):
        return not rospy.is_shutdown()

    def now(self):
        return rospy.Time.now()

    def publish(self, text):
        self.chatter_pub.publish(String(data=text))

    def send_transform(self, sample):
        t = TransformStamped()

        t.header.stamp = sample.stamp
        t.header.frame_id = sample.frame_id
        t.child_frame_id = sample.child_frame_id
        t.transform.translation.x, t.transform.translation.y, t.transform.translation.z = sample.translation
        (t.transform.rotation.x, t.transform.rotation.y,
         t.transform.rotation.z, t.transform.rotation.w) = sample.rotation

        self.br.sendTransform(t)

    def sleep(self):
        try:
            self.rate.sleep()
        except rospy.ROSInterruptException:
            # shutdown while sleeping, is_alive() stops the loop on the next check
            return
