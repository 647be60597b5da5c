import configparser
import threading

import rclpy
import rclpy.node
from geometry_msgs.msg import Pose2D
from tf2_ros import Buffer, TransformListener

from .modules.config_manager import load_config_params
from .modules.loop_driver import PoseBridge
from .modules.rate_pacer import FixedRatePacer
from .modules.tf2_source import Tf2TransformSource
from .modules.transform_sampler import TransformSampler


class RoposeNode(rclpy.node.Node):
    """
    Publishes the odom -> base_link transform as a planar Pose2D.
    """

    def __init__(self, node_name: str):
        super().__init__(node_name)

        # Load config file parameters, defaults when none is given
        self.declare_parameter('config_file', '')
        config_file = self.get_parameter('config_file').value
        config = configparser.ConfigParser()
        if not config_file:
            self.get_logger().info("No config file provided, using defaults.")
        elif not config.read(config_file):
            self.get_logger().error(f"Could not read config file {config_file}, using defaults.")
        else:
            self.get_logger().info(f"Using config file: {config_file}")
        load_config_params(self, config[config.default_section])

        self.pose_pub = self.create_publisher(Pose2D, self.topic, self.queue_depth)

        self.tf_buffer = Buffer()
        self.listener = TransformListener(self.tf_buffer, self)
        sampler = TransformSampler(Tf2TransformSource(self.tf_buffer), self.reference_frame, self.body_frame)
        self.bridge = PoseBridge(sampler,
                                 self.publish_pose,
                                 FixedRatePacer.from_rate(self.rate),
                                 self.heading_mode,
                                 self.get_logger())

        self.get_logger().info(f"Publishing {self.reference_frame} -> {self.body_frame} on {self.topic} "
                               f"at {self.rate} Hz (heading: {self.heading_mode})")

    def publish_pose(self, pose):
        msg = Pose2D()
        msg.x = pose.x
        msg.y = pose.y
        msg.theta = pose.heading
        self.pose_pub.publish(msg)


def main(args=None):

    rclpy.init(args=args)

    node = RoposeNode('ropose')

    # tf2 listener callbacks run on the executor thread, the loop on this one
    spinner = threading.Thread(target=rclpy.spin, args=(node,), daemon=True)
    spinner.start()

    try:
        node.bridge.run(rclpy.ok)
    except KeyboardInterrupt:
        node.get_logger().info('Keyboard interrupt, shutting down.\n')
    finally:
        node.destroy_node()
        if rclpy.ok():
            rclpy.shutdown()

if __name__ == '__main__':
    main()
