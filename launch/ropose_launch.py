import os
from launch import LaunchDescription
from launch_ros.actions import Node
from ament_index_python.packages import get_package_share_directory

def generate_launch_description():
    config_file_path = os.path.join(
        get_package_share_directory('ropose'),
        'cfg',
        'ropose.cfg'
    )

    return LaunchDescription([
        Node(
            package='ropose',
            executable='ropose',
            name='ropose',
            parameters=[{'config_file': config_file_path}]
        )
    ])
