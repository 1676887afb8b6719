"""
Talker Launch File

Starts the talker node. The publish rate comes from the `frequency`
argument, which defaults to $TALKER_FREQUENCY (or 10 Hz).
Non-positive values fall back to 10 Hz inside the node.
"""
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration, EnvironmentVariable
from launch_ros.actions import Node


def generate_launch_description():
    return LaunchDescription([
        DeclareLaunchArgument(
            'frequency',
            default_value=EnvironmentVariable('TALKER_FREQUENCY', default_value='10'),
            description='Talker publish frequency in Hz'
        ),
        DeclareLaunchArgument(
            'message',
            default_value='Written By Aman Virmani',
            description='Initial message published on /chatter'
        ),

        Node(
            package='beginner_tutorials',
            executable='talker',
            name='talker',
            output='screen',
            arguments=[LaunchConfiguration('frequency')],
            parameters=[{
                'message': LaunchConfiguration('message'),
            }]
        ),
    ])
