from setuptools import setup, find_packages
import os
from glob import glob

package_name = 'beginner_tutorials'

setup(
    name=package_name,
    version='1.0.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        (os.path.join('share', package_name, 'launch'),
            glob('launch/*.py')),
    ],
    install_requires=['setuptools'],
    extras_require={
        'test': ['pytest'],
    },
    tests_require=['pytest'],
    zip_safe=True,
    maintainer='Aman Virmani',
    maintainer_email='aman@example.com',
    description='Talker with runtime-modifiable message and world->talk transform',
    license='MIT',
    entry_points={
        'console_scripts': [
            'talker = beginner_tutorials.talker_node:main',
        ],
    },
)
