from setuptools import find_packages, setup
from glob import glob
import os

package_name = 'ropose'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    data_files=[
        # Required by ament to find the package
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),

        # Install the package.xml file
        ('share/' + package_name, ['package.xml']),

        # Install the launch files
        (os.path.join('share', package_name, 'launch'), glob('launch/*.py')),

        # Install the config files
        (os.path.join('share', package_name, 'cfg'), glob('cfg/*.cfg')),
    ],
    install_requires=['setuptools', 'numpy', 'tf-transformations'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='ropose',
    maintainer_email='ropose@todo.todo',
    description='Publishes the odom -> base_link transform as a planar Pose2D on /ropose',
    license='TODO: License declaration',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            "ropose = ropose.ropose_node:main",
        ],
    },
)
