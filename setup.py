# read by catkin_python_setup(), metadata comes from package.xml

from setuptools import setup
from catkin_pkg.python_setup import generate_distutils_setup

setup_args = generate_distutils_setup(
    packages=['chatter_broadcaster'],
)

setup(**setup_args)
