"""lagtransform, Laguerre functions and the Laguerre transform."""
from setuptools import setup

setup()
