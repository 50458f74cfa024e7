"""
openray: a CPU path tracer with a bounding volume hierarchy, a small
geometry/material/texture kit and Russian-roulette path termination.
"""
__version__ = "0.1.0"
