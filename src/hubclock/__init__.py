"""Hub Clock: a clock for the time of the world Hub."""
__version__ = "1.0.0"
