"""
The MODEL layer contains pure data structures and time arithmetic.
It has NO knowledge of the GUI (Qt); views and controllers read and
write it through the Store.
"""
from hubclock.model.hub_time import HubTime
from hubclock.model.fields import IntegerInput

__all__ = ["HubTime", "IntegerInput"]
