"""
freeslots - find shared free time between two participants' calendars.
"""

__version__ = "0.1.0"
