"""AIOne Aircraft Tracker: aircraft records and presentation scheduling behind JWT auth."""

__version__ = "0.1.0"
