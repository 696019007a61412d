"""Building blocks for device-control software: codes, CRCs, buffers, events, threads, timers, config files, GPS time and file helpers."""

__version__ = "1.0.0"