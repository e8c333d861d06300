"""
In-Memory Job Dispatch Queue

A job intake and dispatch service: producers submit jobs, consumers claim and
conclude them, and time-critical work is always served before ordinary work.
"""

__version__ = "1.0.0"
