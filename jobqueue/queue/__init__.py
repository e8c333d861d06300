"""
Queue module.
Contains the job registry, the single-priority queue and the priority router.
"""

from jobqueue.queue.base import JobQueuer
from jobqueue.queue.memory import InMemoryJobQueue
from jobqueue.queue.priority import PriorityJobQueue
from jobqueue.queue.registry import JobRegistry

__all__ = [
    "JobQueuer",
    "JobRegistry",
    "InMemoryJobQueue",
    "PriorityJobQueue",
]
