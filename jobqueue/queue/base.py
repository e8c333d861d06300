"""
Queue interface shared by the single-priority and the priority-routed queues.
"""

from typing import Protocol

from jobqueue.types.job import Job


class JobQueuer(Protocol):
    """Operations a job queue exposes to producers and consumers."""

    def enqueue(self, job: Job) -> int: ...

    def dequeue(self, consumer_id: str) -> Job: ...

    def conclude(self, job_id: int, consumer_id: str) -> None: ...

    def cancel(self, job_id: int) -> None: ...

    def fetch_job(self, job_id: int) -> Job: ...

    def pending_count(self) -> int: ...
