"""
Priority-routed job queue.

Composes two single-priority queues so that time-critical jobs are always
handed out before ordinary ones.
"""

import logging
import threading
from dataclasses import replace

from jobqueue.constants import JobType
from jobqueue.errors import InvalidInputError, JobNotFoundError, QueueEmptyError
from jobqueue.queue.base import JobQueuer
from jobqueue.queue.memory import InMemoryJobQueue
from jobqueue.types.job import Job

logger = logging.getLogger(__name__)


class PriorityJobQueue:
    """
    Two-level job queue: high priority for TIME_CRITICAL jobs, low priority
    for NOT_TIME_CRITICAL jobs.

    Job IDs are allocated here and passed down pre-assigned, so they are
    unique across both sub-queues. A routing table maps each ID to the
    sub-queue holding it.

    The router lock guards only the ID counter and the routing table. It is
    never held while a sub-queue is called, and no sub-queue lock is held
    while the other sub-queue is called.
    """

    def __init__(
        self,
        high_priority_queue: JobQueuer | None = None,
        low_priority_queue: JobQueuer | None = None,
    ):
        self.high_priority_queue = high_priority_queue or InMemoryJobQueue(name="high")
        self.low_priority_queue = low_priority_queue or InMemoryJobQueue(name="low")
        self._queues_by_type: dict[JobType, JobQueuer] = {
            JobType.TIME_CRITICAL: self.high_priority_queue,
            JobType.NOT_TIME_CRITICAL: self.low_priority_queue,
        }
        self._routes: dict[int, JobQueuer] = {}
        self._max_id = 0
        self._lock = threading.Lock()

    def enqueue(self, job: Job) -> int:
        """
        Add a job to the sub-queue matching its type.

        Raises:
            InvalidInputError: If the job type is not recognized.
        """
        queue = self._queues_by_type.get(job.type)
        if queue is None:
            raise InvalidInputError(f"unrecognized job type: {job.type!r}")

        with self._lock:
            self._max_id += 1
            job_id = self._max_id
            self._routes[job_id] = queue

        try:
            return queue.enqueue(replace(job, id=job_id))
        except Exception:
            with self._lock:
                del self._routes[job_id]
            raise

    def dequeue(self, consumer_id: str) -> Job:
        """
        Claim a job, preferring the high priority queue.

        The low priority queue is only tried when the high priority queue is
        empty. Any other failure of the high priority queue is raised as is.

        Raises:
            InvalidInputError: If the consumer ID is empty.
            QueueEmptyError: If both sub-queues are empty.
        """
        if not consumer_id:
            raise InvalidInputError("consumer id must not be empty")

        try:
            return self.high_priority_queue.dequeue(consumer_id)
        except QueueEmptyError:
            pass
        except Exception:
            logger.exception(
                "Error dequeuing from high priority queue",
                extra={"consumer_id": consumer_id},
            )
            raise

        return self.low_priority_queue.dequeue(consumer_id)

    def conclude(self, job_id: int, consumer_id: str) -> None:
        """
        Conclude a job in whichever sub-queue holds it.

        Raises:
            JobNotFoundError: If the ID was never handed out.
            TransitionNotAllowedError: If the job is not IN_PROGRESS or is
                held by another consumer.
        """
        self._route(job_id).conclude(job_id, consumer_id)

    def cancel(self, job_id: int) -> None:
        """
        Cancel a job in whichever sub-queue holds it.

        Raises:
            JobNotFoundError: If the ID was never handed out.
            TransitionNotAllowedError: If the job already finished.
        """
        self._route(job_id).cancel(job_id)

    def fetch_job(self, job_id: int) -> Job:
        """
        Get a job by ID from whichever sub-queue holds it.

        Raises:
            JobNotFoundError: If the ID was never handed out.
        """
        return self._route(job_id).fetch_job(job_id)

    def pending_counts(self) -> dict[str, int]:
        """Ordering-sequence lengths per sub-queue, stale entries included."""
        return {
            "high": self.high_priority_queue.pending_count(),
            "low": self.low_priority_queue.pending_count(),
        }

    def _route(self, job_id: int) -> JobQueuer:
        with self._lock:
            queue = self._routes.get(job_id)
        if queue is None:
            raise JobNotFoundError(job_id)
        return queue
