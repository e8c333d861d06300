"""
In-memory single-priority job queue.
"""

import logging
from collections import deque
from dataclasses import replace

from jobqueue.constants import JobStatus
from jobqueue.errors import (
    InvalidInputError,
    JobNotFoundError,
    QueueEmptyError,
    TransitionNotAllowedError,
)
from jobqueue.queue.locking import ReadWriteLock
from jobqueue.queue.registry import JobRegistry
from jobqueue.types.job import Job

logger = logging.getLogger(__name__)


class InMemoryJobQueue:
    """
    FIFO job queue held in process memory.

    Job records live in a JobRegistry; a deque of job IDs preserves arrival
    order. Cancel and conclude only rewrite the registry record. IDs whose
    job is no longer QUEUED stay in the deque until dequeue pops and
    discards them.

    Every mutating operation holds the queue's lock in exclusive mode for its
    whole duration; fetch_job holds it in shared mode.
    """

    def __init__(self, name: str = "default"):
        """
        Initialize the queue.

        Args:
            name: Label used in log records.
        """
        self.name = name
        self._registry = JobRegistry()
        self._pending: deque[int] = deque()
        self._lock = ReadWriteLock()

    def enqueue(self, job: Job) -> int:
        """
        Add a job to the tail of the queue.

        The stored record always starts QUEUED with no consumer. A positive
        ``job.id`` is kept as a pre-assigned ID.

        Args:
            job: The job to add.

        Returns:
            The job ID.
        """
        with self._lock.write():
            job_id = self._registry.create(
                replace(job, status=JobStatus.QUEUED, consumer_id="")
            )
            self._pending.append(job_id)

        logger.info(
            "Enqueued job",
            extra={"queue": self.name, "job_id": job_id, "job_type": str(job.type)},
        )
        return job_id

    def dequeue(self, consumer_id: str) -> Job:
        """
        Claim the oldest QUEUED job for ``consumer_id``.

        IDs popped for jobs that are no longer QUEUED are dropped.

        Args:
            consumer_id: Identity of the claiming consumer.

        Returns:
            The claimed job, IN_PROGRESS and stamped with the consumer ID.

        Raises:
            InvalidInputError: If the consumer ID is empty.
            QueueEmptyError: If no QUEUED job remains.
            JobNotFoundError: If a queued ID has no record.
        """
        if not consumer_id:
            raise InvalidInputError("consumer id must not be empty")

        with self._lock.write():
            while self._pending:
                job_id = self._pending.popleft()
                try:
                    job = self._registry.get(job_id)
                except JobNotFoundError:
                    logger.error(
                        "Queued job has no record",
                        extra={"queue": self.name, "job_id": job_id},
                    )
                    raise

                if not job.is_claimable:
                    continue

                claimed = replace(
                    job, status=JobStatus.IN_PROGRESS, consumer_id=consumer_id
                )
                self._registry.update(claimed)
                break
            else:
                logger.debug("Queue empty", extra={"queue": self.name})
                raise QueueEmptyError()

        logger.info(
            "Dequeued job",
            extra={"queue": self.name, "job_id": claimed.id, "consumer_id": consumer_id},
        )
        return claimed

    def conclude(self, job_id: int, consumer_id: str) -> None:
        """
        Mark an IN_PROGRESS job CONCLUDED.

        Only the consumer that claimed the job may conclude it.

        Raises:
            JobNotFoundError: If the job does not exist.
            TransitionNotAllowedError: If the job is not IN_PROGRESS or is
                held by another consumer.
        """
        with self._lock.write():
            job = self._registry.get(job_id)
            if not job.can_transition_to(JobStatus.CONCLUDED) or not job.is_owned_by(
                consumer_id
            ):
                logger.info(
                    "Conclude rejected",
                    extra={
                        "queue": self.name,
                        "job_id": job_id,
                        "job_status": str(job.status),
                        "consumer_id": consumer_id,
                    },
                )
                raise TransitionNotAllowedError(job_id, job.status, JobStatus.CONCLUDED)

            self._registry.update(replace(job, status=JobStatus.CONCLUDED))

        logger.info(
            "Concluded job",
            extra={"queue": self.name, "job_id": job_id, "consumer_id": consumer_id},
        )

    def cancel(self, job_id: int) -> None:
        """
        Mark a QUEUED or IN_PROGRESS job CANCELLED.

        Raises:
            JobNotFoundError: If the job does not exist.
            TransitionNotAllowedError: If the job already finished.
        """
        with self._lock.write():
            job = self._registry.get(job_id)
            if not job.can_transition_to(JobStatus.CANCELLED):
                logger.info(
                    "Cancel rejected",
                    extra={
                        "queue": self.name,
                        "job_id": job_id,
                        "job_status": str(job.status),
                    },
                )
                raise TransitionNotAllowedError(job_id, job.status, JobStatus.CANCELLED)

            self._registry.update(replace(job, status=JobStatus.CANCELLED))

        logger.info("Cancelled job", extra={"queue": self.name, "job_id": job_id})

    def fetch_job(self, job_id: int) -> Job:
        """
        Get a job by ID.

        Raises:
            JobNotFoundError: If the job does not exist.
        """
        with self._lock.read():
            return self._registry.get(job_id)

    def pending_count(self) -> int:
        """Number of IDs in the ordering sequence, stale entries included."""
        with self._lock.read():
            return len(self._pending)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._registry)
