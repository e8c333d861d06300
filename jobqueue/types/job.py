"""
Job-related type definitions for internal use.
"""

from dataclasses import dataclass

from jobqueue.constants import JOB_STATUS_TRANSITIONS, JobStatus, JobType


@dataclass
class Job:
    """
    A unit of work tracked by the queue.

    The ID is assigned at enqueue time. The type never changes after creation.
    The consumer ID is empty until a consumer claims the job.
    """

    type: JobType
    status: JobStatus = JobStatus.QUEUED
    id: int = 0
    consumer_id: str = ""

    @property
    def is_claimable(self) -> bool:
        """Check if the job can be handed to a consumer."""
        return self.status == JobStatus.QUEUED

    def can_transition_to(self, status: JobStatus) -> bool:
        """Check the lifecycle state machine for a move to ``status``."""
        return status in JOB_STATUS_TRANSITIONS[self.status]

    def is_owned_by(self, consumer_id: str) -> bool:
        """Check if ``consumer_id`` holds the current claim on the job."""
        return bool(self.consumer_id) and self.consumer_id == consumer_id
