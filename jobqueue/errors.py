"""
Job queue exceptions.
"""

from jobqueue.constants import JobStatus


class JobQueueError(Exception):
    """Base exception for job queue errors."""


class QueueEmptyError(JobQueueError):
    """No claimable job currently exists."""

    def __init__(self):
        super().__init__("no jobs in queue")


class JobNotFoundError(JobQueueError):
    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(f"unable to find job {job_id}")


class JobAlreadyExistsError(JobQueueError):
    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(f"job {job_id} already exists")


class TransitionNotAllowedError(JobQueueError):
    """The requested change violates the job lifecycle or the claim ownership."""

    def __init__(self, job_id: int, current_status: JobStatus, target_status: JobStatus):
        self.job_id = job_id
        self.current_status = current_status
        self.target_status = target_status
        super().__init__(
            f"job {job_id}: cannot transition from {current_status} to {target_status}"
        )


class InvalidInputError(JobQueueError):
    pass
