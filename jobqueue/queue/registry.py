"""
Job registry.
Owns the canonical job records and hands out unique job IDs.
"""

from dataclasses import replace

from jobqueue.errors import JobAlreadyExistsError, JobNotFoundError
from jobqueue.types.job import Job


class JobRegistry:
    """
    Map of job ID to job record.

    The registry keeps no ordering and takes no locks; the queue that owns it
    serializes access. Records are copied on the way in and out so callers
    never hold a reference to canonical state.
    """

    def __init__(self):
        self._jobs: dict[int, Job] = {}
        self._max_id = 0

    @property
    def max_id(self) -> int:
        return self._max_id

    def create(self, job: Job) -> int:
        """
        Store a new job and return its ID.

        A positive ``job.id`` is taken as a pre-assigned ID. Otherwise the
        next ID is found by scanning forward from the highest ID handed out
        so far, skipping IDs that are already present.

        Raises:
            JobAlreadyExistsError: If a pre-assigned ID is already taken.
        """
        if job.id > 0:
            if job.id in self._jobs:
                raise JobAlreadyExistsError(job.id)
            job_id = job.id
        else:
            job_id = self._max_id + 1
            while job_id in self._jobs:
                job_id += 1

        self._jobs[job_id] = replace(job, id=job_id)
        self._max_id = max(self._max_id, job_id)
        return job_id

    def get(self, job_id: int) -> Job:
        job = self._jobs.get(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return replace(job)

    def update(self, job: Job) -> None:
        """Replace the stored record with the same ID."""
        if job.id not in self._jobs:
            raise JobNotFoundError(job.id)
        self._jobs[job.id] = replace(job)

    def __contains__(self, job_id: object) -> bool:
        return job_id in self._jobs

    def __len__(self) -> int:
        return len(self._jobs)
