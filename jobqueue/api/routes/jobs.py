"""
Job intake and dispatch routes.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Header, HTTPException, Path, Response, status

from jobqueue.api.deps import JobQueueDep
from jobqueue.constants import (
    CONSUMER_ID_HEADER,
    ERR_INVALID_INPUT,
    ERR_NOT_FOUND,
    ERR_QUEUE_EMPTY,
    ERR_TRANSITION_NOT_ALLOWED,
    JOBS_PREFIX,
    SPAN_CANCEL_JOB,
    SPAN_CONCLUDE_JOB,
    SPAN_DEQUEUE_JOB,
    SPAN_ENQUEUE_JOB,
    SPAN_FETCH_JOB,
)
from jobqueue.errors import (
    InvalidInputError,
    JobNotFoundError,
    QueueEmptyError,
    TransitionNotAllowedError,
)
from jobqueue.observability.tracing import start_span
from jobqueue.types.api import EnqueueJobRequest, EnqueueJobResponse, JobResponse
from jobqueue.types.job import Job

logger = logging.getLogger(__name__)

router = APIRouter(prefix=JOBS_PREFIX, tags=["Jobs"])

JobIdPath = Annotated[int, Path(ge=0, description="Job ID")]
ConsumerIdHeader = Annotated[
    str,
    Header(alias=CONSUMER_ID_HEADER, min_length=1, description="Consumer identity"),
]


@router.post(
    "/enqueue",
    response_model=EnqueueJobResponse,
    summary="Submit a job",
    description="Add a job to the queue matching its type.",
)
async def enqueue_job(
    request: EnqueueJobRequest,
    queue: JobQueueDep,
) -> EnqueueJobResponse:
    """
    Submit a new job.

    Args:
        request: Job submission request.
        queue: The application job queue.

    Returns:
        EnqueueJobResponse with the assigned job ID.
    """
    with start_span(SPAN_ENQUEUE_JOB, job_type=request.type) as span:
        try:
            job_id = queue.enqueue(Job(type=request.type))
        except InvalidInputError:
            logger.info("Invalid job type", extra={"job_type": str(request.type)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=ERR_INVALID_INPUT,
            )
        span.set_attribute("job_id", job_id)

    return EnqueueJobResponse(id=job_id)


@router.post(
    "/dequeue",
    response_model=JobResponse,
    summary="Claim a job",
    description="Claim the next available job, time-critical jobs first.",
)
async def dequeue_job(
    consumer_id: ConsumerIdHeader,
    queue: JobQueueDep,
) -> JobResponse:
    """
    Claim the next available job for the calling consumer.

    Raises:
        HTTPException: 404 if no job is available.
    """
    with start_span(SPAN_DEQUEUE_JOB, consumer_id=consumer_id) as span:
        try:
            job = queue.dequeue(consumer_id)
        except QueueEmptyError:
            logger.info("No available jobs in queue", extra={"consumer_id": consumer_id})
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=ERR_QUEUE_EMPTY,
            )
        span.set_attribute("job_id", job.id)

    return JobResponse.from_job(job)


@router.post(
    "/{job_id}/conclude",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Conclude a job",
    description="Finish a job previously claimed by the calling consumer.",
)
async def conclude_job(
    job_id: JobIdPath,
    consumer_id: ConsumerIdHeader,
    queue: JobQueueDep,
) -> Response:
    """
    Conclude a claimed job.

    Raises:
        HTTPException: 404 if the job does not exist, 409 if it is not in
            progress or is held by another consumer.
    """
    with start_span(SPAN_CONCLUDE_JOB, job_id=job_id, consumer_id=consumer_id):
        try:
            queue.conclude(job_id, consumer_id)
        except JobNotFoundError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERR_NOT_FOUND)
        except TransitionNotAllowedError:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=ERR_TRANSITION_NOT_ALLOWED,
            )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{job_id}/cancel",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Cancel a job",
    description="Cancel a queued or in-progress job.",
)
async def cancel_job(
    job_id: JobIdPath,
    queue: JobQueueDep,
) -> Response:
    """
    Cancel a job regardless of which consumer holds it.

    Raises:
        HTTPException: 404 if the job does not exist, 409 if it already
            finished.
    """
    with start_span(SPAN_CANCEL_JOB, job_id=job_id):
        try:
            queue.cancel(job_id)
        except JobNotFoundError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERR_NOT_FOUND)
        except TransitionNotAllowedError:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=ERR_TRANSITION_NOT_ALLOWED,
            )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{job_id}",
    response_model=JobResponse,
    summary="Get job status",
)
async def get_job(
    job_id: JobIdPath,
    queue: JobQueueDep,
) -> JobResponse:
    """
    Get job details by ID.

    Raises:
        HTTPException: 404 if the job does not exist.
    """
    with start_span(SPAN_FETCH_JOB, job_id=job_id):
        try:
            job = queue.fetch_job(job_id)
        except JobNotFoundError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERR_NOT_FOUND)

    return JobResponse.from_job(job)
