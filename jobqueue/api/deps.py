"""
FastAPI dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from jobqueue.queue import PriorityJobQueue


def get_job_queue(request: Request) -> PriorityJobQueue:
    """Return the queue owned by the running application."""
    return request.app.state.job_queue


JobQueueDep = Annotated[PriorityJobQueue, Depends(get_job_queue)]
