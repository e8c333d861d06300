"""
Locust load testing for the job dispatch API.

Run with:
    locust -f tests/load/locustfile.py --host=http://localhost:8080

Or headless:
    locust -f tests/load/locustfile.py --host=http://localhost:8080 \
        --headless -u 100 -r 10 --run-time 5m
"""

import random
import uuid

from locust import HttpUser, between, task

CONSUMER_ID_HEADER = "X-Consumer-ID"


class ProducerUser(HttpUser):
    """
    Simulated producer.

    Submits a mix of job types and polls the status of jobs it submitted.
    """

    weight = 2
    wait_time = between(0.1, 0.5)

    def on_start(self):
        """Called when a user starts."""
        self.created_job_ids: list[int] = []

    @task(10)
    def submit_job(self):
        """Submit a new job; roughly one in five is time-critical."""
        job_type = "TIME_CRITICAL" if random.random() < 0.2 else "NOT_TIME_CRITICAL"

        response = self.client.post(
            "/jobs/enqueue",
            json={"Type": job_type, "Status": "QUEUED"},
            name="/jobs/enqueue",
        )

        if response.status_code == 200:
            self.created_job_ids.append(response.json()["ID"])
            # Keep only recent job IDs
            if len(self.created_job_ids) > 100:
                self.created_job_ids = self.created_job_ids[-100:]

    @task(4)
    def get_job_status(self):
        """Check status of a previously submitted job."""
        if not self.created_job_ids:
            return

        job_id = random.choice(self.created_job_ids)
        self.client.get(f"/jobs/{job_id}", name="/jobs/{job_id}")

    @task(1)
    def cancel_job(self):
        """Cancel a previously submitted job; it may already be finished."""
        if not self.created_job_ids:
            return

        job_id = self.created_job_ids.pop(random.randrange(len(self.created_job_ids)))
        with self.client.post(
            f"/jobs/{job_id}/cancel",
            name="/jobs/{job_id}/cancel",
            catch_response=True,
        ) as response:
            if response.status_code in (204, 409):
                response.success()


class ConsumerUser(HttpUser):
    """
    Simulated consumer.

    Claims jobs, pretends to work on them, and concludes them.
    """

    weight = 1
    wait_time = between(0.1, 1)

    def on_start(self):
        self.consumer_id = f"load-test-consumer-{uuid.uuid4().hex[:8]}"

    def _headers(self) -> dict[str, str]:
        return {CONSUMER_ID_HEADER: self.consumer_id}

    @task
    def claim_and_conclude(self):
        """Claim the next job and conclude it."""
        with self.client.post(
            "/jobs/dequeue",
            headers=self._headers(),
            name="/jobs/dequeue",
            catch_response=True,
        ) as response:
            if response.status_code == 404:
                # Empty queue is a normal outcome for a poller
                response.success()
                return
            if response.status_code != 200:
                return
            job_id = response.json()["ID"]

        with self.client.post(
            f"/jobs/{job_id}/conclude",
            headers=self._headers(),
            name="/jobs/{job_id}/conclude",
            catch_response=True,
        ) as response:
            # Producers may cancel the job while it is held
            if response.status_code in (204, 409):
                response.success()
