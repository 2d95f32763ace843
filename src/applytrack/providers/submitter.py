"""Application submitter with a random outcome."""

import asyncio
import random

import structlog

from applytrack.models.application import ApplicationStatus
from applytrack.models.job import Job
from applytrack.providers.base import ApplicationSubmitter

logger = structlog.get_logger()


class RandomOutcomeSubmitter(ApplicationSubmitter):
    """Reports success with a fixed probability after an optional delay."""

    def __init__(
        self,
        success_probability: float = 0.9,
        delay_seconds: float = 0.0,
        rng: random.Random | None = None,
    ):
        self.success_probability = success_probability
        self.delay_seconds = delay_seconds
        self.rng = rng or random.Random()

    async def submit(self, job: Job) -> ApplicationStatus:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        if self.rng.random() < self.success_probability:
            outcome = ApplicationStatus.SUCCESS
        else:
            outcome = ApplicationStatus.FAILED

        logger.info("application_submitted", job_id=job.id, outcome=outcome.value)
        return outcome
