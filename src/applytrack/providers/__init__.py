"""Job search and application submission collaborators."""

from applytrack.providers.base import ApplicationSubmitter, JobSearchProvider
from applytrack.providers.catalog import StaticJobSearchProvider
from applytrack.providers.submitter import RandomOutcomeSubmitter

__all__ = [
    "ApplicationSubmitter",
    "JobSearchProvider",
    "StaticJobSearchProvider",
    "RandomOutcomeSubmitter",
]
