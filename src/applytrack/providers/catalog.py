"""Job search over a fixed in-memory catalog."""

from typing import Any

import structlog

from applytrack.providers.base import JobSearchProvider

logger = structlog.get_logger()


DEFAULT_CATALOG: list[dict[str, Any]] = [
    {
        "title": "Senior Full Stack Developer",
        "company": "Tech Solutions Inc.",
        "location": "Bangalore, India",
        "salary": "₹15-25 LPA",
        "type": "Full-time",
        "description": "We are looking for an experienced Full Stack Developer with expertise in React, Node.js, and cloud technologies.",
        "skills": ["React", "Node.js", "TypeScript", "AWS", "MongoDB"],
        "website": "naukri.com",
        "posted": "2 days ago",
    },
    {
        "title": "Frontend Developer",
        "company": "Digital Innovations",
        "location": "Mumbai, India",
        "salary": "₹10-18 LPA",
        "type": "Full-time",
        "description": "Join our team as a Frontend Developer to build cutting-edge web applications using modern frameworks.",
        "skills": ["React", "JavaScript", "HTML", "CSS", "TypeScript"],
        "website": "naukri.com",
        "posted": "1 day ago",
    },
    {
        "title": "DevOps Engineer",
        "company": "Cloud Systems Ltd.",
        "location": "Hyderabad, India",
        "salary": "₹12-20 LPA",
        "type": "Full-time",
        "description": "Seeking a DevOps Engineer to manage our cloud infrastructure and CI/CD pipelines.",
        "skills": ["AWS", "Docker", "Kubernetes", "Jenkins", "Python"],
        "website": "linkedin.com",
        "posted": "3 days ago",
    },
    {
        "title": "Python Developer",
        "company": "Data Analytics Corp",
        "location": "Pune, India",
        "salary": "₹8-15 LPA",
        "type": "Full-time",
        "description": "Looking for a Python Developer with experience in data processing and API development.",
        "skills": ["Python", "Django", "PostgreSQL", "REST API", "Git"],
        "website": "indeed.com",
        "posted": "5 days ago",
    },
    {
        "title": "Full Stack JavaScript Developer",
        "company": "Startup Hub",
        "location": "Remote",
        "salary": "₹18-30 LPA",
        "type": "Full-time",
        "description": "Join our fast-growing startup as a Full Stack JavaScript Developer working on innovative products.",
        "skills": ["JavaScript", "React", "Node.js", "MongoDB", "Express"],
        "website": "naukri.com",
        "posted": "1 week ago",
    },
    {
        "title": "Software Engineer",
        "company": "Enterprise Solutions",
        "location": "Delhi NCR, India",
        "salary": "₹10-16 LPA",
        "type": "Full-time",
        "description": "We need a Software Engineer with strong problem-solving skills and experience in modern web technologies.",
        "skills": ["Java", "Spring Boot", "React", "SQL", "Git"],
        "website": "naukri.com",
        "posted": "4 days ago",
    },
]


class StaticJobSearchProvider(JobSearchProvider):
    """Filters a fixed list of postings by skill overlap and text containment."""

    source_name = "static"

    def __init__(self, catalog: list[dict[str, Any]] | None = None):
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG

    async def search(
        self,
        skills: list[str],
        query: str | None = None,
        location: str | None = None,
    ) -> list[dict[str, Any]]:
        wanted = {skill.lower() for skill in skills}
        query_lower = query.lower() if query else None
        location_lower = location.lower() if location else None

        matches = []
        for job in self.catalog:
            if not any(skill.lower() in wanted for skill in job.get("skills") or []):
                continue
            if query_lower and not (
                query_lower in (job.get("title") or "").lower()
                or query_lower in (job.get("description") or "").lower()
            ):
                continue
            if location_lower and location_lower not in (job.get("location") or "").lower():
                continue
            matches.append(dict(job))

        logger.debug(
            "job_search_complete",
            source=self.source_name,
            skills=len(wanted),
            matches=len(matches),
        )
        return matches
