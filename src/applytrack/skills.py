"""Keyword skill extraction from resume text."""

COMMON_SKILLS = [
    "JavaScript", "TypeScript", "React", "Node.js", "Python", "Java", "C++",
    "SQL", "MongoDB", "PostgreSQL", "AWS", "Azure", "Docker", "Kubernetes",
    "Git", "Agile", "Scrum", "REST API", "GraphQL", "HTML", "CSS",
    "Angular", "Vue.js", "Express", "Django", "Flask", "Spring Boot",
    "Machine Learning", "Data Analysis", "DevOps", "CI/CD", "Jenkins",
    "TensorFlow", "PyTorch", "Pandas", "NumPy", "Leadership", "Communication",
    "Problem Solving", "Team Management", "Project Management", "Excel",
]


def extract_skills(text: str | None, vocabulary: list[str] = COMMON_SKILLS) -> list[str]:
    """Return the vocabulary entries that occur in ``text``, in vocabulary order.

    Matching is plain case-insensitive substring containment, so "Java" is
    also found inside "JavaScript".
    """
    if not text:
        return []

    text_lower = text.lower()
    return [skill for skill in vocabulary if skill.lower() in text_lower]
