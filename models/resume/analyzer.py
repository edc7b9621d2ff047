# models/resume/analyzer.py

import logging
import re
from typing import List, Optional

from schemas.resume import ContactInfo, EducationEntry, ExperienceEntry, ResumeAnalysis

logger = logging.getLogger(__name__)

COMMON_SKILLS = [
    "JavaScript", "TypeScript", "React", "Angular", "Vue", "Node.js", "Python",
    "Java", "C#", "C++", "Ruby", "PHP", "SQL", "MongoDB", "PostgreSQL",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "REST API", "GraphQL",
    "HTML", "CSS", "SASS", "LESS", "Bootstrap", "Tailwind CSS", "Material UI",
    "Git", "Agile", "Scrum", "Jira", "Confluence", "Leadership", "Communication",
    "Problem Solving", "Critical Thinking", "Team Collaboration", "Project Management",
]

# Lookarounds instead of \b so that skills ending in symbols (C#, C++) still match
SKILL_PATTERNS = [
    (skill, re.compile(r'(?<!\w)' + re.escape(skill) + r'(?!\w)', re.IGNORECASE))
    for skill in COMMON_SKILLS
]

EMAIL_REGEX = re.compile(r'[a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+')
PHONE_REGEX = re.compile(r'(?:\+\d{1,3}[-\s]?)?\(?\d{3}\)?[-\s]?\d{3}[-\s]?\d{4}')
NAME_REGEX = re.compile(r'^([A-Z][a-z]+ [A-Z][a-z]+)', re.MULTILINE)

JOB_REGEX = re.compile(
    r'([A-Z][a-z]+ [A-Za-z]+|Developer|Engineer|Manager|Designer)'
    r'(?:[ \t]+at[ \t]+|[ \t]*[-–—][ \t]*)'
    r'([A-Za-z][\w &]+)'
)
DEGREE_REGEX = re.compile(
    r'\b(Bachelor|Master|PhD|BS|MS|BA|MBA)(?: of| in) ([A-Za-z ]+)',
    re.IGNORECASE
)
DEGREE_SPLIT_REGEX = re.compile(r'(?: of| in) ')

MAX_EXPERIENCE_ENTRIES = 3

# Placeholders for details the patterns cannot recover
EXPERIENCE_DEFAULTS = {
    "date": "2020 - Present",
    "start_date": "2020-01-01",
    "end_date": None,
    "description": ["Worked on various projects and initiatives."],
}
EDUCATION_DEFAULTS = {
    "institution": "University",
    "date": "2014 - 2018",
    "start_date": "2014-09-01",
    "end_date": "2018-05-31",
}
DEFAULT_SUMMARY = "Experienced professional with a background in technology."

GENERAL_SUGGESTIONS = [
    "Add measurable achievements with concrete metrics",
    "Include relevant certifications or professional development",
    "Tailor your resume for each job application",
    "Use action verbs at the beginning of bullet points",
    "Ensure your contact information is up-to-date and professional",
]
FAILURE_SUGGESTIONS = [
    "Please try re-uploading your resume",
    "Ensure your resume is in PDF format",
    "Make sure your resume has clear sections for experience, education, and skills",
    "Check that your PDF is not password protected or corrupted",
]


def extract_skills(text: str) -> List[str]:
    """Catalogue skills mentioned in the text, in catalogue order."""
    return [skill for skill, pattern in SKILL_PATTERNS if pattern.search(text or "")]


def extract_contact_info(text: str) -> ContactInfo:
    email = EMAIL_REGEX.search(text)
    phone = PHONE_REGEX.search(text)
    name = NAME_REGEX.search(text)

    return ContactInfo(
        name=name.group(1) if name else "",
        email=email.group(0) if email else "",
        phone=phone.group(0).strip() if phone else "",
    )


def _find_section(text: str, header: str, stop_headers: List[str]) -> Optional[str]:
    """
    Body of the section introduced by ``header``, up to the first of
    ``stop_headers`` or the end of the text. Headers on their own line are
    preferred; failing that the header may appear anywhere.
    """
    stops = "|".join(stop_headers)
    at_line_start = re.search(
        rf'^[ \t]*(?:work |professional )?{header}\b:?(.+?)(?=^[ \t]*(?:{stops})\b|\Z)',
        text,
        re.IGNORECASE | re.MULTILINE | re.DOTALL
    )
    if at_line_start:
        return at_line_start.group(1)

    for stop in stop_headers:
        inline = re.search(rf'{header}:?(.+?)(?:{stop})', text, re.IGNORECASE | re.DOTALL)
        if inline:
            return inline.group(1)
    inline = re.search(rf'{header}:?(.+?)$', text, re.IGNORECASE | re.DOTALL)
    return inline.group(1) if inline else None


def extract_experience(text: str) -> List[ExperienceEntry]:
    section = _find_section(text, "experience", ["education", "skills", "references"])
    if not section:
        return []

    jobs = []
    for match in JOB_REGEX.finditer(section):
        title, company = match.group(1).strip(), match.group(2).strip()
        if not company:
            continue
        jobs.append(ExperienceEntry(title=title, company=company, **EXPERIENCE_DEFAULTS))
        if len(jobs) == MAX_EXPERIENCE_ENTRIES:
            break
    return jobs


def extract_education(text: str) -> List[EducationEntry]:
    section = _find_section(text, "education", ["experience", "skills", "references"])
    if not section:
        return []

    degrees = []
    for match in DEGREE_REGEX.finditer(section):
        parts = DEGREE_SPLIT_REGEX.split(match.group(0))
        if len(parts) < 2:
            continue
        degrees.append(EducationEntry(
            degree=parts[0].strip(),
            field=parts[1].strip() or "Not Specified",
            **EDUCATION_DEFAULTS
        ))
    return degrees


def extract_summary(text: str) -> str:
    summary_match = (
        re.search(r'professional\s+summary:?\s+(.*?)(?:\n\n)', text, re.IGNORECASE)
        or re.search(r'professional\s+summary:?\s+(.*?)(?:\n\w+:)', text, re.IGNORECASE)
    )
    if summary_match and summary_match.group(1).strip():
        return summary_match.group(1).strip()

    # Otherwise, the first paragraph of a plausible length
    for paragraph in text.split("\n\n"):
        if 50 < len(paragraph) < 500:
            return paragraph

    return DEFAULT_SUMMARY


def generate_suggestions(
    skills: Optional[List] = None,
    experience: Optional[List] = None,
    education: Optional[List] = None
) -> List[str]:
    suggestions = []

    if not skills or len(skills) < 5:
        suggestions.append("Add more specific skills to your resume to improve matching with job requirements.")

    if not experience or len(experience) < 2:
        suggestions.append("Add more detailed work experience with descriptions of your responsibilities and achievements.")
    else:
        suggestions.append("Quantify your achievements with metrics and results to make your experience more impactful.")

    if not education:
        suggestions.append("Include your educational background with degrees, institutions, and graduation dates.")

    suggestions.extend(GENERAL_SUGGESTIONS)
    return suggestions


def calculate_resume_score(
    contact_info: Optional[ContactInfo] = None,
    summary: Optional[str] = None,
    skills: Optional[List] = None,
    experience: Optional[List] = None,
    education: Optional[List] = None
) -> int:
    """Completeness score of a resume on its own, from 50 up to 100."""
    score = 50

    if contact_info is not None:
        if contact_info.email:
            score += 5
        if contact_info.phone:
            score += 5
        if contact_info.name:
            score += 5
    if summary:
        score += 10

    score += min(len(skills or []) * 2, 20)
    score += min(len(experience or []) * 10, 30)
    score += min(len(education or []) * 5, 15)

    return min(score, 100)


def fallback_analysis(error_message: str) -> ResumeAnalysis:
    logger.info("Creating fallback response with error: %s", error_message)
    return ResumeAnalysis(
        success=False,
        contact_info=ContactInfo(name="Unknown"),
        summary=f"We couldn't properly analyze your resume. Error: {error_message}",
        suggestions=list(FAILURE_SUGGESTIONS),
        score=0,
    )


def analyze_resume(text: Optional[str], min_length: int = 50) -> ResumeAnalysis:
    """Rule-based analysis of resume text."""
    if not text or len(text.strip()) < min_length:
        logger.error("Resume text is too short or empty (%d characters)", len((text or "").strip()))
        return fallback_analysis("Resume text is too short or empty")

    logger.info("Analyzing resume text of length: %d characters", len(text))

    contact_info = extract_contact_info(text)
    summary = extract_summary(text)
    skills = extract_skills(text)
    experience = extract_experience(text)
    education = extract_education(text)

    analysis = ResumeAnalysis(
        success=True,
        contact_info=contact_info.model_copy(update={"name": contact_info.name or "Unknown"}),
        summary=summary,
        skills=skills,
        experience=experience,
        education=education,
        suggestions=generate_suggestions(skills, experience, education),
        score=calculate_resume_score(contact_info, summary, skills, experience, education),
    )
    logger.info(
        "Resume analysis completed: %d skills, %d jobs, %d degrees",
        len(skills), len(experience), len(education)
    )
    return analysis
