# main.py
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, UploadFile, File, HTTPException, Query, status
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from config import add_cors_middleware, get_settings, setup_logging
from db.session import get_db, init_db
from schemas.application import ApplicationCreate, ApplicationResponse, ErrorResponse
from schemas.matching import MatchScoreRequest, MatchScoreResponse, JobRecommendation, CandidateRanking
from schemas.resume import ResumeAnalysis, ResumeTextRequest
from schemas.skill import SkillCreate, SkillList, SkillOut
from models.applications.service import create_application, RecordNotFoundError, DuplicateApplicationError
from models.candidate.repository import get_candidate_profile
from models.jobs.repository import get_job_posting
from models.matching.scorer import calculate_match_score, experience_years, skill_match
from models.matching.service import rank_jobs_for_candidate, rank_candidates_for_job
from models.resume.analyzer import analyze_resume
from models.resume.text_extraction import extract_text, SUPPORTED_EXTENSIONS
from models.skills.repository import search_skills, get_or_create_skill

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield


app = FastAPI(
    title="Recruitment Matching API",
    description="API to analyze resumes, score candidates against job postings and rank applicants.",
    version="1.0.0",
    lifespan=lifespan,
)

add_cors_middleware(app)


@app.get("/", summary="Health check")
async def read_root():
    return {"message": "Welcome to the Recruitment Matching API"}


@app.post(
    "/match-score",
    response_model=MatchScoreResponse,
    summary="Scores a candidate against a set of required skills",
)
async def match_score_endpoint(body: MatchScoreRequest):
    matched, missing = skill_match(body.candidate_skills, body.required_skills)
    return MatchScoreResponse(
        match_score=calculate_match_score(
            candidate_skills=body.candidate_skills,
            experiences=body.experiences,
            education_count=body.education_count,
            required_skills=body.required_skills
        ),
        matched_skills=matched,
        missing_skills=missing,
        experience_years=round(experience_years(body.experiences), 2)
    )


@app.post(
    "/resume/analyze",
    response_model=ResumeAnalysis,
    summary="Extracts and analyzes the text of an uploaded resume",
    responses={
        400: {"model": ErrorResponse, "description": "Unsupported file format or unreadable file"},
        500: {"model": ErrorResponse, "description": "Internal server error"}
    }
)
async def analyze_resume_file_endpoint(file: UploadFile = File(...)):
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file name was provided."
        )

    if not file.filename.lower().endswith(tuple(SUPPORTED_EXTENSIONS)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file format: {file.filename}. "
                   "Only PDF, DOCX and TXT are accepted."
        )

    try:
        content = await file.read()
        raw_text = extract_text(content, file.filename)
        return analyze_resume(raw_text, min_length=settings.min_resume_length)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error while analyzing resume %s", file.filename)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error while processing the resume: {e}"
        )


@app.post(
    "/resume/analyze-text",
    response_model=ResumeAnalysis,
    summary="Analyzes resume text that was already extracted",
)
def analyze_resume_text_endpoint(req: ResumeTextRequest):
    logger.info("Received analysis request for text length: %d", len(req.raw_text))
    return analyze_resume(req.raw_text, min_length=settings.min_resume_length)


@app.post(
    "/applications",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Applies a candidate to a job posting and stores the match score",
    responses={
        404: {"model": ErrorResponse, "description": "Profile or job posting not found"},
        409: {"model": ErrorResponse, "description": "Candidate already applied"}
    }
)
async def create_application_endpoint(
    body: ApplicationCreate,
    db: AsyncSession = Depends(get_db)
):
    try:
        return await create_application(
            db,
            profile_id=body.job_seeker_profile_id,
            job_id=body.job_posting_id,
            cover_letter=body.cover_letter
        )
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateApplicationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@app.get(
    "/candidates/{profile_id}/recommendations",
    response_model=List[JobRecommendation],
    summary="Active job postings ranked by match score for a candidate",
    responses={404: {"model": ErrorResponse, "description": "Profile not found"}}
)
async def recommendations_endpoint(
    profile_id: str,
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    profile = await get_candidate_profile(db, profile_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job seeker profile not found")

    return await rank_jobs_for_candidate(db, profile, limit=limit or settings.recommendation_limit)


@app.get(
    "/jobs/{job_id}/candidates",
    response_model=List[CandidateRanking],
    summary="Applicants of a job posting ranked by match score",
    responses={404: {"model": ErrorResponse, "description": "Job posting not found"}}
)
async def job_candidates_endpoint(
    job_id: str,
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    job = await get_job_posting(db, job_id)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job posting not found")

    return await rank_candidates_for_job(db, job, limit=limit or settings.recommendation_limit)


@app.get("/skills", response_model=SkillList, summary="Searches the skill catalogue")
async def skills_endpoint(
    search: Optional[str] = None,
    limit: int = Query(default=50, ge=1, le=200),
    db: AsyncSession = Depends(get_db)
):
    skills = await search_skills(db, search=search, limit=limit)
    return SkillList(skills=[SkillOut.model_validate(s) for s in skills])


@app.post(
    "/skills",
    response_model=SkillOut,
    summary="Creates a skill, or returns the existing one with the same name",
    responses={400: {"model": ErrorResponse, "description": "Empty skill name"}}
)
async def create_skill_endpoint(
    body: SkillCreate,
    db: AsyncSession = Depends(get_db)
):
    if not body.name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Skill name is required")

    skill = await get_or_create_skill(db, body.name, level=body.level)
    await db.commit()
    return SkillOut.model_validate(skill)
