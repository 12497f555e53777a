"""
FastAPI web application for the ATS Resume Scorer.
Serves the analysis the resume builder requests when a user pastes a job
description.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from ats_scorer import __version__, analyze, extract_keywords
from ats_scorer.config import resolve_config
from ats_scorer.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

app = FastAPI(title="ATS Resume Scorer", version=__version__)


# === Models ===

class AnalyzeATSRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume: Dict[str, Any] = Field(default_factory=dict)
    job_description: str = Field(alias="jobDescription")
    threshold: Optional[float] = None
    max_keywords: Optional[int] = Field(default=None, alias="maxKeywords")


class AnalyzeJobRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_description: str = Field(alias="jobDescription")
    max_keywords: Optional[int] = Field(default=None, alias="maxKeywords")


class ATSAnalysisResponse(BaseModel):
    lastScore: int = Field(ge=0, le=100)
    keywordMatches: List[str]
    missedKeywords: List[str]
    suggestions: List[str]
    passesATS: bool
    rating: str
    keywordCoverage: float = Field(ge=0, le=100)


class KeywordModel(BaseModel):
    term: str
    weight: float
    forms: List[str]


class JobAnalysisResponse(BaseModel):
    keywords: List[KeywordModel]
    count: int


# === Routes ===

@app.get("/api/health")
async def health_check():
    return {
        "status": "healthy",
        "version": __version__,
    }


@app.post("/api/analyze-ats", response_model=ATSAnalysisResponse)
async def analyze_ats(request: AnalyzeATSRequest):
    """Score a resume against a job description."""
    if not request.job_description.strip():
        raise HTTPException(status_code=400, detail="Please enter a job description for ATS analysis")

    try:
        result = analyze(
            request.resume,
            request.job_description,
            threshold=request.threshold,
            max_keywords=request.max_keywords,
        )
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("ATS analysis complete: score=%d passed=%s", result.score, result.passed)
    return result.to_dict()


@app.post("/api/analyze-job", response_model=JobAnalysisResponse)
async def analyze_job(request: AnalyzeJobRequest):
    """Extract ranked keywords from a job description."""
    try:
        config = resolve_config(max_keywords=request.max_keywords)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    keywords = extract_keywords(request.job_description, config=config)
    return {
        "keywords": [
            {"term": kw.term, "weight": kw.weight, "forms": list(kw.forms)}
            for kw in keywords
        ],
        "count": len(keywords),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
