"""
HTTP routes for the StudyDeck API.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from studydeck.db import DbClient, NewChallenge, NewQuestion
from studydeck.dependencies import get_db_client
from studydeck.grading import check_answer
from studydeck.schemas import (
    ChallengeCreate,
    ChallengeResponse,
    CheckAnswerRequest,
    CheckAnswerResponse,
    QuestionCreate,
    QuestionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/questions", response_model=list[QuestionResponse])
def list_questions(db: DbClient = Depends(get_db_client)):
    return [q.as_dict() for q in db.get_all_questions()]


@router.post("/questions", response_model=QuestionResponse, status_code=201)
def create_question(payload: QuestionCreate, db: DbClient = Depends(get_db_client)):
    record = db.create_question(
        NewQuestion(
            category=payload.category,
            question=payload.question,
            answer=payload.answer,
        )
    )
    logger.info("Created question %d", record.id)
    return record.as_dict()


@router.delete("/questions/{question_id}", status_code=204)
def delete_question(question_id: int, db: DbClient = Depends(get_db_client)):
    db.delete_question(question_id)
    return Response(status_code=204)


@router.get("/challenges", response_model=list[ChallengeResponse])
def list_challenges(db: DbClient = Depends(get_db_client)):
    return [c.as_dict() for c in db.get_all_challenges()]


@router.post("/challenges", response_model=ChallengeResponse, status_code=201)
def create_challenge(
    payload: ChallengeCreate, db: DbClient = Depends(get_db_client)
):
    record = db.create_challenge(
        NewChallenge(
            title=payload.title,
            description=payload.description,
            initial_code=payload.initialCode,
            solution=payload.solution,
            hint=payload.hint,
        )
    )
    logger.info("Created challenge %d", record.id)
    return record.as_dict()


@router.delete("/challenges/{challenge_id}", status_code=204)
def delete_challenge(challenge_id: int, db: DbClient = Depends(get_db_client)):
    db.delete_challenge(challenge_id)
    return Response(status_code=204)


@router.post("/challenges/{challenge_id}/check", response_model=CheckAnswerResponse)
def check_challenge_answer(
    challenge_id: int,
    payload: CheckAnswerRequest,
    db: DbClient = Depends(get_db_client),
):
    """
    Grade a submission against the stored solution (whitespace and
    // comment insensitive).
    """
    challenge = next(
        (c for c in db.get_all_challenges() if c.id == challenge_id), None
    )
    if not challenge:
        raise HTTPException(status_code=404, detail="Challenge not found")
    return CheckAnswerResponse(
        challenge_id=challenge_id,
        correct=check_answer(payload.code, challenge.solution),
    )
