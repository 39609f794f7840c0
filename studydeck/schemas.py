"""
Pydantic schemas for the StudyDeck API.
"""

from __future__ import annotations

from pydantic import BaseModel


class QuestionCreate(BaseModel):
    category: str
    question: str
    answer: str


class QuestionResponse(BaseModel):
    id: int
    category: str
    question: str
    answer: str


class ChallengeCreate(BaseModel):
    title: str
    description: str
    initialCode: str
    solution: str
    hint: str


class ChallengeResponse(BaseModel):
    id: int
    title: str
    description: str
    initialCode: str
    solution: str
    hint: str


class CheckAnswerRequest(BaseModel):
    code: str


class CheckAnswerResponse(BaseModel):
    challenge_id: int
    correct: bool
