"""
Database abstraction for Postgres and an in-memory implementation.

Both clients satisfy the same DbClient contract. Questions and challenges get
sequential integer ids; users get random uuid ids.
"""

from __future__ import annotations

import threading
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional, Protocol

from sqlalchemy import Column, Integer, String, Text, create_engine, select
from sqlalchemy.exc import (
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from studydeck.errors import ConnectivityError, ConstraintViolationError, StorageError
from studydeck.seed_data import SEED_CHALLENGES, SEED_QUESTIONS


class DbClient(Protocol):
    """Interface for database access."""

    def get_user(self, user_id: str) -> Optional["UserRecord"]:
        ...

    def get_user_by_username(self, username: str) -> Optional["UserRecord"]:
        ...

    def create_user(self, user: "NewUser") -> "UserRecord":
        ...

    def get_all_questions(self) -> List["QuestionRecord"]:
        ...

    def create_question(self, question: "NewQuestion") -> "QuestionRecord":
        ...

    def delete_question(self, question_id: int) -> None:
        ...

    def get_all_challenges(self) -> List["ChallengeRecord"]:
        ...

    def create_challenge(self, challenge: "NewChallenge") -> "ChallengeRecord":
        ...

    def delete_challenge(self, challenge_id: int) -> None:
        ...


@dataclass
class NewUser:
    username: str
    password: str


@dataclass
class UserRecord:
    id: str
    username: str
    password: str

    def as_dict(self) -> dict:
        return {"id": self.id, "username": self.username, "password": self.password}


@dataclass
class NewQuestion:
    category: str
    question: str
    answer: str


@dataclass
class QuestionRecord:
    id: int
    category: str
    question: str
    answer: str

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category,
            "question": self.question,
            "answer": self.answer,
        }


@dataclass
class NewChallenge:
    title: str
    description: str
    initial_code: str
    solution: str
    hint: str


@dataclass
class ChallengeRecord:
    id: int
    title: str
    description: str
    initial_code: str
    solution: str
    hint: str

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "initialCode": self.initial_code,
            "solution": self.solution,
            "hint": self.hint,
        }


def seed_questions() -> List[NewQuestion]:
    return [NewQuestion(**item) for item in SEED_QUESTIONS]


def seed_challenges() -> List[NewChallenge]:
    return [NewChallenge(**item) for item in SEED_CHALLENGES]


class InMemoryDbClient:
    """
    Process-local store, preloaded with the seed questions and challenges.

    Sync route handlers run concurrently in FastAPI's threadpool, so every
    read and write of the shared collections happens under one lock.
    """

    def __init__(self, seed: bool = True):
        self.seed = seed
        self.lock = threading.Lock()
        self.users: Dict[str, UserRecord] = {}
        self.questions: List[QuestionRecord] = []
        self.challenges: List[ChallengeRecord] = []
        self.next_question_id = 1
        self.next_challenge_id = 1
        if seed:
            with self.lock:
                self._load_seed()

    def _load_seed(self) -> None:
        # Caller holds self.lock.
        for question in seed_questions():
            self._append_question(question)
        for challenge in seed_challenges():
            self._append_challenge(challenge)

    def reset(self) -> None:
        """Drop everything and reload the seed set (useful in tests)."""
        with self.lock:
            self.users.clear()
            self.questions.clear()
            self.challenges.clear()
            self.next_question_id = 1
            self.next_challenge_id = 1
            if self.seed:
                self._load_seed()

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self.lock:
            user = self.users.get(user_id)
            return replace(user) if user else None

    def _find_user_by_username(self, username: str) -> Optional[UserRecord]:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with self.lock:
            user = self._find_user_by_username(username)
            return replace(user) if user else None

    def create_user(self, user: NewUser) -> UserRecord:
        with self.lock:
            if self._find_user_by_username(user.username) is not None:
                raise ConstraintViolationError(
                    f"username already exists: {user.username!r}"
                )
            record = UserRecord(
                id=str(uuid.uuid4()), username=user.username, password=user.password
            )
            self.users[record.id] = record
            return replace(record)

    def get_all_questions(self) -> List[QuestionRecord]:
        with self.lock:
            return [replace(question) for question in self.questions]

    def _append_question(self, question: NewQuestion) -> QuestionRecord:
        record = QuestionRecord(
            id=self.next_question_id,
            category=question.category,
            question=question.question,
            answer=question.answer,
        )
        self.next_question_id += 1
        self.questions.append(record)
        return replace(record)

    def create_question(self, question: NewQuestion) -> QuestionRecord:
        with self.lock:
            return self._append_question(question)

    def delete_question(self, question_id: int) -> None:
        with self.lock:
            self.questions = [q for q in self.questions if q.id != question_id]

    def get_all_challenges(self) -> List[ChallengeRecord]:
        with self.lock:
            return [replace(challenge) for challenge in self.challenges]

    def _append_challenge(self, challenge: NewChallenge) -> ChallengeRecord:
        record = ChallengeRecord(
            id=self.next_challenge_id,
            title=challenge.title,
            description=challenge.description,
            initial_code=challenge.initial_code,
            solution=challenge.solution,
            hint=challenge.hint,
        )
        self.next_challenge_id += 1
        self.challenges.append(record)
        return replace(record)

    def create_challenge(self, challenge: NewChallenge) -> ChallengeRecord:
        with self.lock:
            return self._append_challenge(challenge)

    def delete_challenge(self, challenge_id: int) -> None:
        with self.lock:
            self.challenges = [c for c in self.challenges if c.id != challenge_id]


@contextmanager
def _storage_errors() -> Iterator[None]:
    try:
        yield
    except IntegrityError as exc:
        raise ConstraintViolationError(str(exc.orig)) from exc
    except (OperationalError, InterfaceError) as exc:
        raise ConnectivityError(str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        raise StorageError(str(exc)) from exc


class PostgresDbClient:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required for PostgresDbClient")
        with _storage_errors():
            self.engine = create_engine(
                database_url,
                future=True,
                pool_pre_ping=True,
                pool_recycle=1800,
            )
            self.Session = sessionmaker(
                bind=self.engine, class_=Session, expire_on_commit=False, future=True
            )
            Base.metadata.create_all(self.engine)

    @staticmethod
    def _to_user_record(row: "UserRow") -> UserRecord:
        return UserRecord(id=row.id, username=row.username, password=row.password)

    @staticmethod
    def _to_question_record(row: "QuestionRow") -> QuestionRecord:
        return QuestionRecord(
            id=row.id,
            category=row.category,
            question=row.question,
            answer=row.answer,
        )

    @staticmethod
    def _to_challenge_record(row: "ChallengeRow") -> ChallengeRecord:
        return ChallengeRecord(
            id=row.id,
            title=row.title,
            description=row.description,
            initial_code=row.initial_code,
            solution=row.solution,
            hint=row.hint,
        )

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with _storage_errors(), self.Session() as session:
            row = session.get(UserRow, user_id)
            return self._to_user_record(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with _storage_errors(), self.Session() as session:
            stmt = select(UserRow).where(UserRow.username == username)
            row = session.execute(stmt).scalar_one_or_none()
            return self._to_user_record(row) if row else None

    def create_user(self, user: NewUser) -> UserRecord:
        with _storage_errors(), self.Session() as session:
            row = UserRow(username=user.username, password=user.password)
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_user_record(row)

    def get_all_questions(self) -> List[QuestionRecord]:
        with _storage_errors(), self.Session() as session:
            rows = session.execute(
                select(QuestionRow).order_by(QuestionRow.id.asc())
            ).scalars()
            return [self._to_question_record(row) for row in rows]

    def create_question(self, question: NewQuestion) -> QuestionRecord:
        with _storage_errors(), self.Session() as session:
            row = QuestionRow(
                category=question.category,
                question=question.question,
                answer=question.answer,
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_question_record(row)

    def delete_question(self, question_id: int) -> None:
        with _storage_errors(), self.Session() as session:
            session.query(QuestionRow).filter(QuestionRow.id == question_id).delete(
                synchronize_session=False
            )
            session.commit()

    def get_all_challenges(self) -> List[ChallengeRecord]:
        with _storage_errors(), self.Session() as session:
            rows = session.execute(
                select(ChallengeRow).order_by(ChallengeRow.id.asc())
            ).scalars()
            return [self._to_challenge_record(row) for row in rows]

    def create_challenge(self, challenge: NewChallenge) -> ChallengeRecord:
        with _storage_errors(), self.Session() as session:
            row = ChallengeRow(
                title=challenge.title,
                description=challenge.description,
                initial_code=challenge.initial_code,
                solution=challenge.solution,
                hint=challenge.hint,
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_challenge_record(row)

    def delete_challenge(self, challenge_id: int) -> None:
        with _storage_errors(), self.Session() as session:
            session.query(ChallengeRow).filter(
                ChallengeRow.id == challenge_id
            ).delete(synchronize_session=False)
            session.commit()


Base = declarative_base()


def _random_user_id() -> str:
    return str(uuid.uuid4())


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=_random_user_id)
    username = Column(Text, nullable=False, unique=True)
    password = Column(Text, nullable=False)


class QuestionRow(Base):
    __tablename__ = "questions"
    # SQLite would otherwise reuse the highest id after a delete.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    category = Column(Text, nullable=False)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)


class ChallengeRow(Base):
    __tablename__ = "challenges"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    initial_code = Column(Text, nullable=False)
    solution = Column(Text, nullable=False)
    hint = Column(Text, nullable=False)
