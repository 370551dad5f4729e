"""
Shared fixtures: a fresh in-memory SQLite database per test, seeded through the ORM.
DATABASE_URL is forced to in-memory before app modules import, so no test ever touches a real database file.
"""
import os
import random

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlalchemy import event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import make_engine, init_sqlite_db
from app.models import Answer, Category, Difficulty, QuestionType, Question


@pytest.fixture
def engine():
    eng = make_engine("sqlite://", poolclass=StaticPool)
    init_sqlite_db(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def statements(engine):
    """Collect every SQL statement sent to the engine (SELECTs from the code under test)."""
    seen: list[str] = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    event.listen(engine, "before_cursor_execute", _record)
    try:
        yield seen
    finally:
        event.remove(engine, "before_cursor_execute", _record)


@pytest.fixture
def lookups(db):
    """Two categories, three difficulties, two types. Committed."""
    rows = {
        "categories": [
            Category(id="cat-science", name="Science: Computers", opentdb_id=18),
            Category(id="cat-history", name="History", opentdb_id=23),
        ],
        "difficulties": [
            Difficulty(id="diff-easy", level="easy"),
            Difficulty(id="diff-medium", level="medium"),
            Difficulty(id="diff-hard", level="hard"),
        ],
        "types": [
            QuestionType(id="type-multiple", name="multiple"),
            QuestionType(id="type-boolean", name="boolean"),
        ],
    }
    for group in rows.values():
        db.add_all(group)
    db.commit()
    return rows


@pytest.fixture
def make_questions(db, lookups):
    """Factory: seed n questions (ids q0000..), each with one correct and three incorrect answers. Inserted in shuffled order."""

    def _make(n: int, seed: int = 7) -> list[str]:
        ids = [f"q{i:04d}" for i in range(n)]
        shuffled = ids[:]
        random.Random(seed).shuffle(shuffled)
        for i, qid in enumerate(shuffled):
            correct = Answer(id=f"a-{qid}-c", text=f"Correct answer for {qid}")
            wrong = [Answer(id=f"a-{qid}-w{k}", text=f"Wrong answer {k} for {qid}") for k in range(3)]
            q = Question(
                id=qid,
                text=f"Question {qid}?",
                category=lookups["categories"][i % 2],
                difficulty=lookups["difficulties"][i % 3],
                type=lookups["types"][i % 2],
                correct_answer=correct,
            )
            q.incorrect_answers.extend(wrong)
            db.add(q)
        db.commit()
        db.expunge_all()
        return ids

    return _make
