#!/usr/bin/env python3
"""
Data-quality checks against the configured trivia database (DATABASE_URL / backend/.env).
Run from backend dir with project venv active: python scripts/check_data_quality.py
Exit code 1 when any check finds problems.
"""
import sys
from pathlib import Path

BACKEND = Path(__file__).resolve().parent.parent
if str(BACKEND) not in sys.path:
    sys.path.insert(0, str(BACKEND))


def check_schema():
    from app.database import init_sqlite_db
    init_sqlite_db()
    return "schema", []


def check_answer_overlaps():
    from app.database import session_scope
    from app.services.data_quality import find_correct_answer_overlaps
    with session_scope() as db:
        overlaps = find_correct_answer_overlaps(db)
    return "correct_answer_overlaps", [f"question {o.question_id} lists answer {o.answer_id} as incorrect" for o in overlaps]


def main():
    checks = [check_schema, check_answer_overlaps]
    failed = False
    for fn in checks:
        try:
            name, problems = fn()
        except Exception as e:
            print(f"FAIL {fn.__name__}: {e}")
            return 1
        if problems:
            failed = True
            print(f"FAIL {name}: {len(problems)} problem(s)")
            for p in problems:
                print(f"  - {p}")
        else:
            print(f"OK {name}")
    if failed:
        return 1
    print("All data-quality checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
