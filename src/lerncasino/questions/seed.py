"""Question seed data — inserted once into an empty questions table."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lerncasino.db.models import Question

logger = logging.getLogger(__name__)

QUESTION_SEED_DATA: list[dict] = [
    {
        "level": 1,
        "question": "Was ist 'Bilanzierung' im engeren Sinne?",
        "answers": [
            "Die Betrachtung von Bilanz, GuV und Anhang",
            "Nur die Betrachtung der Bilanzpositionen",
            "Nur die Betrachtung der GuV",
            "Nur der Anhang",
        ],
        "correct_index": 1,
    },
    {
        "level": 1,
        "question": "Welche Bestandteile hat der Jahresabschluss einer typischen Kapitalgesellschaft?",
        "answers": [
            "Nur Bilanz",
            "Bilanz und Anhang",
            "Bilanz, GuV und ggf. Anhang",
            "Nur GuV",
        ],
        "correct_index": 2,
    },
    {
        "level": 2,
        "question": "Was bedeutet 'Bilanzierung dem Grunde nach'?",
        "answers": [
            "Bewertungshöhe eines Vermögensgegenstandes",
            "Ob etwas überhaupt in die Bilanz gehört",
            "Nur die zeitliche Erfassung von Aufwendungen",
            "Die Methode der Abschreibung",
        ],
        "correct_index": 1,
    },
]


def _to_row(data: dict) -> Question:
    a, b, c, d = data["answers"]
    return Question(
        level=data["level"],
        question=data["question"],
        answer_a=a,
        answer_b=b,
        answer_c=c,
        answer_d=d,
        correct_index=data["correct_index"],
    )


async def seed_questions(db: AsyncSession, seed_data: list[dict] | None = None) -> int:
    """Insert the seed questions if the table is empty. Returns rows inserted.

    All rows go in with a single commit so a failed seed leaves the table empty.
    """
    count = (await db.execute(select(func.count()).select_from(Question))).scalar_one()
    if count:
        return 0

    rows = [_to_row(q) for q in (QUESTION_SEED_DATA if seed_data is None else seed_data)]
    db.add_all(rows)
    await db.commit()
    logger.info("Seed questions inserted into database: %d", len(rows))
    return len(rows)
