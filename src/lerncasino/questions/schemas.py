"""Question payloads as served to clients."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class QuestionResponse(BaseModel):
    """A quiz question with its four answers and the index of the right one."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    level: int
    q: str
    answers: list[str] = Field(..., min_length=4, max_length=4)
    correct_index: int = Field(..., ge=0, le=3, alias="correctIndex")

    @property
    def correct_answer(self) -> str:
        return self.answers[self.correct_index]
