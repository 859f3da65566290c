# shapes of the generated study material
# model output is validated against these before it reaches the caller

from typing import List
from pydantic import BaseModel, Field, TypeAdapter, model_validator

OPTION_COUNT = 4


class Flashcard(BaseModel):
    question: str
    answer: str


class QuizQuestion(BaseModel):
    question: str
    options: List[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct: int

    @model_validator(mode="after")
    def _correct_in_range(self) -> "QuizQuestion":
        if not 0 <= self.correct < len(self.options):
            raise ValueError(f"correct index {self.correct} out of range")
        return self


FlashcardList = TypeAdapter(List[Flashcard])
QuizList = TypeAdapter(List[QuizQuestion])
