from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class TutorStep(str, Enum):
    LISTEN = "listen"
    REPEAT = "repeat"
    CORRECT = "correct"
    ROLEPLAY = "roleplay"
    REWARD = "reward"

# Progression order of the tutoring steps
TUTOR_STEPS = (
    TutorStep.LISTEN,
    TutorStep.REPEAT,
    TutorStep.CORRECT,
    TutorStep.ROLEPLAY,
    TutorStep.REWARD,
)

class ResponseCategory(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needs_work"

class PolitenessLevel(str, Enum):
    FORMAL = "formal"
    INFORMAL = "informal"
    MIXED = "mixed"

class Lesson(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    scenario: str
    target_phrase: str
    vocabulary: List[str] = Field(default_factory=list)
    grammar: str = ""
    translation: Optional[str] = None

class MatchResult(BaseModel):
    accuracy: int = Field(ge=0, le=100)
    correct_words: List[str]
    incorrect_words: List[str]

class TutorReply(BaseModel):
    phrase: str
    translation: str

class PronunciationFeedback(BaseModel):
    accuracy: int
    correct_words: List[str]
    incorrect_words: List[str]
    feedback: str
    tutor_response: TutorReply
    suggestions: List[str]

class PolitenessResult(BaseModel):
    level: PolitenessLevel
    suggestions: List[str]

class TutorSessionState(BaseModel):
    current_step: TutorStep = TutorStep.LISTEN
    attempts: int = 0
    score: int = 0
    completed_lessons: List[str] = Field(default_factory=list)

class EvaluationRequest(BaseModel):
    transcript: str
    lesson: Lesson

class TranscriptRequest(BaseModel):
    transcript: str

class PolitenessRequest(BaseModel):
    text: str
