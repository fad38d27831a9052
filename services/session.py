from typing import Optional
from config import Config
from models import TUTOR_STEPS, TutorSessionState, TutorStep

class TutorSession:
    """Progress through the listen -> reward steps for one engine.

    Single writer: the owning engine is the only caller allowed to mutate it.
    """

    def __init__(self, advance_threshold: Optional[int] = None):
        self.advance_threshold = (Config.STEP_ADVANCE_THRESHOLD
                                  if advance_threshold is None else advance_threshold)
        self._state = TutorSessionState()

    @property
    def current_step(self) -> TutorStep:
        return self._state.current_step

    def record(self, accuracy: int) -> TutorSessionState:
        """Count an attempt and advance one step on a good enough score"""
        self._state.attempts += 1
        self._state.score += accuracy
        if accuracy >= self.advance_threshold:
            self._advance()
        return self.snapshot()

    def _advance(self) -> None:
        index = TUTOR_STEPS.index(self._state.current_step)
        if index < len(TUTOR_STEPS) - 1:
            self._state.current_step = TUTOR_STEPS[index + 1]

    def complete_lesson(self, lesson_id: str) -> TutorSessionState:
        if lesson_id not in self._state.completed_lessons:
            self._state.completed_lessons.append(lesson_id)
        return self.snapshot()

    def reset(self) -> TutorSessionState:
        self._state = TutorSessionState()
        return self.snapshot()

    def snapshot(self) -> TutorSessionState:
        return self._state.model_copy(deep=True)
