import logging
from typing import Optional
from models import Lesson, PolitenessResult, PronunciationFeedback, TutorReply, TutorSessionState
from services.feedback_generator import FeedbackGenerator
from services.normalizer import normalize
from services.politeness import PolitenessAnalyzer
from services.pronunciation import PronunciationAnalyzer
from services.session import TutorSession

class FrenchTutorEngine:
    """Scores transcribed utterances against lesson phrases and tracks progress.

    Not safe for concurrent use: at most one analyze_user_speech call may be
    in flight per instance. Callers sharing an engine must serialize access.
    """

    def __init__(self,
                 pronunciation_analyzer: Optional[PronunciationAnalyzer] = None,
                 feedback_generator: Optional[FeedbackGenerator] = None,
                 politeness_analyzer: Optional[PolitenessAnalyzer] = None):
        self.pronunciation_analyzer = pronunciation_analyzer or PronunciationAnalyzer()
        self.feedback_generator = feedback_generator or FeedbackGenerator()
        self.politeness_analyzer = politeness_analyzer or PolitenessAnalyzer()
        self.session = TutorSession()

    def analyze_user_speech(self, transcript: str, lesson: Lesson) -> PronunciationFeedback:
        """Score a transcript against the lesson's target phrase"""
        spoken_words = normalize(transcript)
        target_words = normalize(lesson.target_phrase)

        match = self.pronunciation_analyzer.score(spoken_words, target_words)
        logging.debug(f"[{lesson.id}] matched={match.correct_words} missed={match.incorrect_words}")

        feedback = self.feedback_generator.generate_feedback(
            match.accuracy, match.correct_words, match.incorrect_words, lesson
        )
        # Reply reflects the step the learner was on when speaking
        tutor_response = self.feedback_generator.generate_tutor_response(
            match.accuracy, lesson, self.session.current_step
        )
        suggestions = self.feedback_generator.generate_suggestions(match.incorrect_words, lesson)

        state = self.session.record(match.accuracy)
        logging.info(
            f"[{lesson.id}] accuracy={match.accuracy}% step={state.current_step.value} "
            f"attempts={state.attempts}"
        )

        return PronunciationFeedback(
            accuracy=match.accuracy,
            correct_words=match.correct_words,
            incorrect_words=match.incorrect_words,
            feedback=feedback,
            tutor_response=tutor_response,
            suggestions=suggestions,
        )

    def target_phrase_reply(self, lesson: Lesson) -> TutorReply:
        """The phrase to play during the listen step, with its translation"""
        translation = lesson.translation or f"Translation for: {lesson.target_phrase}"
        return TutorReply(phrase=lesson.target_phrase, translation=translation)

    def analyze_politeness(self, text: str) -> PolitenessResult:
        return self.politeness_analyzer.analyze_politeness(text)

    def get_session_state(self) -> TutorSessionState:
        return self.session.snapshot()

    def complete_lesson(self, lesson_id: str) -> TutorSessionState:
        return self.session.complete_lesson(lesson_id)

    def reset_session(self) -> TutorSessionState:
        logging.info("Tutor session reset")
        return self.session.reset()
