import logging
import random
from typing import Callable, Dict, List, Optional, Sequence, Tuple
from config import Config
from models import Lesson, ResponseCategory, TutorReply, TutorStep

# (French, English) templates; {target} is replaced by the lesson's target phrase
TUTOR_RESPONSES: Dict[ResponseCategory, Tuple[Tuple[str, str], ...]] = {
    ResponseCategory.EXCELLENT: (
        ("Parfait! Vous maîtrisez très bien cette phrase!",
         "Perfect! You master this phrase very well!"),
        ("Magnifique! Votre accent s'améliore beaucoup!",
         "Magnificent! Your accent is improving a lot!"),
        ("Très bien! Passons au prochain exercice!",
         "Very good! Let's move on to the next exercise!"),
    ),
    ResponseCategory.GOOD: (
        ("Bien! Répétons encore une fois: {target}",
         "Good! Let's repeat once more: {target}"),
        ("Pas mal! Écoutez la pronunciation: {target}",
         "Not bad! Listen to the pronunciation: {target}"),
        ("Bon travail! Essayez de prononcer plus clairement.",
         "Good work! Try to pronounce more clearly."),
    ),
    ResponseCategory.NEEDS_WORK: (
        ("Écoutez attentivement et répétez: {target}",
         "Listen carefully and repeat: {target}"),
        ("Prenez votre temps. Répétez après moi: {target}",
         "Take your time. Repeat after me: {target}"),
        ("N'hésitez pas! Essayons syllabe par syllabe.",
         "Don't hesitate! Let's try syllable by syllable."),
    ),
}

# Substring -> pronunciation tip, checked independently for every word
PRONUNCIATION_TIPS: Tuple[Tuple[str, str], ...] = (
    ("r", "For '{word}': Practice the French 'R' sound from the back of your throat"),
    ("u", "For '{word}': French 'u' is pronounced with rounded lips, like 'ü'"),
    ("j", "For '{word}': French 'j' sounds like 'zh' in 'measure'"),
    ("ch", "For '{word}': French 'ch' sounds like 'sh' in 'shoe'"),
)

class FeedbackGenerator:
    def __init__(self, chooser: Optional[Callable[[Sequence], object]] = None):
        # Injected so tests can pin the tutor reply
        self.chooser = chooser or random.Random(Config.RANDOM_SEED).choice
        self.excellent_threshold = Config.EXCELLENT_FEEDBACK_THRESHOLD
        self.good_threshold = Config.GOOD_FEEDBACK_THRESHOLD
        self.fair_threshold = Config.FAIR_FEEDBACK_THRESHOLD
        self.max_suggestion_words = Config.MAX_SUGGESTION_WORDS

    def generate_feedback(self, accuracy: int, correct_words: List[str],
                          incorrect_words: List[str], lesson: Lesson) -> str:
        """Human readable feedback for an accuracy band"""
        if accuracy >= self.excellent_threshold:
            return "Excellent! Votre pronunciation est parfaite! 🎉"
        elif accuracy >= self.good_threshold:
            return (f"Très bien! Correct words: {', '.join(correct_words)}. "
                    f"Let's practice: {', '.join(incorrect_words[:2])}")
        elif accuracy >= self.fair_threshold:
            return (f"Bon effort! Focus on these words: {', '.join(incorrect_words[:3])}. "
                    f"Remember: {lesson.grammar}")
        else:
            return "Essayons encore! Listen carefully to the target phrase and repeat slowly."

    @staticmethod
    def categorize(accuracy: int) -> ResponseCategory:
        if accuracy >= Config.EXCELLENT_RESPONSE_THRESHOLD:
            return ResponseCategory.EXCELLENT
        if accuracy >= Config.GOOD_RESPONSE_THRESHOLD:
            return ResponseCategory.GOOD
        return ResponseCategory.NEEDS_WORK

    def generate_tutor_response(self, accuracy: int, lesson: Lesson,
                                current_step: TutorStep) -> TutorReply:
        """Pick one of the canned replies for the accuracy category.

        The step is accepted so callers can pass the session position; the
        bundled reply tables are the same for every step.
        """
        category = self.categorize(accuracy)
        phrase, translation = self.chooser(TUTOR_RESPONSES[category])
        reply = TutorReply(
            phrase=phrase.format(target=lesson.target_phrase),
            translation=translation.format(target=lesson.target_phrase),
        )
        logging.debug(f"Tutor reply ({category.value}, step={current_step.value}): {reply.phrase}")
        return reply

    def generate_suggestions(self, incorrect_words: List[str], lesson: Lesson) -> List[str]:
        """Pronunciation tips for the first few incorrect words"""
        suggestions = []
        for word in incorrect_words[:self.max_suggestion_words]:
            for fragment, tip in PRONUNCIATION_TIPS:
                if fragment in word:
                    suggestions.append(tip.format(word=word))
        return suggestions
