from typing import List, Optional
from models import Lesson

LESSONS = (
    Lesson(
        id="cafe-order",
        title="Commander au Café",
        scenario="Order a croissant and coffee",
        target_phrase="Bonjour, je voudrais un croissant et un café, s'il vous plaît.",
        vocabulary=["croissant", "café", "s'il vous plaît", "bonjour"],
        grammar="Conditional (je voudrais)",
        translation="Hello, I would like a croissant and a coffee, please.",
    ),
    Lesson(
        id="metro-directions",
        title="Demander le Chemin",
        scenario="Ask for directions to the metro",
        target_phrase="Excusez-moi, où est la station de métro la plus proche?",
        vocabulary=["excusez-moi", "station", "métro", "proche"],
        grammar="Question formation (où est...?)",
        translation="Excuse me, where is the nearest metro station?",
    ),
    Lesson(
        id="bakery-shopping",
        title="À la Boulangerie",
        scenario="Buy bread at the bakery",
        target_phrase="Une baguette bien cuite, s'il vous plaît.",
        vocabulary=["baguette", "bien cuite", "boulangerie"],
        grammar="Adjective agreement (bien cuite)",
        translation="One well-baked baguette, please.",
    ),
)

def list_lessons() -> List[Lesson]:
    return list(LESSONS)

def get_lesson(lesson_id: str) -> Optional[Lesson]:
    return next((lesson for lesson in LESSONS if lesson.id == lesson_id), None)
