import logging
import threading
import uuid
from typing import List
from fastapi import FastAPI, HTTPException

from config import Config
from models import (
    EvaluationRequest,
    Lesson,
    PolitenessRequest,
    PolitenessResult,
    PronunciationFeedback,
    TranscriptRequest,
    TutorReply,
    TutorSessionState,
)
from services.lesson_catalog import get_lesson, list_lessons
from services.tutor_engine import FrenchTutorEngine

# Configure logging
logging.basicConfig(level=Config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

app = FastAPI(title="French Tutor Scoring Service", version="1.0.0")

# One engine per process; the lock keeps its session single-writer
tutor_engine = FrenchTutorEngine()
engine_lock = threading.Lock()

def _find_lesson(lesson_id: str) -> Lesson:
    lesson = get_lesson(lesson_id)
    if lesson is None:
        raise HTTPException(status_code=404, detail=f"Unknown lesson: {lesson_id}")
    return lesson

def _evaluate(transcript: str, lesson: Lesson) -> PronunciationFeedback:
    request_id = str(uuid.uuid4())[:8]
    logging.info(f"[{request_id}] Evaluating transcript for lesson: {lesson.id}")
    try:
        with engine_lock:
            result = tutor_engine.analyze_user_speech(transcript, lesson)
        logging.info(f"[{request_id}] Accuracy {result.accuracy}% for lesson: {lesson.id}")
        return result
    except Exception as e:
        logging.error(f"[{request_id}] Evaluation error for lesson {lesson.id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to evaluate transcript: {str(e)}")

@app.get("/lessons", response_model=List[Lesson])
def lessons():
    """List the bundled lessons"""
    return list_lessons()

@app.get("/lessons/{lesson_id}", response_model=Lesson)
def lesson_detail(lesson_id: str):
    return _find_lesson(lesson_id)

@app.post("/evaluate", response_model=PronunciationFeedback)
def evaluate(request: EvaluationRequest):
    """
    Scores a transcribed utterance against the supplied lesson and
    advances the tutoring session.
    """
    return _evaluate(request.transcript, request.lesson)

@app.post("/lessons/{lesson_id}/evaluate", response_model=PronunciationFeedback)
def evaluate_lesson(lesson_id: str, request: TranscriptRequest):
    """Scores a transcribed utterance against a bundled lesson"""
    return _evaluate(request.transcript, _find_lesson(lesson_id))

@app.get("/lessons/{lesson_id}/target", response_model=TutorReply)
def lesson_target(lesson_id: str):
    """Target phrase and translation for the listen step"""
    return tutor_engine.target_phrase_reply(_find_lesson(lesson_id))

@app.post("/politeness", response_model=PolitenessResult)
def politeness(request: PolitenessRequest):
    """Detect the register (formal, informal or mixed) of an utterance"""
    request_id = str(uuid.uuid4())[:8]
    logging.info(f"[{request_id}] Analyzing politeness")
    try:
        result = tutor_engine.analyze_politeness(request.text)
        logging.info(f"[{request_id}] Register: {result.level.value}")
        return result
    except Exception as e:
        logging.error(f"[{request_id}] Politeness analysis error: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to analyze politeness: {str(e)}")

@app.get("/session", response_model=TutorSessionState)
def session_state():
    with engine_lock:
        return tutor_engine.get_session_state()

@app.post("/session/reset", response_model=TutorSessionState)
def reset_session():
    with engine_lock:
        return tutor_engine.reset_session()

@app.post("/session/completed/{lesson_id}", response_model=TutorSessionState)
def complete_lesson(lesson_id: str):
    """Mark a lesson as completed"""
    with engine_lock:
        return tutor_engine.complete_lesson(lesson_id)

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "French Tutor Scoring Service is running"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
