from models import TUTOR_STEPS, TutorSessionState, TutorStep
from services.session import TutorSession


def test_initial_state():
    assert TutorSession().snapshot() == TutorSessionState(
        current_step=TutorStep.LISTEN, attempts=0, score=0, completed_lessons=[]
    )


def test_record_advances_on_high_accuracy():
    session = TutorSession()
    state = session.record(90)
    assert state.current_step == TutorStep.REPEAT
    assert state.attempts == 1
    assert state.score == 90


def test_record_stays_on_low_accuracy():
    session = TutorSession()
    session.record(85)
    state = session.record(84)
    assert state.current_step == TutorStep.REPEAT
    assert state.attempts == 2
    assert state.score == 169


def test_steps_never_regress_and_clamp_at_reward():
    session = TutorSession()
    seen = []
    for accuracy in [100, 20, 95, 0, 100, 100, 100, 100, 40]:
        seen.append(TUTOR_STEPS.index(session.record(accuracy).current_step))
    assert seen == sorted(seen)
    assert session.current_step == TutorStep.REWARD
    assert session.snapshot().attempts == 9


def test_custom_advance_threshold():
    session = TutorSession(advance_threshold=50)
    assert session.record(50).current_step == TutorStep.REPEAT


def test_complete_lesson_records_once():
    session = TutorSession()
    session.complete_lesson("cafe-order")
    state = session.complete_lesson("cafe-order")
    assert state.completed_lessons == ["cafe-order"]


def test_reset_restores_initial_state():
    session = TutorSession()
    session.record(100)
    session.complete_lesson("cafe-order")
    assert session.reset() == TutorSessionState()


def test_snapshot_is_detached():
    session = TutorSession()
    snapshot = session.snapshot()
    snapshot.attempts = 42
    snapshot.completed_lessons.append("metro-directions")
    assert session.snapshot() == TutorSessionState()
