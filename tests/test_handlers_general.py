import threading

from sqlalchemy import create_engine

from tutorweb.service.handlers.general import health_check_handler
from tutorweb.service.state import AppState


def make_state(message="I'm OK."):
    return AppState(health_check_response=message, db=create_engine("sqlite://"))


def test_first_check_reports_zero_visits():
    state = make_state()
    assert health_check_handler(state) == "I'm OK. 0 times"


def test_each_check_counts_the_one_before():
    state = make_state("ready")
    replies = [health_check_handler(state) for _ in range(3)]
    assert replies == ["ready 0 times", "ready 1 times", "ready 2 times"]
    assert state.visit_count == 3


def test_reply_starts_with_configured_message():
    state = make_state("all good")
    assert health_check_handler(state).startswith("all good ")


def test_concurrent_checks_are_all_counted():
    state = make_state()
    threads = [threading.Thread(target=health_check_handler, args=(state,)) for _ in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert state.visit_count == 20