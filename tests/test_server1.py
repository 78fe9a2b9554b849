from http import HTTPStatus
from unittest.mock import patch

from flask import Flask

from tutorweb.service.server1 import create_app, health_check_handler, main


def _rules(app):
    return sorted((rule.rule, tuple(sorted(rule.methods))) for rule in app.url_map.iter_rules())


def test_handler_reply():
    assert health_check_handler() == "Web Service is running!"


def test_health_route_returns_handler_reply_as_json():
    response = create_app().test_client().get("/health")
    assert response.status_code == HTTPStatus.OK
    assert response.get_json() == "Web Service is running!"


def test_reply_does_not_change_between_calls():
    client = create_app().test_client()
    assert client.get("/health").get_json() == "Web Service is running!"
    assert client.get("/health").get_json() == "Web Service is running!"


def test_other_paths_are_not_served():
    assert create_app().test_client().get("/teachers/").status_code == HTTPStatus.NOT_FOUND


def test_main_binds_localhost_3000_by_default():
    with patch.object(Flask, "run", autospec=True) as run:
        main([])
    assert run.call_count == 1
    assert run.call_args.kwargs == {"host": "localhost", "port": 3000}
    started = run.call_args.args[0]
    assert _rules(started) == _rules(create_app())
    assert started.test_client().get("/health").get_json() == health_check_handler()