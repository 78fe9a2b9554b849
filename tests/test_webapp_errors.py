from tutorweb.webapp.errors import NotFoundError, ServerError, TemplateError, WebAppError


def test_server_error_hides_its_message():
    err = ServerError("connection refused")
    assert err.status_code() == 500
    assert err.response_message() == "Internal server error"
    assert err.message == "connection refused"


def test_not_found_error_shows_its_message():
    err = NotFoundError("missing page")
    assert err.status_code() == 404
    assert err.to_response() == ({"error_message": "missing page"}, 404)


def test_template_error_response():
    err = TemplateError("Template error")
    assert err.to_response() == ({"error_message": "Template error"}, 500)


def test_errors_share_a_base_class():
    err = TemplateError("Template error")
    assert isinstance(err, WebAppError)
    assert err.status_code() == 500
    assert str(err) == "Template error"
    assert err.response_message() == "Template error"


def test_repr_names_the_kind():
    assert repr(NotFoundError("gone")) == "NotFoundError('gone')"