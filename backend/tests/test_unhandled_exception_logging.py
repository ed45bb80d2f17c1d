import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from tenpin.exceptions import DomainException
from tenpin.main import domain_exception_handler, unhandled_exception_handler


def test_unhandled_exception_logs_traceback(caplog):
    app = FastAPI()
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/boom")
    def boom():
        raise ValueError("boom")

    client = TestClient(app, raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR):
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["code"] == "internal_server_error"
    record = next((r for r in caplog.records if r.message == "Unhandled exception"), None)
    assert record is not None
    assert record.exc_info[0] is ValueError
    assert "ValueError: boom" in caplog.text


def test_domain_exception_is_not_logged_as_error(caplog):
    app = FastAPI()
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/teapot")
    def teapot():
        raise DomainException(418, "Teapot", code="teapot", detail="short and stout")

    client = TestClient(app, raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR):
        response = client.get("/teapot")

    assert response.status_code == 418
    assert response.json() == {
        "type": "about:blank",
        "title": "Teapot",
        "detail": "short and stout",
        "status": 418,
        "instance": "/teapot",
        "code": "teapot",
    }
    assert not any(r.message == "Unhandled exception" for r in caplog.records)
