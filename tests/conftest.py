import pytest
from fastapi.testclient import TestClient

from qna_board.main import create_app
from qna_board.store import QuestionStore


@pytest.fixture
def store():
    return QuestionStore()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    # with 블록으로 열어 두면 HTTP 요청과 WebSocket 이 같은 이벤트 루프를 쓴다.
    with TestClient(app) as c:
        yield c
