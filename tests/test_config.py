import importlib

import pytest
from fastapi.testclient import TestClient

from qna_board import config
from qna_board.main import create_app, parse_args


@pytest.fixture
def reload_config(monkeypatch):
    # 테스트가 끝나면 환경변수를 되돌리고 기본 설정으로 다시 읽는다.
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(monkeypatch, reload_config):
    for name in ('BIND_HOST', 'PORT', 'CORS_ORIGINS'):
        monkeypatch.delenv(name, raising=False)
    reload_config()

    assert config.BIND_HOST == '0.0.0.0'
    assert config.CORS_ORIGINS == ['*']
    assert config.port_from_env() == 8000


def test_env_overrides(monkeypatch, reload_config):
    monkeypatch.setenv('BIND_HOST', '127.0.0.1')
    monkeypatch.setenv('CORS_ORIGINS', 'http://a.example, http://b.example,')
    monkeypatch.setenv('PORT', '9000')
    reload_config()

    assert config.BIND_HOST == '127.0.0.1'
    assert config.CORS_ORIGINS == ['http://a.example', 'http://b.example']
    assert config.port_from_env() == 9000


def test_non_numeric_port_names_the_value(monkeypatch):
    monkeypatch.setenv('PORT', 'abc')

    with pytest.raises(ValueError, match="'abc'"):
        config.port_from_env()


def test_parse_args_overrides():
    args = parse_args(['--host', 'h', '--port', '1'])

    assert args.host == 'h'
    assert args.port == 1
    assert args.reload is False


def test_parse_args_reads_port_from_env(monkeypatch):
    monkeypatch.setenv('PORT', '9001')
    assert parse_args([]).port == 9001


def test_parse_args_rejects_bad_port_env(monkeypatch):
    monkeypatch.setenv('PORT', 'abc')

    with pytest.raises(SystemExit):
        parse_args([])


def test_cors_origins_limit_allowed_origins(monkeypatch, reload_config):
    monkeypatch.setenv('CORS_ORIGINS', 'http://allowed.example')
    reload_config()

    with TestClient(create_app()) as client:
        allowed = client.get('/health', headers={'Origin': 'http://allowed.example'})
        blocked = client.get('/health', headers={'Origin': 'http://other.example'})

    assert allowed.headers['access-control-allow-origin'] == 'http://allowed.example'
    assert 'access-control-allow-origin' not in blocked.headers
