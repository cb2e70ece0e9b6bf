# config.py
import logging
import os
from typing import List, Optional

# 바인드 설정 (환경변수 우선, 없으면 기본값)
DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 8000

BIND_HOST = os.environ.get('BIND_HOST', DEFAULT_HOST)

# 쉼표로 구분된 허용 출처 목록. 기본은 모든 출처 허용.
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.environ.get('CORS_ORIGINS', '*').split(',')
    if origin.strip()
]

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'


def port_from_env(default: int = DEFAULT_PORT) -> int:
    """
    PORT 환경변수를 정수로 읽는다. 없으면 기본값.
    숫자가 아니면 어떤 값이 문제인지 알려주는 ValueError를 던진다.
    """
    port_env: Optional[str] = os.environ.get('PORT')
    if not port_env:
        return default
    try:
        return int(port_env)
    except ValueError:
        raise ValueError(f'PORT 환경변수는 숫자여야 합니다: {port_env!r}') from None


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    qna_board 패키지 로거에 콘솔 핸들러를 한 번만 붙인다.
    이미 핸들러가 있으면 레벨만 다시 맞춘다.
    """
    logger = logging.getLogger('qna_board')
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
