# main.py
import argparse
import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__, config
from .domain.question.question_router import router as question_router
from .events import EventHub
from .events import router as event_router
from .store import QuestionStore

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    게시판 API 앱을 만든다.

    저장소와 실시간 허브는 앱마다 하나씩 만들어 app.state 에 두고,
    라우터에서는 Depends 로 주입받아 사용한다.
    """
    config.configure_logging()

    app = FastAPI(
        title='Anonymous Q&A Board API',
        description='익명 질문/답글 게시판 API (메모리 저장소)',
        version=__version__,
    )
    app.state.store = QuestionStore()
    app.state.events = EventHub()

    # CORS 설정 (기본은 모든 출처 허용, CORS_ORIGINS 환경변수로 제한 가능)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    @app.get('/', summary='헬스 체크용 기본 엔드포인트')
    def read_root():
        return {'message': 'Q&A Board API is running.'}

    @app.get('/health', summary='서버 상태 확인')
    def health_check():
        return {'status': 'ok', 'time': datetime.now(timezone.utc).isoformat()}

    # question 라우터, 실시간 이벤트 라우터 등록
    app.include_router(question_router)
    app.include_router(event_router)
    return app


app = create_app()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='익명 질문/답글 게시판 API 서버')
    parser.add_argument('--host', default=config.BIND_HOST, help='바인드 주소 (기본: BIND_HOST 또는 0.0.0.0)')
    parser.add_argument('--port', type=int, default=None, help='포트 (기본: PORT 또는 8000)')
    parser.add_argument('--reload', action='store_true', help='코드 변경 시 자동 재시작(개발용)')
    args = parser.parse_args(argv)

    # --port 가 없을 때만 PORT 환경변수를 읽는다.
    if args.port is None:
        try:
            args.port = config.port_from_env()
        except ValueError as exc:
            parser.error(str(exc))
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    """서버 실행 엔트리포인트."""
    import uvicorn

    args = parse_args(argv)
    logger.info('서버 시작: http://%s:%d/ (실시간 엔드포인트: /ws)', args.host, args.port)
    uvicorn.run(
        'qna_board.main:app',
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == '__main__':
    main()
