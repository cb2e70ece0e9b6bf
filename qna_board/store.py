# store.py
import logging
import threading
from dataclasses import replace
from typing import Dict, List

from fastapi import Request

from .models import Question, Reply

logger = logging.getLogger(__name__)


class BoardError(Exception):
    """게시판 저장소에서 발생하는 예외의 기본 클래스."""


class QuestionNotFoundError(BoardError):
    def __init__(self, question_id: str):
        super().__init__(f'Question not found: {question_id}')
        self.question_id = question_id


def _snapshot(question: Question) -> Question:
    # 답글 리스트를 복사해서, 락 밖에서 직렬화하는 동안 원본이 바뀌어도 안전하게 한다.
    return replace(question, replies=list(question.replies))


class QuestionStore:
    """
    질문/답글을 메모리에 보관하는 저장소.

    - 질문 id -> Question 딕셔너리 하나로 전체 상태를 관리한다.
    - FastAPI는 동기 핸들러를 스레드풀에서 실행하므로,
      모든 연산은 하나의 락 안에서 수행한다.
    - 서버가 떠 있는 동안만 유지되며 재시작하면 사라진다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._questions: Dict[str, Question] = {}

    def list_questions(self) -> List[Question]:
        """전체 질문 목록을 최신 등록 순으로 반환한다."""
        with self._lock:
            return [_snapshot(q) for q in reversed(list(self._questions.values()))]

    def get_question(self, question_id: str) -> Question:
        with self._lock:
            question = self._questions.get(question_id)
            if question is None:
                raise QuestionNotFoundError(question_id)
            return _snapshot(question)

    def create_question(self, text: str) -> Question:
        question = Question(text=text)
        with self._lock:
            self._questions[question.id] = question
            created = _snapshot(question)
        logger.info('질문 등록: id=%s', question.id)
        return created

    def add_reply(self, question_id: str, text: str) -> Reply:
        """
        질문에 답글을 추가한다.
        질문이 없으면 QuestionNotFoundError를 던지고 저장소는 그대로 둔다.
        """
        with self._lock:
            question = self._questions.get(question_id)
            if question is None:
                logger.warning('답글 등록 실패, 질문 없음: id=%s', question_id)
                raise QuestionNotFoundError(question_id)
            reply = Reply(text=text)
            question.replies.append(reply)
        logger.info('답글 등록: question=%s reply=%s', question_id, reply.id)
        return reply

    def delete_question(self, question_id: str) -> bool:
        """질문(과 딸린 답글)을 삭제한다. 없으면 아무 일도 하지 않는다."""
        with self._lock:
            removed = self._questions.pop(question_id, None)
        if removed is None:
            logger.debug('삭제할 질문 없음: id=%s', question_id)
            return False
        logger.info('질문 삭제: id=%s (답글 %d개)', question_id, len(removed.replies))
        return True

    def delete_reply(self, question_id: str, reply_id: str) -> bool:
        """일치하는 첫 번째 답글을 삭제한다. 질문이나 답글이 없으면 무시한다."""
        with self._lock:
            question = self._questions.get(question_id)
            if question is not None:
                for index, reply in enumerate(question.replies):
                    if reply.id == reply_id:
                        del question.replies[index]
                        logger.info('답글 삭제: question=%s reply=%s', question_id, reply_id)
                        return True
        logger.debug('삭제할 답글 없음: question=%s reply=%s', question_id, reply_id)
        return False

    def clear_all_questions(self) -> int:
        with self._lock:
            count = len(self._questions)
            self._questions.clear()
        logger.info('전체 질문 삭제: %d개', count)
        return count


def get_store(request: Request) -> QuestionStore:
    """
    FastAPI Depends에서 사용할 저장소 의존성 함수입니다.

    앱 생성 시 app.state.store 에 만들어 둔 저장소 하나를
    모든 요청이 공유합니다.

    라우터에서는 다음과 같이 사용합니다.
        store: QuestionStore = Depends(get_store)
    """
    return request.app.state.store
