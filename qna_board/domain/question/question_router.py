# domain/question/question_router.py
from dataclasses import asdict
from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Response, status

from ...events import EventHub, get_event_hub
from ...models import Question, Reply
from ...store import QuestionNotFoundError, QuestionStore, get_store
from .question_schema import QuestionCreate, QuestionSchema, ReplyCreate, ReplySchema

router = APIRouter(
    prefix='/api/questions',
    tags=['question'],
)


def _question_payload(question: Question) -> dict:
    return QuestionSchema.model_validate(asdict(question)).model_dump(mode='json', by_alias=True)


def _reply_payload(reply: Reply) -> dict:
    return ReplySchema.model_validate(asdict(reply)).model_dump(mode='json', by_alias=True)


@router.get(
    '',
    response_model=List[QuestionSchema],
    summary='질문 목록 조회',
)
def question_list(store: QuestionStore = Depends(get_store)) -> List[Question]:
    """
    질문 목록을 조회합니다.

    - 최근에 등록된 질문이 먼저 나옵니다.
    - 각 질문에는 등록 순서대로 정렬된 답글 목록(replies)이 포함됩니다.
    """
    return store.list_questions()


@router.post(
    '',
    response_model=QuestionSchema,
    summary='질문 등록',
    status_code=status.HTTP_201_CREATED,
)
def question_create(
    question_in: QuestionCreate,
    background_tasks: BackgroundTasks,
    store: QuestionStore = Depends(get_store),
    hub: EventHub = Depends(get_event_hub),
) -> Question:
    """
    새로운 질문을 등록합니다.

    - 요청 본문은 QuestionCreate 스키마(text)를 따릅니다.
    - 빈 문자열도 그대로 저장합니다.
    - 응답 후 실시간 클라이언트에게 question_created 이벤트를 보냅니다.
    """
    question = store.create_question(question_in.text)
    background_tasks.add_task(hub.broadcast, 'question_created', _question_payload(question))
    return question


@router.delete(
    '',
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary='전체 질문 삭제',
)
def question_clear(
    background_tasks: BackgroundTasks,
    store: QuestionStore = Depends(get_store),
    hub: EventHub = Depends(get_event_hub),
) -> None:
    store.clear_all_questions()
    background_tasks.add_task(hub.broadcast, 'questions_cleared', {})


@router.get(
    '/{question_id}',
    response_model=QuestionSchema,
    summary='질문 상세 조회',
)
def question_detail(question_id: str, store: QuestionStore = Depends(get_store)) -> Question:
    try:
        return store.get_question(question_id)
    except QuestionNotFoundError:
        raise HTTPException(status_code=404, detail='Question not found')


@router.delete(
    '/{question_id}',
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary='질문 삭제',
)
def question_delete(
    question_id: str,
    background_tasks: BackgroundTasks,
    store: QuestionStore = Depends(get_store),
    hub: EventHub = Depends(get_event_hub),
) -> None:
    """
    질문과 딸린 답글을 모두 삭제합니다.
    - 없는 id여도 오류 없이 204를 돌려줍니다(멱등).
    """
    if store.delete_question(question_id):
        background_tasks.add_task(hub.broadcast, 'question_deleted', {'questionId': question_id})


@router.post(
    '/{question_id}/replies',
    response_model=ReplySchema,
    summary='답글 등록',
    status_code=status.HTTP_201_CREATED,
)
def reply_create(
    question_id: str,
    reply_in: ReplyCreate,
    background_tasks: BackgroundTasks,
    store: QuestionStore = Depends(get_store),
    hub: EventHub = Depends(get_event_hub),
) -> Reply:
    """
    질문에 답글을 등록합니다.

    - 질문이 없으면 404(Question not found)를 돌려주고 아무것도 저장하지 않습니다.
    - 답글은 해당 질문의 답글 목록 맨 뒤에 추가됩니다.
    """
    try:
        reply = store.add_reply(question_id, reply_in.text)
    except QuestionNotFoundError:
        raise HTTPException(status_code=404, detail='Question not found')

    background_tasks.add_task(
        hub.broadcast,
        'reply_added',
        {'questionId': question_id, 'reply': _reply_payload(reply)},
    )
    return reply


@router.delete(
    '/{question_id}/replies/{reply_id}',
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary='답글 삭제',
)
def reply_delete(
    question_id: str,
    reply_id: str,
    background_tasks: BackgroundTasks,
    store: QuestionStore = Depends(get_store),
    hub: EventHub = Depends(get_event_hub),
) -> None:
    if store.delete_reply(question_id, reply_id):
        background_tasks.add_task(
            hub.broadcast,
            'reply_deleted',
            {'questionId': question_id, 'replyId': reply_id},
        )
