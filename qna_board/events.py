# events.py
import logging
from typing import Any, Dict, Set

from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)

router = APIRouter(tags=['events'])


class EventHub:
    """
    WebSocket 실시간 알림 허브.
    - 접속 시 환영 메시지('connected')를 보낸다.
    - 질문/답글이 바뀔 때마다 접속한 모든 클라이언트에게 JSON 이벤트를 방송한다.
    """

    def __init__(self) -> None:
        self._connections: Set[WebSocket] = set()

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self._connections.add(websocket)
        logger.info('실시간 클라이언트 접속 (현재 %d명)', len(self._connections))
        await websocket.send_json({'type': 'connected', 'payload': {'message': 'Welcome'}})

    def disconnect(self, websocket: WebSocket) -> None:
        self._connections.discard(websocket)
        logger.info('실시간 클라이언트 종료 (현재 %d명)', len(self._connections))

    async def broadcast(self, event_type: str, payload: Dict[str, Any]) -> None:
        """전체 클라이언트에게 이벤트 방송. 전송에 실패한 연결은 정리한다."""
        message = {'type': event_type, 'payload': payload}
        dead = []
        for websocket in list(self._connections):
            try:
                await websocket.send_json(message)
            except (WebSocketDisconnect, RuntimeError, OSError) as exc:
                logger.debug('이벤트 전송 실패, 연결 정리: %s', exc)
                dead.append(websocket)

        for websocket in dead:
            self._connections.discard(websocket)


def get_event_hub(request: Request) -> EventHub:
    return request.app.state.events


@router.websocket('/ws')
async def event_stream(websocket: WebSocket) -> None:
    hub: EventHub = websocket.app.state.events
    await hub.connect(websocket)
    try:
        # 클라이언트가 보내는 메시지(텍스트/바이너리)는 사용하지 않고, 연결 유지만 확인한다.
        while True:
            message = await websocket.receive()
            if message['type'] == 'websocket.disconnect':
                break
    finally:
        hub.disconnect(websocket)
