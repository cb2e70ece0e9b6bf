"""
익명 질문/답글 게시판 API

- 질문 등록, 답글 등록, 목록 조회, 삭제(질문/답글/전체)
- 모든 데이터는 서버 프로세스 메모리에만 유지된다.
"""

__version__ = '0.1.0'
