# python -m qna_board 로 실행했을 때의 엔트리 포인트
from .main import main

if __name__ == '__main__':
    main()
