"""
FestiPlan 웹 API 진입점
실행: python run.py
접속: http://localhost:8000/docs
"""
import logging
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv


def main():
    """메인 실행 함수"""
    # .env는 설정 모듈보다 먼저 로드
    load_dotenv()
    from src import config

    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    url = f"http://{config.HOST}:{config.PORT}"

    print("=" * 60)
    print("FestiPlan - 축제 방문객 예측 & 시나리오 최적화")
    print("=" * 60)
    print(f"[*] 서버 주소: {url}")
    print(f"[*] 프로젝트 디렉토리: {Path.cwd()}")
    print(f"[*] 자동 재시작: {'활성화' if config.RELOAD else '비활성화'}")
    print(f"[*] 최적화 샘플 수: {config.SAMPLE_COUNT}, 워커: {config.WORKERS}")
    print()
    print("서버를 중지하려면 Ctrl+C를 누르세요.")
    print("=" * 60)

    try:
        uvicorn.run(
            "api.app:app",
            host=config.HOST,
            port=config.PORT,
            reload=config.RELOAD,
            reload_dirs=["api", "src"],
            log_level=config.LOG_LEVEL,
        )
    except KeyboardInterrupt:
        print("\n\n[*] 서버를 종료합니다.")
    except Exception as e:
        print(f"\n[ERROR] 서버 실행 중 오류 발생: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
