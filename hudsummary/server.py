"""
server.py - HUD 키워드 요약 FastAPI 서버

호스트 플랫폼(스마트 글래스 세션)과 요약 코어 사이의 접점입니다.
WebSocket으로 전사 이벤트를 받아 한 줄 요약 표시 요청을 돌려줍니다.

주요 엔드포인트:
    - GET /health: 서버 상태 및 활성 세션 수
    - POST /summarize: 텍스트 하나를 바로 요약 (디버깅/연동 확인용)
    - WebSocket /session: 세션 이벤트 스트림

WebSocket 메시지:
    입력 (클라이언트 → 서버):
        {"type": "transcription", "text": "...", "isFinal": true}
        {"type": "battery", "level": 80, "charging": false}

    출력 (서버 → 클라이언트):
        {"type": "display", "text": "키워드 요약: ...", "view": "main", "durationMs": 3000}
        {"type": "error", "message": "..."}

인증:
    x-api-key 헤더 또는 api_key 쿼리 파라미터가 MENTRAOS_API_KEY와 같아야 합니다.
    일치하지 않으면 연결을 1008 코드로 닫습니다.

사용법:
    $ hudsummary-server --port 3000
    $ python -m hudsummary.server --echo-original
"""

import json
import logging
import secrets
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from hudsummary.config import AppConfig, load_config
from hudsummary.parse_args import parse_args
from hudsummary.session import SummarySession, UnknownEventError
from hudsummary.summary import DEFAULT_TOP_K, extract_keywords, is_korean, summarize_text

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


class SummarizeRequest(BaseModel):
    text: str
    top_k: int = Field(default=DEFAULT_TOP_K, ge=1, le=50)


class SummarizeResponse(BaseModel):
    summary: str
    keywords: List[str]
    is_korean: bool


def _is_authorized(websocket: WebSocket, api_key: str) -> bool:
    presented = websocket.headers.get("x-api-key") or websocket.query_params.get("api_key")
    if not presented:
        return False
    return secrets.compare_digest(presented.encode("utf-8"), api_key.encode("utf-8"))


def create_app(config: AppConfig) -> FastAPI:
    """
    설정을 받아 FastAPI 앱 생성

    Args:
        config: 검증된 AppConfig

    Returns:
        FastAPI 앱 (app.state.config, app.state.active_sessions 포함)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"서버 시작 (패키지: {config.package_name})")
        yield
        logger.info("서버 종료 중...")

    app = FastAPI(title="HUD Keyword Summary", lifespan=lifespan)
    app.state.config = config
    app.state.active_sessions = 0

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        """서버 상태 확인"""
        return {
            "status": "ok",
            "package": config.package_name,
            "active_sessions": app.state.active_sessions,
        }

    @app.post("/summarize", response_model=SummarizeResponse)
    async def summarize(request: SummarizeRequest):
        """텍스트 하나를 요약 (세션 없이)"""
        return SummarizeResponse(
            summary=summarize_text(request.text, top_k=request.top_k),
            keywords=extract_keywords(request.text, request.top_k),
            is_korean=is_korean(request.text),
        )

    @app.websocket("/session")
    async def session_endpoint(websocket: WebSocket):
        """
        WebSocket 엔드포인트: 세션 이벤트 처리

        연결 흐름:
            1. API 키 확인 (불일치 시 1008로 종료)
            2. 연결 수락, SummarySession 생성
            3. 안내 문구 전송
            4. 이벤트 수신 루프: 메시지마다 표시 요청 전송
            5. 연결 종료 시: 세션 정리
        """
        if not _is_authorized(websocket, config.api_key):
            logger.warning("API 키 불일치로 세션 연결 거부")
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
            return

        await websocket.accept()
        session = SummarySession(config)
        app.state.active_sessions += 1

        try:
            for request in session.start():
                await websocket.send_json(request.to_dict())

            while True:
                raw = await websocket.receive_text()
                try:
                    message = json.loads(raw)
                    if not isinstance(message, dict):
                        raise UnknownEventError("메시지는 JSON 객체여야 합니다")
                    requests = session.handle_message(message)
                except (ValueError, ValidationError) as e:
                    logger.warning(f"[{session.session_id}] 잘못된 메시지: {e}")
                    await websocket.send_json({"type": "error", "message": str(e)})
                    continue

                for request in requests:
                    await websocket.send_json(request.to_dict())

        except KeyError as e:
            # 텍스트가 아닌 프레임 수신 시 receive_text()가 KeyError 발생
            logger.warning(f"[{session.session_id}] 텍스트가 아닌 프레임 수신, 연결 종료: {e}")

        except WebSocketDisconnect:
            logger.info(f"[{session.session_id}] 클라이언트가 WebSocket 연결 끊음")

        except Exception as e:
            logger.error(f"session_endpoint에서 예상치 못한 오류: {e}", exc_info=True)

        finally:
            app.state.active_sessions -= 1
            session.close()

    return app


def main(argv: Optional[List[str]] = None):
    """
    CLI 진입점 (hudsummary-server)

    설정:
        - PACKAGE_NAME, MENTRAOS_API_KEY: 필수 (환경 변수 또는 .env, CLI로 덮어쓰기 가능)
        - SSL: --ssl-certfile, --ssl-keyfile 지정 시 HTTPS 활성화
        - 리버스 프록시: --forwarded-allow-ips 지정 시 허용
    """
    import uvicorn

    args = parse_args(argv)
    config = load_config(**vars(args))
    logging.getLogger().setLevel(config.log_level)

    uvicorn_kwargs = {
        "app": create_app(config),
        "host": config.host,
        "port": config.port,
        "log_level": config.log_level.lower(),
        "lifespan": "on",
    }

    if config.ssl_certfile or config.ssl_keyfile:
        # 인증서와 키 파일 둘 다 필요
        if not (config.ssl_certfile and config.ssl_keyfile):
            raise ValueError("--ssl-certfile과 --ssl-keyfile을 함께 지정해야 합니다.")
        uvicorn_kwargs = {
            **uvicorn_kwargs,
            "ssl_certfile": config.ssl_certfile,
            "ssl_keyfile": config.ssl_keyfile,
        }

    if config.forwarded_allow_ips:
        uvicorn_kwargs = {**uvicorn_kwargs, "forwarded_allow_ips": config.forwarded_allow_ips}

    logger.info(f"서버 시작: {config.host}:{config.port}")
    uvicorn.run(**uvicorn_kwargs)


if __name__ == "__main__":
    main()
