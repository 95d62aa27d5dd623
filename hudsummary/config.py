"""
config.py - 앱 설정 로드

설정 우선순위 (낮음 → 높음):
    1. AppConfig 기본값
    2. 환경 변수 (.env 파일 포함): PACKAGE_NAME, MENTRAOS_API_KEY, PORT
    3. CLI 인자 / 키워드 인자 (None 값은 무시)

PACKAGE_NAME과 MENTRAOS_API_KEY는 필수이며, 없으면 서버 시작 시
ConfigError를 발생시킵니다.
"""

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from hudsummary.display import ViewType

logger = logging.getLogger(__name__)

ENV_PACKAGE_NAME = "PACKAGE_NAME"
ENV_API_KEY = "MENTRAOS_API_KEY"
ENV_PORT = "PORT"


class ConfigError(ValueError):
    """필수 설정 누락 또는 잘못된 설정 값"""


@dataclass
class AppConfig:
    """
    HUD 요약 앱 설정

    Attributes:
        package_name (str): 호스트 플랫폼에 등록된 앱 패키지 이름
        api_key (str): 호스트 플랫폼 API 키 (세션 연결 인증에도 사용)
        host, port: 서버 주소 (기본값 0.0.0.0:3000)
        summary_view (str): 요약을 표시할 슬롯 ("main" 또는 "secondary")
        summary_duration_ms (int): 요약 표시 시간
        welcome_text (str): 세션 시작 시 표시할 문구
        welcome_duration_ms (int): 시작 문구 표시 시간
        echo_original (bool): 원문을 보조 화면에 함께 표시할지 여부
        echo_duration_ms (int): 원문 표시 시간
        top_k (int): 요약에 쓸 최대 키워드 수
        log_level (str): 로그 레벨
        ssl_certfile, ssl_keyfile: HTTPS 인증서/키 경로
        forwarded_allow_ips: 리버스 프록시 허용 IP
    """
    package_name: str = ""
    api_key: str = ""
    host: str = "0.0.0.0"
    port: int = 3000
    summary_view: str = ViewType.MAIN.value
    summary_duration_ms: int = 3000
    welcome_text: str = "키워드 요약 앱이 준비되었습니다."
    welcome_duration_ms: int = 2500
    echo_original: bool = False
    echo_duration_ms: int = 2000
    top_k: int = 6
    log_level: str = "INFO"
    ssl_certfile: Optional[str] = None
    ssl_keyfile: Optional[str] = None
    forwarded_allow_ips: Optional[str] = None

    @property
    def view(self) -> ViewType:
        return ViewType(self.summary_view)


def update_with_kwargs(_dict: Dict[str, Any], kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """
    딕셔너리를 kwargs로 업데이트 (존재하는 키, None이 아닌 값만)

    Args:
        _dict: 업데이트할 딕셔너리
        kwargs: 업데이트 소스 딕셔너리

    Returns:
        업데이트된 딕셔너리
    """
    _dict.update({
        k: v for k, v in kwargs.items() if k in _dict and v is not None
    })
    return _dict


def _env_params() -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if os.getenv(ENV_PACKAGE_NAME):
        params["package_name"] = os.environ[ENV_PACKAGE_NAME]
    if os.getenv(ENV_API_KEY):
        params["api_key"] = os.environ[ENV_API_KEY]
    if os.getenv(ENV_PORT):
        try:
            params["port"] = int(os.environ[ENV_PORT])
        except ValueError:
            raise ConfigError(f"{ENV_PORT} 값이 올바른 정수가 아닙니다: {os.environ[ENV_PORT]!r}")
    return params


def validate_config(config: AppConfig) -> AppConfig:
    """필수 값과 범위 검증, 문제가 있으면 ConfigError"""
    if not config.package_name:
        raise ConfigError(f"{ENV_PACKAGE_NAME} is not set in .env file")
    if not config.api_key:
        raise ConfigError(f"{ENV_API_KEY} is not set in .env file")
    if not 0 < config.port < 65536:
        raise ConfigError(f"포트 번호가 범위를 벗어났습니다: {config.port}")
    try:
        ViewType(config.summary_view)
    except ValueError:
        choices = ", ".join(v.value for v in ViewType)
        raise ConfigError(f"알 수 없는 표시 슬롯: {config.summary_view!r} (가능한 값: {choices})")
    for name in ("summary_duration_ms", "welcome_duration_ms", "echo_duration_ms"):
        if getattr(config, name) <= 0:
            raise ConfigError(f"{name} 값은 0보다 커야 합니다: {getattr(config, name)}")
    if config.top_k < 1:
        raise ConfigError(f"top_k 값은 1 이상이어야 합니다: {config.top_k}")
    return config


def load_config(env_file: Optional[str] = ".env", **kwargs: Any) -> AppConfig:
    """
    기본값, 환경 변수, kwargs를 병합하여 AppConfig 생성

    Args:
        env_file: 읽을 .env 파일 경로 (None이면 읽지 않음, 이미 설정된 환경 변수는 덮어쓰지 않음)
        **kwargs: CLI 인자 등 최우선 설정 (AppConfig 필드 이름만 반영)

    Returns:
        검증된 AppConfig

    Raises:
        ConfigError: 필수 값 누락 또는 잘못된 값
    """
    if env_file and os.path.exists(env_file):
        load_dotenv(env_file, override=False)
        logger.debug(f".env 파일 로드: {env_file}")

    params = asdict(AppConfig())
    params = update_with_kwargs(params, _env_params())
    params = update_with_kwargs(params, kwargs)

    config = validate_config(AppConfig(**params))
    logger.info(f"설정 로드 완료 (패키지: {config.package_name}, 포트: {config.port})")
    return config
