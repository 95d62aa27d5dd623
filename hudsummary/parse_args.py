"""
parse_args.py - 서버 CLI 인자 파싱

모든 인자의 기본값은 None입니다. None인 인자는 load_config()에서 무시되므로
환경 변수와 AppConfig 기본값이 그대로 유지됩니다.
"""

import argparse
from typing import List, Optional

from hudsummary.display import ViewType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hudsummary-server",
        description="STT 최종 전사 결과를 키워드 요약으로 변환해 HUD에 표시하는 세션 서버",
    )

    # 서버
    parser.add_argument("--host", type=str, default=None, help="서버 호스트 주소 (기본값: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="서버 포트 (기본값: PORT 환경 변수 또는 3000)")

    # 자격 증명 (환경 변수보다 우선)
    parser.add_argument("--package-name", type=str, default=None, help="앱 패키지 이름 (PACKAGE_NAME)")
    parser.add_argument("--api-key", type=str, default=None, help="API 키 (MENTRAOS_API_KEY)")

    # 표시
    parser.add_argument(
        "--view",
        dest="summary_view",
        type=str,
        default=None,
        choices=[v.value for v in ViewType],
        help="요약을 표시할 슬롯",
    )
    parser.add_argument("--summary-duration-ms", type=int, default=None, help="요약 표시 시간 (밀리초)")
    parser.add_argument(
        "--echo-original",
        action="store_true",
        default=None,
        help="원문을 보조 화면에 함께 표시",
    )
    parser.add_argument("--top-k", type=int, default=None, help="최대 키워드 수 (기본값: 6)")

    # 로깅 / 배포
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="로그 레벨",
    )
    parser.add_argument("--ssl-certfile", type=str, default=None, help="SSL 인증서 파일")
    parser.add_argument("--ssl-keyfile", type=str, default=None, help="SSL 개인 키 파일")
    parser.add_argument("--forwarded-allow-ips", type=str, default=None, help="리버스 프록시 허용 IP")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """CLI 인자 파싱 (argv가 None이면 sys.argv 사용)"""
    return build_parser().parse_args(argv)
