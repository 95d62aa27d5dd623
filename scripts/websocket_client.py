#!/usr/bin/env python3
"""
WebSocket 테스트 클라이언트
전사 텍스트 파일을 한 줄씩 세션 서버로 보내고 HUD 표시 요청을 확인합니다.

각 줄은 부분 인식(isFinal=false) 이벤트 뒤에 최종 인식(isFinal=true) 이벤트로
전송되므로, 부분 인식이 무시되는지도 함께 확인할 수 있습니다.

사용법:
    $ python scripts/websocket_client.py transcript.txt --api-key $MENTRAOS_API_KEY
"""

import argparse
import asyncio
import json
import os

import websockets


async def send_transcript(path: str, server_url: str, api_key: str, delay: float = 0.5):
    """전사 파일을 WebSocket으로 전송하고 표시 요청을 출력합니다."""

    with open(path, "r", encoding="utf-8") as f:
        lines = [line.strip() for line in f if line.strip()]

    print(f"전사 파일: {path} ({len(lines)}줄)")
    print("-" * 50)

    try:
        async with websockets.connect(server_url, additional_headers={"x-api-key": api_key}) as ws:
            print(f"서버 연결됨: {server_url}")

            displays = []

            async def receive_results():
                """표시 요청 수신 태스크"""
                try:
                    while True:
                        msg = await asyncio.wait_for(ws.recv(), timeout=15.0)
                        data = json.loads(msg)

                        if data.get("type") == "error":
                            print(f"  [오류] {data.get('message')}")
                            continue

                        if data.get("type") == "display":
                            displays.append(data)
                            print(f"  [{data['view']} {data['durationMs']}ms] {data['text']}")

                except asyncio.TimeoutError:
                    print("\n[타임아웃] 더 이상 결과가 없습니다.")
                except websockets.exceptions.ConnectionClosed:
                    print("\n[연결 종료]")

            receive_task = asyncio.create_task(receive_results())

            for line in lines:
                # 앞 절반은 부분 인식으로, 전체는 최종 인식으로 전송
                partial = line[: max(1, len(line) // 2)]
                await ws.send(json.dumps({"type": "transcription", "text": partial, "isFinal": False}))
                await ws.send(json.dumps({"type": "transcription", "text": line, "isFinal": True}))
                await asyncio.sleep(delay)

            print("\n전송 완료. 결과 대기 중...")
            await asyncio.sleep(1)
            receive_task.cancel()
            try:
                await receive_task
            except asyncio.CancelledError:
                pass

            print("\n" + "=" * 50)
            print(f"총 {len(displays)}개의 표시 요청 수신")

    except ConnectionRefusedError:
        print("오류: 서버에 연결할 수 없습니다. 서버가 실행 중인지 확인하세요.")
    except websockets.exceptions.InvalidStatus as e:
        print(f"오류: 연결이 거부되었습니다 (API 키 확인): {e}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="HUD 요약 세션 서버 테스트 클라이언트")
    parser.add_argument("transcript", help="한 줄에 발화 하나씩 적힌 텍스트 파일")
    parser.add_argument("--url", default="ws://localhost:3000/session", help="세션 WebSocket 주소")
    parser.add_argument("--api-key", default=os.getenv("MENTRAOS_API_KEY", ""), help="API 키")
    parser.add_argument("--delay", type=float, default=0.5, help="발화 간 전송 간격 (초)")
    cli_args = parser.parse_args()

    asyncio.run(send_transcript(cli_args.transcript, cli_args.url, cli_args.api_key, cli_args.delay))
