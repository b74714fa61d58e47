"""Debounce utility with explicit cancellation.

연속 호출 중 마지막 호출만 delay 후 실행합니다.
(예: 입력 중인 검색어에 대한 자동완성/중복 확인 요청)
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, Optional

from catalog_search.core.logging import get_logger


logger = get_logger(__name__)


class Debouncer:
    """asyncio 이벤트 루프 기반 디바운서

    Usage:
        debouncer = Debouncer(check_username, delay_s=0.3)
        debouncer.call("ali")
        debouncer.call("alice")   # 이전 호출 취소, "alice"만 실행
        debouncer.cancel()        # 대기 중인 호출 명시적 취소
    """

    def __init__(self, func: Callable[..., Any], delay_s: float = 0.3):
        if delay_s < 0:
            raise ValueError("delay_s must be >= 0")
        self.func = func
        self.delay_s = delay_s
        self._handle: Optional[asyncio.TimerHandle] = None
        self._args: tuple = ()
        self._kwargs: dict[str, Any] = {}
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        """실행 대기 중인 호출이 있는지 여부"""
        return self._handle is not None

    @property
    def last_task(self) -> Optional[asyncio.Task]:
        """코루틴 함수인 경우 마지막으로 생성된 실행 태스크"""
        return self._task

    def call(self, *args: Any, **kwargs: Any) -> None:
        """호출 예약 (기존 대기 호출은 취소)

        Raises:
            RuntimeError: 실행 중인 이벤트 루프가 없는 경우
        """
        loop = asyncio.get_running_loop()
        self.cancel()
        self._args = args
        self._kwargs = kwargs
        self._handle = loop.call_later(self.delay_s, self._fire)

    def cancel(self) -> bool:
        """대기 중인 호출 취소

        Returns:
            bool: 취소된 호출이 있었는지 여부
        """
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        return True

    def flush(self) -> Any:
        """대기 중인 호출을 즉시 실행

        Returns:
            함수 반환값 (코루틴 함수면 생성된 Task), 대기 호출이 없으면 None
        """
        if not self.cancel():
            return None
        return self._invoke()

    def _fire(self) -> None:
        self._handle = None
        try:
            self._invoke()
        except Exception as e:
            # 타이머 콜백 예외는 호출자에게 전달될 경로가 없음
            logger.error(f"Debounced call failed: {type(e).__name__}: {e}", exc_info=True)

    def _invoke(self) -> Any:
        result = self.func(*self._args, **self._kwargs)
        if inspect.isawaitable(result):
            self._task = asyncio.ensure_future(result)
            return self._task
        return result
