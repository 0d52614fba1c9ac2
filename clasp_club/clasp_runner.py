"""
clasp_runner
------------

외부 clasp 바이너리 호출.

clasp 의 출력은 파싱하지 않는다. 표준 입출력을 그대로 상속해서
사용자가 clasp 의 진행 상황/프롬프트를 직접 보도록 하고, 종료 코드만 사용한다.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Sequence

from .config import ClubSettings
from .errors import ClaspError
from .logging_utils import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class RunResult:
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(cmd: Sequence[str], *, cwd: str | None = None) -> RunResult:
    """
    cmd 를 실행하고 끝날 때까지 기다린다. (타임아웃 없음)

    프로세스를 시작하지 못하면 ClaspError 로 감싸서 올린다.
    종료 코드가 0 이 아닌 경우의 판단은 호출자에게 맡긴다.
    """
    logger.info("명령 실행: %s", " ".join(cmd))
    try:
        returncode = subprocess.call(list(cmd), cwd=cwd)  # noqa: S603
    except OSError as e:
        raise ClaspError(str(e)) from e

    logger.debug("명령 종료: %s (exit=%s)", " ".join(cmd), returncode)
    return RunResult(returncode=returncode)


def clasp_push(settings: ClubSettings) -> RunResult:
    return run_command([settings.clasp_bin, "push"], cwd=settings.project_dir)


def clasp_login(settings: ClubSettings) -> RunResult:
    return run_command([settings.clasp_bin, "login"], cwd=settings.project_dir)
