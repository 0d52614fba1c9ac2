from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, List

from dotenv import load_dotenv


ENV_FILES_DEFAULT_ORDER = [".env", ".env.club"]

DEFAULT_CLASP_BIN = "clasp"


def load_env_files(base_dir: str = ".",
                   files: Optional[List[str]] = None) -> None:
    """
    프로젝트 디렉토리에서 .env 계열 파일을 순서대로 로드한다.
    후순위 파일이 같은 키를 덮어쓴다.
    """
    order = files or ENV_FILES_DEFAULT_ORDER
    for name in order:
        path = os.path.join(base_dir, name)
        if os.path.exists(path):
            load_dotenv(path, override=True)


@dataclass
class ClubSettings:
    # 프로젝트(.clasp.json 이 있는) 디렉토리
    project_dir: str = "."

    # clasp 실행 파일 (PATH 상의 이름 또는 절대 경로)
    clasp_bin: str = DEFAULT_CLASP_BIN

    @classmethod
    def from_env(cls, project_dir: str = ".") -> "ClubSettings":
        clasp_bin = (os.getenv("CLUB_CLASP_BIN") or "").strip()
        return cls(
            project_dir=project_dir,
            clasp_bin=clasp_bin or DEFAULT_CLASP_BIN,
        )
