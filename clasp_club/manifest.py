"""
manifest
--------

clasp 매니페스트(.clasp.json) 로드/저장.

club 은 매니페스트의 rootDir / scriptId / parentId 와
remote 테이블(__club__ 키)만 다룬다. 그 외 키는 저장 시 보존되지 않는다.
"""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import (
    InvalidRemoteId,
    InvalidRemoteName,
    ManifestNotFound,
    ManifestReadFail,
    ManifestWriteFail,
)
from .logging_utils import get_logger
from .remotes import RemoteId, RemoteName, RemoteTable


logger = get_logger(__name__)


MANIFEST_NAME = ".clasp.json"
REMOTES_KEY = "__club__"


@dataclass
class ClaspConfig:
    root_dir: str
    # clasp 가 실제로 읽는 값. RemoteId 규칙으로 검증하지 않는다.
    script_id: str
    parent_ids: List[str] = field(default_factory=list)
    # None 이면 club init 전 상태, 비어 있는 테이블은 초기화된 상태
    remotes: Optional[RemoteTable] = None

    def with_script_id(self, script_id: str) -> "ClaspConfig":
        return ClaspConfig(
            root_dir=self.root_dir,
            script_id=script_id,
            parent_ids=list(self.parent_ids),
            remotes=self.remotes.copy() if self.remotes is not None else None,
        )

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "scriptId": self.script_id,
            "rootDir": self.root_dir,
            "parentId": list(self.parent_ids),
        }
        if self.remotes is not None:
            data[REMOTES_KEY] = self.remotes.to_json()
        return data

    @classmethod
    def from_json(cls, data: Any) -> "ClaspConfig":
        """
        파싱된 JSON 을 ClaspConfig 로 변환한다.

        필수 필드가 없거나 타입이 맞지 않으면 ManifestReadFail.
        저장된 remote 중 하나라도 잘못되어 있으면 전체 로드를 실패시킨다.
        """
        if not isinstance(data, dict):
            raise ManifestReadFail("최상위 값이 JSON 객체가 아닙니다.")

        root_dir = data.get("rootDir")
        if not isinstance(root_dir, str):
            raise ManifestReadFail("rootDir 이 없거나 문자열이 아닙니다.")

        script_id = data.get("scriptId")
        if not isinstance(script_id, str):
            raise ManifestReadFail("scriptId 가 없거나 문자열이 아닙니다.")

        parent_ids = data.get("parentId")
        if not isinstance(parent_ids, list) or not all(isinstance(p, str) for p in parent_ids):
            raise ManifestReadFail("parentId 가 없거나 문자열 배열이 아닙니다.")

        remotes: Optional[RemoteTable] = None
        if REMOTES_KEY in data:
            raw_remotes = data[REMOTES_KEY]
            if not isinstance(raw_remotes, dict):
                raise ManifestReadFail(f"{REMOTES_KEY} 가 JSON 객체가 아닙니다.")
            remotes = RemoteTable()
            for key, value in raw_remotes.items():
                try:
                    remotes.set(RemoteName.parse(key), RemoteId.parse(value))
                except (InvalidRemoteName, InvalidRemoteId) as e:
                    raise ManifestReadFail(f"저장된 remote 가 잘못되었습니다: {e.message}") from e

        return cls(
            root_dir=root_dir,
            script_id=script_id,
            parent_ids=list(parent_ids),
            remotes=remotes,
        )


class ManifestStore:
    """
    프로젝트 디렉토리의 .clasp.json 에 대한 읽기/쓰기.

    현재 작업 디렉토리를 암묵적으로 쓰지 않고, project_dir 를 명시적으로 받는다.
    """

    def __init__(self, project_dir: str = ".", manifest_name: str = MANIFEST_NAME) -> None:
        self.project_dir = project_dir
        self.manifest_name = manifest_name

    @property
    def path(self) -> str:
        return os.path.join(self.project_dir, self.manifest_name)

    def load(self) -> ClaspConfig:
        path = self.path
        if not os.path.exists(path):
            raise ManifestNotFound()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # JSONDecodeError, UnicodeDecodeError 모두 ValueError
            raise ManifestReadFail(str(e)) from e

        cfg = ClaspConfig.from_json(data)
        logger.debug("매니페스트 로드: %s -> %s", path, cfg)
        return cfg

    def save(self, cfg: ClaspConfig) -> None:
        """
        cfg 를 매니페스트에 기록한다.
        같은 디렉토리의 임시 파일에 먼저 쓰고 os.replace 로 교체한다.
        """
        path = self.path
        try:
            payload = json.dumps(cfg.to_json(), indent=2, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as e:
            raise ManifestWriteFail(str(e)) from e

        tmp_path: Optional[str] = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=self.manifest_name + ".",
                suffix=".tmp",
                dir=self.project_dir,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            if os.path.exists(path):
                shutil.copymode(path, tmp_path)
            os.replace(tmp_path, path)
            tmp_path = None
        except OSError as e:
            raise ManifestWriteFail(str(e)) from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.debug("매니페스트 저장: %s (scriptId=%s)", path, cfg.script_id)
