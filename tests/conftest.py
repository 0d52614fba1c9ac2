"""
pytest 설정:

로컬 작업 환경에 설치된 다른 버전의 clasp_club 패키지가 존재할 때,
`pytest` 실행 시 site-packages 쪽이 먼저 import 되어 테스트가 깨질 수 있다.

테스트는 항상 현재 레포의 소스를 대상으로 해야 하므로, repo root 를 sys.path 최상단에 고정한다.
"""

from __future__ import annotations

import json
import os
import sys
from typing import Any, Callable, Dict

import pytest


def pytest_configure() -> None:
    repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)


ID_X = "X" * 57
ID_Y = "y-" * 28 + "Y"
ID_Z = "Z_" * 28 + "z"


@pytest.fixture
def write_manifest(tmp_path) -> Callable[..., str]:  # noqa: ANN001
    def _write(data: Any = None, *, raw: str | None = None) -> str:
        path = tmp_path / ".clasp.json"
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return str(tmp_path)

    return _write


@pytest.fixture
def read_manifest(tmp_path) -> Callable[[], Dict[str, Any]]:  # noqa: ANN001
    def _read() -> Dict[str, Any]:
        return json.loads((tmp_path / ".clasp.json").read_text(encoding="utf-8"))

    return _read


def base_manifest(script_id: str = ID_X, **extra: Any) -> Dict[str, Any]:
    data: Dict[str, Any] = {"scriptId": script_id, "rootDir": "src", "parentId": ["parent-1"]}
    data.update(extra)
    return data
