"""
remotes
-------

remote 이름/ID 값 타입과 순서를 보존하는 remote 테이블.

RemoteName, RemoteId 는 생성 시점에 검증된다.
검증을 통과하지 못한 값은 인스턴스로 존재할 수 없다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import InvalidRemoteId, InvalidRemoteName


REMOTE_ID_LENGTH = 57
MAIN_REMOTE = "main"

_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")
_ID_RE = re.compile(r"^[A-Za-z0-9_-]{%d}$" % REMOTE_ID_LENGTH)


@dataclass(frozen=True)
class RemoteName:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _NAME_RE.fullmatch(self.value):
            raise InvalidRemoteName(str(self.value))

    @classmethod
    def parse(cls, raw: str) -> "RemoteName":
        return cls(raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RemoteId:
    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise InvalidRemoteId(str(self.value))

    @classmethod
    def parse(cls, raw: str) -> "RemoteId":
        return cls(raw)

    @staticmethod
    def is_valid(raw: object) -> bool:
        return isinstance(raw, str) and _ID_RE.fullmatch(raw) is not None

    def __str__(self) -> str:
        return self.value


class RemoteTable:
    """
    RemoteName -> RemoteId 순서 보존 매핑.

    - 삽입 순서가 곧 list 출력 순서다.
    - 이미 있는 이름을 다시 set 하면 값만 바뀌고 위치는 유지된다.
    - 삭제 후 재삽입하면 맨 뒤로 이동한다. (rename 이 이 동작을 사용)
    """

    def __init__(self, entries: Optional[List[Tuple[RemoteName, RemoteId]]] = None) -> None:
        self._entries: Dict[RemoteName, RemoteId] = {}
        for name, remote_id in entries or []:
            self._entries[name] = remote_id

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RemoteName]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemoteTable):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v}" for k, v in self.items())
        return f"RemoteTable({inner})"

    def get(self, name: RemoteName) -> Optional[RemoteId]:
        return self._entries.get(name)

    def set(self, name: RemoteName, remote_id: RemoteId) -> None:
        self._entries[name] = remote_id

    def remove(self, name: RemoteName) -> RemoteId:
        return self._entries.pop(name)

    def items(self) -> List[Tuple[RemoteName, RemoteId]]:
        return list(self._entries.items())

    def copy(self) -> "RemoteTable":
        return RemoteTable(self.items())

    def to_json(self) -> Dict[str, str]:
        return {name.value: remote_id.value for name, remote_id in self._entries.items()}
