from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from . import clasp_runner
from .config import ClubSettings
from .errors import (
    BothRemoteAndAllPassed,
    ClaspError,
    ClubAlreadySetup,
    ClubNotSetup,
    NoRemotesAvailable,
    RemoteAlreadyExists,
    RemoteNotFound,
)
from .logging_utils import get_logger
from .manifest import ClaspConfig, ManifestStore
from .remotes import MAIN_REMOTE, RemoteId, RemoteName, RemoteTable


logger = get_logger(__name__)


def _require_remotes(cfg: ClaspConfig) -> RemoteTable:
    if cfg.remotes is None:
        raise ClubNotSetup()
    return cfg.remotes


def list_remotes(store: ManifestStore) -> List[Tuple[RemoteName, RemoteId]]:
    """
    등록된 remote 를 테이블 순서대로 돌려준다. 매니페스트는 바꾸지 않는다.
    """
    cfg = store.load()
    return _require_remotes(cfg).items()


def init_club(store: ManifestStore) -> str:
    """
    remote 테이블을 만든다.

    현재 scriptId 가 올바른 remote id 형식이면 "main" 으로 등록해 둔다.
    """
    cfg = store.load()
    if cfg.remotes is not None:
        raise ClubAlreadySetup()

    remotes = RemoteTable()
    if RemoteId.is_valid(cfg.script_id):
        remotes.set(RemoteName.parse(MAIN_REMOTE), RemoteId.parse(cfg.script_id))
        message = (
            f"club 을 초기화했습니다. 현재 scriptId({cfg.script_id})를 "
            f"'{MAIN_REMOTE}' remote 로 등록했습니다."
        )
    else:
        message = (
            "club 을 초기화했습니다. 현재 scriptId 가 remote id 형식이 아니어서 "
            "등록된 remote 는 없습니다."
        )

    cfg.remotes = remotes
    store.save(cfg)
    logger.info("club init 완료: remotes=%s", remotes)
    return message


def set_remote(store: ManifestStore, name: str, remote_id: str) -> str:
    remote_name = RemoteName.parse(name)
    rid = RemoteId.parse(remote_id)

    cfg = store.load()
    remotes = _require_remotes(cfg)
    existed = remote_name in remotes
    remotes.set(remote_name, rid)
    store.save(cfg)

    if existed:
        return f"remote '{remote_name}' 를 {rid} 로 변경했습니다."
    return f"remote '{remote_name}' ({rid}) 를 추가했습니다."


def remove_remote(store: ManifestStore, name: str) -> str:
    remote_name = RemoteName.parse(name)

    cfg = store.load()
    remotes = _require_remotes(cfg)
    if remote_name not in remotes:
        raise RemoteNotFound(str(remote_name))
    removed = remotes.remove(remote_name)
    store.save(cfg)

    return f"remote '{remote_name}' ({removed}) 를 삭제했습니다."


def rename_remote(store: ManifestStore, old: str, new: str) -> str:
    """
    remote 이름을 바꾼다.

    바뀐 항목은 원래 자리가 아니라 테이블 맨 뒤로 간다.
    old 와 new 가 같아도 이미 존재하는 이름이므로 실패한다.
    """
    old_name = RemoteName.parse(old)
    new_name = RemoteName.parse(new)

    cfg = store.load()
    remotes = _require_remotes(cfg)
    if new_name in remotes:
        raise RemoteAlreadyExists(str(new_name))
    if old_name not in remotes:
        raise RemoteNotFound(str(old_name))

    rid = remotes.remove(old_name)
    remotes.set(new_name, rid)
    store.save(cfg)

    return f"remote '{old_name}' 의 이름을 '{new_name}' 로 바꿨습니다."


def _push_one(store: ManifestStore, settings: ClubSettings, cfg: ClaspConfig,
              name: RemoteName, rid: RemoteId) -> None:
    """
    scriptId 를 rid 로 바꿔 저장하고 clasp push 를 실행한 뒤,
    결과와 상관없이 원래 매니페스트를 다시 저장한다.
    """
    logger.info("push 대상: %s (%s)", name, rid)
    store.save(cfg.with_script_id(rid.value))
    try:
        result = clasp_runner.clasp_push(settings)
    finally:
        store.save(cfg)
        logger.debug("매니페스트 복원 완료 (scriptId=%s)", cfg.script_id)

    if not result.ok:
        raise ClaspError("push failed")


def push(store: ManifestStore, settings: ClubSettings,
         remote: Optional[str] = None, push_all: bool = False,
         on_pushed: Optional[Callable[[str], None]] = None) -> List[str]:
    """
    remote 로 clasp push 를 실행한다.

    push_all 이면 테이블 순서대로 모든 remote 에 push 하고, 첫 실패에서 멈춘다.
    remote 를 주지 않으면 "main" 으로 push 한다.
    on_pushed 는 remote 하나의 push 가 성공할 때마다 이름과 함께 호출된다.

    Returns:
        push 에 성공한 remote 이름 목록
    """
    cfg = store.load()
    remotes = _require_remotes(cfg)
    if len(remotes) == 0:
        raise NoRemotesAvailable()
    if remote is not None and push_all:
        raise BothRemoteAndAllPassed()

    if push_all:
        targets = remotes.items()
    else:
        name = RemoteName.parse(remote if remote is not None else MAIN_REMOTE)
        rid = remotes.get(name)
        if rid is None:
            raise RemoteNotFound(str(name))
        targets = [(name, rid)]

    pushed: List[str] = []
    for name, rid in targets:
        _push_one(store, settings, cfg, name, rid)
        pushed.append(str(name))
        if on_pushed is not None:
            on_pushed(str(name))
    return pushed


def login(settings: ClubSettings) -> None:
    result = clasp_runner.clasp_login(settings)
    if not result.ok:
        raise ClaspError("login failed")
