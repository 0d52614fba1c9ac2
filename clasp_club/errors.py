"""
errors
------

club 명령이 내보내는 오류 종류.
모든 오류는 ClubError 를 상속하며, CLI 최상단에서 한 번만 메시지로 출력된다.
"""

from __future__ import annotations


class ClubError(Exception):
    default_message = "알 수 없는 오류"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ManifestNotFound(ClubError):
    default_message = ".clasp.json 을 찾을 수 없습니다. clasp 프로젝트 디렉토리에서 실행하세요."


class ManifestReadFail(ClubError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f".clasp.json 읽기 실패: {detail}")


class ManifestWriteFail(ClubError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f".clasp.json 쓰기 실패: {detail}")


class ClubNotSetup(ClubError):
    default_message = "club 이 아직 초기화되지 않았습니다. 먼저 `club init` 을 실행하세요."


class ClubAlreadySetup(ClubError):
    default_message = "club 이 이미 초기화되어 있습니다."


class RemoteNotFound(ClubError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"remote 를 찾을 수 없습니다: {name}")


class RemoteAlreadyExists(ClubError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"같은 이름의 remote 가 이미 있습니다: {name}")


class InvalidRemoteName(ClubError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(
            f"잘못된 remote 이름입니다: {raw!r} (영문/숫자/-/_ 만 사용할 수 있습니다)"
        )


class InvalidRemoteId(ClubError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(
            f"잘못된 remote id 입니다: {raw!r} (영문/숫자/-/_ 로 이루어진 57자여야 합니다)"
        )


class NoRemotesAvailable(ClubError):
    default_message = "등록된 remote 가 없습니다. `club set <name> <id>` 로 추가하세요."


class BothRemoteAndAllPassed(ClubError):
    default_message = "remote 이름과 --all 은 함께 사용할 수 없습니다."


class ClaspError(ClubError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"clasp 실행 실패: {detail}")
