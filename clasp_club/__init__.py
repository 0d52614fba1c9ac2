"""
clasp_club
----------

하나의 Google Apps Script 프로젝트에 여러 개의 이름 붙은 remote(scriptId)를 관리하는 CLI 패키지.
.clasp.json 의 scriptId 를 잠시 바꿔 `clasp push` 를 실행한 뒤 원래 매니페스트로 되돌린다.
"""

__version__ = "0.1.0"

__all__ = [
    "commands",
    "manifest",
    "remotes",
]
