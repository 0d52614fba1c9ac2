import sys
from typing import Callable, Optional, TypeVar

import click

from . import __version__
from . import commands
from .config import load_env_files, ClubSettings
from .errors import ClubError
from .logging_utils import setup_logging, get_logger
from .manifest import ManifestStore
from .remotes import MAIN_REMOTE


logger = get_logger(__name__)

T = TypeVar("T")


@click.group()
@click.version_option(__version__, prog_name="club")
@click.option(
    "-C",
    "--chdir",
    "chdir",
    type=click.Path(file_okay=False, dir_okay=True, exists=True),
    default=".",
    help="clasp 프로젝트 디렉토리 (기본: 현재 디렉토리)",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="로그 레벨을 올립니다. (-v: INFO, -vv: DEBUG)",
)
@click.pass_context
def main(ctx: click.Context, chdir: str, verbose: int) -> None:
    """clasp 프로젝트의 여러 remote(scriptId)를 관리하는 CLI"""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["chdir"] = chdir
    ctx.obj["verbose"] = verbose


def _store_from_ctx(ctx: click.Context) -> ManifestStore:
    return ManifestStore(ctx.obj["chdir"])


def _settings_from_ctx(ctx: click.Context) -> ClubSettings:
    base_dir: str = ctx.obj["chdir"]
    load_env_files(base_dir)
    settings = ClubSettings.from_env(project_dir=base_dir)
    logger.debug("Settings loaded: %s", settings)
    return settings


def _run(action: Callable[[], T]) -> T:
    """
    명령 실행 공통 처리.
    ClubError 는 메시지만, 그 외 예외는 스택과 함께 로그로 남기고 exit 1 로 종료한다.
    """
    try:
        return action()
    except ClubError as e:
        click.echo(f"[ERROR] {e.message}", err=True)
        sys.exit(1)
    except Exception as e:  # noqa: BLE001
        logger.exception("예상하지 못한 오류 발생")
        click.echo(f"[ERROR] {e}", err=True)
        sys.exit(1)


@main.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """현재 프로젝트에 remote 관리를 시작한다. (scriptId 가 올바르면 main 으로 등록)"""
    store = _store_from_ctx(ctx)
    click.echo(_run(lambda: commands.init_club(store)))


@main.command(name="list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """등록된 remote 를 출력한다. main remote 는 굵게 표시된다."""
    store = _store_from_ctx(ctx)
    entries = _run(lambda: commands.list_remotes(store))
    for name, remote_id in entries:
        label = str(name)
        if label == MAIN_REMOTE:
            label = click.style(label, bold=True)
        click.echo(f"{label}: {remote_id}")


@main.command(name="set")
@click.argument("name")
@click.argument("remote_id", metavar="ID")
@click.pass_context
def set_cmd(ctx: click.Context, name: str, remote_id: str) -> None:
    """remote 를 추가하거나 ID 를 바꾼다."""
    store = _store_from_ctx(ctx)
    click.echo(_run(lambda: commands.set_remote(store, name, remote_id)))


@main.command()
@click.argument("name")
@click.pass_context
def remove(ctx: click.Context, name: str) -> None:
    """remote 를 삭제한다."""
    store = _store_from_ctx(ctx)
    click.echo(_run(lambda: commands.remove_remote(store, name)))


@main.command()
@click.argument("old")
@click.argument("new")
@click.pass_context
def rename(ctx: click.Context, old: str, new: str) -> None:
    """remote 이름을 바꾼다. (바뀐 remote 는 목록 맨 뒤로 이동)"""
    store = _store_from_ctx(ctx)
    click.echo(_run(lambda: commands.rename_remote(store, old, new)))


@main.command()
@click.argument("remote", required=False)
@click.option(
    "-a",
    "--all",
    "push_all",
    is_flag=True,
    help="등록된 모든 remote 에 순서대로 push 합니다.",
)
@click.pass_context
def push(ctx: click.Context, remote: Optional[str], push_all: bool) -> None:
    """
    remote 의 scriptId 로 clasp push 를 실행한다. (기본: main)
    push 가 끝나면 성공/실패와 관계없이 .clasp.json 을 원래대로 되돌린다.
    """
    store = _store_from_ctx(ctx)
    settings = _settings_from_ctx(ctx)
    _run(
        lambda: commands.push(
            store,
            settings,
            remote=remote,
            push_all=push_all,
            on_pushed=lambda name: click.echo(f"'{name}' 에 push 했습니다."),
        )
    )


@main.command()
@click.pass_context
def login(ctx: click.Context) -> None:
    """clasp login 을 실행한다."""
    settings = _settings_from_ctx(ctx)
    _run(lambda: commands.login(settings))
    click.echo("clasp login 완료")
