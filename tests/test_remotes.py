import pytest

from clasp_club.errors import InvalidRemoteId, InvalidRemoteName
from clasp_club.remotes import RemoteId, RemoteName, RemoteTable

from conftest import ID_X, ID_Y, ID_Z


@pytest.mark.parametrize("raw", ["main", "staging-2", "prod_EU", "a", "0"])
def test_remote_name_accepts_valid(raw: str) -> None:
    assert str(RemoteName.parse(raw)) == raw


@pytest.mark.parametrize("raw", ["", "has space", "dot.name", "slash/name", "한글", "main\n"])
def test_remote_name_rejects_invalid(raw: str) -> None:
    with pytest.raises(InvalidRemoteName):
        RemoteName.parse(raw)


def test_remote_name_direct_construction_is_validated() -> None:
    with pytest.raises(InvalidRemoteName):
        RemoteName("bad name")


def test_remote_id_accepts_57_chars() -> None:
    assert RemoteId.parse(ID_Y).value == ID_Y
    assert RemoteId.is_valid(ID_Z)


@pytest.mark.parametrize(
    "raw",
    [
        "X" * 56,
        "X" * 58,
        "X" * 56 + ".",
        "X" * 56 + " ",
        "X" * 57 + "\n",
        "",
    ],
)
def test_remote_id_rejects_invalid(raw: str) -> None:
    assert not RemoteId.is_valid(raw)
    with pytest.raises(InvalidRemoteId):
        RemoteId.parse(raw)


def test_remote_id_is_valid_rejects_non_string() -> None:
    assert not RemoteId.is_valid(None)
    assert not RemoteId.is_valid(57)


def _n(raw: str) -> RemoteName:
    return RemoteName.parse(raw)


def _i(raw: str) -> RemoteId:
    return RemoteId.parse(raw)


def test_table_preserves_insertion_order() -> None:
    table = RemoteTable()
    table.set(_n("b"), _i(ID_X))
    table.set(_n("a"), _i(ID_Y))
    table.set(_n("c"), _i(ID_Z))

    assert [str(k) for k, _ in table.items()] == ["b", "a", "c"]


def test_table_overwrite_keeps_position() -> None:
    table = RemoteTable([(_n("a"), _i(ID_X)), (_n("b"), _i(ID_Y))])
    table.set(_n("a"), _i(ID_Z))

    assert table.items() == [(_n("a"), _i(ID_Z)), (_n("b"), _i(ID_Y))]
    assert len(table) == 2


def test_table_remove_then_reinsert_moves_to_end() -> None:
    table = RemoteTable([(_n("a"), _i(ID_X)), (_n("b"), _i(ID_Y)), (_n("c"), _i(ID_Z))])
    removed = table.remove(_n("a"))
    table.set(_n("a"), removed)

    assert [str(k) for k in table] == ["b", "c", "a"]


def test_table_to_json_and_copy() -> None:
    table = RemoteTable([(_n("main"), _i(ID_X))])
    clone = table.copy()
    clone.set(_n("other"), _i(ID_Y))

    assert table.to_json() == {"main": ID_X}
    assert clone.to_json() == {"main": ID_X, "other": ID_Y}
    assert table != clone
