"""End-to-end chains over the person/school demo domain."""

from __future__ import annotations

import pytest

from pipestyle import Flow, do, do_is_null, to, to_not_null
from fakes import Person, Recorder, find_person, get_rank


def _fail(message: str) -> None:
    raise LookupError(message)


def rank_of(name: str, log: Recorder, notify: Recorder, rank: Recorder | None = None) -> int:
    return (
        Flow(find_person(name))
        .do_is_null(lambda: Flow(f"Person '{name}' not found.").do(log).do(_fail))
        .do(notify)
        .to(Person.get_school)
        .to_not_null(rank or get_rank, -1)
        .value
    )


def test_ranked_school() -> None:
    log, notify = Recorder(), Recorder()

    assert rank_of("Jane", log, notify) == 1
    assert [call[0].name for call in notify.calls] == ["Jane"]
    assert log.count == 0


def test_no_school_falls_back() -> None:
    log, notify = Recorder(), Recorder()

    assert rank_of("John", log, notify) == -1
    assert notify.count == 1
    assert log.count == 0


def test_missing_person_logs_and_raises() -> None:
    log, notify, rank = Recorder(), Recorder(), Recorder(result=1)

    with pytest.raises(LookupError) as excinfo:
        rank_of("Mike", log, notify, rank)

    assert str(excinfo.value) == "Person 'Mike' not found."
    assert log.calls == [("Person 'Mike' not found.",)]
    assert notify.count == 0
    assert rank.count == 0


def test_free_function_chain_matches_flow() -> None:
    def rank_nested(name: str) -> int:
        person = do_is_null(find_person(name), lambda: _fail(f"Person '{name}' not found."))
        return to_not_null(to(do(person, Recorder()), Person.get_school), get_rank, -1)

    for name in ("Jane", "John"):
        assert rank_nested(name) == rank_of(name, Recorder(), Recorder())
    with pytest.raises(LookupError, match="Person 'Mike' not found."):
        rank_nested("Mike")


def test_people_source_is_restartable() -> None:
    assert find_person("Jane") is not None
    assert find_person("Jane") is not None
