from __future__ import annotations

import logging

import pytest

from pipestyle import to_using
from fakes import ClosingResource, Recorder, ScopedResource


def test_closes_after_normal_return() -> None:
    resource = ClosingResource()
    work = Recorder(result="read")

    assert to_using(resource, work) == "read"
    assert work.calls == [(resource,)]
    assert resource.close_calls == 1


def test_closes_when_work_raises() -> None:
    resource = ClosingResource()
    failure = RuntimeError("work failed")

    def work(res: ClosingResource) -> None:
        assert res.close_calls == 0
        raise failure

    with pytest.raises(RuntimeError) as excinfo:
        to_using(resource, work)

    assert excinfo.value is failure
    assert resource.close_calls == 1


def test_context_manager_is_entered_and_exited() -> None:
    resource = ScopedResource()
    seen: list[object] = []

    def work(res: ScopedResource) -> int:
        seen.append(res)
        assert res.enter_calls == 1
        assert res.exit_calls == 0
        return 5

    assert to_using(resource, work) == 5
    assert seen == [resource]
    assert resource.exit_calls == 1
    assert resource.seen_exc is None


def test_context_manager_sees_the_failure() -> None:
    resource = ScopedResource()

    def work(_: ScopedResource) -> None:
        raise ValueError("bad input")

    with pytest.raises(ValueError, match="bad input"):
        to_using(resource, work)

    assert resource.exit_calls == 1
    assert isinstance(resource.seen_exc, ValueError)


def test_suppressing_exit_does_not_swallow_the_failure() -> None:
    resource = ScopedResource(suppress=True)
    failure = ValueError("bad input")

    def work(_: ScopedResource) -> None:
        raise failure

    with pytest.raises(ValueError) as excinfo:
        to_using(resource, work)

    assert excinfo.value is failure
    assert resource.exit_calls == 1
    assert resource.seen_exc is failure


def test_suppressing_exit_on_normal_return() -> None:
    resource = ScopedResource(suppress=True)

    assert to_using(resource, lambda _: "ok") == "ok"
    assert resource.exit_calls == 1
    assert resource.seen_exc is None


def test_release_failure_after_normal_return() -> None:
    resource = ClosingResource(fail_on_close=True)
    work = Recorder(result="read")

    with pytest.raises(OSError, match="close failed") as excinfo:
        to_using(resource, work)

    assert excinfo.value.__context__ is None
    assert work.count == 1
    assert resource.close_calls == 1


def test_release_failure_is_chained_to_work_failure() -> None:
    resource = ClosingResource(fail_on_close=True)

    def work(_: ClosingResource) -> None:
        raise ValueError("work failed")

    with pytest.raises(OSError, match="close failed") as excinfo:
        to_using(resource, work)

    assert isinstance(excinfo.value.__context__, ValueError)
    assert resource.close_calls == 1


def test_unreleasable_resource_is_rejected_before_work() -> None:
    work = Recorder()

    with pytest.raises(TypeError):
        to_using(object(), work)

    assert work.count == 0


def test_release_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pipestyle.combinators.using"):
        to_using(ClosingResource(), lambda _: None)

    assert "Releasing ClosingResource" in caplog.text
