import pytest

from specargs.flow import ExitCode, Step


class Boom(Exception):
    pass


def test_step_calls_do():
    called = []
    step = Step(do=lambda: called.append(True))
    step.run(None)
    assert called == [True]


def test_step_calls_success_after_do():
    calls = []

    def fail():
        raise AssertionError("error should not have been called")

    step = Step(
        do=lambda: calls.append("do"),
        success=Step(do=lambda: calls.append("success")),
        error=Step(do=fail),
    )
    step.run(None)
    assert calls == ["do", "success"]


def test_step_calls_error_if_do_raises():
    calls = []
    failure = Boom(42)

    def do():
        calls.append("do")
        raise failure

    def success():
        calls.append("success")

    step = Step(
        do=do,
        success=Step(do=success),
        error=Step(do=lambda: calls.append("error")),
    )
    with pytest.raises(Boom) as info:
        step.run(None)
    assert info.value is failure
    assert info.value.args == (42,)
    assert calls == ["do", "error"]


def test_step_calls_exit_if_asked_to():
    codes = []
    step = Step(exiter=codes.append)
    step.run(ExitCode(42))
    assert codes == [42]


def test_step_rethrows_pending_exception():
    pending = Boom(42)
    step = Step()
    with pytest.raises(Boom) as info:
        step.run(pending)
    assert info.value is pending


def test_step_does_nothing_without_success_nor_exception():
    codes = []
    step = Step(exiter=codes.append)
    step.run(None)
    assert codes == []


def test_exit_code_reaches_root_through_error_chain():
    codes = []
    order = []

    def action():
        order.append("action")
        raise ExitCode(3)

    root_after = Step(do=lambda: order.append("after"), exiter=codes.append)
    step = Step(do=action, success=root_after, error=root_after)
    step.run(None)
    assert codes == [3]
    assert order == ["action", "after", "after"]