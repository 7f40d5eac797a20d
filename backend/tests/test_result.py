import pytest

from domain.result import Failure, Success, flat_map_result, map_result


def test_success_flags():
    result = Success(42)
    assert result.is_success
    assert not result.is_failure
    assert result.value == 42


def test_failure_flags_and_cause():
    cause = RuntimeError("boom")
    result = Failure("Something failed", cause)
    assert result.is_failure
    assert not result.is_success
    assert result.error == "Something failed"
    assert result.cause is cause


def test_failure_cause_defaults_to_none():
    assert Failure("nope").cause is None


def test_map_transforms_success():
    assert map_result(Success(2), lambda v: v * 10) == Success(20)


def test_map_passes_failure_through():
    failure = Failure("nope")
    assert map_result(failure, lambda v: v * 10) is failure


def test_flat_map_chains_results():
    assert flat_map_result(Success(3), lambda v: Success(str(v))) == Success("3")
    assert flat_map_result(Success(3), lambda v: Failure("bad")) == Failure("bad")


def test_flat_map_does_not_call_mapper_on_failure():
    def mapper(value):
        raise AssertionError("mapper must not run")

    failure = Failure("nope")
    assert flat_map_result(failure, mapper) is failure


def test_unknown_result_type_is_rejected():
    with pytest.raises(TypeError):
        map_result("not a result", lambda v: v)
