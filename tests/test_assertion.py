import pytest

from ymcommon.assertion import MAX_MSG_SIZE, YmAssertError, ymassert


class CustomError(YmAssertError):
    pass


def test_false_condition_raises_given_type():
    with pytest.raises(CustomError) as info:
        ymassert(False, CustomError, "value {}", 5)
    assert "value 5" in str(info.value)


def test_message_carries_location_prefix():
    with pytest.raises(CustomError) as info:
        ymassert(0, CustomError, "bad")
    msg = info.value.what()
    assert msg.startswith('Assert @ "test_assertion.py:')
    assert msg.endswith(": bad")


def test_true_condition_returns_none():
    result = ymassert(1 == 1, CustomError, "never")
    assert result is None


def test_message_truncated():
    with pytest.raises(YmAssertError) as info:
        ymassert(False, YmAssertError, "x" * 500)
    assert len(info.value.what()) == MAX_MSG_SIZE - 1


def test_direct_construction_truncates():
    err = YmAssertError("y" * 1000)
    assert len(str(err)) == MAX_MSG_SIZE - 1
    assert err.what() == "y" * (MAX_MSG_SIZE - 1)


def test_subclass_caught_as_base():
    with pytest.raises(YmAssertError):
        ymassert(False, CustomError, "oops")


def test_non_assert_error_type_rejected():
    with pytest.raises(TypeError):
        ymassert(False, ValueError, "nope")


def test_braces_left_alone_without_args():
    with pytest.raises(CustomError) as info:
        ymassert(False, CustomError, "literal {}")
    assert info.value.what().endswith("literal {}")