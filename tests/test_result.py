import pytest

from aphkit.result import (
    Result,
    ResultCode,
    ResultError,
    calculate_full_mip_levels,
    hash_combine,
)


def test_success_result():
    result = Result(ResultCode.SUCCESS)
    assert result.success() is True
    assert bool(result) is True
    assert str(result) == "Success."


@pytest.mark.parametrize(
    "code, text",
    [
        (ResultCode.ARGUMENT_OUT_OF_RANGE, "Argument Out of Range."),
        (ResultCode.RUNTIME_ERROR, "Runtime Error."),
    ],
)
def test_failure_default_messages(code, text):
    result = Result(code)
    assert result.success() is False
    assert str(result) == text


def test_custom_message_wins():
    result = Result(ResultCode.RUNTIME_ERROR, "device lost")
    assert str(result) == "device lost"


def test_raise_for_error_on_success_returns_self():
    result = Result(ResultCode.SUCCESS)
    assert result.raise_for_error() is result


def test_raise_for_error_on_failure():
    result = Result(ResultCode.RUNTIME_ERROR, "boom")
    with pytest.raises(ResultError) as info:
        result.raise_for_error()
    assert info.value.result is result
    assert str(info.value) == "boom"


def test_hash_combine_from_zero():
    assert hash_combine(0, 0) == 0x9E3779B9


def test_hash_combine_is_deterministic_and_64_bit():
    first = hash_combine(12345, "texture")
    assert first == hash_combine(12345, "texture")
    assert 0 <= first < 1 << 64
    assert hash_combine(first, 7) != hash_combine(first, 8)


def test_mip_levels_single_pixel():
    assert calculate_full_mip_levels(1, 1) == 1


def test_mip_levels_uses_largest_dimension():
    assert calculate_full_mip_levels(1024, 512) == calculate_full_mip_levels(512, 1024)
    assert calculate_full_mip_levels(1024, 512) == 11


@pytest.mark.parametrize("w, h", [(1920, 1080), (3, 7), (4096, 1), (255, 256)])
def test_mip_levels_invariant(w, h):
    levels = calculate_full_mip_levels(w, h, 1)
    assert 2 ** (levels - 1) <= max(w, h) < 2**levels


def test_mip_levels_rejects_empty_image():
    with pytest.raises(ValueError):
        calculate_full_mip_levels(0, 0)