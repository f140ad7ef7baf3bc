import pytest

from aphkit.gfxtypes import (
    QueueFlag,
    QueueType,
    ShaderStage,
    queue_type_from_flags,
    stage_from_path,
)


@pytest.mark.parametrize(
    "path, stage",
    [
        ("shaders/triangle.vert", ShaderStage.VS),
        ("a.tesc", ShaderStage.TCS),
        ("a.tese", ShaderStage.TES),
        ("a.geom", ShaderStage.GS),
        ("dir/x.frag", ShaderStage.FS),
        ("x.comp", ShaderStage.CS),
        ("x.txt", ShaderStage.NA),
        ("noext", ShaderStage.NA),
    ],
)
def test_stage_from_path(path, stage):
    assert stage_from_path(path) is stage


def test_stage_uses_last_extension():
    assert stage_from_path("shader.frag.spv") is ShaderStage.NA


@pytest.mark.parametrize(
    "path, name",
    [
        ("a.vert", "VS"),
        ("a.tesc", "TCS"),
        ("a.tese", "TES"),
        ("a.geom", "GS"),
        ("a.frag", "FS"),
        ("a.comp", "CS"),
        ("a.bin", "NA"),
    ],
)
def test_shader_stage_str_is_name(path, name):
    assert str(stage_from_path(path)) == name


def test_queue_type_names():
    assert str(queue_type_from_flags(0)) == "Unsupport"
    assert str(queue_type_from_flags(QueueFlag.TRANSFER)) == "Transfer"
    assert str(queue_type_from_flags(QueueFlag.GRAPHICS)) == "Graphics"


@pytest.mark.parametrize(
    "flags, expected",
    [
        (QueueFlag.GRAPHICS | QueueFlag.COMPUTE | QueueFlag.TRANSFER, QueueType.GRAPHICS),
        (QueueFlag.COMPUTE | QueueFlag.TRANSFER, QueueType.COMPUTE),
        (QueueFlag.TRANSFER, QueueType.TRANSFER),
        (QueueFlag.SPARSE_BINDING, QueueType.UNSUPPORT),
        (0, QueueType.UNSUPPORT),
    ],
)
def test_queue_type_from_flags(flags, expected):
    assert queue_type_from_flags(flags) is expected


def test_queue_type_accepts_plain_int():
    assert queue_type_from_flags(int(QueueFlag.COMPUTE)) is QueueType.COMPUTE