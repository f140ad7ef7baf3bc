"""Conversions from engine resource states and codes to graphics API values."""

import enum

__all__ = [
    "CompareOp",
    "ResourceState",
    "AccessFlag",
    "ImageLayout",
    "sample_count",
    "error_string",
    "access_flags",
    "image_layout",
]


class CompareOp(enum.IntEnum):
    """Depth and stencil comparison operators, valued as the API expects."""

    NEVER = 0
    LESS = 1
    EQUAL = 2
    LESS_EQUAL = 3
    GREATER = 4
    NOT_EQUAL = 5
    GREATER_EQUAL = 6
    ALWAYS = 7


class ResourceState(enum.Flag):
    """How a buffer or image is being used at a point in a frame."""

    UNDEFINED = 0
    GENERAL = enum.auto()
    COPY_SOURCE = enum.auto()
    COPY_DEST = enum.auto()
    VERTEX_BUFFER = enum.auto()
    UNIFORM_BUFFER = enum.auto()
    INDEX_BUFFER = enum.auto()
    UNORDERED_ACCESS = enum.auto()
    INDIRECT_ARGUMENT = enum.auto()
    RENDER_TARGET = enum.auto()
    DEPTH_STENCIL = enum.auto()
    SHADER_RESOURCE = enum.auto()
    PRESENT = enum.auto()
    ACCEL_STRUCT_READ = enum.auto()
    ACCEL_STRUCT_WRITE = enum.auto()


class AccessFlag(enum.IntFlag):
    """Memory access bits."""

    NONE = 0
    INDIRECT_COMMAND_READ = 0x00000001
    INDEX_READ = 0x00000002
    VERTEX_ATTRIBUTE_READ = 0x00000004
    UNIFORM_READ = 0x00000008
    INPUT_ATTACHMENT_READ = 0x00000010
    SHADER_READ = 0x00000020
    SHADER_WRITE = 0x00000040
    COLOR_ATTACHMENT_READ = 0x00000080
    COLOR_ATTACHMENT_WRITE = 0x00000100
    DEPTH_STENCIL_ATTACHMENT_READ = 0x00000200
    DEPTH_STENCIL_ATTACHMENT_WRITE = 0x00000400
    TRANSFER_READ = 0x00000800
    TRANSFER_WRITE = 0x00001000
    HOST_READ = 0x00002000
    HOST_WRITE = 0x00004000
    MEMORY_READ = 0x00008000
    MEMORY_WRITE = 0x00010000
    ACCELERATION_STRUCTURE_READ = 0x00200000
    ACCELERATION_STRUCTURE_WRITE = 0x00400000


class ImageLayout(enum.IntEnum):
    """Image memory layouts."""

    UNDEFINED = 0
    GENERAL = 1
    COLOR_ATTACHMENT_OPTIMAL = 2
    DEPTH_STENCIL_ATTACHMENT_OPTIMAL = 3
    DEPTH_STENCIL_READ_ONLY_OPTIMAL = 4
    SHADER_READ_ONLY_OPTIMAL = 5
    TRANSFER_SRC_OPTIMAL = 6
    TRANSFER_DST_OPTIMAL = 7
    PREINITIALIZED = 8
    PRESENT_SRC = 1000001002


_RESULT_NAMES = {
    1: "NOT_READY",
    2: "TIMEOUT",
    3: "EVENT_SET",
    4: "EVENT_RESET",
    5: "INCOMPLETE",
    -1: "ERROR_OUT_OF_HOST_MEMORY",
    -2: "ERROR_OUT_OF_DEVICE_MEMORY",
    -3: "ERROR_INITIALIZATION_FAILED",
    -4: "ERROR_DEVICE_LOST",
    -5: "ERROR_MEMORY_MAP_FAILED",
    -6: "ERROR_LAYER_NOT_PRESENT",
    -7: "ERROR_EXTENSION_NOT_PRESENT",
    -8: "ERROR_FEATURE_NOT_PRESENT",
    -9: "ERROR_INCOMPATIBLE_DRIVER",
    -10: "ERROR_TOO_MANY_OBJECTS",
    -11: "ERROR_FORMAT_NOT_SUPPORTED",
    -1000000000: "ERROR_SURFACE_LOST_KHR",
    -1000000001: "ERROR_NATIVE_WINDOW_IN_USE_KHR",
    1000001003: "SUBOPTIMAL_KHR",
    -1000001004: "ERROR_OUT_OF_DATE_KHR",
    -1000003001: "ERROR_INCOMPATIBLE_DISPLAY_KHR",
    -1000011001: "ERROR_VALIDATION_FAILED_EXT",
    -1000012000: "ERROR_INVALID_SHADER_NV",
}

_SAMPLE_COUNTS = (1, 2, 4, 8, 16, 32)
_MAX_SAMPLE_COUNT = 64

_ACCESS_BY_STATE = (
    (ResourceState.COPY_SOURCE, AccessFlag.TRANSFER_READ),
    (ResourceState.COPY_DEST, AccessFlag.TRANSFER_WRITE),
    (ResourceState.VERTEX_BUFFER, AccessFlag.VERTEX_ATTRIBUTE_READ),
    (ResourceState.UNIFORM_BUFFER, AccessFlag.UNIFORM_READ),
    (ResourceState.INDEX_BUFFER, AccessFlag.INDEX_READ),
    (ResourceState.UNORDERED_ACCESS, AccessFlag.SHADER_READ | AccessFlag.SHADER_WRITE),
    (ResourceState.INDIRECT_ARGUMENT, AccessFlag.INDIRECT_COMMAND_READ),
    (
        ResourceState.RENDER_TARGET,
        AccessFlag.COLOR_ATTACHMENT_READ | AccessFlag.COLOR_ATTACHMENT_WRITE,
    ),
    (ResourceState.DEPTH_STENCIL, AccessFlag.DEPTH_STENCIL_ATTACHMENT_WRITE),
    (ResourceState.SHADER_RESOURCE, AccessFlag.SHADER_READ),
    (ResourceState.PRESENT, AccessFlag.MEMORY_READ),
    (ResourceState.ACCEL_STRUCT_READ, AccessFlag.ACCELERATION_STRUCTURE_READ),
    (ResourceState.ACCEL_STRUCT_WRITE, AccessFlag.ACCELERATION_STRUCTURE_WRITE),
)

# Checked in order: the first state present decides the layout.
_LAYOUT_BY_STATE = (
    (ResourceState.COPY_SOURCE, ImageLayout.TRANSFER_SRC_OPTIMAL),
    (ResourceState.COPY_DEST, ImageLayout.TRANSFER_DST_OPTIMAL),
    (ResourceState.RENDER_TARGET, ImageLayout.COLOR_ATTACHMENT_OPTIMAL),
    (ResourceState.DEPTH_STENCIL, ImageLayout.DEPTH_STENCIL_ATTACHMENT_OPTIMAL),
    (ResourceState.UNORDERED_ACCESS, ImageLayout.GENERAL),
    (ResourceState.SHADER_RESOURCE, ImageLayout.SHADER_READ_ONLY_OPTIMAL),
    (ResourceState.PRESENT, ImageLayout.PRESENT_SRC),
    (ResourceState.GENERAL, ImageLayout.GENERAL),
)


def sample_count(num_samples: int) -> int:
    """Smallest supported sample count that is at least ``num_samples`` (capped at 64)."""
    for count in _SAMPLE_COUNTS:
        if num_samples <= count:
            return count
    return _MAX_SAMPLE_COUNT


def error_string(code: int) -> str:
    """Symbolic name of an API result code; ``"UNKNOWN_ERROR"`` for anything else."""
    return _RESULT_NAMES.get(int(code), "UNKNOWN_ERROR")


def access_flags(state: ResourceState) -> AccessFlag:
    """Union of the memory access bits implied by every part of ``state``."""
    state = ResourceState(state)
    result = AccessFlag.NONE
    for part, access in _ACCESS_BY_STATE:
        if state & part:
            result |= access
    return result


def image_layout(state: ResourceState) -> ImageLayout:
    """Image layout suited to ``state``, by a fixed priority of its parts."""
    state = ResourceState(state)
    for part, layout in _LAYOUT_BY_STATE:
        if state & part:
            return layout
    return ImageLayout.UNDEFINED