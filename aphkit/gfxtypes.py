"""Shader stages, queue types and graphics limits shared by the renderer."""

import enum
from pathlib import PurePath

__all__ = [
    "ShaderStage",
    "QueueType",
    "QueueFlag",
    "stage_from_path",
    "queue_type_from_flags",
    "NUM_DESCRIPTOR_SETS",
    "NUM_BINDINGS",
    "NUM_BINDINGS_BINDLESS_VARYING",
    "NUM_ATTACHMENTS",
    "NUM_VERTEX_ATTRIBS",
    "NUM_VERTEX_BUFFERS",
    "PUSH_CONSTANT_SIZE",
    "MAX_UBO_SIZE",
    "NUM_USER_SPEC_CONSTANTS",
    "NUM_INTERNAL_SPEC_CONSTANTS",
    "NUM_TOTAL_SPEC_CONSTANTS",
    "NUM_SETS_PER_POOL",
    "DESCRIPTOR_RING_SIZE",
    "DEFAULT_FENCE_TIMEOUT",
]

NUM_DESCRIPTOR_SETS = 4
NUM_BINDINGS = 32
NUM_BINDINGS_BINDLESS_VARYING = 16 * 1024
NUM_ATTACHMENTS = 8
NUM_VERTEX_ATTRIBS = 16
NUM_VERTEX_BUFFERS = 4
PUSH_CONSTANT_SIZE = 128
MAX_UBO_SIZE = 16 * 1024
NUM_USER_SPEC_CONSTANTS = 8
NUM_INTERNAL_SPEC_CONSTANTS = 4
NUM_TOTAL_SPEC_CONSTANTS = NUM_USER_SPEC_CONSTANTS + NUM_INTERNAL_SPEC_CONSTANTS
NUM_SETS_PER_POOL = 16
DESCRIPTOR_RING_SIZE = 8
# Nanoseconds.
DEFAULT_FENCE_TIMEOUT = 100_000_000_000


class ShaderStage(enum.Enum):
    NA = "NA"
    VS = "VS"
    TCS = "TCS"
    TES = "TES"
    GS = "GS"
    FS = "FS"
    CS = "CS"
    TS = "TS"
    MS = "MS"

    def __str__(self) -> str:
        return self.value


class QueueType(enum.Enum):
    UNSUPPORT = "Unsupport"
    GRAPHICS = "Graphics"
    COMPUTE = "Compute"
    TRANSFER = "Transfer"

    def __str__(self) -> str:
        return self.value


class QueueFlag(enum.IntFlag):
    GRAPHICS = 0x1
    COMPUTE = 0x2
    TRANSFER = 0x4
    SPARSE_BINDING = 0x8


_STAGE_BY_EXTENSION = {
    ".vert": ShaderStage.VS,
    ".tesc": ShaderStage.TCS,
    ".tese": ShaderStage.TES,
    ".geom": ShaderStage.GS,
    ".frag": ShaderStage.FS,
    ".comp": ShaderStage.CS,
}


def stage_from_path(path) -> ShaderStage:
    """Shader stage implied by a file's extension; ``ShaderStage.NA`` if unknown."""
    return _STAGE_BY_EXTENSION.get(PurePath(path).suffix, ShaderStage.NA)


def queue_type_from_flags(flags) -> QueueType:
    """The most capable queue type a family's flags allow: graphics, then compute, then transfer."""
    flags = QueueFlag(flags)
    if flags & QueueFlag.GRAPHICS:
        return QueueType.GRAPHICS
    if flags & QueueFlag.COMPUTE:
        return QueueType.COMPUTE
    if flags & QueueFlag.TRANSFER:
        return QueueType.TRANSFER
    return QueueType.UNSUPPORT