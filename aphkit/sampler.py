"""Sampler descriptions and the presets the renderer builds them from."""

import enum
from dataclasses import dataclass

from aphkit.gfxutils import CompareOp

__all__ = [
    "SamplerPreset",
    "Filter",
    "MipmapMode",
    "AddressMode",
    "SamplerCreateInfo",
    "sampler_create_info",
    "LOD_CLAMP_NONE",
    "DEFAULT_GEOMETRY_ANISOTROPY",
]

# Upper LOD bound meaning "no clamping".
LOD_CLAMP_NONE = 1000.0
DEFAULT_GEOMETRY_ANISOTROPY = 16.0


class SamplerPreset(enum.Enum):
    NEAREST_CLAMP = enum.auto()
    LINEAR_CLAMP = enum.auto()
    TRILINEAR_CLAMP = enum.auto()
    NEAREST_WRAP = enum.auto()
    LINEAR_WRAP = enum.auto()
    TRILINEAR_WRAP = enum.auto()
    NEAREST_SHADOW = enum.auto()
    LINEAR_SHADOW = enum.auto()
    DEFAULT_GEOMETRY_FILTER_WRAP = enum.auto()
    DEFAULT_GEOMETRY_FILTER_CLAMP = enum.auto()


class Filter(enum.IntEnum):
    NEAREST = 0
    LINEAR = 1


class MipmapMode(enum.IntEnum):
    NEAREST = 0
    LINEAR = 1


class AddressMode(enum.IntEnum):
    REPEAT = 0
    MIRRORED_REPEAT = 1
    CLAMP_TO_EDGE = 2
    CLAMP_TO_BORDER = 3


@dataclass
class SamplerCreateInfo:
    """Everything needed to create a sampler."""

    min_filter: Filter = Filter.LINEAR
    mag_filter: Filter = Filter.LINEAR
    mip_map_mode: MipmapMode = MipmapMode.LINEAR
    address_u: AddressMode = AddressMode.CLAMP_TO_EDGE
    address_v: AddressMode = AddressMode.CLAMP_TO_EDGE
    address_w: AddressMode = AddressMode.CLAMP_TO_EDGE
    compare_func: CompareOp = CompareOp.NEVER
    mip_lod_bias: float = 0.0
    set_lod_range: bool = False
    min_lod: float = 0.0
    max_lod: float = 0.0
    max_anisotropy: float = 0.0
    immutable: bool = False


_SHADOW = frozenset({SamplerPreset.NEAREST_SHADOW, SamplerPreset.LINEAR_SHADOW})

_LINEAR_MIPMAP = frozenset(
    {
        SamplerPreset.TRILINEAR_CLAMP,
        SamplerPreset.TRILINEAR_WRAP,
        SamplerPreset.DEFAULT_GEOMETRY_FILTER_WRAP,
        SamplerPreset.DEFAULT_GEOMETRY_FILTER_CLAMP,
    }
)

_LINEAR_FILTER = frozenset(
    {
        SamplerPreset.DEFAULT_GEOMETRY_FILTER_CLAMP,
        SamplerPreset.DEFAULT_GEOMETRY_FILTER_WRAP,
        SamplerPreset.LINEAR_CLAMP,
        SamplerPreset.LINEAR_WRAP,
        SamplerPreset.TRILINEAR_CLAMP,
        SamplerPreset.TRILINEAR_WRAP,
        SamplerPreset.LINEAR_SHADOW,
    }
)

_CLAMPED = frozenset(
    {
        SamplerPreset.DEFAULT_GEOMETRY_FILTER_CLAMP,
        SamplerPreset.LINEAR_CLAMP,
        SamplerPreset.NEAREST_CLAMP,
        SamplerPreset.TRILINEAR_CLAMP,
        SamplerPreset.NEAREST_SHADOW,
        SamplerPreset.LINEAR_SHADOW,
    }
)

_ANISOTROPIC = frozenset(
    {SamplerPreset.DEFAULT_GEOMETRY_FILTER_WRAP, SamplerPreset.DEFAULT_GEOMETRY_FILTER_CLAMP}
)


def sampler_create_info(preset: SamplerPreset) -> SamplerCreateInfo:
    """Build the sampler description for a preset."""
    preset = SamplerPreset(preset)
    filt = Filter.LINEAR if preset in _LINEAR_FILTER else Filter.NEAREST
    address = AddressMode.CLAMP_TO_EDGE if preset in _CLAMPED else AddressMode.REPEAT
    return SamplerCreateInfo(
        min_filter=filt,
        mag_filter=filt,
        mip_map_mode=MipmapMode.LINEAR if preset in _LINEAR_MIPMAP else MipmapMode.NEAREST,
        address_u=address,
        address_v=address,
        address_w=address,
        compare_func=CompareOp.LESS_EQUAL if preset in _SHADOW else CompareOp.NEVER,
        max_lod=LOD_CLAMP_NONE,
        max_anisotropy=DEFAULT_GEOMETRY_ANISOTROPY if preset in _ANISOTROPIC else 1.0,
    )