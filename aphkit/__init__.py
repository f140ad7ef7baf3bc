"""Engine groundwork: bit helpers, results, UUIDv4, shader and queue types, resource states and samplers."""

__version__ = "0.1.0"

__all__ = [
    "bitops",
    "gfxtypes",
    "gfxutils",
    "result",
    "sampler",
    "uuid4",
]