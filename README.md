# aphkit

Small building blocks for an engine runtime, in plain Python with no
third-party dependencies:

- `aphkit.bitops` – bit counting and iteration over set bits and runs of set bits
- `aphkit.result` – `Result` / `ResultCode` values with `ResultError`, plus `hash_combine` and `calculate_full_mip_levels`
- `aphkit.uuid4` – random version-4 UUIDs with string and byte round trips
- `aphkit.gfxtypes` – shader stages, queue types and queue flags, with graphics limits as constants
- `aphkit.gfxutils` – comparison operators, resource states, access flags, image layouts and the conversions between them
- `aphkit.sampler` – sampler descriptions and the presets they are built from

Install with `pip install .`, and `pip install .[test]` to run the tests
with `pytest`.

## Bits

```python
from aphkit.bitops import iter_bits, iter_bit_ranges, trailing_zeroes, leading_zeroes

list(iter_bits(0b1011))               # [0, 1, 3]
list(iter_bit_ranges(0b01100111, 8))  # [(0, 3), (5, 2)]
trailing_zeroes(0b1000, 32)           # 3
leading_zeroes(1, 32)                 # 31
```

`leading_zeroes`, `trailing_zeroes`, `trailing_ones` and
`iter_bit_ranges` work on a fixed `width` (32 by default) and raise
`ValueError` for a value that does not fit in it. A value with every bit
set yields a single range `(0, width)`.

## Results

```python
from aphkit.result import Result, ResultCode, ResultError, calculate_full_mip_levels

ok = Result(ResultCode.SUCCESS)
bool(ok)                              # True
str(Result(ResultCode.RUNTIME_ERROR)) # "Runtime Error."

try:
    Result(ResultCode.ARGUMENT_OUT_OF_RANGE, "index 9").raise_for_error()
except ResultError as err:
    print(err.result.message)         # "index 9"

calculate_full_mip_levels(1024, 512)  # 11
```

`hash_combine(seed, value)` mixes `hash(value)` into a 64-bit seed and
returns the new seed.

## UUIDs

```python
from aphkit.uuid4 import UUID, UUIDGenerator

gen = UUIDGenerator(seed=42)          # or UUIDGenerator(rng=random.Random(...))
uid = gen.generate()
text = str(uid)                       # 8-4-4-4-12 lower-case hex
assert UUID.from_string(text) == uid
assert UUID.from_bytes(uid.to_bytes()) == uid
```

Generated UUIDs carry version 4 and variant 1. UUIDs are hashable and
ordered; `from_string` and the constructor raise `ValueError` on malformed
input.

## Shader stages and queues

```python
from aphkit.gfxtypes import QueueFlag, QueueType, ShaderStage, stage_from_path, queue_type_from_flags

stage_from_path("shaders/lit.frag")   # ShaderStage.FS
stage_from_path("notes.txt")          # ShaderStage.NA
queue_type_from_flags(QueueFlag.COMPUTE | QueueFlag.TRANSFER)  # QueueType.COMPUTE
```

## Resource states

```python
from aphkit.gfxutils import ResourceState, access_flags, image_layout, sample_count, error_string

state = ResourceState.COPY_SOURCE | ResourceState.SHADER_RESOURCE
access_flags(state)   # AccessFlag.TRANSFER_READ | AccessFlag.SHADER_READ
image_layout(state)   # ImageLayout.TRANSFER_SRC_OPTIMAL
sample_count(3)       # 4
error_string(-4)      # "ERROR_DEVICE_LOST"
```

`image_layout` picks the first matching state in a fixed priority order;
`error_string` returns `"UNKNOWN_ERROR"` for codes it does not know.

## Samplers

```python
from aphkit.sampler import SamplerPreset, sampler_create_info

info = sampler_create_info(SamplerPreset.LINEAR_SHADOW)
info.compare_func     # CompareOp.LESS_EQUAL
info.address_u        # AddressMode.CLAMP_TO_EDGE
```

## What it does not do

aphkit describes graphics state but does not talk to a GPU: there is no
device, queue submission, swap chain or pipeline creation. It has no
logger, timer, command-line parser, file access layer or application base
class, and installs no commands.