# rdsdecode

Building blocks for decoding Radio Data System (RDS) data carried on FM
broadcasts. An RDS group is four 16-bit blocks (A, B, C, D); this package
extracts fields from them, decodes clock time and country codes, and keeps
track of the values a station has sent.

## Installation

```
pip install .
```

The package has no runtime dependencies and needs Python 3.10 or later.

## Modules

### `rdsdecode.blocks`

Field extractors for a group given as a sequence of four integers, indexed
by the `Block` enumeration (`A`, `B`, `C`, `D`):

- `group_pi(data)`: programme identification code (block A).
- `group_pty(data)`: programme type code (bits 5–9 of block B).
- `group_tp(data)`: traffic programme flag (bit 10 of block B).
- `group0_ta(data)`: traffic announcement flag of a type 0 group.
- `group0_ms(data)`: music/speech switch of a type 0 group, `True` for music.
- `group0_ps_position(data)`: PS segment address, 0 to 3.
- `group0a_af1(data)` and `group0a_af2(data)`: the two alternative frequency
  codes in block C of a type 0A group.

### `rdsdecode.af`

`AlternativeFrequencies` is a set of AF codes from `AF_MIN` (1) to `AF_MAX`
(204), stored as a bitmap of `BUFFER_SIZE` bytes.

- `add(value)` marks a code and returns `False` if it is out of range.
- `contains(value)` tells whether a code has been marked; out-of-range codes
  are never present.
- `clear()` removes every code.
- `to_bytes()` returns a copy of the bitmap, most significant bit first.

It also supports `in`, iteration in ascending order and `len()`.

### `rdsdecode.clock`

`decode_clock_time(mjd, hour, minute, offset)` converts the clock-time fields
of a type 4A group (modified Julian day, UTC hour and minute, local offset in
half hours) into a frozen `ClockTime` dataclass with `year`, `month`, `day`,
`hour`, `minute` and `offset` in local time. It raises `ValueError` when the
hour is 24 or more or the minute is 60 or more.
`ClockTime.offset_minutes()` returns the offset in minutes.

### `rdsdecode.country`

The `Country` enumeration (`Country.UNKNOWN` is 0) with `lookup_name(country)`,
returning an English name or `"Unknown"`, and `lookup_iso(country)`, returning
an ISO 3166 alpha-2 code or `"??"`. A few areas with no single code give `"--"`.

### `rdsdecode.ecc`

`lookup_country(pi, ecc)` resolves a `Country` from the country nibble of the
PI code and the Extended Country Code. It returns `Country.UNKNOWN` when
either value is `None`, when the PI is `PI_UNKNOWN`, when the PI country
nibble is 0, or when the ECC is outside the known ranges.

### `rdsdecode.buffer`

`StationBuffer(extended_check=False)` holds the last accepted PI, PTY, TP, TA,
MS, ECC, country and AF set, readable through the properties `pi`, `pty`,
`tp`, `ta`, `ms`, `ecc`, `country` and `af`. Values not yet received are
`PI_UNKNOWN`, `PTY_UNKNOWN`, `ECC_UNKNOWN` (all -1), `Country.UNKNOWN`, or the
`UNKNOWN` member of `TrafficProgramme`, `TrafficAnnouncement` and
`MusicSpeech`.

Each `update_pi`, `update_pty`, `update_tp`, `update_ta`, `update_ms`,
`update_ecc`, `update_country` and `add_af` call returns `True` only when the
accepted value changed. With `extended_check` set to `True`, a new value must
arrive twice in a row before it is accepted. `clear()` forgets every value and
keeps the `extended_check` setting.

## Example

```python
from rdsdecode.blocks import group_pi, group_pty, group0_ps_position
from rdsdecode.buffer import StationBuffer
from rdsdecode.clock import decode_clock_time

data = (0x3566, 0x054F, 0xE4A4, 0x2020)

station = StationBuffer()
station.update_pi(group_pi(data))     # True: first PI seen
station.update_pi(group_pi(data))     # False: unchanged
station.update_pty(group_pty(data))   # True, PTY 10
print(group0_ps_position(data))       # 3

ct = decode_clock_time(60000, 12, 30, 2)
print(ct.year, ct.month, ct.day, ct.hour, ct.minute, ct.offset_minutes())
```

## What it does not do

The package provides the pieces, not a complete decoder. It does not parse
groups from hex strings, does not dispatch groups by type, does not assemble
the programme service name, radiotext or programme type name, and has no
callbacks and no command-line program. Codes following the LF/MF marker (250)
in a type 0A group are not interpreted; the caller decides what to do with
`group0a_af1` and `group0a_af2`.

## Running the tests

```
pip install .[test]
pytest
```