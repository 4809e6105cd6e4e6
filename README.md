# knxdevice

Building blocks for the application layer of a KNX device: encoding outgoing
APDU payloads, parsing incoming ones into typed indications, and looking up
group objects through the association table.

## Installation

```
pip install knxdevice
```

The package has no runtime dependencies. To run the tests:

```
pip install "knxdevice[test]"
pytest
```

## Service codes

`knxdevice.apdu.ApduType` is an `IntEnum` of the 10-bit APCI service codes,
with upper-case member names such as `ApduType.GROUP_VALUE_WRITE` or
`ApduType.PROPERTY_VALUE_READ`.

- `ApduType.from_raw(raw)` decodes a raw APCI value (only the low 10 bits are
  used). Services that carry a short value in the low six bits, such as
  `GROUP_VALUE_WRITE` or `MEMORY_READ`, are matched on their upper bits. It
  returns `None` for unknown codes.
- `apci_bytes(apdu_type)` splits a code into its two wire bytes `(high, low)`.

## Parsing incoming APDUs

`knxdevice.parse.parse_raw_apdu` takes raw APDU bytes (the two APCI bytes
followed by the service data) and returns an instance of an `AppIndication`
subclass. `parse_indication` does the same when the `ApduType` is already known;
its data starts at the APCI low byte.

```python
from knxdevice.apdu import ApduType, PropertyValueRead
from knxdevice.parse import parse_indication

ind = parse_indication(ApduType.PROPERTY_VALUE_READ, bytes([0x00, 0x01, 0x10, 0x01]))
assert ind == PropertyValueRead(object_index=0, property_id=1, count=1, start_index=1)
```

The indications are frozen dataclasses (`GroupValueWrite`, `MemoryRead`,
`PropertyValueExtRead`, `RestartMasterReset` and so on); byte fields are
`bytes`. For group value services the data is kept as received, including the
APCI low byte that holds short values.

Errors are raised as exceptions derived from `AppLayerError`:

- `TruncatedPayloadError` when the data is too short, with `expected` and `got`;
- `UnsupportedApduError` for services that have no parser, with `apdu_type`;
- `MalformedDataError` from `parse_raw_apdu` for fewer than two bytes or an
  unknown service code.

The per-service parsers live in `knxdevice.parse_basic` (services with short
headers, plus `check_len`) and `knxdevice.parse_ext` (memory-extended, system
network parameter and extended property services, plus
`parse_ext_ot_oi_pid` and `parse_ext_property_header`).

## Encoding responses

`knxdevice.encode` builds outgoing payloads and returns `bytes`:

```python
from knxdevice.encode import encode_group_value_write, encode_memory_response

encode_group_value_write(b"\x01")            # b'\x00\x81' - value packed into the APCI byte
encode_memory_response(0x0010, b"\xde\xad")  # b'\x02\x42\x00\x10\xde\xad'
```

`encode_memory_response` raises `ValueError` for more than 15 data bytes, and
`encode_individual_address_serial_number_response` raises `ValueError` unless
the serial number is 6 bytes long. Other encoders cover property value and
description responses (standard and extended), memory-extended responses,
device descriptor, restart, authorize, key, ADC, function property and system
network parameter responses, and `encode_raw_apdu(apdu_type, data)`.

## Association table

`knxdevice.association_table.AssociationTable` maps TSAPs (indices into the
address table) to ASAPs (group object numbers). It is loaded from the table
bytes written by the configuration tool:

```python
from knxdevice.association_table import AssociationTable

table = AssociationTable()
table.load(bytes([0x00, 0x02, 0x00, 0x01, 0x00, 0x01, 0x00, 0x01, 0x00, 0x02]))
table.entry_count()         # 2
table.translate_asap(2)     # 1
table.asaps_for_tsap(1)     # [1, 2]
table.next_asap(1, 1)       # (2, 2)
```

## What the package does not do

It handles application-layer payloads and the association table only. It does
not connect to a bus or an IP interface, build or parse complete frames, run a
transport layer, keep interface objects, properties, group objects, an address
table or device memory, or save and restore device state. Those parts, and any
logic that reacts to the parsed indications, are left to the code that uses it.