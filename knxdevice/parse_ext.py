"""Parsing of incoming application-layer services with extended headers."""

from __future__ import annotations

from .apdu import (
    MASK_4BIT,
    MemoryExtRead,
    MemoryExtWrite,
    PropertyExtDescriptionRead,
    PropertyValueExtRead,
    PropertyValueExtWriteCon,
    PropertyValueExtWriteUnCon,
    SystemNetworkParameterRead,
)
from .parse_basic import check_len

_EXT_HEADER_SIZE = 8
_EXT_DATA_OFFSET = 7


def _u16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 2], "big")


def _u24(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 3], "big")


def parse_ext_ot_oi_pid(data: bytes) -> tuple[int, int, int]:
    """Decode ``(object_type, object_instance, property_id)`` from the first 5 bytes.

    The object instance and property id share three bytes as 12-bit fields.
    """
    data = bytes(data)
    check_len(data, 5)
    object_type = _u16(data, 0)
    object_instance = (data[2] << 4) | (data[3] >> 4)
    property_id = ((data[3] & MASK_4BIT) << 8) | data[4]
    return object_type, object_instance, property_id


def parse_ext_property_header(data: bytes) -> tuple[int, int, int, int, int]:
    """Decode ``(object_type, object_instance, property_id, count, start_index)``."""
    data = bytes(data)
    check_len(data, _EXT_HEADER_SIZE)
    object_type, object_instance, property_id = parse_ext_ot_oi_pid(data)
    return object_type, object_instance, property_id, data[5], _u16(data, 6)


def parse_memory_ext_read(data: bytes) -> MemoryExtRead:
    """Parse a MemoryExtRead: count then a 24-bit address."""
    data = bytes(data)
    check_len(data, 4)
    return MemoryExtRead(count=data[0], address=_u24(data, 1))


def parse_memory_ext_write(data: bytes) -> MemoryExtWrite:
    """Parse a MemoryExtWrite: count, 24-bit address, then data."""
    data = bytes(data)
    check_len(data, 4)
    return MemoryExtWrite(count=data[0], address=_u24(data, 1), data=data[4:])


def parse_system_network_parameter_read(data: bytes) -> SystemNetworkParameterRead:
    """Parse a SystemNetworkParameterRead.

    The property id occupies the upper 12 bits of the second word; the test
    info starts at the byte holding its low nibble.
    """
    data = bytes(data)
    check_len(data, 4)
    return SystemNetworkParameterRead(
        object_type=_u16(data, 0),
        property_id=_u16(data, 2) >> 4,
        test_info=data[3:],
    )


def parse_property_value_ext_read(data: bytes) -> PropertyValueExtRead:
    """Parse a PropertyValueExtRead (8-byte extended header)."""
    object_type, object_instance, property_id, count, start_index = (
        parse_ext_property_header(data)
    )
    return PropertyValueExtRead(
        object_type=object_type,
        object_instance=object_instance,
        property_id=property_id,
        count=count,
        start_index=start_index,
    )


def parse_property_value_ext_write_con(data: bytes) -> PropertyValueExtWriteCon:
    """Parse a confirmed PropertyValueExtWrite."""
    data = bytes(data)
    object_type, object_instance, property_id, count, start_index = (
        parse_ext_property_header(data)
    )
    return PropertyValueExtWriteCon(
        object_type=object_type,
        object_instance=object_instance,
        property_id=property_id,
        count=count,
        start_index=start_index,
        data=data[_EXT_DATA_OFFSET:],
    )


def parse_property_value_ext_write_uncon(data: bytes) -> PropertyValueExtWriteUnCon:
    """Parse an unconfirmed PropertyValueExtWrite."""
    data = bytes(data)
    object_type, object_instance, property_id, count, start_index = (
        parse_ext_property_header(data)
    )
    return PropertyValueExtWriteUnCon(
        object_type=object_type,
        object_instance=object_instance,
        property_id=property_id,
        count=count,
        start_index=start_index,
        data=data[_EXT_DATA_OFFSET:],
    )


def parse_property_ext_description_read(data: bytes) -> PropertyExtDescriptionRead:
    """Parse a PropertyExtDescriptionRead: 4-bit type and 12-bit property index."""
    data = bytes(data)
    check_len(data, _EXT_HEADER_SIZE)
    object_type, object_instance, property_id = parse_ext_ot_oi_pid(data)
    return PropertyExtDescriptionRead(
        object_type=object_type,
        object_instance=object_instance,
        property_id=property_id,
        description_type=data[5] >> 4,
        property_index=((data[5] & MASK_4BIT) << 8) | data[6],
    )