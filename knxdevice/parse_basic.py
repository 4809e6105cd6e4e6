"""Parsing of incoming application-layer services with short headers."""

from __future__ import annotations

from .apdu import (
    MASK_4BIT,
    MASK_6BIT,
    AdcRead,
    AuthorizeRequest,
    DeviceDescriptorRead,
    FunctionPropertyCommand,
    FunctionPropertyState,
    GroupValueRead,
    GroupValueResponse,
    GroupValueWrite,
    IndividualAddressRead,
    IndividualAddressSerialNumberRead,
    IndividualAddressSerialNumberWrite,
    IndividualAddressWrite,
    KeyWrite,
    MemoryRead,
    MemoryWrite,
    PropertyDescriptionRead,
    PropertyValueRead,
    PropertyValueWrite,
    Restart,
    RestartMasterReset,
    TruncatedPayloadError,
)

_SERIAL_SIZE = 6


def check_len(data: bytes, expected: int) -> None:
    """Raise TruncatedPayloadError unless ``data`` holds at least ``expected`` bytes."""
    if len(data) < expected:
        raise TruncatedPayloadError(expected, len(data))


def _u16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 2], "big")


def _count_and_start(data: bytes) -> tuple[int, int]:
    count = (data[2] >> 4) & MASK_4BIT
    start_index = ((data[2] & MASK_4BIT) << 8) | data[3]
    return count, start_index


def parse_group_value_write(data: bytes) -> GroupValueWrite:
    """Parse a GroupValueWrite; the data is kept as received."""
    return GroupValueWrite(asap=0, data=bytes(data))


def parse_group_value_response(data: bytes) -> GroupValueResponse:
    """Parse a GroupValueResponse; the data is kept as received."""
    return GroupValueResponse(asap=0, data=bytes(data))


def parse_group_value_read(data: bytes) -> GroupValueRead:
    """Parse a GroupValueRead; it carries no data."""
    return GroupValueRead(asap=0)


def parse_property_value_read(data: bytes) -> PropertyValueRead:
    """Parse a PropertyValueRead (at least 4 bytes)."""
    data = bytes(data)
    check_len(data, 4)
    count, start_index = _count_and_start(data)
    return PropertyValueRead(
        object_index=data[0],
        property_id=data[1],
        count=count,
        start_index=start_index,
    )


def parse_property_value_write(data: bytes) -> PropertyValueWrite:
    """Parse a PropertyValueWrite (at least 4 bytes, then the value data)."""
    data = bytes(data)
    check_len(data, 4)
    count, start_index = _count_and_start(data)
    return PropertyValueWrite(
        object_index=data[0],
        property_id=data[1],
        count=count,
        start_index=start_index,
        data=data[4:],
    )


def parse_device_descriptor_read(data: bytes) -> DeviceDescriptorRead:
    """Parse a DeviceDescriptorRead; a missing type byte means type 0."""
    data = bytes(data)
    first = data[0] if data else 0
    return DeviceDescriptorRead(descriptor_type=first & MASK_6BIT)


def parse_memory_read(data: bytes) -> MemoryRead:
    """Parse a MemoryRead (count nibble and 16-bit address)."""
    data = bytes(data)
    check_len(data, 3)
    return MemoryRead(count=data[0] & MASK_4BIT, address=_u16(data, 1))


def parse_memory_write(data: bytes) -> MemoryWrite:
    """Parse a MemoryWrite (count nibble, 16-bit address, data)."""
    data = bytes(data)
    check_len(data, 3)
    return MemoryWrite(
        count=data[0] & MASK_4BIT,
        address=_u16(data, 1),
        data=data[3:],
    )


def parse_restart(data: bytes) -> Restart:
    """Parse a plain Restart."""
    return Restart()


def parse_individual_address_write(data: bytes) -> IndividualAddressWrite:
    """Parse an IndividualAddressWrite carrying the new 16-bit address."""
    data = bytes(data)
    check_len(data, 2)
    return IndividualAddressWrite(address=_u16(data, 0))


def parse_individual_address_read(data: bytes) -> IndividualAddressRead:
    """Parse an IndividualAddressRead."""
    return IndividualAddressRead()


def parse_authorize_request(data: bytes) -> AuthorizeRequest:
    """Parse an AuthorizeRequest: a reserved byte then a 32-bit key."""
    data = bytes(data)
    check_len(data, 5)
    return AuthorizeRequest(key=int.from_bytes(data[1:5], "big"))


def parse_restart_master_reset(data: bytes) -> RestartMasterReset:
    """Parse a master-reset restart: a leading byte, erase code and channel."""
    data = bytes(data)
    check_len(data, 3)
    return RestartMasterReset(erase_code=data[1], channel=data[2])


def parse_property_description_read(data: bytes) -> PropertyDescriptionRead:
    """Parse a PropertyDescriptionRead."""
    data = bytes(data)
    check_len(data, 3)
    return PropertyDescriptionRead(
        object_index=data[0],
        property_id=data[1],
        property_index=data[2],
    )


def parse_individual_address_serial_number_read(
    data: bytes,
) -> IndividualAddressSerialNumberRead:
    """Parse an IndividualAddressSerialNumberRead carrying a 6-byte serial."""
    data = bytes(data)
    check_len(data, _SERIAL_SIZE)
    return IndividualAddressSerialNumberRead(serial=data[:_SERIAL_SIZE])


def parse_individual_address_serial_number_write(
    data: bytes,
) -> IndividualAddressSerialNumberWrite:
    """Parse an IndividualAddressSerialNumberWrite: serial then new address."""
    data = bytes(data)
    check_len(data, _SERIAL_SIZE + 2)
    return IndividualAddressSerialNumberWrite(
        serial=data[:_SERIAL_SIZE],
        address=_u16(data, _SERIAL_SIZE),
    )


def parse_key_write(data: bytes) -> KeyWrite:
    """Parse a KeyWrite: access level then a 32-bit key."""
    data = bytes(data)
    check_len(data, 5)
    return KeyWrite(level=data[0], key=int.from_bytes(data[1:5], "big"))


def parse_function_property_command(data: bytes) -> FunctionPropertyCommand:
    """Parse a FunctionPropertyCommand."""
    data = bytes(data)
    check_len(data, 2)
    return FunctionPropertyCommand(
        object_index=data[0], property_id=data[1], data=data[2:]
    )


def parse_function_property_state(data: bytes) -> FunctionPropertyState:
    """Parse a FunctionPropertyState read."""
    data = bytes(data)
    check_len(data, 2)
    return FunctionPropertyState(
        object_index=data[0], property_id=data[1], data=data[2:]
    )


def parse_adc_read(data: bytes) -> AdcRead:
    """Parse an AdcRead: 6-bit channel then count."""
    data = bytes(data)
    check_len(data, 2)
    return AdcRead(channel=data[0] & MASK_6BIT, count=data[1])