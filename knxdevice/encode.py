"""Encoding of outgoing application-layer payloads."""

from __future__ import annotations

from .apdu import (
    DESCRIPTOR_TYPE_UNSUPPORTED,
    MASK_4BIT,
    MASK_6BIT,
    MASK_12BIT,
    WRITE_ENABLE_FLAG,
    ApduType,
    apci_bytes,
)

_MAX_MEMORY_RESPONSE_DATA = 15


def _u16(value: int) -> bytes:
    return (value & 0xFFFF).to_bytes(2, "big")


def _u24(value: int) -> bytes:
    return (value & 0xFFFFFF).to_bytes(3, "big")


def _header(apdu_type: ApduType) -> bytes:
    return bytes(apci_bytes(apdu_type))


def _type_byte(write_enable: bool, data_type: int) -> int:
    pdt = data_type & MASK_6BIT
    return WRITE_ENABLE_FLAG | pdt if write_enable else pdt


def _description_fields(
    write_enable: bool, data_type: int, max_elements: int, access: int
) -> bytes:
    return bytes(
        (
            _type_byte(write_enable, data_type),
            (max_elements >> 8) & MASK_4BIT,
            max_elements & 0xFF,
            access & 0xFF,
        )
    )


def _ext_ot_oi_pid(object_type: int, object_instance: int, property_id: int) -> bytes:
    return _u16(object_type) + bytes(
        (
            (object_instance >> 4) & 0xFF,
            (((object_instance & MASK_4BIT) << 4) | ((property_id >> 8) & MASK_4BIT)) & 0xFF,
            property_id & 0xFF,
        )
    )


def _group_value(apdu_type: ApduType, data: bytes) -> bytes:
    hi, lo = apci_bytes(apdu_type)
    data = bytes(data)
    if len(data) == 1 and data[0] <= MASK_6BIT:
        return bytes((hi, lo | (data[0] & MASK_6BIT)))
    return bytes((hi, lo)) + data


def encode_group_value_write(data: bytes) -> bytes:
    """Encode a GroupValueWrite payload, packing values of up to 6 bits."""
    return _group_value(ApduType.GROUP_VALUE_WRITE, data)


def encode_group_value_response(data: bytes) -> bytes:
    """Encode a GroupValueResponse payload, packing values of up to 6 bits."""
    return _group_value(ApduType.GROUP_VALUE_RESPONSE, data)


def encode_group_value_read() -> bytes:
    """Encode a GroupValueRead payload."""
    return _header(ApduType.GROUP_VALUE_READ)


def encode_individual_address_response() -> bytes:
    """Encode an IndividualAddressResponse payload."""
    return _header(ApduType.INDIVIDUAL_ADDRESS_RESPONSE)


def encode_device_descriptor_response(mask_version: int) -> bytes:
    """Encode a DeviceDescriptorResponse for descriptor type 0."""
    return _header(ApduType.DEVICE_DESCRIPTOR_RESPONSE) + _u16(mask_version)


def encode_device_descriptor_unsupported() -> bytes:
    """Encode a DeviceDescriptorResponse signalling an unsupported type."""
    hi, _ = apci_bytes(ApduType.DEVICE_DESCRIPTOR_RESPONSE)
    return bytes((hi, DESCRIPTOR_TYPE_UNSUPPORTED))


def encode_property_response(
    object_index: int, property_id: int, count: int, start_index: int, data: bytes
) -> bytes:
    """Encode a PropertyValueResponse payload."""
    count_start = ((count << 12) | (start_index & MASK_12BIT)) & 0xFFFF
    return (
        _header(ApduType.PROPERTY_VALUE_RESPONSE)
        + bytes((object_index & 0xFF, property_id & 0xFF))
        + _u16(count_start)
        + bytes(data)
    )


def encode_memory_response(address: int, data: bytes) -> bytes:
    """Encode a MemoryResponse payload; at most 15 data bytes fit."""
    data = bytes(data)
    if len(data) > _MAX_MEMORY_RESPONSE_DATA:
        raise ValueError("MemoryResponse data must be at most 15 bytes")
    hi, lo = apci_bytes(ApduType.MEMORY_RESPONSE)
    return bytes((hi, lo | (len(data) & MASK_4BIT))) + _u16(address) + data


def encode_authorize_response(level: int) -> bytes:
    """Encode an AuthorizeResponse payload."""
    return _header(ApduType.AUTHORIZE_RESPONSE) + bytes((level & 0xFF,))


def encode_key_response(level: int) -> bytes:
    """Encode a KeyResponse payload."""
    return _header(ApduType.KEY_RESPONSE) + bytes((level & 0xFF,))


def encode_restart_response(error_code: int, process_time: int) -> bytes:
    """Encode a restart (master reset) response payload."""
    return (
        _header(ApduType.RESTART_MASTER_RESET)
        + bytes((error_code & 0xFF,))
        + _u16(process_time)
    )


def encode_property_description_response(
    object_index: int,
    property_id: int,
    property_index: int,
    write_enable: bool,
    pdt: int,
    max_elements: int,
    access: int,
) -> bytes:
    """Encode a PropertyDescriptionResponse payload."""
    return (
        _header(ApduType.PROPERTY_DESCRIPTION_RESPONSE)
        + bytes((object_index & 0xFF, property_id & 0xFF, property_index & 0xFF))
        + _description_fields(write_enable, pdt, max_elements, access)
    )


def encode_memory_ext_read_response(return_code: int, address: int, data: bytes) -> bytes:
    """Encode a MemoryExtReadResponse payload with a 24-bit address."""
    return (
        _header(ApduType.MEMORY_EXT_READ_RESPONSE)
        + bytes((return_code & 0xFF,))
        + _u24(address)
        + bytes(data)
    )


def encode_memory_ext_write_response(return_code: int, address: int) -> bytes:
    """Encode a MemoryExtWriteResponse payload with a 24-bit address."""
    return (
        _header(ApduType.MEMORY_EXT_WRITE_RESPONSE)
        + bytes((return_code & 0xFF,))
        + _u24(address)
    )


def encode_individual_address_serial_number_response(
    serial: bytes, domain_address: int
) -> bytes:
    """Encode an IndividualAddressSerialNumberResponse payload."""
    serial = bytes(serial)
    if len(serial) != 6:
        raise ValueError("serial number must be 6 bytes")
    return (
        _header(ApduType.INDIVIDUAL_ADDRESS_SERIAL_NUMBER_RESPONSE)
        + serial
        + _u16(domain_address)
    )


def encode_system_network_parameter_response(
    object_type: int, property_id: int, test_info: bytes, test_result: bytes
) -> bytes:
    """Encode a SystemNetworkParameterResponse payload."""
    return (
        _header(ApduType.SYSTEM_NETWORK_PARAMETER_RESPONSE)
        + _u16(object_type)
        + _u16(property_id << 4)
        + bytes(test_info)
        + bytes(test_result)
    )


def encode_adc_response(channel: int, count: int, value: int) -> bytes:
    """Encode an AdcResponse payload."""
    hi, lo = apci_bytes(ApduType.ADC_RESPONSE)
    return bytes((hi, lo | (channel & MASK_6BIT), count & 0xFF)) + _u16(value)


def encode_function_property_state_response(
    object_index: int, property_id: int, result_data: bytes
) -> bytes:
    """Encode a FunctionPropertyStateResponse payload."""
    return (
        _header(ApduType.FUNCTION_PROPERTY_STATE_RESPONSE)
        + bytes((object_index & 0xFF, property_id & 0xFF))
        + bytes(result_data)
    )


def encode_property_value_ext_response(
    object_type: int,
    object_instance: int,
    property_id: int,
    count: int,
    start_index: int,
    data: bytes,
) -> bytes:
    """Encode a PropertyValueExtResponse payload."""
    return (
        _header(ApduType.PROPERTY_VALUE_EXT_RESPONSE)
        + _ext_ot_oi_pid(object_type, object_instance, property_id)
        + bytes((count & 0xFF,))
        + _u16(start_index)
        + bytes(data)
    )


def encode_property_ext_description_response(
    object_type: int,
    object_instance: int,
    property_id: int,
    property_index: int,
    description_type: int,
    write_enable: bool,
    data_type: int,
    max_elements: int,
    access: int,
) -> bytes:
    """Encode a PropertyExtDescriptionResponse payload."""
    desc_idx = ((description_type & MASK_4BIT) << 4) | ((property_index >> 8) & MASK_4BIT)
    return (
        _header(ApduType.PROPERTY_EXT_DESCRIPTION_RESPONSE)
        + _ext_ot_oi_pid(object_type, object_instance, property_id)
        + bytes((desc_idx, property_index & 0xFF))
        + _description_fields(write_enable, data_type, max_elements, access)
    )


def encode_raw_apdu(apdu_type: ApduType, data: bytes) -> bytes:
    """Encode a service code and its data into raw APDU bytes."""
    return _header(apdu_type) + bytes(data)