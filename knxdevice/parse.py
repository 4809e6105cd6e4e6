"""Dispatch of incoming application-layer services to their parsers."""

from __future__ import annotations

from collections.abc import Callable

from .apdu import (
    ApduType,
    AppIndication,
    MalformedDataError,
    UnsupportedApduError,
)
from .parse_basic import (
    parse_adc_read,
    parse_authorize_request,
    parse_device_descriptor_read,
    parse_function_property_command,
    parse_function_property_state,
    parse_group_value_read,
    parse_group_value_response,
    parse_group_value_write,
    parse_individual_address_read,
    parse_individual_address_serial_number_read,
    parse_individual_address_serial_number_write,
    parse_individual_address_write,
    parse_key_write,
    parse_memory_read,
    parse_memory_write,
    parse_property_description_read,
    parse_property_value_read,
    parse_property_value_write,
    parse_restart,
    parse_restart_master_reset,
)
from .parse_ext import (
    parse_memory_ext_read,
    parse_memory_ext_write,
    parse_property_ext_description_read,
    parse_property_value_ext_read,
    parse_property_value_ext_write_con,
    parse_property_value_ext_write_uncon,
    parse_system_network_parameter_read,
)

_Parser = Callable[[bytes], AppIndication]

_PARSERS: dict[ApduType, _Parser] = {
    ApduType.GROUP_VALUE_WRITE: parse_group_value_write,
    ApduType.GROUP_VALUE_RESPONSE: parse_group_value_response,
    ApduType.GROUP_VALUE_READ: parse_group_value_read,
    ApduType.PROPERTY_VALUE_READ: parse_property_value_read,
    ApduType.PROPERTY_VALUE_WRITE: parse_property_value_write,
    ApduType.DEVICE_DESCRIPTOR_READ: parse_device_descriptor_read,
    ApduType.MEMORY_READ: parse_memory_read,
    ApduType.MEMORY_WRITE: parse_memory_write,
    ApduType.RESTART: parse_restart,
    ApduType.INDIVIDUAL_ADDRESS_WRITE: parse_individual_address_write,
    ApduType.INDIVIDUAL_ADDRESS_READ: parse_individual_address_read,
    ApduType.AUTHORIZE_REQUEST: parse_authorize_request,
    ApduType.RESTART_MASTER_RESET: parse_restart_master_reset,
    ApduType.PROPERTY_DESCRIPTION_READ: parse_property_description_read,
    ApduType.MEMORY_EXT_READ: parse_memory_ext_read,
    ApduType.MEMORY_EXT_WRITE: parse_memory_ext_write,
    ApduType.INDIVIDUAL_ADDRESS_SERIAL_NUMBER_READ: parse_individual_address_serial_number_read,
    ApduType.INDIVIDUAL_ADDRESS_SERIAL_NUMBER_WRITE: parse_individual_address_serial_number_write,
    ApduType.KEY_WRITE: parse_key_write,
    ApduType.FUNCTION_PROPERTY_COMMAND: parse_function_property_command,
    ApduType.FUNCTION_PROPERTY_STATE: parse_function_property_state,
    ApduType.SYSTEM_NETWORK_PARAMETER_READ: parse_system_network_parameter_read,
    ApduType.ADC_READ: parse_adc_read,
    ApduType.PROPERTY_VALUE_EXT_READ: parse_property_value_ext_read,
    ApduType.PROPERTY_VALUE_EXT_WRITE_CON: parse_property_value_ext_write_con,
    ApduType.PROPERTY_VALUE_EXT_WRITE_UN_CON: parse_property_value_ext_write_uncon,
    ApduType.PROPERTY_EXT_DESCRIPTION_READ: parse_property_ext_description_read,
}


def parse_indication(apdu_type: ApduType, data: bytes) -> AppIndication:
    """Parse the data of a service of type ``apdu_type`` into an indication.

    Raises UnsupportedApduError for services the device does not handle and
    TruncatedPayloadError when the data is too short.
    """
    parser = _PARSERS.get(apdu_type)
    if parser is None:
        raise UnsupportedApduError(apdu_type)
    return parser(bytes(data))


def parse_raw_apdu(data: bytes) -> AppIndication:
    """Parse raw APDU bytes (two APCI bytes, then data) into an indication.

    The data handed on starts at the second APCI byte, which carries the
    short values of services that pack data into the APCI.
    Raises MalformedDataError if fewer than two bytes are given or the
    service code is unknown.
    """
    data = bytes(data)
    if len(data) < 2:
        raise MalformedDataError()
    apdu_type = ApduType.from_raw((data[0] << 8) | data[1])
    if apdu_type is None:
        raise MalformedDataError()
    return parse_indication(apdu_type, data[1:])