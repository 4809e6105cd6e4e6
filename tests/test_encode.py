import pytest

from knxdevice.apdu import ApduType
from knxdevice.encode import (
    encode_adc_response,
    encode_authorize_response,
    encode_device_descriptor_response,
    encode_device_descriptor_unsupported,
    encode_function_property_state_response,
    encode_group_value_read,
    encode_group_value_response,
    encode_group_value_write,
    encode_individual_address_response,
    encode_individual_address_serial_number_response,
    encode_key_response,
    encode_memory_ext_read_response,
    encode_memory_ext_write_response,
    encode_memory_response,
    encode_property_description_response,
    encode_property_ext_description_response,
    encode_property_response,
    encode_property_value_ext_response,
    encode_raw_apdu,
    encode_restart_response,
    encode_system_network_parameter_response,
)


def test_group_value_write_short():
    assert encode_group_value_write(b"\x01") == bytes([0x00, 0x81])


def test_group_value_write_long():
    assert encode_group_value_write(b"\xaa\xbb") == bytes([0x00, 0x80, 0xAA, 0xBB])


def test_group_value_write_single_large_byte_not_packed():
    assert encode_group_value_write(b"\x40") == bytes([0x00, 0x80, 0x40])


def test_group_value_response_short():
    assert encode_group_value_response(b"\x3f") == bytes([0x00, 0x7F])


def test_group_value_response_long():
    assert encode_group_value_response(b"\xff\x01") == bytes([0x00, 0x40, 0xFF, 0x01])


def test_group_value_read():
    assert encode_group_value_read() == bytes([0x00, 0x00])


def test_device_descriptor_response_mask():
    assert encode_device_descriptor_response(0x07B0) == bytes([0x03, 0x40, 0x07, 0xB0])


def test_device_descriptor_unsupported():
    assert encode_device_descriptor_unsupported() == bytes([0x03, 0x3F])


def test_property_response():
    result = encode_property_response(0, 0x36, 1, 1, b"\xaa")
    assert result == bytes([0x03, 0xD6, 0x00, 0x36, 0x10, 0x01, 0xAA])


def test_memory_response():
    result = encode_memory_response(0x0010, b"\xde\xad")
    assert result == bytes([0x02, 0x42, 0x00, 0x10, 0xDE, 0xAD])


def test_memory_response_other_address():
    result = encode_memory_response(0x0100, b"\xde\xad")
    assert result[2:4] == bytes([0x01, 0x00])
    assert result[4:] == b"\xde\xad"


def test_memory_response_empty():
    result = encode_memory_response(0x0000, b"")
    assert result == bytes([0x02, 0x40, 0x00, 0x00])


def test_memory_response_too_long():
    with pytest.raises(ValueError):
        encode_memory_response(0, bytes(16))


def test_authorize_response():
    assert encode_authorize_response(0x03) == bytes([0x03, 0xD2, 0x03])


def test_key_response():
    assert encode_key_response(0x02) == bytes([0x03, 0xD4, 0x02])


def test_restart_response():
    assert encode_restart_response(0x01, 0x0064) == bytes([0x03, 0x81, 0x01, 0x00, 0x64])


def test_memory_ext_read_response():
    result = encode_memory_ext_read_response(0x00, 0x00123456, b"\xff")
    assert result == bytes([0x01, 0xFE, 0x00, 0x12, 0x34, 0x56, 0xFF])


def test_memory_ext_read_response_multi_byte():
    result = encode_memory_ext_read_response(0x00, 0x00123456, b"\xaa\xbb")
    assert result[6:] == b"\xaa\xbb"


def test_memory_ext_write_response():
    result = encode_memory_ext_write_response(0x00, 0x00ABCDEF)
    assert result == bytes([0x01, 0xFC, 0x00, 0xAB, 0xCD, 0xEF])


def test_individual_address_response():
    assert encode_individual_address_response() == bytes([0x01, 0x40])


def test_property_description_response():
    result = encode_property_description_response(0x01, 0x0B, 0x03, True, 0x11, 0x0100, 0x37)
    assert result == bytes([0x03, 0xD9, 0x01, 0x0B, 0x03, 0x91, 0x01, 0x00, 0x37])


def test_property_description_response_not_writable():
    result = encode_property_description_response(0, 0, 0, False, 0, 0, 0)
    assert result == bytes([0x03, 0xD9, 0, 0, 0, 0, 0, 0, 0])


def test_individual_address_serial_number_response():
    serial = bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06])
    result = encode_individual_address_serial_number_response(serial, 0xABCD)
    assert result == bytes([0x03, 0xDD]) + serial + bytes([0xAB, 0xCD])


def test_individual_address_serial_number_response_bad_serial():
    with pytest.raises(ValueError):
        encode_individual_address_serial_number_response(b"\x01\x02", 0)


def test_system_network_parameter_response():
    result = encode_system_network_parameter_response(0x0001, 0x000C, b"\xaa", b"\xbb\xcc")
    assert result == bytes([0x01, 0xC9, 0x00, 0x01, 0x00, 0xC0, 0xAA, 0xBB, 0xCC])


def test_adc_response():
    result = encode_adc_response(0x05, 0x08, 0x1234)
    assert result == bytes([0x01, 0xC5, 0x08, 0x12, 0x34])


def test_function_property_state_response():
    result = encode_function_property_state_response(0x02, 0x0A, b"\xde\xad")
    assert result == bytes([0x02, 0xC9, 0x02, 0x0A, 0xDE, 0xAD])


def test_property_value_ext_response():
    result = encode_property_value_ext_response(0x0001, 0x001, 0x00B, 1, 0x0001, b"\xff")
    assert result == bytes(
        [0x01, 0xCD, 0x00, 0x01, 0x00, 0x10, 0x0B, 0x01, 0x00, 0x01, 0xFF]
    )


def test_property_ext_description_response():
    result = encode_property_ext_description_response(
        0x0001, 0x012, 0x003, 0x005, 1, True, 0x11, 0x0100, 0x37
    )
    assert result == bytes(
        [0x01, 0xD3, 0x00, 0x01, 0x01, 0x20, 0x03, 0x10, 0x05, 0x91, 0x01, 0x00, 0x37]
    )


def test_property_ext_description_response_default_description():
    result = encode_property_ext_description_response(0, 0, 1, 0, 0, False, 0, 0, 0)
    assert len(result) == 13
    assert result[9:] == bytes(4)


def test_raw_apdu_passthrough():
    result = encode_raw_apdu(ApduType.GROUP_VALUE_WRITE, b"\xaa\xbb")
    assert result == bytes([0x00, 0x80, 0xAA, 0xBB])