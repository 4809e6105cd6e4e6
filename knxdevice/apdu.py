"""Application-layer service types, indications and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MASK_6BIT = 0x3F
MASK_4BIT = 0x0F
MASK_12BIT = 0x0FFF
WRITE_ENABLE_FLAG = 0x80
DESCRIPTOR_TYPE_UNSUPPORTED = 0x3F

_APCI_MASK = 0x3FF
_SHORT_APCI_MASK = 0x3C0


class ApduType(IntEnum):
    """Application-layer service codes (10-bit APCI values)."""

    GROUP_VALUE_READ = 0x000
    GROUP_VALUE_RESPONSE = 0x040
    GROUP_VALUE_WRITE = 0x080
    INDIVIDUAL_ADDRESS_WRITE = 0x0C0
    INDIVIDUAL_ADDRESS_READ = 0x100
    INDIVIDUAL_ADDRESS_RESPONSE = 0x140
    ADC_READ = 0x180
    ADC_RESPONSE = 0x1C0
    SYSTEM_NETWORK_PARAMETER_READ = 0x1C8
    SYSTEM_NETWORK_PARAMETER_RESPONSE = 0x1C9
    SYSTEM_NETWORK_PARAMETER_WRITE = 0x1CA
    PROPERTY_VALUE_EXT_READ = 0x1CC
    PROPERTY_VALUE_EXT_RESPONSE = 0x1CD
    PROPERTY_VALUE_EXT_WRITE_CON = 0x1CE
    PROPERTY_VALUE_EXT_WRITE_CON_RESPONSE = 0x1CF
    PROPERTY_VALUE_EXT_WRITE_UN_CON = 0x1D0
    PROPERTY_EXT_DESCRIPTION_READ = 0x1D2
    PROPERTY_EXT_DESCRIPTION_RESPONSE = 0x1D3
    MEMORY_EXT_WRITE = 0x1FB
    MEMORY_EXT_WRITE_RESPONSE = 0x1FC
    MEMORY_EXT_READ = 0x1FD
    MEMORY_EXT_READ_RESPONSE = 0x1FE
    MEMORY_READ = 0x200
    MEMORY_RESPONSE = 0x240
    MEMORY_WRITE = 0x280
    FUNCTION_PROPERTY_COMMAND = 0x2C7
    FUNCTION_PROPERTY_STATE = 0x2C8
    FUNCTION_PROPERTY_STATE_RESPONSE = 0x2C9
    DEVICE_DESCRIPTOR_READ = 0x300
    DEVICE_DESCRIPTOR_RESPONSE = 0x340
    RESTART = 0x380
    RESTART_MASTER_RESET = 0x381
    AUTHORIZE_REQUEST = 0x3D1
    AUTHORIZE_RESPONSE = 0x3D2
    KEY_WRITE = 0x3D3
    KEY_RESPONSE = 0x3D4
    PROPERTY_VALUE_READ = 0x3D5
    PROPERTY_VALUE_RESPONSE = 0x3D6
    PROPERTY_VALUE_WRITE = 0x3D7
    PROPERTY_DESCRIPTION_READ = 0x3D8
    PROPERTY_DESCRIPTION_RESPONSE = 0x3D9
    INDIVIDUAL_ADDRESS_SERIAL_NUMBER_READ = 0x3DC
    INDIVIDUAL_ADDRESS_SERIAL_NUMBER_RESPONSE = 0x3DD
    INDIVIDUAL_ADDRESS_SERIAL_NUMBER_WRITE = 0x3DE
    SECURE_SERVICE = 0x3F1

    @classmethod
    def from_raw(cls, raw: int) -> ApduType | None:
        """Decode a raw APCI value, or return None if it is unknown.

        Only the low 10 bits are considered. Services whose low six bits
        carry data are matched on their upper four APCI bits.
        """
        value = raw & _APCI_MASK
        try:
            return cls(value)
        except ValueError:
            pass
        short = value & _SHORT_APCI_MASK
        if short in _SHORT_APCI_TYPES:
            return cls(short)
        return None


_SHORT_APCI_TYPES = frozenset(
    {
        ApduType.GROUP_VALUE_READ,
        ApduType.GROUP_VALUE_RESPONSE,
        ApduType.GROUP_VALUE_WRITE,
        ApduType.INDIVIDUAL_ADDRESS_WRITE,
        ApduType.INDIVIDUAL_ADDRESS_READ,
        ApduType.INDIVIDUAL_ADDRESS_RESPONSE,
        ApduType.ADC_READ,
        ApduType.ADC_RESPONSE,
        ApduType.MEMORY_READ,
        ApduType.MEMORY_RESPONSE,
        ApduType.MEMORY_WRITE,
        ApduType.DEVICE_DESCRIPTOR_READ,
        ApduType.DEVICE_DESCRIPTOR_RESPONSE,
        ApduType.RESTART,
    }
)


def apci_bytes(apdu_type: ApduType) -> tuple[int, int]:
    """Split a service code into its two wire bytes ``(high, low)``."""
    value = int(apdu_type)
    return (value >> 8) & 0xFF, value & 0xFF


# ── Errors ───────────────────────────────────────────────────


class AppLayerError(Exception):
    """Base class for application-layer parsing errors."""


class UnsupportedApduError(AppLayerError):
    """The service type is not supported by this device."""

    def __init__(self, apdu_type: ApduType) -> None:
        self.apdu_type = apdu_type
        name = getattr(apdu_type, "name", repr(apdu_type))
        super().__init__(f"unsupported APDU type: {name}")


class TruncatedPayloadError(AppLayerError):
    """The payload is shorter than the service requires."""

    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"truncated payload: expected {expected} bytes, got {got}")


class MalformedDataError(AppLayerError):
    """The raw APDU bytes could not be decoded."""

    def __init__(self) -> None:
        super().__init__("malformed APDU data")


# ── Indications ──────────────────────────────────────────────


class AppIndication:
    """An incoming application-layer service to be handled by the device."""

    __slots__ = ()


@dataclass(frozen=True)
class GroupValueWrite(AppIndication):
    """Group value write received from the bus."""

    asap: int
    data: bytes


@dataclass(frozen=True)
class GroupValueResponse(AppIndication):
    """Group value response received from the bus."""

    asap: int
    data: bytes


@dataclass(frozen=True)
class GroupValueRead(AppIndication):
    """Group value read request."""

    asap: int


@dataclass(frozen=True)
class PropertyValueRead(AppIndication):
    """Property value read request."""

    object_index: int
    property_id: int
    count: int
    start_index: int


@dataclass(frozen=True)
class PropertyValueWrite(AppIndication):
    """Property value write request."""

    object_index: int
    property_id: int
    count: int
    start_index: int
    data: bytes


@dataclass(frozen=True)
class DeviceDescriptorRead(AppIndication):
    """Device descriptor read (type 0 is the mask version)."""

    descriptor_type: int


@dataclass(frozen=True)
class MemoryRead(AppIndication):
    """Memory read request."""

    count: int
    address: int


@dataclass(frozen=True)
class MemoryWrite(AppIndication):
    """Memory write request."""

    count: int
    address: int
    data: bytes


@dataclass(frozen=True)
class Restart(AppIndication):
    """Plain restart request."""


@dataclass(frozen=True)
class IndividualAddressWrite(AppIndication):
    """Individual address write (programming mode)."""

    address: int


@dataclass(frozen=True)
class IndividualAddressRead(AppIndication):
    """Individual address read (programming mode)."""


@dataclass(frozen=True)
class AuthorizeRequest(AppIndication):
    """Authorize request carrying a key."""

    key: int


@dataclass(frozen=True)
class RestartMasterReset(AppIndication):
    """Master reset restart."""

    erase_code: int
    channel: int


@dataclass(frozen=True)
class PropertyDescriptionRead(AppIndication):
    """Property description read (property_id 0 selects by index)."""

    object_index: int
    property_id: int
    property_index: int


@dataclass(frozen=True)
class MemoryExtRead(AppIndication):
    """Extended memory read with a 24-bit address."""

    count: int
    address: int


@dataclass(frozen=True)
class MemoryExtWrite(AppIndication):
    """Extended memory write with a 24-bit address."""

    count: int
    address: int
    data: bytes


@dataclass(frozen=True)
class IndividualAddressSerialNumberRead(AppIndication):
    """Broadcast read of the individual address by serial number."""

    serial: bytes


@dataclass(frozen=True)
class IndividualAddressSerialNumberWrite(AppIndication):
    """Broadcast write of the individual address by serial number."""

    serial: bytes
    address: int


@dataclass(frozen=True)
class KeyWrite(AppIndication):
    """Key write for an access level."""

    level: int
    key: int


@dataclass(frozen=True)
class FunctionPropertyCommand(AppIndication):
    """Function property command."""

    object_index: int
    property_id: int
    data: bytes


@dataclass(frozen=True)
class FunctionPropertyState(AppIndication):
    """Function property state read."""

    object_index: int
    property_id: int
    data: bytes


@dataclass(frozen=True)
class SystemNetworkParameterRead(AppIndication):
    """Broadcast system network parameter read."""

    object_type: int
    property_id: int
    test_info: bytes


@dataclass(frozen=True)
class AdcRead(AppIndication):
    """ADC read request."""

    channel: int
    count: int


@dataclass(frozen=True)
class PropertyValueExtRead(AppIndication):
    """Extended property value read."""

    object_type: int
    object_instance: int
    property_id: int
    count: int
    start_index: int


@dataclass(frozen=True)
class PropertyValueExtWriteCon(AppIndication):
    """Extended property value write, confirmed."""

    object_type: int
    object_instance: int
    property_id: int
    count: int
    start_index: int
    data: bytes


@dataclass(frozen=True)
class PropertyValueExtWriteUnCon(AppIndication):
    """Extended property value write, unconfirmed."""

    object_type: int
    object_instance: int
    property_id: int
    count: int
    start_index: int
    data: bytes


@dataclass(frozen=True)
class PropertyExtDescriptionRead(AppIndication):
    """Extended property description read."""

    object_type: int
    object_instance: int
    property_id: int
    description_type: int
    property_index: int