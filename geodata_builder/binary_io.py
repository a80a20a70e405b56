"""Primitives shared by the binary artifact formats.

Integers are written as unsigned LEB128 varints: seven bits per byte, least
significant group first, with the high bit set on every byte but the last.
Strings are UTF-8, preceded by their byte length as a varint."""

import io

from .errors import CorruptDataError

# No value stored in these formats needs more than 64 bits
MAX_VARINT_BYTES = 10


class BinaryWriter:
  def __init__(self):
    self._buffer = io.BytesIO()

  def write_uvarint(self, value: int):
    if value < 0:
      raise ValueError(f"cannot encode negative value {value}")
    while True:
      byte = value & 0x7f
      value >>= 7
      if value:
        self._buffer.write(bytes((byte | 0x80,)))
      else:
        self._buffer.write(bytes((byte,)))
        return

  def write_string(self, value: str):
    encoded = value.encode('utf-8')
    self.write_uvarint(len(encoded))
    self._buffer.write(encoded)

  def getvalue(self) -> bytes:
    return self._buffer.getvalue()


class BinaryReader:
  """Sequential reader over an encoded artifact. Running out of data, or a
  malformed varint or string, raises CorruptDataError."""

  def __init__(self, data: bytes):
    self._data = memoryview(data)
    self._position = 0

  def read_uvarint(self) -> int:
    value = 0
    for shift in range(0, 7 * MAX_VARINT_BYTES, 7):
      if self._position >= len(self._data):
        raise CorruptDataError(f"truncated varint at offset {self._position}")
      byte = self._data[self._position]
      self._position += 1
      value |= (byte & 0x7f) << shift
      if not byte & 0x80:
        return value
    raise CorruptDataError(f"varint too long at offset {self._position}")

  def read_string(self) -> str:
    length = self.read_uvarint()
    end = self._position + length
    if end > len(self._data):
      raise CorruptDataError(f"truncated string at offset {self._position}")
    try:
      value = bytes(self._data[self._position:end]).decode('utf-8')
    except UnicodeDecodeError as err:
      raise CorruptDataError(f"invalid UTF-8 at offset {self._position}") from err
    self._position = end
    return value

  def expect_end(self):
    remaining = len(self._data) - self._position
    if remaining:
      raise CorruptDataError(f"{remaining} unexpected trailing bytes")
