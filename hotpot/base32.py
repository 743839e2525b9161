"""
base32.py — RFC 4648 Base32 codec for shared secrets.

Authenticator apps expect the secret as unpadded, uppercase Base32, e.g.
"JBSWY3DPEHPK3PXP". encode() produces that form; decode() is lenient about
case and '=' padding so secrets typed or pasted by users still work.
"""

from typing import Optional

from hotpot.errors import FormatError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def encode(data: bytes) -> str:
    """
    Mã hoá bytes sang Base32 (không có padding '=').

    - Dồn từng byte (8 bit) vào bộ đệm bit.
    - Khi đệm >= 5 bit: lấy 5 bit cao nhất -> 1 ký tự.
    - Còn dư 1-4 bit ở cuối: dịch trái cho đủ 5 bit (thêm 0 bên phải).

    Ví dụ: encode(b"foo") -> "MZXW6"
    """
    output = []
    buffer = 0
    bits = 0
    for byte in bytes(data):
        buffer = ((buffer << 8) | byte) & 0xFFF
        bits += 8
        while bits >= 5:
            output.append(ALPHABET[(buffer >> (bits - 5)) & 0x1F])
            bits -= 5
    if bits > 0:
        output.append(ALPHABET[(buffer << (5 - bits)) & 0x1F])
    return "".join(output)


def decode(encoded: Optional[str]) -> bytes:
    """
    Giải mã chuỗi Base32 -> bytes.

    - Không phân biệt hoa/thường.
    - Ký tự '=' bị bỏ qua (không coi là kết thúc chuỗi).
    - Bit dư (< 8) ở cuối bị bỏ, không kiểm tra padding.
    - None / chuỗi rỗng / chỉ có khoảng trắng -> b"".

    Raises:
        FormatError: nếu gặp ký tự ngoài bảng chữ cái Base32
    """
    if not encoded or encoded.isspace():
        return b""
    output = bytearray()
    buffer = 0
    bits = 0
    for ch in encoded.upper():
        if ch == "=":
            continue
        value = _INDEX.get(ch)
        if value is None:
            raise FormatError(ch)
        buffer = ((buffer << 5) | value) & 0xFFF
        bits += 5
        if bits >= 8:
            output.append((buffer >> (bits - 8)) & 0xFF)
            bits -= 8
    return bytes(output)
