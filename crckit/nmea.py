"""Checksum of NMEA 0183 sentences."""

_STOP_BYTES = frozenset(b"\r\n*\0")


def checksum_nmea(sentence) -> str:
    """Return the two-digit uppercase hex checksum of an NMEA sentence.

    The sentence is not validated. A leading ``$`` is skipped. The
    calculation stops at a carriage return, a line feed, a ``*`` or the end
    of the input. Accepts ``str`` or a bytes-like object.
    """
    if sentence is None:
        raise TypeError("sentence must be str or bytes-like, not None")
    data = sentence.encode("latin-1") if isinstance(sentence, str) else bytes(sentence)
    if data.startswith(b"$"):
        data = data[1:]

    checksum = 0
    for byte in data:
        if byte in _STOP_BYTES:
            break
        checksum ^= byte
    return f"{checksum:02X}"