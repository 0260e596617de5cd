from typing import Optional
from typing import Union


def to_wire(text: Union[str, bytes, None]) -> Optional[bytes]:
    if text is None:
        return None
    if isinstance(text, str):
        text = bytes(text, "utf-8")
    text = text.replace(b"\n", b"\r\n")
    text = text.replace(b"\r\r\n", b"\r\n")
    return text


def to_normal_str(text: Union[str, bytes, None]) -> Optional[str]:
    """
    Make sure we return a normal string, no matter if we were given
    bytes or str.  Line endings are normalized to \\n.
    """
    if text is None:
        return text
    if not isinstance(text, str):
        text = text.decode("utf-8")
    text = text.replace("\r\n", "\n")
    return text


def to_unicode(text: Union[str, bytes, None]) -> Optional[str]:
    if text and isinstance(text, bytes):
        return text.decode("utf-8")
    return text
