"""Reading input files whose encoding is given by a byte order mark."""

import codecs
from pathlib import Path

from ..errors import UnsupportedEncoding

UTF16_BOMS = (codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)


def read_text(file_path: Path) -> str:
    """
    Read a whole file as text.

    UTF-16 is used when the file starts with a UTF-16 byte order mark,
    otherwise UTF-8. A UTF-8 byte order mark is dropped.

    Raises:
        UnsupportedEncoding: If the bytes do not decode
    """
    path = Path(file_path)
    data = path.read_bytes()
    encoding = "utf-16" if data.startswith(UTF16_BOMS) else "utf-8-sig"
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise UnsupportedEncoding(path) from e
