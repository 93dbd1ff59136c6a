import io

import olefile

# Streams an OLE container carries when it wraps an encrypted OOXML package
_ENCRYPTION_STREAMS = ("EncryptionInfo", "EncryptedPackage", "DataSpaces")


def is_ole_container(file_like: io.BytesIO) -> bool:
    """True when the buffer is an OLE compound file (encrypted .pptx or legacy .ppt)."""
    file_like.seek(0)
    result = olefile.isOleFile(file_like)
    file_like.seek(0)
    return result


def is_ooxml_encrypted(file_like: io.BytesIO) -> bool:
    """
    Detect a password protected .pptx.

    PowerPoint stores encrypted presentations as an OLE container holding the
    encrypted ZIP package, so these files never start with the ZIP signature.
    """
    if not is_ole_container(file_like):
        return False
    with olefile.OleFileIO(file_like) as ole:
        encrypted = any(ole.exists(stream) for stream in _ENCRYPTION_STREAMS)
    file_like.seek(0)
    return encrypted
