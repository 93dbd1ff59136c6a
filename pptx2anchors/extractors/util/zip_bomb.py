from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass

from pptx2anchors.exceptions import ExtractionZipBombError


@dataclass(frozen=True)
class ZipBombLimits:
    """
    Heuristics for rejecting probable ZIP bombs before any slide is parsed.

    A real-world deck rarely exceeds a few hundred parts and a few hundred
    megabytes of media, so the defaults leave plenty of head room.
    """

    max_entries: int = 20_000
    max_total_uncompressed_bytes: int = 2 * 1024**3
    max_single_uncompressed_bytes: int = 512 * 1024**2
    max_total_compression_ratio: float = 200.0
    max_entry_compression_ratio: float = 500.0


DEFAULT_ZIP_BOMB_LIMITS = ZipBombLimits()


def _reject(message: str, source: str | None) -> ExtractionZipBombError:
    if source:
        message = f"{message} [{source}]"
    return ExtractionZipBombError(message)


def _check_member(
    member: zipfile.ZipInfo, limits: ZipBombLimits, source: str | None
) -> None:
    size = member.file_size or 0
    packed = member.compress_size or 0

    if size > limits.max_single_uncompressed_bytes:
        raise _reject(
            f"Archive member {member.filename} unpacks to {size} bytes, "
            f"limit is {limits.max_single_uncompressed_bytes}",
            source,
        )
    if not size:
        return
    if packed <= 0:
        raise _reject(
            f"Archive member {member.filename} claims {size} bytes "
            "from an empty compressed stream",
            source,
        )
    if size / packed > limits.max_entry_compression_ratio:
        raise _reject(
            f"Archive member {member.filename} compression ratio "
            f"{size / packed:.1f} exceeds {limits.max_entry_compression_ratio}",
            source,
        )


def validate_zipfile(
    zf: zipfile.ZipFile,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    source: str | None = None,
) -> None:
    """
    Check an opened archive against ``limits``.

    Only the central directory is read; nothing is decompressed. This is a
    best-effort guard, not a sandbox.

    Raises:
        ExtractionZipBombError: The archive exceeds one of the limits.
    """
    members = [member for member in zf.infolist() if not member.is_dir()]
    if len(members) > limits.max_entries:
        raise _reject(
            f"Archive has {len(members)} members, limit is {limits.max_entries}",
            source,
        )

    unpacked = packed = 0
    for member in members:
        _check_member(member, limits, source)
        unpacked += member.file_size or 0
        packed += member.compress_size or 0
        if unpacked > limits.max_total_uncompressed_bytes:
            raise _reject(
                f"Archive unpacks to more than "
                f"{limits.max_total_uncompressed_bytes} bytes",
                source,
            )

    if unpacked and packed and unpacked / packed > limits.max_total_compression_ratio:
        raise _reject(
            f"Archive compression ratio {unpacked / packed:.1f} exceeds "
            f"{limits.max_total_compression_ratio}",
            source,
        )


def open_zipfile(
    file_like: io.BytesIO,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    source: str | None = None,
) -> zipfile.ZipFile:
    """Open ``file_like`` as a ZIP archive that passed ``validate_zipfile``. The caller closes it."""
    file_like.seek(0)
    zf = zipfile.ZipFile(file_like)
    try:
        validate_zipfile(zf, limits=limits, source=source)
    except Exception:
        zf.close()
        raise
    return zf
