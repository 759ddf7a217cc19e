from base64 import b64encode

import aiofiles


def encode_content(raw: bytes) -> str:
    """Base64 text as the contents API expects it in ``content``."""
    return b64encode(raw).decode('ascii')


async def read_content(path: str) -> str:
    async with aiofiles.open(path, 'rb') as file_d:
        raw = await file_d.read()
    return encode_content(raw)
