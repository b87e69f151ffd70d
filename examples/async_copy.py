from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from errortools import main_entry, wrap_operation_async


async def read_bytes(path: Path) -> bytes:
    result = await wrap_operation_async(path, lambda: asyncio.to_thread(path.read_bytes))
    return result.unwrap()


async def write_bytes(path: Path, data: bytes) -> None:
    result = await wrap_operation_async(path, lambda: asyncio.to_thread(path.write_bytes, data))
    result.unwrap()


@main_entry
async def main(source: str, target: str) -> None:
    data = await read_bytes(Path(source))
    await write_bytes(Path(target), data)
    print(f"copied {len(data)} bytes")


if __name__ == "__main__":
    main(*sys.argv[1:3])
