"""
Debuget Stack Resolution
Turns an exception's traceback into symbolic frames
"""

import asyncio
import traceback
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Sequence

from debuget.config import THIRD_PARTY_MARKERS


@dataclass(frozen=True)
class Frame:
    """One resolved call site"""
    function_name: Optional[str] = None
    file_name: Optional[str] = None
    line_number: Optional[int] = None


class StackResolver(Protocol):
    async def resolve(self, error: Any) -> Sequence[Frame]:
        ...


class TracebackStackResolver:
    """Resolves frames from `__traceback__`, the raising call first"""

    async def resolve(self, error: Any) -> List[Frame]:
        tb = getattr(error, "__traceback__", None)
        if tb is None:
            return []
        # extract_tb reads source lines from disk through linecache
        summary = await asyncio.to_thread(traceback.extract_tb, tb)
        return [
            Frame(function_name=fs.name, file_name=fs.filename, line_number=fs.lineno)
            for fs in reversed(summary)
        ]


def is_third_party(frame: Frame) -> bool:
    """True when the frame's file lives inside an installed package"""
    file_name = frame.file_name or ""
    return any(marker in file_name for marker in THIRD_PARTY_MARKERS)


def select_frames(frames: Sequence[Frame], depth: int) -> List[Frame]:
    """Drop third-party frames, then keep the first `depth` in order"""
    own = [f for f in frames if not is_third_party(f)]
    return own[:max(0, depth)]
