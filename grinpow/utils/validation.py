import re
from typing import List, Optional

from ..core.exceptions import InvalidSolutionError
from ..core.params import PROOF_SIZE

_HEX_RE = re.compile(r"^[0-9a-f]*$", re.IGNORECASE)
_SPLIT_RE = re.compile(r"[\s,]+")

MAX_HEADER_BYTES = 4096


def is_hex(value: Optional[str]) -> bool:
    if value is None:
        return False
    text = str(value).strip()
    if text.lower().startswith("0x"):
        text = text[2:]
    return len(text) % 2 == 0 and bool(_HEX_RE.fullmatch(text))


def parse_header(value: Optional[str]) -> bytes:
    """Decode a hex-encoded header (an optional 0x prefix is allowed)."""
    if not is_hex(value):
        raise ValueError("header must be an even-length hex string")
    text = str(value).strip()
    if text.lower().startswith("0x"):
        text = text[2:]
    header = bytes.fromhex(text)
    if len(header) > MAX_HEADER_BYTES:
        raise ValueError(f"header longer than {MAX_HEADER_BYTES} bytes")
    return header


def parse_solution(value: Optional[str]) -> List[int]:
    """Parse edge indices separated by commas or whitespace; 0x-prefixed hex is accepted."""
    if value is None:
        raise InvalidSolutionError("no edges given")
    parts = [part for part in _SPLIT_RE.split(str(value).strip()) if part]
    edges: List[int] = []
    for part in parts:
        try:
            base = 16 if part.lower().startswith("0x") else 10
            edges.append(int(part, base))
        except ValueError:
            raise InvalidSolutionError(f"not an integer: {part!r}") from None
    if len(edges) != PROOF_SIZE:
        raise InvalidSolutionError(f"expected {PROOF_SIZE} edges, got {len(edges)}")
    return edges
