from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ParseContext:
    """
    Per-run pipeline context.
    Each conversion builds its own; nothing here is shared between runs.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    output_path: Optional[str] = None

    stats: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
