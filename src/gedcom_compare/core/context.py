from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class CompareContext:
    """
    Shared pipeline context.
    This object is passed between orchestration layers.
    """

    config: Any
    logger: Any

    left_path: Optional[str] = None
    right_path: Optional[str] = None
    output_path: Optional[str] = None
    store_path: Optional[str] = None

    save: bool = True
    pretty: bool = False
    stats: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
