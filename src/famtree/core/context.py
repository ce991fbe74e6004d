from __future__ import annotations

from dataclasses import dataclass, field
from logging import Logger
from typing import Any, Dict, List, Optional

import httpx

from famtree.config import FTConfig


@dataclass
class BuildContext:
    """
    State of one tree build, handed to ``Pipeline``.

    ``source`` is the record document (URL or path) and ``client`` an optional
    httpx client used to fetch it. The pipeline fills ``stats`` with the
    finished tree's counters, or appends the failure message to ``errors``.
    """

    config: FTConfig
    logger: Logger

    source: Optional[str] = None
    client: Optional[httpx.Client] = None

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
