from __future__ import annotations

import secrets
import string
from datetime import datetime
from typing import Optional

from ..core.constants import LOCAL_ID_PREFIX, LOCAL_ID_RANDOM_LENGTH
from .datetime_utils import epoch_millis

_BASE36 = string.digits + string.ascii_lowercase


def generate_local_id(now: Optional[datetime] = None) -> str:
    """``local_<epoch ms>_<random base36>``; unique without a central counter."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(LOCAL_ID_RANDOM_LENGTH))
    return f"{LOCAL_ID_PREFIX}_{epoch_millis(now)}_{suffix}"
