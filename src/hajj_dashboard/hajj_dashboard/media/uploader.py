from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Protocol

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..common.datetime_utils import epoch_millis, now_utc
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class ImageUploader(Protocol):
    """Turns an uploaded image into a URL that is stored as a plain field value."""

    def upload(self, file: FileStorage) -> str:
        raise NotImplementedError


class LocalMediaUploader(ImageUploader):
    def __init__(self, upload_dir: str | Path, base_url: str = "/media", *, clock: Callable[[], datetime] = now_utc):
        self._upload_dir = Path(upload_dir)
        self._base_url = base_url.rstrip("/")
        self._clock = clock

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def upload(self, file: FileStorage) -> str:
        filename = secure_filename(file.filename or "")
        if not filename:
            raise ValidationError("Invalid image file name")

        stored_name = f"{epoch_millis(self._clock())}_{filename}"
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        file.save(self._upload_dir / stored_name)
        return f"{self._base_url}/{stored_name}"


def resolve_image_url(uploader: Optional[ImageUploader], file: Optional[FileStorage]) -> Optional[str]:
    """Upload if possible; any failure means "no image", never a failed write."""

    if uploader is None or file is None or not file.filename:
        return None
    try:
        return uploader.upload(file)
    except (OSError, ValidationError) as e:
        logger.warning("Image upload failed, saving without image: %s", e)
        return None
