from __future__ import annotations

from flask import Flask, abort, send_from_directory

from ..container import Container
from .uploader import LocalMediaUploader


def register(app: Flask, container: Container) -> None:
    uploader = container.image_uploader
    if not isinstance(uploader, LocalMediaUploader):
        return

    @app.route("/media/<path:filename>", endpoint="media_file")
    def media_file(filename: str):
        if not uploader.upload_dir.is_dir():
            abort(404)
        return send_from_directory(uploader.upload_dir.resolve(), filename)
