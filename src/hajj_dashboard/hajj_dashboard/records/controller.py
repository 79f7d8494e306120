from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..container import Container
from ..core.exceptions import UnknownPartitionError


def register(app: Flask, container: Container) -> None:
    transfers = container.transfer_service

    @app.route("/api/<partition>/export", methods=["GET"], endpoint="export_records")
    def export_records(partition: str):
        try:
            export = transfers.export_csv(partition)
        except UnknownPartitionError as e:
            return jsonify(error=str(e)), 404

        return Response(
            export.content,
            mimetype=export.mimetype,
            headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
        )

    @app.route("/api/<partition>/import", methods=["POST"], endpoint="import_records")
    def import_records(partition: str):
        upload = request.files.get("file")
        try:
            if upload is not None:
                text = upload.read().decode("utf-8-sig")
            else:
                text = request.get_data().decode("utf-8-sig")
        except UnicodeDecodeError:
            return jsonify(error="CSV file must be UTF-8 encoded"), 400

        try:
            report = transfers.import_csv(partition, text)
        except UnknownPartitionError as e:
            return jsonify(error=str(e)), 404

        return jsonify(
            imported=report.imported,
            skipped=[{"line": s.line, "reason": s.reason} for s in report.skipped],
            total=len(report.records),
            persisted=report.persisted,
        )
