from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import UnknownPartitionError, ValidationError
from ..entities.coercion import coerce_fields
from ..media.uploader import resolve_image_url


def register(app: Flask, container: Container) -> None:
    engine = container.reconciliation_engine

    @app.route("/api/<partition>", methods=["GET"], endpoint="list_records")
    def list_records(partition: str):
        try:
            return jsonify(engine.get_all(partition))
        except UnknownPartitionError as e:
            return jsonify(error=str(e)), 404

    @app.route("/api/<partition>/<record_id>", methods=["GET"], endpoint="get_record")
    def get_record(partition: str, record_id: str):
        try:
            record = engine.get(partition, record_id)
        except UnknownPartitionError as e:
            return jsonify(error=str(e)), 404
        if record is None:
            return jsonify(error="Record not found"), 404
        return jsonify(record)

    @app.route("/api/<partition>", methods=["POST"], endpoint="upsert_record")
    def upsert_record(partition: str):
        try:
            entity_type = engine.entity_type(partition)
            if request.is_json:
                payload = request.get_json(silent=True)
                if not isinstance(payload, dict):
                    raise ValidationError("Request body must be a JSON object")
            else:
                payload = coerce_fields(entity_type, request.form.to_dict(), only_known=True)

            if entity_type.image_field:
                image_url = resolve_image_url(container.image_uploader, request.files.get("image"))
                if image_url:
                    payload[entity_type.image_field] = image_url

            record = engine.upsert(partition, payload)
            return jsonify(record), 201
        except UnknownPartitionError as e:
            return jsonify(error=str(e)), 404
        except ValidationError as e:
            return jsonify(error=str(e)), 400

    @app.route("/api/<partition>/<record_id>", methods=["DELETE"], endpoint="delete_record")
    def delete_record(partition: str, record_id: str):
        try:
            removed = engine.delete(partition, record_id)
        except UnknownPartitionError as e:
            return jsonify(error=str(e)), 404
        if not removed:
            return jsonify(deleted=False, error="Record not found"), 404
        return jsonify(deleted=True)
