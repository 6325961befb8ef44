from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_br_date
from ..core.exceptions import DatasetLoadError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    state = container.dataset_state

    def _bounds() -> dict:
        bounds = state.dataset_bounds()
        return {"min": format_br_date(bounds.min) or None, "max": format_br_date(bounds.max) or None}

    @app.route("/api/dataset", methods=["POST"], endpoint="dataset_upload")
    def dataset_upload():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return jsonify({"success": False, "message": "Nenhum arquivo selecionado"}), 400

        try:
            summary = container.dataset_service.load_bytes(upload.read(), filename=upload.filename)
        except DatasetLoadError as e:
            return jsonify({"success": False, "message": str(e), "line": e.line}), 400
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({"success": True, **summary.to_dict(), "bounds": _bounds()}), 200

    @app.route("/api/dataset", methods=["GET"], endpoint="dataset_status")
    def dataset_status():
        summary = container.dataset_service.summary()
        return jsonify({"loaded": container.dataset_service.is_loaded, **summary.to_dict(), "bounds": _bounds()})

    @app.route("/api/dataset", methods=["DELETE"], endpoint="dataset_clear")
    def dataset_clear():
        container.dataset_service.clear()
        return jsonify({"success": True})

    @app.route("/api/companies", methods=["GET"], endpoint="companies_search")
    def companies_search():
        term = request.args.get("q", "")
        items = state.search_companies(term)
        return jsonify({"items": [c.to_dict() for c in items]})

    @app.route("/api/companies/<tax_id>/classes", methods=["GET"], endpoint="company_classes")
    def company_classes(tax_id: str):
        return jsonify({"tax_id": tax_id, "items": state.classes_for_company(tax_id)})

    @app.route("/api/classes", methods=["GET"], endpoint="classes_all")
    def classes_all():
        return jsonify({"items": state.all_class_codes()})

    @app.route("/api/dates", methods=["GET"], endpoint="dates_available")
    def dates_available():
        return jsonify({"items": state.available_dates(), "bounds": _bounds()})
