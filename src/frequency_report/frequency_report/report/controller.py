from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import DatasetNotLoadedError, ValidationError
from ..container import Container
from .export import report_filename, report_title_lines, write_report_csv
from .model import ReportCriteria


def register(app: Flask, container: Container) -> None:
    def _criteria() -> ReportCriteria:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Corpo da requisição deve ser um objeto JSON")
        return ReportCriteria.from_mapping(data)

    @app.route("/api/report", methods=["POST"], endpoint="report_json")
    def report_json():
        try:
            criteria = _criteria()
            report = container.report_service.build_report(criteria)
        except DatasetNotLoadedError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify(
            {
                "success": True,
                "empty_selection": criteria.selects_nothing,
                "no_records": report.is_empty,
                **report.to_dict(),
            }
        )

    @app.route("/api/report.csv", methods=["POST"], endpoint="report_csv")
    def report_csv():
        try:
            criteria = _criteria()
            report = container.report_service.build_report(criteria)
        except DatasetNotLoadedError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        if criteria.selects_nothing:
            return jsonify({"success": False, "message": "Nenhum status selecionado"}), 400
        if report.is_empty:
            return jsonify({"success": False, "message": "Nenhum registro encontrado com os filtros selecionados."}), 404

        company = container.dataset_state.get_company(criteria.tax_id) if criteria.tax_id else None
        title_lines = report_title_lines(
            period_start=criteria.start,
            available_dates=container.dataset_state.available_dates(),
            institution=app.config["REPORT_INSTITUTION"],
            program=app.config["REPORT_PROGRAM"],
        )
        filename = report_filename(company.name if company else None)
        return app.response_class(
            write_report_csv(report, title_lines=title_lines),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
