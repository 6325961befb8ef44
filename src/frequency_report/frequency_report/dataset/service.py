from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..core.exceptions import DatasetLoadError, ValidationError
from .decoding import decode_bytes
from .model import LoadSummary
from .parser import parse_records
from .state import DatasetState

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".csv"}


class DatasetService:
    """Use case: load an attendance extract into the in-memory dataset."""

    def __init__(self, state: DatasetState):
        self._state = state

    @property
    def is_loaded(self) -> bool:
        return self._state.is_loaded

    def summary(self) -> LoadSummary:
        return LoadSummary(
            total_records=len(self._state.records),
            companies=self._state.company_count,
            classes=self._state.class_group_count,
        )

    def load_bytes(self, data: bytes, *, filename: Optional[str] = None) -> LoadSummary:
        """Decode, parse and ingest ``data``.

        The current dataset is only replaced when parsing succeeds, so a bad
        re-upload leaves the previous one untouched.
        """
        if filename and Path(filename).suffix.lower() not in ALLOWED_EXTENSIONS:
            raise ValidationError("Por favor, selecione um arquivo CSV válido")
        if not data:
            raise ValidationError("O arquivo enviado está vazio")

        text = decode_bytes(data)
        try:
            records = parse_records(text)
        except DatasetLoadError as e:
            logger.warning("Rejected CSV %s: %s", filename or "<bytes>", e)
            raise DatasetLoadError(f"Erro ao processar o arquivo CSV: {e}", line=e.line) from e

        self._state.replace(records)
        summary = self.summary()
        logger.info(
            "Loaded %s: %d records, %d program companies, %d class groups",
            filename or "<bytes>",
            summary.total_records,
            summary.companies,
            summary.classes,
        )
        return summary

    def load_path(self, path: str | Path) -> LoadSummary:
        file_path = Path(path)
        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise ValidationError(f"Erro ao ler o arquivo: {e}") from e
        return self.load_bytes(data, filename=file_path.name)

    def clear(self) -> None:
        self._state.reset()
        logger.info("Dataset cleared")
