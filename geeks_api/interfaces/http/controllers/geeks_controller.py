# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from geeks_api.application.use_cases.geeks.create_geek import CreateGeekUseCase
from geeks_api.interfaces.http.dto.geeks import CreateGeekRequestDTO, GeekDTO
from geeks_api.shared.errors.validation import raise_validation_error
from geeks_api.shared.logging import logger


class GeeksController:
    def __init__(self, *, create_use_case: CreateGeekUseCase) -> None:
        self._create_use_case = create_use_case

    def create(self) -> tuple[Response, int]:
        payload = request.get_json(silent=True)
        try:
            dto = CreateGeekRequestDTO.model_validate(payload if isinstance(payload, dict) else {})
        except ValidationError as exc:
            raise_validation_error(exc, CreateGeekRequestDTO)

        geek = self._create_use_case.execute(dto.first_name, dto.last_name)

        body = GeekDTO(id=geek.id, first_name=geek.first_name, last_name=geek.last_name)
        logger.info(f"geeks.create: ok id={geek.id}")
        return jsonify(body.model_dump(by_alias=True)), 201

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("geeks", __name__, url_prefix="/geeks")
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        return bp
