# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from geeks_api.shared.config import I18nConfig


class MiscController:
    def __init__(self, *, i18n: I18nConfig) -> None:
        self._i18n = i18n

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        return jsonify({"ok": True, "locales": self._i18n.supported_locales})
