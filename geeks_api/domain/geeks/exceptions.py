# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from geeks_api.shared.errors.base import ServiceError


class GeekAlreadyExistsError(ServiceError):
    category = "geeks.already_exists"
