# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.geeks.create_geek import CreateGeekUseCase

__all__ = ["CreateGeekUseCase"]
