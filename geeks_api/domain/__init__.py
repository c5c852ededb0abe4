# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .geeks import Geek, GeekAlreadyExistsError, GeekRepository

__all__ = [
    "Geek",
    "GeekAlreadyExistsError",
    "GeekRepository",
]
