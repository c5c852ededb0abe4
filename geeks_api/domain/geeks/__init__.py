# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Geek
from .exceptions import GeekAlreadyExistsError
from .repositories import GeekRepository

__all__ = ["Geek", "GeekAlreadyExistsError", "GeekRepository"]
