# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .gate import LOGIN_PATH, AuthGate

__all__ = ["AuthGate", "LOGIN_PATH"]
