# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from snippetbox.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, name: str, email: str, password: str) -> int:
        # uniqueness is left to the storage layer so two concurrent signups
        # cannot both pass a pre-check
        hashed = self._password_hasher.hash(password)
        return self._users.add(name, email, hashed)
