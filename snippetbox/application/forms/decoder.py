# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Turn raw submitted key/value pairs into typed, checked forms."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from pydantic import ValidationError

from snippetbox.shared.errors import InvalidDecodeTargetError, MalformedFormError
from snippetbox.shared.errors.validation import format_pydantic_errors

from .base import Form

FormT = TypeVar("FormT", bound=Form)


def decode(raw: Mapping[str, str], target: type[FormT]) -> FormT:
    """Fill ``target`` from ``raw`` by field name.

    Keys the form does not declare are ignored and absent keys keep the
    field default. A value that does not convert to its field type raises
    :class:`MalformedFormError`. Passing anything other than a :class:`Form`
    subclass raises :class:`InvalidDecodeTargetError`, which callers must not
    catch.
    """

    if not isinstance(target, type) or not issubclass(target, Form) or target is Form:
        raise InvalidDecodeTargetError(target)

    values = {name: raw[name] for name in target.model_fields if name in raw}
    try:
        return target.model_validate(values)
    except ValidationError as exc:
        raise MalformedFormError(context=format_pydantic_errors(exc)) from exc


def process(raw: Mapping[str, str], target: type[FormT]) -> FormT:
    form = decode(raw, target)
    form.run_checks()
    return form
