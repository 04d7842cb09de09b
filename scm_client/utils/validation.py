# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Parameter validation shared by all providers.

Each provider operation has a matching ``validate_*`` function that accepts either a
plain mapping or an already-built params model and returns the typed model. Any
missing or malformed field raises ValidationException before a request is issued.
"""

from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from scm_client.exceptions import ValidationException
from scm_client.schemas.inputs import (
    CreateWebhookParams,
    DeleteWebhookParams,
    GetRefCommitParams,
    GetWebhookParams,
    InitConfigParams,
    ListBranchesParams,
    ListWebhookParams,
    UpdateWebhookParams,
)

ParamsT = TypeVar("ParamsT", bound=BaseModel)


def _format_errors(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", ())) or "params"
        parts.append(f"{field}: {error.get('msg')}")
    return "; ".join(parts)


def validate_params(
    model_cls: Type[ParamsT], params: Union[ParamsT, Mapping[str, Any], None]
) -> ParamsT:
    """
    Build and validate an operation params model.

    Args:
        model_cls: Params model class of the operation
        params: Mapping of raw parameters or an instance of model_cls

    Returns:
        Validated model_cls instance

    Raises:
        ValidationException: When a required field is missing or has the wrong type
    """
    if isinstance(params, model_cls):
        return params
    if params is None:
        params = {}
    if not isinstance(params, Mapping):
        raise ValidationException(
            f"{model_cls.__name__} expects a mapping, got {type(params).__name__}"
        )
    try:
        return model_cls.model_validate(dict(params))
    except PydanticValidationError as e:
        raise ValidationException(
            f"Invalid {model_cls.__name__}: {_format_errors(e)}"
        ) from e


def validate_list_branches_params(params) -> ListBranchesParams:
    return validate_params(ListBranchesParams, params)


def validate_get_ref_commit_params(params) -> GetRefCommitParams:
    return validate_params(GetRefCommitParams, params)


def validate_list_webhook_params(params) -> ListWebhookParams:
    return validate_params(ListWebhookParams, params)


def validate_get_webhook_params(params) -> GetWebhookParams:
    return validate_params(GetWebhookParams, params)


def validate_create_webhook_params(params) -> CreateWebhookParams:
    return validate_params(CreateWebhookParams, params)


def validate_update_webhook_params(params) -> UpdateWebhookParams:
    return validate_params(UpdateWebhookParams, params)


def validate_delete_webhook_params(params) -> DeleteWebhookParams:
    return validate_params(DeleteWebhookParams, params)


def validate_init_config_params(params) -> InitConfigParams:
    return validate_params(InitConfigParams, params)
