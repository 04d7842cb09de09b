# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from scm_client.exceptions import ValidationException
from scm_client.schemas.inputs import GetRefCommitParams, UpdateWebhookParams
from scm_client.utils.validation import (
    validate_create_webhook_params,
    validate_get_ref_commit_params,
    validate_init_config_params,
    validate_list_branches_params,
    validate_update_webhook_params,
)


@pytest.mark.unit
class TestValidation:
    """Test cases for operation parameter validation"""

    def test_defaults_applied(self):
        """Pagination starts at page 1 and leaves the page size to the provider"""
        params = validate_list_branches_params({"owner": "octo", "repo": "demo"})

        assert params.page == 1
        assert params.per_page is None

    def test_model_instance_passes_through(self):
        """An already built model is returned unchanged"""
        params = GetRefCommitParams(owner="octo", repo="demo", ref="main")

        assert validate_get_ref_commit_params(params) is params

    @pytest.mark.parametrize(
        "params",
        [
            None,
            {},
            {"owner": "octo"},
            {"owner": "", "repo": "demo"},
            {"owner": "octo", "repo": "demo", "per_page": 0},
        ],
    )
    def test_invalid_repo_params(self, params):
        """Missing, empty or out of range fields are rejected"""
        with pytest.raises(ValidationException):
            validate_list_branches_params(params)

    def test_non_mapping_rejected(self):
        """Only mappings and model instances are accepted"""
        with pytest.raises(ValidationException, match="expects a mapping"):
            validate_list_branches_params(["octo", "demo"])

    def test_validation_exception_is_value_error(self):
        """Callers catching ValueError also catch validation failures"""
        with pytest.raises(ValueError):
            validate_get_ref_commit_params({"owner": "octo", "repo": "demo"})

    def test_webhook_extra_fields_kept(self):
        """Platform specific hook fields are carried through"""
        params = validate_create_webhook_params(
            {
                "owner": "octo",
                "repo": "demo",
                "url": "https://ci.example.com/hook",
                "encryption_type": 1,
            }
        )

        assert params.model_dump(exclude_none=True)["encryption_type"] == 1

    def test_update_webhook_numeric_string_id(self):
        """Numeric string hook ids are coerced to int"""
        params = validate_update_webhook_params(
            {"owner": "octo", "repo": "demo", "hook_id": "12", "url": "https://x"}
        )

        assert isinstance(params, UpdateWebhookParams)
        assert params.hook_id == 12

    def test_init_config_requires_identity(self):
        """user_name and user_email are required"""
        with pytest.raises(ValidationException) as exc_info:
            validate_init_config_params({"exec_dir": "/tmp/work"})

        assert "user_name" in exc_info.value.detail
        assert "user_email" in exc_info.value.detail

    @pytest.mark.parametrize("hook_id", [True, False])
    def test_boolean_hook_id_rejected(self, hook_id):
        """Booleans are not accepted as hook ids"""
        with pytest.raises(ValidationException, match="hook_id"):
            validate_update_webhook_params(
                {"owner": "octo", "repo": "demo", "hook_id": hook_id, "url": "https://x"}
            )

    def test_create_webhook_push_events_default(self):
        """New hooks fire on push unless told otherwise"""
        params = validate_create_webhook_params(
            {"owner": "octo", "repo": "demo", "url": "https://x"}
        )

        assert params.push_events is True

    def test_update_webhook_push_events_unset(self):
        """Updates leave push_events untouched when not given"""
        params = validate_update_webhook_params(
            {"owner": "octo", "repo": "demo", "hook_id": 1, "url": "https://x"}
        )

        assert params.push_events is None
