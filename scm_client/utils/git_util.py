# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

import os
import subprocess
import tempfile

from scm_client.logger import setup_logger
from scm_client.utils.validation import validate_init_config_params

logger = setup_logger(__name__)


def resolve_exec_dir(exec_dir=None):
    """Resolve exec_dir to an absolute path, defaulting to the system temp dir."""
    exec_dir = exec_dir or tempfile.gettempdir()
    if os.path.isabs(exec_dir):
        return exec_dir
    return os.path.join(os.getcwd(), exec_dir)


def run_git(args, repo_path):
    """Run a git command in repo_path, raising CalledProcessError on failure."""
    cmd = ["git"] + list(args)
    return subprocess.run(
        cmd, cwd=repo_path, capture_output=True, text=True, check=True
    )


def init_config(params):
    """
    Initialize a local git repository and set its identity

    Creates the target directory when missing, runs git init there and sets
    user.name and user.email.

    Args:
        params: Mapping or InitConfigParams with user_name, user_email and
            optional exec_dir (relative paths resolve against the working directory)

    Returns:
        Tuple (success, message):
        - On success: (True, None)
        - On failure: (False, error_message)

    Raises:
        ValidationException: When user_name or user_email is missing
    """
    params = validate_init_config_params(params)
    repo_path = resolve_exec_dir(params.exec_dir)
    logger.debug(f"execDir: {repo_path}")

    try:
        os.makedirs(repo_path, exist_ok=True)

        run_git(["init"], repo_path)
        logger.info(f"Git init successfully in {repo_path}")

        run_git(["config", "user.name", params.user_name], repo_path)
        run_git(["config", "user.email", params.user_email], repo_path)
        logger.info(f"Git config set successfully in {repo_path}")
        logger.debug(
            f"Git identity: user.name={params.user_name}, "
            f"user.email={params.user_email}"
        )
        return True, None
    except subprocess.CalledProcessError as e:
        error_msg = e.stderr if e.stderr else str(e)
        logger.error(f"Failed to init git config: {error_msg}")
        return False, error_msg
    except OSError as e:
        logger.error(f"Failed to init git config: {e}")
        return False, str(e)
