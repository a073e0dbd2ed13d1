# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import json
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from dashview_lib.core.common import to_int
from dashview_lib.core.config import CFG
from dashview_lib.core.error import (
    DVInvalidQuotaFileError,
    DVMissingQuotaFieldError,
)
from dashview_lib.core.logger import get_logger
from dashview_lib.quota.record import QuotaRecord, ResourceType

logger = get_logger(__name__)


class QuotaSet:
    """
    Reads quota records from JSON quota snapshots.

    A snapshot that cannot be used is never fatal: the problem is logged
    and the snapshot contributes no records.
    """

    @staticmethod
    def find(quota_path: Path, user: str | None = None) -> list[QuotaRecord]:
        """
        Get quota records from a snapshot file.

        Args:
            quota_path (Path): Path to the JSON quota snapshot.
            user (str | None): Only return records of this user. All records
                are returned if not specified.

        Returns:
            list[QuotaRecord]: A file-count and a block-usage record for every
            matching entry. Empty if the snapshot cannot be read or parsed.
        """
        try:
            text = Path(quota_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read quota file '{quota_path}': {e}.")
            return []

        return QuotaSet.fromJson(text, user)

    @staticmethod
    def findAll(
        quota_paths: Iterable[Path] | None = None, user: str | None = None
    ) -> list[QuotaRecord]:
        """
        Get quota records from several snapshot files.

        Args:
            quota_paths (Iterable[Path] | None): Paths to the JSON quota snapshots.
                If not specified, the paths from the environment variable
                or the configuration are used.
            user (str | None): Only return records of this user.

        Returns:
            list[QuotaRecord]: Records from all snapshots, in order.
        """
        if quota_paths is None:
            quota_paths = QuotaSet.configuredPaths()

        quotas = []
        for path in quota_paths:
            quotas.extend(QuotaSet.find(path, user))

        return quotas

    @staticmethod
    def configuredPaths() -> list[Path]:
        """
        Return the quota snapshot files configured for the dashboard.

        The colon-separated environment variable takes precedence over the configuration.
        """
        if env_paths := os.environ.get(CFG.env_vars.quota_path):
            return [Path(p) for p in env_paths.split(":") if p.strip()]

        return [Path(p) for p in CFG.quota.paths]

    @staticmethod
    def fromJson(text: str, user: str | None = None) -> list[QuotaRecord]:
        """
        Get quota records from the text of a JSON quota snapshot.

        Args:
            text (str): The JSON document.
            user (str | None): Only return records of this user.

        Returns:
            list[QuotaRecord]: The records, or an empty list if the document is
            not valid JSON, has an unsupported version, or any entry is missing
            a required field.
        """
        user = str(user) if user is not None else None

        try:
            document = json.loads(text)
            if not isinstance(document, Mapping):
                raise DVInvalidQuotaFileError("Quota file is not a JSON object.")

            version = to_int(document.get("version"))
            if version != CFG.quota.supported_version:
                raise DVInvalidQuotaFileError(f"JSON version found was: {version}")

            return QuotaSet._findV1(user, document)
        except DVMissingQuotaFieldError as e:
            logger.error(
                f"Quota entry for user {user} is missing expected parameter {e.field_name}"
            )
        except DVInvalidQuotaFileError as e:
            logger.error(f"Quota file is invalid: {e}")
        except json.JSONDecodeError as e:
            logger.error(f"Quota file is not valid JSON: {e}")

        return []

    @staticmethod
    def _findV1(user: str | None, params: Mapping[str, Any]) -> list[QuotaRecord]:
        """
        Parse a JSON document using version 1 formatting.
        """
        entries = params.get("quotas")
        if not isinstance(entries, list):
            raise DVInvalidQuotaFileError(
                "Quota file with version 1 formatting missing quotas array section"
            )

        quotas = []
        time = params.get("timestamp")
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise DVInvalidQuotaFileError(
                    f"Quota entry is not a JSON object: {entry}"
                )

            if user is None or user == str(entry.get("user")):
                quotas.extend(
                    QuotaSet._createBothQuotaTypes(dict(entry) | {"updated_at": time})
                )

        logger.debug(f"Found {len(quotas)} quota records for user {user}.")
        return quotas

    @staticmethod
    def _createBothQuotaTypes(params: dict[str, Any]) -> list[QuotaRecord]:
        """
        Expand a single quota entry into a file-count and a block-usage record.

        Raises:
            DVMissingQuotaFieldError: If a required field is missing.
        """
        records = []
        for resource_type in ResourceType:
            prefix = str(resource_type)
            total_usage = QuotaSet._fetch(params, f"total_{prefix}_usage")
            user_usage = params.get(f"{prefix}_usage")
            grace = params.get(f"{prefix}_grace")

            # a limit of null means unlimited, but the key must be present
            limit_key = f"{prefix}_limit"
            if limit_key not in params:
                raise DVMissingQuotaFieldError(limit_key)

            records.append(
                QuotaRecord.fromParams(
                    {
                        "type": params.get("type"),
                        "path": QuotaSet._fetch(params, "path"),
                        "user": QuotaSet._fetch(params, "user"),
                        "resource_type": resource_type.value,
                        "total_usage": total_usage,
                        "user_usage": total_usage if user_usage is None else user_usage,
                        "limit": params[limit_key],
                        "grace": 0 if grace is None else grace,
                        "updated_at": QuotaSet._fetch(params, "updated_at"),
                    }
                )
            )

        return records

    @staticmethod
    def _fetch(params: Mapping[str, Any], key: str) -> Any:
        """
        Return a required value.

        Raises:
            DVMissingQuotaFieldError: If the key is absent or its value is null.
        """
        if (value := params.get(key)) is None:
            raise DVMissingQuotaFieldError(key)

        return value
