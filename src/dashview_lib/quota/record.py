# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Self

from dashview_lib.core.common import number_to_human, number_to_human_size, to_int
from dashview_lib.core.config import CFG
from dashview_lib.core.error import DVInvalidQuotaFileError, DVMissingQuotaFieldError
from dashview_lib.core.logger import get_logger

logger = get_logger(__name__)


class ResourceType(Enum):
    """
    Kind of resource a quota limits.
    """

    FILE = "file"
    BLOCK = "block"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class QuotaRecord:
    """
    Disk quota utilization for a given user and volume.

    The limit is either a positive integer or 0, meaning unlimited.
    Malformed limits are normalized to 0 on construction.
    """

    # Type of quota, "user" or a shared kind such as "fileset".
    type: str
    # Path to the volume.
    path: Path
    # Name of the user the quota is reported for.
    user: str
    # Kind of the limited resource.
    resource_type: ResourceType
    # Resource units used by the user.
    user_usage: int
    # Resource units used by all users sharing the volume.
    total_usage: int
    # Resource unit limit; 0 means unlimited.
    limit: Any
    # Allowed overage; reserved for future use.
    grace: int
    # Time at which the quota snapshot was generated.
    updated_at: datetime

    def __post_init__(self):
        object.__setattr__(self, "limit", self._normalizeLimit(self.limit))

    @classmethod
    def fromParams(cls, params: Mapping[str, Any]) -> Self:
        """
        Create a quota record from a mapping of parameters.

        Keys with `None` values are treated as absent. `type` defaults to "user"
        and a missing `limit` means unlimited.

        Args:
            params (Mapping[str, Any]): Parameters with the keys `type`, `path`,
                `user`, `resource_type`, `user_usage`, `total_usage`, `limit`,
                `grace` and `updated_at` (epoch seconds).

        Returns:
            QuotaRecord: The constructed record.

        Raises:
            DVMissingQuotaFieldError: If a required parameter is missing.
            DVInvalidQuotaFileError: If `updated_at` is out of the supported range.
        """
        params = {k: v for k, v in params.items() if v is not None}

        def fetch(key: str) -> Any:
            try:
                return params[key]
            except KeyError as e:
                raise DVMissingQuotaFieldError(key) from e

        return cls(
            type=str(params.get("type", "user")),
            path=Path(str(fetch("path"))),
            user=str(fetch("user")),
            resource_type=ResourceType(str(fetch("resource_type"))),
            user_usage=to_int(fetch("user_usage")),
            total_usage=to_int(fetch("total_usage")),
            limit=params.get("limit"),
            grace=to_int(fetch("grace")),
            updated_at=cls._parseTimestamp(fetch("updated_at")),
        )

    @staticmethod
    def _parseTimestamp(raw: Any) -> datetime:
        """
        Convert epoch seconds to a datetime.

        Raises:
            DVInvalidQuotaFileError: If the timestamp is out of the supported range.
        """
        try:
            return datetime.fromtimestamp(to_int(raw))
        except (OverflowError, ValueError, OSError) as e:
            raise DVInvalidQuotaFileError(f"Invalid quota timestamp '{raw}': {e}") from e

    def isShared(self) -> bool:
        """Whether quota reporting for this volume is shared amongst other users."""
        return self.type != "user"

    def isLimited(self) -> bool:
        """Whether the quota has a limit; a limit of 0 means unlimited."""
        return self.limit > 0

    def isSufficient(self, threshold: float = CFG.quota.threshold) -> bool:
        """
        Whether the total usage stays below `threshold` of the limit.

        Unlimited quotas are always sufficient.
        """
        if self.isLimited():
            return self.total_usage < threshold * self.limit

        return True

    def isInsufficient(self, threshold: float = CFG.quota.threshold) -> bool:
        """Negation of `isSufficient`."""
        return not self.isSufficient(threshold)

    def percentUserUsage(self) -> int:
        """Percent of the limit used by this user, 0 if unlimited."""
        if self.isLimited():
            return self.user_usage * 100 // self.limit

        return 0

    def percentTotalUsage(self) -> int:
        """Percent of the limit used by all users, 0 if unlimited."""
        if self.isLimited():
            return self.total_usage * 100 // self.limit

        return 0

    def __str__(self) -> str:
        messages = CFG.quota.messages

        match self.resource_type:
            case ResourceType.FILE:
                msg = messages.file.format(
                    used=number_to_human(self.total_usage).lower(),
                    available=number_to_human(self.limit).lower(),
                )
                if not self.isShared():
                    return msg
                return f"{msg} " + messages.file_shared.format(
                    used_exclusive=number_to_human(self.user_usage).lower()
                )
            case ResourceType.BLOCK:
                block_size = CFG.quota.block_size
                msg = messages.block.format(
                    used=number_to_human_size(self.total_usage * block_size),
                    available=number_to_human_size(self.limit * block_size),
                )
                if not self.isShared():
                    return msg
                return f"{msg} " + messages.block_shared.format(
                    used_exclusive=number_to_human_size(self.user_usage * block_size)
                )

    def _normalizeLimit(self, limit: Any) -> int:
        """
        Return the limit as a non-negative integer.

        `None`, 0 and "unlimited" silently mean unlimited. Any other value
        that does not convert to a positive integer is reported and treated as unlimited.
        """
        if limit is None or str(limit).strip().lower() == "unlimited":
            return 0

        if (value := to_int(limit)) > 0:
            return value

        if not (limit == 0 and not isinstance(limit, bool)):
            logger.warning(
                f"Quota limit {limit} for {self.user} appears to be malformed and so will be set to 0 / unlimited."
            )

        return 0
