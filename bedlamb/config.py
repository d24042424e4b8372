from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

# Checked in order; the first non-empty value wins.
REGION_VARS = ("AWS_REGION", "REGION", "AWS_DEFAULT_REGION")


@dataclass(frozen=True)
class Settings:
    """Where to send the invoke call. Credentials always come from boto3's chain."""

    endpoint_url: Optional[str] = None
    region: Optional[str] = None
    profile: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        region = None
        for key in REGION_VARS:
            value = (env.get(key) or "").strip()
            if value:
                region = value
                break
        return cls(
            endpoint_url=(env.get("AWS_ENDPOINT") or "").strip() or None,
            region=region,
            profile=(env.get("AWS_PROFILE") or "").strip() or None,
        )

    def override(
        self,
        *,
        endpoint_url: Optional[str] = None,
        region: Optional[str] = None,
    ) -> "Settings":
        return replace(
            self,
            endpoint_url=endpoint_url or self.endpoint_url,
            region=region or self.region,
        )
