from typing import Any, Optional

import orjson
from fastapi import Response


class CacheControl:
    def __init__(self):
        self._directives = []
        self._max_age = None
        self._s_maxage = None
        self._stale_if_error = None

    def public(self):
        """Response can be cached by any cache."""
        self._directives.append("public")
        return self

    def private(self):
        """Response is intended for a single user."""
        self._directives.append("private")
        return self

    def must_revalidate(self):
        self._directives.append("must-revalidate")
        return self

    def max_age(self, seconds: int):
        self._max_age = seconds
        return self

    def s_maxage(self, seconds: int):
        self._s_maxage = seconds
        return self

    def stale_if_error(self, seconds: int):
        self._stale_if_error = seconds
        return self

    def build(self):
        """Build the Cache-Control header value."""
        parts = list(self._directives)

        if self._max_age is not None:
            parts.append(f"max-age={self._max_age}")
        if self._s_maxage is not None:
            parts.append(f"s-maxage={self._s_maxage}")
        if self._stale_if_error is not None:
            parts.append(f"stale-if-error={self._stale_if_error}")

        return ", ".join(parts)


class CachePolicies:
    @staticmethod
    def streams(ttl: int):
        """User-specific selections, private cache for as long as the result cache keeps them."""
        return CacheControl().private().max_age(ttl).must_revalidate()

    @staticmethod
    def empty_results():
        """
        For empty selections (no stream available).
        Short public cache to prevent spam while allowing quick retries.
        """
        return CacheControl().public().max_age(15).s_maxage(30).stale_if_error(60)

    @staticmethod
    def manifest():
        return CacheControl().private().max_age(60).must_revalidate()


class CachedJSONResponse(Response):
    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        cache_control: Optional[CacheControl] = None,
        **kwargs,
    ):
        super().__init__(
            content=orjson.dumps(content),
            status_code=status_code,
            media_type="application/json",
            **kwargs,
        )

        self.headers["Access-Control-Allow-Origin"] = "*"
        if cache_control:
            self.headers["Cache-Control"] = cache_control.build()
