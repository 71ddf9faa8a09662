"""
Pwned Passwords range API client.

Implements the k-anonymity password check: only the first 5 characters
of the password's SHA-1 hash are sent to the API, and the returned
bucket of suffixes is searched locally.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging
import re

import aiohttp

from pwcheck.config import CheckerConfig
from pwcheck.hibp.errors import (
    HttpStatusError,
    NetworkError,
    ParseError,
    PwnedPasswordsError,
)
from pwcheck.hibp.models import PasswordCheckResult, QueryDigest

logger = logging.getLogger(__name__)

_COUNT_RE = re.compile(r"[0-9]+")


def parse_range_response(body: str, suffix: str) -> int:
    """Find the occurrence count for ``suffix`` in a range response body.

    The body is one ``SUFFIX:COUNT`` entry per line. The first line whose
    suffix equals ``suffix`` exactly wins; no match means 0.

    Raises:
        ParseError: a line has no ``:`` or the matching count is not
            an unsigned integer
    """
    for lineno, line in enumerate(body.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        if ":" not in line:
            raise ParseError(f"Malformed response line {lineno}: missing ':'")

        hash_suffix = line.split(":", 1)[0]
        if hash_suffix != suffix:
            continue

        count = line.rsplit(":", 1)[1].strip()
        if not _COUNT_RE.fullmatch(count):
            raise ParseError(f"Malformed count on response line {lineno}: {count!r}")
        return int(count)

    return 0


class PwnedPasswordsClient:
    """Client for the Pwned Passwords range API.

    Use as an async context manager so the HTTP session is closed::

        async with PwnedPasswordsClient() as client:
            result = await client.check_password("hunter2")
    """

    def __init__(self, config: CheckerConfig | None = None):
        """Initialize the client.

        Args:
            config: Settings to use (default: loaded from environment)
        """
        self.config = config or CheckerConfig.from_env()
        self._session: aiohttp.ClientSession | None = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure HTTP session exists."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "PwnedPasswordsClient":
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def fetch_range(self, prefix: str) -> str:
        """Fetch the raw bucket of hash suffixes for a 5 character prefix.

        Raises:
            NetworkError: connection failure or timeout
            HttpStatusError: any status other than 200
            ParseError: the body is not valid UTF-8
        """
        session = await self._ensure_session()
        url = f"{self.config.api_url}/range/{prefix}"

        headers = {"User-Agent": self.config.user_agent}
        if self.config.add_padding:
            headers["Add-Padding"] = "true"

        logger.debug(f"Querying range {prefix}")

        try:
            async with session.request(
                "GET",
                url,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
            ) as response:
                status = response.status

                if status == 200:
                    body = await response.read()
                    try:
                        return body.decode("utf-8")
                    except UnicodeDecodeError as e:
                        raise ParseError("Response body is not valid UTF-8") from e
                elif status == 429:
                    retry_after = response.headers.get("Retry-After", "60")
                    logger.warning(f"Rate limited. Retry after {retry_after}s")
                    raise HttpStatusError(status, f"Rate limited. Retry after {retry_after}s")
                else:
                    text = (await response.read()).decode("utf-8", errors="replace")
                    raise HttpStatusError(status, f"HTTP {status}: {text[:200]}")

        except asyncio.TimeoutError as e:
            raise NetworkError(f"Request timed out after {self.config.timeout:g}s") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Request failed: {e}") from e

    async def count_digest(self, digest: QueryDigest) -> int:
        """Return how many times a digest appears in the breach corpus.

        Raises:
            PwnedPasswordsError: on any network, HTTP or parse failure
        """
        body = await self.fetch_range(digest.prefix)
        return parse_range_response(body, digest.suffix)

    async def count_occurrences(self, password: str) -> int:
        """Return how many times a password appears in the breach corpus.

        Raises:
            PwnedPasswordsError: on any network, HTTP or parse failure
        """
        return await self.count_digest(QueryDigest.from_password(password))

    async def _check_digest(self, digest: QueryDigest) -> PasswordCheckResult:
        try:
            occurrences = await self.count_digest(digest)
        except PwnedPasswordsError as e:
            logger.info(f"Range check for {digest.prefix} failed: {e}")
            return PasswordCheckResult.from_error(e, hash_prefix=digest.prefix)

        return PasswordCheckResult.found(occurrences, hash_prefix=digest.prefix)

    async def check_password(self, password: str) -> PasswordCheckResult:
        """Check if a password has been exposed in data breaches.

        Uses k-anonymity model - only the first 5 characters of the
        SHA-1 hash are sent to the API. The full password never leaves
        this system.

        Failures are reported on the result, never as a count of 0.

        Args:
            password: Password to check (NOT stored or logged)

        Returns:
            PasswordCheckResult with exposure count or error
        """
        return await self._check_digest(QueryDigest.from_password(password))

    async def check_password_hash(self, sha1_hash: str) -> PasswordCheckResult:
        """Check a pre-computed SHA-1 hash against Pwned Passwords.

        Args:
            sha1_hash: Full SHA-1 hash of the password, any case

        Returns:
            PasswordCheckResult with exposure count or error

        Raises:
            ValueError: if sha1_hash is not 40 hex characters
        """
        return await self._check_digest(QueryDigest.from_hex(sha1_hash))
