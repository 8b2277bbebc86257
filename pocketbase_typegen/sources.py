"""Schema sources for loading PocketBase collections.

Each source produces the same list of ``Collection`` objects, whether it
reads the SQLite database, a JSON export from the admin UI, or the REST API
of a running instance.
"""

import json
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .codegen.core.schema import Collection, SchemaError, convert_collections
from .logging_config import get_logger

logger = get_logger(__name__)

COLLECTIONS_PER_PAGE = 200


class SchemaLoaderError(Exception):
    """Raised when a schema cannot be loaded from its source."""

    pass


class SchemaSource(ABC):
    """Something that can produce the collections of a PocketBase schema."""

    @abstractmethod
    def load(self) -> list[Collection]:
        """Load and convert the collections.

        Raises:
            SchemaLoaderError: If the source cannot be read or converted.
        """

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable description of the source."""

    def _convert(self, raw: Any) -> list[Collection]:
        try:
            collections = convert_collections(raw)
        except SchemaError as e:
            logger.error("Invalid schema from %s: %s", self.describe(), e)
            raise SchemaLoaderError(f"Invalid schema from {self.describe()}: {e}") from e
        logger.info("Loaded %d collection(s) from %s", len(collections), self.describe())
        return collections


class DatabaseSource(SchemaSource):
    """Reads the ``_collections`` table of a PocketBase SQLite database."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return f"database {self.path}"

    def load(self) -> list[Collection]:
        logger.debug("Reading collections from database: %s", self.path)

        if not self.path.exists():
            logger.error("Database not found: %s", self.path)
            raise SchemaLoaderError(f"Database not found: {self.path}")

        try:
            connection = sqlite3.connect(
                f"{self.path.resolve().as_uri()}?mode=ro", uri=True
            )
        except sqlite3.Error as e:
            logger.error("Cannot open database %s: %s", self.path, e)
            raise SchemaLoaderError(f"Cannot open database {self.path}: {e}") from e

        try:
            connection.row_factory = sqlite3.Row
            rows = connection.execute("SELECT * FROM _collections").fetchall()
        except sqlite3.Error as e:
            logger.error("Failed to read collections from %s: %s", self.path, e)
            raise SchemaLoaderError(
                f"Failed to read collections from {self.path}: {e}"
            ) from e
        finally:
            connection.close()

        raw_collections = []
        for row in rows:
            collection = dict(row)
            try:
                collection["schema"] = json.loads(collection.get("schema") or "[]")
            except (TypeError, json.JSONDecodeError) as e:
                logger.error(
                    "Invalid schema column for collection %s: %s",
                    collection.get("name"),
                    e,
                )
                raise SchemaLoaderError(
                    f"Invalid schema column for collection {collection.get('name')}: {e}"
                ) from e
            raw_collections.append(collection)

        return self._convert(raw_collections)


class JsonFileSource(SchemaSource):
    """Reads a schema exported as JSON from the PocketBase admin UI."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return f"file {self.path}"

    def load(self) -> list[Collection]:
        logger.debug("Reading collections from JSON file: %s", self.path)

        if not self.path.exists():
            logger.error("File not found: %s", self.path)
            raise SchemaLoaderError(f"File not found: {self.path}")

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Invalid JSON in file %s: %s", self.path, e)
            raise SchemaLoaderError(f"Invalid JSON in file {self.path}: {e}") from e
        except OSError as e:
            logger.error("Error reading file %s: %s", self.path, e)
            raise SchemaLoaderError(f"Error reading file {self.path}: {e}") from e

        return self._convert(data)


class ApiSource(SchemaSource):
    """Fetches collections from a running instance using admin credentials."""

    def __init__(
        self, url: str, email: str = "", password: str = "", timeout: int = 30
    ) -> None:
        self.url = url.rstrip("/")
        self.email = email
        self.password = password
        self.timeout = timeout

    def describe(self) -> str:
        return f"instance {self.url}"

    def load(self) -> list[Collection]:
        parsed_url = urlparse(self.url)
        if not all([parsed_url.scheme, parsed_url.netloc]):
            logger.error("Invalid URL format: %s", self.url)
            raise SchemaLoaderError(f"Invalid URL: {self.url}")

        token = self._authenticate()
        result = self._request(
            "get",
            f"{self.url}/api/collections",
            params={"perPage": COLLECTIONS_PER_PAGE},
            headers={"Authorization": f"Admin {token}"},
        )

        if not isinstance(result, dict) or "items" not in result:
            logger.error("Collection listing from %s has no items", self.url)
            raise SchemaLoaderError(f"Unexpected collection listing from {self.url}")

        return self._convert(result["items"])

    def _authenticate(self) -> str:
        """Log in as admin and return the auth token."""
        logger.debug("Authenticating against %s as %s", self.url, self.email)
        result = self._request(
            "post",
            f"{self.url}/api/admins/auth-via-email",
            data={"email": self.email, "password": self.password},
        )

        token = result.get("token") if isinstance(result, dict) else None
        if not token:
            logger.error("No auth token returned by %s", self.url)
            raise SchemaLoaderError(f"Authentication failed for {self.url}")
        return token

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body."""
        try:
            response = requests.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout as e:
            logger.error("Request timeout for URL: %s", url)
            raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
        except requests.exceptions.ConnectionError as e:
            logger.error("Connection error for URL %s: %s", url, e)
            raise SchemaLoaderError(f"Connection error for URL: {url}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            logger.error("HTTP error %s for URL: %s", status, url)
            raise SchemaLoaderError(f"HTTP error {status} for URL: {url}") from e
        except requests.exceptions.JSONDecodeError as e:
            logger.error("Invalid JSON response from URL %s: %s", url, e)
            raise SchemaLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error("Request error for URL %s: %s", url, e)
            raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e


def load_schema(
    db: str | Path | None = None,
    json_path: str | Path | None = None,
    url: str | None = None,
    email: str = "",
    password: str = "",
) -> list[Collection]:
    """Load collections from whichever source is given.

    Args:
        db: Path to a PocketBase SQLite database.
        json_path: Path to a JSON schema export.
        url: Base URL of a PocketBase instance.
        email: Admin email, used with ``url``.
        password: Admin password, used with ``url``.

    Returns:
        The loaded collections.

    Raises:
        SchemaLoaderError: If no source is given or loading fails.
    """
    if db:
        source: SchemaSource = DatabaseSource(db)
    elif json_path:
        source = JsonFileSource(json_path)
    elif url:
        source = ApiSource(url, email, password)
    else:
        logger.error("No schema source provided")
        raise SchemaLoaderError("Missing schema path: provide a database, JSON file or URL")

    return source.load()
