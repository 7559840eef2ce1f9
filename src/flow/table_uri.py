"""Table URI parsing helpers.

This module parses ``kiji://cluster/instance/table`` identities so that
tap builders can reject URIs that stop short of naming a table.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import TABLE_URI_SCHEME
from core.errors import InvalidArgumentError, NullArgumentError

_URI_PREFIX = f"{TABLE_URI_SCHEME}://"


@dataclass(frozen=True)
class TableURI:
    """Parsed table identity.

    Attributes:
        cluster: Cluster address, for example ``.env`` or ``zk1:2181``.
        instance: Store instance name.
        table: Table name, or None when the URI names only an instance.
    """

    cluster: str
    instance: str
    table: str | None = None

    @property
    def names_table(self) -> bool:
        """Whether the URI addresses a specific table."""
        return self.table is not None

    def __str__(self) -> str:
        base = f"{_URI_PREFIX}{self.cluster}/{self.instance}"
        if self.table is None:
            return base
        return f"{base}/{self.table}"


def parse_table_uri(uri: str) -> TableURI:
    """Parse and validate a table URI.

    Args:
        uri: URI in format ``kiji://cluster/instance[/table]``.

    Returns:
        Parsed table identity.

    Raises:
        NullArgumentError: If uri is None.
        InvalidArgumentError: If the scheme or path segments are malformed.
    """
    if uri is None:
        raise NullArgumentError("Table URI may not be None.")
    if not isinstance(uri, str) or not uri.startswith(_URI_PREFIX):
        _raise_uri_error(uri)
    segments = uri.removeprefix(_URI_PREFIX).rstrip("/").split("/")
    if len(segments) not in (2, 3) or not all(segments):
        _raise_uri_error(uri)
    if len(segments) == 2:
        return TableURI(cluster=segments[0], instance=segments[1])
    return TableURI(cluster=segments[0], instance=segments[1], table=segments[2])


def _raise_uri_error(uri: object) -> None:
    """Raise an invalid table URI error.

    Args:
        uri: Invalid URI value.

    Raises:
        InvalidArgumentError: Always.
    """
    raise InvalidArgumentError(
        f"Invalid table URI {uri!r}: expected {_URI_PREFIX}cluster/instance/table. "
        "Provide cluster, instance and table segments."
    )
