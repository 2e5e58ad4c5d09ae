"""Timezone representation: the "location" a Date is bound to.

A Timezone is one of three kinds:

- a fixed UTC offset, optionally named (``Timezone(3600, "CET")``);
- an IANA zone backed by ``zoneinfo`` (``Timezone.from_zone("Europe/Berlin")``);
- the system's local zone (``Timezone.local()``).

Zoned and local timezones are identified by their key, not by an offset,
so a January and a July date in Berlin share one location even though
their offsets differ. The offset that applies to a given day comes from
``offset_on``.
"""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from caldate._internal.constants import MAX_UTC_OFFSET_SECONDS
from caldate.errors import TimezoneError

LOCAL_KEY = "Local"
_UTC_KEYS = frozenset({"UTC", "Etc/UTC", "Etc/UCT", "UCT", "Zulu", "Etc/Zulu"})


class Timezone:
    """A location: a fixed UTC offset, an IANA zone or the local zone.

    Offsets are stored in seconds from UTC, with positive values being
    east of UTC (ahead in time) and negative values being west of UTC
    (behind in time).

    Attributes:
        offset_seconds: The fixed offset, or for zoned locations the offset
            in effect when the Timezone was created.
        name: Optional human-readable name for the timezone.
        key: The zone key ("Europe/Berlin", "Local"), None for fixed offsets.

    Examples:
        >>> tz = Timezone.utc()
        >>> tz.is_utc
        True

        >>> Timezone.from_hours(5, 30).offset_seconds
        19800

        >>> berlin = Timezone.from_zone("Europe/Berlin")
        >>> berlin.offset_on(2024, 1, 10), berlin.offset_on(2024, 7, 10)
        (3600, 7200)
    """

    __slots__ = ("_offset_seconds", "_name", "_key", "_zone")

    # UTC singleton instance (lazily initialized)
    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a Timezone with the specified fixed UTC offset.

        Args:
            offset_seconds: UTC offset in seconds. Positive values are
                east of UTC, negative values are west.
            name: Optional name for the timezone (e.g., "JST", "CET").

        Raises:
            TimezoneError: If offset_seconds is outside valid range.
        """
        if isinstance(offset_seconds, bool) or not isinstance(offset_seconds, int):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int = offset_seconds
        self._name: str | None = name
        self._key: str | None = None
        self._zone: _datetime.tzinfo | None = None

    @classmethod
    def _create_keyed(
        cls,
        key: str,
        zone: _datetime.tzinfo | None,
        offset_seconds: int,
    ) -> Timezone:
        """Internal factory for zoned and local timezones."""
        instance: Timezone = object.__new__(cls)
        instance._offset_seconds = offset_seconds
        instance._name = key
        instance._key = key
        instance._zone = zone
        return instance

    @classmethod
    def utc(cls) -> Timezone:
        """Return the UTC timezone.

        All calls return the same instance.
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def local(cls, moment: _datetime.datetime | None = None) -> Timezone:
        """Return the system's local zone.

        Every local Timezone is the same location. ``offset_seconds`` is the
        local offset at ``moment`` (default: now); the offset of a given day
        comes from ``offset_on``.

        Examples:
            >>> Timezone.local().key
            'Local'
        """
        if moment is None:
            moment = _datetime.datetime.now()
        offset = moment.astimezone().utcoffset() or _datetime.timedelta(0)
        return cls._create_keyed(LOCAL_KEY, None, int(offset.total_seconds()))

    @classmethod
    def from_zone(cls, zone: ZoneInfo | str) -> Timezone:
        """Return the location of an IANA zone.

        The UTC aliases ("UTC", "Etc/UTC", ...) return ``Timezone.utc()``.

        Raises:
            TimezoneError: If the zone key is unknown or malformed.

        Examples:
            >>> Timezone.from_zone("Asia/Tokyo")
            Timezone.from_zone('Asia/Tokyo')
            >>> Timezone.from_zone("Etc/UTC") is Timezone.utc()
            True
        """
        if isinstance(zone, str):
            try:
                zone = ZoneInfo(zone)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise TimezoneError(f"unknown timezone {zone!r}") from exc
        if not isinstance(zone, ZoneInfo):
            raise TimezoneError(f"expected ZoneInfo or str, got {type(zone).__name__}")
        if zone.key is None:
            raise TimezoneError("ZoneInfo loaded from a file has no key")
        if zone.key in _UTC_KEYS:
            return cls.utc()

        offset = _datetime.datetime.now(zone).utcoffset() or _datetime.timedelta(0)
        return cls._create_keyed(zone.key, zone, int(offset.total_seconds()))

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a Timezone from hours and minutes offset.

        Args:
            hours: Hour component of offset (-14 to +14). Sign determines
                direction (positive = east of UTC).
            minutes: Minute component of offset (0 to 59). The sign is
                taken from hours.

        Raises:
            TimezoneError: If hours or minutes are out of valid range.

        Examples:
            >>> Timezone.from_hours(9).offset_seconds
            32400
            >>> Timezone.from_hours(-5).offset_seconds
            -18000
        """
        if not isinstance(hours, int):
            raise TimezoneError(f"hours must be an integer, got {type(hours).__name__}")
        if not isinstance(minutes, int):
            raise TimezoneError(f"minutes must be an integer, got {type(minutes).__name__}")

        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")

        if hours >= 0:
            offset_seconds = hours * 3600 + minutes * 60
        else:
            offset_seconds = hours * 3600 - minutes * 60

        return cls(offset_seconds)

    @classmethod
    def from_datetime(cls, moment: _datetime.datetime) -> Timezone:
        """Return the location of an aware datetime.

        A ``ZoneInfo`` tzinfo becomes a zoned Timezone. Any other tzinfo is
        read as the fixed offset in effect at ``moment``; sub-second offsets
        are truncated to whole seconds.

        Raises:
            TimezoneError: If the datetime is naive.
        """
        offset = moment.utcoffset()
        if offset is None:
            raise TimezoneError(f"datetime {moment.isoformat()} has no UTC offset")
        if isinstance(moment.tzinfo, ZoneInfo) and moment.tzinfo.key is not None:
            return cls.from_zone(moment.tzinfo)
        if offset == _datetime.timedelta(0):
            return cls.utc()
        return cls(int(offset.total_seconds()), moment.tzname())

    # Offsets
    # --------------------------------------------------

    def offset_on(self, year: int, month: int, day: int) -> int:
        """Return the UTC offset in seconds at midnight of the given day.

        Days before year 1 use the offset of 0001-01-01.

        Examples:
            >>> Timezone.from_hours(9).offset_on(2024, 6, 5)
            32400
        """
        if self._key is None:
            return self._offset_seconds
        if year < 1:
            year, month, day = 1, 1, 1
        try:
            offset = self.localize(_datetime.datetime(year, month, day)).utcoffset()
        except (OverflowError, OSError, ValueError):
            # The platform cannot resolve local time this far out.
            return self._offset_seconds
        return int(offset.total_seconds()) if offset is not None else 0

    def localize(self, naive: _datetime.datetime) -> _datetime.datetime:
        """Attach this location to a wall-clock datetime.

        Raises:
            OverflowError: If the local zone cannot resolve the moment.
        """
        if self._zone is not None:
            return naive.replace(tzinfo=self._zone)
        if self._key == LOCAL_KEY:
            return naive.astimezone()
        return naive.replace(tzinfo=self._fixed_tzinfo())

    def convert(self, moment: _datetime.datetime) -> _datetime.datetime:
        """Return an aware moment as wall-clock time in this location.

        Naive moments are already wall-clock time and pass through.

        Examples:
            >>> from datetime import datetime, timezone
            >>> Timezone.from_hours(9).convert(datetime(2024, 6, 5, 20, tzinfo=timezone.utc)).day
            6
        """
        if moment.tzinfo is None:
            return moment
        if self._zone is not None:
            return moment.astimezone(self._zone)
        if self._key == LOCAL_KEY:
            return moment.astimezone()
        return moment.astimezone(self._fixed_tzinfo())

    def _fixed_tzinfo(self) -> _datetime.tzinfo:
        if self._offset_seconds == 0:
            return _datetime.timezone.utc
        return _datetime.timezone(_datetime.timedelta(seconds=self._offset_seconds))

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds."""
        return self._offset_seconds

    @property
    def name(self) -> str | None:
        """Return the timezone name, if set."""
        return self._name

    @property
    def key(self) -> str | None:
        """Return the zone key, or None for a fixed offset."""
        return self._key

    @property
    def is_fixed(self) -> bool:
        """Return True if the offset never changes."""
        return self._key is None

    @property
    def is_utc(self) -> bool:
        """Return True for a fixed zero offset."""
        return self._key is None and self._offset_seconds == 0

    def __eq__(self, other: object) -> bool:
        """Zoned timezones are equal by key; fixed ones by offset, regardless of names."""
        if not isinstance(other, Timezone):
            return NotImplemented
        if self._key is not None or other._key is not None:
            return self._key == other._key
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        if self._key is not None:
            return hash(self._key)
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self._key == LOCAL_KEY:
            return "Timezone.local()"
        if self._key is not None:
            return f"Timezone.from_zone({self._key!r})"
        if self._name:
            return f"Timezone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return a string like "UTC", "Europe/Berlin", "+05:30", or "-05:00"."""
        if self._key is not None:
            return self._key
        if self._offset_seconds == 0:
            return self._name if self._name else "UTC"

        total_minutes = abs(self._offset_seconds) // 60
        hours = total_minutes // 60
        minutes = total_minutes % 60
        sign = "+" if self._offset_seconds >= 0 else "-"

        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["LOCAL_KEY", "Timezone"]
