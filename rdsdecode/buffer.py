"""Station state with optional confirmation of each received value."""

from dataclasses import dataclass, field
from enum import IntEnum

from .af import AlternativeFrequencies
from .country import Country
from .ecc import ECC_UNKNOWN, PI_UNKNOWN

__all__ = [
    "PI_UNKNOWN",
    "ECC_UNKNOWN",
    "PTY_UNKNOWN",
    "TrafficProgramme",
    "TrafficAnnouncement",
    "MusicSpeech",
    "StationBuffer",
]

PTY_UNKNOWN = -1


class TrafficProgramme(IntEnum):
    """Traffic programme (TP) flag."""

    UNKNOWN = -1
    OFF = 0
    ON = 1


class TrafficAnnouncement(IntEnum):
    """Traffic announcement (TA) flag."""

    UNKNOWN = -1
    OFF = 0
    ON = 1


class MusicSpeech(IntEnum):
    """Music/speech (MS) switch."""

    UNKNOWN = -1
    SPEECH = 0
    MUSIC = 1


@dataclass
class _StationData:
    pi: int = PI_UNKNOWN
    pty: int = PTY_UNKNOWN
    tp: int = TrafficProgramme.UNKNOWN
    ta: int = TrafficAnnouncement.UNKNOWN
    ms: int = MusicSpeech.UNKNOWN
    ecc: int = ECC_UNKNOWN
    country: int = Country.UNKNOWN
    af: AlternativeFrequencies = field(default_factory=AlternativeFrequencies)


class StationBuffer:
    """Current station values.

    With ``extended_check`` enabled, a new value is accepted only after it
    has been received twice in a row; until then it is kept aside.
    Each update method returns True when the accepted value changed.
    """

    def __init__(self, extended_check: bool = False) -> None:
        self.extended_check = extended_check
        self._used = _StationData()
        self._temp = _StationData()

    def clear(self) -> None:
        """Forget every value, keeping the extended check setting."""
        self._used = _StationData()
        self._temp = _StationData()

    def _update(self, name: str, value: int) -> bool:
        if getattr(self._used, name) == value or (
            self.extended_check and getattr(self._temp, name) != value
        ):
            setattr(self._temp, name, value)
            return False
        setattr(self._used, name, value)
        return True

    def update_pi(self, value: int) -> bool:
        """Offer a programme identification code."""
        return self._update("pi", value)

    def update_pty(self, value: int) -> bool:
        """Offer a programme type code."""
        return self._update("pty", value)

    def update_tp(self, value: int) -> bool:
        """Offer a traffic programme flag."""
        return self._update("tp", value)

    def update_ta(self, value: int) -> bool:
        """Offer a traffic announcement flag."""
        return self._update("ta", value)

    def update_ms(self, value: int) -> bool:
        """Offer a music/speech switch value."""
        return self._update("ms", value)

    def update_ecc(self, value: int) -> bool:
        """Offer an extended country code."""
        return self._update("ecc", value)

    def update_country(self, value: int) -> bool:
        """Offer a country."""
        return self._update("country", value)

    def add_af(self, value: int) -> bool:
        """Offer an alternative frequency code; True if newly accepted."""
        if self._used.af.contains(value):
            return False
        if self.extended_check and not self._temp.af.contains(value):
            self._temp.af.add(value)
            return False
        return self._used.af.add(value)

    @property
    def pi(self) -> int:
        return self._used.pi

    @property
    def pty(self) -> int:
        return self._used.pty

    @property
    def tp(self) -> int:
        return self._used.tp

    @property
    def ta(self) -> int:
        return self._used.ta

    @property
    def ms(self) -> int:
        return self._used.ms

    @property
    def ecc(self) -> int:
        return self._used.ecc

    @property
    def country(self) -> int:
        return self._used.country

    @property
    def af(self) -> AlternativeFrequencies:
        return self._used.af

    def __repr__(self) -> str:
        return (
            f"StationBuffer(pi={self.pi!r}, pty={self.pty!r}, tp={self.tp!r}, "
            f"ta={self.ta!r}, ms={self.ms!r}, ecc={self.ecc!r}, "
            f"country={self.country!r}, af={self.af!r})"
        )