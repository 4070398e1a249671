# -*- coding: utf-8 -*-
"""
Password engine: generation and strength estimation.

Key pieces
- Four fixed character classes (lowercase, uppercase, digits, symbols).
- Cryptographically secure generation (secrets.SystemRandom) from the pool of enabled classes.
- Entropy / brute-force crack-time estimate based on the characters the password actually contains.
- Human-readable crack-time formatting and a five-tier strength rating.

Notes on the estimate
- The alphabet size is reconstructed from the generated password, not from the classes that were
  enabled for generation. A short password may therefore be credited with fewer (or more) classes
  than were available. This is a simple heuristic and is kept as such.
- This module has no GUI dependency; the desktop window only feeds it snapshots.
"""

from __future__ import annotations

import enum
import logging
import math
import random
import secrets
import string
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

# -------------------------
# Constants
# -------------------------

# Offline attacker throughput assumed for the crack-time estimate.
GUESSES_PER_SECOND = 1e12

SYMBOLS = r"""!@#$%^&*()-_=+[]{};:'",.<>/?\|~`"""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_YEAR = 31557600  # 365.25 days

YEAR_UNITS = ("", "Thousand", "Million", "Billion", "Trillion")


logger = logging.getLogger(__name__)


# =========================
#    CHARACTER CLASSES
# =========================

class CharacterClass(enum.Enum):
    """Fixed alphabets a password can be drawn from."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SYMBOL = "symbol"

    def get_all(self) -> str:
        return _CLASS_CHARACTERS[self]

    def __len__(self) -> int:
        return len(_CLASS_CHARACTERS[self])


_CLASS_CHARACTERS: Dict[CharacterClass, str] = {
    CharacterClass.LOWERCASE: string.ascii_lowercase,
    CharacterClass.UPPERCASE: string.ascii_uppercase,
    CharacterClass.DIGIT: string.digits,
    CharacterClass.SYMBOL: SYMBOLS,
}


# =========================
#        GENERATION
# =========================

class PasswordGenerator:
    """
    Draws passwords from the concatenated pool of the enabled character classes.

    - Every position is an independent draw (with replacement) from the whole pool.
    - A character present in two enabled classes keeps both entries, so it is twice as likely.
    - Indices come from SystemRandom.randrange, which rejects out-of-range samples instead of
      reducing them modulo the pool size; all indices are equally likely.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else secrets.SystemRandom()

    @staticmethod
    def build_pool(enabled_classes: Iterable[CharacterClass]) -> str:
        return "".join(char_class.get_all() for char_class in enabled_classes)

    def generate(self, enabled_classes: Sequence[CharacterClass], length: int) -> str:
        """
        Generate a password of exactly `length` characters.

        Returns an empty string when no class is enabled, whatever the length.

        Raises:
            ValueError if length is negative and the pool is not empty.
        """
        pool = self.build_pool(enabled_classes)
        if not pool:
            logger.debug("No character classes enabled; returning an empty password.")
            return ""

        if length < 0:
            raise ValueError("Password length must not be negative.")

        logger.debug("Generating %d characters from a pool of %d.", length, len(pool))
        return "".join(pool[self._rng.randrange(len(pool))] for _ in range(length))


# =========================
#    STRENGTH ESTIMATES
# =========================

@dataclass(frozen=True)
class PasswordStats:
    entropy_bits: float
    crack_time_seconds: float


class StrengthEstimator:
    """Entropy and brute-force time from the character classes present in a password."""

    def __init__(
        self,
        symbol_pool_size: int = len(CharacterClass.SYMBOL),
        guesses_per_second: float = GUESSES_PER_SECOND,
    ) -> None:
        self.symbol_pool_size = symbol_pool_size
        self.guesses_per_second = guesses_per_second

    def alphabet_size(self, password: str) -> int:
        pool = 0
        if any("a" <= c <= "z" for c in password):
            pool += len(CharacterClass.LOWERCASE)
        if any("A" <= c <= "Z" for c in password):
            pool += len(CharacterClass.UPPERCASE)
        if any("0" <= c <= "9" for c in password):
            pool += len(CharacterClass.DIGIT)
        if any(not _is_ascii_alnum(c) for c in password):
            pool += self.symbol_pool_size
        return pool

    def calculate(self, password: str) -> PasswordStats:
        pool = self.alphabet_size(password)
        if pool <= 0 or not password:
            return PasswordStats(entropy_bits=0.0, crack_time_seconds=0.0)

        entropy_bits = len(password) * math.log2(pool)
        try:
            keyspace = 2.0 ** entropy_bits
        except OverflowError:
            keyspace = math.inf
        return PasswordStats(
            entropy_bits=entropy_bits,
            crack_time_seconds=keyspace / self.guesses_per_second,
        )


def _is_ascii_alnum(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z" or "0" <= c <= "9"


class CrackTimeFormatter:
    @staticmethod
    def format(seconds: float) -> str:
        """
        Human-readable duration, two decimals.

        Seconds, minutes, hours and days are used below one (365.25-day) year. Beyond that the
        year count is scaled by thousands up to "Trillion"; larger values stay in trillions.
        """
        if seconds < SECONDS_PER_MINUTE:
            return f"{seconds:.2f} Seconds"
        if seconds < SECONDS_PER_HOUR:
            return f"{seconds / SECONDS_PER_MINUTE:.2f} Minutes"
        if seconds < SECONDS_PER_DAY:
            return f"{seconds / SECONDS_PER_HOUR:.2f} Hours"
        if seconds < SECONDS_PER_YEAR:
            return f"{seconds / SECONDS_PER_DAY:.2f} Days"

        years = seconds / SECONDS_PER_YEAR
        idx = 0
        while years >= 1000 and idx < len(YEAR_UNITS) - 1:
            years /= 1000
            idx += 1

        unit = YEAR_UNITS[idx]
        if not unit:
            return f"{years:.2f} Years"
        return f"{years:.2f} {unit} Years"


# =========================
#     STRENGTH TIERS
# =========================

@dataclass(frozen=True)
class StrengthTier:
    level: int
    label: str
    color: str


STRENGTH_TIERS: Tuple[StrengthTier, ...] = (
    StrengthTier(0, "Very Weak", "#A10702"),
    StrengthTier(1, "Weak", "#F3A712"),
    StrengthTier(2, "Reasonable", "#8CD867"),
    StrengthTier(3, "Strong", "#04E762"),
    StrengthTier(4, "Very Strong", "#0C7489"),
)

# Upper bounds (exclusive) for tiers 0..3; anything above is tier 4.
TIER_THRESHOLDS: Tuple[float, ...] = (28, 36, 60, 128)


class PasswordStrength:
    def __init__(self, tiers: Sequence[StrengthTier] = STRENGTH_TIERS) -> None:
        if len(tiers) != len(TIER_THRESHOLDS) + 1:
            raise ValueError(
                f"Expected {len(TIER_THRESHOLDS) + 1} strength tiers, got {len(tiers)}."
            )
        for idx, tier in enumerate(tiers):
            if tier.level != idx:
                raise ValueError(f"Strength tier at position {idx} has level {tier.level}.")
        self.tiers = tuple(tiers)

    @staticmethod
    def determine(entropy_bits: float) -> int:
        for level, upper in enumerate(TIER_THRESHOLDS):
            if entropy_bits < upper:
                return level
        return len(TIER_THRESHOLDS)

    def get_color_and_text(self, entropy_bits: float) -> StrengthTier:
        return self.tiers[self.determine(entropy_bits)]


# =========================
#   SNAPSHOTS / ENGINE
# =========================

@dataclass(frozen=True)
class PasswordRequest:
    length: int
    classes: Tuple[CharacterClass, ...]

    @classmethod
    def from_flags(
        cls,
        length: int,
        lowercase: bool = True,
        uppercase: bool = True,
        digits: bool = True,
        symbols: bool = True,
    ) -> "PasswordRequest":
        flags = (
            (CharacterClass.LOWERCASE, lowercase),
            (CharacterClass.UPPERCASE, uppercase),
            (CharacterClass.DIGIT, digits),
            (CharacterClass.SYMBOL, symbols),
        )
        return cls(length=length, classes=tuple(c for c, enabled in flags if enabled))


@dataclass(frozen=True)
class PasswordReport:
    password: str
    stats: PasswordStats
    entropy_display: str
    crack_time_display: str
    tier: StrengthTier

    @property
    def strength_label(self) -> str:
        return self.tier.label

    @property
    def strength_color(self) -> str:
        return self.tier.color


class PasswordEngine:
    """
    One full recomputation pass: generate, estimate, format, classify.

    Holds no state between calls apart from its (read-only) collaborators, so a request can be
    recomputed at any time, e.g. on every slider move.
    """

    def __init__(
        self,
        generator: Optional[PasswordGenerator] = None,
        estimator: Optional[StrengthEstimator] = None,
        strength: Optional[PasswordStrength] = None,
    ) -> None:
        self.generator = generator if generator is not None else PasswordGenerator()
        self.estimator = estimator if estimator is not None else StrengthEstimator()
        self.strength = strength if strength is not None else PasswordStrength()

    def compute(self, request: PasswordRequest) -> PasswordReport:
        """Entropy is displayed rounded with Python's round (half to even)."""
        password = self.generator.generate(request.classes, request.length)
        stats = self.estimator.calculate(password)
        tier = self.strength.get_color_and_text(stats.entropy_bits)

        logger.debug(
            "Computed password: length=%d, entropy=%.2f bits, tier=%s",
            len(password),
            stats.entropy_bits,
            tier.label,
        )

        return PasswordReport(
            password=password,
            stats=stats,
            entropy_display=f"~ {round(stats.entropy_bits)} Bits",
            crack_time_display=CrackTimeFormatter.format(stats.crack_time_seconds),
            tier=tier,
        )
