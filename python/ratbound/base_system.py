# RatBound SDK - Base Systems
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""
Digit alphabets for positional number systems.

A :class:`BaseSystem` maps an ordered set of characters to the digit
values ``0 .. base-1``. A :class:`PrefixRegistry` maps single-letter
prefixes (as in ``0x1f``) to base systems.

Example:
    >>> from ratbound.base_system import HEXADECIMAL, BaseSystem
    >>> HEXADECIMAL.from_decimal(255)
    'ff'
    >>> BaseSystem.get_system_for_prefix('b').base
    2
"""

from __future__ import annotations
import logging
import string
import threading
from typing import TYPE_CHECKING, Iterable, Optional, Union

from .exceptions import InvalidCharacter, InvalidFormat, OutOfRange

if TYPE_CHECKING:
    from .integer import Integer


logger = logging.getLogger(__name__)

RESERVED_SYMBOLS = frozenset('+-*/^!()[]:.#~')

ALPHANUMERIC = string.digits + string.ascii_lowercase + string.ascii_uppercase

# Ranges checked for contiguity on alphabets of 10 or more characters
_ORDERED_RANGES = (
    ('0', '9', 'digits'),
    ('a', 'z', 'lowercase letters'),
    ('A', 'Z', 'uppercase letters'),
)

_ROMAN_NAME = 'Roman Numerals'


class BaseSystem:
    """
    An ordered digit alphabet defining a positional base.

    Instances are immutable. Two systems are equal when they have the same
    characters in the same order; the name is only a label.
    """

    __slots__ = ('_characters', '_char_map', '_name')

    def __init__(self, characters: Union[str, Iterable[str]], name: Optional[str] = None):
        """
        Create a base system.

        Args:
            characters: The digits in value order, as a string or a
                        sequence of single-character strings.
            name: Display name, defaults to ``"Base <n>"``.

        Raises:
            InvalidFormat: If the alphabet is too short, contains duplicates,
                           multi-character entries or reserved symbols.
        """
        if isinstance(characters, str):
            chars = tuple(characters)
        else:
            try:
                chars = tuple(characters)
            except TypeError:
                raise InvalidFormat("Characters must be a string or a sequence of strings")
        for char in chars:
            if not isinstance(char, str) or len(char) != 1:
                raise InvalidFormat(f"Digit {char!r} must be a single character")
        if len(chars) < 2:
            raise InvalidFormat("Base system must have at least 2 characters")
        if len(set(chars)) != len(chars):
            raise InvalidFormat("Character set contains duplicate characters")

        conflicts = [c for c in chars if c in RESERVED_SYMBOLS]
        if conflicts:
            raise InvalidFormat(
                f"Base system characters conflict with parser symbols: {', '.join(conflicts)}. "
                f"Reserved symbols are: {' '.join(sorted(RESERVED_SYMBOLS))}"
            )

        self._characters = chars
        self._char_map = {c: i for i, c in enumerate(chars)}
        self._name = name or f"Base {len(chars)}"

        self._check_ordering()
        if len(chars) > 1000:
            logger.warning("Very large base system (%d). This may impact performance.", len(chars))

    def _check_ordering(self) -> None:
        if self._name == _ROMAN_NAME or len(self._characters) < 10:
            return
        for start, end, label in _ORDERED_RANGES:
            lo, hi = ord(start), ord(end)
            in_range = [ord(c) for c in self._characters if lo <= ord(c) <= hi]
            if len(in_range) >= 5 and len(in_range) > (hi - lo) / 3:
                if any(b != a + 1 for a, b in zip(in_range, in_range[1:])):
                    logger.warning("Non-contiguous %s range detected in %s", label, self._name)

    @property
    def base(self) -> int:
        return len(self._characters)

    @property
    def characters(self) -> tuple[str, ...]:
        return self._characters

    @property
    def char_map(self) -> dict[str, int]:
        """Copy of the character to digit value map."""
        return dict(self._char_map)

    @property
    def name(self) -> str:
        return self._name

    def get_char(self, index: int) -> str:
        """Return the digit character for value ``index``."""
        if index < 0 or index >= self.base:
            raise OutOfRange(f"Value {index} is out of range for base {self.base}")
        return self._characters[index]

    def get_min_digit(self) -> str:
        return self._characters[0]

    def get_max_digit(self) -> str:
        return self._characters[-1]

    def digit_value(self, char: str) -> int:
        """Return the value of a single digit character."""
        try:
            return self._char_map[char]
        except KeyError:
            raise InvalidCharacter(char, f"{self._name} (base {self.base})")

    def to_decimal(self, text: str) -> Integer:
        """
        Parse a digit string in this base.

        Raises:
            InvalidFormat: If the string is empty.
            InvalidCharacter: If a character is not part of the alphabet.
        """
        from .integer import Integer

        if not isinstance(text, str) or not text:
            raise InvalidFormat("Input must be a non-empty string")
        negative = text.startswith('-')
        digits = text[1:] if negative else text
        if not digits:
            raise InvalidFormat("Input must contain at least one digit")
        result = 0
        base = self.base
        for char in digits:
            result = result * base + self.digit_value(char)
        return Integer(-result if negative else result)

    def from_decimal(self, value: Union[Integer, int]) -> str:
        """Render an integer in this base."""
        n = int(value)
        if n == 0:
            return self._characters[0]
        negative = n < 0
        n = abs(n)
        base = self.base
        digits = []
        while n > 0:
            n, remainder = divmod(n, base)
            digits.append(self._characters[remainder])
        result = ''.join(reversed(digits))
        return '-' + result if negative else result

    def is_valid_string(self, text: str) -> bool:
        if not isinstance(text, str):
            return False
        if text.startswith('-'):
            text = text[1:]
        return bool(text) and all(c in self._char_map for c in text)

    def with_case_sensitivity(self, case_sensitive: bool) -> BaseSystem:
        """Return this system, or a lowercased copy when not case sensitive."""
        if not isinstance(case_sensitive, bool):
            raise InvalidFormat("case_sensitive must be a boolean value")
        if case_sensitive:
            return self
        lowered = [c.lower() for c in self._characters]
        unique = list(dict.fromkeys(lowered))
        if len(unique) != len(lowered):
            logger.warning("Case-insensitive conversion resulted in duplicate characters")
        return BaseSystem(unique, f"{self._name} (case-insensitive)")

    @classmethod
    def from_base(cls, base: int, name: Optional[str] = None) -> BaseSystem:
        """Standard ``0-9a-zA-Z`` alphabet for 2 <= base <= 62."""
        if not isinstance(base, int) or base < 2:
            raise InvalidFormat("Base must be an integer >= 2")
        if base > len(ALPHANUMERIC):
            raise InvalidFormat(
                "from_base() only supports bases up to 62. "
                "Use the constructor with a custom character sequence for larger bases."
            )
        return cls(ALPHANUMERIC[:base], name or f"Base {base}")

    @classmethod
    def create_pattern(cls, pattern: str, size: int, name: Optional[str] = None) -> BaseSystem:
        """
        Build an alphabet from a named pattern.

        Supported patterns: ``alphanumeric``, ``digits-only``,
        ``letters-only`` and ``uppercase-only``.
        """
        kind = pattern.lower()
        if kind == 'alphanumeric':
            if size > 62:
                raise InvalidFormat(f"Alphanumeric pattern only supports up to base 62, got {size}")
            return cls.from_base(size, name)
        if kind == 'digits-only':
            if size > 10:
                raise InvalidFormat(f"Digits-only pattern only supports up to base 10, got {size}")
            return cls(string.digits[:size], name or f"Base {size} (digits only)")
        if kind == 'letters-only':
            if size > 52:
                raise InvalidFormat(f"Letters-only pattern only supports up to base 52, got {size}")
            letters = string.ascii_lowercase + string.ascii_uppercase
            label = 'lowercase letters' if size <= 26 else 'mixed case letters'
            return cls(letters[:size], name or f"Base {size} ({label})")
        if kind == 'uppercase-only':
            if size > 26:
                raise InvalidFormat(f"Uppercase-only pattern only supports up to base 26, got {size}")
            return cls(string.ascii_uppercase[:size], name or f"Base {size} (uppercase letters)")
        raise InvalidFormat(
            f"Unknown pattern: {pattern}. "
            "Supported patterns: alphanumeric, digits-only, letters-only, uppercase-only"
        )

    # Prefix registry shortcuts operating on the default registry

    @staticmethod
    def register_prefix(prefix: str, system: BaseSystem) -> None:
        prefix_registry.register(prefix, system)

    @staticmethod
    def unregister_prefix(prefix: str) -> None:
        prefix_registry.unregister(prefix)

    @staticmethod
    def get_system_for_prefix(prefix: str) -> Optional[BaseSystem]:
        return prefix_registry.system_for(prefix)

    @staticmethod
    def get_prefix_for_system(system: BaseSystem) -> Optional[str]:
        return prefix_registry.prefix_for(system)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseSystem):
            return NotImplemented
        return self._characters == other._characters

    def __hash__(self) -> int:
        return hash(self._characters)

    def __str__(self) -> str:
        chars = self._characters
        if len(chars) <= 20:
            preview = ''.join(chars)
        else:
            preview = ''.join(chars[:10]) + '...' + ''.join(chars[-10:])
        return f"{self._name} ({preview})"

    def __repr__(self) -> str:
        return f"BaseSystem({''.join(self._characters)!r}, name={self._name!r})"


class PrefixRegistry:
    """
    Mapping of single-letter number prefixes to base systems.

    Lookups try the exact letter first and then the other case. The
    uppercase ``D`` is reserved and never resolves.
    """

    RESERVED = frozenset('D')

    def __init__(self, entries: Optional[dict[str, BaseSystem]] = None):
        self._lock = threading.Lock()
        self._systems: dict[str, BaseSystem] = {}
        for prefix, system in (entries or {}).items():
            self.register(prefix, system)

    @classmethod
    def with_defaults(cls) -> PrefixRegistry:
        """Registry holding the ``x``, ``b``, ``o`` and ``d`` prefixes."""
        return cls({
            'x': HEXADECIMAL,
            'b': BINARY,
            'o': OCTAL,
            'd': DECIMAL,
        })

    def register(self, prefix: str, system: BaseSystem) -> None:
        """
        Associate ``prefix`` with ``system``.

        Raises:
            InvalidFormat: If the prefix is not one ASCII letter, is reserved,
                           or the system is not a BaseSystem.
        """
        if not isinstance(prefix, str) or len(prefix) != 1:
            raise InvalidFormat("Prefix must be a single character")
        if prefix not in string.ascii_letters:
            raise InvalidFormat("Prefix must be a letter")
        if prefix in self.RESERVED:
            raise InvalidFormat(f"Prefix '{prefix}' is reserved")
        if not isinstance(system, BaseSystem):
            raise InvalidFormat("Must provide a valid BaseSystem")
        with self._lock:
            self._systems[prefix] = system

    def unregister(self, prefix: str) -> None:
        with self._lock:
            self._systems.pop(prefix, None)

    def system_for(self, prefix: str) -> Optional[BaseSystem]:
        """Resolve a prefix, falling back to the other letter case."""
        if prefix in self.RESERVED:
            return None
        with self._lock:
            system = self._systems.get(prefix)
            if system is None and isinstance(prefix, str):
                system = self._systems.get(prefix.swapcase())
        return system

    def prefix_for(self, system: BaseSystem) -> Optional[str]:
        with self._lock:
            for prefix, candidate in self._systems.items():
                if candidate == system:
                    return prefix
        return None

    def prefixes(self) -> list[str]:
        with self._lock:
            return list(self._systems)

    def __contains__(self, prefix: str) -> bool:
        return self.system_for(prefix) is not None


BINARY = BaseSystem('01', 'Binary')
OCTAL = BaseSystem('01234567', 'Octal')
DECIMAL = BaseSystem(string.digits, 'Decimal')
HEXADECIMAL = BaseSystem(string.digits + 'abcdef', 'Hexadecimal')
BASE36 = BaseSystem(ALPHANUMERIC[:36], 'Base 36')
BASE60 = BaseSystem(ALPHANUMERIC[:60], 'Base 60 (Sexagesimal)')
BASE62 = BaseSystem(ALPHANUMERIC, 'Base 62')
ROMAN = BaseSystem('IVXLCDM', _ROMAN_NAME)

BaseSystem.BINARY = BINARY
BaseSystem.OCTAL = OCTAL
BaseSystem.DECIMAL = DECIMAL
BaseSystem.HEXADECIMAL = HEXADECIMAL
BaseSystem.BASE36 = BASE36
BaseSystem.BASE60 = BASE60
BaseSystem.BASE62 = BASE62
BaseSystem.ROMAN = ROMAN

# Process-wide registry used by the BaseSystem prefix helpers
prefix_registry = PrefixRegistry.with_defaults()
