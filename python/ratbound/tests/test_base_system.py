# Tests for base systems and the prefix registry

import logging

import pytest

from ratbound.base_system import (
    BaseSystem,
    PrefixRegistry,
    BINARY,
    DECIMAL,
    HEXADECIMAL,
    OCTAL,
    ROMAN,
)
from ratbound.exceptions import InvalidCharacter, InvalidFormat, OutOfRange
from ratbound.integer import Integer


class TestConstruction:
    """Tests for alphabet validation."""

    def test_base_is_alphabet_length(self):
        assert BaseSystem('01234').base == 5
        assert HEXADECIMAL.base == 16

    def test_default_name(self):
        assert BaseSystem('012').name == 'Base 3'

    def test_accepts_sequence_of_characters(self):
        system = BaseSystem(['a', 'b', 'c'])
        assert system.characters == ('a', 'b', 'c')

    def test_too_short(self):
        with pytest.raises(InvalidFormat, match="at least 2"):
            BaseSystem('0')

    def test_duplicates(self):
        with pytest.raises(InvalidFormat, match="duplicate"):
            BaseSystem('0120')

    def test_multi_character_digit(self):
        with pytest.raises(InvalidFormat, match="single character"):
            BaseSystem(['0', '10'])

    def test_reserved_symbol(self):
        with pytest.raises(InvalidFormat, match="conflict"):
            BaseSystem('01#')

    def test_non_contiguous_range_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger='ratbound.base_system'):
            BaseSystem('0123456798')
        assert "Non-contiguous" in caplog.text

    def test_roman_is_not_checked(self, caplog):
        with caplog.at_level(logging.WARNING, logger='ratbound.base_system'):
            BaseSystem('IVXLCDM', 'Roman Numerals')
        assert caplog.text == ''


class TestConversion:
    """Tests for digit string conversion."""

    def test_hex_round_trip(self):
        assert HEXADECIMAL.from_decimal(255) == 'ff'
        assert HEXADECIMAL.to_decimal('ff') == Integer(255)

    def test_binary(self):
        assert BINARY.from_decimal(10) == '1010'
        assert BINARY.to_decimal('1010') == 10

    def test_zero(self):
        assert OCTAL.from_decimal(0) == '0'

    def test_negative(self):
        assert HEXADECIMAL.from_decimal(-26) == '-1a'
        assert HEXADECIMAL.to_decimal('-1a') == Integer(-26)

    def test_accepts_integer(self):
        assert DECIMAL.from_decimal(Integer(42)) == '42'

    def test_large_value(self):
        value = 2 ** 200 + 12345
        assert BaseSystem.BASE62.to_decimal(BaseSystem.BASE62.from_decimal(value)) == value

    def test_invalid_character(self):
        with pytest.raises(InvalidCharacter) as exc:
            BINARY.to_decimal('102')
        assert exc.value.character == '2'

    def test_empty_string(self):
        with pytest.raises(InvalidFormat):
            BINARY.to_decimal('')

    def test_lone_minus(self):
        with pytest.raises(InvalidFormat):
            BINARY.to_decimal('-')

    def test_is_valid_string(self):
        assert HEXADECIMAL.is_valid_string('-dead')
        assert not HEXADECIMAL.is_valid_string('xyz')
        assert not HEXADECIMAL.is_valid_string('')


class TestDigits:
    """Tests for single-digit access."""

    def test_get_char(self):
        assert HEXADECIMAL.get_char(10) == 'a'

    def test_get_char_out_of_range(self):
        with pytest.raises(OutOfRange):
            HEXADECIMAL.get_char(16)

    def test_min_max_digit(self):
        assert ROMAN.get_min_digit() == 'I'
        assert ROMAN.get_max_digit() == 'M'

    def test_char_map_is_a_copy(self):
        mapping = BINARY.char_map
        mapping['2'] = 2
        assert '2' not in BINARY.char_map


class TestFactories:
    """Tests for from_base, create_pattern and case folding."""

    def test_from_base(self):
        assert BaseSystem.from_base(16) == HEXADECIMAL

    def test_from_base_too_large(self):
        with pytest.raises(InvalidFormat, match="up to 62"):
            BaseSystem.from_base(63)

    def test_from_base_too_small(self):
        with pytest.raises(InvalidFormat):
            BaseSystem.from_base(1)

    def test_create_pattern_uppercase(self):
        system = BaseSystem.create_pattern('uppercase-only', 3)
        assert system.characters == ('A', 'B', 'C')

    def test_create_pattern_unknown(self):
        with pytest.raises(InvalidFormat, match="Unknown pattern"):
            BaseSystem.create_pattern('emoji', 4)

    def test_case_insensitive_copy(self):
        system = BaseSystem('0123456789ABCDEF', 'Upper hex')
        lowered = system.with_case_sensitivity(False)
        assert lowered == HEXADECIMAL
        assert system.with_case_sensitivity(True) is system

    def test_equality_ignores_name(self):
        assert BaseSystem('01', 'one') == BaseSystem('01', 'two')
        assert hash(BaseSystem('01', 'one')) == hash(BINARY)


class TestPrefixRegistry:
    """Tests for prefix registration and lookup."""

    def test_defaults(self):
        registry = PrefixRegistry.with_defaults()
        assert registry.system_for('x') == HEXADECIMAL
        assert registry.system_for('b') == BINARY
        assert registry.system_for('o') == OCTAL
        assert registry.system_for('d') == DECIMAL

    def test_case_fallback(self):
        registry = PrefixRegistry.with_defaults()
        assert registry.system_for('X') == HEXADECIMAL

    def test_reserved_uppercase_d(self):
        registry = PrefixRegistry.with_defaults()
        assert registry.system_for('D') is None
        with pytest.raises(InvalidFormat, match="reserved"):
            registry.register('D', DECIMAL)

    def test_register_and_unregister(self):
        registry = PrefixRegistry()
        registry.register('t', BaseSystem('012'))
        assert 't' in registry
        assert registry.prefix_for(BaseSystem('012')) == 't'
        registry.unregister('t')
        assert 't' not in registry

    def test_register_rejects_non_letters(self):
        registry = PrefixRegistry()
        with pytest.raises(InvalidFormat):
            registry.register('1', BINARY)
        with pytest.raises(InvalidFormat):
            registry.register('xy', BINARY)

    def test_static_helpers_use_default_registry(self):
        BaseSystem.register_prefix('q', BaseSystem('0123'))
        try:
            assert BaseSystem.get_system_for_prefix('q').base == 4
            assert BaseSystem.get_prefix_for_system(BaseSystem('0123')) == 'q'
        finally:
            BaseSystem.unregister_prefix('q')
        assert BaseSystem.get_system_for_prefix('q') is None
