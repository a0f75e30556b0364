import pytest

from apps.accounts.validators import (
    is_valid_name,
    is_valid_phone_number,
    is_valid_email,
    is_valid_password,
    is_valid_address,
)


class TestNameValidation:

    @pytest.mark.parametrize('name', ['Kim Min', '김민수', 'Jo', 'Anna Maria Lopez'])
    def test_valid_names(self, name):
        assert is_valid_name(name) is True

    @pytest.mark.parametrize('name', [
        '',
        'K',
        'Kim  Min',        # double space
        ' Kim',
        'Kim1',
        'Kim_Min',
        'A' * 21,
        None,
        123,
    ])
    def test_invalid_names(self, name):
        assert is_valid_name(name) is False


class TestPhoneNumberValidation:

    @pytest.mark.parametrize('phone', ['010-1234-5678', '01012345678', '011-123-4567'])
    def test_valid_phone_numbers(self, phone):
        assert is_valid_phone_number(phone) is True

    @pytest.mark.parametrize('phone', [
        '',
        '02-1234-5678',
        '010-12-5678',
        '010-1234-567',
        '010-1234-5678\n',
        'phone',
        None,
    ])
    def test_invalid_phone_numbers(self, phone):
        assert is_valid_phone_number(phone) is False


class TestEmailValidation:

    @pytest.mark.parametrize('email', [
        'a@b.com',
        'user.name+tag@example.co.kr',
    ])
    def test_valid_emails(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize('email', [
        '',
        'not-an-email',
        'a@',
        '@b.com',
        'a b@c.com',
        'a' * 250 + '@b.com',    # 256 chars
        None,
    ])
    def test_invalid_emails(self, email):
        assert is_valid_email(email) is False


class TestPasswordValidation:

    @pytest.mark.parametrize('password', [
        'Abcd1234!',
        'abcdefg1@',
        'A1!aaaaa',            # exactly 8
        'Abcdefghijk1234!',    # exactly 16
    ])
    def test_valid_passwords(self, password):
        assert is_valid_password(password) is True

    @pytest.mark.parametrize('password', [
        'Ab1!',                # too short
        'Abc123!',             # 7 chars
        'Abcdefghijk12345!',   # 17 chars
        'abcdefgh',            # letters only
        'abcd1234',            # no special
        '1234!@#$',            # no letter
        'abcd!@#$',            # no digit
        'Abcd 1234!',          # space not allowed
        'Ábcd1234!',           # non-ASCII letter
        '',
        None,
    ])
    def test_invalid_passwords(self, password):
        assert is_valid_password(password) is False


class TestAddressValidation:

    @pytest.mark.parametrize('address', [None, '', '12 Teheran-ro, Seoul', 'x' * 255])
    def test_valid_addresses(self, address):
        assert is_valid_address(address) is True

    @pytest.mark.parametrize('address', ['x' * 256, 42])
    def test_invalid_addresses(self, address):
        assert is_valid_address(address) is False
