import string

from pytest import mark, raises

from flowerpassword.crypto import flowerify, fp_code, hmac_md5
from flowerpassword.exceptions import InvalidLength


def test_hmac_md5():
    # RFC 2104 test vector
    expected = '750c783e6ab0b503eaa86e310a5db738'
    assert hmac_md5('what do ya want for nothing?', 'Jefe') == expected


def test_hmac_md5_bytes():
    assert hmac_md5(b'what do ya want for nothing?', b'Jefe') == hmac_md5(
        'what do ya want for nothing?', 'Jefe'
    )


def test_hmac_md5_empty_key():
    assert hmac_md5('', '') == 'd41d8cd98f00b204e9800998ecf8427e'
    assert hmac_md5('password', '') == '5f4dcc3b5aa765d61d8327deb882cf99'


def test_flowerify():
    assert flowerify('0' * 32, 'a' * 32, 4) == 'AAAA'
    assert flowerify('3' * 32, 'a' * 32, 4) == 'aaaa'
    assert flowerify('0' * 32, '1' + 'b' * 31, 3) == 'KBB'
    assert flowerify('f' * 32, 'c' + '2' * 31, 5) == 'c2222'


def test_fp_code():
    # these values are taken from the JavaScript implementation
    assert fp_code('password', 'key', 16) == 'K3A2a66Bf88b628c'
    assert fp_code('test', 'github.com', 16) == 'D04175F7A9c7Ab4a'
    assert fp_code('mypassword', 'example.com', 12) == 'K0CA12CecFFB'
    assert fp_code('secret', 'google.com', 16) == 'Kc6813f75AAa6Bd1'
    assert fp_code('test', 'example.com', 16) == 'B0399e643E07a2EA'
    assert fp_code('mypass', 'github.com', 16) == 'K5817EB58CE4512F'
    assert fp_code('12345', 'site', 16) == 'K05a62bfea0C1553'


def test_fp_code_default_length():
    assert fp_code('password', 'key') == 'K3A2a66Bf88b628c'


def test_fp_code_all_lengths():
    full = 'K3A2a66Bf88b628c2Cd7cDA9958f6b26'

    for length in range(2, 33):
        assert fp_code('password', 'key', length) == full[:length]


def test_fp_code_edge_cases():
    assert fp_code('', 'key', 16) == 'K46eB52c968caeAa'
    assert fp_code('password', '', 16) == 'eB3b1cA3D6B54c00'
    assert fp_code('', '', 16) == 'K930B0264e62DDFC'
    assert fp_code('p@ssw0rd!#$%', 'key', 16) == 'D4e5c2BE16F71498'
    assert fp_code('password', 'user@example.com', 16) == 'K98076292B62A974'
    assert fp_code('密码', '网站.com', 16) == 'KFF7FEa7928bAAAa'
    assert fp_code('a' * 1000, 'key', 16) == 'K2775CF7c646a718'
    assert fp_code('password', 'b' * 1000, 16) == 'K77E3F873Aa8a01f'


def test_fp_code_bytes():
    assert fp_code(b'password', b'key', 16) == 'K3A2a66Bf88b628c'
    assert fp_code('密码'.encode(), '网站.com'.encode(), 16) == 'KFF7FEa7928bAAAa'


def test_fp_code_deterministic():
    assert fp_code('password', 'key', 32) == fp_code('password', 'key', 32)


def test_fp_code_sensitivity():
    assert fp_code('password1', 'key', 16) != fp_code('password2', 'key', 16)
    assert fp_code('password', 'key1', 16) != fp_code('password', 'key2', 16)


def test_fp_code_characters():
    for i in range(100):
        password = fp_code('test', f'site{i}.com', 32)
        assert len(password) == 32
        assert password[0] in string.ascii_letters
        assert all(c in string.ascii_letters + string.digits for c in password)

        for length in range(2, 32):
            assert fp_code('test', f'site{i}.com', length) == password[:length]


def test_fp_code_mixed_case():
    password = fp_code('password', 'key', 32)
    assert any(c in string.ascii_uppercase for c in password)
    assert any(c in string.ascii_lowercase for c in password)


@mark.parametrize('length', [-1, 0, 1, 33, 100])
def test_fp_code_invalid_length(length):
    with raises(InvalidLength) as e:
        fp_code('password', 'key', length)

    assert e.value.length == length
    assert str(e.value) == f'Length must be between 2 and 32, got: {length}'


def test_fp_code_invalid_length_does_not_hash(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError('hmac_md5 should not be called')

    monkeypatch.setattr('flowerpassword.crypto.hmac_md5', fail)

    with raises(InvalidLength):
        fp_code('x', 'y', 33)
