import json

import pytest

from jwtkit import (
    ExpiredTokenError,
    KeyResolutionError,
    MalformedTokenError,
    SegmentDecodingError,
    SignatureInvalidError,
    SigningMethodRegistry,
    UnrecognizedAlgorithmError,
    UnspecifiedAlgorithmError,
    ValidationFlag,
    encode_segment,
    new_token,
    parse,
    static_key,
)
from jwtkit.signing import HS256, HS512

NOW = 1_700_000_000
KEY = b"secret"


def _sign(claims, method=HS256, key=KEY):
    token = new_token(method)
    token.claims.update(claims)
    return token.signed_string(key)


def _raw_token(header, claims, signature="c2ln"):
    header_segment = encode_segment(json.dumps(header).encode("utf-8"))
    claims_segment = encode_segment(json.dumps(claims).encode("utf-8"))
    return f"{header_segment}.{claims_segment}.{signature}"


def test_example_scenario_with_correct_key():
    signed = _sign({"sub": "1234567890", "name": "J Doe"})

    token = parse(signed, static_key(b"secret"), now=NOW)

    assert token.valid is True
    assert token.header == {"typ": "JWT", "alg": "HS256"}
    assert token.claims == {"sub": "1234567890", "name": "J Doe"}
    assert token.method is HS256
    assert token.signature == signed.split(".")[2]


def test_example_scenario_with_wrong_key():
    signed = _sign({"sub": "1234567890", "name": "J Doe"})

    with pytest.raises(SignatureInvalidError) as exc:
        parse(signed, static_key(b"wrong"), now=NOW)

    assert exc.value.token is not None
    assert exc.value.token.valid is False
    assert exc.value.flags == ValidationFlag.SIGNATURE_INVALID
    assert exc.value.expired is False


def test_roundtrip_preserves_json_compatible_claims():
    claims = {
        "sub": "user-1",
        "count": 3,
        "ratio": 0.25,
        "admin": False,
        "nothing": None,
        "roles": ["a", "b"],
        "profile": {"name": "Zoë", "tags": [1, 2]},
    }
    token = parse(_sign(claims), static_key(KEY), now=NOW)
    assert token.valid is True
    assert token.claims == claims


def test_any_single_character_change_in_signature_is_rejected():
    signed = _sign({"sub": "1234567890"})
    signing_string, signature = signed.rsplit(".", 1)

    for index, char in enumerate(signature):
        replacement = "A" if char != "A" else "B"
        tampered = signature[:index] + replacement + signature[index + 1 :]
        with pytest.raises(SignatureInvalidError):
            parse(f"{signing_string}.{tampered}", static_key(KEY), now=NOW)


def test_tampered_claims_are_rejected():
    signed = _sign({"sub": "user-1"})
    header_segment, _, signature = signed.split(".")
    forged_claims = encode_segment(b'{"sub":"admin"}')
    with pytest.raises(SignatureInvalidError):
        parse(f"{header_segment}.{forged_claims}.{signature}", static_key(KEY), now=NOW)


@pytest.mark.parametrize("alg", ["none", "HS999", "hs256"])
def test_unregistered_algorithm_is_rejected(alg):
    raw = _raw_token({"typ": "JWT", "alg": alg}, {"sub": "user-1"})
    resolver_calls = []

    with pytest.raises(UnrecognizedAlgorithmError) as exc:
        parse(raw, lambda token: resolver_calls.append(token) or KEY, now=NOW)

    assert resolver_calls == []
    assert exc.value.token.header.get_string("alg") == alg


def test_algorithm_missing_from_isolated_registry_is_rejected():
    registry = SigningMethodRegistry()
    registry.register("HS256", HS256)
    signed = _sign({"sub": "user-1"}, method=HS512)

    with pytest.raises(UnrecognizedAlgorithmError):
        parse(signed, static_key(KEY), registry=registry, now=NOW)
    assert parse(_sign({"sub": "user-1"}), static_key(KEY), registry=registry, now=NOW).valid


@pytest.mark.parametrize("header", [{"typ": "JWT"}, {"typ": "JWT", "alg": 256}, {"typ": "JWT", "alg": None}])
def test_missing_or_non_string_alg_is_unspecified(header):
    with pytest.raises(UnspecifiedAlgorithmError) as exc:
        parse(_raw_token(header, {}), static_key(KEY), now=NOW)
    assert exc.value.token is not None
    assert exc.value.token.method is None


def test_token_expired_one_second_ago_is_rejected():
    signed = _sign({"sub": "user-1", "exp": NOW - 1})

    with pytest.raises(ExpiredTokenError) as exc:
        parse(signed, static_key(KEY), now=NOW)

    assert exc.value.expired is True
    assert exc.value.signature_invalid is False
    assert exc.value.token.valid is False
    assert exc.value.token.claims["sub"] == "user-1"


def test_token_expiring_in_an_hour_is_valid():
    token = parse(_sign({"sub": "user-1", "exp": NOW + 3600}), static_key(KEY), now=NOW)
    assert token.valid is True


def test_exp_equal_to_now_is_still_valid():
    token = parse(_sign({"exp": NOW}), static_key(KEY), now=NOW)
    assert token.valid is True


def test_non_numeric_exp_is_ignored():
    token = parse(_sign({"exp": "tomorrow"}), static_key(KEY), now=NOW)
    assert token.valid is True


def test_expired_token_is_still_verified():
    signed = _sign({"exp": NOW - 1})
    resolved = []

    def resolver(token):
        resolved.append(token)
        return b"wrong"

    with pytest.raises(SignatureInvalidError) as exc:
        parse(signed, resolver, now=NOW)

    assert len(resolved) == 1
    assert exc.value.flags == ValidationFlag.EXPIRED | ValidationFlag.SIGNATURE_INVALID
    assert exc.value.expired is True
    assert "expired" in str(exc.value)


@pytest.mark.parametrize("raw", ["!!!", "!!!.???", "a.b.c.d", "a..c", "a.b.", ""])
def test_wrong_segment_count_is_rejected_before_decoding(raw):
    with pytest.raises(MalformedTokenError) as exc:
        parse(raw, static_key(KEY), now=NOW)
    assert exc.value.token is None


def test_undecodable_header_is_rejected():
    with pytest.raises(SegmentDecodingError) as exc:
        parse("!!!.e30.c2ln", static_key(KEY), now=NOW)
    assert "header" in str(exc.value)


def test_header_must_be_a_json_object():
    raw = f"{encode_segment(b'[1, 2]')}.e30.c2ln"
    with pytest.raises(SegmentDecodingError) as exc:
        parse(raw, static_key(KEY), now=NOW)
    assert "header" in str(exc.value)


def test_claims_must_be_json():
    header_segment = encode_segment(b'{"alg":"HS256","typ":"JWT"}')
    raw = f"{header_segment}.{encode_segment(b'not json')}.c2ln"
    with pytest.raises(SegmentDecodingError) as exc:
        parse(raw, static_key(KEY), now=NOW)
    assert "claims" in str(exc.value)


def test_key_resolver_sees_partially_parsed_token():
    seen = {}

    def resolver(token):
        seen["method"] = token.method
        seen["sub"] = token.claims.get_string("sub")
        seen["valid"] = token.valid
        return KEY

    parse(_sign({"sub": "user-1"}), resolver, now=NOW)

    assert seen == {"method": HS256, "sub": "user-1", "valid": False}


def test_key_resolver_errors_propagate_unchanged():
    class KeyStoreDown(RuntimeError):
        pass

    def resolver(token):
        raise KeyStoreDown("key store unavailable")

    with pytest.raises(KeyStoreDown):
        parse(_sign({"sub": "user-1"}), resolver, now=NOW)


def test_key_resolution_error_is_not_wrapped():
    error = KeyResolutionError("no key for tenant")

    def resolver(token):
        raise error

    with pytest.raises(KeyResolutionError) as exc:
        parse(_sign({"sub": "user-1"}), resolver, now=NOW)
    assert exc.value is error


def test_parse_uses_current_time_by_default():
    with pytest.raises(ExpiredTokenError):
        parse(_sign({"exp": 1}), static_key(KEY))


def test_non_standard_json_constants_are_rejected():
    header_segment = encode_segment(b'{"alg":"HS256","typ":"JWT"}')
    claims_segment = encode_segment(b'{"exp":NaN}')
    raw = f"{header_segment}.{claims_segment}.c2ln"
    with pytest.raises(SegmentDecodingError) as exc:
        parse(raw, static_key(KEY), now=NOW)
    assert "claims" in str(exc.value)


def _signed_with_raw_claims(raw_claims):
    header_segment = encode_segment(b'{"alg":"HS256","typ":"JWT"}')
    signing_string = f"{header_segment}.{encode_segment(raw_claims)}"
    return f"{signing_string}.{HS256.sign(signing_string, KEY)}"


def test_infinite_exp_never_expires():
    token = parse(_signed_with_raw_claims(b'{"exp":1e400}'), static_key(KEY), now=NOW)
    assert token.valid is True


def test_negative_infinite_exp_is_expired():
    with pytest.raises(ExpiredTokenError):
        parse(_signed_with_raw_claims(b'{"exp":-1e400}'), static_key(KEY), now=NOW)


class _BrokenMethod:
    algorithm_id = "BROKEN"

    def sign(self, signing_string, key):
        return "c2ln"

    def verify(self, signing_string, signature, key):
        raise ValueError("backend failure")


def test_unexpected_verify_errors_are_signature_failures():
    registry = SigningMethodRegistry()
    registry.register("BROKEN", _BrokenMethod())
    token = new_token(_BrokenMethod())
    token.claims["exp"] = NOW - 1
    signed = token.signed_string(KEY)

    with pytest.raises(SignatureInvalidError) as exc:
        parse(signed, static_key(KEY), registry=registry, now=NOW)

    assert exc.value.expired is True
    assert isinstance(exc.value.__cause__, ValueError)
