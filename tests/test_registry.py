import pytest

from jwtkit import (
    SigningMethodRegistry,
    UnrecognizedAlgorithmError,
    available_signing_methods,
    lookup_signing_method,
)
from jwtkit.signing import ES256, HS256, HS512, RS256, SigningMethod


def test_default_registry_has_builtin_methods():
    names = available_signing_methods()
    for name in ["HS256", "HS384", "HS512", "RS256", "RS384", "RS512", "ES256", "ES384", "ES512"]:
        assert name in names
    assert names == sorted(names)
    assert lookup_signing_method("HS256") is HS256
    assert lookup_signing_method("RS256") is RS256
    assert lookup_signing_method("ES256") is ES256


def test_lookup_unknown_name_fails():
    registry = SigningMethodRegistry()
    with pytest.raises(UnrecognizedAlgorithmError) as exc:
        registry.lookup("none")
    assert "none" in str(exc.value)


def test_lookup_is_exact_match():
    registry = SigningMethodRegistry()
    registry.register("HS256", HS256)
    with pytest.raises(UnrecognizedAlgorithmError):
        registry.lookup("hs256")


def test_register_last_writer_wins():
    registry = SigningMethodRegistry()
    registry.register("HS256", HS256)
    registry.register("HS256", HS512)
    assert registry.lookup("HS256") is HS512
    assert len(registry) == 1


def test_independent_registries_do_not_share_state():
    registry = SigningMethodRegistry()
    registry.register("CUSTOM", HS256)
    assert "CUSTOM" in registry
    assert "CUSTOM" not in available_signing_methods()
    assert "HS256" not in registry


def test_builtin_methods_satisfy_signing_method_protocol():
    for method in (HS256, RS256, ES256):
        assert isinstance(method, SigningMethod)
