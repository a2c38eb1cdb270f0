"""
Tests for ComponentVerifier dispatch, parameter checks and summaries.
"""

import logging

import pytest

from component_verifier import (
    ComponentVerifier,
    OptionsGroup,
    ResultBuilder,
    ResultErrorBuilder,
    Scope,
    StandardAttribute,
    StandardCode,
    Status,
    UnknownScopeError,
    format_error,
    format_result_summary,
    requires_any,
    requires_option,
    requires_options,
    result_summary,
)


class HttpLikeVerifier(ComponentVerifier):
    """Verifier with both scopes, answering connectivity from a fake status."""

    def __init__(self, http_status: int = 200):
        super().__init__(name="http-like")
        self.http_status = http_status

    def verify_parameters(self, parameters):
        return (
            ResultBuilder.with_scope(Scope.PARAMETERS)
            .errors(requires_options(parameters, ["url", "username"]))
            .build()
        )

    def verify_connectivity(self, parameters):
        builder = ResultBuilder.with_scope(Scope.CONNECTIVITY)
        if self.http_status >= 300:
            builder.error(ResultErrorBuilder.with_http_code(self.http_status).build())
        return builder.build()


class ParametersOnlyVerifier(ComponentVerifier):
    def verify_parameters(self, parameters):
        return ResultBuilder.with_scope(Scope.PARAMETERS).build()


class ExplodingVerifier(ComponentVerifier):
    def verify_parameters(self, parameters):
        raise RuntimeError("catalog unavailable")


class MutatingVerifier(ComponentVerifier):
    def verify_parameters(self, parameters):
        parameters["injected"] = True
        return ResultBuilder.with_scope(Scope.PARAMETERS).build()


class WrongScopeVerifier(ComponentVerifier):
    def verify_connectivity(self, parameters):
        return ResultBuilder.with_scope(Scope.PARAMETERS).build()


class TestComponentVerifier:
    """Test verify() dispatch and its guarantees."""

    def test_parameters_ok(self):
        result = HttpLikeVerifier().verify(Scope.PARAMETERS, {"url": "http://x", "username": "u"})
        assert result.status is Status.OK
        assert result.scope is Scope.PARAMETERS
        assert result.errors == ()

    def test_parameters_missing(self):
        result = HttpLikeVerifier().verify(Scope.PARAMETERS, {"url": "http://x"})
        assert result.status is Status.ERROR
        assert [e.code for e in result.errors] == [StandardCode.MISSING_PARAMETER]
        assert result.errors[0].parameter_keys == frozenset({"username"})

    def test_string_scope(self):
        result = HttpLikeVerifier().verify("connectivity", {})
        assert result.scope is Scope.CONNECTIVITY
        assert result.status is Status.OK

    def test_unknown_string_scope_propagates(self):
        with pytest.raises(UnknownScopeError):
            HttpLikeVerifier().verify("everything", {})

    def test_connectivity_http_error(self):
        result = HttpLikeVerifier(http_status=401).verify(Scope.CONNECTIVITY, {})
        assert result.status is Status.ERROR
        assert result.errors[0].code is StandardCode.AUTHENTICATION
        assert result.errors[0].details[StandardAttribute.HTTP_CODE] == 401

    def test_unimplemented_scope_is_unsupported(self):
        result = ParametersOnlyVerifier().verify(Scope.CONNECTIVITY, {})
        assert result.status is Status.UNSUPPORTED
        assert result.scope is Scope.CONNECTIVITY
        assert result.errors[0].code is StandardCode.UNSUPPORTED_SCOPE

    def test_base_verifier_supports_nothing(self):
        verifier = ComponentVerifier()
        for scope in Scope:
            assert verifier.verify(scope, {}).status is Status.UNSUPPORTED

    def test_hook_exception_becomes_error(self, caplog):
        with caplog.at_level(logging.WARNING, logger="component_verifier.verifier"):
            result = ExplodingVerifier(name="exploding").verify(Scope.PARAMETERS, {})

        assert result.status is Status.ERROR
        assert result.errors[0].code is StandardCode.EXCEPTION
        assert result.errors[0].description == "catalog unavailable"
        assert "exploding" in caplog.text

    def test_parameters_not_mutated(self):
        params = {"url": "http://x"}
        result = MutatingVerifier().verify(Scope.PARAMETERS, params)

        assert params == {"url": "http://x"}
        assert result.errors[0].code is StandardCode.EXCEPTION

    def test_result_scope_matches_request(self):
        result = WrongScopeVerifier().verify(Scope.CONNECTIVITY, {})
        assert result.scope is Scope.CONNECTIVITY

    def test_none_parameters(self):
        result = HttpLikeVerifier().verify(Scope.PARAMETERS, None)
        assert len(result.errors) == 2

    def test_default_name(self):
        assert ParametersOnlyVerifier().name == "ParametersOnlyVerifier"


class TestRequiresOption:
    """Test single-option presence checks."""

    @pytest.mark.parametrize("value", [None, "", "  ", [], {}])
    def test_empty_values_missing(self, value):
        error = requires_option({"token": value}, "token")
        assert error is not None
        assert error.code is StandardCode.MISSING_PARAMETER
        assert error.description == "token should be set"

    def test_absent_key_missing(self):
        assert requires_option({}, "token").parameter_keys == frozenset({"token"})

    @pytest.mark.parametrize("value", ["abc", 0, False, ["x"]])
    def test_present_values(self, value):
        assert requires_option({"token": value}, "token") is None


class TestRequiresAny:
    """Test options group checks."""

    def _groups(self):
        return [
            OptionsGroup.with_name("token").options(["token", "!username", "!password"]),
            OptionsGroup.with_name("basic").options(["username", "password", "!token"]),
        ]

    def test_group_satisfied(self):
        assert requires_any({"token": "t"}, self._groups()) == []
        assert requires_any({"username": "u", "password": "p"}, self._groups()) == []

    def test_no_group_satisfied(self):
        errors = requires_any({"username": "u"}, self._groups())

        assert len(errors) == 2
        assert all(e.code is StandardCode.ILLEGAL_PARAMETER_GROUP_COMBINATION for e in errors)
        assert errors[0].parameter_keys == frozenset({"token"})
        assert errors[0].details[StandardAttribute.GROUP_NAME] == "token"
        assert errors[0].details[StandardAttribute.GROUP_OPTIONS] == "token,username,password"
        assert errors[1].parameter_keys == frozenset({"password"})

    def test_excluded_option_present(self):
        errors = requires_any({"token": "t", "username": "u", "password": "p"}, self._groups())

        assert errors[0].parameter_keys == frozenset({"username", "password"})
        assert errors[1].parameter_keys == frozenset({"token"})

    def test_no_groups(self):
        assert requires_any({"a": 1}, []) == []

    def test_missing_required_reported_without_excluded(self):
        """Excluded options only count once the group's required options are all given."""
        groups = [OptionsGroup("basic", ["username", "password", "!token"])]
        errors = requires_any({"username": "u", "token": "t"}, groups)

        assert len(errors) == 1
        assert errors[0].parameter_keys == frozenset({"password"})

    def test_duplicate_options_ignored(self):
        group = OptionsGroup("g", ["a", "a", "!b"])
        assert group.parameter_names == ["a", "b"]
        assert group.required == {"a"}
        assert group.excluded == {"b"}


class TestSummary:
    """Test human-readable rendering."""

    def test_format_error(self):
        error = ResultErrorBuilder.with_missing_option("username").build()
        assert format_error(error) == "MISSING_PARAMETER: username should be set [username]"

    def test_format_error_without_code(self):
        assert format_error(ResultErrorBuilder().build()) == "UNKNOWN"

    def test_result_summary(self):
        result = (
            ResultBuilder.with_scope(Scope.CONNECTIVITY)
            .error(ResultErrorBuilder.with_http_code(401).build())
            .error(ResultErrorBuilder.with_missing_option("url").build())
            .build()
        )
        s = result_summary(result)

        assert s["status"] == "ERROR"
        assert s["error_count"] == 2
        assert s["codes"] == ["AUTHENTICATION", "MISSING_PARAMETER"]
        assert s["parameter_keys"] == ["url"]
        assert format_result_summary(result) == \
            "CONNECTIVITY: ERROR | 2 errors [AUTHENTICATION, MISSING_PARAMETER]"

    def test_ok_summary(self):
        result = ResultBuilder.with_scope(Scope.PARAMETERS).build()
        assert format_result_summary(result) == "PARAMETERS: OK"
