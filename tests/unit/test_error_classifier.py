"""
Tests for Error Classification Module
"""

import errno
import pytest
from debuget.errors import Category, CATEGORY_HEADERS, classify, explain, header_for

from tests.mocks.mock_collaborators import CodedError, NamedError, ValidationError


class TestKindNameRules:
    """Rules matching on the error's kind name"""

    def test_syntax_error(self):
        assert classify({"name": "SyntaxError"}) == Category.SYNTAX

    def test_python_syntax_error(self):
        """Real SyntaxError from compile()"""
        try:
            compile("foo bar", "<test>", "exec")
        except SyntaxError as err:
            assert classify(err) == Category.SYNTAX

    def test_type_error_is_code(self):
        assert classify(TypeError("'NoneType' object is not callable")) == Category.CODE

    def test_name_error_is_code(self):
        """NameError plays the role of ReferenceError"""
        try:
            nonexistent_var  # noqa: F821
        except NameError as err:
            assert classify(err) == Category.CODE

    def test_reference_error_mapping(self):
        assert classify({"name": "ReferenceError"}) == Category.CODE

    def test_validation_error(self):
        assert classify(ValidationError("Test validation failed")) == Category.VALIDATION

    def test_validation_error_by_instance_name(self):
        err = NamedError("Test validation failed", name="ValidationError")
        assert classify(err) == Category.VALIDATION

    def test_jwt_errors(self):
        assert classify({"name": "JsonWebTokenError"}) == Category.JWT
        assert classify({"name": "TokenExpiredError"}) == Category.JWT

    def test_abort_error(self):
        assert classify({"name": "AbortError"}) == Category.ABORT

    def test_cancelled_error_is_abort(self):
        import asyncio
        assert classify(asyncio.CancelledError()) == Category.ABORT

    def test_exception_group_is_aggregate(self):
        group = ExceptionGroup("Multiple operations failed", [
            ValueError("first failure"), ValueError("second failure"),
        ])
        assert classify(group) == Category.AGGREGATE

    def test_kind_name_is_exact(self):
        """Kind-name rules need equality, not substring"""
        assert classify({"name": "MySyntaxErrorWrapper"}) == Category.DEFAULT


class TestResponseRule:
    """Nested HTTP response status"""

    def test_http_404(self):
        assert classify({"response": {"status": 404}}) == Category.HTTP

    def test_http_bounds(self):
        assert classify({"response": {"status": 400}}) == Category.HTTP
        assert classify({"response": {"status": 599}}) == Category.HTTP
        assert classify({"response": {"status": 399}}) == Category.DEFAULT
        assert classify({"response": {"status": 600}}) == Category.DEFAULT

    def test_http_overrides_code(self):
        err = {"code": "ERR_BAD_REQUEST", "response": {"status": 404}}
        assert classify(err) == Category.HTTP

    def test_http_beats_database_code(self):
        err = {"code": "ECONNREFUSED", "response": {"status": 502}}
        assert classify(err) == Category.HTTP

    def test_type_error_with_response_is_code(self):
        """Kind-name rules run before the response rule"""
        err = {"name": "TypeError", "response": {"status": 500}}
        assert classify(err) == Category.CODE

    def test_httpx_status_error(self):
        import httpx
        request = httpx.Request("GET", "https://example.test/missing")
        response = httpx.Response(404, request=request)
        err = httpx.HTTPStatusError("Not Found", request=request, response=response)
        assert classify(err) == Category.HTTP

    def test_top_level_status_is_not_http(self):
        """Only the nested response counts for the http category"""
        assert classify(CodedError("nope", status=404)) == Category.DEFAULT


class TestCodeRules:
    """Machine code patterns"""

    @pytest.mark.parametrize("code,expected", [
        ("ECONNREFUSED", Category.DATABASE),
        ("MongoServerError", Category.DATABASE),
        ("POSTGRES_DOWN", Category.DATABASE),
        ("ENOTFOUND", Category.NETWORK),
        ("ETIMEDOUT", Category.NETWORK),
        ("EHOSTUNREACH", Category.NETWORK),
        ("EACCES", Category.AUTH),
        ("EPERM", Category.AUTH),
        ("ENOENT", Category.FS),
        ("EEXIST", Category.FS),
        ("EISDIR", Category.FS),
        ("ENOTDIR", Category.FS),
        ("EAI_AGAIN", Category.DNS),
        ("ENETUNREACH", Category.DNS),
        ("EPIPE", Category.STREAM),
        ("ERR_STREAM_PREMATURE_CLOSE", Category.STREAM),
        ("CERT_HAS_EXPIRED", Category.TLS),
        ("UNABLE_TO_VERIFY_LEAF_SIGNATURE", Category.TLS),
    ])
    def test_code_patterns(self, code, expected):
        assert classify(CodedError("boom", code=code)) == expected

    def test_econnreset_hits_database_first(self):
        """ECONN prefix wins over the network rule"""
        assert classify({"code": "ECONNRESET"}) == Category.DATABASE

    def test_code_match_is_case_insensitive(self):
        assert classify({"code": "enoent"}) == Category.FS

    def test_missing_code_falls_through(self):
        assert classify({"message": "plain failure"}) == Category.DEFAULT


class TestPythonErrorCodes:
    """Codes derived from OSError and friends"""

    def test_file_not_found(self, tmp_path):
        try:
            open(tmp_path / "no-such-file.txt")
        except OSError as err:
            assert classify(err) == Category.FS

    def test_connection_refused(self):
        assert classify(ConnectionRefusedError(errno.ECONNREFUSED, "Connection refused")) == Category.DATABASE

    def test_permission_error(self):
        assert classify(PermissionError(errno.EACCES, "Permission denied")) == Category.AUTH

    def test_gaierror(self):
        import socket
        err = socket.gaierror(socket.EAI_AGAIN, "Temporary failure in name resolution")
        assert classify(err) == Category.DNS

    def test_unknown_host(self):
        import socket
        err = socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        assert classify(err) == Category.NETWORK
        assert explain(err) == "Network connection failed. Check your internet connection."

    def test_code_from_cause(self):
        try:
            try:
                raise BrokenPipeError(errno.EPIPE, "Broken pipe")
            except OSError as inner:
                raise RuntimeError("write failed") from inner
        except RuntimeError as err:
            assert classify(err) == Category.STREAM


class TestMessageRule:

    def test_ejson_message(self):
        assert classify(ValueError("EJSON: unexpected token")) == Category.SYNTAX

    def test_eparse_message_case_insensitive(self):
        assert classify({"message": "eparse failure at line 3"}) == Category.SYNTAX

    def test_syntax_error_beats_everything(self):
        err = {"name": "SyntaxError", "code": "ECONNREFUSED", "response": {"status": 500}}
        assert classify(err) == Category.SYNTAX


class TestDefaultCategory:

    def test_plain_exception(self):
        assert classify(Exception("Something went wrong")) == Category.DEFAULT

    def test_empty_mapping(self):
        assert classify({}) == Category.DEFAULT

    def test_non_exception_value(self):
        assert classify("a thrown string") == Category.DEFAULT
        assert classify(None) == Category.DEFAULT


class TestHeaders:

    def test_every_category_has_header(self):
        for category in Category:
            assert category in CATEGORY_HEADERS

    def test_validation_header(self):
        assert header_for(Category.VALIDATION) == "🛡️ VALIDATION FAILED"

    def test_emoji_stripped(self):
        assert header_for(Category.VALIDATION, emoji=False) == "VALIDATION FAILED"
        assert header_for(Category.DATABASE, emoji=False) == "DATABASE MELTDOWN"


class TestSelfReferencingErrors:

    def test_mapping_containing_itself(self):
        data = {"name": "AggregateError", "errors": []}
        data["errors"].append(data)
        assert classify(data) == Category.AGGREGATE

    def test_exception_containing_itself(self):
        err = NamedError("loop", name="AggregateError")
        err.errors = [err]
        assert classify(err) == Category.AGGREGATE
