import pytest

from task_manager.api.dependencies import extract_bearer_token
from task_manager.core.errors import AccessDeniedError


def test_extracts_bearer_token():
    assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"


def test_scheme_is_case_insensitive():
    assert extract_bearer_token("bearer abc") == "abc"


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer ", "Token abc", "abc"])
def test_malformed_headers_are_denied(header):
    with pytest.raises(AccessDeniedError):
        extract_bearer_token(header)
