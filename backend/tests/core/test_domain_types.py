"""Domain Types — verifies rich type definitions and enum values.

Tests:
    - NewType wrappers exist and are callable
    - LogFormat serializes to string and parses from settings values
"""

from app.core.domain_types import DescriptorId, Keyword, LogFormat


def test_identity_and_value_types_wrap_str():
    assert DescriptorId("linked-list") == "linked-list"
    assert Keyword("lista") == "lista"


def test_log_format_members():
    assert set(LogFormat) == {LogFormat.JSON, LogFormat.TEXT}
    assert LogFormat("json") is LogFormat.JSON
    assert LogFormat.TEXT.value == "text"
