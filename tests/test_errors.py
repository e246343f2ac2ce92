import pytest

from keyhouse.errors import ErrorCode


@pytest.mark.parametrize(
    "primitive, expected",
    [
        (0, ErrorCode.OK),
        (1, ErrorCode.UNAUTHORIZED),
        (2, ErrorCode.UNKNOWN_ALIAS),
        (3, ErrorCode.UNKNOWN_KEY),
        (4, ErrorCode.BAD_PAYLOAD),
        (5, ErrorCode.FORBIDDEN),
    ],
)
def test_from_primitive_known(primitive, expected):
    assert ErrorCode.from_primitive(primitive) is expected


@pytest.mark.parametrize("primitive", [6, 42, 255, 1000, -1])
def test_from_primitive_unknown(primitive):
    assert ErrorCode.from_primitive(primitive) is ErrorCode.UNKNOWN


@pytest.mark.parametrize(
    "code, label",
    [
        (ErrorCode.OK, "Ok"),
        (ErrorCode.UNAUTHORIZED, "Unauthorized"),
        (ErrorCode.UNKNOWN_ALIAS, "UnknownAlias"),
        (ErrorCode.UNKNOWN_KEY, "UnknownKey"),
        (ErrorCode.BAD_PAYLOAD, "BadPayload"),
        (ErrorCode.FORBIDDEN, "Forbidden"),
        (ErrorCode.UNKNOWN, "Unknown"),
    ],
)
def test_string_labels(code, label):
    assert str(code) == label


def test_round_trip_through_int():
    for code in ErrorCode:
        assert ErrorCode.from_primitive(int(code)) is code