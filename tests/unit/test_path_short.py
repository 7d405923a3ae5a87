import pytest

from hdpath import AccountHDPath
from hdpath import CustomHDPath
from hdpath import Purpose
from hdpath import ShortHDPath
from hdpath.errors import InvalidFieldError
from hdpath.errors import InvalidLengthError
from hdpath.errors import InvalidStructureError


def test_to_string_short():
    assert ShortHDPath(Purpose.PUBKEY, 60, 0, 0).to_string() == "m/44'/60'/0'/0"
    assert ShortHDPath(Purpose.PUBKEY, 61, 0, 0).to_string() == "m/44'/61'/0'/0"
    assert ShortHDPath(Purpose.custom(101), 61, 0, 0).to_string() == "m/101'/61'/0'/0"


@pytest.mark.parametrize(
    "path",
    (
        "m/44'/0'/0'/0",
        "m/44'/60'/0'/1",
        "m/44'/60'/160720'/0",
        "m/44'/60'/160720'/101",
    ),
)
def test_to_string_short_all(path):
    assert ShortHDPath.parse(path).to_string() == path


def test_fields():
    path = ShortHDPath.parse("m/44'/60'/2'/101")
    assert path.purpose == Purpose.PUBKEY
    assert path.coin_type == 60
    assert path.account == 2
    assert path.index == 101
    assert len(path) == 4
    assert path.get(4) is None


@pytest.mark.parametrize("path", ("m/44/60'/0'/0", "m/44'/60'/0'/0'", "m/44'/60/0'/0"))
def test_not_hardened(path):
    with pytest.raises(InvalidStructureError):
        ShortHDPath.parse(path)


@pytest.mark.parametrize("path,length", (("m/44'/60'/0'", 3), ("m/44'/60'/0'/0/0", 5)))
def test_invalid_length(path, length):
    with pytest.raises(InvalidLengthError) as err:
        ShortHDPath.parse(path)
    assert err.value.length == length


def test_invalid_field():
    with pytest.raises(InvalidFieldError) as err:
        ShortHDPath(Purpose.PUBKEY, 60, 0, 0x80000000)
    assert (err.value.field, err.value.value) == ("index", 0x80000000)


def test_bytes_round_trip():
    path = ShortHDPath.parse("m/44'/60'/0'/7")
    assert path.to_bytes().hex() == "04" "8000002c" "8000003c" "80000000" "00000007"
    assert ShortHDPath.from_bytes(path.to_bytes()) == path
    with pytest.raises(InvalidLengthError):
        ShortHDPath.from_bytes(CustomHDPath.parse("m/44'/60'/0'/7/0").to_bytes())


def test_order():
    assert ShortHDPath.parse("m/44'/60'/0'/7") < ShortHDPath.parse("m/44'/60'/0'/8")
    assert ShortHDPath.parse("m/44'/60'/1'/0") > ShortHDPath.parse("m/44'/60'/0'/8")


def test_parent_and_account():
    path = ShortHDPath.parse("m/44'/60'/0'/7")
    assert path.parent() == CustomHDPath.parse("m/44'/60'/0'")
    assert path.account_path() == AccountHDPath(Purpose.PUBKEY, 60, 0)
    assert AccountHDPath.from_path(path) == path.account_path()
