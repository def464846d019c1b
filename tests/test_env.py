import pytest
from hashset import ENV_HASHSET_SORTED_STR, env, new


def test_sorted_str_off_by_default():
	assert env.sorted_str is False


@pytest.mark.parametrize(
	"value,expected",
	[
		("1", True),
		("true", True),
		("True", True),
		("yes", True),
		("0", False),
		("false", False),
		("", False),
	],
)
def test_sorted_str_flag_values(
	monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
):
	monkeypatch.setenv(ENV_HASHSET_SORTED_STR, value)
	assert env.sorted_str is expected


def test_sorted_str_renders_in_text_order(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv(ENV_HASHSET_SORTED_STR, "1")
	s = new(["pear", "apple", "fig"])
	assert str(s) == "{apple,fig,pear}"
	assert str(new()) == "{}"


def test_sorted_str_handles_mixed_element_types(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv(ENV_HASHSET_SORTED_STR, "1")
	assert str(new([2, "b", 1, "a"])) == "{1,2,a,b}"


def test_sorted_str_setter(monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv(ENV_HASHSET_SORTED_STR, "0")
	env.sorted_str = True
	assert env.sorted_str is True
	assert str(new([3, 1, 2])) == "{1,2,3}"
	env.sorted_str = False
	assert env.sorted_str is False
