from pageloader.models import DO_NOT_REPLACE, DoNotReplace, Replace, mutation_value_or


def test_replace_exposes_value():
    mutation = Replace(value=True)

    assert mutation.is_replace
    assert mutation.value is True


def test_do_not_replace_has_no_value():
    assert not DO_NOT_REPLACE.is_replace
    assert DO_NOT_REPLACE.value is None
    assert DoNotReplace() == DO_NOT_REPLACE


def test_value_or_default():
    assert mutation_value_or(Replace(value="cursor-2"), "cursor-1") == "cursor-2"
    assert mutation_value_or(DO_NOT_REPLACE, "cursor-1") == "cursor-1"


def test_replace_with_none_is_a_replacement():
    assert mutation_value_or(Replace(value=None), "cursor-1") is None
